"""Turn loop for a two-player console game of tic-tac-toe."""
from __future__ import annotations

import logging
from typing import TextIO

from .game_basics import CLEAR_SCREEN, Board, GameState, Player, Status, evaluate
from .moves import read_move


def play_game(
    stdin: TextIO,
    stdout: TextIO,
    first: Player = Player.X,
    clear_screen: bool = True,
) -> GameState:
    """Run one game to completion and return the final state.

    InputClosed from the move reader propagates; the board is dropped.
    """
    board = Board()
    player = first

    def show(header: str) -> None:
        if clear_screen:
            stdout.write(CLEAR_SCREEN)
        stdout.write(f"{header}\n{board.render()}\n")
        stdout.flush()

    stdout.write("Welcome to Tic-Tac-Toe!\n")
    while True:
        show(f"Player {player}'s turn.")
        row, col = read_move(board, player, stdin, stdout)
        board.place(row, col, player)
        logging.debug("player=%s row=%d col=%d board=%s", player, row, col, board)

        state = evaluate(board)
        if state.status is Status.WON:
            show(f"Congratulations, Player {state.winner} wins!")
            logging.info("game over: %s wins (%s)", state.winner, board)
            return state
        if state.status is Status.DRAWN:
            show("The game is a draw!")
            logging.info("game over: draw (%s)", board)
            return state
        player = player.other
