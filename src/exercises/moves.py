"""
Reading moves from the console.

A move is one line holding a row and a column, e.g. ``1 2``. Bad lines are
reported and asked for again; only the end of input stops the loop.
"""
from __future__ import annotations

import logging
from typing import Optional, TextIO, Tuple

from .errors import CellOccupied, InputClosed, MalformedInput, OutOfRange
from .game_basics import SIZE, Board, Player

WRONG_TOKEN_COUNT = "Invalid input. Please enter exactly two numbers (row and column)."


def parse_non_negative(token: str) -> Optional[int]:
    """Parse decimal digits with at most one leading '+'; None if that fails."""
    digits = token[1:] if token.startswith("+") else token
    if not digits.isdecimal():
        return None
    return int(digits)


def parse_move(line: str) -> Tuple[int, int]:
    parts = line.split()
    if len(parts) != 2:
        raise MalformedInput(WRONG_TOKEN_COUNT)
    row, col = parse_non_negative(parts[0]), parse_non_negative(parts[1])
    if row is None or col is None:
        raise MalformedInput()
    if row >= SIZE or col >= SIZE:
        raise OutOfRange()
    return row, col


def read_move(board: Board, player: Player, stdin: TextIO, stdout: TextIO) -> Tuple[int, int]:
    """Prompt ``player`` until they name an empty cell on ``board``."""
    while True:
        stdout.write(f"Player {player}, enter your move (row col): ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            raise InputClosed("Input ended before a move was entered.")
        try:
            row, col = parse_move(line)
            if not board.is_empty(row, col):
                raise CellOccupied()
        except (MalformedInput, OutOfRange, CellOccupied) as e:
            logging.debug("rejected move %r from %s: %s", line.strip(), player, type(e).__name__)
            stdout.write(f"{e}\n")
            continue
        return row, col
