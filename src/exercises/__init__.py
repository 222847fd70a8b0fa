"""exercises package.

Small console programs: a two-player tic-tac-toe game, a file-backed to-do
list, and an array-index lookup, all behind one CLI.

Convenience imports are exposed for common workflows.
"""

from .game import play_game
from .game_basics import Board, Cell, GameState, Player, Status, evaluate
from .moves import parse_move, read_move
from .todo import Task, TaskStore

__all__ = [
    "Board",
    "Cell",
    "GameState",
    "Player",
    "Status",
    "evaluate",
    "parse_move",
    "read_move",
    "play_game",
    "Task",
    "TaskStore",
]
