"""
Game basics: board representation, serialization, rules, winner/draw checks, validity.

- Cells are stored row-major in a list of 9 values: 0=empty, 1=X, 2=O.
- A board string is those 9 digits, e.g. "120000000".
- X moves first by default; valid states have equal counts or one extra mark
  for whoever moved first.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple

from .errors import CellOccupied

SIZE = 3

# rows, then columns, then diagonals
WIN_PATTERNS = [
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6],
]

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"


class Cell(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    def __str__(self) -> str:
        return " " if self is Cell.EMPTY else self.name


class Player(Enum):
    X = "X"
    O = "O"

    @property
    def mark(self) -> Cell:
        return Cell.X if self is Player.X else Cell.O

    @property
    def other(self) -> "Player":
        return Player.O if self is Player.X else Player.X

    @classmethod
    def from_mark(cls, mark: int) -> "Player":
        if mark == Cell.X:
            return cls.X
        if mark == Cell.O:
            return cls.O
        raise ValueError(f"Not a player mark: {mark!r}")

    def __str__(self) -> str:
        return self.value


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class GameState:
    status: Status
    winner: Optional[Player] = None

    @classmethod
    def win(cls, player: Player) -> "GameState":
        return cls(Status.WON, player)

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def __str__(self) -> str:
        if self.status is Status.WON:
            return f"win:{self.winner}"
        return self.status.value


IN_PROGRESS = GameState(Status.IN_PROGRESS)
DRAW = GameState(Status.DRAWN)


def serialize_board(board: Sequence[int]) -> str:
    return ''.join(str(int(cell)) for cell in board)


def deserialize_board(board_str: str) -> List[int]:
    return [int(cell) for cell in board_str]


def is_board_string(raw: str) -> bool:
    return len(raw) == SIZE * SIZE and all(c in "012" for c in raw)


def get_winner(board: Sequence[int]) -> int:
    for pattern in WIN_PATTERNS:
        a, b, c = pattern
        v = board[a]
        if v != 0 and v == board[b] and v == board[c]:
            return v
    return 0


def is_draw(board: Sequence[int]) -> bool:
    return 0 not in board and get_winner(board) == 0


def get_piece_counts(board: Sequence[int]) -> Tuple[int, int]:
    return list(board).count(1), list(board).count(2)


def is_valid_state(board: Sequence[int], first: Player = Player.X) -> bool:
    """True when the board can arise from strictly alternating play."""
    firsts, seconds = get_piece_counts(board)
    if first is Player.O:
        firsts, seconds = seconds, firsts
    if not (firsts == seconds or firsts == seconds + 1):
        return False

    def count_wins(p: int) -> int:
        return sum(1 for pat in WIN_PATTERNS if all(board[i] == p for i in pat))

    x_wins, o_wins = count_wins(1), count_wins(2)
    if x_wins and o_wins:
        return False
    w = get_winner(board)
    if w and Player.from_mark(w) is first and firsts != seconds + 1:
        return False
    if w and Player.from_mark(w) is not first and firsts != seconds:
        return False
    return True


def current_player(board: Sequence[int], first: Player = Player.X) -> Player:
    firsts, seconds = get_piece_counts(board)
    if first is Player.O:
        firsts, seconds = seconds, firsts
    return first if firsts == seconds else first.other


class Board:
    """3x3 grid of cells addressed by (row, col)."""

    def __init__(self, cells: Optional[Sequence[int]] = None) -> None:
        if cells is None:
            self._cells = [Cell.EMPTY] * (SIZE * SIZE)
        else:
            if len(cells) != SIZE * SIZE:
                raise ValueError(f"A board has {SIZE * SIZE} cells, got {len(cells)}")
            self._cells = [Cell(c) for c in cells]

    @classmethod
    def from_string(cls, board_str: str) -> "Board":
        if not is_board_string(board_str):
            raise ValueError("Invalid board string. Must be 9 chars of 0/1/2.")
        return cls(deserialize_board(board_str))

    def __str__(self) -> str:
        return serialize_board(self._cells)

    def __repr__(self) -> str:
        return f"Board({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def cells(self) -> List[Cell]:
        return self._cells[:]

    def copy(self) -> "Board":
        return Board(self._cells)

    def cell(self, row: int, col: int) -> Cell:
        return self._cells[row * SIZE + col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cell(row, col) is Cell.EMPTY

    def is_full(self) -> bool:
        return Cell.EMPTY not in self._cells

    def counts(self) -> Tuple[int, int]:
        return get_piece_counts(self._cells)

    def place(self, row: int, col: int, player: Player) -> None:
        """Mark an empty cell for ``player``.

        Coordinates must already be within the grid. Raises CellOccupied and
        leaves the board untouched if the cell holds a mark.
        """
        idx = row * SIZE + col
        if self._cells[idx] is not Cell.EMPTY:
            raise CellOccupied()
        self._cells[idx] = player.mark

    def render(self) -> str:
        divider = "  " + "-" * (4 * SIZE - 1)
        lines = ["", "   " + "   ".join(str(c) for c in range(SIZE)), divider]
        for r in range(SIZE):
            row = " | ".join(str(self.cell(r, c)) for c in range(SIZE))
            lines.append(f"{r}| {row} |")
            lines.append(divider)
        lines.append("")
        return "\n".join(lines)


def evaluate(board: Board) -> GameState:
    """Classify a board as a win, a draw, or still in progress.

    Rows are checked first, then columns, then the two diagonals. Under
    strict alternation only one player can own a completed line, so the
    order never changes the result.
    """
    cells = board.cells()
    w = get_winner(cells)
    if w:
        return GameState.win(Player.from_mark(w))
    if is_draw(cells):
        return DRAW
    return IN_PROGRESS
