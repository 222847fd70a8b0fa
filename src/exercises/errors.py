"""Exception hierarchy shared by the console exercises."""
from __future__ import annotations


class ExercisesError(Exception):
    """Base class for every error the CLI reports to the user."""


class MoveError(ExercisesError, ValueError):
    """A move that the input handler rejects and asks for again."""

    message = "Invalid move."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MalformedInput(MoveError):
    message = "Invalid input. Please enter two numbers separated by a space."


class OutOfRange(MoveError):
    message = "Invalid input. Row and column must be between 0 and 2."


class CellOccupied(MoveError):
    message = "This cell is already taken! Try again."


class InputClosed(ExercisesError, EOFError):
    """Console input ended while a value was still expected."""


class TaskNotFound(ExercisesError, KeyError):
    def __init__(self, task_id: int) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task with ID {self.task_id} not found."


class StoreCorrupt(ExercisesError, ValueError):
    """The to-do file does not hold a JSON list of tasks."""


class StoreUnavailable(ExercisesError, OSError):
    """The to-do file cannot be opened for reading or writing."""


class LookupOutOfRange(ExercisesError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index {index} is out of range for {size} elements.")
        self.index = index
        self.size = size
