"""Bounds-checked lookup of an element by index."""
from __future__ import annotations

from typing import Sequence

from .errors import LookupOutOfRange, MalformedInput
from .moves import parse_non_negative

DEFAULT_VALUES = (45, 15, 24, 89, 66)


def parse_index(text: str) -> int:
    raw = text.strip()
    index = parse_non_negative(raw)
    if index is None:
        raise MalformedInput(f"Invalid index: {raw!r}. Please enter a non-negative integer.")
    return index


def lookup(values: Sequence[int], index: int) -> int:
    if not 0 <= index < len(values):
        raise LookupOutOfRange(index, len(values))
    return values[index]
