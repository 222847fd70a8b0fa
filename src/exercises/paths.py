"""Centralized path helpers for the to-do file.

Environment-first, falling back to the current working directory so the
CLI behaves the same whether installed or run from a checkout.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

TODO_FILENAME = "tasks.json"


def data_dir() -> Path:
    """Directory holding exercise data.

    Order: env var EXERCISES_DATA_DIR -> CWD.
    """
    env = os.getenv("EXERCISES_DATA_DIR")
    if env:
        return Path(env)
    return Path.cwd()


def todo_file(override: Optional[Path] = None) -> Path:
    """Location of the to-do list.

    Order: explicit override (``--file``) -> EXERCISES_TODO_FILE -> data_dir()/tasks.json.
    """
    if override is not None:
        return override
    p = os.getenv("EXERCISES_TODO_FILE")
    return Path(p) if p else data_dir() / TODO_FILENAME
