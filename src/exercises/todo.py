"""
File-backed to-do list.

Tasks live in a single JSON file as a pretty-printed array of
``{"id": int, "description": str, "completed": bool}`` objects. Every
mutation loads the whole list, changes it, and rewrites the file in place.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List

from .errors import StoreCorrupt, StoreUnavailable, TaskNotFound


@dataclass
class Task:
    id: int
    description: str
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Task":
        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise StoreCorrupt(f"Malformed task entry: {raw!r}")
        try:
            return cls(
                id=int(raw["id"]),
                description=str(raw["description"]),
                completed=completed,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise StoreCorrupt(f"Malformed task entry: {raw!r}") from e


def format_task(task: Task) -> str:
    status = "[x]" if task.completed else "[ ]"
    return f"{status} {task.id}: {task.description}"


class TaskStore:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> List[Task]:
        """Read all tasks; a missing or empty file is an empty list."""
        if not self.path.exists():
            return []
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise StoreCorrupt(f"{self.path} is not UTF-8 text: {e}") from e
        except OSError as e:
            raise StoreUnavailable(f"Cannot read {self.path}: {e}") from e
        if not text.strip():
            return []
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise StoreCorrupt(f"{self.path} is not valid JSON: {e}") from e
        if not isinstance(raw, list):
            raise StoreCorrupt(f"{self.path} must hold a JSON array of tasks")
        tasks: List[Task] = []
        for item in raw:
            if not isinstance(item, dict):
                raise StoreCorrupt(f"Malformed task entry: {item!r}")
            tasks.append(Task.from_dict(item))
        logging.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: List[Task]) -> None:
        # truncate-and-rewrite; no temp file or partial-write recovery
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump([t.to_dict() for t in tasks], f, indent=2)
                f.write("\n")
        except OSError as e:
            raise StoreUnavailable(f"Cannot write {self.path}: {e}") from e
        logging.debug("Wrote %d tasks to %s", len(tasks), self.path)

    def list(self) -> List[Task]:
        return self.load()

    def add(self, description: str) -> Task:
        tasks = self.load()
        new_id = tasks[-1].id + 1 if tasks else 1
        task = Task(id=new_id, description=description)
        tasks.append(task)
        self.save(tasks)
        return task

    def complete(self, task_id: int) -> Task:
        tasks = self.load()
        for task in tasks:
            if task.id == task_id:
                task.completed = True
                self.save(tasks)
                return task
        raise TaskNotFound(task_id)

    def remove(self, task_id: int) -> Task:
        tasks = self.load()
        for i, task in enumerate(tasks):
            if task.id == task_id:
                del tasks[i]
                self.save(tasks)
                return task
        raise TaskNotFound(task_id)
