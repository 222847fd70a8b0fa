import json
from pathlib import Path

import pytest

from exercises.errors import StoreCorrupt, StoreUnavailable, TaskNotFound
from exercises.todo import Task, TaskStore, format_task


@pytest.fixture
def store(tmp_path: Path) -> TaskStore:
    return TaskStore(tmp_path / "tasks.json")


def test_missing_and_empty_file_mean_no_tasks(store: TaskStore):
    assert store.list() == []
    store.path.write_text("")
    assert store.list() == []


def test_add_assigns_increasing_ids(store: TaskStore):
    assert store.add("buy milk").id == 1
    assert store.add("walk dog").id == 2
    assert [t.description for t in store.list()] == ["buy milk", "walk dog"]


def test_id_follows_last_task_after_removal(store: TaskStore):
    store.add("a")
    store.add("b")
    store.add("c")
    store.remove(3)
    assert store.add("d").id == 3
    store.remove(1)
    assert store.add("e").id == 4


def test_complete_and_remove(store: TaskStore):
    store.add("a")
    store.add("b")
    done = store.complete(2)
    assert done.completed
    assert [t.completed for t in store.list()] == [False, True]
    removed = store.remove(1)
    assert removed.description == "a"
    assert [t.id for t in store.list()] == [2]


def test_missing_id_raises_and_leaves_file(store: TaskStore):
    store.add("a")
    before = store.path.read_text()
    with pytest.raises(TaskNotFound) as exc:
        store.complete(42)
    assert str(exc.value) == "Task with ID 42 not found."
    with pytest.raises(TaskNotFound):
        store.remove(42)
    assert store.path.read_text() == before


def test_file_format_is_pretty_json_array(store: TaskStore):
    store.add("write tests")
    text = store.path.read_text()
    assert text.startswith("[\n  {")
    assert json.loads(text) == [{"id": 1, "description": "write tests", "completed": False}]


def test_rewrite_truncates_old_content(store: TaskStore):
    store.add("a long description that makes the file bigger")
    store.remove(1)
    assert json.loads(store.path.read_text()) == []


def test_reads_existing_file(store: TaskStore):
    store.path.write_text(json.dumps([{"id": 7, "description": "x", "completed": True}]))
    assert store.list() == [Task(7, "x", True)]
    assert store.add("y").id == 8


@pytest.mark.parametrize(
    "payload",
    [
        b"{not json",
        b'{"id": 1}',
        b'[{"id": "x", "description": "d"}]',
        b"[1, 2]",
        b'[{"id": 1, "description": "d", "completed": "false"}]',
        b"\xff\xfe[",
    ],
)
def test_corrupt_file(store: TaskStore, payload: bytes):
    store.path.write_bytes(payload)
    with pytest.raises(StoreCorrupt):
        store.list()


def test_format_task():
    assert format_task(Task(1, "buy milk")) == "[ ] 1: buy milk"
    assert format_task(Task(2, "done", True)) == "[x] 2: done"


def test_unreadable_path(tmp_path: Path):
    # a directory in place of the task file
    store = TaskStore(tmp_path)
    with pytest.raises(StoreUnavailable):
        store.list()
    with pytest.raises(StoreUnavailable):
        store.save([])
