from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import ExercisesError, InputClosed
from .game import play_game
from .game_basics import Board, Player, current_player, evaluate, is_board_string, is_valid_state
from .lookup import DEFAULT_VALUES, lookup, parse_index
from .paths import todo_file
from .todo import TaskStore, format_task


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="exercises", description="Console exercises: tic-tac-toe, to-do list, lookup")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and configuration info and exit",
    )

    # game
    p_play = sub.add_parser("play", help="Play two-player tic-tac-toe on the console")
    p_play.add_argument(
        "--first", choices=[pl.value for pl in Player], default="X", help="Player who moves first (default: X)"
    )
    p_play.add_argument(
        "--no-clear", dest="clear", action="store_false", help="Do not clear the screen between turns"
    )

    # board inspection
    p_chk = sub.add_parser(
        "check",
        help="Evaluate a board (9 digits, 0=empty,1=X,2=O)",
    )
    p_chk.add_argument("--board", required=True, help="Board string, e.g., 120010002")
    p_chk.add_argument(
        "--first", choices=[pl.value for pl in Player], default="X", help="Player who moved first (default: X)"
    )
    p_chk.add_argument("--show", action="store_true", help="Also print the rendered board")

    # to-do list
    p_todo = sub.add_parser("todo", help="File-backed to-do list")
    p_todo.set_defaults(todo_help=p_todo.print_help)
    p_todo.add_argument(
        "--file", type=Path, default=None, help="Task file (default: $EXERCISES_TODO_FILE or ./tasks.json)"
    )
    g = p_todo.add_subparsers(dest="subcmd")
    p_add = g.add_parser("add", help="Add a new task")
    p_add.add_argument("description", help="Task description")
    g.add_parser("list", help="List all tasks")
    p_done = g.add_parser("complete", help="Mark a task as complete")
    p_done.add_argument("id", type=int, help="Task id")
    p_rm = g.add_parser("remove", help="Remove a task")
    p_rm.add_argument("id", type=int, help="Task id")

    # lookup
    p_lu = sub.add_parser("lookup", help="Look up an element of a fixed array by index")
    p_lu.add_argument("--index", help="Index to look up (omit to read it from stdin)")

    return p


def _print_info() -> None:
    import platform

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    print(f"exercises={_version()}")
    print(f"todo_file={todo_file()}")


def _version() -> str:
    try:
        from importlib.metadata import version as _ver

        return _ver("console-exercises")
    except Exception:
        return "unknown"


def _run_play(ns: argparse.Namespace) -> int:
    try:
        play_game(sys.stdin, sys.stdout, first=Player(ns.first), clear_screen=ns.clear)
    except InputClosed as e:
        print()
        logging.error("%s", e)
        return 1
    return 0


def _run_check(ns: argparse.Namespace) -> int:
    raw = ns.board.strip()
    if not is_board_string(raw):
        logging.error("Invalid board string. Must be 9 chars of 0/1/2.")
        return 2
    board = Board.from_string(raw)
    first = Player(ns.first)
    if not is_valid_state(board.cells(), first):
        logging.error("Board is not a valid reachable state.")
        return 2
    state = evaluate(board)
    if ns.show:
        print(board.render())
    if state.is_over:
        logging.info("state=%s", state)
    else:
        logging.info("state=%s to_move=%s", state, current_player(board.cells(), first))
    return 0


def _run_todo(ns: argparse.Namespace) -> int:
    store = TaskStore(todo_file(ns.file))
    logging.debug("todo file: %s", store.path)
    if ns.subcmd == "add":
        task = store.add(ns.description)
        print(f"Added task with ID: {task.id}")
    elif ns.subcmd == "list":
        tasks = store.list()
        if not tasks:
            print("No tasks yet!")
        for task in tasks:
            print(format_task(task))
    elif ns.subcmd == "complete":
        store.complete(ns.id)
        print(f"Task {ns.id} marked as complete.")
    elif ns.subcmd == "remove":
        store.remove(ns.id)
        print(f"Task {ns.id} removed.")
    else:
        ns.todo_help()
    return 0


def _run_lookup(ns: argparse.Namespace) -> int:
    if ns.index is None:
        print("enter index")
        line = sys.stdin.readline()
        if not line:
            raise InputClosed("Input ended before an index was entered.")
    else:
        line = ns.index
    index = parse_index(line)
    print(f"the element at {index} index is {lookup(DEFAULT_VALUES, index)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        print(_version())
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    try:
        if ns.cmd == "play":
            return _run_play(ns)
        if ns.cmd == "check":
            return _run_check(ns)
        if ns.cmd == "todo":
            return _run_todo(ns)
        if ns.cmd == "lookup":
            return _run_lookup(ns)
    except ExercisesError as e:
        logging.error("%s", e)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
