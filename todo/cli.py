#!/usr/bin/env python3
"""
TODO - CLI Interface
====================
Command-line tool for a personal task list.

Usage:
    todo add "buy milk"
    todo add
    todo list
    todo remove
    todo complete 2 3
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from . import commands
from .config import get_settings
from .errors import TodoError
from .manager import TaskListManager
from .prompts import RichSelectionProvider, RichTextProvider, SelectionProvider, TextProvider
from .schema import TASK_COLLECTION_ADAPTER
from .store import TaskStore

logger = logging.getLogger(__name__)

FILE_HELP = "Task file (default: $TODO_FILE or todo.json)"


def _log_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def _setup_logging(level_name: str) -> None:
    level = _log_level(level_name)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="Todo - personal task list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  todo add "buy milk"     Add a task
  todo add                Add a task, asking for its description
  todo list               Show all tasks
  todo list --json        Show all tasks as JSON
  todo remove             Pick tasks to remove
  todo remove 4           Remove task 4
  todo complete           Pick tasks to mark as completed
  todo complete 2 3       Mark tasks 2 and 3 as completed
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--file", help=FILE_HELP)

    # --file is also accepted after the subcommand
    file_parent = argparse.ArgumentParser(add_help=False)
    file_parent.add_argument("--file", default=argparse.SUPPRESS, help=FILE_HELP)

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", parents=[file_parent], help="Add a task")
    add_parser.add_argument("description", nargs="?", help="Task description (asked for if omitted)")

    # LIST command
    list_parser = subparsers.add_parser("list", parents=[file_parent], help="List tasks")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # REMOVE command
    remove_parser = subparsers.add_parser("remove", parents=[file_parent], help="Remove tasks")
    remove_parser.add_argument("ids", nargs="*", type=int, help="Task ids (picked interactively if omitted)")

    # COMPLETE command
    complete_parser = subparsers.add_parser("complete", parents=[file_parent], help="Mark tasks as completed")
    complete_parser.add_argument("ids", nargs="*", type=int, help="Task ids (picked interactively if omitted)")

    return parser


def main(
    argv: Optional[List[str]] = None,
    *,
    selector: Optional[SelectionProvider] = None,
    prompter: Optional[TextProvider] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = get_settings()
    _setup_logging("DEBUG" if args.verbose else settings.log_level)

    store = TaskStore(args.file or settings.todo_file)
    manager = TaskListManager()
    selector = selector or RichSelectionProvider()
    prompter = prompter or RichTextProvider()
    ids = set(getattr(args, "ids", None) or []) or None

    try:
        if args.command == "add":
            message = commands.add(store, manager, args.description, prompter)

        elif args.command == "list":
            if args.json:
                tasks = manager.list_tasks(store.load())
                message = TASK_COLLECTION_ADAPTER.dump_json(tasks, indent=2).decode("utf-8")
            else:
                message = commands.list_(store, manager)

        elif args.command == "remove":
            message = commands.remove(store, manager, selector, ids)

        elif args.command == "complete":
            message = commands.complete(store, manager, selector, ids)

        else:
            parser.print_help()
            return 1

    except TodoError as e:
        logger.error(f"{args.command} failed: {e}", exc_info=logger.isEnabledFor(logging.DEBUG))
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
