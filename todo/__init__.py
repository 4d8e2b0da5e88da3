"""
TODO - Personal Task List
=========================

Add, list, remove and complete short text tasks, kept in a JSON file
between runs.

Usage:
    from todo import TaskStore, TaskListManager

    store = TaskStore("todo.json")
    manager = TaskListManager()

    tasks = manager.add_task(store.load(), "buy milk")
    store.save(tasks)
"""

__version__ = "1.0.0"

from .errors import (
    TodoError,
    IOFailure,
    CorruptState,
    InputError,
    InputCancelled,
    SelectionContractError,
)
from .schema import Task, TaskCollection, TaskOption
from .store import TaskStore
from .manager import TaskListManager
from .prompts import SelectionProvider, TextProvider

__all__ = [
    "TaskStore",
    "TaskListManager",
    "Task",
    "TaskCollection",
    "TaskOption",
    "SelectionProvider",
    "TextProvider",
    "TodoError",
    "IOFailure",
    "CorruptState",
    "InputError",
    "InputCancelled",
    "SelectionContractError",
]
