"""Command flows: load the list, apply one change, save it.

Each function returns the message to show the user. Nothing is saved
unless the in-memory change succeeded, so a cancelled prompt or a bad
selection leaves the stored list untouched.
"""

import logging
from typing import AbstractSet, List, Optional, Sequence, Set

from .errors import InputError, SelectionContractError
from .manager import TaskListManager
from .prompts import SelectionProvider, TextProvider
from .schema import Task, TaskOption
from .store import TaskStore

logger = logging.getLogger(__name__)

ADD_PROMPT = "What task would you like to add?"
REMOVE_PROMPT = "Select tasks to remove:"
COMPLETE_PROMPT = "Select tasks to mark as completed:"


def _select_ids(
    selector: SelectionProvider, message: str, options: Sequence[TaskOption]
) -> Set[int]:
    chosen = selector.offer(message, options)
    offered = set(options)
    stray = [option for option in chosen if option not in offered]
    if stray:
        raise SelectionContractError(
            f"Selection returned options that were not offered: {[o.label for o in stray]}"
        )
    return {option.task_id for option in chosen}


def format_task(task: Task) -> str:
    status = "✅" if task.completed else "❌"
    return f"[{task.id}] {status} {task.description}"


def add(
    store: TaskStore,
    manager: TaskListManager,
    description: Optional[str],
    text_provider: TextProvider,
) -> str:
    if description is None:
        description = text_provider.prompt(ADD_PROMPT)
    if not description.strip():
        raise InputError("Task description cannot be empty")

    tasks = manager.add_task(store.load(), description)
    store.save(tasks)

    task = tasks[-1]
    logger.info(f"Added task {task.id}")
    return f"✅ Task added! [{task.id}] {task.description}"


def list_(store: TaskStore, manager: TaskListManager) -> str:
    tasks = manager.list_tasks(store.load())
    if not tasks:
        return "📭 No tasks found."
    return "\n".join(format_task(task) for task in tasks)


def remove(
    store: TaskStore,
    manager: TaskListManager,
    selector: SelectionProvider,
    ids: Optional[AbstractSet[int]] = None,
) -> str:
    tasks = store.load()
    if not tasks:
        return "📭 No tasks to remove."

    if ids is None:
        ids = _select_ids(selector, REMOVE_PROMPT, manager.task_options(tasks))

    remaining = manager.remove_tasks(tasks, ids)
    store.save(remaining)

    removed = len(tasks) - len(remaining)
    logger.info(f"Removed {removed} task(s)")
    if removed == 0:
        return "🤷 Nothing selected, no tasks removed."
    if removed == 1:
        return "🗑️ Task removed."
    return f"🗑️ {removed} tasks removed."


def complete(
    store: TaskStore,
    manager: TaskListManager,
    selector: SelectionProvider,
    ids: Optional[AbstractSet[int]] = None,
) -> str:
    tasks = store.load()
    incomplete: List[Task] = manager.incomplete_tasks(tasks)
    if not incomplete:
        return "🎉 All tasks are already completed!"

    if ids is None:
        ids = _select_ids(selector, COMPLETE_PROMPT, manager.task_options(incomplete))

    updated = manager.complete_tasks(tasks, ids)
    store.save(updated)

    newly = len(incomplete) - len(manager.incomplete_tasks(updated))
    logger.info(f"Completed {newly} task(s)")
    if newly == 0:
        return "🤷 Nothing selected, no tasks completed."
    return "🎯 Selected tasks marked as completed!"
