"""
TODO - Task List Manager
========================
Pure transformations of a task list. Nothing here touches storage:
callers load with TaskStore, apply one operation, then save the result.

Tasks are frozen, so every operation returns a new list and leaves its
input untouched.
"""

import logging
from typing import AbstractSet, List, Sequence

from .schema import Task, TaskCollection, TaskOption

logger = logging.getLogger(__name__)


class TaskListManager:
    """
    Add, list, remove and complete tasks.

    Id rule: a new task gets ``max(existing ids) + 1`` (or 1 for an empty
    list), so ids are never reused even after the highest one is removed
    or the list is reordered.
    """

    # ========================================
    # IDENTIFIERS
    # ========================================

    @staticmethod
    def next_id(tasks: Sequence[Task]) -> int:
        """Id for the next task to be added"""
        return max((task.id for task in tasks), default=0) + 1

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, tasks: Sequence[Task], description: str) -> TaskCollection:
        """Append a new, incomplete task"""
        task = Task(id=self.next_id(tasks), description=description)
        logger.debug(f"➕ New task {task.id}: {description!r}")
        return [*tasks, task]

    def list_tasks(self, tasks: Sequence[Task]) -> List[Task]:
        """Tasks in display order"""
        return list(tasks)

    def remove_tasks(self, tasks: Sequence[Task], ids: AbstractSet[int]) -> TaskCollection:
        """Drop every task whose id is in ``ids``; unknown ids are ignored"""
        remaining = [task for task in tasks if task.id not in ids]
        logger.debug(f"🗑️ Removed {len(tasks) - len(remaining)} task(s)")
        return remaining

    def complete_tasks(self, tasks: Sequence[Task], ids: AbstractSet[int]) -> TaskCollection:
        """Mark every task whose id is in ``ids`` as completed; unknown ids are ignored"""
        return [
            task.model_copy(update={"completed": True})
            if task.id in ids and not task.completed
            else task
            for task in tasks
        ]

    # ========================================
    # SELECTION HELPERS
    # ========================================

    def incomplete_tasks(self, tasks: Sequence[Task]) -> List[Task]:
        """Tasks that can still be completed"""
        return [task for task in tasks if not task.completed]

    def task_options(self, tasks: Sequence[Task]) -> List[TaskOption]:
        """Selectable options, one per task, in display order"""
        return [TaskOption(task_id=task.id, label=f"[{task.id}] {task.description}") for task in tasks]
