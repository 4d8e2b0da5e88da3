"""
TODO - Task Schema Definition
=============================
A task list is a plain JSON array of task objects:

    [
      {"id": 1, "description": "buy milk", "completed": false}
    ]

Ids are positive, unique within the list and never reused.
"""

from typing import Iterable, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter

from .errors import CorruptState


class Task(BaseModel):
    """Individual to-do entry"""
    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    id: int = Field(ge=1)
    # Older files stored the text under "task"
    description: str = Field(validation_alias=AliasChoices("description", "task"))
    completed: bool = False


class StoredTask(Task):
    """Task as read from disk: every field must be present"""
    completed: bool

    def to_task(self) -> Task:
        return Task(id=self.id, description=self.description, completed=self.completed)


class TaskOption(BaseModel):
    """One selectable task. The id travels with the option, never parsed back out of the label."""
    model_config = ConfigDict(frozen=True, strict=True)

    task_id: int = Field(..., description="Id of the task this option stands for")
    label: str = Field(..., description="Text shown to the user")


# Ordered by insertion; the order is the display order.
TaskCollection = List[Task]

TASK_COLLECTION_ADAPTER = TypeAdapter(List[Task])
STORED_COLLECTION_ADAPTER = TypeAdapter(List[StoredTask])


def ensure_unique_ids(tasks: Iterable[Task]) -> None:
    """Raise CorruptState if two tasks share an id"""
    seen = set()
    for task in tasks:
        if task.id in seen:
            raise CorruptState(f"Duplicate task id: {task.id}")
        seen.add(task.id)
