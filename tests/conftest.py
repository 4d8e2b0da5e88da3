# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo.manager import TaskListManager
from todo.schema import Task
from todo.store import TaskStore


@pytest.fixture()
def todo_file(tmp_path: Path) -> Path:
    """Per-test task file; does not exist until something saves to it."""
    return tmp_path / "todo.json"


@pytest.fixture()
def store(todo_file: Path) -> TaskStore:
    return TaskStore(todo_file)


@pytest.fixture()
def manager() -> TaskListManager:
    return TaskListManager()


@pytest.fixture()
def two_tasks() -> list[Task]:
    return [
        Task(id=1, description="a"),
        Task(id=2, description="b"),
    ]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's TODO_* environment out of the tests."""
    monkeypatch.delenv("TODO_FILE", raising=False)
    monkeypatch.delenv("TODO_LOG_LEVEL", raising=False)
