# tests/test_commands.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo import commands
from todo.errors import InputCancelled, InputError, SelectionContractError
from todo.manager import TaskListManager
from todo.schema import Task
from todo.store import TaskStore

from .fakes import RogueSelectionProvider, ScriptedSelectionProvider, ScriptedTextProvider


def test_add_with_description(store: TaskStore, manager: TaskListManager) -> None:
    prompter = ScriptedTextProvider()
    msg = commands.add(store, manager, "buy milk", prompter)

    assert msg.startswith("✅ Task added!")
    assert prompter.labels == []
    assert store.load() == [Task(id=1, description="buy milk")]


def test_add_prompts_when_missing(store: TaskStore, manager: TaskListManager, two_tasks) -> None:
    store.save(two_tasks)
    prompter = ScriptedTextProvider("c")
    commands.add(store, manager, None, prompter)

    assert prompter.labels == [commands.ADD_PROMPT]
    assert store.load()[-1] == Task(id=3, description="c")


def test_add_rejects_blank(store: TaskStore, manager: TaskListManager, todo_file: Path) -> None:
    with pytest.raises(InputError):
        commands.add(store, manager, None, ScriptedTextProvider("   "))
    assert not todo_file.exists()


def test_add_cancelled_saves_nothing(store: TaskStore, manager: TaskListManager, todo_file: Path) -> None:
    with pytest.raises(InputCancelled):
        commands.add(store, manager, None, ScriptedTextProvider(cancel=True))
    assert not todo_file.exists()


def test_list_empty(store: TaskStore, manager: TaskListManager) -> None:
    assert commands.list_(store, manager) == "📭 No tasks found."


def test_list_renders_markers(store: TaskStore, manager: TaskListManager) -> None:
    store.save([Task(id=1, description="a"), Task(id=2, description="b", completed=True)])
    assert commands.list_(store, manager).splitlines() == ["[1] ❌ a", "[2] ✅ b"]


def test_remove_empty_does_not_prompt_or_save(
    store: TaskStore, manager: TaskListManager, todo_file: Path
) -> None:
    selector = ScriptedSelectionProvider(pick=[1])
    assert commands.remove(store, manager, selector) == "📭 No tasks to remove."
    assert selector.calls == []
    assert not todo_file.exists()


def test_remove_offers_all_tasks(store: TaskStore, manager: TaskListManager) -> None:
    store.save([Task(id=1, description="a"), Task(id=2, description="b", completed=True)])
    selector = ScriptedSelectionProvider(pick=[1])

    assert commands.remove(store, manager, selector) == "🗑️ Task removed."
    assert selector.offered_ids == [1, 2]
    assert store.load() == [Task(id=2, description="b", completed=True)]


def test_remove_nothing_selected(store: TaskStore, manager: TaskListManager, two_tasks) -> None:
    store.save(two_tasks)
    msg = commands.remove(store, manager, ScriptedSelectionProvider())
    assert "no tasks removed" in msg
    assert store.load() == two_tasks


def test_remove_explicit_ids_skip_prompt(store: TaskStore, manager: TaskListManager, two_tasks) -> None:
    store.save(two_tasks)
    selector = ScriptedSelectionProvider()
    assert commands.remove(store, manager, selector, {1, 2, 7}) == "🗑️ 2 tasks removed."
    assert selector.calls == []
    assert store.load() == []


def test_complete_offers_only_incomplete(store: TaskStore, manager: TaskListManager) -> None:
    store.save(
        [
            Task(id=1, description="a", completed=True),
            Task(id=2, description="b"),
            Task(id=3, description="c"),
        ]
    )
    selector = ScriptedSelectionProvider(pick=[3])

    assert commands.complete(store, manager, selector) == "🎯 Selected tasks marked as completed!"
    assert selector.offered_ids == [2, 3]
    assert [t.completed for t in store.load()] == [True, False, True]


def test_complete_all_done(store: TaskStore, manager: TaskListManager) -> None:
    store.save([Task(id=1, description="a", completed=True)])
    selector = ScriptedSelectionProvider(pick=[1])
    assert commands.complete(store, manager, selector) == "🎉 All tasks are already completed!"
    assert selector.calls == []


def test_complete_explicit_ids(store: TaskStore, manager: TaskListManager, two_tasks) -> None:
    store.save(two_tasks)
    commands.complete(store, manager, ScriptedSelectionProvider(), {2})
    assert store.load() == [Task(id=1, description="a"), Task(id=2, description="b", completed=True)]


def test_selection_cancelled_saves_nothing(store: TaskStore, manager: TaskListManager, two_tasks, todo_file: Path) -> None:
    store.save(two_tasks)
    before = todo_file.read_bytes()

    with pytest.raises(InputCancelled):
        commands.remove(store, manager, ScriptedSelectionProvider(cancel=True))
    with pytest.raises(InputCancelled):
        commands.complete(store, manager, ScriptedSelectionProvider(cancel=True))

    assert todo_file.read_bytes() == before


def test_selection_contract_violation(store: TaskStore, manager: TaskListManager, two_tasks, todo_file: Path) -> None:
    store.save(two_tasks)
    before = todo_file.read_bytes()

    with pytest.raises(SelectionContractError):
        commands.remove(store, manager, RogueSelectionProvider())
    with pytest.raises(SelectionContractError):
        commands.complete(store, manager, RogueSelectionProvider())

    assert todo_file.read_bytes() == before
