# tests/test_todo_service.py

from __future__ import annotations

import logging
from datetime import timedelta

import pytest

from todo_tracker.todos.todo_models import TodoNotFoundError
from todo_tracker.todos.todo_service import TodoService
from todo_tracker.todos.todo_store import InMemoryTodoStore

from .fakes import SequentialIds, SteppingClock


@pytest.fixture()
def service(ids: SequentialIds, clock: SteppingClock) -> TodoService:
    return TodoService(InMemoryTodoStore(), id_factory=ids, clock=clock)


def test_add_todo_assigns_id_and_timestamps(service: TodoService, clock: SteppingClock) -> None:
    start = clock.current
    todo = service.add_todo("Buy groceries", "Milk, Bread, Eggs")

    assert todo.id == "todo-1"
    assert todo.title == "Buy groceries"
    assert todo.description == "Milk, Bread, Eggs"
    assert todo.completed is False
    assert todo.created_at == start
    assert todo.updated_at == todo.created_at

    assert service.get_todo_by_id("todo-1") is todo


def test_add_todo_without_description() -> None:
    service = TodoService(InMemoryTodoStore())
    todo = service.add_todo("Clean the house")

    assert todo.description is None
    assert todo.id
    assert todo.created_at.tzinfo is not None


def test_default_ids_are_unique() -> None:
    service = TodoService(InMemoryTodoStore())
    ids = {service.add_todo(f"t{i}").id for i in range(50)}
    assert len(ids) == 50


def test_get_unknown_id_raises(service: TodoService) -> None:
    service.add_todo("something")

    with pytest.raises(TodoNotFoundError) as exc_info:
        service.get_todo_by_id("never-issued")

    assert exc_info.value.todo_id == "never-issued"
    assert "never-issued" in str(exc_info.value)


def test_mark_as_completed_sets_flag_and_refreshes_updated_at(service: TodoService) -> None:
    todo = service.add_todo("Buy groceries")
    created_at = todo.created_at

    service.mark_as_completed(todo.id)
    done = service.get_todo_by_id(todo.id)

    assert done.completed is True
    assert done.created_at == created_at
    assert done.updated_at > done.created_at


def test_mark_as_completed_unknown_id_raises(service: TodoService) -> None:
    with pytest.raises(TodoNotFoundError):
        service.mark_as_completed("missing")


def test_mark_as_completed_never_moves_updated_at_before_created_at(ids: SequentialIds) -> None:
    backwards = SteppingClock(step=timedelta(seconds=-5))
    service = TodoService(InMemoryTodoStore(), id_factory=ids, clock=backwards)

    todo = service.add_todo("time travel")
    service.mark_as_completed(todo.id)

    assert todo.updated_at >= todo.created_at


def test_remove_todo_is_idempotent(service: TodoService) -> None:
    todo = service.add_todo("Clean the house")

    service.remove_todo(todo.id)
    with pytest.raises(TodoNotFoundError):
        service.get_todo_by_id(todo.id)

    # second removal of the same id must not raise
    service.remove_todo(todo.id)
    service.remove_todo("never-issued")


def test_list_after_n_creates_and_one_delete(service: TodoService) -> None:
    created = [service.add_todo(f"task {i}") for i in range(5)]

    service.remove_todo(created[2].id)
    remaining = service.list_todos()

    assert len(remaining) == 4
    assert all(t in created for t in remaining)
    assert created[2] not in remaining


def test_remove_logs_info_only_for_existing_todo(
    service: TodoService, caplog: pytest.LogCaptureFixture
) -> None:
    todo = service.add_todo("Clean the house")

    with caplog.at_level(logging.DEBUG, logger="todo_tracker"):
        service.remove_todo("never-issued")
        service.remove_todo(todo.id)

    infos = [
        r.getMessage()
        for r in caplog.records
        if r.levelno == logging.INFO and "Remove" in r.getMessage()
    ]
    assert infos == [f"Removed todo id={todo.id}"]
    assert any(
        r.levelno == logging.DEBUG and "never-issued" in r.getMessage() for r in caplog.records
    )


def test_todo_id_cannot_be_reassigned(service: TodoService) -> None:
    todo = service.add_todo("Buy groceries")

    with pytest.raises(AttributeError):
        todo.id = "other"

    # the other fields stay mutable for in-place completion
    service.mark_as_completed(todo.id)
    assert todo.id == "todo-1"
    assert todo.completed is True
