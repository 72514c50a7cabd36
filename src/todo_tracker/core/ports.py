# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the app.

Each layer depends on the Protocol of the layer below instead of a concrete class.
Swapping the storage backend means providing another TodoRepo, callers stay unchanged.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from ..todos.todo_models import (
    CompleteTodoRequest,
    CreateTodoRequest,
    DeleteTodoRequest,
    GetTodoRequest,
    Todo,
)

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]


class TodoRepo(Protocol):
    """Raw storage keyed by todo id. No business rules."""

    def create(self, todo: Todo) -> Todo: ...
    def find_by_id(self, todo_id: str) -> Todo | None: ...
    def find_all(self) -> list[Todo]: ...
    def update(self, todo: Todo) -> None: ...
    def delete(self, todo_id: str) -> None: ...
    def count(self) -> int: ...


class TodoUseCases(Protocol):
    """Domain operations (existence checks, timestamps, id generation)."""

    def add_todo(self, title: str, description: str | None = None) -> Todo: ...
    def get_todo_by_id(self, todo_id: str) -> Todo: ...
    def list_todos(self) -> list[Todo]: ...
    def mark_as_completed(self, todo_id: str) -> None: ...
    def remove_todo(self, todo_id: str) -> None: ...


class TodoApi(Protocol):
    """Request-shaped entry points used by connectors and the demo."""

    def create_todo(self, request: CreateTodoRequest) -> Todo: ...
    def get_todo(self, request: GetTodoRequest) -> Todo: ...
    def list_todos(self) -> list[Todo]: ...
    def complete_todo(self, request: CompleteTodoRequest) -> None: ...
    def delete_todo(self, request: DeleteTodoRequest) -> None: ...
