# src/todo_tracker/todos/todo_controller.py

from __future__ import annotations

from ..core.ports import TodoUseCases
from .todo_models import (
    CompleteTodoRequest,
    CreateTodoRequest,
    DeleteTodoRequest,
    GetTodoRequest,
    Todo,
)


class TodoController:
    """Thin adapter: unwraps request objects and forwards to the service unchanged."""

    def __init__(self, service: TodoUseCases) -> None:
        self._service = service

    def create_todo(self, request: CreateTodoRequest) -> Todo:
        return self._service.add_todo(request.title, request.description)

    def get_todo(self, request: GetTodoRequest) -> Todo:
        return self._service.get_todo_by_id(request.id)

    def list_todos(self) -> list[Todo]:
        return self._service.list_todos()

    def complete_todo(self, request: CompleteTodoRequest) -> None:
        self._service.mark_as_completed(request.id)

    def delete_todo(self, request: DeleteTodoRequest) -> None:
        self._service.remove_todo(request.id)
