# src/todo_tracker/todos/todo_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


class TodoNotFoundError(LookupError):
    """Raised when no todo exists for the requested identifier."""

    def __init__(self, todo_id: str) -> None:
        super().__init__(f"Todo not found: {todo_id}")
        self.todo_id = todo_id


@dataclass(slots=True)
class Todo:
    id: str
    title: str
    description: str | None
    created_at: datetime
    updated_at: datetime
    completed: bool = False

    def __setattr__(self, name: str, value: object) -> None:
        # id is write-once; the other fields are mutated in place by the service.
        if name == "id" and hasattr(self, "id"):
            raise AttributeError("Todo.id is immutable")
        object.__setattr__(self, name, value)


# Request shapes accepted by the controller.


@dataclass(frozen=True, slots=True)
class CreateTodoRequest:
    title: str
    description: str | None = None


@dataclass(frozen=True, slots=True)
class GetTodoRequest:
    id: str


@dataclass(frozen=True, slots=True)
class CompleteTodoRequest:
    id: str


@dataclass(frozen=True, slots=True)
class DeleteTodoRequest:
    id: str


def _fmt_ts(ts: datetime) -> str:
    return ts.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def format_todo(todo: Todo) -> str:
    """One-line human-readable rendering used by the demo and the console."""
    mark = "[x]" if todo.completed else "[ ]"
    text = f"{mark} {todo.id} {todo.title}"
    if todo.description is not None:
        text += f" - {todo.description}"
    return f"{text} (created {_fmt_ts(todo.created_at)}, updated {_fmt_ts(todo.updated_at)})"
