# src/todo_tracker/todos/todo_store.py

from __future__ import annotations

import logging

from .todo_models import Todo

logger = logging.getLogger(__name__)


class InMemoryTodoStore:
    """
    In-memory todo repository.

    - entries keyed by todo id, insertion ordered
    - each instance owns its own dict (nothing is shared between stores)
    - no persistence, no locking, no size bound
    """

    def __init__(self) -> None:
        self._todos: dict[str, Todo] = {}
        logger.debug("InMemoryTodoStore ready")

    def create(self, todo: Todo) -> Todo:
        # Overwrites silently on id collision.
        self._todos[todo.id] = todo
        logger.debug("Stored todo id=%s total=%d", todo.id, len(self._todos))
        return todo

    def find_by_id(self, todo_id: str) -> Todo | None:
        return self._todos.get(todo_id)

    def find_all(self) -> list[Todo]:
        return list(self._todos.values())

    def update(self, todo: Todo) -> None:
        if todo.id not in self._todos:
            logger.debug("Update skipped, unknown todo id=%s", todo.id)
            return
        self._todos[todo.id] = todo
        logger.debug("Updated todo id=%s", todo.id)

    def delete(self, todo_id: str) -> None:
        if self._todos.pop(todo_id, None) is not None:
            logger.debug("Deleted todo id=%s total=%d", todo_id, len(self._todos))

    def count(self) -> int:
        return len(self._todos)
