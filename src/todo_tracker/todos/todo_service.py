# src/todo_tracker/todos/todo_service.py

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime

from ..core.ports import Clock, IdFactory, TodoRepo
from .todo_models import Todo, TodoNotFoundError

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TodoService:
    """
    Domain rules on top of a TodoRepo.

    - ids and timestamps are assigned here, never by the caller
    - lookups by id raise TodoNotFoundError, removal of an unknown id is a no-op
    - id_factory / clock are injectable (tests use deterministic ones)
    """

    def __init__(
        self,
        repo: TodoRepo,
        *,
        id_factory: IdFactory | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._repo = repo
        self._new_id = id_factory or _new_id
        self._now = clock or _utc_now

    def add_todo(self, title: str, description: str | None = None) -> Todo:
        now = self._now()
        todo = Todo(
            id=self._new_id(),
            title=title,
            description=description,
            created_at=now,
            updated_at=now,
            completed=False,
        )
        self._repo.create(todo)
        logger.info("Created todo id=%s title=%r", todo.id, todo.title)
        return todo

    def get_todo_by_id(self, todo_id: str) -> Todo:
        todo = self._repo.find_by_id(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo

    def list_todos(self) -> list[Todo]:
        return self._repo.find_all()

    def mark_as_completed(self, todo_id: str) -> None:
        todo = self.get_todo_by_id(todo_id)
        todo.completed = True
        # Never let a clock step backwards break updated_at >= created_at.
        todo.updated_at = max(self._now(), todo.created_at)
        self._repo.update(todo)
        logger.info("Completed todo id=%s", todo_id)

    def remove_todo(self, todo_id: str) -> None:
        existed = self._repo.find_by_id(todo_id) is not None
        self._repo.delete(todo_id)
        if existed:
            logger.info("Removed todo id=%s", todo_id)
        else:
            logger.debug("Remove requested for unknown todo id=%s", todo_id)
