# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires store -> service -> controller into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Clock, IdFactory
from ..core.state import AppState
from ..todos.todo_controller import TodoController
from ..todos.todo_service import TodoService
from ..todos.todo_store import InMemoryTodoStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    id_factory: IdFactory | None = None,
    clock: Clock | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = InMemoryTodoStore()
    service = TodoService(store, id_factory=id_factory, clock=clock)
    controller = TodoController(service)

    logger.debug("Todo chain wired (store=%s)", type(store).__name__)

    return AppState(
        settings=settings,
        todo_store=store,
        todo_service=service,
        todos=controller,
    )
