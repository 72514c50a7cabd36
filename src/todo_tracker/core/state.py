# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import TodoApi, TodoRepo, TodoUseCases


@dataclass
class AppState:
    """
    Runtime state shared across connectors.

    Holds the one store/service/controller chain built by cli.bootstrap.
    """

    settings: Any

    todo_store: TodoRepo
    todo_service: TodoUseCases
    todos: TodoApi
