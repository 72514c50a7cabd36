# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.cli.bootstrap import create_initial_state
from todo_tracker.core.state import AppState

from .fakes import SequentialIds, SteppingClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_to_file=False,
        console_enabled=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture()
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture()
def state(settings: SimpleNamespace, ids: SequentialIds, clock: SteppingClock) -> AppState:
    """AppState wired with the real in-memory chain and deterministic ids/clock."""
    return create_initial_state(settings=settings, id_factory=ids, clock=clock)
