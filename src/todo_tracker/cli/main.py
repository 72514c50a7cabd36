# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then either:
- runs the scripted demo (default), or
- starts the console REPL (TODO_CONSOLE_ENABLED=true).
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.demo import run_demo
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    try:
        if settings.console_enabled:
            run_console_loop(state)
            return 0
        return 0 if run_demo(state.todos) else 1
    finally:
        logger.info("Bye (todos in memory: %d).", state.todo_store.count())


if __name__ == "__main__":
    sys.exit(main())
