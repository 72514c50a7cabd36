# src/todo_tracker/cli/demo.py

"""
Scripted walkthrough of the todo API.

Creates two todos, lists them, fetches one, completes it, deletes the other
and lists again, printing every step to `out`.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..core.ports import TodoApi
from ..todos.todo_models import (
    CompleteTodoRequest,
    CreateTodoRequest,
    DeleteTodoRequest,
    GetTodoRequest,
    Todo,
    format_todo,
)

logger = logging.getLogger(__name__)


def _print_todos(todos: list[Todo], out: TextIO) -> None:
    if not todos:
        print("  (none)", file=out)
    for todo in todos:
        print(f"  {format_todo(todo)}", file=out)


def run_demo(todos: TodoApi, out: TextIO | None = None) -> bool:
    """Run the walkthrough. Returns False if any step raised."""
    out = out or sys.stdout

    try:
        print("--- Creating Todos ---", file=out)
        first = todos.create_todo(
            CreateTodoRequest(title="Buy groceries", description="Milk, Bread, Eggs")
        )
        print(f"Created Todo: {format_todo(first)}", file=out)

        second = todos.create_todo(CreateTodoRequest(title="Clean the house"))
        print(f"Created Todo: {format_todo(second)}", file=out)

        print("\n--- Listing All Todos ---", file=out)
        _print_todos(todos.list_todos(), out)

        print("\n--- Getting Todo by ID ---", file=out)
        fetched = todos.get_todo(GetTodoRequest(id=first.id))
        print(format_todo(fetched), file=out)

        print("\n--- Marking Todo as Completed ---", file=out)
        todos.complete_todo(CompleteTodoRequest(id=first.id))
        completed = todos.get_todo(GetTodoRequest(id=first.id))
        print(format_todo(completed), file=out)

        print("\n--- Deleting a Todo ---", file=out)
        todos.delete_todo(DeleteTodoRequest(id=second.id))
        _print_todos(todos.list_todos(), out)
    except Exception as e:
        logger.exception("Demo failed.")
        print(f"Error: {e}", file=out)
        return False

    return True
