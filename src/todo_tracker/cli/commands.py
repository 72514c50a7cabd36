# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..todos.todo_models import (
    CompleteTodoRequest,
    CreateTodoRequest,
    DeleteTodoRequest,
    GetTodoRequest,
    TodoNotFoundError,
    format_todo,
)

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except TodoNotFoundError as e:
            logger.debug("/%s: %s", name, e)
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    app_name = str(getattr(state.settings, "app_name", "todo-tracker"))
    return (
        "Status:\n"
        f"  App: {app_name}\n"
        f"  Todos stored: {state.todo_store.count()}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title>                  -> create a todo
    /add <title> | <description>  -> create a todo with a description
    """
    raw = " ".join(args)
    title, sep, description = raw.partition("|")
    title = title.strip()
    if not title:
        return "Usage: /add <title> [| <description>]"

    todo = state.todos.create_todo(
        CreateTodoRequest(title=title, description=description.strip() if sep else None)
    )
    return f"Created: {format_todo(todo)}"


def cmd_list(state: AppState, args: list[str]) -> str:
    todos = state.todos.list_todos()
    if not todos:
        return "No todos."
    lines = [f"Todos ({len(todos)}):"]
    for i, todo in enumerate(todos, start=1):
        lines.append(f"{i}. {format_todo(todo)}")
    return "\n".join(lines)


def cmd_get(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /get <id>"
    return format_todo(state.todos.get_todo(GetTodoRequest(id=args[0])))


def cmd_done(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /done <id>"
    state.todos.complete_todo(CompleteTodoRequest(id=args[0]))
    return f"Completed: {format_todo(state.todos.get_todo(GetTodoRequest(id=args[0])))}"


def cmd_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /rm <id>"
    state.todos.delete_todo(DeleteTodoRequest(id=args[0]))
    return f"Removed: {args[0]}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show app name and number of stored todos.")
registry.register("add", cmd_add, help_text="Create a todo: /add <title> [| <description>].")
registry.register("list", cmd_list, help_text="List all todos.", aliases=["ls"])
registry.register("get", cmd_get, help_text="Show one todo: /get <id>.")
registry.register("done", cmd_done, help_text="Mark a todo completed: /done <id>.", aliases=["complete"])
registry.register("rm", cmd_rm, help_text="Delete a todo: /rm <id>.", aliases=["delete", "del"])
