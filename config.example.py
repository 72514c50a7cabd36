# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-tracker).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    "TODO_LOG_TO_FILE": "Also write full DEBUG logs to <data_dir>/todo.log (default: true).",
    # Connectors
    "TODO_CONSOLE_ENABLED": "Start the interactive console instead of the demo (default: false).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory for logs (default: .local/todo).",
}
