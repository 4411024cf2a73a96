# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Keep machine-specific values in .env (local, gitignored).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKACE_APP_NAME": "Title shown above the list (default: Tasks to Ace).",
    "TASKACE_LOG_LEVEL": "Logging level (default: INFO). The console only shows WARNING+.",
    # Storage (gitignored)
    "TASKACE_DATA_DIR": "Local data directory (default: .local/taskace).",
    "TASKACE_STORE_BACKEND": "Key-value backend: sqlite | json (default: sqlite).",
    "TASKACE_STORE_DB_PATH": "SQLite store path (default: <data_dir>/store.sqlite3).",
    "TASKACE_STORE_JSON_PATH": "JSON store path (default: <data_dir>/store.json).",
    # Presentation
    "TASKACE_DEFAULT_THEME": "Theme used until one is saved: dark | light (default: dark).",
    "TASKACE_CELEBRATE": "Print a burst when a task is completed (true/false, default: true).",
    "TASKACE_CONSOLE_COLOR": "ANSI colours on a TTY (true/false, default: true). NO_COLOR disables.",
}
