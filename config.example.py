# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory, also holds taskpad.log (default: .local/taskpad).",
    "TASKPAD_STATE_PATH": "Task slot file (default: <data_dir>/state.json).",
    # Persistence
    "TASKPAD_STORAGE_KEY": "Key the task list is stored under (default: elegant-todos).",
    "TASKPAD_EPHEMERAL": "Keep tasks in memory only (true/false, default: false).",
    # View
    "TASKPAD_DEFAULT_FILTER": "Initial filter: all | active | completed (default: all).",
}
