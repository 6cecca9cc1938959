# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TQ_APP_NAME": "App display name used in log lines (default: tq).",
    "TQ_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TQ_LOG_TO_FILE": "Also write full debug logs to <data_dir>/tq.log (true/false, default: true).",
    # UI
    "TQ_UI_WIDTH": "Wrap width for console output (default: 80). Overridden by --width.",
    # Paths (gitignored)
    "TQ_DATA_DIR": "Local data directory (default: .local/tq).",
    # Editor (standard variables, not prefixed)
    "SHELL": "Shell used to launch the editor (default: sh).",
    "EDITOR": "Editor command used by task editing (default: vim).",
}
