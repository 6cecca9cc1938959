# src/tq/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Editor resolution is a pure function of an env mapping, so it can be tested
  without touching os.environ.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TQ"

DEFAULT_SHELL = "sh"
DEFAULT_EDITOR = "vim"
DEFAULT_UI_WIDTH = 80


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class EditorCommand:
    shell: str
    editor: str


def resolve_editor_command(env: Mapping[str, str] | None = None) -> EditorCommand:
    """
    Pick the shell and editor used by Task.edit().

    SHELL defaults to "sh" and EDITOR to "vim". Values are stripped; a blank
    value counts as unset.
    """
    if env is None:
        env = os.environ
    shell = (env.get("SHELL") or "").strip() or DEFAULT_SHELL
    editor = (env.get("EDITOR") or "").strip() or DEFAULT_EDITOR
    return EditorCommand(shell=shell, editor=editor)


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- UI ----
    ui_width: int

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        ui_width = _env_int(_k("UI_WIDTH"), DEFAULT_UI_WIDTH)
        if ui_width <= 0:
            ui_width = DEFAULT_UI_WIDTH

        return Settings(
            app_name=_env(_k("APP_NAME"), "tq") or "tq",
            log_level=_env(_k("LOG_LEVEL"), "WARNING"),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            ui_width=ui_width,
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/tq")),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
