# src/todo_store/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is persisted; settings only shape a fresh session.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

ID_MODES = ("random", "sequential")

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Fresh-session UI flags ----
    dark_mode: bool
    show_info_banner: bool

    # ---- Console ----
    color: bool

    # ---- Task ids: "random" or "sequential" ----
    id_mode: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/todo"))

        dark_mode = _env_bool(_k("DARK_MODE"), False)
        show_info_banner = _env_bool(_k("SHOW_INFO_BANNER"), True)

        # NO_COLOR is a cross-tool convention; honour it as the default.
        color = _env_bool(_k("COLOR"), os.getenv("NO_COLOR") is None)

        id_mode = _env_choice(_k("ID_MODE"), ID_MODES, "random")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            dark_mode=dark_mode,
            show_info_banner=show_info_banner,
            color=color,
            id_mode=id_mode,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
