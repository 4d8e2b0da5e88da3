"""Settings loaded from environment variables.

Command-line flags override these; nothing is read at import time.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from .store import DEFAULT_TODO_FILE

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    todo_file: Path
    log_level: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            todo_file=_env_path(_k("FILE"), Path(DEFAULT_TODO_FILE)),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper(),
        )


def get_settings() -> Settings:
    return Settings.from_env()
