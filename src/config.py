"""Settings resolved from environment variables.

TODO_STORAGE      file (default) or memory
TODO_DATA_FILE    path of the todos file; defaults to the per-user app dir
TODO_LOG_DIR      directory for todocli.log; defaults to the per-user app dir
TODO_LOG_LEVEL    file log level name (default WARNING)
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import click

from storage import APP_NAME, InMemoryStorage, JSONFileStorage, Storage

STORAGE_BACKENDS = ("file", "memory")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v.strip()


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw.strip()).expanduser()


def _env_choice(name: str, choices: Iterable[str], default: str) -> str:
    raw = _env(name).lower()
    for choice in choices:
        if raw == choice.lower():
            return choice
    return default


@dataclass(frozen=True)
class Settings:
    storage_backend: str = "file"
    data_file: Optional[Path] = None
    log_dir: Optional[Path] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            storage_backend=_env_choice("TODO_STORAGE", STORAGE_BACKENDS, "file"),
            data_file=_env_path("TODO_DATA_FILE"),
            log_dir=_env_path("TODO_LOG_DIR"),
            log_level=_env_choice("TODO_LOG_LEVEL", LOG_LEVELS, "WARNING"),
        )

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)

    def resolved_log_dir(self) -> Path:
        return self.log_dir if self.log_dir is not None else Path(click.get_app_dir(APP_NAME))


def build_storage(settings: Settings) -> Storage:
    """Map the configured backend name to a Storage instance."""
    if settings.storage_backend == "memory":
        return InMemoryStorage()
    return JSONFileStorage(settings.data_file)
