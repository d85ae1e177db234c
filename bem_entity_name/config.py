"""Environment-driven settings and logging setup.

Settings are read from the environment on each call so tests (and long
running hosts) can change them without reloading the package:

- ``BEM_ENTITY_NAME_LOG_LEVEL``: logging level name (default ``WARNING``).
- ``BEM_NAMING_PRESET``: naming convention used by the module-level
  ``stringify``/``type_of`` helpers (default ``origin``).
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, field_validator

LOG_LEVEL_ENV = "BEM_ENTITY_NAME_LOG_LEVEL"
NAMING_PRESET_ENV = "BEM_NAMING_PRESET"
DEFAULT_PRESET = "origin"


class Settings(BaseModel):
    """Snapshot of the package settings."""

    model_config = ConfigDict(frozen=True)

    log_level: str = "WARNING"
    naming_preset: str = DEFAULT_PRESET

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, value: str) -> str:
        return str(value).strip().upper()

    @field_validator("naming_preset", mode="before")
    @classmethod
    def _strip(cls, value: str) -> str:
        return str(value).strip() or DEFAULT_PRESET


def settings() -> Settings:
    """Return settings read from the current environment."""
    return Settings(
        log_level=os.getenv(LOG_LEVEL_ENV, "WARNING"),
        naming_preset=os.getenv(NAMING_PRESET_ENV, DEFAULT_PRESET),
    )


def configure_logging() -> None:  # lightweight, idempotent
    if getattr(configure_logging, "_done", False):  # type: ignore[attr-defined]
        return
    level = getattr(logging, settings().log_level, logging.WARNING)
    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s")
    configure_logging._done = True  # type: ignore[attr-defined]
