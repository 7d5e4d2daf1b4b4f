"""Application configuration loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

_DEFAULT_POM_FILENAME: Final[str] = "pom.xml"
_DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

_CACHED_SETTINGS: Settings | None = None


@dataclass(frozen=True)
class Settings:
    """Runtime configuration derived from environment variables."""

    pom_filename: str
    resolve_properties: bool
    log_level: str


_TRUE_VALUES: Final[set[str]] = {"1", "true", "yes", "on"}
_FALSE_VALUES: Final[set[str]] = {"0", "false", "no", "off"}
_LOG_LEVELS: Final[set[str]] = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _coerce_bool(value: str | None, *, default: bool) -> bool:
    """Convert common textual boolean representations to bool."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def get_settings(*, force_reload: bool = False) -> Settings:
    """Load configuration, optionally reloading from the environment."""
    global _CACHED_SETTINGS  # noqa: PLW0603
    if not force_reload and _CACHED_SETTINGS is not None:
        return _CACHED_SETTINGS

    dotenv_override = os.getenv("GAV_READER_DOTENV_PATH")
    if dotenv_override:
        load_dotenv(dotenv_override, override=True)
    else:
        dotenv_path = Path.cwd() / ".env"
        if dotenv_path.exists():
            load_dotenv(dotenv_path=dotenv_path)

    pom_filename = (
        os.getenv("GAV_READER_POM_FILENAME", "").strip()
        or _DEFAULT_POM_FILENAME
    )
    resolve_properties = _coerce_bool(
        os.getenv("GAV_READER_RESOLVE_PROPERTIES"),
        default=True,
    )
    log_level = os.getenv("GAV_READER_LOG_LEVEL", _DEFAULT_LOG_LEVEL)
    log_level = log_level.strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = _DEFAULT_LOG_LEVEL

    _CACHED_SETTINGS = Settings(
        pom_filename=pom_filename,
        resolve_properties=resolve_properties,
        log_level=log_level,
    )
    return _CACHED_SETTINGS
