"""
Settings for fieldschema, read from the environment.

Values come from environment variables, optionally seeded from a ``.env``
file. Real environment variables always win over the file.

Environment variables:
    FIELDSCHEMA_LOG_LEVEL: Level for the package logger (default: WARNING)
    FIELDSCHEMA_STRICT_OUTPUT: Default ``strict`` flag for structured output
        wrappers (default: true)
    FIELDSCHEMA_INDENT: Indentation used by ``stringify(pretty=True)`` (default: 2)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from .exceptions import ConfigurationError

__all__ = ["Settings", "load_settings", "reset_settings"]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the schema engine."""

    log_level: str = "WARNING"
    strict_output: bool = True
    pretty_indent: int = 2


def _read_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}", context={"value": raw})


def _read_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid integer for {name}", context={"value": raw}) from e
    if value < minimum:
        raise ConfigurationError(
            f"{name} must be >= {minimum}", context={"value": value}
        )
    return value


def _read_level(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        raise ConfigurationError(f"Unknown log level for {name}", context={"value": raw})
    return raw


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """
    Load settings from the environment (cached).

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a variable holds a value that cannot be parsed
    """
    load_dotenv(override=False)  # Don't override existing env vars

    return Settings(
        log_level=_read_level("FIELDSCHEMA_LOG_LEVEL", Settings.log_level),
        strict_output=_read_bool("FIELDSCHEMA_STRICT_OUTPUT", Settings.strict_output),
        pretty_indent=_read_int("FIELDSCHEMA_INDENT", Settings.pretty_indent),
    )


def reset_settings() -> None:
    """Drop cached settings so the next ``load_settings()`` re-reads the environment."""
    load_settings.cache_clear()
