"""
Common utilities shared across fieldschema.

This package provides:
- exceptions: Unified exception hierarchy
- config: Environment-driven settings
- logging: structlog-backed loggers
- json_utils: JSON decoding for LLM responses
- hashing: Hashable keys for JSON-like values
"""

from __future__ import annotations

from .config import Settings, load_settings, reset_settings
from .exceptions import (
    BaseError,
    ConfigurationError,
    SchemaDefinitionError,
    ValidationError,
)
from .hashing import json_equals, to_hashable
from .json_utils import extract_json_from_response, load_json_document
from .logging import configure_logging, get_logger

__all__ = [
    # Exceptions
    "BaseError",
    "ConfigurationError",
    "SchemaDefinitionError",
    "ValidationError",
    # Config
    "Settings",
    "load_settings",
    "reset_settings",
    # Logging
    "configure_logging",
    "get_logger",
    # JSON utils
    "extract_json_from_response",
    "load_json_document",
    # Hashing
    "json_equals",
    "to_hashable",
]
