"""
Unified exception hierarchy for fieldschema.

This module provides a consistent exception structure across the package:
- A base exception carrying optional debugging context
- Configuration errors for bad settings and malformed schema declarations
- Validation errors for data that does not satisfy a schema

Usage:
    from fieldschema.common.exceptions import ValidationError, SchemaDefinitionError

    # Raise with context
    raise SchemaDefinitionError("Enum needs at least one value", context={"field": "Enum"})

    # Chain from original exception
    raise ValidationError("Response is not valid JSON") from original_error
"""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """
    Base exception for all fieldschema errors.

    Provides consistent error handling with optional context for debugging.

    Attributes:
        message: Human-readable error description
        context: Optional dictionary with additional error context
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(BaseError):
    """Raised when configuration is invalid or missing."""


class SchemaDefinitionError(ConfigurationError):
    """Raised when a schema class or field declaration is malformed."""


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(BaseError):
    """Raised when data fails validation (input, JSON text, or schema)."""


__all__ = [
    # Base
    "BaseError",
    # Configuration
    "ConfigurationError",
    "SchemaDefinitionError",
    # Validation
    "ValidationError",
]
