"""
Logging module - Structured logging for the schema engine using structlog.

Library modules obtain loggers through ``get_logger(__name__)``. Each logger
wraps a standard ``logging.Logger`` so that levels and handlers stay under the
host application's control; events are rendered as JSON lines.

Usage:
    from fieldschema.common.logging import get_logger

    logger = get_logger(__name__)
    logger.debug("schema.parsed", schema="User", fields=4)
"""

from __future__ import annotations

import json
import logging

import structlog

from .config import load_settings

__all__ = ["PACKAGE_LOGGER", "configure_logging", "get_logger"]

PACKAGE_LOGGER = "fieldschema"
_STREAM_HANDLER_NAME = "fieldschema.stream"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _jsonl_renderer(
    logger: structlog.types.WrappedLogger,
    method_name: str,
    event_dict: structlog.types.EventDict,
) -> str:
    """Render the event as a single JSON line."""
    return json.dumps(event_dict, default=str)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Create a structlog logger backed by the stdlib logger ``name``.

    Events below the stdlib logger's effective level are dropped before any
    processing happens.

    Args:
        name: Logger name, normally ``__name__``

    Returns:
        Bound structlog logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _jsonl_renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: int | str | None = None) -> logging.Handler:
    """
    Send fieldschema log events to stderr.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Level for the package logger (default: from settings)

    Returns:
        The installed handler (for later removal if needed)
    """
    if level is None:
        level = load_settings().log_level

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for existing in list(package_logger.handlers):
        if existing.get_name() == _STREAM_HANDLER_NAME:
            package_logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_STREAM_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    return handler
