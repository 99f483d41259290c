"""Logging helpers for querychain.

Builders report each clause they append, each condition they extend and
each statement they render at DEBUG level, on loggers under the
``querychain`` namespace. Nothing is emitted unless the application (or
:func:`configure_logging`) attaches a handler and lowers the level.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from querychain._serialization import encode_json

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = (
    "ROOT_LOGGER_NAME",
    "CorrelationIDFilter",
    "StructuredFormatter",
    "configure_logging",
    "correlation_id_var",
    "get_correlation_id",
    "get_logger",
    "log_builder_event",
    "set_correlation_id",
)

ROOT_LOGGER_NAME = "querychain"
SIMPLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

correlation_id_var: ContextVar[str | None] = ContextVar("querychain_correlation_id", default=None)


def set_correlation_id(correlation_id: str | None) -> None:
    """Tag builder log records emitted in the current context.

    Args:
        correlation_id: Identifier of the caller's unit of work, or None to clear it.
    """
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> str | None:
    return correlation_id_var.get()


class CorrelationIDFilter(logging.Filter):
    """Stamp every record with the correlation ID of the current context."""

    def filter(self, record: LogRecord) -> bool:
        record.correlation_id = get_correlation_id()  # type: ignore[attr-defined]
        return True


class StructuredFormatter(logging.Formatter):
    """Render builder records as one JSON object per line.

    The statement fields passed to :func:`log_builder_event` (clause keyword,
    clause count, rendered SQL) are merged into the top level of the object.
    """

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            entry["correlation_id"] = correlation_id
        entry.update(getattr(record, "statement_fields", {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return encode_json(entry)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the ``querychain`` namespace.

    Args:
        name: Child logger name; ``"builder"`` becomes ``"querychain.builder"``.

    Returns:
        The logger, with a :class:`CorrelationIDFilter` attached once.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIDFilter) for f in logger.filters):
        logger.addFilter(CorrelationIDFilter())
    return logger


def log_builder_event(logger: logging.Logger, message: str, *args: Any, **statement_fields: Any) -> None:
    """Emit a DEBUG record describing a change to a statement.

    Returns early when DEBUG is disabled, so callers may pass freshly
    rendered SQL without paying for the record.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(message, *args, extra={"statement_fields": statement_fields}, stacklevel=2)


def configure_logging(
    level: str = "INFO",
    format_style: str = "structured",
    log_to_file: str | None = None,
    extra_handlers: list[logging.Handler] | None = None,
) -> None:
    """Install handlers on the ``querychain`` logger.

    Args:
        level: Logging level name, e.g. ``"DEBUG"`` to see every appended clause.
        format_style: ``"structured"`` for JSON lines, ``"simple"`` for plain text.
        log_to_file: Optional path that receives JSON lines regardless of ``format_style``.
        extra_handlers: Additional handlers to attach as-is.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    if format_style == "structured":
        console_handler.setFormatter(StructuredFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(SIMPLE_FORMAT))
    handlers: list[logging.Handler] = [console_handler]

    if log_to_file:
        file_handler = logging.FileHandler(log_to_file)
        file_handler.setFormatter(StructuredFormatter())
        handlers.append(file_handler)

    handlers.extend(extra_handlers or ())
    for handler in handlers:
        # Records from the root logger never pass through a logger-level filter.
        handler.addFilter(CorrelationIDFilter())
        root_logger.addHandler(handler)
    root_logger.propagate = False
