"""Structured logging utilities with correlation ID support.

Provides:
- Correlation ID context management for request tracing
- Structured logging formatter for consistent log output
- Helper for document generation logging

Usage:
    from shared.utils.logging import get_logger, set_correlation_id

    # In middleware/request handler:
    set_correlation_id(request.headers.get("X-Correlation-ID"))

    # In service code:
    logger = get_logger(__name__)
    log_document_event(logger, "render", guest="Maria Silva")
"""

import logging
import os
import uuid
from contextvars import ContextVar
from typing import Any

# Context variable for correlation ID - thread-safe and async-safe
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def generate_correlation_id() -> str:
    """Generate a new correlation ID.

    Returns:
        UUID-based correlation ID string
    """
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current request context.

    Args:
        correlation_id: Optional existing correlation ID. If None, generates new one.

    Returns:
        The correlation ID that was set
    """
    cid = correlation_id or generate_correlation_id()
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    """Get the current correlation ID."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "no-correlation-id"
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter for structured log output with correlation ID."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured fields.

        Args:
            record: Log record to format

        Returns:
            Formatted log string
        """
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or "no-correlation-id"

        base = super().format(record)

        # Prefix for easy grep/filtering
        return f"[{record.correlation_id}] {base}"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger with the structured formatter.

    Args:
        level: Log level name. Falls back to LOG_LEVEL env var, then INFO.
    """
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()

    root = logging.getLogger()
    root.setLevel(level_name)

    # Repeated app imports must not duplicate output
    if any(isinstance(h.formatter, StructuredFormatter) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter(LOG_FORMAT))
    handler.addFilter(CorrelationIdFilter())
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with correlation ID support.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())

    return logger


def log_document_event(
    logger: logging.Logger,
    operation: str,
    *,
    guest: str | None = None,
    accommodation: str | None = None,
    filename: str | None = None,
    field: str | None = None,
    error: str | None = None,
    exc: BaseException | None = None,
    **extra: Any,
) -> None:
    """Log a document generation step with structured context.

    Args:
        logger: Logger instance
        operation: Operation name (e.g., "validate", "render")
        guest: Guest name if known
        accommodation: Accommodation name if known
        filename: Generated filename if available
        field: Missing required field, for validation failures
        error: Error message if the operation failed
        exc: Exception whose traceback is attached to the error record
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"operation": operation}

    if guest:
        context["guest"] = guest
    if accommodation:
        context["accommodation"] = accommodation
    if filename:
        context["filename"] = filename
    if field:
        context["field"] = field
    if error:
        context["error"] = error

    context.update(extra)

    msg_parts = [f"Document operation: {operation}"]
    for key, value in context.items():
        if key != "operation":
            msg_parts.append(f"{key}={value}")

    message = " | ".join(msg_parts)

    # "extra" keys must not collide with LogRecord attributes
    record_extra = {f"doc_{key}": value for key, value in context.items()}

    if error:
        logger.error(message, extra=record_extra, exc_info=exc)
    elif field:
        logger.warning(message, extra=record_extra)
    else:
        logger.info(message, extra=record_extra)
