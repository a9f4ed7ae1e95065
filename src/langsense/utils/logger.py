"""Structured logging configuration using structlog."""

from typing import Any

from langsense.core.config import settings
from langsense.core.structured_logging import configure_logging
from langsense.core.structured_logging import get_logger as _get_logger

# Initialize logging on module import
configure_logging(
    log_format=settings.log_format,
    log_level=settings.log_level,
)


def get_logger(name: str) -> Any:
    """Get a logger instance with the given name."""
    return _get_logger(name)


def set_log_level(log_level: str) -> None:
    """Reconfigure logging, e.g. after ``--verbose`` on the command line."""
    settings.log_level = log_level
    configure_logging(log_format=settings.log_format, log_level=log_level)


def log_performance(operation: str, duration_ms: float, **kwargs: Any) -> None:
    """Log performance metrics for an operation."""
    logger = _get_logger(__name__)
    logger.info(
        f"PERF: {operation} took {duration_ms:.2f}ms",
        operation=operation,
        duration_ms=duration_ms,
        performance=True,
        **kwargs,
    )


def log_detection_metrics(
    text_length: int,
    candidates: int,
    top_language: str,
    processing_time_ms: float,
) -> None:
    """Log language detection metrics."""
    log_performance(
        "language_detection",
        processing_time_ms,
        text_length=text_length,
        candidates=candidates,
        top_language=top_language,
    )
