"""
Structured logging setup for langsense.

Log records go to stderr so that CLI output on stdout stays pipeable.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import Processor


def _shared_processors() -> list[Processor]:
    """Processors applied to both structlog and stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _build_renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "simple":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.RichTracebackFormatter(
            show_locals=False, max_frames=5
        ),
    )


def configure_logging(
    log_format: str = "structured",
    log_level: str = "INFO",
    cache_logger_on_first_use: bool = False,
) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        log_format: One of "json", "structured" (colored console) or "simple"
        log_level: The minimum log level to output
        cache_logger_on_first_use: Whether to cache loggers for performance;
            left off by default so that the level can be changed at runtime
    """
    shared_processors = _shared_processors()
    renderer = _build_renderer(log_format)

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_logger_on_first_use,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )
    logging.getLogger().handlers[0].setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=shared_processors,
        )
    )


def get_logger(
    name: Optional[str] = None, **initial_values: Any
) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)
        **initial_values: Initial context values to bind to the logger
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def temporary_context(**values: Any):
    """
    Bind values to every log line emitted inside the block.

    Usage:
        with temporary_context(command="detect"):
            logger.info("Detecting")
    """
    return structlog.contextvars.bound_contextvars(**values)
