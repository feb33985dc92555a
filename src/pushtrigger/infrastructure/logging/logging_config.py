"""
Logging configuration for pushtrigger.

Configures structlog for human-readable text logging (default) with optional
JSON format. Logs go to stderr so command output on stdout stays clean.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict


def human_readable_renderer(logger: Any, method_name: str, event_dict: EventDict) -> str:
    """Render ``<timestamp> <LEVEL> <logger>: <event> key=value ...``."""
    head = " ".join(
        str(part)
        for part in (
            event_dict.pop("timestamp", None),
            event_dict.pop("level", method_name).upper(),
            f"{event_dict.pop('logger', 'pushtrigger')}:",
            event_dict.pop("event", ""),
        )
        if part
    )
    exception = event_dict.pop("exception", None)

    fields = " ".join(f"{key}={value}" for key, value in sorted(event_dict.items()))
    line = f"{head} {fields}" if fields else head

    return f"{line}\n{exception}" if exception else line


def configure_logging(log_level: str = "INFO", log_format: str = "text") -> None:
    """
    Configure structlog for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Format type - "text" (default) or "json"
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper(), logging.INFO),
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format.lower() == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(human_readable_renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None, **context) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (usually __name__)
        **context: Additional context to bind to the logger

    Returns:
        Configured logger instance
    """
    if name:
        return structlog.get_logger(name, **context)
    return structlog.get_logger(**context)
