"""Structured logging configuration using structlog."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel
from structlog.types import EventDict, Processor

APP_NAME = "occmatch"
APP_VERSION = "0.1.0"


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to log entries.

    Args:
        logger: Logger instance
        method_name: Method name
        event_dict: Event dictionary

    Returns:
        Modified event dictionary with app context
    """
    event_dict["app"] = APP_NAME
    event_dict["version"] = APP_VERSION
    return event_dict


def summarize_models(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Shrink pydantic values so log lines stay one record wide.

    Occupation records (anything with a ``code`` and a ``title``) collapse to
    their ANZSCO code; other models are dumped in their camelCase shape.
    """
    for key, value in event_dict.items():
        if not isinstance(value, BaseModel):
            continue
        if hasattr(value, "code") and hasattr(value, "title"):
            event_dict[key] = value.code
        else:
            event_dict[key] = value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return event_dict


@contextmanager
def occupation_context(occupation_code: str) -> Iterator[None]:
    """Tag every log entry emitted inside the block with the occupation code."""
    with structlog.contextvars.bound_contextvars(occupation_code=occupation_code):
        yield


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    log_file: str | Path | None = None,
) -> None:
    """Setup structured logging with structlog.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" or "console")
        log_file: Optional log file path
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        summarize_models,
    ]

    if log_format == "console":
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Logs go to stderr so --json output on stdout stays machine-readable
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))

        root_logger = logging.getLogger()
        root_logger.addHandler(file_handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (defaults to caller's module name)

    Returns:
        Structured logger

    Example:
        logger = get_logger(__name__)
        logger.info("eligibility_evaluated", occupation_code="334111", eligible=False)
    """
    return structlog.get_logger(name)


# Initialize logging on module import with defaults
# Can be reconfigured later with setup_logging()
setup_logging(log_level="WARNING")
