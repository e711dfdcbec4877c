"""
Structured logging for the itinerary parser.

This module provides structured logging using structlog with:
- Pretty console output for development
- JSON output for every other environment
- Control-character escaping so raw model text cannot forge log lines
- Length-capped previews of untrusted text

Examples
--------
>>> from cultural_planner.monitoring import get_logger
>>> logger = get_logger("my_module")
>>> logger.warning("Fallback used", day=2, destination="Agra")
"""

from datetime import datetime
from logging import INFO, StreamHandler, root
from logging.handlers import RotatingFileHandler
from pathlib import Path

from structlog import configure
from structlog import get_logger as struct_logger
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer, RichTracebackFormatter
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    UnicodeDecoder,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import (
    BoundLogger,
    ExtraAdder,
    LoggerFactory,
    PositionalArgumentsFormatter,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)
from structlog.types import EventDict, Processor, WrappedLogger

from cultural_planner.configs.settings import LOG_PREVIEW_LENGTH, settings

# Characters to sanitize to prevent log injection
CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def sanitize_log_message(message: str) -> str:
    r"""
    Remove control characters and sanitize log messages.

    Args:
        message: Raw log message that might contain injection attempts.

    Returns:
        Sanitized message with control characters escaped or removed.

    Examples:
    --------
    >>> sanitize_log_message("Day 1:\n[09:00 AM]")
    'Day 1:\\n[09:00 AM]'
    """
    return str(message).translate(CONTROL_CHARS)


def preview(text: object, limit: int = LOG_PREVIEW_LENGTH) -> str:
    """
    Return a sanitized, length-capped preview of untrusted text.

    Args:
        text: Any value; non-strings are rendered with their type name.
        limit: Maximum number of characters kept.

    Returns:
        A single-line preview suitable for a log event value.
    """
    if not isinstance(text, str):
        return f"<{type(text).__name__}>"
    clipped = text[:limit]
    suffix = "..." if len(text) > limit else ""
    return sanitize_log_message(clipped) + suffix


def add_timestamp(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """
    Add a local timestamp to the log entry.

    Args:
        logger: The wrapped logger instance.
        method_name: The name of the logging method being called.
        event_dict: The event dictionary being built.

    Returns:
        Updated event dictionary with timestamp.
    """
    event_dict["timestamp"] = datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return event_dict


def add_app_name(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag the log entry with the configured application name."""
    event_dict.setdefault("app", settings.APP_NAME)
    return event_dict


def sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """
    Escape control characters in every string value of the event.

    Args:
        logger: The wrapped logger instance.
        method_name: The name of the logging method being called.
        event_dict: The event dictionary being built.

    Returns:
        Sanitized event dictionary.
    """
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = sanitize_log_message(value)
    return event_dict


def get_processors(*, colors: bool = True) -> list[Processor]:
    """
    Get the list of structlog processors based on environment.

    Args:
        colors: Whether to enable colors in ConsoleRenderer.

    Returns:
        List of processors for structlog configuration.
    """
    processors: list[Processor] = [
        filter_by_level,
        merge_contextvars,
        add_log_level,
        add_timestamp,
        add_app_name,
        sanitize_event_dict,
    ]

    if settings.ENVIRONMENT == "development":
        processors.extend(
            [
                ExtraAdder(),
                ConsoleRenderer(
                    colors=colors,
                    pad_level=False,
                    exception_formatter=RichTracebackFormatter(),
                ),
            ],
        )
    else:
        processors.extend(
            [
                ExtraAdder(),
                JSONRenderer(),
            ],
        )

    return processors


def configure_logging() -> None:
    """Configure structured logging for the application."""
    # Clear any existing root handlers to prevent duplicates
    root.handlers.clear()
    root.setLevel(settings.LOG_LEVEL.upper())

    configure(
        processors=[
            filter_by_level,
            merge_contextvars,
            add_logger_name,
            add_log_level,
            add_app_name,
            PositionalArgumentsFormatter(),
            StackInfoRenderer(),
            format_exc_info,
            UnicodeDecoder(),
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    console_handler = StreamHandler()
    console_handler.setFormatter(
        ProcessorFormatter(
            processor=get_processors(colors=True)[-1],
            foreign_pre_chain=[add_log_level, add_timestamp, add_app_name, sanitize_event_dict],
        ),
    )
    root.addHandler(console_handler)
    configure_file_logging()


def configure_file_logging() -> None:
    """Attach a rotating file handler when file logging is enabled."""
    if not settings.LOG_TO_FILE:
        return

    log_file = Path(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
    )
    file_handler.setLevel(INFO)
    file_handler.setFormatter(
        ProcessorFormatter(
            processor=get_processors(colors=False)[-1],
            foreign_pre_chain=[add_log_level, add_timestamp, add_app_name, sanitize_event_dict],
        ),
    )
    root.addHandler(file_handler)


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: The name of the logger (typically __name__).

    Returns:
        Configured structlog BoundLogger instance.

    Examples:
    --------
    >>> logger = get_logger("cultural_planner.services.parser")
    >>> logger.info("Parsed itinerary", days=3)
    """
    return struct_logger(name)
