"""
Monitoring module for the cultural planner.

Usage
-----
>>> from cultural_planner.monitoring import configure_logging, get_logger
>>> configure_logging()
>>> logger = get_logger(__name__)
"""

from cultural_planner.monitoring.logging import (
    configure_logging,
    get_logger,
    preview,
    sanitize_log_message,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "preview",
    "sanitize_log_message",
]
