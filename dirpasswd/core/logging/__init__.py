"""
Logging configuration module for structured logging.

This module configures the application's logging system using structlog on
top of the standard library logger. Output goes to stderr so that stdout
stays reserved for prompts and user-facing messages.

The logging configuration includes:
- Timestamp formatting
- Log level inclusion and filtering
- JSON/Console output based on settings
"""

import logging
import sys
from typing import Optional

import structlog

from dirpasswd.core.config.settings import settings


def configure_logging(log_level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """
    Configures the application's logging system.

    Explicit arguments win over the settings, which lets the command line
    raise verbosity without touching the environment.

    Args:
        log_level: Level name such as "DEBUG"; defaults to settings.LOG_LEVEL.
        json_logs: Render JSON lines instead of console output; defaults to
            settings.LOG_JSON.
    """
    level_name = (log_level or settings.LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    use_json = settings.LOG_JSON if json_logs is None else json_logs

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer(colors=False),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Create a singleton logger instance for the application
logger = structlog.get_logger()
