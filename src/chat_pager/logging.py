"""Structured logging for chat_pager.

This module provides a configured structlog logger with JSON output
for production and pretty console output for development.
"""

import logging
import sys
from typing import Any

import structlog

__all__ = [
    "configure_logging",
    "get_logger",
    "render_load_range",
]


def render_load_range(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Collapse start/end id pairs into a single "start..end" range field."""
    if "start" in event_dict and "end" in event_dict:
        start = event_dict.pop("start")
        end = event_dict.pop("end")
        event_dict["range"] = f"{start}..{end}"
    return event_dict


def configure_logging(
    level: int | str = logging.INFO,
    json_output: bool = False,
    add_timestamp: bool = True,
) -> None:
    """Configure structlog for the application.

    Args:
        level: Logging level, as a number or a name such as "DEBUG" (default: INFO)
        json_output: If True, output JSON; if False, pretty console output
        add_timestamp: If True, add ISO timestamp to log entries
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        render_load_range,
    ]

    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_output:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    # Event-loop debug chatter is not useful next to fetch events
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a configured structlog logger.

    Args:
        name: Logger name (usually __name__ of the calling module)

    Returns:
        Configured structlog BoundLogger instance
    """
    return structlog.get_logger(name)


_configured = False


def _ensure_configured() -> None:
    """Ensure logging is configured with defaults."""
    global _configured
    if not _configured:
        configure_logging()
        _configured = True


_ensure_configured()
