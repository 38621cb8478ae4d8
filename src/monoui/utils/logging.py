"""Structured logging for MonoUI, built on structlog.

Log output is either JSON lines (``LOG_FORMAT=json``) or colored console
text. Geometry and color values passed as event fields are rendered in
their text form, so ``logger.debug("clip", rect=rect)`` logs
``rect='0, 0, 10, 10'`` rather than a model repr.
"""

import logging
import sys
from typing import cast

import structlog
from pydantic import BaseModel
from structlog.types import EventDict, Processor, WrappedLogger

from monoui.config import settings


def render_primitives(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Replace value-type fields with their ``str()`` form."""
    for key, value in event_dict.items():
        if isinstance(value, BaseModel):
            event_dict[key] = str(value)
    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name. Defaults to settings.LOG_LEVEL.
        log_format: "console" or "json". Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        render_primitives,
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, named after the calling module by convention."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
