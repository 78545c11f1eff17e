"""
Structlog configuration and helpers.

Every component logs through ``get_logger(<area>)`` with dotted event names
(``theme.css.injected``, ``carousel.autoplay.tick``); request handlers add
correlation fields with ``bind_context``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import structlog
from structlog.types import Processor

LOG_FORMATS = ("json", "console")

# Libraries that are chatty at INFO
_QUIET_LOGGERS = ("httpx", "httpcore", "aiosqlite")


def _processors(fmt: str) -> List[Processor]:
    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if fmt == "console"
        else structlog.processors.JSONRenderer(sort_keys=True)
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def setup_logging(
    log_level: Optional[str] = None, log_format: Optional[str] = None
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Level name such as "INFO". Defaults to LOG_LEVEL.
        log_format: "json" or "console". Defaults to LOG_FORMAT; anything
            else falls back to json.
    """
    from arkfolio.infra.config.settings import get_settings

    settings = get_settings()
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    fmt = (log_format or settings.log_format).lower()
    if fmt not in LOG_FORMATS:
        fmt = "json"

    logging.basicConfig(level=level, format="%(message)s")
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    # SQL echo goes through sqlalchemy's own handler
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug_sql else logging.WARNING
    )

    structlog.configure(
        processors=_processors(fmt),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    structlog.get_logger("logging").debug("logging.configured", level=level, format=fmt)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:  # type: ignore[name-defined]
    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_context(**kwargs) -> None:
    """Attach correlation fields (request_id, slug, ...) to later log lines."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
