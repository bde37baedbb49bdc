"""Structured logging for the scorer.

Development mode prints colorized console lines. Production mode renders
each event as one JSON line and hands it to the stdlib ``logging`` module.
All output goes to stderr so ``ths analyze --json`` keeps stdout clean.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def _min_level(level_name: str) -> int:
    if level_name == "silent":
        return logging.CRITICAL
    return logging.getLevelName(level_name)


def _get_production_processors() -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def _get_dev_processors() -> list[structlog.types.Processor]:
    return [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%H:%M:%S"),
        structlog.dev.ConsoleRenderer(colors=True),
    ]


@lru_cache(maxsize=1)
def _configure_logging(*, is_production: bool, level_name: str) -> None:
    """Configure structlog once per (mode, level) combination."""
    min_level = _min_level(level_name)

    if is_production:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        scorer_logger = logging.getLogger("ths")
        scorer_logger.handlers[:] = [handler]
        scorer_logger.setLevel(min_level)
        scorer_logger.propagate = False

        structlog.configure(
            processors=_get_production_processors(),
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )
    else:
        structlog.configure(
            processors=_get_dev_processors(),
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
            cache_logger_on_first_use=True,
        )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to a module name.

    Example:
        >>> log = get_logger("ths.heuristics.analyze")
        >>> log.debug("text_analyzed", words=120, ai_percentage=64)
    """
    from ths.schemas.config import get_settings

    settings = get_settings()
    _configure_logging(is_production=settings.is_production, level_name=settings.log_level)

    return structlog.get_logger(name)
