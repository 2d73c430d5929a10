"""structlog setup used by the runner and by every exercise script."""

from __future__ import annotations

import logging
import sys

import structlog

_SHARED_PROCESSORS: list[structlog.typing.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.dev.set_exc_info,
    structlog.processors.TimeStamper(fmt="iso"),
]


def configure_structlog(log_level: str = "INFO", *, colors: bool | None = None) -> None:
    """
    Render events as console lines on stdout.

    An exercise prints nothing but its log events, so forwarding a child's
    stdout is enough to show what it did. Colours default to on only when
    stdout is a terminal; an unknown ``log_level`` means INFO.
    """
    if colors is None:
        colors = sys.stdout.isatty()
    threshold = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.dev.ConsoleRenderer(colors=colors)],
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
