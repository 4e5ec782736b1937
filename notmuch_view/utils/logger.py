"""Structured logging for the CLI: stderr console events, optional JSONL file.

stdout carries rendered text only, so every handler writes elsewhere.
"""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog

from notmuch_view.config import LOG_FILE, LOG_LEVEL, VERBOSE_LOGGING

BoundLogger = structlog.stdlib.BoundLogger

# Shared by structlog events and records from foreign loggers (bs4)
_PRE_CHAIN = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]

_configured = False


def _level() -> int:
    if VERBOSE_LOGGING:
        return logging.DEBUG
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def _handler(handler: logging.Handler, renderer: Any, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=_PRE_CHAIN)
    )
    return handler


def _configure_logging() -> None:
    global _configured
    if _configured:
        return

    level = _level()
    handlers = [
        _handler(logging.StreamHandler(sys.stderr), structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()), level)
    ]
    if LOG_FILE:
        log_path = Path(LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _handler(logging.FileHandler(log_path, encoding="utf-8"), structlog.processors.JSONRenderer(), level)
        )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        root_logger.addHandler(handler)

    # bs4 warns about markup that looks like a filename or URL
    logging.getLogger("bs4").setLevel(logging.ERROR)

    structlog.configure(
        processors=[
            *_PRE_CHAIN,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str = "notmuch_view", **bindings: Any) -> BoundLogger:
    """Return the structured logger, optionally bound with context."""
    _configure_logging()
    logger = structlog.get_logger(name)
    if bindings:
        logger = logger.bind(**bindings)
    return logger


def bind_context(**context: Any) -> None:
    """Bind context (command, message id) to every event until clear_context()."""
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
