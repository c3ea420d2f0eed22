"""Logging helpers for ratiomath.

Goal: keep library output quiet by default, and only emit
logs to console when the options ask for it (console_log=True).

We intentionally avoid configuring the root logger.
"""

from __future__ import annotations

import logging
from typing import Optional

_CONSOLE_HANDLER_NAME = "ratiomath_console"
_DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str = "ratiomath") -> logging.Logger:
    return logging.getLogger(name)


def ensure_console_handler(
    logger: logging.Logger,
    *,
    enabled: bool,
    level: int = logging.INFO,
    fmt: str = _DEFAULT_FORMAT,
) -> None:
    """Attach/remove a StreamHandler to `logger` without touching root logging."""

    existing: Optional[logging.Handler] = None
    for h in logger.handlers:
        if getattr(h, "name", None) == _CONSOLE_HANDLER_NAME:
            existing = h
            break

    if not enabled:
        if existing is not None:
            logger.removeHandler(existing)
            logger.propagate = True
        return

    if existing is None:
        handler = logging.StreamHandler()
        handler.name = _CONSOLE_HANDLER_NAME
        handler.setFormatter(logging.Formatter(fmt))
        handler.setLevel(level)
        logger.addHandler(handler)
    else:
        existing.setFormatter(logging.Formatter(fmt))
        existing.setLevel(level)

    logger.setLevel(level)
    # Prevent double-printing if user configured root handlers.
    logger.propagate = False
