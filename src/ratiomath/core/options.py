"""Public options objects.

These dataclasses provide a stable way to configure rational arithmetic. The
active options live in a context variable, so threads and asyncio tasks each
see their own settings.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Iterator, Optional

from ..foundation.constants import (
    DEFAULT_FLOAT_REPRESENTATION,
    DEFAULT_OVERFLOW_POLICY,
    DEFAULT_REPRESENTATION,
    LITERAL_REPRESENTATION,
    OVERFLOW_POLICIES,
)
from ..foundation.exceptions import ConfigurationError, RepresentationError
from ..foundation.traits import floating_dtype, integral_dtype
from ..runtime.logging_utils import ensure_console_handler, get_logger

_logger = get_logger()


@dataclass(frozen=True, slots=True)
class ArithmeticOptions:
    """Options that control rational arithmetic."""

    default_dtype: str = DEFAULT_REPRESENTATION
    literal_dtype: str = LITERAL_REPRESENTATION
    float_dtype: str = DEFAULT_FLOAT_REPRESENTATION

    # numpy.errstate(over=...) policy for fixed-width integer overflow
    overflow: str = DEFAULT_OVERFLOW_POLICY

    # Logging
    console_log: bool = False
    debug: bool = False

    def __post_init__(self) -> None:
        try:
            integral_dtype(self.default_dtype)
            integral_dtype(self.literal_dtype)
            floating_dtype(self.float_dtype)
        except RepresentationError as exc:
            raise ConfigurationError(f"Invalid arithmetic options: {exc}") from exc
        if self.overflow not in OVERFLOW_POLICIES:
            raise ConfigurationError(
                f"overflow must be one of: {', '.join(OVERFLOW_POLICIES)}; "
                f"got {self.overflow!r}"
            )


_ACTIVE: ContextVar[ArithmeticOptions] = ContextVar(
    "ratiomath_options", default=ArithmeticOptions()
)


def get_options() -> ArithmeticOptions:
    return _ACTIVE.get()


def set_options(
    options: Optional[ArithmeticOptions] = None, **changes
) -> ArithmeticOptions:
    """Install new options and return the previously active ones.

    ``options`` replaces the active options wholesale; keyword ``changes`` are
    applied on top of it (or on top of the active options).
    """
    previous = _ACTIVE.get()
    base = previous if options is None else options
    try:
        updated = replace(base, **changes)
    except TypeError as exc:
        raise ConfigurationError(f"Unknown arithmetic option: {exc}") from exc

    _ACTIVE.set(updated)
    if (updated.console_log, updated.debug) != (previous.console_log, previous.debug):
        ensure_console_handler(
            _logger,
            enabled=updated.console_log,
            level=logging.DEBUG if updated.debug else logging.INFO,
        )
    _logger.debug("Arithmetic options updated: %s", updated)
    return previous


@contextmanager
def local_options(**changes) -> Iterator[ArithmeticOptions]:
    """Apply option changes for the duration of a ``with`` block."""
    previous = set_options(**changes)
    try:
        yield get_options()
    finally:
        set_options(previous)
