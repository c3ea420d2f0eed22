"""Math functions over rationals.

Each function accepts a :class:`~ratiomath.core.rational.Rational` and falls
back to the scalar helper for plain numbers, so the same call works for both.
``absolute``, ``reciprocal`` and ``power`` stay exact; the rounding family
goes through a floating-point cast and returns a floating-point scalar.
"""

from __future__ import annotations

import numpy as np

from ..foundation.exceptions import RepresentationError
from ..foundation.traits import floating_dtype, is_floating_value, is_integral_value
from . import scalar
from .options import get_options
from .rational import Rational


def _to_float(x, dtype):
    if isinstance(x, Rational):
        return x.to_float(dtype)
    if not (is_integral_value(x) or is_floating_value(x)):
        raise RepresentationError(f"Cannot round {type(x).__name__}: {x!r}")
    if dtype is None:
        dtype = get_options().float_dtype
    return floating_dtype(dtype).type(x)


def sign(x) -> int:
    """-1, 0 or 1. For a rational this is the sign of the numerator."""
    if isinstance(x, Rational):
        return scalar.sign(x.numer)
    return scalar.sign(x)


def absolute(x):
    """|x|. A rational keeps its denominator, so the result stays canonical."""
    return abs(x)


def round_(x, dtype=None):
    """Nearest integer (ties away from zero) as a floating-point scalar."""
    return scalar.round_half_away(_to_float(x, dtype))


def floor(x, dtype=None):
    return np.floor(_to_float(x, dtype))


def ceil(x, dtype=None):
    return np.ceil(_to_float(x, dtype))


def trunc(x, dtype=None):
    return np.trunc(_to_float(x, dtype))


def reciprocal(x) -> Rational:
    """Exact ``1/x``.

    Raises:
        DivisionByZero: ``x`` is zero
        RepresentationError: ``x`` is neither a rational nor an integer
    """
    if isinstance(x, Rational):
        return x.reciprocal()
    if is_integral_value(x):
        return Rational(1, x)
    raise RepresentationError(
        f"reciprocal() requires a rational or integral argument, got {type(x).__name__}"
    )


def power(base, exponent):
    """``base ** exponent`` for an integral exponent.

    Rationals: ``exponent == 0`` gives 1, positive exponents raise numerator
    and denominator separately, negative exponents use the reciprocal (and
    raise DivisionByZero for a zero base). Other bases use ``scalar.ipow``.
    """
    if not is_integral_value(exponent):
        raise RepresentationError(
            f"power() requires an integral exponent, got {type(exponent).__name__}"
        )
    if isinstance(base, Rational):
        return base ** exponent
    return scalar.ipow(base, exponent)


__all__ = [
    "sign",
    "absolute",
    "round_",
    "floor",
    "ceil",
    "trunc",
    "reciprocal",
    "power",
]
