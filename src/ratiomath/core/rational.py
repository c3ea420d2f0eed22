"""Exact rational numbers over fixed-width integer representations.

A :class:`Rational` stores its numerator and denominator as NumPy scalars of
one integer dtype and keeps them in canonical form:

- the denominator is never zero and always positive (the sign lives in the
  numerator);
- numerator and denominator are coprime;
- zero is stored as ``0/1``.

Every constructor and every operator goes through :func:`_canonical`, so two
rationals are equal exactly when their fields are. Arithmetic is bounded by
the representation: overflow inside an operation is reported (or not) by
NumPy according to the ``overflow`` option, and an operand that does not fit
the promoted representation raises OverflowError instead of wrapping.
"""

from __future__ import annotations

import operator
from fractions import Fraction
from typing import Any, Callable, Optional, Tuple

import numpy as np

from ..foundation.exceptions import DivisionByZero, RepresentationError
from ..foundation.traits import (
    common_type,
    floating_dtype,
    integral_dtype,
    is_integral_value,
    result_dtype,
)
from ..runtime.logging_utils import get_logger
from .options import get_options
from .scalar import gcd, ipow, round_half_away

_logger = get_logger()


def _division_by_zero(message: str) -> DivisionByZero:
    _logger.debug("DivisionByZero: %s", message)
    return DivisionByZero(message)


def _cast(value, dtype: np.dtype) -> np.generic:
    """``value`` in ``dtype``, raising OverflowError when it does not fit.

    Goes through a Python int: NumPy range-checks that conversion, while
    scalar-to-scalar casts wrap silently.
    """
    return dtype.type(int(value))


def _narrow(value: int, dtype: np.dtype) -> np.generic:
    info = np.iinfo(dtype)
    if info.min <= value <= info.max:
        return dtype.type(value)
    # Only the negated minimum of a signed type lands here.
    with np.errstate(over=get_options().overflow):
        return -dtype.type(-value)


def _canonical(numer, denom, dtype: np.dtype) -> Tuple[np.generic, np.generic]:
    """Canonical ``(numer, denom)`` of ``numer/denom`` in ``dtype``.

    Sign flip and reduction run on exact Python ints, so every value the
    representation can hold (its minimum included) normalizes exactly.
    """
    numer, denom = int(_cast(numer, dtype)), int(_cast(denom, dtype))
    if denom == 0:
        raise _division_by_zero(f"zero denominator in {numer}/{denom}")
    if numer == 0:
        return dtype.type(0), dtype.type(1)
    if denom < 0:
        numer, denom = -numer, -denom
    divisor = gcd(abs(numer), denom)
    return _narrow(numer // divisor, dtype), _narrow(denom // divisor, dtype)


# (a/b, c/d) -> unnormalized (numer, denom)
def _add(a, b, c, d):
    return a * d + c * b, b * d


def _sub(a, b, c, d):
    return a * d - c * b, b * d


def _mul(a, b, c, d):
    return a * c, b * d


def _div(a, b, c, d):
    if c == 0:
        raise _division_by_zero("division by a zero rational")
    return a * d, b * c


class Rational:
    """An exact fraction ``numer/denom`` over a fixed-width integer dtype.

    Args:
        numer: integral numerator (Python int or NumPy integer scalar)
        denom: integral denominator, default 1
        dtype: integer representation. Defaults to the common representation
            of the NumPy arguments, or the ``default_dtype`` option when both
            arguments are plain ints.

    Raises:
        DivisionByZero: ``denom == 0``
        RepresentationError: non-integral arguments or representation

    Example:
        >>> Rational(2, -4)
        Rational(-1, 2, dtype='int64')
        >>> Rational(1, 2) + 1
        Rational(3, 2, dtype='int64')
    """

    __slots__ = ("_numer", "_denom")

    # NumPy scalars on the left of an operator defer to our reflected methods.
    __array_ufunc__ = None

    def __init__(self, numer, denom=1, *, dtype=None):
        for value in (numer, denom):
            if not is_integral_value(value):
                raise RepresentationError(
                    f"Rational() takes integral arguments, got {type(value).__name__}: {value!r}"
                )
        if dtype is not None:
            resolved = integral_dtype(dtype)
        else:
            resolved = result_dtype(numer, denom)
            if resolved is None:
                resolved = integral_dtype(get_options().default_dtype)
        self._assign(numer, denom, resolved)

    def _assign(self, numer, denom, dtype: np.dtype) -> None:
        numer, denom = _canonical(numer, denom, dtype)
        object.__setattr__(self, "_numer", numer)
        object.__setattr__(self, "_denom", denom)

    @classmethod
    def _from_pair(cls, numer, denom, dtype: np.dtype) -> "Rational":
        instance = object.__new__(cls)
        instance._assign(numer, denom, dtype)
        return instance

    # ------------------------------------------------------------------
    # Constructors

    @classmethod
    def from_integer(cls, value, dtype=None) -> "Rational":
        return cls(value, 1, dtype=dtype)

    @classmethod
    def from_fraction(cls, value: Fraction, dtype=None) -> "Rational":
        """Exact conversion from :class:`fractions.Fraction`."""
        if not isinstance(value, Fraction):
            raise RepresentationError(
                f"from_fraction() expects a Fraction, got {type(value).__name__}"
            )
        return cls(value.numerator, value.denominator, dtype=dtype)

    def astype(self, dtype) -> "Rational":
        """The same value re-normalized in another integer representation."""
        return Rational(int(self._numer), int(self._denom), dtype=dtype)

    # ------------------------------------------------------------------
    # Fields

    @property
    def numer(self) -> np.generic:
        return self._numer

    @property
    def denom(self) -> np.generic:
        return self._denom

    numerator = numer
    denominator = denom

    @property
    def dtype(self) -> np.dtype:
        return self._numer.dtype

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Rational._from_pair, (self._numer, self._denom, self.dtype))

    def __copy__(self) -> "Rational":
        return self

    def __deepcopy__(self, memo) -> "Rational":
        return self

    # ------------------------------------------------------------------
    # Conversions

    def as_fraction(self) -> Fraction:
        return Fraction(int(self._numer), int(self._denom))

    def to_float(self, dtype=None) -> np.floating:
        """``numer / denom`` as a floating-point division in ``dtype``.

        ``dtype`` is ``float32``/``single``, ``float64``/``double`` or
        ``longdouble``/``extended``; defaults to the ``float_dtype`` option.
        Never fails, but the result is only the nearest representable value.
        """
        if dtype is None:
            dtype = get_options().float_dtype
        make = floating_dtype(dtype).type
        return make(self._numer) / make(self._denom)

    def __float__(self) -> float:
        return float(self.to_float("float64"))

    def __int__(self) -> int:
        quotient = abs(int(self._numer)) // int(self._denom)
        return -quotient if self._numer < 0 else quotient

    def __bool__(self) -> bool:
        return bool(self._numer != 0)

    def __round__(self, ndigits: Optional[int] = None):
        if ndigits is None:
            return round_half_away(self.to_float())
        return np.round(self.to_float(), ndigits)

    def __floor__(self):
        return np.floor(self.to_float())

    def __ceil__(self):
        return np.ceil(self.to_float())

    def __trunc__(self):
        return np.trunc(self.to_float())

    # ------------------------------------------------------------------
    # Representation

    def __repr__(self) -> str:
        return f"Rational({self._numer}, {self._denom}, dtype='{self.dtype.name}')"

    def __str__(self) -> str:
        if self._denom == 1:
            return str(self._numer)
        return f"{self._numer}/{self._denom}"

    def __hash__(self) -> int:
        # Matches hash(int) and hash(Fraction) for equal values.
        return hash(self.as_fraction())

    # ------------------------------------------------------------------
    # Comparisons (exact, on Python ints)

    def _exact_pair(self, other) -> Optional[Tuple[int, int]]:
        if isinstance(other, Rational):
            return int(other._numer), int(other._denom)
        if isinstance(other, (int, np.integer)) and not isinstance(other, bool):
            return int(other), 1
        return None

    def _compare(self, other, op: Callable[[int, int], bool]):
        pair = self._exact_pair(other)
        if pair is None:
            return NotImplemented
        numer, denom = pair
        # Both denominators are positive, so cross-multiplying keeps the order.
        return op(int(self._numer) * denom, numer * int(self._denom))

    def __eq__(self, other):
        pair = self._exact_pair(other)
        if pair is None:
            return NotImplemented
        return (int(self._numer), int(self._denom)) == pair

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    # ------------------------------------------------------------------
    # Arithmetic

    def _coerce(self, other) -> Optional[Tuple[Any, Any, np.dtype]]:
        """``other`` as ``(numer, denom, dtype)`` promoted against ``self``."""
        if isinstance(other, Rational):
            return other._numer, other._denom, common_type(self.dtype, other.dtype)
        if isinstance(other, bool):
            return None
        if isinstance(other, np.integer):
            return other, 1, common_type(self.dtype, other.dtype)
        if isinstance(other, int):
            return other, 1, self.dtype
        return None

    def _binary(self, other, combine, reflected: bool = False):
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        other_numer, other_denom, dtype = coerced
        a, b = _cast(self._numer, dtype), _cast(self._denom, dtype)
        c, d = _cast(other_numer, dtype), _cast(other_denom, dtype)
        if reflected:
            a, b, c, d = c, d, a, b
        with np.errstate(over=get_options().overflow):
            numer, denom = combine(a, b, c, d)
        return Rational._from_pair(numer, denom, dtype)

    def __add__(self, other):
        return self._binary(other, _add)

    def __radd__(self, other):
        return self._binary(other, _add, reflected=True)

    def __sub__(self, other):
        return self._binary(other, _sub)

    def __rsub__(self, other):
        return self._binary(other, _sub, reflected=True)

    def __mul__(self, other):
        return self._binary(other, _mul)

    def __rmul__(self, other):
        return self._binary(other, _mul, reflected=True)

    def __truediv__(self, other):
        return self._binary(other, _div)

    def __rtruediv__(self, other):
        return self._binary(other, _div, reflected=True)

    def __neg__(self) -> "Rational":
        with np.errstate(over=get_options().overflow):
            numer = -self._numer
        return Rational._from_pair(numer, self._denom, self.dtype)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        with np.errstate(over=get_options().overflow):
            numer = abs(self._numer)
        return Rational._from_pair(numer, self._denom, self.dtype)

    def reciprocal(self) -> "Rational":
        """``denom/numer``; raises DivisionByZero for a zero rational."""
        if self._numer == 0:
            raise _division_by_zero("reciprocal of a zero rational")
        return Rational._from_pair(self._denom, self._numer, self.dtype)

    def __pow__(self, exponent):
        if not is_integral_value(exponent):
            return NotImplemented
        exponent = int(exponent)
        if exponent == 0:
            return Rational._from_pair(1, 1, self.dtype)
        if exponent < 0:
            return self.reciprocal() ** -exponent
        with np.errstate(over=get_options().overflow):
            numer = ipow(self._numer, exponent)
            denom = ipow(self._denom, exponent)
        return Rational._from_pair(numer, denom, self.dtype)


def rational_literal(value) -> Rational:
    """``n -> Rational(n, 1)`` in the literal representation.

    Stands in for an integer-literal suffix: ``3 / rational_literal(5)`` is
    rational division rather than integer division.

    Example:
        >>> 2 / rational_literal(3)
        Rational(2, 3, dtype='int64')
    """
    return Rational(value, 1, dtype=get_options().literal_dtype)


__all__ = ["Rational", "rational_literal"]
