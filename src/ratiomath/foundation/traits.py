"""Numeric trait layer.

Representations are NumPy dtypes drawn from a closed set: the fixed-width
integer dtypes ``int8`` ... ``uint64`` and the floating-point dtypes
``float32`` (single), ``float64`` (double) and ``longdouble`` (extended).

Plain Python ints are *weak*: they carry no representation of their own and
adopt the representation of whatever they are combined with. NumPy integer
scalars carry their dtype.
"""

from __future__ import annotations

import numbers
from typing import Any, Optional

import numpy as np

from ..runtime.logging_utils import get_logger
from .constants import (
    FALLBACK_REPRESENTATION,
    FLOAT_ALIASES,
    FLOAT_REPRESENTATIONS,
    INTEGRAL_REPRESENTATIONS,
)
from .exceptions import RepresentationError

_logger = get_logger()

_INTEGRAL_KINDS = frozenset("iu")
_FLOAT_KINDS = frozenset("f")
_SUPPORTED = frozenset(
    np.dtype(name) for name in INTEGRAL_REPRESENTATIONS + FLOAT_REPRESENTATIONS
)


def as_dtype(rep: Any) -> np.dtype:
    """Resolve a representation spelling to a supported NumPy dtype.

    Accepts dtypes, NumPy scalar types, dtype names, the Python types ``int``
    and ``float`` and the aliases ``single``/``double``/``extended``.
    """
    if isinstance(rep, str):
        rep = FLOAT_ALIASES.get(rep.strip().lower(), rep.strip())
    elif not isinstance(rep, (type, np.dtype)):
        raise RepresentationError(
            f"Not a representation: {rep!r} ({type(rep).__name__})"
        )
    try:
        dtype = np.dtype(rep)
    except (TypeError, ValueError) as exc:
        raise RepresentationError(f"Unknown representation: {rep!r}") from exc
    if dtype not in _SUPPORTED:
        raise RepresentationError(
            f"Unsupported representation: {dtype}. Supported: "
            f"{', '.join(INTEGRAL_REPRESENTATIONS + FLOAT_REPRESENTATIONS)}"
        )
    return dtype


def integral_dtype(rep: Any) -> np.dtype:
    dtype = as_dtype(rep)
    if dtype.kind not in _INTEGRAL_KINDS:
        raise RepresentationError(f"{dtype} is not an integral representation")
    return dtype


def floating_dtype(rep: Any) -> np.dtype:
    dtype = as_dtype(rep)
    if dtype.kind not in _FLOAT_KINDS:
        raise RepresentationError(f"{dtype} is not a floating-point representation")
    return dtype


def _kind(item: Any) -> str:
    """Dtype kind of a value or representation; '' when it is neither."""
    if isinstance(item, (bool, np.bool_)):
        return "b"
    if isinstance(item, numbers.Integral):
        return "i"
    if isinstance(item, (float, np.floating)):
        return item.dtype.kind if isinstance(item, np.generic) else "f"
    if isinstance(item, (str, type, np.dtype)):
        try:
            return as_dtype(item).kind
        except RepresentationError:
            return ""
    return ""


def is_integral(*items: Any) -> bool:
    """True when every value/representation given is integral (bool excluded)."""
    return bool(items) and all(_kind(item) in _INTEGRAL_KINDS for item in items)


def is_floating_point(*items: Any) -> bool:
    """True when every value/representation given is floating-point."""
    return bool(items) and all(_kind(item) in _FLOAT_KINDS for item in items)


def is_integral_value(value: Any) -> bool:
    """True for Python ints and NumPy integer scalars (bool excluded)."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_floating_value(value: Any) -> bool:
    return isinstance(value, (float, np.floating))


def common_type(*reps: Any) -> np.dtype:
    """Common representation the given representations promote to.

    Follows ``numpy.result_type``. Integral inputs always promote to an
    integral result: ``int64`` with ``uint64`` has none in NumPy, so the
    widest signed representation is used instead.
    """
    if not reps:
        raise RepresentationError("common_type() requires at least one representation")
    dtypes = [as_dtype(rep) for rep in reps]
    result = np.result_type(*dtypes)
    if result.kind not in _INTEGRAL_KINDS and all(
        dtype.kind in _INTEGRAL_KINDS for dtype in dtypes
    ):
        _logger.debug(
            "No integral common type for %s, using %s",
            ", ".join(dtype.name for dtype in dtypes),
            FALLBACK_REPRESENTATION,
        )
        return np.dtype(FALLBACK_REPRESENTATION)
    return result


def dtype_of(value: Any) -> Optional[np.dtype]:
    """Representation carried by a value, or None for a weak Python int."""
    if isinstance(value, (bool, np.bool_)):
        raise RepresentationError("bool is not a numeric representation")
    if isinstance(value, np.generic):
        return as_dtype(value.dtype)
    if isinstance(value, int):
        return None
    if isinstance(value, float):
        return np.dtype("float64")
    dtype = getattr(value, "dtype", None)
    if isinstance(dtype, np.dtype):
        return as_dtype(dtype)
    raise RepresentationError(f"Unsupported operand type: {type(value).__name__}")


def result_dtype(*values: Any) -> Optional[np.dtype]:
    """Common representation of a set of values; None when all are weak."""
    dtypes = [dtype for dtype in (dtype_of(value) for value in values) if dtype is not None]
    if not dtypes:
        return None
    return common_type(*dtypes)


def greater_of(first: Any, second: Any) -> np.dtype:
    """The representation with the larger storage width (ties pick ``first``)."""
    a, b = as_dtype(first), as_dtype(second)
    return a if a.itemsize >= b.itemsize else b


def lesser_of(first: Any, second: Any) -> np.dtype:
    """The representation with the smaller storage width (ties pick ``first``)."""
    a, b = as_dtype(first), as_dtype(second)
    return a if a.itemsize <= b.itemsize else b


__all__ = [
    "as_dtype",
    "integral_dtype",
    "floating_dtype",
    "is_integral",
    "is_floating_point",
    "is_integral_value",
    "is_floating_value",
    "common_type",
    "dtype_of",
    "result_dtype",
    "greater_of",
    "lesser_of",
]
