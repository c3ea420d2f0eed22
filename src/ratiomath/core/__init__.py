"""Core computational subpackage public exports."""

from .options import ArithmeticOptions, get_options, local_options, set_options
from .rational import Rational, rational_literal
from .rational_math import (
    absolute,
    ceil,
    floor,
    power,
    reciprocal,
    round_,
    sign,
    trunc,
)
from .scalar import (
    clamp,
    degree,
    factorial,
    fibonacci,
    gcd,
    ipow,
    is_even,
    is_odd,
    is_prime,
    lcm,
    mean,
    radian,
    round_half_away,
    sqr,
    total,
)

__all__ = [
    "ArithmeticOptions",
    "get_options",
    "set_options",
    "local_options",
    "Rational",
    "rational_literal",
    "sign",
    "absolute",
    "round_",
    "floor",
    "ceil",
    "trunc",
    "reciprocal",
    "power",
    "gcd",
    "lcm",
    "ipow",
    "total",
    "mean",
    "sqr",
    "clamp",
    "round_half_away",
    "is_even",
    "is_odd",
    "is_prime",
    "fibonacci",
    "factorial",
    "degree",
    "radian",
]
