"""
标量数学辅助函数
=====================================
功能：
1. sign / gcd / lcm / ipow：有理数规范化与幂运算依赖的基础函数
2. total / mean / sqr / clamp：通用标量公式
3. is_even / is_odd / is_prime / fibonacci / factorial：整数函数
4. degree / radian：角度换算

所有函数均为纯函数。NumPy 整数标量按其 dtype 提升到共同表示，
普通 Python int 采用对方的表示。
"""

from __future__ import annotations

import operator
from functools import reduce
from typing import Any

import numpy as np

from ..foundation.constants import DEFAULT_REPRESENTATION, PI
from ..foundation.exceptions import (
    ArithmeticDomainError,
    RepresentationError,
)
from ..foundation.traits import (
    greater_of,
    is_floating_value,
    is_integral_value,
    result_dtype,
)


def _require_integral(name: str, *values: Any) -> None:
    for value in values:
        if not is_integral_value(value):
            raise RepresentationError(
                f"{name}() requires integral arguments, got {type(value).__name__}: {value!r}"
            )


def _promote(*values: Any) -> tuple:
    """Cast NumPy operands to their common representation; weak ints stay."""
    dtype = result_dtype(*values)
    if dtype is None:
        return values
    return tuple(dtype.type(value) for value in values)


def _trunc_mod(a, b):
    """Remainder of truncating division: the sign follows the dividend."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _trunc_div(a, b):
    quotient = abs(a) // b
    return -quotient if a < 0 else quotient


# ---- 基础函数 ----


def sign(x) -> int:
    """
    符号函数

    Returns:
        -1、0 或 1

    Example:
        >>> sign(-7)
        -1
    """
    return 1 if x > 0 else -1 if x < 0 else 0


def gcd(a, b):
    """
    计算最大公约数（Greatest Common Divisor）

    欧几里得算法。任一操作数为 0 时按约定返回 0（而非另一个操作数）。
    取余为截断取余（余数符号随被除数），因此负数操作数的结果与
    C 风格实现一致。

    Args:
        a: 第一个整数
        b: 第二个整数

    Returns:
        最大公约数，类型为两者的共同表示

    Raises:
        RepresentationError: 如果操作数不是整数

    Example:
        >>> gcd(12, 8)
        4
        >>> gcd(0, 5)
        0
    """
    _require_integral("gcd", a, b)
    a, b = _promote(a, b)
    if a == 0 or b == 0:
        return a if a == 0 else b
    if a >= b:
        b, remainder = b, _trunc_mod(a, b)
    else:
        b, remainder = a, _trunc_mod(b, a)
    while remainder != 0:
        b, remainder = remainder, _trunc_mod(b, remainder)
    return b


def lcm(a, b):
    """
    计算最小公倍数（Least Common Multiple）

    任一操作数为 0 时按约定返回 1。

    Example:
        >>> lcm(4, 6)
        12
        >>> lcm(0, 6)
        1
    """
    _require_integral("lcm", a, b)
    a, b = _promote(a, b)
    if a == 0 or b == 0:
        return a * 0 + 1
    return a * b // gcd(a, b)


def ipow(base, exponent):
    """
    整数指数幂

    平方-乘法迭代；指数为 0 时返回底数表示下的乘法单位元。
    负指数仅对有乘法逆元的底数（浮点数）有定义。

    Args:
        base: 底数（整数、浮点数或任何支持乘法的值）
        exponent: 整数指数

    Raises:
        RepresentationError: 指数不是整数
        ArithmeticDomainError: 整数底数的负指数

    Example:
        >>> ipow(3, 4)
        81
        >>> ipow(2.0, -2)
        0.25
    """
    _require_integral("ipow", exponent)
    exponent = int(exponent)
    if exponent < 0:
        if is_integral_value(base):
            raise ArithmeticDomainError(
                f"negative exponent {exponent} has no integral result for base {base}"
            )
        return 1 / ipow(base, -exponent)

    result = base * 0 + 1
    while exponent > 0:
        if exponent & 1:
            result = result * base
        exponent >>= 1
        if exponent:
            base = base * base
    return result


# ---- 通用标量公式 ----


def total(*values):
    """Sum of the values in their common representation."""
    if not values:
        raise ArithmeticDomainError("total() requires at least one value")
    if all(is_integral_value(value) for value in values):
        values = _promote(*values)
    return reduce(operator.add, values)


def mean(*values):
    """
    算术平均值

    整数参数使用截断整数除法（结果仍为整数表示），浮点参数使用真除法。
    整数求和在 greater_of(共同表示, int64) 中进行，降低中间溢出的风险。

    Example:
        >>> mean(1, 2, 4)
        2
        >>> mean(1.0, 2.0)
        1.5
    """
    if not values:
        raise ArithmeticDomainError("mean() requires at least one value")
    count = len(values)
    if not all(is_integral_value(value) for value in values):
        return total(*values) / count

    dtype = result_dtype(*values)
    if dtype is None:
        return _trunc_div(sum(values), count)
    wide = greater_of(dtype, DEFAULT_REPRESENTATION)
    accumulated = total(*(wide.type(value) for value in values))
    return dtype.type(_trunc_div(accumulated, count))


def sqr(x):
    return x * x


def clamp(x, lower, upper):
    return lower if x < lower else upper if x > upper else x


def round_half_away(x):
    """Round a floating-point value to the nearest integer, ties away from zero."""
    truncated = np.trunc(x)
    if abs(x - truncated) >= 0.5:
        truncated = truncated + np.copysign(1, x)
    return truncated


# ---- 整数函数 ----


def is_even(n) -> bool:
    _require_integral("is_even", n)
    return not (int(n) & 1)


def is_odd(n) -> bool:
    _require_integral("is_odd", n)
    return bool(int(n) & 1)


def is_prime(n) -> bool:
    """
    素数判定

    试除法：n < 2 不是素数；2 是素数；其余偶数不是素数；
    奇数用奇数因子试除直到 div * div > n。

    Example:
        >>> is_prime(97)
        True
    """
    _require_integral("is_prime", n)
    n = int(n)
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    div = 3
    while div * div <= n:
        if n % div == 0:
            return False
        div += 2
    return True


def fibonacci(n):
    """n-th Fibonacci number, in the representation of ``n``."""
    _require_integral("fibonacci", n)
    if n < 2:
        return n
    previous, current = n * 0, n * 0 + 1
    for _ in range(int(n) - 1):
        previous, current = current, previous + current
    return current


def factorial(n):
    """n! in the representation of ``n``; 1 for every n <= 1."""
    _require_integral("factorial", n)
    result = n * 0 + 1
    k = n
    while k > 1:
        result = result * k
        k = k - 1
    return result


# ---- 角度换算 ----


def _pi_like(x):
    """PI at the precision of ``x``: arccos(-1) in its own dtype for NumPy floats."""
    if isinstance(x, np.floating):
        return np.arccos(x.dtype.type(-1))
    return PI


def degree(x):
    """Radians -> degrees."""
    if not is_floating_value(x):
        raise RepresentationError(
            f"degree() requires a floating-point argument, got {type(x).__name__}"
        )
    return x * 180.0 / _pi_like(x)


def radian(x):
    """Degrees -> radians."""
    if not is_floating_value(x):
        raise RepresentationError(
            f"radian() requires a floating-point argument, got {type(x).__name__}"
        )
    return x * _pi_like(x) / 180.0


__all__ = [
    "sign",
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
