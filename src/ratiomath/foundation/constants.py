"""
全局常量
=====================================
整数/浮点表示名称、默认表示以及溢出策略。
"""

import math

# ---- 表示（representation） ----

# 由普通 Python int 构造有理数时使用的整数表示
DEFAULT_REPRESENTATION = "int64"

# rational_literal() 使用的整数表示
LITERAL_REPRESENTATION = "int64"

# 没有共同整数类型时（int64 与 uint64）回退到的有符号表示
FALLBACK_REPRESENTATION = "int64"

# to_float() 与取整函数的默认浮点表示
DEFAULT_FLOAT_REPRESENTATION = "float64"

INTEGRAL_REPRESENTATIONS = (
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
)

FLOAT_REPRESENTATIONS = ("float32", "float64", "longdouble")

# 单精度 / 双精度 / 扩展精度
FLOAT_ALIASES = {
    "single": "float32",
    "double": "float64",
    "extended": "longdouble",
}

# ---- 溢出策略（numpy.errstate 的 over= 参数） ----

OVERFLOW_IGNORE = "ignore"
OVERFLOW_WARN = "warn"
OVERFLOW_RAISE = "raise"
OVERFLOW_POLICIES = (OVERFLOW_IGNORE, OVERFLOW_WARN, OVERFLOW_RAISE)
DEFAULT_OVERFLOW_POLICY = OVERFLOW_WARN

# ---- 角度换算 ----

PI = math.pi

__all__ = [
    "DEFAULT_REPRESENTATION",
    "LITERAL_REPRESENTATION",
    "FALLBACK_REPRESENTATION",
    "DEFAULT_FLOAT_REPRESENTATION",
    "INTEGRAL_REPRESENTATIONS",
    "FLOAT_REPRESENTATIONS",
    "FLOAT_ALIASES",
    "OVERFLOW_IGNORE",
    "OVERFLOW_WARN",
    "OVERFLOW_RAISE",
    "OVERFLOW_POLICIES",
    "DEFAULT_OVERFLOW_POLICY",
    "PI",
]
