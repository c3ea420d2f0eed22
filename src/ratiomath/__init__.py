"""
ratiomath: 定宽整数上的精确有理数运算

主要功能：
- Rational：分子/分母为同一 NumPy 整数表示，构造时始终规范化
  （分母为正、分子分母互素、零为 0/1）
- 有理数与有理数、有理数与整数之间的比较和四则运算（双向、跨表示提升）
- 数学函数：sign、absolute、reciprocal、power，以及经浮点转换的取整函数
- 标量辅助函数：gcd、lcm、ipow 等

快速开始：
    >>> from ratiomath import Rational, rational_literal, power
    >>> Rational(2, 4) * Rational(1, 3)
    Rational(1, 6, dtype='int64')
    >>> power(Rational(6, -7), -2)
    Rational(49, 36, dtype='int64')
    >>> 3 / rational_literal(5)
    Rational(3, 5, dtype='int64')

更多信息：
    - 数值表示与类型提升: ratiomath.foundation.traits
    - 配置: ratiomath.core.options
    - 异常类型: ratiomath.foundation.exceptions
"""

__version__ = "1.0.0"

from .core.options import ArithmeticOptions, get_options, local_options, set_options
from .core.rational import Rational, rational_literal
from .core.rational_math import (
    absolute,
    ceil,
    floor,
    power,
    reciprocal,
    round_,
    sign,
    trunc,
)
from .core.scalar import (
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
    sqr,
    total,
)
from .foundation.exceptions import (
    RatioMathError,
    DivisionByZero,
    RepresentationError,
    ArithmeticDomainError,
    ConfigurationError,
)
from .foundation.constants import (
    DEFAULT_REPRESENTATION,
    LITERAL_REPRESENTATION,
    DEFAULT_FLOAT_REPRESENTATION,
    INTEGRAL_REPRESENTATIONS,
    FLOAT_REPRESENTATIONS,
    OVERFLOW_POLICIES,
    PI,
)
from .foundation.traits import (
    common_type,
    greater_of,
    is_floating_point,
    is_integral,
    lesser_of,
)

__all__ = [
    # 版本
    "__version__",
    # 有理数
    "Rational",
    "rational_literal",
    # 有理数数学函数
    "sign",
    "absolute",
    "round_",
    "floor",
    "ceil",
    "trunc",
    "reciprocal",
    "power",
    # 标量辅助函数
    "gcd",
    "lcm",
    "ipow",
    "total",
    "mean",
    "sqr",
    "clamp",
    "is_even",
    "is_odd",
    "is_prime",
    "fibonacci",
    "factorial",
    "degree",
    "radian",
    # 数值特征
    "is_integral",
    "is_floating_point",
    "common_type",
    "greater_of",
    "lesser_of",
    # 配置
    "ArithmeticOptions",
    "get_options",
    "set_options",
    "local_options",
    # 异常类
    "RatioMathError",
    "DivisionByZero",
    "RepresentationError",
    "ArithmeticDomainError",
    "ConfigurationError",
    # 常数
    "DEFAULT_REPRESENTATION",
    "LITERAL_REPRESENTATION",
    "DEFAULT_FLOAT_REPRESENTATION",
    "INTEGRAL_REPRESENTATIONS",
    "FLOAT_REPRESENTATIONS",
    "OVERFLOW_POLICIES",
    "PI",
]
