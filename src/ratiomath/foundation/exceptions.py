"""
统一的异常类定义
=====================================
为 ratiomath 项目定义自定义异常，便于错误处理和调试

异常层级：
    RatioMathError (基类)
    ├── DivisionByZero - 零分母 / 对零取倒数
    ├── RepresentationError - 不支持的数值表示或非整数操作数
    ├── ArithmeticDomainError - 超出定义域的运算
    └── ConfigurationError - 配置相关错误

子类同时继承对应的内置异常（ZeroDivisionError、TypeError、ValueError），
调用方既可以捕获项目异常，也可以按 Python 的惯用方式捕获。
"""


class RatioMathError(Exception):
    """ratiomath 项目的基础异常类

    所有其他异常都应该继承此类，便于用户捕获所有项目相关的错误。

    Example:
        >>> try:
        ...     r = Rational(1, 0)
        >>> except RatioMathError as e:
        ...     print(f"ratiomath error: {e}")
    """

    pass


class DivisionByZero(RatioMathError, ZeroDivisionError):
    """零除错误

    有理数的分母不能为零。以下情况抛出：

    Examples:
        - Rational(n, 0)
        - r / Rational(0, d) 或 r / 0
        - reciprocal(Rational(0, d))
        - power(Rational(0, d), -n)
    """

    pass


class RepresentationError(RatioMathError, TypeError):
    """数值表示错误

    Examples:
        - 无法识别的 dtype 名称
        - 需要整数表示的位置传入了浮点表示
        - 需要整数操作数的位置传入了 float / bool
    """

    pass


class ArithmeticDomainError(RatioMathError, ValueError):
    """定义域错误

    当运算在给定表示下没有定义时抛出，例如整数底数的负整数次幂
    （整数没有乘法逆元）。
    """

    pass


class ConfigurationError(RatioMathError, ValueError):
    """配置相关错误

    当 ArithmeticOptions 的字段值无效时抛出。
    """

    pass


__all__ = [
    "RatioMathError",
    "DivisionByZero",
    "RepresentationError",
    "ArithmeticDomainError",
    "ConfigurationError",
]
