#!/usr/bin/env python
"""
命令行工具：有理数规范化、倒数、幂、浮点转换与取整

用法:
    python -m ratiomath.interface.cli normalize 4 -6
    python -m ratiomath.interface.cli pow 6 -7 -2 --dtype int32
    python -m ratiomath.interface.cli to-float 1 3 --float-dtype single
    python -m ratiomath.interface.cli round 5 2 --mode floor
    python -m ratiomath.interface.cli gcd 12 18

分子与分母作为两个独立的整数参数传入，不解析 "a/b" 形式的字符串。
"""

import argparse
import sys
from typing import List, Optional

from .. import __version__
from ..core import rational_math
from ..core.options import set_options
from ..core.rational import Rational
from ..core.scalar import gcd, lcm
from ..foundation.constants import FLOAT_ALIASES, FLOAT_REPRESENTATIONS, INTEGRAL_REPRESENTATIONS
from ..foundation.exceptions import RatioMathError

_ROUNDING = {
    "round": rational_math.round_,
    "floor": rational_math.floor,
    "ceil": rational_math.ceil,
    "trunc": rational_math.trunc,
}


def _rational(args) -> Rational:
    return Rational(args.numer, args.denom, dtype=args.dtype)


def normalize_command(args):
    """规范化命令"""
    print(_rational(args))
    return 0


def reciprocal_command(args):
    """倒数命令"""
    print(rational_math.reciprocal(_rational(args)))
    return 0


def pow_command(args):
    """幂命令"""
    print(rational_math.power(_rational(args), args.exponent))
    return 0


def to_float_command(args):
    """浮点转换命令"""
    print(_rational(args).to_float(args.float_dtype))
    return 0


def round_command(args):
    """取整命令"""
    print(_ROUNDING[args.mode](_rational(args), args.float_dtype))
    return 0


def gcd_command(args):
    print(gcd(args.a, args.b))
    return 0


def lcm_command(args):
    print(lcm(args.a, args.b))
    return 0


def _add_rational_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("numer", type=int, help="分子")
    parser.add_argument("denom", type=int, help="分母")
    parser.add_argument(
        "--dtype",
        choices=INTEGRAL_REPRESENTATIONS,
        default=None,
        help="整数表示（默认 int64）",
    )


def _add_float_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--float-dtype",
        choices=FLOAT_REPRESENTATIONS + tuple(FLOAT_ALIASES),
        default=None,
        help="浮点表示（默认 float64）",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ratiomath",
        description="ratiomath: 定宽整数上的精确有理数运算",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"ratiomath {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="输出调试日志"
    )

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    normalize_parser = subparsers.add_parser("normalize", help="输出规范形式 n/d")
    _add_rational_arguments(normalize_parser)
    normalize_parser.set_defaults(handler=normalize_command)

    reciprocal_parser = subparsers.add_parser("reciprocal", help="输出倒数")
    _add_rational_arguments(reciprocal_parser)
    reciprocal_parser.set_defaults(handler=reciprocal_command)

    pow_parser = subparsers.add_parser("pow", help="整数次幂（可为负数）")
    _add_rational_arguments(pow_parser)
    pow_parser.add_argument("exponent", type=int, help="整数指数")
    pow_parser.set_defaults(handler=pow_command)

    float_parser = subparsers.add_parser("to-float", help="转换为浮点数")
    _add_rational_arguments(float_parser)
    _add_float_argument(float_parser)
    float_parser.set_defaults(handler=to_float_command)

    round_parser = subparsers.add_parser("round", help="经浮点转换后取整")
    _add_rational_arguments(round_parser)
    _add_float_argument(round_parser)
    round_parser.add_argument(
        "--mode", choices=tuple(_ROUNDING), default="round", help="取整方式"
    )
    round_parser.set_defaults(handler=round_command)

    gcd_parser = subparsers.add_parser("gcd", help="最大公约数")
    gcd_parser.add_argument("a", type=int)
    gcd_parser.add_argument("b", type=int)
    gcd_parser.set_defaults(handler=gcd_command)

    lcm_parser = subparsers.add_parser("lcm", help="最小公倍数")
    lcm_parser.add_argument("a", type=int)
    lcm_parser.add_argument("b", type=int)
    lcm_parser.set_defaults(handler=lcm_command)

    return parser


def main(argv: Optional[List[str]] = None):
    """主入口"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.verbose:
        set_options(console_log=True, debug=True)

    try:
        return args.handler(args)
    except (RatioMathError, OverflowError) as exc:
        print(f"❌ 错误：{exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
