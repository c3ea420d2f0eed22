"""
pytest配置和fixtures
====================
提供测试基础设施和常用测试数据
"""

import pytest
import sys
import os
from pathlib import Path

# 统一添加 src 根路径，确保测试使用包名 `ratiomath` 导入
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from ratiomath import ArithmeticOptions, Rational, set_options

# 检测运行模式
LEARNING_MODE = os.environ.get("LEARNING_MODE", "0") == "1"


@pytest.fixture(autouse=True)
def default_options():
    """每个测试都从默认配置开始，结束后恢复"""
    previous = set_options(ArithmeticOptions())
    yield
    set_options(previous)


@pytest.fixture
def halves():
    """r1 = 1/2, r2 = 2/4（规范化后相等）"""
    return Rational(1, 2), Rational(2, 4)


@pytest.fixture
def samples():
    """原始测试用例中的一组有理数"""
    return {
        "r1": Rational(1, 2),
        "r2": Rational(2, 4),
        "r3": Rational(1, 3),
        "r4": Rational(5, 1),
        "r5": Rational(-1, 2),
        "r6": Rational(1, -2),
        "r7": Rational(4, 5),
    }


def print_section(title: str):
    """打印章节标题"""
    if LEARNING_MODE:
        print(f"\n{'='*60}")
        print(f"  {title}")
        print(f"{'='*60}")


def print_concept(content: str):
    """打印概念说明"""
    if LEARNING_MODE:
        print(f"\n💡 {content}")


def print_code_example(code: str):
    """打印代码示例"""
    if LEARNING_MODE:
        print(f"\n📝 代码示例:")
        for line in code.strip().split("\n"):
            print(f"   {line}")
