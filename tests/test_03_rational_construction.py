"""测试03: 有理数的构造、规范形式与类型转换。

学习目标:
1. 每次构造都会规范化：分母为正、分子分母互素、零存为 0/1
2. 零分母在构造时立即抛出 DivisionByZero
3. 浮点转换是有损但永不失败的投影
"""

import copy
import math
import pickle
from fractions import Fraction

import numpy as np
import pytest

from conftest import print_section, print_concept, print_code_example
from ratiomath import (
    DivisionByZero,
    Rational,
    RepresentationError,
    local_options,
    rational_literal,
)


class TestConstruction:
    def test_numerator_and_denominator(self):
        ratio = Rational(4, 3)
        assert ratio.numer == 4
        assert ratio.denom == 3

    def test_single_integer_has_unit_denominator(self):
        ratio = Rational(5)
        assert ratio.numer == 5
        assert ratio.denom == 1
        assert Rational.from_integer(-9) == Rational(-9, 1)

    def test_numerator_denominator_aliases(self):
        ratio = Rational(6, 8)
        assert (ratio.numerator, ratio.denominator) == (3, 4)

    def test_default_representation(self):
        assert Rational(1, 2).dtype == np.dtype("int64")

    def test_explicit_representation(self):
        ratio = Rational(6, 4, dtype="int16")
        assert ratio.dtype == np.dtype("int16")
        assert isinstance(ratio.numer, np.int16)
        assert isinstance(ratio.denom, np.int16)

    def test_representation_from_numpy_arguments(self):
        assert Rational(np.int8(3), 2).dtype == np.dtype("int8")
        assert Rational(np.int8(3), np.int32(2)).dtype == np.dtype("int32")
        assert Rational(np.uint64(3), np.int64(2)).dtype == np.dtype("int64")

    @pytest.mark.parametrize("numer", [0, 1, -1, 7, -123456])
    def test_zero_denominator(self, numer):
        with pytest.raises(DivisionByZero):
            Rational(numer, 0)

    def test_division_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            Rational(1, 0, dtype="uint8")

    @pytest.mark.parametrize("bad", [1.5, "3", True, Fraction(1, 2), None])
    def test_non_integral_arguments(self, bad):
        with pytest.raises(RepresentationError):
            Rational(bad)
        with pytest.raises(RepresentationError):
            Rational(1, bad)

    @pytest.mark.parametrize("dtype", ["float64", "single", "bool", "nonsense"])
    def test_non_integral_representation(self, dtype):
        with pytest.raises(RepresentationError):
            Rational(1, 2, dtype=dtype)

    def test_out_of_range_for_representation(self):
        with pytest.raises(OverflowError):
            Rational(300, 1, dtype="int8")
        with pytest.raises(OverflowError):
            Rational(-1, 2, dtype="uint8")


class TestCanonicalForm:
    @pytest.mark.parametrize(
        "numer,denom,expected",
        [
            (2, 4, (1, 2)),
            (1, -2, (-1, 2)),
            (-1, 2, (-1, 2)),
            (-6, -8, (3, 4)),
            (0, 5, (0, 1)),
            (0, -7, (0, 1)),
            (10, 5, (2, 1)),
            (-9, 3, (-3, 1)),
        ],
    )
    def test_normalization(self, numer, denom, expected):
        ratio = Rational(numer, denom)
        assert (ratio.numer, ratio.denom) == expected

    @pytest.mark.parametrize("a", [1, -2, 3, 5, -7, 11])
    @pytest.mark.parametrize("b", [1, 2, -3, 4, 9])
    @pytest.mark.parametrize("k", [1, -1, 2, 6, -15])
    def test_scaled_pairs_reduce_to_same_value(self, a, b, k):
        scaled = Rational(a * k, b * k)
        assert scaled == Rational(a, b)
        assert scaled.denom > 0
        assert math.gcd(abs(int(scaled.numer)), int(scaled.denom)) == 1

    def test_sign_lives_in_numerator(self):
        print_section("符号约定")
        print_concept("负分母会把符号移到分子上")
        left, right = Rational(-1, 2), Rational(1, -2)
        print_code_example(f"Rational(-1, 2) = {left!r}\nRational(1, -2) = {right!r}")
        assert left == right
        assert (right.numer, right.denom) == (-1, 2)

    @pytest.mark.parametrize("dtype", ["int8", "int16", "int32", "int64"])
    def test_canonical_in_every_signed_representation(self, dtype):
        ratio = Rational(-12, -18, dtype=dtype)
        assert (ratio.numer, ratio.denom) == (2, 3)
        assert ratio.dtype == np.dtype(dtype)

    @pytest.mark.parametrize("dtype", ["uint8", "uint16", "uint32", "uint64"])
    def test_canonical_in_every_unsigned_representation(self, dtype):
        ratio = Rational(12, 18, dtype=dtype)
        assert (ratio.numer, ratio.denom) == (2, 3)

    @pytest.mark.parametrize("dtype", ["int8", "int16", "int32", "int64"])
    def test_minimum_value_is_canonical(self, dtype):
        print_section("最小值的规范化")
        print_concept("符号翻转与约分在精确整数上进行，最小值不会被 abs 回绕")
        low = int(np.iinfo(dtype).min)
        third = Rational(low, 3, dtype=dtype)
        print_code_example(f"Rational({low}, 3, dtype={dtype!r}) = {third!r}")
        assert (third.numer, third.denom) == (low, 3)
        assert third < 0
        assert third < Rational(1, 3, dtype=dtype)

        whole = Rational(low, 1, dtype=dtype)
        assert (whole.numer, whole.denom) == (low, 1)

        half = Rational(low, 2, dtype=dtype)
        assert (half.numer, half.denom) == (low // 2, 1)
        assert Rational(low, -2, dtype=dtype) == -(low // 2)

    @pytest.mark.parametrize("dtype", ["int8", "int16", "int32", "int64"])
    def test_negated_minimum_follows_overflow_policy(self, dtype):
        low = int(np.iinfo(dtype).min)
        with local_options(overflow="raise"):
            with pytest.raises(FloatingPointError):
                Rational(low, -1, dtype=dtype)


class TestValueSemantics:
    def test_immutable(self):
        ratio = Rational(1, 2)
        with pytest.raises(AttributeError):
            ratio.numer = 3
        with pytest.raises(AttributeError):
            ratio._denom = 3
        with pytest.raises(AttributeError):
            del ratio._numer

    def test_hash_matches_equal_values(self):
        assert hash(Rational(2, 4)) == hash(Rational(1, 2, dtype="int8"))
        assert hash(Rational(10, 2)) == hash(5)
        assert hash(Rational(3, 4)) == hash(Fraction(3, 4))
        assert len({Rational(1, 2), Rational(2, 4), Rational(-1, -2)}) == 1

    def test_copy_and_pickle(self):
        ratio = Rational(-3, 9, dtype="int16")
        assert copy.copy(ratio) is ratio
        assert copy.deepcopy(ratio) is ratio
        restored = pickle.loads(pickle.dumps(ratio))
        assert restored == ratio
        assert restored.dtype == np.dtype("int16")

    def test_repr_and_str(self):
        assert repr(Rational(2, -4)) == "Rational(-1, 2, dtype='int64')"
        assert repr(Rational(3, dtype="uint8")) == "Rational(3, 1, dtype='uint8')"
        assert str(Rational(6, 4)) == "3/2"
        assert str(Rational(-8, 2)) == "-4"

    def test_astype(self):
        ratio = Rational(6, 4).astype("int8")
        assert ratio == Rational(3, 2)
        assert ratio.dtype == np.dtype("int8")
        with pytest.raises(OverflowError):
            Rational(1000, 3).astype("int8")

    def test_fraction_interop(self):
        assert Rational(6, -4).as_fraction() == Fraction(-3, 2)
        ratio = Rational.from_fraction(Fraction(10, 4), dtype="int32")
        assert (ratio.numer, ratio.denom) == (5, 2)
        assert ratio.dtype == np.dtype("int32")
        with pytest.raises(RepresentationError):
            Rational.from_fraction(0.5)


class TestConversions:
    def test_float_casts(self):
        print_section("浮点转换")
        print_concept("single / double / extended 三种浮点表示")
        r1 = Rational(1, 2)
        print_code_example(
            f"single={r1.to_float('single')!r}, double={float(r1)!r}, "
            f"extended={r1.to_float('extended')!r}"
        )
        assert float(r1) == 0.5
        assert r1.to_float("float32") == np.float32(0.5)
        assert r1.to_float("double") == 0.5
        assert r1.to_float("longdouble") == 0.5

    def test_float_cast_representation(self):
        ratio = Rational(1, 3)
        assert ratio.to_float("single").dtype == np.dtype("float32")
        assert ratio.to_float().dtype == np.dtype("float64")
        assert ratio.to_float("extended").dtype == np.dtype(np.longdouble)
        assert float(ratio) == 1 / 3

    def test_float_cast_rejects_integral_representation(self):
        with pytest.raises(RepresentationError):
            Rational(1, 3).to_float("int32")

    def test_int_truncates_toward_zero(self):
        assert int(Rational(7, 2)) == 3
        assert int(Rational(-7, 2)) == -3
        assert int(Rational(-8, 2)) == -4

    def test_bool(self):
        assert not Rational(0, 3)
        assert Rational(-1, 3)


class TestLiteral:
    def test_literal_has_unit_denominator(self):
        ratio = rational_literal(7)
        assert (ratio.numer, ratio.denom) == (7, 1)
        assert ratio.dtype == np.dtype("int64")

    def test_literal_makes_division_rational(self):
        assert 2 / rational_literal(3) == Rational(2, 3, dtype="uint64")
        assert rational_literal(1) / 8 == Rational(1, 8, dtype="uint64")
        assert 3 / rational_literal(5) == rational_literal(3) / 5
        assert -27 / rational_literal(512) == Rational(-27, 512)

    def test_literal_rejects_non_integers(self):
        with pytest.raises(RepresentationError):
            rational_literal(2.5)
