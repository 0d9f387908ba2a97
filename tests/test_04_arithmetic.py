"""Arithmetic tests: exact results, identities, overflow detection and division by zero."""
import itertools
import pytest
from fractions import Fraction
from fixedrational import RationalNumber
from fixedrational.names import INT64_MAX

R = RationalNumber


def test_addition():
    assert R(2, 3) + R(3, 4) == R(17, 12)
    assert R(2, 3).add(R(3, 4)) == R(17, 12)


def test_subtraction():
    assert R(5, 6) - R(7, 8) == R(-1, 24)
    assert R(5, 6).subtract(R(7, 8)) == R(-1, 24)


def test_multiplication():
    assert R(2, 3) * R(3, 4) == R(1, 2)
    assert R(2, 3).multiply(R(3, 4)) == R(1, 2)


def test_division():
    assert R(5, 6) / R(7, 8) == R(20, 21)
    assert R(5, 6).divide(R(7, 8)) == R(20, 21)


def test_negation_and_abs():
    assert -R(3, 4) == R(-3, 4)
    assert R(3, 4).negate() == R(-3, 4)
    assert -RationalNumber.MIN_VALUE == RationalNumber.MAX_VALUE
    value = R(3, 4)
    assert abs(value) is value
    assert abs(R(-3, 4)) == value
    assert R(-3, 4).abs() == value
    assert abs(RationalNumber.MIN_VALUE) == RationalNumber.MAX_VALUE


def test_results_match_exact_fractions():
    values = [R(n, d) for n, d in [(0, 1), (1, 1), (-1, 3), (5, 6), (-7, 8), (2**31 + 5, 2**31 - 1), (12, -35)]]
    for a, b in itertools.product(values, repeat=2):
        fa, fb = a.to_fraction(), b.to_fraction()
        assert (a + b).to_fraction() == fa + fb
        assert (a - b).to_fraction() == fa - fb
        assert (a * b).to_fraction() == fa * fb
        if not b.is_zero():
            assert (a / b).to_fraction() == fa / fb


def test_identities(sample_rationals):
    for a in sample_rationals:
        assert a + (-a) == RationalNumber.ZERO
        assert a * RationalNumber.ONE == a
        assert a + RationalNumber.ZERO == a
        if not a.is_zero():
            assert a * a.invert() == RationalNumber.ONE
            assert a / a == RationalNumber.ONE


def test_subtraction_is_addition_of_negation():
    values = [R(n, d) for n, d in [(1, 2), (-2, 3), (5, 6), (-7, 8), (0, 1), (2**20, 3**10)]]
    for a, b in itertools.product(values, repeat=2):
        assert a - b == a + (-b)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        R(1, 2) / RationalNumber.ZERO
    with pytest.raises(ZeroDivisionError):
        RationalNumber.ZERO.divide(R(0, 5))


def test_zero_divided():
    assert RationalNumber.ZERO / R(-7, 3) == RationalNumber.ZERO


def test_reduction_avoids_overflow():
    one_over_max = R(1, INT64_MAX)
    assert one_over_max + one_over_max == R(2, INT64_MAX)
    assert R(INT64_MAX, 2) * R(2, INT64_MAX) == RationalNumber.ONE
    assert one_over_max / one_over_max == RationalNumber.ONE
    assert R(INT64_MAX - 1, INT64_MAX) - R(INT64_MAX - 2, INT64_MAX) == one_over_max
    assert RationalNumber.MAX_VALUE + RationalNumber.MIN_VALUE == RationalNumber.ZERO


@pytest.mark.parametrize("operation", [
    lambda: RationalNumber.MAX_VALUE + RationalNumber.ONE,
    lambda: RationalNumber.MIN_VALUE - RationalNumber.ONE,
    lambda: RationalNumber.MIN_VALUE + R(-2, 1),
    lambda: RationalNumber.MAX_VALUE * R(2, 1),
    lambda: RationalNumber.MAX_VALUE / R(1, 2),
    lambda: R(1, 2**32) * R(1, 2**32 - 1),
    lambda: R(1, INT64_MAX) + R(1, INT64_MAX - 1),
    lambda: R(1, INT64_MAX) / R(INT64_MAX - 1, 1),
])
def test_overflow_raises(operation):
    with pytest.raises(OverflowError):
        operation()


def test_invert():
    assert R(-2, 3).invert() == R(-3, 2)
    assert R(7, 1).invert() == R(1, 7)
    with pytest.raises(ZeroDivisionError):
        RationalNumber.ZERO.invert()


@pytest.mark.parametrize("base,exponent,expected", [
    (R(2, 3), 3, R(8, 27)),
    (R(2, 3), -2, R(9, 4)),
    (R(-1, 2), 5, R(-1, 32)),
    (R(5, 7), 0, R(1, 1)),
    (RationalNumber.ZERO, 0, R(1, 1)),
    (R(2, 1), 62, R(2**62, 1)),
    (R(-2, 1), 62, R(2**62, 1)),
    (R(1, 3), 39, R(1, 3**39)),
])
def test_pow(base, exponent, expected):
    assert base.pow(exponent) == expected
    assert base.pow(exponent).to_fraction() == Fraction(base.numerator, base.denominator)**exponent


def test_pow_errors():
    with pytest.raises(OverflowError):
        R(2, 1).pow(63)
    with pytest.raises(OverflowError):
        R(1, 3).pow(40)
    with pytest.raises(ZeroDivisionError):
        RationalNumber.ZERO.pow(-1)
    with pytest.raises(TypeError):
        R(2, 1).pow(0.5)


@pytest.mark.parametrize("other", [1, 1.5, Fraction(1, 2)])
def test_mixed_type_arithmetic_raises(other):
    with pytest.raises(TypeError):
        R(1, 2) + other
    with pytest.raises(TypeError):
        other * R(1, 2)
    with pytest.raises(TypeError):
        R(1, 2) / other


@pytest.mark.parametrize("operation,expected", [
    (lambda: R(-INT64_MAX, 2) + R(-1, 2), R(-(2**62), 1)),
    (lambda: R(-INT64_MAX, 2) - R(1, 2), R(-(2**62), 1)),
    (lambda: R(-INT64_MAX, 4) + R(-1, 4), R(-(2**61), 1)),
    (lambda: R(-INT64_MAX, 6) + R(-1, 6), R(-(2**62), 3)),
])
def test_results_reduced_before_range_check(operation, expected):
    assert operation() == expected


@pytest.mark.parametrize("method", ["add", "subtract", "multiply", "divide"])
@pytest.mark.parametrize("other", [1, 0.5, Fraction(1, 2), None])
def test_named_arithmetic_rejects_other_types(method, other):
    with pytest.raises(TypeError):
        getattr(R(1, 2), method)(other)
