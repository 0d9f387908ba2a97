"""
Exact rational numbers over signed 64-bit integers.

RationalNumber keeps a numerator/denominator pair in canonical form: reduced
to lowest terms, with a positive denominator and zero stored as 0/1. Both
parts always fit into a signed 64-bit integer, and INT64_MIN is never used
because its negation does not fit. Arithmetic checks every intermediate
product and sum and raises OverflowError instead of wrapping around.

Ordering never multiplies out n1*d2 and n2*d1. The cross products are compared
limb by limb with multiplication_comparer.is_less, so that comparisons stay
exact over the whole representable range.

Example usage:
    >>> from fixedrational import RationalNumber
    >>> RationalNumber(2, 3) + RationalNumber(3, 4)
    RationalNumber(17, 12)
    >>> str(RationalNumber(8, -6))
    '-4/3'
"""

import logging
from decimal import Decimal
from fractions import Fraction
from typing import Union

import numpy as np
from sympy import Rational

from .checked import as_int, check_int64, checked_add, checked_mul, checked_neg, gcd
from .multiplication_comparer import is_less
from .names import (INT8_MIN, INT8_MAX, INT16_MIN, INT16_MAX, INT32_MIN, INT32_MAX, INT64_MIN, INT64_MAX, UINT8_MAX,
                    UINT16_MAX, UINT32_MAX, UINT64_MAX)

LOG = logging.getLogger(__name__)

Integer = Union[int, np.integer]


def _in_range(value: Integer, low: int, high: int, width: str) -> int:
    value = as_int(value)
    if value < low or value > high:
        LOG.debug(f"{value} does not fit into {width}")
        raise ValueError(f"value must be in the {width} range [{low}, {high}], got {value}")
    return value


def _require_rational(other) -> None:
    if not isinstance(other, RationalNumber):
        LOG.debug(f"Rejected operand of type {type(other).__name__}")
        raise TypeError(f"Expected RationalNumber, got {type(other).__name__}")


class RationalNumber:
    """
    Immutable rational number with signed 64-bit numerator and denominator.

    The constructor reduces its arguments to canonical form, so structural
    equality of two instances is the same as mathematical equality.
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: Integer, denominator: Integer):
        """
        Args:
            numerator: Signed 64-bit numerator, must not be INT64_MIN
            denominator: Signed 64-bit denominator, must not be zero or INT64_MIN

        Raises:
            TypeError: If an argument is not an integer
            ValueError: If denominator is zero or an argument is INT64_MIN or
                outside the signed 64-bit range
        """
        numerator = as_int(numerator, 'numerator')
        denominator = as_int(denominator, 'denominator')

        if denominator == 0:
            LOG.debug(f"Rejected {numerator}/0")
            raise ValueError("denominator must not be zero")
        if denominator == INT64_MIN:
            LOG.debug(f"Rejected denominator {denominator}")
            raise ValueError(f"denominator must not be {INT64_MIN}")
        if numerator == INT64_MIN:
            LOG.debug(f"Rejected numerator {numerator}")
            raise ValueError(f"numerator must not be {INT64_MIN}")
        check_int64(numerator, 'numerator')
        check_int64(denominator, 'denominator')

        if numerator == 0:
            num, den = 0, 1
        else:
            g = gcd(numerator, denominator)
            num = numerator // g if denominator > 0 else -numerator // g
            den = abs(denominator // g)

        object.__setattr__(self, '_numerator', num)
        object.__setattr__(self, '_denominator', den)

    @classmethod
    def _from_result(cls, numerator: int, denominator: int) -> 'RationalNumber':
        # INT64_MIN is a valid checked result but not a valid part of a rational,
        # so reduce first and reject only what still does not fit.
        g = gcd(numerator, denominator)
        if g > 1:
            numerator //= g
            denominator //= g
        for part in (numerator, denominator):
            if part == INT64_MIN:
                LOG.debug(f"Result {numerator}/{denominator} is not representable")
                raise OverflowError(f"Arithmetic operation resulted in an overflow: {numerator}/{denominator}")
        return cls(numerator, denominator)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._numerator, self._denominator))

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        """Always positive."""
        return self._denominator

    # Widening conversions, one per source integer width
    @classmethod
    def from_int8(cls, value: Integer) -> 'RationalNumber':
        return cls(_in_range(value, INT8_MIN, INT8_MAX, 'int8'), 1)

    @classmethod
    def from_uint8(cls, value: Integer) -> 'RationalNumber':
        return cls(_in_range(value, 0, UINT8_MAX, 'uint8'), 1)

    @classmethod
    def from_int16(cls, value: Integer) -> 'RationalNumber':
        return cls(_in_range(value, INT16_MIN, INT16_MAX, 'int16'), 1)

    @classmethod
    def from_uint16(cls, value: Integer) -> 'RationalNumber':
        return cls(_in_range(value, 0, UINT16_MAX, 'uint16'), 1)

    @classmethod
    def from_int32(cls, value: Integer) -> 'RationalNumber':
        return cls(_in_range(value, INT32_MIN, INT32_MAX, 'int32'), 1)

    @classmethod
    def from_uint32(cls, value: Integer) -> 'RationalNumber':
        return cls(_in_range(value, 0, UINT32_MAX, 'uint32'), 1)

    @classmethod
    def from_int64(cls, value: Integer) -> 'RationalNumber':
        """INT64_MIN is rejected by the constructor."""
        return cls(_in_range(value, INT64_MIN, INT64_MAX, 'int64'), 1)

    @classmethod
    def from_uint64(cls, value: Integer) -> 'RationalNumber':
        """Values above INT64_MAX cannot be represented and raise ValueError."""
        value = _in_range(value, 0, UINT64_MAX, 'uint64')
        if value > INT64_MAX:
            LOG.debug(f"{value} exceeds the signed 64-bit maximum")
            raise ValueError(f"value must not exceed {INT64_MAX}, got {value}")
        return cls(value, 1)

    @classmethod
    def from_fraction(cls, value: Fraction) -> 'RationalNumber':
        return cls(value.numerator, value.denominator)

    @classmethod
    def from_sympy(cls, value: Rational) -> 'RationalNumber':
        if not isinstance(value, Rational):
            raise TypeError(f"Cannot convert {type(value)} to RationalNumber")
        return cls(int(value.p), int(value.q))

    @classmethod
    def value_of(cls, value: Union['RationalNumber', Integer, Fraction, Rational]) -> 'RationalNumber':
        """
        Factory method to create a RationalNumber from various exact types.

        Args:
            value: A RationalNumber, an integer, a Fraction or a sympy.Rational

        Returns:
            RationalNumber with the same value
        """
        if isinstance(value, RationalNumber):
            return value
        elif isinstance(value, Fraction):
            return cls.from_fraction(value)
        elif isinstance(value, Rational):
            return cls.from_sympy(value)
        else:
            return cls.from_int64(value)

    # Narrowing conversions, lossy by nature
    def to_double(self) -> float:
        return float(self._numerator) / float(self._denominator)

    def to_float(self) -> np.float32:
        """Convert to IEEE single precision."""
        return np.float32(self._numerator) / np.float32(self._denominator)

    def to_decimal(self) -> Decimal:
        """Divide in the current decimal context."""
        return Decimal(self._numerator) / Decimal(self._denominator)

    def to_int(self) -> int:
        """Convert to int, truncating toward zero."""
        quotient = abs(self._numerator) // self._denominator
        return quotient if self._numerator >= 0 else -quotient

    def to_fraction(self) -> Fraction:
        return Fraction(self._numerator, self._denominator)

    def to_sympy(self) -> Rational:
        return Rational(self._numerator, self._denominator)

    def __float__(self) -> float:
        return self.to_double()

    # Predicates
    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self._numerator < 0:
            return -1
        elif self._numerator > 0:
            return 1
        return 0

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == 1 and self._denominator == 1

    def is_negative(self) -> bool:
        return self._numerator < 0

    def is_integer(self) -> bool:
        return self._denominator == 1

    # Arithmetic
    def negate(self) -> 'RationalNumber':
        return RationalNumber(checked_neg(self._numerator), self._denominator)

    def abs(self) -> 'RationalNumber':
        if self._numerator >= 0:
            return self
        return self.negate()

    def add(self, other: 'RationalNumber') -> 'RationalNumber':
        """
        Add two rational numbers.

        The denominators are divided by their GCD first, so the common
        denominator is their least common multiple and the intermediate
        products stay as small as possible.
        """
        _require_rational(other)
        n1, d1 = self._numerator, self._denominator
        n2, d2 = other._numerator, other._denominator

        # n1*b + n2*d over e*d2
        b, d, e = d2, d1, d1
        g = gcd(d1, d2)
        if g != 1:
            b //= g
            d //= g
            e //= g

        numerator = checked_add(checked_mul(n1, b), checked_mul(n2, d))
        return RationalNumber._from_result(numerator, checked_mul(e, d2))

    def subtract(self, other: 'RationalNumber') -> 'RationalNumber':
        _require_rational(other)
        return self.add(other.negate())

    def multiply(self, other: 'RationalNumber') -> 'RationalNumber':
        """Multiply two rational numbers, cross-reducing before multiplying."""
        _require_rational(other)
        n1, d1 = self._numerator, self._denominator
        n2, d2 = other._numerator, other._denominator

        g = gcd(n1, d2)
        if g > 1:
            n1 //= g
            d2 //= g

        g = gcd(n2, d1)
        if g > 1:
            n2 //= g
            d1 //= g

        return RationalNumber._from_result(checked_mul(n1, n2), checked_mul(d1, d2))

    def divide(self, other: 'RationalNumber') -> 'RationalNumber':
        """
        Divide two rational numbers.

        Raises:
            ZeroDivisionError: If other is zero
            OverflowError: If the result does not fit into 64 bits
        """
        _require_rational(other)
        if other._numerator == 0:
            LOG.debug(f"Division of {self} by zero")
            raise ZeroDivisionError(f"{self} divided by zero")

        n1, d1 = self._numerator, self._denominator
        n2, d2 = other._numerator, other._denominator

        g = gcd(n1, n2)
        if g > 1:
            n1 //= g
            n2 //= g

        g = gcd(d1, d2)
        if g > 1:
            d1 //= g
            d2 //= g

        return RationalNumber._from_result(checked_mul(n1, d2), checked_mul(d1, n2))

    def invert(self) -> 'RationalNumber':
        """Return multiplicative inverse (1/this)."""
        if self._numerator == 0:
            LOG.debug("Inversion of zero")
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return RationalNumber(self._denominator, self._numerator)

    def pow(self, exponent: Integer) -> 'RationalNumber':
        """
        Return this^exponent by repeated checked multiplication.

        Negative exponents invert first, so 0^-n raises ZeroDivisionError.
        """
        exponent = as_int(exponent, 'exponent')
        base = self
        if exponent < 0:
            base = base.invert()
            exponent = -exponent

        result = RationalNumber.ONE
        while exponent:
            if exponent & 1:
                result = result.multiply(base)
            exponent >>= 1
            if exponent:
                base = base.multiply(base)
        return result

    # Comparison
    def equals(self, other) -> bool:
        if not isinstance(other, RationalNumber):
            return False
        return self._numerator == other._numerator and self._denominator == other._denominator

    def is_less_than(self, other: 'RationalNumber') -> bool:
        """
        Check if this is less than other without overflowing.

        Mixed signs are decided by the sign alone. Two negative values are
        compared through their (positive) negations with the result inverted.
        For non-negative values n1/d1 < n2/d2 iff n1*d2 < n2*d1, which is
        answered limb-wise by is_less.
        """
        _require_rational(other)
        if self.equals(other):
            return False

        n1, d1 = self._numerator, self._denominator
        n2, d2 = other._numerator, other._denominator

        if n1 < 0 <= n2:
            return True
        if n1 >= 0 > n2:
            return False

        inverse = n1 < 0 and n2 < 0
        if inverse:
            n1 = checked_neg(n1)
            n2 = checked_neg(n2)

        less = is_less(n1, d2, n2, d1)
        return not less if inverse else less

    def compare_to(self, other: 'RationalNumber') -> int:
        """Compare to another RationalNumber: -1 if less, 0 if equal, 1 if greater"""
        if self.is_less_than(other):
            return -1
        elif self.equals(other):
            return 0
        return 1

    def __eq__(self, other) -> bool:
        return self.equals(other)

    def __ne__(self, other) -> bool:
        return not self.equals(other)

    def __lt__(self, other) -> bool:
        if isinstance(other, RationalNumber):
            return self.is_less_than(other)
        return NotImplemented

    def __gt__(self, other) -> bool:
        if isinstance(other, RationalNumber):
            return not self.equals(other) and not self.is_less_than(other)
        return NotImplemented

    def __le__(self, other) -> bool:
        if isinstance(other, RationalNumber):
            return self.equals(other) or self.is_less_than(other)
        return NotImplemented

    def __ge__(self, other) -> bool:
        if isinstance(other, RationalNumber):
            return self.equals(other) or self > other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"RationalNumber({self._numerator}, {self._denominator})"

    # Python operator overloading, no implicit coercion from other types
    def __add__(self, other):
        if isinstance(other, RationalNumber):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, RationalNumber):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, RationalNumber):
            return self.multiply(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, RationalNumber):
            return self.divide(other)
        return NotImplemented

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()


RationalNumber.ZERO = RationalNumber(0, 1)
RationalNumber.ONE = RationalNumber(1, 1)
RationalNumber.MAX_VALUE = RationalNumber(INT64_MAX, 1)
RationalNumber.MIN_VALUE = RationalNumber(-INT64_MAX, 1)
