"""
Overflow-safe comparison of two products of unsigned 64-bit integers.

Decides a*b < c*d without ever forming a value wider than 64 bits. Each
operand is split into two 32-bit limbs (v = v0 + v1*n, n = 2^32), so that

    a*b = a0*b0 + (a0*b1 + a1*b0)*n + a1*b1*n*n

Every partial product multiplies two 32-bit values and fits into 64 bits.
The 128-bit product is then represented by three limbs (hi, middle, lo) and
two products are compared limb by limb from the most significant one down.

Example usage:
    >>> from fixedrational.multiplication_comparer import is_less
    >>> is_less(2**64 - 1, 2**64 - 1, 2**64 - 1, 2**64 - 2)
    False
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from .checked import as_int
from .names import LIMB_BITS, LIMB_MASK, UINT64_MAX

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Halves:
    """Upper and lower 32-bit limbs of an unsigned 64-bit value."""
    hi: int
    lo: int


@dataclass(frozen=True)
class Triple:
    """
    Three-limb representation of a 128-bit product.

    The product equals lo + middle*2^32 + hi*2^64, where lo and middle are
    32-bit limbs and hi holds the remaining upper 64 bits.
    """
    hi: int
    middle: int
    lo: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.hi, self.middle, self.lo


def _check_uint64(value: int, name: str) -> int:
    value = as_int(value, name)
    if value < 0 or value > UINT64_MAX:
        LOG.debug(f"{name}={value} is outside the unsigned 64-bit range")
        raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value}")
    return value


def get_32_halves(v: int) -> Halves:
    return Halves(hi=v >> LIMB_BITS, lo=v & LIMB_MASK)


def get_32_bit_triple(a: int, b: int) -> Triple:
    """
    Compute the (hi, middle, lo) limbs of a*b.

    Args:
        a: Unsigned 64-bit factor
        b: Unsigned 64-bit factor

    Returns:
        Triple with lo + middle*2^32 + hi*2^64 == a*b
    """
    a_halves = get_32_halves(a)
    b_halves = get_32_halves(b)

    a0b0 = get_32_halves(a_halves.lo * b_halves.lo)
    a0b1 = get_32_halves(a_halves.lo * b_halves.hi)
    a1b0 = get_32_halves(a_halves.hi * b_halves.lo)

    sum_lo = get_32_halves(a0b1.lo + a1b0.lo + a0b0.hi)
    sum_hi = a0b1.hi + a1b0.hi + sum_lo.hi
    hi = a_halves.hi * b_halves.hi + sum_hi

    return Triple(hi=hi, middle=sum_lo.lo, lo=a0b0.lo)


def product_limbs(a: int, b: int) -> Tuple[int, int, int]:
    """Return the (hi, middle, lo) limbs of a*b for unsigned 64-bit a and b."""
    return get_32_bit_triple(_check_uint64(a, "a"), _check_uint64(b, "b")).as_tuple()


def compare_products(a: int, b: int, c: int, d: int) -> int:
    """
    Three-way comparison of a*b and c*d.

    Args:
        a, b: Unsigned 64-bit factors of the first product
        c, d: Unsigned 64-bit factors of the second product

    Returns:
        -1 if a*b < c*d, 0 if equal, 1 if a*b > c*d
    """
    a, b, c, d = (_check_uint64(value, name) for name, value in zip("abcd", (a, b, c, d)))

    ab = get_32_bit_triple(a, b)
    cd = get_32_bit_triple(c, d)

    for left, right in ((ab.hi, cd.hi), (ab.middle, cd.middle), (ab.lo, cd.lo)):
        if left < right:
            return -1
        if left > right:
            return 1
    return 0


def is_less(a: int, b: int, c: int, d: int) -> bool:
    """Checks if a*b is less than c*d for unsigned 64-bit operands."""
    return compare_products(a, b, c, d) < 0
