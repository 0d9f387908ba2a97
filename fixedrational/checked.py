"""Checked signed 64-bit integer arithmetic

Python integers never overflow, so the fixed-width discipline of the rational
type is enforced here: every primitive computes the exact result and raises
OverflowError if it does not fit into a signed 64-bit integer.
"""

import logging
import numpy as np

from .names import INT64_MIN, INT64_MAX

LOG = logging.getLogger(__name__)


def as_int(value, name: str = 'value') -> int:
    """Return value as a plain Python int.

    Accepts Python ints and numpy integer scalars. Booleans, floats and all
    other types raise TypeError, there is no implicit coercion.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if isinstance(value, (int, np.integer)):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def check_int64(value: int, name: str = 'value') -> int:
    """Raise ValueError if value is outside the signed 64-bit range."""
    if value < INT64_MIN or value > INT64_MAX:
        LOG.debug(f"{name}={value} is outside the signed 64-bit range")
        raise ValueError(f"{name} must be a signed 64-bit integer, got {value}")
    return value


def _checked(result: int, operation: str, a: int, b: int) -> int:
    if result < INT64_MIN or result > INT64_MAX:
        LOG.debug(f"64-bit overflow in {a} {operation} {b}")
        raise OverflowError(f"Arithmetic operation resulted in an overflow: {a} {operation} {b}")
    return result


def checked_add(a: int, b: int) -> int:
    return _checked(a + b, '+', a, b)


def checked_sub(a: int, b: int) -> int:
    return _checked(a - b, '-', a, b)


def checked_mul(a: int, b: int) -> int:
    return _checked(a * b, '*', a, b)


def checked_neg(a: int) -> int:
    """Negate a, raising OverflowError for INT64_MIN."""
    if a == INT64_MIN:
        LOG.debug(f"64-bit overflow negating {a}")
        raise OverflowError(f"Negating {a} overflows a signed 64-bit integer")
    return -a


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by the Euclidean algorithm.

    Works on absolute values, so the result is never negative.
    gcd(0, b) is |b| and gcd(0, 0) is 0.

    Args:
        a: First integer
        b: Second integer

    Returns:
        Non-negative greatest common divisor of a and b
    """
    if a < 0:
        a = -a
    if b < 0:
        b = -b
    if b > a:
        a, b = b, a
    while b != 0:
        a, b = b, a % b
    return a
