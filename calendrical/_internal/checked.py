"""Checked signed 64-bit arithmetic for Calendrical.

Python integers never overflow, so unit amounts are held to the signed
64-bit range explicitly. Every helper here returns the exact result
when it fits and raises OverflowError otherwise.

The division helper rounds toward zero, matching the "complete units"
arithmetic of the calendar units.

This module is not part of the public API.
"""

from __future__ import annotations

from calendrical._internal.constants import INT64_MAX, INT64_MIN
from calendrical.errors import OverflowError


def check_int64(value: int, name: str = "value") -> int:
    """Return value unchanged if it fits in a signed 64-bit integer.

    Args:
        value: The integer to check.
        name: Name used in the error message.

    Returns:
        The same value.

    Raises:
        OverflowError: If value is outside [-2**63, 2**63 - 1].

    Examples:
        >>> check_int64(2**63 - 1)
        9223372036854775807
        >>> check_int64(2**63)
        Traceback (most recent call last):
        ...
        OverflowError: value exceeds signed 64-bit range: 9223372036854775808
    """
    if value < INT64_MIN or value > INT64_MAX:
        raise OverflowError(f"{name} exceeds signed 64-bit range: {value}")
    return value


def safe_add(a: int, b: int) -> int:
    """Add two integers, raising OverflowError if the sum leaves int64."""
    return check_int64(a + b, "sum")


def safe_subtract(a: int, b: int) -> int:
    """Subtract b from a, raising OverflowError if the result leaves int64."""
    return check_int64(a - b, "difference")


def safe_multiply(a: int, b: int) -> int:
    """Multiply two integers, raising OverflowError if the product leaves int64.

    Args:
        a: The first factor.
        b: The second factor.

    Returns:
        The exact product.

    Raises:
        OverflowError: If the product cannot be held in 64 bits.

    Examples:
        >>> safe_multiply(922337203685477580, 10)
        9223372036854775800
        >>> safe_multiply(922337203685477581, 10)
        Traceback (most recent call last):
        ...
        OverflowError: product exceeds signed 64-bit range: 9223372036854775810
    """
    return check_int64(a * b, "product")


def safe_negate(a: int) -> int:
    """Negate an integer; -2**63 has no positive counterpart."""
    return check_int64(-a, "negation")


def trunc_div(a: int, b: int) -> int:
    """Divide a by b, rounding the quotient toward zero.

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


__all__ = [
    "check_int64",
    "safe_add",
    "safe_subtract",
    "safe_multiply",
    "safe_negate",
    "trunc_div",
]
