"""Calendrical exception hierarchy.

All Calendrical-specific exceptions inherit from CalendricalError.
"""

from __future__ import annotations


class CalendricalError(Exception):
    """Base exception for all Calendrical errors."""

    pass


class ValidationError(CalendricalError):
    """Invalid input values.

    Raised when a temporal value is out of range or invalid.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Hour value outside 0-23
    """

    pass


class DateRangeError(ValidationError):
    """Result falls outside the supported calendar range.

    Raised by Date when a construction or shift would produce a date
    before Date.MIN or after Date.MAX.

    Examples:
        - Adding 10000 years to 2024-01-01
        - Stepping one day back from Date.MIN
    """

    pass


class OverflowError(CalendricalError):
    """Arithmetic exceeded the signed 64-bit range.

    Raised when an amount or an intermediate product cannot be
    represented as a signed 64-bit integer.

    Examples:
        - Adding 2**62 millennia (the year count overflows)
        - Negating -2**63
    """

    pass


class UnsupportedOperationError(CalendricalError):
    """Operation has no meaning for the unit.

    Examples:
        - Adding eras in a calendar with a single era
    """

    pass


__all__ = [
    "CalendricalError",
    "ValidationError",
    "DateRangeError",
    "OverflowError",
    "UnsupportedOperationError",
]
