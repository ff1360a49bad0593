"""Calendar utilities for Calendrical.

This module provides internal functions for calendar calculations,
including epoch-day and epoch-month conversions and leap year logic.

Epoch day 0 = 1970-01-01. Epoch month 0 = January 1970.

This module is not part of the public API.
"""

from __future__ import annotations

from calendrical._internal.constants import DAYS_IN_MONTH, EPOCH_YEAR


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return the number of days in a year.

    Args:
        year: The year to check.

    Returns:
        366 for leap years, 365 otherwise.
    """
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month.

    Args:
        year: The year (for leap year calculation).
        month: The month (1-12).

    Returns:
        Number of days before the month in that year.
    """
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 (last day of year 0 / 1 BCE) is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    # Floor division keeps the leap-day count right for negative years
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Works for ordinals <= 0 as well: divmod floors, so the first split
    lands on a whole 400-year cycle and the remainder is always
    non-negative.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert day-of-year to month and day.

    Args:
        year: The year (for leap year calculation).
        doy: Day of year (1-366).

    Returns:
        Tuple of (month, day).
    """
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


_EPOCH_ORDINAL = ymd_to_ordinal(EPOCH_YEAR, 1, 1)


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an epoch-day count.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        Days since 1970-01-01 (negative before it).

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(1969, 12, 31)
        -1
    """
    return ymd_to_ordinal(year, month, day) - _EPOCH_ORDINAL


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert an epoch-day count to year, month, day.

    Args:
        epoch_day: Days since 1970-01-01.

    Returns:
        Tuple of (year, month, day).
    """
    return ordinal_to_ymd(epoch_day + _EPOCH_ORDINAL)


def epoch_day_to_day_of_week(epoch_day: int) -> int:
    """Convert an epoch day to day of week (Monday=0, Sunday=6).

    Args:
        epoch_day: Days since 1970-01-01.

    Returns:
        Day of week (0=Monday, 6=Sunday).
    """
    # 1970-01-01 was a Thursday (day 3 in Monday=0 system)
    return (epoch_day + 3) % 7


def epoch_month(year: int, month: int) -> int:
    """Return the month count of year/month relative to January 1970.

    Args:
        year: The year.
        month: The month (1-12).

    Returns:
        Months since 1970-01 (negative before it).

    Examples:
        >>> epoch_month(1970, 1)
        0
        >>> epoch_month(1969, 12)
        -1
        >>> epoch_month(2012, 3)
        506
    """
    return (year - EPOCH_YEAR) * 12 + (month - 1)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "epoch_day_to_day_of_week",
    "epoch_month",
]
