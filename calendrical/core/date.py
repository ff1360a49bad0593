"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar with full support for BCE dates.
"""

from __future__ import annotations

from typing import ClassVar

from calendrical._internal.calendar import (
    days_before_month,
    days_in_month,
    epoch_day_to_day_of_week,
    epoch_day_to_ymd,
    epoch_month,
    is_leap_year,
    ymd_to_epoch_day,
)
from calendrical._internal.constants import MAX_YEAR, MIN_YEAR
from calendrical._internal.validation import (
    validate_day,
    validate_month,
    validate_year,
)
from calendrical.errors import DateRangeError


_MIN_EPOCH_DAY = ymd_to_epoch_day(MIN_YEAR, 1, 1)
_MAX_EPOCH_DAY = ymd_to_epoch_day(MAX_YEAR, 12, 31)


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. It uses the proleptic Gregorian calendar, which means
    the Gregorian calendar rules are extended to dates before its
    actual adoption in 1582. Years use astronomical numbering, where
    year 0 exists and equals 1 BCE.

    Internal representation is the epoch-day count (days since
    1970-01-01), which makes day arithmetic a single addition.

    The supported range is Date.MIN (-9999-01-01) to Date.MAX
    (9999-12-31). Any operation whose result would fall outside it
    raises DateRangeError.

    Attributes:
        year: The year (can be negative for BCE dates).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year
        2024
        >>> d.epoch_day
        19737

        >>> Date(2024, 2, 29)  # Valid leap year date
        Date(2024, 2, 29)
    """

    __slots__ = ("_days",)

    MIN: ClassVar[Date]
    MAX: ClassVar[Date]

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year (can be 0 or negative for BCE dates).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            DateRangeError: If the year is outside the supported range.
            ValidationError: If month or day is out of range.

        Examples:
            >>> Date(2024, 1, 15)
            Date(2024, 1, 15)

            >>> Date(2024, 2, 30)  # Invalid: February doesn't have 30 days
            Traceback (most recent call last):
            ...
            ValidationError: day must be between 1 and 29 for 2024-02, got 30
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._days = ymd_to_epoch_day(year, month, day)

    @classmethod
    def from_epoch_day(cls, epoch_day: int) -> Date:
        """Create a Date from an epoch-day count.

        Args:
            epoch_day: Days since 1970-01-01 (negative before it).

        Returns:
            The corresponding Date.

        Raises:
            DateRangeError: If the day falls outside Date.MIN..Date.MAX.

        Examples:
            >>> Date.from_epoch_day(0)
            Date(1970, 1, 1)

            >>> Date.from_epoch_day(-1)
            Date(1969, 12, 31)
        """
        if epoch_day < _MIN_EPOCH_DAY or epoch_day > _MAX_EPOCH_DAY:
            raise DateRangeError(
                f"epoch day {epoch_day} is outside the supported range "
                f"{_MIN_EPOCH_DAY} to {_MAX_EPOCH_DAY}"
            )
        instance = object.__new__(cls)
        instance._days = epoch_day
        return instance

    @property
    def year(self) -> int:
        """Return the year component.

        Returns:
            The year (can be negative for BCE dates).
        """
        year, _, _ = epoch_day_to_ymd(self._days)
        return year

    @property
    def month(self) -> int:
        """Return the month component.

        Returns:
            The month (1-12).
        """
        _, month, _ = epoch_day_to_ymd(self._days)
        return month

    @property
    def day(self) -> int:
        """Return the day component.

        Returns:
            The day of the month (1-31).
        """
        _, _, day = epoch_day_to_ymd(self._days)
        return day

    @property
    def epoch_day(self) -> int:
        """Return the number of days since 1970-01-01.

        Examples:
            >>> Date(1970, 1, 2).epoch_day
            1
            >>> Date(1969, 12, 31).epoch_day
            -1
        """
        return self._days

    @property
    def epoch_month(self) -> int:
        """Return the number of whole months since January 1970.

        The day of month is ignored; every date in a month shares the
        same epoch month.

        Examples:
            >>> Date(1970, 2, 28).epoch_month
            1
            >>> Date(1969, 12, 1).epoch_month
            -1
        """
        year, month, _ = epoch_day_to_ymd(self._days)
        return epoch_month(year, month)

    @property
    def day_of_week(self) -> int:
        """Return the day of the week.

        Returns Monday as 0 through Sunday as 6, matching Python's
        datetime.weekday() convention.

        Examples:
            >>> Date(2024, 1, 15).day_of_week  # Monday
            0
            >>> Date(2024, 1, 21).day_of_week  # Sunday
            6
        """
        return epoch_day_to_day_of_week(self._days)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        year, month, day = epoch_day_to_ymd(self._days)
        return days_before_month(year, month) + day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    @property
    def length_of_month(self) -> int:
        """Return the number of days in this date's month.

        Examples:
            >>> Date(2024, 2, 10).length_of_month
            29
            >>> Date(2023, 2, 10).length_of_month
            28
        """
        year, month, _ = epoch_day_to_ymd(self._days)
        return days_in_month(year, month)

    @property
    def is_last_day_of_month(self) -> bool:
        """Return True if this date is the final day of its month.

        Examples:
            >>> Date(2024, 2, 29).is_last_day_of_month
            True
            >>> Date(2023, 2, 28).is_last_day_of_month
            True
            >>> Date(2024, 2, 28).is_last_day_of_month
            False
        """
        year, month, day = epoch_day_to_ymd(self._days)
        return day == days_in_month(year, month)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        Any unspecified components retain their current values.

        Raises:
            ValidationError: If the resulting date is invalid.

        Examples:
            >>> Date(2024, 1, 15).replace(month=6)
            Date(2024, 6, 15)
        """
        y, m, d = epoch_day_to_ymd(self._days)
        new_year = year if year is not None else y
        new_month = month if month is not None else m
        new_day = day if day is not None else d
        return Date(new_year, new_month, new_day)

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Args:
            days: Number of days to add (can be negative).

        Returns:
            A new Date offset by the specified days.

        Raises:
            DateRangeError: If the result is out of range.

        Examples:
            >>> Date(2024, 1, 15).add_days(10)
            Date(2024, 1, 25)

            >>> Date(2024, 1, 15).add_days(-20)
            Date(2023, 12, 26)
        """
        if days == 0:
            return self
        return Date.from_epoch_day(self._days + days)

    def add_weeks(self, weeks: int) -> Date:
        """Return a new Date offset by the given number of weeks.

        Examples:
            >>> Date(2024, 1, 15).add_weeks(2)
            Date(2024, 1, 29)
        """
        return self.add_days(weeks * 7)

    def add_months(self, months: int) -> Date:
        """Return a new Date offset by the given number of months.

        If the resulting day is invalid for the new month, it is
        clamped to the last valid day of that month.

        Args:
            months: Number of months to add (can be negative).

        Returns:
            A new Date offset by the specified months.

        Raises:
            DateRangeError: If the result is out of range.

        Examples:
            >>> Date(2024, 1, 15).add_months(2)
            Date(2024, 3, 15)

            >>> Date(2024, 1, 31).add_months(1)  # Clamps to Feb 29
            Date(2024, 2, 29)

            >>> Date(2023, 1, 31).add_months(1)  # Clamps to Feb 28
            Date(2023, 2, 28)
        """
        if months == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)

        new_year, month_index = divmod(year * 12 + (month - 1) + months, 12)
        validate_year(new_year)
        new_month = month_index + 1

        return Date(new_year, new_month, min(day, days_in_month(new_year, new_month)))

    def add_years(self, years: int) -> Date:
        """Return a new Date offset by the given number of years.

        If the resulting date is invalid (Feb 29 in a non-leap year),
        it is clamped to Feb 28.

        Raises:
            DateRangeError: If the result is out of range.

        Examples:
            >>> Date(2024, 1, 15).add_years(1)
            Date(2025, 1, 15)

            >>> Date(2024, 2, 29).add_years(1)  # 2025 is not a leap year
            Date(2025, 2, 28)
        """
        if years == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)
        new_year = year + years
        validate_year(new_year)

        return Date(new_year, month, min(day, days_in_month(new_year, month)))

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        For BCE dates (year < 0), returns -YYYY-MM-DD format.

        Examples:
            >>> Date(2024, 1, 15).to_iso_format()
            '2024-01-15'

            >>> Date(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        year, month, day = epoch_day_to_ymd(self._days)
        if year >= 0:
            return f"{year:04d}-{month:02d}-{day:02d}"
        return f"{year:05d}-{month:02d}-{day:02d}"

    def __add__(self, other: object) -> Date:
        """Add a Period to this date.

        Examples:
            >>> from calendrical import CalendarUnit, Period
            >>> Date(2024, 1, 31) + Period(1, CalendarUnit.MONTH)
            Date(2024, 2, 29)
        """
        # Import here to avoid circular imports
        from calendrical.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return other.add_to(self)

    def __sub__(self, other: object) -> Date:
        """Subtract a Period from this date."""
        from calendrical.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return other.subtract_from(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days == other._days

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        """Return a detailed string representation like 'Date(2024, 1, 15)'."""
        year, month, day = epoch_day_to_ymd(self._days)
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


Date.MIN = Date(MIN_YEAR, 1, 1)
Date.MAX = Date(MAX_YEAR, 12, 31)


__all__ = ["Date"]
