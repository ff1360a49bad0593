"""CalendarUnit enumeration of the standard date-based period units.

This module provides the CalendarUnit enum: days, weeks, months,
quarter-years, half-years, years, decades, centuries, millennia, eras
and the artificial FOREVER unit. Each unit can add an amount of itself
to a Date, Time or DateTime and count the complete units between two
such values.

Counting rules:
    A unit is only counted once its boundary has been reached. From
    2012-01-31 to 2012-03-01 is one month, not two, because the 31st
    has not come round again. A month-end that was reached by clamping
    (Jan 31 + 1 month = Feb 29) counts as a complete month, so that
    ``unit.calculate_between(d, unit.calculate_add(d, n)) == n``.

    Derived units (weeks from days, quarters and half-years from months,
    decades and longer from years) divide and round toward zero.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from calendrical._internal.checked import (
    check_int64,
    safe_multiply,
    trunc_div,
)
from calendrical._internal.constants import (
    INT64_MAX,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_ESTIMATED_YEAR,
)
from calendrical.core.date import Date
from calendrical.core.datetime import DateTime
from calendrical.core.duration import Duration
from calendrical.core.time import Time
from calendrical.errors import OverflowError, UnsupportedOperationError

if TYPE_CHECKING:
    from calendrical.core.period import Period

logger = logging.getLogger(__name__)

T = TypeVar("T", Date, Time, DateTime)


class CalendarUnit(Enum):
    """Standard calendar units for period arithmetic.

    Each member carries a display name and an estimated duration, and
    implements the PeriodUnit operations. Members are ordered from
    shortest to longest by estimated duration; ERA and FOREVER are
    artificial and sort last.

    Examples:
        >>> CalendarUnit.MONTH.calculate_add(Date(2024, 1, 31), 1)
        Date(2024, 2, 29)

        >>> CalendarUnit.MONTH.calculate_between(Date(2012, 1, 31), Date(2012, 3, 1))
        1

        >>> str(CalendarUnit.QUARTER_YEAR)
        'QuarterYears'

        >>> CalendarUnit.WEEK < CalendarUnit.MONTH
        True
    """

    DAY = ("Days", Duration.of_seconds(SECONDS_PER_DAY))
    WEEK = ("Weeks", Duration.of_seconds(7 * SECONDS_PER_DAY))
    MONTH = ("Months", Duration.of_seconds(SECONDS_PER_ESTIMATED_YEAR // 12))
    QUARTER_YEAR = ("QuarterYears", Duration.of_seconds(SECONDS_PER_ESTIMATED_YEAR // 4))
    HALF_YEAR = ("HalfYears", Duration.of_seconds(SECONDS_PER_ESTIMATED_YEAR // 2))
    YEAR = ("Years", Duration.of_seconds(SECONDS_PER_ESTIMATED_YEAR))
    DECADE = ("Decades", Duration.of_seconds(SECONDS_PER_ESTIMATED_YEAR * 10))
    CENTURY = ("Centuries", Duration.of_seconds(SECONDS_PER_ESTIMATED_YEAR * 100))
    MILLENNIUM = ("Millenia", Duration.of_seconds(SECONDS_PER_ESTIMATED_YEAR * 1000))
    # Artificially a billion years; the calendar has a single era
    ERA = ("Eras", Duration.of_seconds(SECONDS_PER_ESTIMATED_YEAR * 1_000_000_000))
    # The largest representable estimate
    FOREVER = ("Forever", Duration.of_seconds(INT64_MAX, NANOS_PER_SECOND - 1))

    def __init__(self, display_name: str, estimated_duration: Duration) -> None:
        self._display_name = display_name
        self._estimated_duration = estimated_duration

    @property
    def display_name(self) -> str:
        """Return the display name, e.g. 'Days' or 'QuarterYears'."""
        return self._display_name

    @property
    def estimated_duration(self) -> Duration:
        """Return the estimated length of one unit.

        Months and longer are based on the average Gregorian year of
        365.2425 days. The estimate is for documentation and ordering
        only; arithmetic never uses it.

        Examples:
            >>> CalendarUnit.MONTH.estimated_duration
            Duration(seconds=2629746, nanoseconds=0)
        """
        return self._estimated_duration

    @property
    def is_duration_estimated(self) -> bool:
        """Return True; day lengths vary with daylight saving, months with the calendar."""
        return True

    # Addition

    def calculate_add(self, value: T, amount: int) -> T:
        """Return value shifted by amount of this unit.

        An amount of zero always returns the value unchanged. A Time is
        never changed, since no calendar unit is shorter than a day. A
        DateTime has its date shifted and keeps its time of day.

        Args:
            value: A Date, Time or DateTime.
            amount: Number of units to add, within the signed 64-bit range.

        Returns:
            A value of the same type as value.

        Raises:
            TypeError: If value or amount has an unsupported type.
            OverflowError: If amount (or the year count derived from it)
                exceeds the signed 64-bit range.
            UnsupportedOperationError: If adding a nonzero number of eras.
            DateRangeError: If the result falls outside the supported dates.

        Examples:
            >>> CalendarUnit.YEAR.calculate_add(Date(2024, 2, 29), 1)
            Date(2025, 2, 28)

            >>> CalendarUnit.FOREVER.calculate_add(Date(2024, 1, 1), -5)
            Date(-9999, 1, 1)
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"amount must be an int, got {type(amount).__name__}")
        check_int64(amount, "amount")

        if isinstance(value, DateTime):
            return value.with_date(self._add_to_date(value.date(), amount))
        if isinstance(value, Date):
            return self._add_to_date(value, amount)
        if isinstance(value, Time):
            return value
        raise TypeError(
            f"cannot add {self.display_name} to {type(value).__name__}"
        )

    def _add_to_date(self, date: Date, amount: int) -> Date:
        if amount == 0:
            return date

        if self is CalendarUnit.DAY:
            return date.add_days(amount)
        if self is CalendarUnit.WEEK:
            return date.add_weeks(amount)
        if self is CalendarUnit.MONTH:
            return date.add_months(amount)
        if self is CalendarUnit.QUARTER_YEAR:
            # Exact for any int64 amount; Date rejects results out of range
            return date.add_months(amount * 3)
        if self is CalendarUnit.HALF_YEAR:
            return date.add_months(amount * 6)
        if self is CalendarUnit.YEAR:
            return date.add_years(amount)
        if self is CalendarUnit.DECADE:
            return date.add_years(self._years_in(amount, 10))
        if self is CalendarUnit.CENTURY:
            return date.add_years(self._years_in(amount, 100))
        if self is CalendarUnit.MILLENNIUM:
            return date.add_years(self._years_in(amount, 1000))
        if self is CalendarUnit.ERA:
            logger.debug("rejected add of %d eras to %s", amount, date)
            raise UnsupportedOperationError(
                "unable to add eras, the calendar has only one era"
            )
        # FOREVER: only the direction matters
        return Date.MAX if amount > 0 else Date.MIN

    def _years_in(self, amount: int, years_per_unit: int) -> int:
        try:
            return safe_multiply(amount, years_per_unit)
        except OverflowError:
            logger.debug("%d %s overflows the year count", amount, self.display_name)
            raise

    # Difference

    def calculate_between(self, value1: T, value2: T) -> int:
        """Return the number of complete units from value1 to value2.

        The result is negative when value2 is before value1. For
        DateTime values the time of day is honoured: 23:00 one day to
        01:00 the next is not yet a complete day. For Time values the
        result is always 0.

        Args:
            value1: The start value.
            value2: The end value, of the same type as value1.

        Returns:
            The signed count of complete units.

        Raises:
            TypeError: If the values are of different or unsupported types.

        Examples:
            >>> CalendarUnit.YEAR.calculate_between(Date(2011, 6, 30), Date(2012, 6, 29))
            0
            >>> CalendarUnit.YEAR.calculate_between(Date(2011, 6, 30), Date(2012, 6, 30))
            1
            >>> CalendarUnit.DAY.calculate_between(
            ...     DateTime(2024, 1, 15, 23), DateTime(2024, 1, 16, 1)
            ... )
            0
        """
        if type(value1) is not type(value2):
            raise TypeError(
                f"cannot measure {self.display_name} between "
                f"{type(value1).__name__} and {type(value2).__name__}"
            )

        if isinstance(value1, DateTime):
            if self is CalendarUnit.ERA or self is CalendarUnit.FOREVER:
                return 0
            end = value2.date()
            if value2.time().is_before(value1.time()):
                # The last day is not complete until the start time comes round
                end = end.add_days(-1)
            return self._between_dates(value1.date(), end)
        if isinstance(value1, Date):
            return self._between_dates(value1, value2)
        if isinstance(value1, Time):
            return 0
        raise TypeError(
            f"cannot measure {self.display_name} between {type(value1).__name__} values"
        )

    def _between_dates(self, start: Date, end: Date) -> int:
        if self is CalendarUnit.DAY:
            return end.epoch_day - start.epoch_day
        if self is CalendarUnit.WEEK:
            return trunc_div(end.epoch_day - start.epoch_day, 7)
        if self is CalendarUnit.MONTH:
            return _months_between(start, end)
        if self is CalendarUnit.QUARTER_YEAR:
            return trunc_div(_months_between(start, end), 3)
        if self is CalendarUnit.HALF_YEAR:
            return trunc_div(_months_between(start, end), 6)
        if self is CalendarUnit.YEAR:
            return _years_between(start, end)
        if self is CalendarUnit.DECADE:
            return trunc_div(_years_between(start, end), 10)
        if self is CalendarUnit.CENTURY:
            return trunc_div(_years_between(start, end), 100)
        if self is CalendarUnit.MILLENNIUM:
            return trunc_div(_years_between(start, end), 1000)
        # ERA and FOREVER: one era, and no finite count of forever
        return 0

    def between(self, value1: T, value2: T) -> Period:
        """Return the complete units from value1 to value2 as a Period.

        Examples:
            >>> CalendarUnit.MONTH.between(Date(2024, 1, 15), Date(2024, 4, 14))
            Period(2, CalendarUnit.MONTH)
        """
        from calendrical.core.period import Period

        return Period(self.calculate_between(value1, value2), self)

    # Ordering by estimated duration

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarUnit):
            return NotImplemented
        return self._estimated_duration < other._estimated_duration

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarUnit):
            return NotImplemented
        return self._estimated_duration <= other._estimated_duration

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarUnit):
            return NotImplemented
        return self._estimated_duration > other._estimated_duration

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarUnit):
            return NotImplemented
        return self._estimated_duration >= other._estimated_duration

    def __repr__(self) -> str:
        return f"CalendarUnit.{self.name}"

    def __str__(self) -> str:
        return self._display_name


def _months_between(start: Date, end: Date) -> int:
    months = end.epoch_month - start.epoch_month
    if months > 0 and end.day < start.day and not end.is_last_day_of_month:
        months -= 1
    elif months < 0 and end.day > start.day:
        months += 1
    return months


def _years_between(start: Date, end: Date) -> int:
    years = end.year - start.year
    start_md = (start.month, start.day)
    end_md = (end.month, end.day)
    if years > 0 and end_md < start_md:
        # A 29 February anniversary clamped to the 28th has been reached
        if not (end.month == start.month and end.is_last_day_of_month):
            years -= 1
    elif years < 0 and end_md > start_md:
        years += 1
    return years


__all__ = ["CalendarUnit"]
