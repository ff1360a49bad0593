"""DateTime class combining a date with a time of day.

This module provides the DateTime class for representing local
date-times with nanosecond precision. There is no timezone: calendar
unit arithmetic operates on the local calendar only.
"""

from __future__ import annotations

from calendrical.core.date import Date
from calendrical.core.time import Time


class DateTime:
    """A local date-time: a Date paired with a Time.

    The date half carries all calendar arithmetic. Adding a calendar
    unit shifts the date and keeps the time-of-day as it was.

    Examples:
        >>> dt = DateTime(2024, 1, 15, 14, 30, 45)
        >>> dt.date()
        Date(2024, 1, 15)
        >>> dt.time()
        Time(14, 30, 45, nanosecond=0)
    """

    __slots__ = ("_date", "_time")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> None:
        """Create a DateTime from component parts.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> DateTime(2024, 1, 15, 14, 30, 45)
            DateTime(2024, 1, 15, 14, 30, 45, nanosecond=0)
        """
        self._date: Date = Date(year, month, day)
        self._time: Time = Time(hour, minute, second, nanosecond=nanosecond)

    @classmethod
    def combine(cls, date: Date, time: Time) -> DateTime:
        """Create a DateTime from a Date and a Time.

        Raises:
            TypeError: If either argument has the wrong type.

        Examples:
            >>> DateTime.combine(Date(2024, 1, 15), Time(14, 30, 45))
            DateTime(2024, 1, 15, 14, 30, 45, nanosecond=0)
        """
        if not isinstance(date, Date):
            raise TypeError(f"expected Date, got {type(date).__name__}")
        if not isinstance(time, Time):
            raise TypeError(f"expected Time, got {type(time).__name__}")
        instance = object.__new__(cls)
        instance._date = date
        instance._time = time
        return instance

    # Date components

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    # Time components

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    def date(self) -> Date:
        """Return the date component."""
        return self._date

    def time(self) -> Time:
        """Return the time-of-day component."""
        return self._time

    def with_date(self, date: Date) -> DateTime:
        """Return a DateTime with the date replaced and the time kept.

        Returns self when the date is unchanged.

        Examples:
            >>> DateTime(2024, 1, 15, 9, 30).with_date(Date(2025, 6, 1))
            DateTime(2025, 6, 1, 9, 30, 0, nanosecond=0)
        """
        if date == self._date:
            return self
        return DateTime.combine(date, self._time)

    def with_time(self, time: Time) -> DateTime:
        """Return a DateTime with the time-of-day replaced and the date kept."""
        if time == self._time:
            return self
        return DateTime.combine(self._date, time)

    def to_iso_format(self) -> str:
        """Return the date-time as an ISO 8601 string.

        Examples:
            >>> DateTime(2024, 1, 15, 14, 30, 45).to_iso_format()
            '2024-01-15T14:30:45'
        """
        return f"{self._date.to_iso_format()}T{self._time.to_iso_format()}"

    def __add__(self, other: object) -> DateTime:
        """Add a Period to this date-time."""
        from calendrical.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return other.add_to(self)

    def __sub__(self, other: object) -> DateTime:
        """Subtract a Period from this date-time."""
        from calendrical.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return other.subtract_from(self)

    def _key(self) -> tuple[int, int]:
        return (self._date.epoch_day, self._time.total_nanoseconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"DateTime({self.year}, {self.month}, {self.day}, {self.hour}, "
            f"{self.minute}, {self.second}, nanosecond={self.nanosecond})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """DateTimes are always truthy."""
        return True


__all__ = ["DateTime"]
