"""Time class representing a time of day.

This module provides the Time class for representing time-of-day values
with nanosecond precision.
"""

from __future__ import annotations

from typing import ClassVar

from calendrical._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from calendrical._internal.validation import validate_time


class Time:
    """A time of day with nanosecond precision.

    Time represents the time portion of a day, from midnight (00:00:00)
    to just before the next midnight (23:59:59.999999999). It does not
    include any date or timezone information.

    The internal representation stores the total nanoseconds since
    midnight in a single `_nanos` slot.

    Calendar units are all at least a day long, so adding any of them
    to a Time leaves it unchanged.

    Examples:
        >>> t = Time(14, 30, 45)
        >>> t.hour
        14
        >>> Time(23, 0).is_before(Time(23, 0, 1))
        True
    """

    __slots__ = ("_nanos",)

    MIDNIGHT: ClassVar[Time]
    NOON: ClassVar[Time]

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> None:
        """Create a Time from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond (0-999999999).

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Time(14, 30, 45)
            Time(14, 30, 45, nanosecond=0)
        """
        validate_time(hour, minute, second, nanosecond)

        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        """Return the nanosecond component (0-999999999).

        This is the nanoseconds within the current second, not the
        total nanoseconds since midnight.
        """
        return self._nanos % NANOS_PER_SECOND

    @property
    def total_nanoseconds(self) -> int:
        """Return the total nanoseconds since midnight.

        Examples:
            >>> Time(0, 0, 1).total_nanoseconds
            1000000000
        """
        return self._nanos

    def is_before(self, other: Time) -> bool:
        """Return True if this time is strictly earlier in the day than other.

        Raises:
            TypeError: If other is not a Time.
        """
        if not isinstance(other, Time):
            raise TypeError(f"expected Time, got {type(other).__name__}")
        return self._nanos < other._nanos

    def is_after(self, other: Time) -> bool:
        """Return True if this time is strictly later in the day than other.

        Raises:
            TypeError: If other is not a Time.
        """
        if not isinstance(other, Time):
            raise TypeError(f"expected Time, got {type(other).__name__}")
        return self._nanos > other._nanos

    def to_iso_format(self) -> str:
        """Return the time as an ISO 8601 string.

        Fractional seconds are printed only when non-zero, with trailing
        zeros removed.

        Examples:
            >>> Time(14, 30, 45).to_iso_format()
            '14:30:45'
            >>> Time(14, 30, 45, nanosecond=500_000_000).to_iso_format()
            '14:30:45.5'
        """
        base = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        if self.nanosecond == 0:
            return base
        frac = f"{self.nanosecond:09d}".rstrip("0")
        return f"{base}.{frac}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"Time({self.hour}, {self.minute}, {self.second}, nanosecond={self.nanosecond})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Times are always truthy (even midnight)."""
        return True


Time.MIDNIGHT = Time(0, 0, 0)
Time.NOON = Time(12, 0, 0)


__all__ = ["Time"]
