"""Duration class representing an estimated span of time.

This module provides the Duration class used for the estimated lengths
of calendar units. It is a seconds count plus a nanosecond adjustment
and is meant for documentation and ordering, not for exact calendar
arithmetic.
"""

from __future__ import annotations

from calendrical._internal.constants import NANOS_PER_SECOND, SECONDS_PER_DAY


class Duration:
    """A span of time as whole seconds plus a nanosecond remainder.

    The internal representation is normalized such that:
    - `_seconds` carries the sign and can be any integer
    - `_nanos` is always in the range [0, 1_000_000_000)

    So -0.5 seconds is stored as seconds=-1, nanoseconds=500_000_000.

    Attributes:
        seconds: The whole-seconds component (can be negative).
        nanoseconds: The nanosecond adjustment in [0, 1e9).

    Examples:
        >>> Duration.of_seconds(86400)
        Duration(seconds=86400, nanoseconds=0)

        >>> Duration.of_seconds(1, -1)
        Duration(seconds=0, nanoseconds=999999999)

        >>> Duration.of_days(1) == Duration.of_seconds(86400)
        True
    """

    __slots__ = ("_seconds", "_nanos")

    def __init__(self, seconds: int = 0, nanoseconds: int = 0) -> None:
        """Create a Duration from seconds and a nanosecond adjustment.

        The nanosecond adjustment may be any integer; overflow beyond
        one second is carried into the seconds.

        Examples:
            >>> Duration(seconds=3, nanoseconds=1_500_000_000)
            Duration(seconds=4, nanoseconds=500000000)
        """
        carry, nanos = divmod(nanoseconds, NANOS_PER_SECOND)
        self._seconds: int = seconds + carry
        self._nanos: int = nanos

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create a Duration of the given seconds and nanosecond adjustment."""
        return cls(seconds=seconds, nanoseconds=nano_adjustment)

    @classmethod
    def of_days(cls, days: int) -> Duration:
        """Create a Duration of whole 86400-second days.

        Examples:
            >>> Duration.of_days(7)
            Duration(seconds=604800, nanoseconds=0)
        """
        return cls(seconds=days * SECONDS_PER_DAY)

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration."""
        return cls()

    @property
    def seconds(self) -> int:
        """Return the whole-seconds component."""
        return self._seconds

    @property
    def nanoseconds(self) -> int:
        """Return the nanosecond adjustment in [0, 1_000_000_000)."""
        return self._nanos

    @property
    def total_nanoseconds(self) -> int:
        """Return the duration as a single nanosecond count.

        Examples:
            >>> Duration.of_seconds(2, 5).total_nanoseconds
            2000000005
        """
        return self._seconds * NANOS_PER_SECOND + self._nanos

    @property
    def is_zero(self) -> bool:
        return self._seconds == 0 and self._nanos == 0

    @property
    def is_negative(self) -> bool:
        return self._seconds < 0

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(
            seconds=self._seconds + other._seconds,
            nanoseconds=self._nanos + other._nanos,
        )

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(
            seconds=self._seconds - other._seconds,
            nanoseconds=self._nanos - other._nanos,
        )

    def __neg__(self) -> Duration:
        return Duration(seconds=-self._seconds, nanoseconds=-self._nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) < (other._seconds, other._nanos)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) <= (other._seconds, other._nanos)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) > (other._seconds, other._nanos)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) >= (other._seconds, other._nanos)

    def __hash__(self) -> int:
        return hash((self._seconds, self._nanos))

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return an ISO 8601 duration string in seconds.

        Examples:
            >>> str(Duration.of_seconds(86400))
            'PT86400S'
            >>> str(Duration.of_seconds(1, 500_000_000))
            'PT1.5S'
            >>> str(Duration.of_seconds(0, -500_000_000))
            'PT-0.5S'
        """
        if self._nanos == 0:
            return f"PT{self._seconds}S"

        total = self.total_nanoseconds
        sign = "-" if total < 0 else ""
        whole, frac = divmod(abs(total), NANOS_PER_SECOND)
        return f"PT{sign}{whole}.{f'{frac:09d}'.rstrip('0')}S"

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return not self.is_zero


__all__ = ["Duration"]
