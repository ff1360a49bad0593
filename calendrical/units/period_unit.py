"""PeriodUnit protocol describing a unit of period arithmetic.

A PeriodUnit knows its display name and estimated length, and can add
an amount of itself to a temporal value or count how many complete
units separate two values. CalendarUnit is the implementation shipped
with the library; Period accepts anything satisfying this protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from calendrical.core.duration import Duration
    from calendrical.core.period import Period

T = TypeVar("T")


@runtime_checkable
class PeriodUnit(Protocol):
    """Capability contract for a unit of period arithmetic."""

    @property
    def display_name(self) -> str:
        """The stable human-readable name of the unit."""
        ...

    @property
    def estimated_duration(self) -> Duration:
        """Approximate length of one unit."""
        ...

    @property
    def is_duration_estimated(self) -> bool:
        """True when estimated_duration is not exact."""
        ...

    def calculate_add(self, value: T, amount: int) -> T:
        """Return value shifted by amount of this unit."""
        ...

    def calculate_between(self, value1: T, value2: T) -> int:
        """Return the number of complete units from value1 to value2."""
        ...

    def between(self, value1: T, value2: T) -> Period:
        """Return calculate_between as a Period of this unit."""
        ...


__all__ = ["PeriodUnit"]
