"""Period class representing an amount of a single period unit.

This module provides the Period class, an immutable pair of a signed
64-bit amount and a unit such as CalendarUnit.MONTH. Periods are
produced by ``unit.between(a, b)`` and can be added back to dates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from calendrical._internal.checked import (
    check_int64,
    safe_add,
    safe_multiply,
    safe_negate,
    safe_subtract,
)

if TYPE_CHECKING:
    from calendrical.core.date import Date
    from calendrical.core.datetime import DateTime
    from calendrical.core.time import Time
    from calendrical.units.period_unit import PeriodUnit

    T = TypeVar("T", Date, Time, DateTime)


class Period:
    """An amount of time measured in a single unit, such as "3 Months".

    Unlike Duration (an estimated length in seconds), Period is applied
    through its unit's calendar rules: adding one month to Jan 31 yields
    Feb 28 or 29, not a fixed number of days.

    The amount is held to the signed 64-bit range; arithmetic that would
    leave it raises OverflowError.

    Attributes:
        amount: The signed number of units.
        unit: The unit the amount is measured in.

    Examples:
        >>> from calendrical import CalendarUnit, Date
        >>> p = Period(3, CalendarUnit.MONTH)
        >>> p.amount
        3
        >>> str(p)
        '3 Months'
        >>> p.add_to(Date(2024, 1, 31))
        Date(2024, 4, 30)
    """

    __slots__ = ("_amount", "_unit")

    def __init__(self, amount: int, unit: PeriodUnit) -> None:
        """Create a Period of amount units.

        Raises:
            TypeError: If amount is not an int or unit is not a PeriodUnit.
            OverflowError: If amount is outside the signed 64-bit range.
        """
        # Import here to avoid circular imports
        from calendrical.units.period_unit import PeriodUnit

        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"amount must be an int, got {type(amount).__name__}")
        if not isinstance(unit, PeriodUnit):
            raise TypeError(f"unit must be a PeriodUnit, got {type(unit).__name__}")
        self._amount: int = check_int64(amount, "amount")
        self._unit: PeriodUnit = unit

    @classmethod
    def of(cls, amount: int, unit: PeriodUnit) -> Period:
        """Create a Period of amount units.

        Examples:
            >>> from calendrical import CalendarUnit
            >>> Period.of(2, CalendarUnit.WEEK)
            Period(2, CalendarUnit.WEEK)
        """
        return cls(amount, unit)

    @classmethod
    def zero(cls, unit: PeriodUnit) -> Period:
        """Create a zero-length period of the given unit."""
        return cls(0, unit)

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def unit(self) -> PeriodUnit:
        return self._unit

    @property
    def is_zero(self) -> bool:
        return self._amount == 0

    @property
    def is_negative(self) -> bool:
        return self._amount < 0

    def negated(self) -> Period:
        """Return this period with the amount's sign flipped.

        Raises:
            OverflowError: If the amount is -2**63.
        """
        return Period(safe_negate(self._amount), self._unit)

    def multiplied_by(self, scalar: int) -> Period:
        """Return this period with the amount multiplied by scalar.

        Raises:
            OverflowError: If the product exceeds the signed 64-bit range.

        Examples:
            >>> from calendrical import CalendarUnit
            >>> Period(3, CalendarUnit.MONTH).multiplied_by(4)
            Period(12, CalendarUnit.MONTH)
        """
        return Period(safe_multiply(self._amount, scalar), self._unit)

    def plus(self, other: Period) -> Period:
        """Return the sum of two periods of the same unit.

        Raises:
            ValueError: If the units differ.
            OverflowError: If the sum exceeds the signed 64-bit range.
        """
        if not isinstance(other, Period):
            raise TypeError(f"expected Period, got {type(other).__name__}")
        if other._unit != self._unit:
            raise ValueError(
                f"cannot add {other._unit} to {self._unit}: units differ"
            )
        return Period(safe_add(self._amount, other._amount), self._unit)

    def minus(self, other: Period) -> Period:
        """Return the difference of two periods of the same unit.

        Raises:
            ValueError: If the units differ.
            OverflowError: If the difference exceeds the signed 64-bit range.
        """
        if not isinstance(other, Period):
            raise TypeError(f"expected Period, got {type(other).__name__}")
        if other._unit != self._unit:
            raise ValueError(
                f"cannot subtract {other._unit} from {self._unit}: units differ"
            )
        return Period(safe_subtract(self._amount, other._amount), self._unit)

    def add_to(self, value: T) -> T:
        """Return value shifted forward by this period.

        Examples:
            >>> from calendrical import CalendarUnit, Date
            >>> Period(1, CalendarUnit.YEAR).add_to(Date(2024, 2, 29))
            Date(2025, 2, 28)
        """
        return self._unit.calculate_add(value, self._amount)

    def subtract_from(self, value: T) -> T:
        """Return value shifted backward by this period.

        Raises:
            OverflowError: If the amount is -2**63.
        """
        return self._unit.calculate_add(value, safe_negate(self._amount))

    def __add__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Period:
        return self.negated()

    def __mul__(self, other: object) -> Period:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: object) -> Period:
        """Support scalar * Period."""
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        """Check equality with another period.

        Periods are equal only when both amount and unit match;
        Period(12, MONTH) is not equal to Period(1, YEAR).
        """
        if not isinstance(other, Period):
            return NotImplemented
        return self._amount == other._amount and self._unit == other._unit

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._amount, self._unit))

    def __repr__(self) -> str:
        return f"Period({self._amount}, {self._unit!r})"

    def __str__(self) -> str:
        return f"{self._amount} {self._unit.display_name}"

    def __bool__(self) -> bool:
        """Return True if this is a non-zero period."""
        return not self.is_zero


__all__ = ["Period"]
