"""Tests for the Period class."""

from __future__ import annotations

import pytest

from calendrical import CalendarUnit, Date, DateTime, Period
from calendrical.errors import OverflowError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class TestPeriodConstruction:
    """Tests for Period construction."""

    def test_basic(self) -> None:
        p = Period(5, CalendarUnit.MONTH)
        assert p.amount == 5
        assert p.unit is CalendarUnit.MONTH

    def test_factories(self) -> None:
        assert Period.of(2, CalendarUnit.WEEK) == Period(2, CalendarUnit.WEEK)
        assert Period.zero(CalendarUnit.DAY).is_zero
        assert not Period.zero(CalendarUnit.DAY)

    def test_int64_bounds_accepted(self) -> None:
        assert Period(INT64_MAX, CalendarUnit.DAY).amount == INT64_MAX
        assert Period(INT64_MIN, CalendarUnit.DAY).is_negative

    def test_amount_out_of_range(self) -> None:
        with pytest.raises(OverflowError, match="amount exceeds signed 64-bit range"):
            Period(2**63, CalendarUnit.DAY)

    def test_rejects_non_int_amount(self) -> None:
        with pytest.raises(TypeError, match="amount must be an int"):
            Period(1.5, CalendarUnit.DAY)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="amount must be an int"):
            Period(True, CalendarUnit.DAY)  # type: ignore[arg-type]

    def test_rejects_non_unit(self) -> None:
        with pytest.raises(TypeError, match="unit must be a PeriodUnit"):
            Period(1, "days")  # type: ignore[arg-type]


class TestPeriodArithmetic:
    """Tests for Period negation, scaling, addition and subtraction."""

    def test_negated(self) -> None:
        assert -Period(3, CalendarUnit.YEAR) == Period(-3, CalendarUnit.YEAR)

    def test_negated_overflow(self) -> None:
        with pytest.raises(OverflowError):
            Period(INT64_MIN, CalendarUnit.DAY).negated()

    def test_multiplied_by(self) -> None:
        p = Period(3, CalendarUnit.MONTH)
        assert p * 4 == Period(12, CalendarUnit.MONTH)
        assert 4 * p == Period(12, CalendarUnit.MONTH)

    def test_multiplied_by_overflow(self) -> None:
        with pytest.raises(OverflowError):
            Period(2**62, CalendarUnit.DAY).multiplied_by(2)

    def test_plus_and_minus(self) -> None:
        a = Period(5, CalendarUnit.DAY)
        b = Period(3, CalendarUnit.DAY)
        assert a + b == Period(8, CalendarUnit.DAY)
        assert a - b == Period(2, CalendarUnit.DAY)

    def test_minus_at_int64_min(self) -> None:
        """Subtracting a negative amount works when negating it would not."""
        low = Period(INT64_MIN, CalendarUnit.DAY)
        assert Period(-1, CalendarUnit.DAY) - low == Period(INT64_MAX, CalendarUnit.DAY)

    def test_plus_overflow(self) -> None:
        with pytest.raises(OverflowError):
            Period(INT64_MAX, CalendarUnit.DAY) + Period(1, CalendarUnit.DAY)

    def test_mixed_units_rejected(self) -> None:
        with pytest.raises(ValueError, match="units differ"):
            Period(1, CalendarUnit.DAY).plus(Period(1, CalendarUnit.MONTH))
        with pytest.raises(ValueError, match="units differ"):
            Period(1, CalendarUnit.DAY).minus(Period(1, CalendarUnit.MONTH))

    def test_plus_rejects_non_period(self) -> None:
        with pytest.raises(TypeError, match="expected Period"):
            Period(1, CalendarUnit.DAY).plus(1)  # type: ignore[arg-type]


class TestPeriodApplication:
    """Tests for applying a Period to temporal values."""

    def test_add_to_date(self) -> None:
        assert Period(3, CalendarUnit.MONTH).add_to(Date(2024, 1, 31)) == Date(2024, 4, 30)

    def test_subtract_from_date(self) -> None:
        assert Period(1, CalendarUnit.YEAR).subtract_from(Date(2024, 2, 29)) == Date(2023, 2, 28)

    def test_add_to_datetime(self) -> None:
        dt = DateTime(2024, 1, 15, 6, 45)
        assert Period(2, CalendarUnit.WEEK).add_to(dt) == DateTime(2024, 1, 29, 6, 45)

    def test_subtract_from_int64_min(self) -> None:
        with pytest.raises(OverflowError):
            Period(INT64_MIN, CalendarUnit.DAY).subtract_from(Date(2024, 1, 1))


class TestPeriodEquality:
    """Tests for equality, hashing and representations."""

    def test_equality_requires_same_unit(self) -> None:
        assert Period(12, CalendarUnit.MONTH) != Period(1, CalendarUnit.YEAR)
        assert Period(1, CalendarUnit.YEAR) == Period(1, CalendarUnit.YEAR)

    def test_hash(self) -> None:
        periods = {Period(1, CalendarUnit.DAY), Period(1, CalendarUnit.DAY)}
        assert len(periods) == 1

    def test_repr_and_str(self) -> None:
        p = Period(5, CalendarUnit.MONTH)
        assert repr(p) == "Period(5, CalendarUnit.MONTH)"
        assert str(p) == "5 Months"
        assert str(Period(-2, CalendarUnit.QUARTER_YEAR)) == "-2 QuarterYears"
