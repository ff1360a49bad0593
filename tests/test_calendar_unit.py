"""Tests for CalendarUnit metadata and ordering."""

from __future__ import annotations

import pytest

from calendrical import CalendarUnit, Duration, PeriodUnit

YEAR_SECONDS = 31_556_952


class TestDisplayNames:
    """Tests for display names."""

    @pytest.mark.parametrize(
        ("unit", "name"),
        [
            (CalendarUnit.DAY, "Days"),
            (CalendarUnit.WEEK, "Weeks"),
            (CalendarUnit.MONTH, "Months"),
            (CalendarUnit.QUARTER_YEAR, "QuarterYears"),
            (CalendarUnit.HALF_YEAR, "HalfYears"),
            (CalendarUnit.YEAR, "Years"),
            (CalendarUnit.DECADE, "Decades"),
            (CalendarUnit.CENTURY, "Centuries"),
            (CalendarUnit.MILLENNIUM, "Millenia"),
            (CalendarUnit.ERA, "Eras"),
            (CalendarUnit.FOREVER, "Forever"),
        ],
    )
    def test_display_name(self, unit: CalendarUnit, name: str) -> None:
        assert unit.display_name == name
        assert str(unit) == name

    def test_repr(self) -> None:
        assert repr(CalendarUnit.HALF_YEAR) == "CalendarUnit.HALF_YEAR"


class TestEstimatedDuration:
    """Tests for estimated durations."""

    @pytest.mark.parametrize(
        ("unit", "seconds"),
        [
            (CalendarUnit.DAY, 86_400),
            (CalendarUnit.WEEK, 604_800),
            (CalendarUnit.MONTH, 2_629_746),
            (CalendarUnit.QUARTER_YEAR, 7_889_238),
            (CalendarUnit.HALF_YEAR, 15_778_476),
            (CalendarUnit.YEAR, YEAR_SECONDS),
            (CalendarUnit.DECADE, YEAR_SECONDS * 10),
            (CalendarUnit.CENTURY, YEAR_SECONDS * 100),
            (CalendarUnit.MILLENNIUM, YEAR_SECONDS * 1000),
            (CalendarUnit.ERA, YEAR_SECONDS * 1_000_000_000),
        ],
    )
    def test_seconds(self, unit: CalendarUnit, seconds: int) -> None:
        assert unit.estimated_duration == Duration.of_seconds(seconds)

    def test_forever_is_largest_duration(self) -> None:
        forever = CalendarUnit.FOREVER.estimated_duration
        assert forever.seconds == 2**63 - 1
        assert forever.nanoseconds == 999_999_999

    def test_all_estimated(self) -> None:
        assert all(unit.is_duration_estimated for unit in CalendarUnit)


class TestOrdering:
    """Tests for ordering by estimated duration."""

    def test_declaration_order_is_sorted(self) -> None:
        units = list(CalendarUnit)
        assert sorted(reversed(units)) == units

    def test_comparisons(self) -> None:
        assert CalendarUnit.DAY < CalendarUnit.WEEK
        assert CalendarUnit.MILLENNIUM < CalendarUnit.ERA < CalendarUnit.FOREVER
        assert CalendarUnit.YEAR >= CalendarUnit.YEAR
        assert CalendarUnit.CENTURY > CalendarUnit.DECADE
        assert CalendarUnit.MONTH <= CalendarUnit.QUARTER_YEAR

    def test_compare_with_other_type(self) -> None:
        with pytest.raises(TypeError):
            CalendarUnit.DAY < 1  # noqa: B015


class TestProtocol:
    """CalendarUnit satisfies the PeriodUnit protocol."""

    def test_isinstance(self) -> None:
        for unit in CalendarUnit:
            assert isinstance(unit, PeriodUnit)
