"""Tests for the Duration class."""

from __future__ import annotations

from calendrical.core.duration import Duration


class TestDurationConstruction:
    """Tests for construction and normalisation."""

    def test_of_seconds(self) -> None:
        d = Duration.of_seconds(86400)
        assert d.seconds == 86400
        assert d.nanoseconds == 0

    def test_nanosecond_carry(self) -> None:
        """Nanoseconds beyond a second carry into the seconds."""
        d = Duration.of_seconds(3, 1_500_000_000)
        assert (d.seconds, d.nanoseconds) == (4, 500_000_000)

    def test_negative_adjustment_borrows(self) -> None:
        """A negative adjustment borrows from the seconds."""
        d = Duration.of_seconds(1, -1)
        assert (d.seconds, d.nanoseconds) == (0, 999_999_999)
        d = Duration.of_seconds(0, -500_000_000)
        assert (d.seconds, d.nanoseconds) == (-1, 500_000_000)

    def test_of_days(self) -> None:
        assert Duration.of_days(7) == Duration.of_seconds(604800)

    def test_zero(self) -> None:
        assert Duration.zero().is_zero
        assert not Duration.zero()

    def test_large_values_are_exact(self) -> None:
        """Values at the edge of the int64 seconds range keep full precision."""
        d = Duration.of_seconds(2**63 - 1, 999_999_999)
        assert d.seconds == 2**63 - 1
        assert d.nanoseconds == 999_999_999


class TestDurationArithmetic:
    """Tests for +, - and negation."""

    def test_add(self) -> None:
        total = Duration.of_seconds(1, 600_000_000) + Duration.of_seconds(0, 600_000_000)
        assert total == Duration.of_seconds(2, 200_000_000)

    def test_subtract(self) -> None:
        assert Duration.of_seconds(5) - Duration.of_seconds(7) == Duration.of_seconds(-2)

    def test_negate(self) -> None:
        assert -Duration.of_seconds(1, 500_000_000) == Duration.of_seconds(-2, 500_000_000)
        assert (-Duration.of_seconds(3)).is_negative

    def test_total_nanoseconds(self) -> None:
        assert Duration.of_seconds(2, 5).total_nanoseconds == 2_000_000_005
        assert Duration.of_seconds(0, -1).total_nanoseconds == -1


class TestDurationComparison:
    """Tests for ordering and hashing."""

    def test_ordering(self) -> None:
        assert Duration.of_seconds(1) < Duration.of_seconds(1, 1)
        assert Duration.of_seconds(-1) < Duration.zero()
        assert Duration.of_seconds(2) >= Duration.of_seconds(2)
        assert Duration.of_seconds(3) > Duration.of_seconds(2, 999_999_999)

    def test_hash(self) -> None:
        assert hash(Duration.of_seconds(1, 1)) == hash(Duration(seconds=1, nanoseconds=1))


class TestDurationFormatting:
    """Tests for string representations."""

    def test_str(self) -> None:
        assert str(Duration.of_seconds(86400)) == "PT86400S"
        assert str(Duration.of_seconds(1, 500_000_000)) == "PT1.5S"
        assert str(Duration.of_seconds(0, -500_000_000)) == "PT-0.5S"

    def test_repr(self) -> None:
        assert repr(Duration.of_seconds(60)) == "Duration(seconds=60, nanoseconds=0)"
