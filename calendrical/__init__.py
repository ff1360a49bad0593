"""Calendrical: calendar period arithmetic for the proleptic Gregorian calendar.

Calendrical provides a fixed catalogue of calendar units and the rules
for adding them to dates and counting the complete units between dates.

Core Types:
    Date: Calendar date (year, month, day)
    Time: Time of day (hour, minute, second, nanosecond)
    DateTime: Local date combined with a time of day
    Duration: Estimated span as seconds plus nanoseconds
    Period: Signed amount of a single unit, e.g. 3 Months

Units:
    CalendarUnit: DAY, WEEK, MONTH, QUARTER_YEAR, HALF_YEAR, YEAR,
        DECADE, CENTURY, MILLENNIUM, ERA, FOREVER
    PeriodUnit: Protocol implemented by CalendarUnit

Exceptions:
    CalendricalError: Base exception
    ValidationError: Invalid input values
    DateRangeError: Result outside the supported dates
    OverflowError: Signed 64-bit overflow
    UnsupportedOperationError: Operation meaningless for the unit

Example:
    >>> from calendrical import CalendarUnit, Date
    >>> CalendarUnit.MONTH.calculate_add(Date(2024, 1, 31), 1)
    Date(2024, 2, 29)
    >>> CalendarUnit.YEAR.between(Date(2011, 6, 30), Date(2012, 6, 30))
    Period(1, CalendarUnit.YEAR)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from calendrical.core.date import Date
from calendrical.core.datetime import DateTime
from calendrical.core.duration import Duration
from calendrical.core.period import Period
from calendrical.core.time import Time

# Units
from calendrical.units.calendar_unit import CalendarUnit
from calendrical.units.period_unit import PeriodUnit

# Exceptions
from calendrical.errors import (
    CalendricalError,
    DateRangeError,
    OverflowError,
    UnsupportedOperationError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Duration",
    "Period",
    "Time",
    # Units
    "CalendarUnit",
    "PeriodUnit",
    # Exceptions
    "CalendricalError",
    "ValidationError",
    "DateRangeError",
    "OverflowError",
    "UnsupportedOperationError",
]
