"""Core temporal types.

This module provides the fundamental temporal types:
    - Date: Calendar date in the proleptic Gregorian calendar
    - Time: Time of day with nanosecond precision
    - DateTime: Local date combined with a time of day
    - Duration: Estimated span as seconds plus nanoseconds
    - Period: Signed amount of a single period unit
"""

from __future__ import annotations

from calendrical.core.date import Date
from calendrical.core.datetime import DateTime
from calendrical.core.duration import Duration
from calendrical.core.period import Period
from calendrical.core.time import Time

__all__: list[str] = [
    "Date",
    "DateTime",
    "Duration",
    "Period",
    "Time",
]
