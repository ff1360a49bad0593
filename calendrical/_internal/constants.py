"""Internal constants for Calendrical.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Average Gregorian year of 365.2425 days
SECONDS_PER_ESTIMATED_YEAR: int = 31_556_952

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Signed 64-bit range used for unit amounts
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

EPOCH_YEAR: int = 1970


__all__ = [
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_ESTIMATED_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "INT64_MIN",
    "INT64_MAX",
    "DAYS_IN_MONTH",
    "EPOCH_YEAR",
]
