"""Internal utilities for Calendrical.

This module contains private implementation details:
    - Calendar maths (leap years, epoch days, epoch months)
    - Checked 64-bit arithmetic
    - Validation helpers
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from calendrical._internal.checked import (
    check_int64,
    safe_add,
    safe_multiply,
    safe_negate,
    safe_subtract,
    trunc_div,
)
from calendrical._internal.validation import (
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "check_int64",
    "safe_add",
    "safe_multiply",
    "safe_negate",
    "safe_subtract",
    "trunc_div",
    "validate_day",
    "validate_month",
    "validate_time",
    "validate_year",
]
