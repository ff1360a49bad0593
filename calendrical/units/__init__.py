"""Period units for Calendrical.

This module provides:
    - PeriodUnit: Protocol every period unit satisfies
    - CalendarUnit: Standard date-based units from DAY to FOREVER
"""

from __future__ import annotations

from calendrical.units.calendar_unit import CalendarUnit
from calendrical.units.period_unit import PeriodUnit

__all__: list[str] = ["CalendarUnit", "PeriodUnit"]
