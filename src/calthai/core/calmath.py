"""
calthai.core.calmath
--------------------
Pure Gregorian month arithmetic for the calendar grid. No state.
"""

from __future__ import annotations

import calendar as pycal
from typing import Tuple

# Column numbering follows the `calendar` module: Monday=0 .. Sunday=6.
MONDAY = pycal.MONDAY
SUNDAY = pycal.SUNDAY


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")

def days_in_month(year: int, month: int) -> int:
    """Number of days in a Gregorian month (leap years via the Gregorian rule)."""
    _check_month(month)
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return (31, 0, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)[month - 1]

def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def first_weekday_of_month(year: int, month: int, *, week_start: int = SUNDAY) -> int:
    """
    Grid column (0..6) of day 1, counted from the first column of the week.

    Zeller's congruence; valid for any integer year of the proleptic
    Gregorian calendar.
    """
    _check_month(month)
    # Zeller: h = 0 is Saturday.
    m, y = month, year
    if m < 3:
        m += 12
        y -= 1
    k, j = y % 100, y // 100
    h = (1 + (13 * (m + 1)) // 5 + k + k // 4 + j // 4 + 5 * j) % 7
    iso_weekday = (h + 5) % 7  # Monday=0 .. Sunday=6
    return (iso_weekday - week_start) % 7

def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Return (year, month) moved by `delta` months, rolling the year over."""
    _check_month(month)
    idx = year * 12 + (month - 1) + delta
    return idx // 12, idx % 12 + 1
