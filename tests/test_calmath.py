# tests/test_calmath.py

import calendar
from datetime import date

import pytest

from calthai.core.calmath import (
    MONDAY,
    SUNDAY,
    days_in_month,
    first_weekday_of_month,
    is_leap_year,
    shift_month,
)

@pytest.mark.parametrize(
    "year, month, expected",
    [
        (2024, 2, 29),
        (2025, 2, 28),
        (1900, 2, 28),
        (2000, 2, 29),
        (2026, 4, 30),
        (2026, 12, 31),
    ],
)
def test_days_in_month(year, month, expected):
    assert days_in_month(year, month) == expected

def test_leap_rule():
    assert is_leap_year(2024)
    assert not is_leap_year(2100)
    assert is_leap_year(2400)

def test_against_stdlib_calendar():
    """
    Sweep two centuries and compare with the `calendar` module and
    `date.weekday()` (Monday=0).
    """
    for y in range(1900, 2101):
        for m in range(1, 13):
            assert days_in_month(y, m) == calendar.monthrange(y, m)[1]
            wd = date(y, m, 1).weekday()
            assert first_weekday_of_month(y, m, week_start=MONDAY) == wd
            assert first_weekday_of_month(y, m, week_start=SUNDAY) == (wd + 1) % 7

def test_february_2026_starts_on_sunday():
    assert first_weekday_of_month(2026, 2) == 0
    assert first_weekday_of_month(2026, 2, week_start=MONDAY) == 6

def test_any_integer_year():
    assert 0 <= first_weekday_of_month(-44, 3) <= 6
    assert 0 <= first_weekday_of_month(12000, 1) <= 6

@pytest.mark.parametrize(
    "year, month, delta, expected",
    [
        (2026, 1, -1, (2025, 12)),
        (2026, 12, 1, (2027, 1)),
        (2026, 5, 12, (2027, 5)),
        (2026, 5, -144, (2014, 5)),
        (2026, 5, 0, (2026, 5)),
    ],
)
def test_shift_month(year, month, delta, expected):
    assert shift_month(year, month, delta) == expected

@pytest.mark.parametrize("month", [0, 13])
def test_bad_month_raises(month):
    with pytest.raises(ValueError):
        days_in_month(2026, month)
    with pytest.raises(ValueError):
        first_weekday_of_month(2026, month)
