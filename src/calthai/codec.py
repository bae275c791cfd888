"""
calthai.codec
-------------
Conversion between the canonical Gregorian string exchanged with the host
application and the Buddhist Era string shown to the user.

    canonical  YYYY-MM-DD        or  YYYY-MM-DD HH:mm     (AD)
    display    DD/MM/YYYY        or  DD/MM/YYYY HH:mm     (BE = AD + 543)

The `decode_*` functions raise a `ParseError` subclass describing why a string
was rejected; the `parse_*` functions wrap them and return None instead, which
is what the entry control works with.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from .core import clock
from .core.calmath import days_in_month
from .core.config import BE_OFFSET, PLAUSIBILITY_YEARS, PickerConfig
from .core.errors import (
    CalendarExistenceError,
    CalendarRangeError,
    ParseError,
    PlausibilityError,
    StructuralParseError,
    TimeRangeError,
)

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]

DATE_LENGTH = 10
DATETIME_LENGTH = 16

_CANONICAL_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_DISPLAY_RE = re.compile(r"(\d{2})/(\d{2})/(\d{4})", re.ASCII)
_TIME_RE = re.compile(r"(\d{2}):(\d{2})", re.ASCII)


def expected_length(with_time: bool) -> int:
    return DATETIME_LENGTH if with_time else DATE_LENGTH

def _hm(d: DateLike) -> tuple[int, int]:
    # A plain `date` is midnight.
    return getattr(d, "hour", 0), getattr(d, "minute", 0)

# ============================================================
# Formatting
# ============================================================

def format_canonical(d: Optional[DateLike], *, with_time: bool = False) -> str:
    """`YYYY-MM-DD[ HH:mm]`, or "" when there is no date."""
    if d is None:
        return ""
    out = f"{d.year:04d}-{d.month:02d}-{d.day:02d}"
    if with_time:
        h, m = _hm(d)
        out += f" {h:02d}:{m:02d}"
    return out

def format_display(d: Optional[DateLike], *, with_time: bool = False) -> str:
    """`DD/MM/YYYY[ HH:mm]` with a Buddhist Era year, or "" when there is no date."""
    if d is None:
        return ""
    out = f"{d.day:02d}/{d.month:02d}/{d.year + BE_OFFSET:04d}"
    if with_time:
        h, m = _hm(d)
        out += f" {h:02d}:{m:02d}"
    return out

# ============================================================
# Decoding (raising)
# ============================================================

def _split(value: str, pattern: re.Pattern, with_time: bool) -> tuple[tuple[str, ...], Optional[tuple[str, str]]]:
    if not isinstance(value, str) or len(value) != expected_length(with_time):
        raise StructuralParseError(value, f"expected {expected_length(with_time)} characters")

    date_part, time_part = value[:DATE_LENGTH], None
    if with_time:
        if value[DATE_LENGTH] != " ":
            raise StructuralParseError(value, "expected a space between date and time")
        time_part = value[DATE_LENGTH + 1:]

    m = pattern.fullmatch(date_part)
    if m is None:
        raise StructuralParseError(value, "malformed date segments")
    if time_part is None:
        return m.groups(), None

    t = _TIME_RE.fullmatch(time_part)
    if t is None:
        raise StructuralParseError(value, "malformed time segment")
    return m.groups(), t.groups()

def _check_ranges(value: str, month: int, day: int) -> None:
    if not 1 <= month <= 12:
        raise CalendarRangeError(value, f"month {month} out of range")
    if not 1 <= day <= 31:
        raise CalendarRangeError(value, f"day {day} out of range")

def _build(value: str, year: int, month: int, day: int, hm: Optional[tuple[str, str]]) -> datetime:
    if day > days_in_month(year, month):
        raise CalendarExistenceError(value, f"{year:04d}-{month:02d} has no day {day}")

    hour = minute = 0
    if hm is not None:
        hour, minute = int(hm[0]), int(hm[1])
        if not 0 <= hour <= 23:
            raise TimeRangeError(value, f"hour {hour} out of range")
        if not 0 <= minute <= 59:
            raise TimeRangeError(value, f"minute {minute} out of range")

    try:
        d = datetime(year, month, day, hour, minute)
    except ValueError as e:
        # Year 0 and years past 9999.
        raise CalendarExistenceError(value, str(e)) from e
    return d

def decode_canonical(value: str, *, with_time: bool = False) -> datetime:
    """Strict inverse of `format_canonical`. Raises ParseError."""
    (ys, ms, ds), hm = _split(value, _CANONICAL_RE, with_time)
    year, month, day = int(ys), int(ms), int(ds)
    _check_ranges(value, month, day)
    return _build(value, year, month, day, hm)

def decode_display(
    value: str,
    *,
    with_time: bool = False,
    today: Optional[datetime] = None,
    plausibility_years: int = PLAUSIBILITY_YEARS,
) -> datetime:
    """
    Strict inverse of `format_display`. Raises ParseError.

    The BE year is converted to AD first; the AD year must then lie within
    `plausibility_years` of the current year (inclusive) before the calendar
    existence check runs.
    """
    (ds, ms, ys), hm = _split(value, _DISPLAY_RE, with_time)
    day, month, year_be = int(ds), int(ms), int(ys)
    _check_ranges(value, month, day)

    year = year_be - BE_OFFSET
    current = clock.current_year(today)
    if abs(year - current) > plausibility_years:
        raise PlausibilityError(value, f"year {year} is more than {plausibility_years} years from {current}")

    return _build(value, year, month, day, hm)

# ============================================================
# Parsing (None on failure)
# ============================================================

def parse_canonical(value: str, *, with_time: bool = False) -> Optional[datetime]:
    try:
        return decode_canonical(value, with_time=with_time)
    except ParseError as e:
        logger.debug("rejected canonical value (%s): %s", type(e).__name__, e)
        return None

def parse_display(
    value: str,
    *,
    with_time: bool = False,
    today: Optional[datetime] = None,
    plausibility_years: int = PLAUSIBILITY_YEARS,
) -> Optional[datetime]:
    try:
        return decode_display(value, with_time=with_time, today=today, plausibility_years=plausibility_years)
    except ParseError as e:
        logger.debug("rejected display value (%s): %s", type(e).__name__, e)
        return None


@dataclass(frozen=True)
class Codec:
    """The four conversions bound to one mode, as the entry control uses them."""
    with_time: bool = False
    plausibility_years: int = PLAUSIBILITY_YEARS

    @classmethod
    def from_config(cls, config: PickerConfig) -> "Codec":
        return cls(with_time=config.with_time, plausibility_years=config.plausibility_years)

    @property
    def expected_length(self) -> int:
        return expected_length(self.with_time)

    def format_canonical(self, d: Optional[DateLike]) -> str:
        return format_canonical(d, with_time=self.with_time)

    def format_display(self, d: Optional[DateLike]) -> str:
        return format_display(d, with_time=self.with_time)

    def parse_canonical(self, value: str) -> Optional[datetime]:
        return parse_canonical(value, with_time=self.with_time)

    def parse_display(self, value: str, *, today: Optional[datetime] = None) -> Optional[datetime]:
        return parse_display(value, with_time=self.with_time, today=today, plausibility_years=self.plausibility_years)
