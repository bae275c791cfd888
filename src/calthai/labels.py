"""Thai labels used by the picker header and grids."""

from __future__ import annotations

from typing import List, Tuple

from .core.calmath import SUNDAY
from .core.config import BE_OFFSET

THAI_MONTHS = (
    "มกราคม", "กุมภาพันธ์", "มีนาคม", "เมษายน", "พฤษภาคม", "มิถุนายน",
    "กรกฎาคม", "สิงหาคม", "กันยายน", "ตุลาคม", "พฤศจิกายน", "ธันวาคม",
)

THAI_MONTHS_SHORT = (
    "ม.ค.", "ก.พ.", "มี.ค.", "เม.ย.", "พ.ค.", "มิ.ย.",
    "ก.ค.", "ส.ค.", "ก.ย.", "ต.ค.", "พ.ย.", "ธ.ค.",
)

# Monday-first, matching `calendar` weekday numbers.
THAI_WEEKDAYS_SHORT = ("จ", "อ", "พ", "พฤ", "ศ", "ส", "อา")

ERA_BE = "พ.ศ."
ERA_AD = "ค.ศ."


def month_name(month: int, *, short: bool = False) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return (THAI_MONTHS_SHORT if short else THAI_MONTHS)[month - 1]

def weekday_header(week_start: int = SUNDAY) -> List[str]:
    """Column labels for the day grid, starting at `week_start`."""
    return [THAI_WEEKDAYS_SHORT[(week_start + i) % 7] for i in range(7)]

def be_year_label(year_ad: int) -> str:
    return f"{ERA_BE} {year_ad + BE_OFFSET}"

def ad_year_label(year_ad: int) -> str:
    return f"{ERA_AD} {year_ad}"

def month_choices(*, short: bool = False) -> List[Tuple[int, str]]:
    return [(m, month_name(m, short=short)) for m in range(1, 13)]
