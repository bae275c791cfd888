"""
calthai.navigation
------------------
Browsing levels of the calendar popover.

    day   --click month label-->  month
    day   --click year label--->  year
    month --select month------->  day     (cursor month set)
    year  --select year-------->  month   (cursor year set)

Paging moves the cursor by one month, one year, or twelve years depending on
the level. Opening the popover always starts at `day`.
"""

from __future__ import annotations

from typing import List, Tuple

from .core.config import BE_OFFSET
from .core.errors import StateError
from .core.types import VIEW_MODES, ViewCursor, ViewMode
from .labels import month_choices

YEAR_PAGE = 12
# The browsed year is the 7th of the 12 years shown.
YEAR_WINDOW_LEAD = 6

Nav = Tuple[ViewMode, ViewCursor]


def _check_mode(mode: str) -> None:
    if mode not in VIEW_MODES:
        raise StateError(f"Unknown view mode '{mode}'. Available: {list(VIEW_MODES)}")

def open_view(cursor: ViewCursor) -> Nav:
    return "day", cursor

def show_months(cursor: ViewCursor) -> Nav:
    return "month", cursor

def show_years(cursor: ViewCursor) -> Nav:
    return "year", cursor

def select_month(cursor: ViewCursor, month: int) -> Nav:
    """Pick a month in the month grid; the year is unchanged."""
    return "day", cursor.with_month(month)

def select_year(cursor: ViewCursor, be_year: int) -> Nav:
    """Pick a BE year in the year grid; the month is unchanged."""
    return "month", cursor.with_year(be_year - BE_OFFSET)

def page_step(mode: ViewMode) -> int:
    """Cursor movement in months for one prev/next click at this level."""
    _check_mode(mode)
    return {"day": 1, "month": 12, "year": 12 * YEAR_PAGE}[mode]

def page(mode: ViewMode, cursor: ViewCursor, direction: int) -> ViewCursor:
    if direction not in (-1, 1):
        raise StateError(f"direction must be -1 or +1, got {direction}")
    return cursor.shifted(direction * page_step(mode))

def year_window(cursor: ViewCursor) -> List[int]:
    """The 12 BE years offered by the year grid."""
    start = cursor.year + BE_OFFSET - YEAR_WINDOW_LEAD
    return list(range(start, start + YEAR_PAGE))

def month_window(*, short: bool = False) -> List[Tuple[int, str]]:
    """The 12 (month, Thai name) entries offered by the month grid."""
    return month_choices(short=short)
