"""
calthai.grid
------------
Day-view cells: leading blanks to align day 1 under its weekday column,
then the day numbers of the month.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence, Tuple

from .core.calmath import SUNDAY, days_in_month, first_weekday_of_month
from .core.types import DayCell, ViewCursor

Cell = Optional[int]


def month_cells(year: int, month: int, *, week_start: int = SUNDAY) -> Tuple[Cell, ...]:
    pad = first_weekday_of_month(year, month, week_start=week_start)
    return (None,) * pad + tuple(range(1, days_in_month(year, month) + 1))

def month_weeks(year: int, month: int, *, week_start: int = SUNDAY) -> List[List[Cell]]:
    """`month_cells` in rows of 7, the last row padded with blanks."""
    cells = list(month_cells(year, month, week_start=week_start))
    if len(cells) % 7:
        cells += [None] * (7 - len(cells) % 7)
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]

def decorate(
    cells: Sequence[Cell],
    cursor: ViewCursor,
    *,
    selected: Optional[date] = None,
    today: Optional[date] = None,
) -> List[DayCell]:
    """Attach selected/today flags to each cell of the browsed month."""
    def same(d: Optional[date], day: int) -> bool:
        return d is not None and (d.year, d.month, d.day) == (cursor.year, cursor.month, day)

    out = []
    for c in cells:
        if c is None:
            out.append(DayCell(None))
        else:
            out.append(DayCell(c, is_selected=same(selected, c), is_today=same(today, c)))
    return out
