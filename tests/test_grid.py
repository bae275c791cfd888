# tests/test_grid.py

from datetime import date

from calthai.core.calmath import MONDAY
from calthai.core.types import ViewCursor
from calthai.grid import decorate, month_cells, month_weeks

def test_february_2026_has_no_leading_blanks():
    assert month_cells(2026, 2) == tuple(range(1, 29))

def test_leading_blanks():
    # 1 Oct 2026 is a Thursday
    cells = month_cells(2026, 10)
    assert cells[:4] == (None,) * 4
    assert cells[4:] == tuple(range(1, 32))

    # 1 Feb 2024 is a Thursday, leap February
    cells = month_cells(2024, 2)
    assert len(cells) == 4 + 29

def test_monday_start():
    assert month_cells(2026, 2, week_start=MONDAY)[:7] == (None,) * 6 + (1,)

def test_weeks():
    assert month_weeks(2026, 2) == [list(range(i, i + 7)) for i in (1, 8, 15, 22)]
    weeks = month_weeks(2024, 2)
    assert len(weeks) == 5
    assert weeks[-1] == [25, 26, 27, 28, 29, None, None]
    assert all(len(w) == 7 for w in weeks)

def test_decorate():
    cells = decorate(
        month_cells(2026, 2),
        ViewCursor(2026, 2),
        selected=date(2026, 2, 18),
        today=date(2026, 2, 1),
    )
    assert [c.day for c in cells if c.is_selected] == [18]
    assert [c.day for c in cells if c.is_today] == [1]

def test_decorate_other_month():
    cells = decorate(month_cells(2026, 10), ViewCursor(2026, 10), selected=date(2026, 2, 18))
    assert cells[0].day is None
    assert not any(c.is_selected or c.is_today for c in cells)
