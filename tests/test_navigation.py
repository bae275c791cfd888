# tests/test_navigation.py

import pytest

from calthai import navigation as nav
from calthai.core.errors import StateError
from calthai.core.types import ViewCursor

def test_select_year_goes_to_month_view():
    mode, cursor = nav.select_year(ViewCursor(2020, 5), 2569)
    assert mode == "month"
    assert cursor == ViewCursor(2026, 5)

def test_select_month_goes_to_day_view():
    mode, cursor = nav.select_month(ViewCursor(2026, 5), 3)
    assert mode == "day"
    assert cursor == ViewCursor(2026, 3)

def test_label_clicks():
    c = ViewCursor(2026, 5)
    assert nav.open_view(c) == ("day", c)
    assert nav.show_months(c) == ("month", c)
    assert nav.show_years(c) == ("year", c)

@pytest.mark.parametrize(
    "mode, cursor, direction, expected",
    [
        ("day", ViewCursor(2026, 1), -1, ViewCursor(2025, 12)),
        ("day", ViewCursor(2026, 12), 1, ViewCursor(2027, 1)),
        ("month", ViewCursor(2026, 5), 1, ViewCursor(2027, 5)),
        ("month", ViewCursor(2026, 5), -1, ViewCursor(2025, 5)),
        ("year", ViewCursor(2026, 5), -1, ViewCursor(2014, 5)),
        ("year", ViewCursor(2026, 5), 1, ViewCursor(2038, 5)),
    ],
)
def test_page(mode, cursor, direction, expected):
    assert nav.page(mode, cursor, direction) == expected

def test_page_rejects_bad_input():
    with pytest.raises(StateError):
        nav.page("day", ViewCursor(2026, 1), 2)
    with pytest.raises(StateError):
        nav.page("week", ViewCursor(2026, 1), 1)

def test_year_window_centres_cursor_year():
    years = nav.year_window(ViewCursor(2026, 1))
    assert years == list(range(2563, 2575))
    assert years[6] == 2569

def test_month_window():
    months = nav.month_window()
    assert len(months) == 12
    assert months[2] == (3, "มีนาคม")
    assert nav.month_window(short=True)[0] == (1, "ม.ค.")

def test_cursor_rejects_bad_month():
    with pytest.raises(ValueError):
        ViewCursor(2026, 13)
