# tests/test_sync.py

from datetime import datetime

from calthai.sync import reconcile

TODAY = datetime(2026, 10, 17, 9, 30)

def test_echo_is_ignored():
    d = reconcile("18/02/2569", "2026-02-18", today=TODAY)
    assert d.action == "keep"
    assert d.display == "18/02/2569"

def test_partial_text_survives_empty_value():
    d = reconcile("18/02/", "", today=TODAY)
    assert d.action == "keep"
    assert d.display == "18/02/"

def test_external_value_overwrites():
    d = reconcile("", "2026-02-18", today=TODAY)
    assert d.action == "overwrite"
    assert d.display == "18/02/2569"
    assert d.instant == datetime(2026, 2, 18)

    d = reconcile("01/01/2569", "2026-02-18", today=TODAY)
    assert d.action == "overwrite"
    assert d.display == "18/02/2569"

def test_external_clear():
    d = reconcile("18/02/2569", "", today=TODAY)
    assert d.action == "clear"
    assert d.display == ""

def test_unparsable_value_never_wipes_text():
    assert reconcile("18/02/25", "garbage", today=TODAY).display == "18/02/25"
    d = reconcile("18/02/2569", "2026-02-30", today=TODAY)
    assert d.action == "keep"
    assert d.display == "18/02/2569"

def test_time_is_part_of_equality():
    d = reconcile("18/02/2569 14:30", "2026-02-18 14:30", with_time=True, today=TODAY)
    assert d.action == "keep"

    d = reconcile("18/02/2569 14:30", "2026-02-18 14:31", with_time=True, today=TODAY)
    assert d.action == "overwrite"
    assert d.display == "18/02/2569 14:31"
