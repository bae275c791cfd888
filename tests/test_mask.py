# tests/test_mask.py

from datetime import datetime

import pytest

from calthai.mask import (
    apply_mask,
    extract_digits,
    is_valid_input_char,
    punctuate,
)

TODAY = datetime(2026, 10, 17, 9, 30)

def test_extract_digits():
    assert extract_digits("18/02/2569") == "18022569"
    assert extract_digits("ab1c") == "1"
    assert extract_digits("1802256914") == "18022569"
    assert extract_digits("18/02/2569 14:30:59", with_time=True) == "180225691430"

@pytest.mark.parametrize(
    "digits, expected",
    [
        ("", ""),
        ("1", "1"),
        ("18", "18"),
        ("180", "18/0"),
        ("1802", "18/02"),
        ("18022", "18/02/2"),
        ("18022569", "18/02/2569"),
        ("180225691", "18/02/2569"),
    ],
)
def test_punctuate_date(digits, expected):
    assert punctuate(digits) == expected

@pytest.mark.parametrize(
    "digits, expected",
    [
        ("18022569", "18/02/2569"),
        ("180225691", "18/02/2569 1"),
        ("1802256914", "18/02/2569 14"),
        ("18022569143", "18/02/2569 14:3"),
        ("180225691430", "18/02/2569 14:30"),
    ],
)
def test_punctuate_time(digits, expected):
    assert punctuate(digits, with_time=True) == expected

def test_complete_date_emits_canonical():
    r = apply_mask("18022569", today=TODAY)
    assert r.display == "18/02/2569"
    assert r.complete
    assert r.instant == datetime(2026, 2, 18)
    assert r.emit == "2026-02-18"

def test_complete_datetime_emits_canonical():
    r = apply_mask("180225691430", with_time=True, today=TODAY)
    assert r.display == "18/02/2569 14:30"
    assert r.emit == "2026-02-18 14:30"

def test_partial_input_emits_nothing():
    r = apply_mask("18/02/", today=TODAY)
    assert r.display == "18/02"
    assert not r.complete
    assert r.emit is None

    r = apply_mask("18022569", with_time=True, today=TODAY)
    assert r.display == "18/02/2569"
    assert not r.complete
    assert r.emit is None

def test_empty_input_clears():
    assert apply_mask("", today=TODAY).emit == ""
    r = apply_mask("//", today=TODAY)
    assert r.display == ""
    assert r.emit == ""

def test_invalid_complete_input_clears_but_keeps_text():
    r = apply_mask("30022569", today=TODAY)
    assert r.display == "30/02/2569"
    assert r.complete
    assert r.instant is None
    assert r.emit == ""

def test_implausible_year_clears():
    r = apply_mask("01019999", today=TODAY)
    assert r.complete
    assert r.emit == ""

def test_extra_keystrokes_are_dropped():
    r = apply_mask("18/02/25699", today=TODAY)
    assert r.display == "18/02/2569"
    assert r.emit == "2026-02-18"

@pytest.mark.parametrize("ch, ok", [("5", True), ("/", True), ("a", False), (" ", False), ("", False), ("12", False)])
def test_is_valid_input_char(ch, ok):
    assert is_valid_input_char(ch) is ok
