# tests/test_cli.py

from datetime import datetime
from unittest.mock import patch

import pytest

from calthai.cli import main

@pytest.fixture(autouse=True)
def fixed_clock():
    with patch("calthai.core.clock.now") as mock:
        mock.return_value = datetime(2026, 10, 17, 9, 30)
        yield mock

def test_display(capsys):
    assert main(["display", "2026-02-18"]) == 0
    assert capsys.readouterr().out == "18/02/2569\n"

def test_date_shortcut(capsys):
    assert main(["2026-02-18 14:30"]) == 0
    assert capsys.readouterr().out == "18/02/2569 14:30\n"

def test_display_invalid(capsys):
    assert main(["display", "2026-02-30"]) == 1
    assert "CalendarExistenceError" in capsys.readouterr().err

def test_parse(capsys):
    assert main(["parse", "18/02/2569 14:30"]) == 0
    assert capsys.readouterr().out == "2026-02-18 14:30\n"

def test_parse_invalid(capsys):
    assert main(["parse", "31/04/2569"]) == 1
    assert "CalendarExistenceError" in capsys.readouterr().err

    assert main(["parse", "01/01/2670"]) == 1
    assert "PlausibilityError" in capsys.readouterr().err

def test_mask(capsys):
    assert main(["mask", "180225691430", "--time"]) == 0
    out = capsys.readouterr().out
    assert "'18/02/2569 14:30'" in out
    assert "'2026-02-18 14:30'" in out

    assert main(["mask", "1802"]) == 0
    assert "(nothing)" in capsys.readouterr().out

def test_month(capsys):
    assert main(["month", "2569", "2"]) == 0
    out = capsys.readouterr().out
    assert "กุมภาพันธ์ พ.ศ. 2569" in out
    assert "28" in out

def test_round_trip_diag(capsys):
    assert main(["diag", "round-trip", "-n", "300"]) == 0
    assert "failures=0" in capsys.readouterr().out
