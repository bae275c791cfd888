from __future__ import annotations

import argparse

from calthai.core.calmath import SUNDAY
from calthai.core.config import BE_OFFSET
from calthai.grid import Cell, month_weeks
from calthai.labels import month_name, weekday_header


def dow_header(week_start: int = SUNDAY) -> str:
    return " ".join(label.rjust(3) for label in weekday_header(week_start))


def cell(day: Cell, w: int = 3) -> str:
    return ("" if day is None else str(day)).rjust(w)


def print_grid(title: str, weeks: list[list[Cell]], week_start: int = SUNDAY) -> None:
    print(title)
    print(dow_header(week_start))
    print("-" * (4 * 7 - 1))
    for wk in weeks:
        print(" ".join(cell(d) for d in wk))
    print()


def be_month_calendar(be_year: int, month: int, *, week_start: int = SUNDAY) -> None:
    year = be_year - BE_OFFSET
    title = f"{month_name(month)} พ.ศ. {be_year}   (AD {year}-{month:02d})"
    print_grid(title, month_weeks(year, month, week_start=week_start), week_start)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="calthai month",
        description="Print a month grid the way the picker lays it out (Buddhist Era year).",
    )
    p.add_argument("be_year", type=int, help="Buddhist Era year, e.g. 2569")
    p.add_argument("month", type=int, choices=range(1, 13), metavar="MONTH", help="1..12")
    p.add_argument("--monday", action="store_true", help="start weeks on Monday instead of Sunday")
    args = p.parse_args(argv)

    be_month_calendar(args.be_year, args.month, week_start=0 if args.monday else SUNDAY)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
