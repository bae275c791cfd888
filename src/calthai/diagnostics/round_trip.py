from __future__ import annotations

import argparse
import random
from datetime import datetime, timedelta

from calthai.codec import (
    format_canonical,
    format_display,
    parse_canonical,
    parse_display,
)
from calthai.core import clock
from calthai.core.config import BE_OFFSET


def random_instant(start: datetime, end: datetime) -> datetime:
    span = int((end - start).total_seconds() // 60)
    return start + timedelta(minutes=random.randint(0, span))


def roundtrip_test(
    N: int,
    start: datetime,
    end: datetime,
    seed: int,
    *,
    with_time: bool,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0
    today = clock.now()

    for _ in range(N):
        d0 = random_instant(start, end)
        if not with_time:
            d0 = d0.replace(hour=0, minute=0)

        canon = format_canonical(d0, with_time=with_time)
        disp = format_display(d0, with_time=with_time)

        back_c = parse_canonical(canon, with_time=with_time)
        back_d = parse_display(disp, with_time=with_time, today=today)
        be_ok = int(disp[6:10]) == int(canon[:4]) + BE_OFFSET

        if back_c != d0 or back_d != d0 or not be_ok:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("canonical:", canon, "->", back_c)
            print("display:", disp, "->", back_d)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="calthai diag round-trip", description="Randomized codec round-trip check.")
    p.add_argument("-n", type=int, default=10000, help="number of samples per mode")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--span", type=int, default=100, help="years either side of now to sample")
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    now = clock.now()
    start = now.replace(year=now.year - args.span, month=1, day=1, hour=0, minute=0)
    end = now.replace(year=now.year + args.span, month=12, day=31, hour=23, minute=59)

    total = 0
    for with_time in (False, True):
        failures = roundtrip_test(args.n, start, end, args.seed, with_time=with_time, max_failures=args.max_failures)
        mode = "datetime" if with_time else "date"
        print(f"{mode:8s}  N={args.n}  failures={failures}")
        total += failures
    return 1 if total else 0

if __name__ == "__main__":
    raise SystemExit(main())
