from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}( \d{2}:\d{2})?$")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _with_time(value: str, forced: bool) -> bool:
    # A value carrying " HH:mm" selects date+time mode on its own.
    return forced or len(value) > 10


def cmd_display(argv: list[str]) -> int:
    from calthai.codec import decode_canonical, format_display
    from calthai.core.errors import ParseError

    p = argparse.ArgumentParser(prog="calthai display", description="Canonical AD value -> BE display text")
    p.add_argument("value", help="YYYY-MM-DD or 'YYYY-MM-DD HH:mm'")
    p.add_argument("--time", action="store_true", help="date+time mode")
    args = p.parse_args(argv)

    with_time = _with_time(args.value, args.time)
    try:
        d = decode_canonical(args.value, with_time=with_time)
    except ParseError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    print(format_display(d, with_time=with_time))
    return 0

def cmd_parse(argv: list[str]) -> int:
    from calthai.codec import decode_display, format_canonical
    from calthai.core.errors import ParseError

    p = argparse.ArgumentParser(prog="calthai parse", description="BE display text -> canonical AD value")
    p.add_argument("text", help="DD/MM/YYYY or 'DD/MM/YYYY HH:mm' (BE year)")
    p.add_argument("--time", action="store_true", help="date+time mode")
    p.add_argument("--window", type=int, default=100, help="plausibility window in years (default: 100)")
    args = p.parse_args(argv)

    with_time = _with_time(args.text, args.time)
    try:
        d = decode_display(args.text, with_time=with_time, plausibility_years=args.window)
    except ParseError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    print(format_canonical(d, with_time=with_time))
    return 0

def cmd_mask(argv: list[str]) -> int:
    from calthai.mask import apply_mask

    p = argparse.ArgumentParser(prog="calthai mask", description="Show what the input mask does with typed text")
    p.add_argument("text", help="raw keystroke buffer, e.g. 18022569")
    p.add_argument("--time", action="store_true", help="date+time mode")
    args = p.parse_args(argv)

    r = apply_mask(args.text, with_time=args.time)
    print(f"display  = {r.display!r}")
    print(f"digits   = {r.digits!r}")
    print(f"complete = {r.complete}")
    if r.emit is None:
        print("emit     = (nothing)")
    else:
        print(f"emit     = {r.emit!r}")
    return 0

def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `calthai YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_display(argv)

    p = argparse.ArgumentParser(prog="calthai", description="Thai Buddhist Era date toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="log rejected parses and sync decisions")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("display", help="Canonical AD value -> BE display text")
    sub.add_parser("parse", help="BE display text -> canonical AD value")
    sub.add_parser("mask", help="Run typed text through the input mask")
    sub.add_parser("month", help="Print a BE month grid (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "display":
        return cmd_display(rest)

    if args.cmd == "parse":
        return cmd_parse(rest)

    if args.cmd == "mask":
        return cmd_mask(rest)

    if args.cmd == "month":
        return _run_module_main("calthai.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calthai.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
