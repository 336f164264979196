from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _jalali_from_slashes(s: str):
    import caljalali

    y, m, d = map(int, s.replace("-", "/").split("/"))
    return caljalali.jalali_date(y, m, d, tz="UTC")


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


def cmd_day(argv: list[str]) -> int:
    import caljalali

    p = argparse.ArgumentParser(prog="caljalali day", description="Gregorian -> Jalali date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--format", default="%Y/%m/%d", help="Output layout (default: %%Y/%%m/%%d)")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    jy, jm, jd = caljalali.gregorian_to_jalali(d.year, d.month, d.day)
    t = caljalali.jalali_date(jy, jm, jd, tz="UTC")
    print(t.format(args.format))
    print(f"{t.weekday().en_name} ({t.weekday().fa_name}), day {t.year_day()} of {t.year}"
          f"{' (leap year)' if t.is_leap_year() else ''}")
    return 0


def cmd_gregorian(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="caljalali gregorian", description="Jalali -> Gregorian date")
    p.add_argument("date", help="YYYY/MM/DD (Jalali)")
    args = p.parse_args(argv)

    t = _jalali_from_slashes(args.date)
    print(t.to_gregorian().date().isoformat())
    return 0


def cmd_now(argv: list[str]) -> int:
    import caljalali

    p = argparse.ArgumentParser(prog="caljalali now", description="Current Jalali date and time")
    p.add_argument("--tz", default=None, help="IANA zone key (default: CALJALALI_TZ or host zone)")
    p.add_argument("--format", default="%Y/%m/%d %T %p", help="Output layout")
    args = p.parse_args(argv)

    print(caljalali.now(args.tz).format(args.format))
    return 0


def cmd_between(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="caljalali between", description="Days between two Jalali dates")
    p.add_argument("a", help="YYYY/MM/DD (Jalali)")
    p.add_argument("b", help="YYYY/MM/DD (Jalali)")
    args = p.parse_args(argv)

    print(_jalali_from_slashes(args.a).days_between(_jalali_from_slashes(args.b)))
    return 0


def main(argv: list[str] | None = None) -> int:
    from caljalali.core.errors import CaljalaliError

    try:
        return _dispatch(argv)
    except CaljalaliError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


def _dispatch(argv: list[str] | None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `caljalali YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="caljalali", description="Jalali (Persian) calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Jalali date")
    sub.add_parser("gregorian", help="Jalali -> Gregorian date")
    sub.add_parser("now", help="Current Jalali date and time")
    sub.add_parser("between", help="Days between two Jalali dates")
    sub.add_parser("pretty-month", help="Print a Jalali month calendar (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "nowruz-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "gregorian":
        return cmd_gregorian(rest)

    if args.cmd == "now":
        return cmd_now(rest)

    if args.cmd == "between":
        return cmd_between(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("caljalali.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "caljalali.diagnostics.round_trip",
            "nowruz-scatter": "caljalali.diagnostics.nowruz_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
