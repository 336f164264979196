from __future__ import annotations

import argparse
from datetime import timedelta

import caljalali
from caljalali.core.types import Month, Weekday


# Jalali weeks start on Shanbe (Saturday).
WEEK_ORDER = (
    Weekday.SHANBE, Weekday.YEKSHANBE, Weekday.DOSHANBE, Weekday.SESHANBE,
    Weekday.CHAHARSHANBE, Weekday.PANJSHANBE, Weekday.JOOMEH,
)


def dow_header() -> str:
    return " ".join(w.en_name[:6].ljust(6) for w in WEEK_ORDER)


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def build_weeks(days: list[tuple[str, str]], pad: int) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(pad)]
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def jalali_month_calendar(Y: int, M: int) -> list[list[tuple[str, str]]]:
    d0 = caljalali.to_gregorian_date(Y, M, 1)
    n = caljalali.days_in_month(Y, M)

    days = []
    for i in range(n):
        d = d0 + timedelta(days=i)
        days.append((f"{i + 1:2d}", f"{d.month:02d}-{d.day:02d}"))

    first = Weekday.from_python_weekday(d0.weekday())
    weeks = build_weeks(days, WEEK_ORDER.index(first))
    leap_tag = " (leap year)" if caljalali.is_leap_jalali_year(Y) else ""
    print_grid(f"Jalali month  {Y} {Month(M).en_name}{leap_tag}   ({d0} .. {d0 + timedelta(days=n - 1)})", weeks)
    return weeks


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a Jalali month calendar with Gregorian labels.")
    p.add_argument("--month", nargs=2, type=int, metavar=("Y", "M"),
                   help="Jalali month to print: Y M (e.g. 1403 12)")
    args = p.parse_args(argv)

    if not args.month:
        today = caljalali.now()
        jalali_month_calendar(today.year, int(today.month))
        return 0

    Y, M = args.month
    if not 1 <= M <= 12:
        raise SystemExit("month must be in 1..12")
    jalali_month_calendar(Y, M)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
