#!/usr/bin/env python3
"""
Where Nowruz (1 Farvardin) lands in the Gregorian year under the 33-year rule.
Leap years are drawn hollow so the cycle's 4- and 5-year steps show up.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import caljalali


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "caljalali[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caljalali[diagnostics]"') from e


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Jalali years, Nowruz as day-of-March, and the leap mask."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    march_day = np.empty_like(years, dtype=int)
    leap = np.zeros_like(years, dtype=bool)

    for i, Y in enumerate(years):
        d = caljalali.nowruz(int(Y))
        march_day[i] = d.day if d.month == 3 else d.day + 31 * (d.month - 3)
        leap[i] = caljalali.is_leap_jalali_year(int(Y))

    return years, march_day, leap


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the Gregorian date of Nowruz per Jalali year.")
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png and .pdf)")
    p.add_argument("--show", action="store_true", help="Open an interactive window as well.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    years, march_day, leap = build_series(np, args.start_year, args.end_year)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.scatter(years[~leap], march_day[~leap], s=14, color="tab:blue", label="common year")
    ax.scatter(years[leap], march_day[leap], s=30, facecolors="none", edgecolors="tab:red",
               linewidths=1.0, label="leap year")
    ax.set_xlabel("Jalali year")
    ax.set_ylabel("Nowruz (day of March)")
    ax.set_yticks(sorted(set(int(v) for v in march_day)))
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right")

    fig.savefig(f"{args.outbase}.png", dpi=160)
    fig.savefig(f"{args.outbase}.pdf")
    print(f"Wrote {args.outbase}.png and {args.outbase}.pdf")
    print(f"Nowruz range: March {int(march_day.min())}..{int(march_day.max())}, "
          f"{int(leap.sum())} leap years of {len(years)}")

    if args.show:
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
