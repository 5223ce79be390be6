from __future__ import annotations

import argparse
from typing import List, Optional

import ethiocal
from ethiocal.core.types import MonthGridCell
from ethiocal.picker import month_title


def dow_header(locale: str = "en", w: int = 6) -> str:
    return " ".join(ethiocal.short_day_name(i, locale).ljust(w) for i in range(7))


def cell(c: Optional[MonthGridCell], w: int = 6) -> tuple[str, str]:
    if c is None:
        return ("".ljust(w), "".ljust(w))
    mark = "*" if c.is_holiday else ""
    top = f"{c.day:2d}{mark}"
    bot = f"{c.gregorian.month:02d}-{c.gregorian.day:02d}"
    return (top[:w].ljust(w), bot[:w].ljust(w))


def render_month(year: int, month: int, locale: str = "en") -> List[str]:
    """Text calendar for an Ethiopian month: day numbers over Gregorian MM-DD."""
    lines = [month_title(year, month, locale)]
    header = dow_header(locale)
    lines.append(header)
    lines.append("-" * len(header))
    for wk in ethiocal.month_weeks(year, month):
        cells = [cell(c) for c in wk]
        lines.append(" ".join(c[0] for c in cells).rstrip())
        lines.append(" ".join(c[1] for c in cells).rstrip())

    for h in ethiocal.holidays_in_month(month):
        if h.day <= ethiocal.days_in_month(month, year):
            lines.append(f"* {h.day:2d}  {h.name(locale)}")
    return lines


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print an Ethiopian month grid with paired Gregorian dates.")
    p.add_argument("year", type=int, nargs="?", help="Ethiopian year (default: current)")
    p.add_argument("month", type=int, nargs="?", help="Ethiopian month 1..13 (default: current)")
    p.add_argument("--locale", choices=ethiocal.LOCALES, default="en")
    args = p.parse_args(argv)

    if args.year is None or args.month is None:
        t = ethiocal.today()
        year, month = t.year, t.month
    else:
        year, month = args.year, args.month

    print("\n".join(render_month(year, month, args.locale)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
