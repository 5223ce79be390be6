from __future__ import annotations

import argparse

import ethiocal


def mmdd(year: int) -> str:
    d = ethiocal.new_year_date(year)
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of Enkutatash (1 Meskerem) for a range of Ethiopian years."
    )
    p.add_argument("--from-year", type=int, default=2010)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the new-year column (default: iso).",
    )
    args = p.parse_args(argv)

    print(f"{'E.C.':>6}  {'leap':4}  {'Enkutatash':>10}  weekday")
    for y in range(args.from_year, args.to_year + 1):
        d = ethiocal.new_year_date(y)
        shown = d.isoformat() if args.dates == "iso" else mmdd(y)
        leap = "yes" if ethiocal.is_ethiopian_leap(y) else ""
        wd = ethiocal.day_name(ethiocal.EthiopianDate(y, 1, 1).weekday, "en")
        print(f"{y:>6}  {leap:4}  {shown:>10}  {wd}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
