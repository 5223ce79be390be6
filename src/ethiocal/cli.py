from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date

import ethiocal
from ethiocal.core.errors import EthiopianCalendarError

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise ethiocal.InvalidInput(f"Invalid date {s!r}: expected YYYY-MM-DD", s) from e


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


def _add_format_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--locale", choices=ethiocal.LOCALES, default="en")
    p.add_argument("--weekday", action="store_true", help="prefix the weekday name")


def _describe(e: ethiocal.EthiopianDate, args: argparse.Namespace) -> str:
    text = e.format(args.locale, args.weekday)
    h = ethiocal.is_holiday(e.month, e.day)
    if h is not None:
        text = f"{text}  ({h.name(args.locale)})"
    return text


def cmd_day(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="ethiocal day", description="Gregorian -> Ethiopian date")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_format_args(p)
    args = p.parse_args(argv)

    e = ethiocal.gregorian_to_ethiopian(_parse_ymd(args.date))
    print(f"{e}  {_describe(e, args)}")
    return 0


def cmd_greg(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="ethiocal greg", description="Ethiopian -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    args = p.parse_args(argv)

    g = ethiocal.ethiopian_to_gregorian(args.year, args.month, args.day)
    print(g.isoformat())
    return 0


def cmd_today(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="ethiocal today", description="Today's Ethiopian date")
    _add_format_args(p)
    args = p.parse_args(argv)

    e = ethiocal.today()
    print(f"{e}  {_describe(e, args)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `ethiocal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="ethiocal", description="Ethiopian calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Ethiopian date", add_help=False)
    sub.add_parser("greg", help="Ethiopian -> Gregorian date", add_help=False)
    sub.add_parser("today", help="Today's Ethiopian date", add_help=False)
    sub.add_parser("month", help="Print an Ethiopian month grid", add_help=False)
    sub.add_parser("new-years", help="Print the Enkutatash table", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("command %s %s", args.cmd, rest)

    try:
        if args.cmd == "day":
            return cmd_day(rest)

        if args.cmd == "greg":
            return cmd_greg(rest)

        if args.cmd == "today":
            return cmd_today(rest)

        if args.cmd == "month":
            return _run_module_main("ethiocal.diagnostics.pretty_month", rest)

        if args.cmd == "new-years":
            return _run_module_main("ethiocal.diagnostics.new_years_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "ethiocal.diagnostics.round_trip",
                "new-year-scatter": "ethiocal.diagnostics.new_year_scatter",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except EthiopianCalendarError as e:
        print(f"ethiocal: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
