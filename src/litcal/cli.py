from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect
import logging

from litcal.core.errors import LitcalError

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


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


def _season_line(season) -> str:
    if season is None:
        return "-"
    return f"{season.name} ({season.color}, {season.start_date} .. {season.end_date})"


def cmd_day(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal day", description="Gregorian date -> liturgical day")
    p.add_argument("date", nargs="?", default=None, help="YYYY-MM-DD (default: today)")
    p.add_argument("--tradition", default=None)
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date) if args.date else date.today()
    info = litcal.day_info(d, tradition=args.tradition, attributes=tuple(args.attr))

    print(f"Date            : {info.civil_date.isoformat()}")
    print(f"Tradition       : {info.tradition}")
    print(f"Liturgical year : {info.liturgical_year} (Year {info.cycle})")
    print(f"Season          : {_season_line(info.season)}")
    if info.proper_number is not None:
        label = f"  [{info.proper_label}]" if info.proper_label else ""
        print(f"Proper          : {info.proper_number}{label}")
    for sd in info.special_days:
        print(f"Special day     : {sd.name} ({sd.type}, rank {sd.rank}, {sd.color})")
    for k, v in (info.attributes or {}).items():
        print(f"  {k} = {v}")
    return 0


def cmd_year(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal year", description="Seasons and special days of one liturgical year")
    p.add_argument("year", type=int, help="Civil year of the First Sunday of Advent")
    p.add_argument("--tradition", default=None)
    p.add_argument("--no-special", action="store_true", help="Only print the seasons")
    args = p.parse_args(argv)

    info = litcal.build_year(args.year, tradition=args.tradition)

    print(f"Liturgical year {info.civil_year}  cycle={info.cycle}  office year={info.daily_office_year}")
    print(f"  {info.start_date} .. {info.end_date}")
    print()
    print("Seasons")
    for s in info.seasons:
        span = "(empty)" if s.is_empty else f"{s.start_date} .. {s.end_date}  {s.weeks} wk"
        print(f"  {s.name:<14} {s.color:<7} {span}")

    if not args.no_special:
        print()
        print("Special days")
        for sd in info.special_days:
            print(f"  {sd.date}  {sd.name:<32} {sd.type:<13} rank {sd.rank:2d}  {sd.color}")
    return 0


def cmd_easter(argv: list[str]) -> int:
    import litcal
    from litcal.engines.moveable import derive_easter_dates

    p = argparse.ArgumentParser(prog="litcal easter", description="Easter and the Easter-relative dates of a year")
    p.add_argument("year", type=int, help="Gregorian year of Easter")
    args = p.parse_args(argv)

    easter = litcal.easter(args.year)
    print(f"Easter {args.year}: {easter.isoformat()}")
    ed = derive_easter_dates(easter)
    for name, value in ed.__dict__.items():
        print(f"  {name:<16} {value.isoformat()}")
    return 0


def cmd_propers(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal propers", description="Numbered Sundays of one liturgical year")
    p.add_argument("year", type=int, help="Civil year of the First Sunday of Advent")
    p.add_argument("--tradition", default=None)
    args = p.parse_args(argv)

    info = litcal.build_year(args.year, tradition=args.tradition)
    for ps in info.proper_sundays:
        print(f"  {ps.date}  {ps.number:3d}  {ps.label}")
    return 0


def cmd_pattern(argv: list[str]) -> int:
    import litcal
    from litcal.engines.patterns import known_patterns

    p = argparse.ArgumentParser(prog="litcal pattern", description="Resolve a lectionary date pattern")
    p.add_argument("pattern", nargs="?", help='e.g. "advent_1", "lent_3", "proper_17"')
    p.add_argument("year", nargs="?", type=int, help="Civil year of the First Sunday of Advent")
    p.add_argument("--tradition", default=None)
    p.add_argument("--list", action="store_true", help="List the known pattern keys")
    args = p.parse_args(argv)

    if args.list:
        for key in known_patterns():
            print(key)
        return 0
    if args.pattern is None or args.year is None:
        p.error("pattern and year are required unless --list is given")

    d = litcal.sunday_for_pattern(args.pattern, args.year, tradition=args.tradition)
    print(d.isoformat())
    return 0


def cmd_traditions(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal traditions", description="List registered traditions")
    p.parse_args(argv)

    for name in litcal.list_traditions():
        info = litcal.tradition_info(name)
        print(f"  {name:<10} {info['title']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    from litcal.logging import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `litcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="litcal", description="Liturgical calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More log output (repeatable)")
    p.add_argument("--debug", action="store_true", help="Debug logging with logger names and paths")
    p.add_argument("--no-color", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian date -> liturgical day", add_help=False)
    sub.add_parser("year", help="Seasons and special days of a liturgical year", add_help=False)
    sub.add_parser("easter", help="Easter and Easter-relative dates", add_help=False)
    sub.add_parser("propers", help="Numbered Sundays of a liturgical year", add_help=False)
    sub.add_parser("pattern", help="Resolve a lectionary date pattern", add_help=False)
    sub.add_parser("traditions", help="List registered traditions", add_help=False)

    # diagnostics
    sub.add_parser("easter-table", help="Print anchor-date table (diagnostics)", add_help=False)
    sub.add_parser("easter-scatter", help="Plot Easter dates (diagnostics, needs numpy+matplotlib)", add_help=False)
    sub.add_parser("pretty-month", help="Print a month with seasons and Propers (diagnostics)", add_help=False)

    args, rest = p.parse_known_args(argv)
    configure_logging(args.verbose, debug_mode=args.debug, color=not args.no_color)

    commands = {
        "day": cmd_day,
        "year": cmd_year,
        "easter": cmd_easter,
        "propers": cmd_propers,
        "pattern": cmd_pattern,
        "traditions": cmd_traditions,
    }
    tool_map = {
        "easter-table": "litcal.diagnostics.easter_table",
        "easter-scatter": "litcal.diagnostics.easter_scatter",
        "pretty-month": "litcal.diagnostics.pretty_month",
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)
        if args.cmd in tool_map:
            return _run_module_main(tool_map[args.cmd], rest)
    except LitcalError as e:
        logger.error("%s", e)
        logger.debug("details", exc_info=True)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
