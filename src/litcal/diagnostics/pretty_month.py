from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import litcal
from litcal.config import default_tradition


# Two-letter tags for the season row of each cell.
SEASON_TAGS = {
    "Advent": "Ad",
    "Christmas": "Ch",
    "Ordinary Time": "OT",
    "Lent": "Le",
    "Easter": "Ea",
}


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


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


def day_cell(d: date, tradition: str | None) -> tuple[str, str]:
    """Top row: day of month, with '*' marking a special day. Bottom row: season tag and Proper number."""
    info = litcal.day_info(d, tradition=tradition)
    mark = "*" if info.special_days else ""
    top = f"{d.day:2d}{mark}"
    tag = SEASON_TAGS.get(info.season.name, "??") if info.season is not None else "--"
    bot = f"{tag}{info.proper_number}" if info.proper_number is not None else tag
    return cell(top, bot)


def gregorian_month_calendar(tradition: str | None, gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (first.weekday() + 1) % 7  # Sunday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    d = first
    while d <= last:
        wk.append(day_cell(d, tradition))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        d += timedelta(days=1)
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    title = f"{tradition or default_tradition()} liturgical month  {gy}-{gm:02d}"
    print_grid(title, weeks)

    specials = litcal.special_days_in_range(first, last, tradition=tradition)
    for sd in specials:
        print(f"  {sd.date.isoformat()}  {sd.name}  ({sd.type}, {sd.color})")
    if specials:
        print()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian month with the liturgical season and Proper of every day."
    )
    p.add_argument("--tradition", default=None, help="rcl|rc|bcp|episcopal (default: rcl)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 3)")
    p.add_argument("--months", type=int, default=1, help="Number of consecutive months to print.")
    args = p.parse_args(argv)

    if not args.greg:
        # sensible default demo
        gregorian_month_calendar(args.tradition, gy=2025, gm=3)
        return 0

    gy, gm = args.greg
    for _ in range(max(args.months, 1)):
        gregorian_month_calendar(args.tradition, gy=gy, gm=gm)
        gy, gm = (gy + 1, 1) if gm == 12 else (gy, gm + 1)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
