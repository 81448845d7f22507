from __future__ import annotations

from datetime import date
import argparse
from typing import Callable, List, Tuple

import litcal
from litcal.engines.anchors import first_sunday_of_advent
from litcal.engines.seasons import easter_dates_for


# (header, getter) pairs; every getter takes the civil year of the Advent.
COLUMNS: List[Tuple[str, Callable[[int], date]]] = [
    ("Advent", first_sunday_of_advent),
    ("Ash Wed", lambda Y: easter_dates_for(Y).ash_wednesday),
    ("Easter", lambda Y: easter_dates_for(Y).easter),
    ("Pentecost", lambda Y: easter_dates_for(Y).pentecost),
    ("Christ King", lambda Y: easter_dates_for(Y).christ_the_king),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Advent, Easter and related anchor dates for a range of liturgical years."
    )
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2035)
    p.add_argument("--tradition", default=None, help="Tradition used for the cycle column (default: rcl).")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=3,
        help="After the table, list the Easters that fall in this month (default: 3=March).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    # table header
    headers = ["Year", "Cycle"] + [name for name, _ in COLUMNS]
    width = 10 if args.dates == "iso" else 5
    colw = [5, 5] + [max(width, len(h)) for h in headers[2:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[date] = []

    for Y in range(Y0, Y1 + 1):
        info = litcal.build_year(Y, tradition=args.tradition)
        row = [str(Y).ljust(colw[0]), info.cycle.ljust(colw[1])]
        for (_, getter), w in zip(COLUMNS, colw[2:]):
            row.append(fmt(getter(Y)).ljust(w))
        if info.easter_dates.easter.month == args.list_month:
            hits.append(info.easter_dates.easter)
        print("  ".join(row))

    print(f"\nEaster occurrences in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0

    for d in sorted(hits):
        print(d.isoformat())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
