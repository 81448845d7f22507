#!/usr/bin/env python3
"""
Easter date distribution.

Left panel: Easter as days after March 21, one point per year.
Right panel: how often each of the 35 possible dates occurs in the span.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional, Tuple

import argparse

import litcal

# Easter falls on one of 35 dates, March 22 (1) .. April 25 (35).
N_DATES = 35


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "litcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "litcal[diagnostics]"') from e


def days_after_march_21(d: date) -> int:
    return (d - date(d.year, 3, 21)).days


def easter_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    offsets = np.array([days_after_march_21(litcal.easter(int(Y))) for Y in years], dtype=int)
    return years, offsets


def date_frequencies(np, offsets) -> "np.ndarray":
    """Counts indexed 0..34 for March 22 .. April 25."""
    return np.bincount(offsets - 1, minlength=N_DATES)


def date_label(offset: int) -> str:
    d = date(2001, 3, 21) + timedelta(days=offset)
    return f"{d.strftime('%b')} {d.day}"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter and frequency plot of Easter dates across a span of years.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    years, offsets = easter_series(np, args.start_year, args.end_year)
    freq = date_frequencies(np, offsets)

    fig, (ax0, ax1) = plt.subplots(
        1, 2, figsize=(11.0, 4.6), gridspec_kw={"width_ratios": [3, 1]}, constrained_layout=True
    )

    ax0.scatter(years, offsets, s=10, c="tab:blue", alpha=0.5, linewidths=0.0)
    ax0.axhline(float(offsets.mean()), color="0.35", linewidth=1.0, linestyle="--")
    ax0.set_xlabel("Gregorian year")
    ax0.set_ylabel("Days after March 21")
    ax0.set_ylim(0, N_DATES + 1)
    ax0.set_title(f"Easter {args.start_year}-{args.end_year}")
    ax0.grid(True, color="0.88", linewidth=0.7)

    ticks = [1, 11, 21, 31]
    ax1.barh(np.arange(1, N_DATES + 1), freq, color="tab:blue", alpha=0.7)
    ax1.set_ylim(0, N_DATES + 1)
    ax1.set_yticks(ticks)
    ax1.set_yticklabels([date_label(k) for k in ticks])
    ax1.set_xlabel("Years")
    ax1.set_title("Frequency")

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    mode = date_label(int(freq.argmax()) + 1)
    print(f"Saved: {outbase}.png  (mean offset {offsets.mean():.2f} d, most frequent {mode})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
