"""
litcal.engines.easter
---------------------
Western Easter by the anonymous Gregorian algorithm (Meeus/Jones/Butcher).
"""

from __future__ import annotations

from datetime import date

from litcal.config import check_year


def compute_easter(civil_year: int) -> date:
    """Return Easter Sunday of the given Gregorian year."""
    Y = check_year(civil_year)
    a = Y % 19
    b = Y // 100
    c = Y % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(Y, month, day)


def validate_easter(civil_year: int) -> bool:
    """True if Easter lies in its canonical window, March 22 to April 25."""
    e = compute_easter(civil_year)
    return date(civil_year, 3, 22) <= e <= date(civil_year, 4, 25)
