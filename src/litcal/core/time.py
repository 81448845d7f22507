from __future__ import annotations
from datetime import date


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)

def add_days(d: date, n: int) -> date:
    return from_jdn(to_jdn(d) + n)

def days_between(d0: date, d1: date) -> int:
    """Signed day count d1 - d0."""
    return to_jdn(d1) - to_jdn(d0)

def weekday(d: date) -> int:
    # Convention: 0=Sun..6=Sat. JDN % 7 == 0 is a Monday.
    return (to_jdn(d) + 1) % 7

def is_sunday(d: date) -> bool:
    return weekday(d) == 0

def closest_sunday(d: date) -> date:
    """
    Sunday nearest to d. Weekdays Sun..Wed move back, Thu..Sat move forward,
    so the result always lies in [d - 3, d + 3].
    """
    w = weekday(d)
    if w <= 3:
        return add_days(d, -w)
    return add_days(d, 7 - w)

def sunday_on_or_before(d: date) -> date:
    return add_days(d, -weekday(d))

def sunday_after(d: date) -> date:
    """First Sunday strictly after d."""
    return add_days(d, 7 - weekday(d))

def weeks_in_season(start: date, end: date) -> int:
    """Whole weeks in the inclusive interval [start, end]; 0 for an empty one."""
    span = days_between(start, end) + 1
    return max(span, 0) // 7
