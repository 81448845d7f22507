# tests/test_propers.py

from datetime import date

import pytest

from litcal.core.time import is_sunday
from litcal.engines.propers import (
    ProperLabels,
    number_seasons,
    ordinal,
    proper_anchor,
    proper_date,
    proper_number_for,
    proper_sundays,
)
from litcal.engines.seasons import compute_seasons, easter_dates_for


def _year(Y, labels=ProperLabels()):
    ed = easter_dates_for(Y)
    seasons = compute_seasons(Y, ed)
    sundays = proper_sundays(seasons, ed, labels)
    return number_seasons(seasons, sundays), sundays, ed


def test_anchor():
    assert proper_anchor(4, 2025) == date(2025, 6, 1)
    assert proper_anchor(17, 2025) == date(2025, 8, 31)
    with pytest.raises(ValueError):
        proper_anchor(3, 2025)
    with pytest.raises(ValueError):
        proper_anchor(29, 2025)


def test_proper_date_is_closest_sunday():
    assert proper_date(4, 2026) == date(2026, 5, 31)
    assert proper_date(5, 2026) == date(2026, 6, 7)
    assert proper_date(29, 2026) == date(2026, 11, 22)


def test_propers_2025():
    seasons, sundays, ed = _year(2024)
    after = [ps for ps in sundays if ps.date > ed.pentecost]
    # Proper 4 (Jun 1) and 5 (Pentecost) fall before Ordinary Time; Proper 6 is Trinity Sunday.
    assert after[0].number == 7
    assert after[0].date == date(2025, 6, 22)
    assert after[0].label == "Proper 7"
    assert [ps.number for ps in after] == list(range(7, 30))
    assert after[-1].date == date(2025, 11, 23)
    assert after[-1].label == "Christ the King"
    assert seasons[5].proper_numbers == tuple(range(7, 30))


def test_trinity_never_numbered():
    for Y in range(1990, 2060):
        seasons, sundays, ed = _year(Y)
        dates = {ps.date for ps in sundays}
        assert ed.trinity_sunday not in dates
        assert ed.pentecost not in dates
        for ps in sundays:
            assert is_sunday(ps.date)
            assert seasons[2].contains(ps.date) or seasons[5].contains(ps.date)


def test_propers_2026_trinity_on_proper_4_anchor():
    seasons, sundays, ed = _year(2025)
    assert ed.trinity_sunday == date(2026, 5, 31)
    after = [ps for ps in sundays if ps.date > ed.trinity_sunday]
    assert after[0].number == 5
    assert after[0].date == date(2026, 6, 7)
    assert after[-1].number == 29
    assert after[-1].date == date(2026, 11, 22)


def test_ordinary_time_before_lent_2025():
    seasons, sundays, ed = _year(2024)
    before = [ps for ps in sundays if ps.date < ed.ash_wednesday]
    assert [ps.date for ps in before] == [
        date(2025, 1, 19),
        date(2025, 1, 26),
        date(2025, 2, 2),
        date(2025, 2, 9),
        date(2025, 2, 16),
        date(2025, 2, 23),
        date(2025, 3, 2),
    ]
    assert [ps.number for ps in before] == [2, 3, 4, 5, 6, 7, 8]
    assert before[0].label == "Epiphany 2"
    assert seasons[2].proper_numbers == (2, 3, 4, 5, 6, 7, 8)


@pytest.mark.parametrize(
    "d, expected",
    [
        (date(2025, 1, 13), 1),       # Monday after the Baptism
        (date(2025, 1, 22), 2),
        (date(2025, 3, 4), 8),
        (date(2025, 3, 5), None),     # Ash Wednesday
        (date(2025, 6, 10), None),    # week of Pentecost
        (date(2025, 6, 17), None),    # week of Trinity Sunday
        (date(2025, 6, 25), 7),
        (date(2025, 11, 29), 29),
        (date(2024, 12, 10), None),   # Advent
    ],
)
def test_proper_number_for(d, expected):
    seasons, sundays, _ = _year(2024)
    assert proper_number_for(d, seasons, sundays) == expected


def test_offset_labels():
    labels = ProperLabels(
        before_lent="{ord} Sunday in Ordinary Time",
        after_pentecost="{ord} Sunday in Ordinary Time",
        offset=5,
    )
    _, sundays, ed = _year(2024, labels)
    first_after = next(ps for ps in sundays if ps.date > ed.pentecost)
    assert first_after.number == 12
    assert first_after.label == "12th Sunday in Ordinary Time"
    assert sundays[0].label == "2nd Sunday in Ordinary Time"
    assert sundays[-1].number == 34



def test_offset_numbers_sunday_before_first_proper():
    # Easter 2008 is March 23; the Sunday after Trinity precedes the Proper 4 anchor.
    labels = ProperLabels(after_pentecost="{ord} Sunday in Ordinary Time", offset=5)
    seasons, sundays, ed = _year(2007, labels)
    assert ed.trinity_sunday == date(2008, 5, 18)
    by_date = {ps.date: ps for ps in sundays}
    assert by_date[date(2008, 5, 25)].number == 8
    assert by_date[date(2008, 5, 25)].label == "8th Sunday in Ordinary Time"
    assert by_date[date(2008, 6, 1)].number == 9
    assert date(2008, 5, 18) not in by_date
    assert proper_number_for(date(2008, 5, 28), seasons, sundays) == 8


def test_unanchored_sunday_after_trinity_stays_unnumbered():
    seasons, sundays, _ = _year(2007)
    assert date(2008, 5, 25) not in {ps.date for ps in sundays}
    assert sundays[-2].date == date(2008, 11, 16)
    assert next(ps for ps in sundays if ps.date > date(2008, 5, 1)).number == 4
    assert proper_number_for(date(2008, 5, 27), seasons, sundays) is None

@pytest.mark.parametrize("n, s", [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (13, "13th"), (21, "21st"), (22, "22nd"), (34, "34th")])
def test_ordinal(n, s):
    assert ordinal(n) == s
