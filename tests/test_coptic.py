# tests/test_coptic.py

import calendar
import pytest
import random
from datetime import date

from coptcal.core.errors import CalendarInvariantError, InvalidDateError
from coptcal.core.types import CivilDate
from coptcal.engines import coptic
from coptcal.engines.coptic import (
    compute_coptic_new_year,
    convert_to_coptic,
    coptic_date,
    coptic_month_bounds,
    coptic_to_civil,
    coptic_year_bounds,
    month_length,
    season_for,
)

# ---------------------------------------------------------
# Nayrouz rule
# ---------------------------------------------------------

def test_new_year_always_september_11_or_12():
    for Y in range(-500, 3000):
        ny = compute_coptic_new_year(Y)
        assert (ny.year, ny.month) == (Y, 9)
        assert ny.day in (11, 12)

def test_new_year_on_12th_iff_next_year_is_leap():
    for Y in range(-500, 3000):
        assert (compute_coptic_new_year(Y).day == 12) == calendar.isleap(Y + 1)

@pytest.mark.parametrize("Y, day", [
    (1899, 11),  # 1900 is not a leap year
    (1999, 12),
    (2023, 12),
    (2024, 11),
    (2027, 12),
    (2099, 11),
])
def test_new_year_known_years(Y, day):
    assert compute_coptic_new_year(Y) == CivilDate(Y, 9, day)

# ---------------------------------------------------------
# Conversion scenarios
# ---------------------------------------------------------

def test_nayrouz_2024():
    t = convert_to_coptic(CivilDate(2024, 9, 11))
    assert (t.day, t.month, t.month_name, t.year) == (1, 1, "Thoout", 1741)
    assert t.season == "Flood season"
    assert t.days_in_month == 30

def test_day_before_nayrouz_2024():
    t = convert_to_coptic(CivilDate(2024, 9, 10))
    assert (t.year, t.month, t.month_name) == (1740, 13, "Nesi")
    assert t.days_in_month == 5
    assert t.day == t.days_in_month
    assert t.season == "Little month"

def test_nesi_6_in_coptic_leap_year():
    # 1739 % 4 == 3: Nesi has six days, the last on 2023-09-11
    t = convert_to_coptic(CivilDate(2023, 9, 11))
    assert (t.year, t.month, t.day, t.days_in_month) == (1739, 13, 6, 6)
    assert t.is_leap_year
    assert convert_to_coptic(CivilDate(2023, 9, 12)).as_tuple() == (1740, 1, 1)

@pytest.mark.parametrize("civil, expected", [
    ("2024-09-27", (1741, 1, 17)),
    ("2025-01-07", (1741, 4, 29)),
    ("2025-01-19", (1741, 5, 11)),
    ("2024-01-08", (1740, 4, 29)),
    ("2025-01-01", (1741, 4, 23)),
    ("2099-09-10", (1815, 13, 5)),
])
def test_known_conversions(civil, expected):
    assert convert_to_coptic(civil).as_tuple() == expected

def test_accepts_datetime_date():
    assert convert_to_coptic(date(2024, 9, 11)) == convert_to_coptic(CivilDate(2024, 9, 11))

def test_invalid_civil_input():
    with pytest.raises(InvalidDateError):
        convert_to_coptic("2023-02-29")
    with pytest.raises(InvalidDateError):
        convert_to_coptic("2024-13-01")

@pytest.mark.parametrize("month, season", [
    (1, "Flood season"), (4, "Flood season"),
    (5, "Growth season"), (8, "Growth season"),
    (9, "Harvest season"), (12, "Harvest season"),
    (13, "Little month"),
])
def test_season_partition(month, season):
    assert season_for(month) == season

# ---------------------------------------------------------
# Invariants over a sweep
# ---------------------------------------------------------

def _sweep(start: CivilDate, end: CivilDate):
    for k in range(end - start + 1):
        yield start.shift(k)

def test_day_within_month_1900_2200():
    for d in _sweep(CivilDate(1900, 1, 1), CivilDate(2200, 12, 31)):
        t = convert_to_coptic(d)
        assert 1 <= t.month <= 13
        assert 1 <= t.day <= t.days_in_month
        assert t.days_in_month == (30 if t.month < 13 else (6 if t.year % 4 == 3 else 5))

def test_monotonic_continuity():
    prev = convert_to_coptic(CivilDate(1900, 1, 1))
    for d in _sweep(CivilDate(1900, 1, 2), CivilDate(2200, 12, 31)):
        cur = convert_to_coptic(d)
        if cur.month == prev.month:
            assert (cur.year, cur.day) == (prev.year, prev.day + 1)
        elif prev.month == 13:
            assert (cur.year, cur.month, cur.day) == (prev.year + 1, 1, 1)
        else:
            assert (cur.year, cur.month, cur.day) == (prev.year, prev.month + 1, 1)
            assert prev.day == 30
        prev = cur

def test_epoch_boundaries():
    for Y in range(1900, 2201):
        ny = compute_coptic_new_year(Y)
        t = convert_to_coptic(ny)
        assert t.as_tuple() == (Y - 283, 1, 1)

        before = convert_to_coptic(ny.shift(-1))
        assert before.year == Y - 284
        assert before.month == 13

def test_nesi_length_matches_leap_rule():
    # Coptic years whose civil span avoids the 1900/2100 non-leap centuries
    for Yc in range(1616, 1815):
        first, last = coptic_month_bounds(Yc, 13)
        observed = last - first + 1
        assert observed == (6 if Yc % 4 == 3 else 5)
        assert month_length(Yc, 13) == observed

def test_century_year_shortens_leap_nesi():
    # 2100 is not a Gregorian leap year, so leap-labelled 1815 spans only 365 days
    assert month_length(1815, 13) == 6
    first, last = coptic_month_bounds(1815, 13)
    assert last - first + 1 == 5
    assert coptic_to_civil(1815, 13, 5) == CivilDate(2099, 9, 10)
    with pytest.raises(InvalidDateError):
        coptic_to_civil(1815, 13, 6)

def test_arithmetic_defect_fails_loudly(monkeypatch):
    # A broken epoch rule pushes Nesi past its length; the converter must not clamp.
    monkeypatch.setattr(coptic, "compute_coptic_new_year", lambda y: CivilDate(y, 1, 1))
    with pytest.raises(CalendarInvariantError):
        convert_to_coptic(CivilDate(2024, 12, 31))

# ---------------------------------------------------------
# Inverse conversion
# ---------------------------------------------------------

def test_roundtrip_random():
    random.seed(123)
    start, end = CivilDate(1600, 1, 1), CivilDate(2400, 12, 31)
    for _ in range(5000):
        d = start.shift(random.randint(0, end - start))
        t = convert_to_coptic(d)
        assert coptic_to_civil(t.year, t.month, t.day) == d

def test_coptic_label_validation():
    with pytest.raises(InvalidDateError):
        coptic_date(1741, 14, 1)
    with pytest.raises(InvalidDateError):
        coptic_date(1741, 1, 31)
    with pytest.raises(InvalidDateError):
        coptic_date(1740, 13, 6)
    assert coptic_date(1739, 13, 6).days_in_month == 6

def test_year_bounds():
    assert coptic_year_bounds(1741) == (CivilDate(2024, 9, 11), CivilDate(2025, 9, 10))
    assert coptic_month_bounds(1741, 1) == (CivilDate(2024, 9, 11), CivilDate(2024, 10, 10))
    assert coptic_month_bounds(1740, 13) == (CivilDate(2024, 9, 6), CivilDate(2024, 9, 10))

def test_progress():
    t = convert_to_coptic("2024-09-25")
    assert t.day == 15
    assert t.progress == pytest.approx(0.5)
    assert str(t) == "15 Thoout 1741"
