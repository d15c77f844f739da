# tests/test_civil_date.py

import pytest
import random
from datetime import date

from coptcal.core.errors import InvalidDateError
from coptcal.core.time import is_gregorian_leap, weekday_from_jdn
from coptcal.core.types import CivilDate

def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 so to_date() stays in datetime range
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        d = CivilDate.from_jdn(jdn_in)
        assert d.jdn() == jdn_in
        assert CivilDate.from_date(d.to_date()) == d

def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert CivilDate(2000, 1, 1).jdn() == 2451545
    assert CivilDate(1970, 1, 1).jdn() == 2440588

def test_day_difference_matches_datetime():
    random.seed(7)
    base = CivilDate(1970, 1, 1)
    for _ in range(2000):
        d = CivilDate.from_jdn(random.randint(2299161, 2600000))
        assert d - base == (d.to_date() - date(1970, 1, 1)).days
        assert d.shift(1) - d == 1

def test_weekday_matches_datetime():
    random.seed(3)
    for _ in range(500):
        d = CivilDate.from_jdn(random.randint(2299161, 2600000))
        assert weekday_from_jdn(d.jdn()) == d.to_date().weekday()

def test_ordering_is_whole_date():
    assert CivilDate(2024, 9, 10) < CivilDate(2024, 9, 11)
    assert CivilDate(2023, 12, 31) < CivilDate(2024, 1, 1)
    assert CivilDate(2024, 9, 11) >= CivilDate(2024, 9, 11)

@pytest.mark.parametrize("y, m, d", [
    (2023, 2, 29),
    (1900, 2, 29),
    (2024, 2, 30),
    (2024, 4, 31),
    (2024, 13, 1),
    (2024, 0, 10),
    (2024, 1, 0),
])
def test_invalid_dates_rejected(y, m, d):
    with pytest.raises(InvalidDateError):
        CivilDate(y, m, d)

def test_valid_leap_day():
    assert CivilDate(2000, 2, 29).day == 29
    assert CivilDate(2024, 2, 29).shift(1) == CivilDate(2024, 3, 1)

def test_invalid_date_is_value_error():
    with pytest.raises(ValueError):
        CivilDate(2023, 2, 29)

def test_parse_and_coerce():
    assert CivilDate.parse("2024-09-11") == CivilDate(2024, 9, 11)
    assert CivilDate.parse("-0044-03-15") == CivilDate(-44, 3, 15)
    assert CivilDate.coerce(date(2024, 9, 11)) == CivilDate(2024, 9, 11)
    assert CivilDate.coerce("2024-09-11").isoformat() == "2024-09-11"
    with pytest.raises(InvalidDateError):
        CivilDate.parse("2024/09/11")
    with pytest.raises(InvalidDateError):
        CivilDate.parse("2024-Sep-11")
    with pytest.raises(TypeError):
        CivilDate.coerce(20240911)

@pytest.mark.parametrize("year, expected", [
    (1600, True), (1700, False), (1900, False), (2000, True),
    (2023, False), (2024, True), (2100, False), (-4, True),
])
def test_gregorian_leap_rule(year, expected):
    assert is_gregorian_leap(year) is expected
