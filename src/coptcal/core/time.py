from __future__ import annotations
from typing import Tuple

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap(year: int) -> bool:
    """Proleptic Gregorian leap rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_civil_month(year: int, month: int) -> int:
    if month == 2 and is_gregorian_leap(year):
        return 29
    return _MONTH_DAYS[month - 1]


def ymd_to_jdn(y: int, m: int, day: int) -> int:
    """Convert a proleptic Gregorian (y, m, d) to Julian Day Number (JDN)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_ymd(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of ymd_to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d) -> int:
    """JDN of anything carrying year/month/day (CivilDate, datetime.date)."""
    return ymd_to_jdn(d.year, d.month, d.day)


def weekday_from_jdn(jdn: int) -> int:
    # 0=Mon..6=Sun, same convention as datetime.date.weekday()
    return jdn % 7
