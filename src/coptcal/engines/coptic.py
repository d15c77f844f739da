"""
coptcal.engines.coptic
----------------------
Civil (proleptic Gregorian) <-> Coptic date conversion.

The Coptic year has twelve 30-day months followed by the little month Nesi
(5 days, 6 in a Coptic leap year). Nayrouz, the first day of the year, falls
on September 11 of the civil calendar, or September 12 when the following
civil year is a Gregorian leap year. Coptic year 1 began in 284 CE (Era of
the Martyrs), so a civil date on or after Nayrouz lies in Coptic year Y - 283
and any earlier date in Y - 284.

All day counts are whole-day differences of Julian Day Numbers; no
time-of-day or time zone ever enters the computation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Tuple

from coptcal.core.errors import CalendarInvariantError, InvalidDateError
from coptcal.core.time import is_gregorian_leap
from coptcal.core.types import CivilDate, CopticDate

logger = logging.getLogger(__name__)

# Civil year of Coptic year 1's Nayrouz is 284; Y_coptic = Y_civil - 283 after Nayrouz.
EPOCH_OFFSET = 283

NAYROUZ_MONTH = 9
NAYROUZ_DAY = 11

MONTH_NAMES: Tuple[str, ...] = (
    "Thoout", "Paope", "Hathor", "Kiahk",
    "Tobi", "Meshir", "Paremhat", "Parmouti",
    "Pashons", "Paoni", "Epip", "Mesori", "Nesi",
)

FLOOD_SEASON = "Flood season"
GROWTH_SEASON = "Growth season"
HARVEST_SEASON = "Harvest season"
LITTLE_MONTH = "Little month"

_SEASON_BY_MONTH: Tuple[str, ...] = (
    (FLOOD_SEASON,) * 4 + (GROWTH_SEASON,) * 4 + (HARVEST_SEASON,) * 4 + (LITTLE_MONTH,)
)


# ---------------------------------------------------------
# Month-level rules
# ---------------------------------------------------------

def is_coptic_leap_year(year: int) -> bool:
    """Coptic leap year: year mod 4 == 3 (on the Coptic year number)."""
    return year % 4 == 3


def _check_month(month: int) -> None:
    if not 1 <= month <= 13:
        raise InvalidDateError(f"Coptic month {month} out of range 1..13")


def month_length(year: int, month: int) -> int:
    _check_month(month)
    if month < 13:
        return 30
    return 6 if is_coptic_leap_year(year) else 5


def month_name(month: int) -> str:
    _check_month(month)
    return MONTH_NAMES[month - 1]


def season_for(month: int) -> str:
    _check_month(month)
    return _SEASON_BY_MONTH[month - 1]


def coptic_date(year: int, month: int, day: int) -> CopticDate:
    """Validated CopticDate for a (year, month, day) label."""
    n = month_length(year, month)
    if not 1 <= day <= n:
        raise InvalidDateError(f"day {day} invalid for Coptic {MONTH_NAMES[month - 1]} {year} (1..{n})")
    return CopticDate(
        day=day,
        month=month,
        month_name=MONTH_NAMES[month - 1],
        year=year,
        season=_SEASON_BY_MONTH[month - 1],
        days_in_month=n,
    )


# ---------------------------------------------------------
# Forward: civil -> Coptic
# ---------------------------------------------------------

@lru_cache(maxsize=1024)
def compute_coptic_new_year(civil_year: int) -> CivilDate:
    """
    Civil date of Nayrouz in the given civil year.

    September 12 when civil_year + 1 is a Gregorian leap year (the
    following February has a 29th day), September 11 otherwise.
    """
    day = NAYROUZ_DAY + 1 if is_gregorian_leap(civil_year + 1) else NAYROUZ_DAY
    return CivilDate(civil_year, NAYROUZ_MONTH, day)


def _anchor(d: CivilDate) -> Tuple[CivilDate, int]:
    """Nayrouz opening the Coptic year that contains d, and that year's number."""
    ny_this = compute_coptic_new_year(d.year)
    if d >= ny_this:
        return ny_this, d.year - EPOCH_OFFSET
    return compute_coptic_new_year(d.year - 1), d.year - EPOCH_OFFSET - 1


def _checked(day: int, month: int, year: int, days_in_month: int) -> CopticDate:
    if not 1 <= month <= 13 or not 1 <= day <= days_in_month:
        raise CalendarInvariantError(
            f"computed Coptic day {day} of month {month} (length {days_in_month}) in year {year}"
        )
    return CopticDate(
        day=day,
        month=month,
        month_name=MONTH_NAMES[month - 1],
        year=year,
        season=_SEASON_BY_MONTH[month - 1],
        days_in_month=days_in_month,
    )


def convert_to_coptic(civil_date: Any) -> CopticDate:
    """
    Convert a civil date (CivilDate, datetime.date or 'YYYY-MM-DD') to its Coptic date.

    Raises InvalidDateError for a civil date that does not exist and
    CalendarInvariantError if the result would fall outside its month.
    """
    d = CivilDate.coerce(civil_date)
    anchor, year = _anchor(d)
    elapsed = d - anchor

    if elapsed < 360:
        month = elapsed // 30 + 1
        day = elapsed % 30 + 1
        n = 30
    else:
        month = 13
        day = elapsed - 359
        n = 6 if is_coptic_leap_year(year) else 5

    out = _checked(day, month, year, n)
    logger.debug("%s -> %s (anchor %s, elapsed %d)", d, out, anchor, elapsed)
    return out


# ---------------------------------------------------------
# Inverse: Coptic -> civil
# ---------------------------------------------------------

def coptic_new_year(year: int) -> CivilDate:
    """Civil date of Nayrouz opening Coptic year `year`."""
    return compute_coptic_new_year(year + EPOCH_OFFSET)


def coptic_to_civil(year: int, month: int, day: int) -> CivilDate:
    """
    Civil date of a Coptic (year, month, day) label.

    Nesi 6 of a leap-labelled year only exists when the civil span between
    the two Nayrouz dates is 366 days; near Gregorian century years that are
    not leap years it is 365 and the label raises InvalidDateError.
    """
    t = coptic_date(year, month, day)
    out = coptic_new_year(year).shift(30 * (t.month - 1) + t.day - 1)
    if month == 13 and out >= coptic_new_year(year + 1):
        raise InvalidDateError(
            f"Nesi {day} of Coptic year {year} does not occur; year {year + 1} begins on {out}"
        )
    return out


def coptic_year_bounds(year: int) -> Tuple[CivilDate, CivilDate]:
    """First and last civil dates of Coptic year `year`."""
    return coptic_new_year(year), coptic_new_year(year + 1).shift(-1)


def coptic_month_bounds(year: int, month: int) -> Tuple[CivilDate, CivilDate]:
    """First and last civil dates of a Coptic month. Nesi ends the day before the next Nayrouz."""
    _check_month(month)
    first = coptic_new_year(year).shift(30 * (month - 1))
    if month < 13:
        return first, first.shift(29)
    return first, coptic_new_year(year + 1).shift(-1)
