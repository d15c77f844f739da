"""coptcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    to_gregorian,
    explain,
    list_engines,
    engine_info,
    make_engine,
    register_engine,
    convert_to_coptic,
    compute_coptic_new_year,
    feast_days_for,
    feasts_in_month,
    new_year_day,
    month_bounds,
    days_in_month,
    first_day_of_month,
    last_day_of_month,
    prev_month,
    next_month,
)
from .core.errors import CoptcalError, InvalidDateError, CalendarInvariantError
from .core.types import CivilDate, CopticDate, DayInfo, FeastDay, FeastTable
from .engines.coptic import coptic_to_civil, MONTH_NAMES

__all__ = [
    "day_info",
    "to_gregorian",
    "explain",
    "list_engines",
    "engine_info",
    "make_engine",
    "register_engine",
    "convert_to_coptic",
    "compute_coptic_new_year",
    "feast_days_for",
    "feasts_in_month",
    "new_year_day",
    "month_bounds",
    "days_in_month",
    "first_day_of_month",
    "last_day_of_month",
    "prev_month",
    "next_month",
    "coptic_to_civil",
    "MONTH_NAMES",
    "CivilDate",
    "CopticDate",
    "DayInfo",
    "FeastDay",
    "FeastTable",
    "CoptcalError",
    "InvalidDateError",
    "CalendarInvariantError",
]
