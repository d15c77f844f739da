from __future__ import annotations
from typing import Tuple

from ..core.types import CopticDate, FeastDay, FeastTable


def feast_days_for(coptic_date: CopticDate, table: FeastTable) -> Tuple[str, ...]:
    """Names of every feast in `table` on (month, day), in table order."""
    m, d = coptic_date.month, coptic_date.day
    return tuple(f.name for f in table.entries if f.month == m and f.day == d)


def feasts_in_month(table: FeastTable, month: int) -> Tuple[FeastDay, ...]:
    # sorted() is stable: same-day feasts keep table order
    return tuple(sorted((f for f in table.entries if f.month == month), key=lambda f: f.day))
