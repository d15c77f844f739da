from __future__ import annotations
from typing import Any, Dict

from ..core.time import weekday_from_jdn
from .registry import register_attribute, jdn

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

def weekday(info) -> Dict[str, Any]:
    # 0=Mon..6=Sun, matching datetime.date.weekday()
    w = weekday_from_jdn(jdn(info))
    return {"weekday": w, "weekday_name": WEEKDAY_NAMES[w]}

def month_progress(info) -> Dict[str, Any]:
    c = info.coptic
    return {
        "progress": c.progress,
        "percent": round(100 * c.progress, 1),
        "days_remaining": c.days_in_month - c.day,
    }

def leap_year(info) -> Dict[str, Any]:
    c = info.coptic
    return {"coptic_leap_year": c.is_leap_year, "nesi_days": 6 if c.is_leap_year else 5}

register_attribute("weekday", weekday)
register_attribute("month_progress", month_progress)
register_attribute("leap_year", leap_year)
