from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import CivilDate, CopticDate, DayInfo, EngineSpec, FeastDay, FeastTable
from .attributes.registry import compute_attributes
from .engines import coptic as _coptic
from .engines.factory import make_engine as _make_engine
from .engines.feasts import feast_days_for as _feast_days_for

DEFAULT_ENGINE = "standard"
_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Day-level API
# ============================================================

def convert_to_coptic(d: Any) -> CopticDate:
    return _coptic.convert_to_coptic(d)

def compute_coptic_new_year(civil_year: int) -> CivilDate:
    return _coptic.compute_coptic_new_year(civil_year)

def day_info(
    d: Any,
    *,
    engine: str = DEFAULT_ENGINE,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    info = _reg().get(engine).day_info(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def to_gregorian(t: CopticDate, *, engine: str = DEFAULT_ENGINE) -> List[CivilDate]:
    return _reg().get(engine).to_gregorian(t)

def explain(d: Any, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return _reg().get(engine).explain(d)

def feast_days_for(t: CopticDate, table: Optional[FeastTable] = None, *, engine: str = DEFAULT_ENGINE) -> Tuple[str, ...]:
    """Feast names on a Coptic date, from `table` if given, else from the engine's table."""
    if table is not None:
        return _feast_days_for(t, table)
    return _reg().get(engine).feasts_for(t)

def feasts_in_month(month: int, *, engine: str = DEFAULT_ENGINE) -> Tuple[FeastDay, ...]:
    return _reg().get(engine).feasts_in_month(month)

# ============================================================
# Year / month API
# ============================================================

def new_year_day(Y: int, *, as_date: bool = True) -> dict:
    """Nayrouz of civil year Y, with the Coptic year it opens."""
    ny = _coptic.compute_coptic_new_year(Y)
    out = {"Y": Y, "coptic_year": Y - _coptic.EPOCH_OFFSET, "jdn": ny.jdn(), "civil": ny}
    if as_date:
        out["date"] = ny.to_date()
    return out

def month_bounds(Y: int, M: int, *, as_date: bool = True) -> dict:
    first, last = _coptic.coptic_month_bounds(Y, M)
    out = {
        "Y": Y, "M": M, "name": _coptic.month_name(M),
        "first": first, "last": last,
        "first_jdn": first.jdn(), "last_jdn": last.jdn(),
    }
    if as_date:
        out["first_date"] = first.to_date()
        out["last_date"] = last.to_date()
    return out

def days_in_month(Y: int, M: int, *, engine: str = DEFAULT_ENGINE) -> List[Dict[str, Any]]:
    """Every civil day of Coptic month (Y, M) with its label and feasts."""
    eng = _reg().get(engine)
    first, last = _coptic.coptic_month_bounds(Y, M)
    rows = []
    for jdn in range(first.jdn(), last.jdn() + 1):
        d = CivilDate.from_jdn(jdn)
        t = eng.to_coptic(d)
        rows.append({"date": d, "jdn": jdn, "day": t.day, "feasts": eng.feasts_for(t)})
    return rows

def first_day_of_month(Y: int, M: int) -> CivilDate:
    return _coptic.coptic_month_bounds(Y, M)[0]

def last_day_of_month(Y: int, M: int) -> CivilDate:
    return _coptic.coptic_month_bounds(Y, M)[1]

def prev_month(Y: int, M: int) -> dict:
    _coptic.month_name(M)
    if M == 1:
        return {"Y": Y - 1, "M": 13}
    return {"Y": Y, "M": M - 1}

def next_month(Y: int, M: int) -> dict:
    _coptic.month_name(M)
    if M == 13:
        return {"Y": Y + 1, "M": 1}
    return {"Y": Y, "M": M + 1}
