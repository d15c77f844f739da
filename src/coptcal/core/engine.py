from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Tuple

from .types import CivilDate, CopticDate, DayInfo, FeastDay

class CalendarEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def day_info(self, d: Any, *, debug: bool = False) -> DayInfo: ...
    def to_coptic(self, d: Any) -> CopticDate: ...
    def to_gregorian(self, t: CopticDate) -> List[CivilDate]: ...
    def feasts_for(self, t: CopticDate) -> Tuple[str, ...]: ...
    def feasts_in_month(self, month: int) -> Tuple[FeastDay, ...]: ...
    def explain(self, d: Any) -> Dict[str, Any]: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
