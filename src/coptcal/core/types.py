from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Literal, Optional, Tuple

from .errors import InvalidDateError
from .time import days_in_civil_month, jdn_to_ymd, ymd_to_jdn

FeastKind = Literal["lord", "major", "minor"]


@dataclass(frozen=True, order=True)
class CivilDate:
    """Proleptic Gregorian date. Ordered by (year, month, day)."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"month {self.month} out of range 1..12")
        n = days_in_civil_month(self.year, self.month)
        if not 1 <= self.day <= n:
            raise InvalidDateError(
                f"day {self.day} invalid for {self.year:04d}-{self.month:02d} (1..{n})"
            )

    @classmethod
    def from_date(cls, d: date) -> "CivilDate":
        return cls(d.year, d.month, d.day)

    @classmethod
    def from_jdn(cls, jdn: int) -> "CivilDate":
        return cls(*jdn_to_ymd(jdn))

    @classmethod
    def parse(cls, s: str) -> "CivilDate":
        """Parse 'YYYY-MM-DD' (a leading '-' is allowed for negative years)."""
        body = s.strip()
        sign = 1
        if body.startswith("-"):
            sign, body = -1, body[1:]
        parts = body.split("-")
        if len(parts) != 3:
            raise InvalidDateError(f"expected YYYY-MM-DD, got {s!r}")
        try:
            y, m, d = (int(p) for p in parts)
        except ValueError as e:
            raise InvalidDateError(f"expected YYYY-MM-DD, got {s!r}") from e
        return cls(sign * y, m, d)

    @classmethod
    def coerce(cls, value: Any) -> "CivilDate":
        if isinstance(value, CivilDate):
            return value
        if isinstance(value, date):
            return cls.from_date(value)
        if isinstance(value, str):
            return cls.parse(value)
        raise TypeError(f"cannot interpret {type(value).__name__} as a civil date")

    def jdn(self) -> int:
        return ymd_to_jdn(self.year, self.month, self.day)

    def shift(self, days: int) -> "CivilDate":
        return CivilDate.from_jdn(self.jdn() + days)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __sub__(self, other: "CivilDate") -> int:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self.jdn() - other.jdn()

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class CopticDate:
    day: int
    month: int
    month_name: str
    year: int
    season: str
    days_in_month: int

    @property
    def is_leap_year(self) -> bool:
        return self.year % 4 == 3

    @property
    def progress(self) -> float:
        """Fraction of the current month reached, in (0, 1]."""
        return self.day / self.days_in_month

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.day} {self.month_name} {self.year}"


@dataclass(frozen=True)
class FeastDay:
    month: int
    day: int
    name: str
    kind: FeastKind = "major"

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 13:
            raise InvalidDateError(f"feast '{self.name}': month {self.month} out of range 1..13")
        last = 6 if self.month == 13 else 30
        if not 1 <= self.day <= last:
            raise InvalidDateError(f"feast '{self.name}': day {self.day} out of range 1..{last}")
        if self.kind not in ("lord", "major", "minor"):
            raise ValueError(f"feast '{self.name}': unknown kind '{self.kind}'")


@dataclass(frozen=True)
class FeastTable:
    """Immutable, ordered set of fixed-date feasts."""
    name: str
    entries: Tuple[FeastDay, ...] = ()

    def __post_init__(self) -> None:
        # accept any iterable, store a tuple
        object.__setattr__(self, "entries", tuple(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


@dataclass(frozen=True)
class EngineId:
    family: Literal["standard", "custom"]
    name: str
    version: str


@dataclass(frozen=True)
class EngineSpec:
    """Pure data payload for constructing a CopticEngine."""
    id: EngineId
    feasts: FeastTable
    meta: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DayInfo:
    civil_date: CivilDate
    engine: EngineId
    coptic: CopticDate
    feasts: Tuple[str, ...] = ()
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
