"""
coptcal.engines.calendar
------------------------
The Orchestrator. Binds the pure civil <-> Coptic converter to one injected
feast table and produces DayInfo records for the public API.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Tuple

from coptcal.core.types import CivilDate, CopticDate, DayInfo, EngineId, FeastDay, FeastTable
from coptcal.engines.coptic import compute_coptic_new_year, convert_to_coptic, coptic_to_civil
from coptcal.engines.feasts import feast_days_for, feasts_in_month

logger = logging.getLogger(__name__)


class CopticEngine:
    """Stateless apart from its (immutable) identity and feast table."""

    def __init__(self, id: EngineId, feasts: FeastTable):
        self.id = id
        self.feasts = feasts

    # ---------------------------------------------------------
    # Forward / inverse
    # ---------------------------------------------------------

    def to_coptic(self, d: Any) -> CopticDate:
        return convert_to_coptic(d)

    def to_gregorian(self, t: CopticDate) -> List[CivilDate]:
        # one civil day per Coptic label; list kept for API symmetry with day_info
        return [coptic_to_civil(t.year, t.month, t.day)]

    # ---------------------------------------------------------
    # Feasts
    # ---------------------------------------------------------

    def feasts_for(self, t: CopticDate) -> Tuple[str, ...]:
        return feast_days_for(t, self.feasts)

    def feasts_in_month(self, month: int) -> Tuple[FeastDay, ...]:
        return feasts_in_month(self.feasts, month)

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {"id": asdict(self.id), "feast_table": self.feasts.name, "feasts": len(self.feasts)}

    def day_info(self, d: Any, *, debug: bool = False) -> DayInfo:
        civil = CivilDate.coerce(d)
        coptic = convert_to_coptic(civil)
        feasts = self.feasts_for(coptic)
        if feasts:
            logger.debug("%s (%s): %s", civil, coptic, ", ".join(feasts))

        dbg = None
        if debug:
            ny = compute_coptic_new_year(civil.year)
            dbg = {
                "jdn": civil.jdn(),
                "nayrouz_this_year": ny,
                "anchor": coptic_to_civil(coptic.year, 1, 1),
                "days_since_nayrouz": 30 * (coptic.month - 1) + coptic.day - 1,
                "coptic_leap_year": coptic.is_leap_year,
            }

        return DayInfo(
            civil_date=civil,
            engine=self.id,
            coptic=coptic,
            feasts=feasts,
            debug=dbg,
        )

    def explain(self, d: Any) -> Dict[str, Any]:
        return self.day_info(d, debug=True).__dict__
