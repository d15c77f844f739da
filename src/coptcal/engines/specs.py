from __future__ import annotations

from typing import Dict

from ..core.types import EngineId, EngineSpec, FeastDay, FeastTable


# ============================================================
# FIXED FEASTS (Coptic month, day)
# ============================================================

NAYROUZ = FeastDay(1, 1, "Coptic New Year (Nayrouz)", "major")
CROSS = FeastDay(1, 17, "Feast of the Cross", "major")
NATIVITY = FeastDay(4, 29, "Nativity of Christ", "lord")
THEOPHANY = FeastDay(5, 11, "Theophany (Baptism of Christ)", "lord")

STANDARD_FEASTS = FeastTable(
    "standard",
    (
        NAYROUZ,
        CROSS,
        FeastDay(3, 3, "Presentation of the Virgin Mary into the Temple", "minor"),
        NATIVITY,
        FeastDay(5, 6, "Circumcision of Christ", "minor"),
        THEOPHANY,
        FeastDay(5, 13, "Wedding at Cana", "minor"),
        FeastDay(6, 8, "Presentation of Christ into the Temple", "minor"),
        FeastDay(7, 10, "Feast of the Cross", "major"),
        FeastDay(7, 29, "Annunciation", "lord"),
        FeastDay(9, 24, "Entry of Christ into Egypt", "minor"),
        FeastDay(11, 5, "Martyrdom of Saints Peter and Paul", "major"),
        FeastDay(12, 13, "Transfiguration", "minor"),
        FeastDay(12, 16, "Assumption of the Virgin Mary", "major"),
    ),
)

# The short list shown on the daily card.
BASIC_FEASTS = FeastTable("basic", (NAYROUZ, CROSS, NATIVITY, THEOPHANY))


# ============================================================
# ENGINE SPECS
# ============================================================

STANDARD = EngineSpec(
    id=EngineId(family="standard", name="standard", version="1"),
    feasts=STANDARD_FEASTS,
    meta={"description": "Fixed-date feasts of the Coptic Orthodox year."},
)

BASIC = EngineSpec(
    id=EngineId(family="standard", name="basic", version="1"),
    feasts=BASIC_FEASTS,
    meta={"description": "Nayrouz, the Cross, Nativity and Theophany only."},
)

ALL_SPECS: Dict[str, EngineSpec] = {
    "standard": STANDARD,
    "basic": BASIC,
}
