"""
coptcal.engines.factory
-----------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations
from coptcal.core.types import EngineSpec, FeastTable
from coptcal.engines.calendar import CopticEngine


def make_engine(spec: EngineSpec) -> CopticEngine:
    """The universal entry point."""
    if not isinstance(spec.feasts, FeastTable):
        raise TypeError(f"Unknown feast table type: {type(spec.feasts)}")
    return CopticEngine(id=spec.id, feasts=spec.feasts)
