from __future__ import annotations
from coptcal.core.engine import EngineRegistry
from coptcal.engines.specs import ALL_SPECS
from coptcal.engines.factory import make_engine

def build_registry() -> EngineRegistry:
    engines = {}
    for name, spec in ALL_SPECS.items():
        engines[name] = make_engine(spec)
    return EngineRegistry(engines)
