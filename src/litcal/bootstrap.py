from __future__ import annotations
from litcal.core.engine import TraditionRegistry
from litcal.engines.specs import ALL_SPECS
from litcal.engines.factory import make_engine

def build_registry() -> TraditionRegistry:
    engines = {}
    for name, spec in ALL_SPECS.items():
        engines[name] = make_engine(spec)
    return TraditionRegistry(engines)
