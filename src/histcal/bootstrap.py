from __future__ import annotations
from histcal.core.engine import HistoryRegistry
from histcal.engines.specs import ALIASES, ALL_SPECS
from histcal.engines import factory

# specs are built once by the factory; share those singletons
_SINGLETONS = {
    "proleptic-gregorian": factory.PROLEPTIC_GREGORIAN,
    "proleptic-julian": factory.PROLEPTIC_JULIAN,
    "first-gregorian-reform": factory.of_first_gregorian_reform(),
    "sweden": factory.of_sweden(),
}

def build_registry() -> HistoryRegistry:
    histories = {name: _SINGLETONS[name] for name in ALL_SPECS}
    for alias, target in ALIASES.items():
        histories[alias] = histories[target]
    return HistoryRegistry(histories)
