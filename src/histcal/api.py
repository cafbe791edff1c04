from __future__ import annotations

from datetime import date
from typing import List, Optional, Union

from .core.engine import HistoryRegistry
from .core.types import HistoricDate, HistoricEra
from .engines.history import History

DEFAULT_HISTORY = "first-gregorian-reform"
HistoryRef = Union[str, History]

_registry: Optional[HistoryRegistry] = None

def set_registry(reg: HistoryRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> HistoryRegistry:
    if _registry is None:
        raise RuntimeError("History registry not initialized")
    return _registry

def _resolve(history: HistoryRef) -> History:
    if isinstance(history, History):
        return history
    return _reg().get(history)

def list_histories() -> List[str]:
    return _reg().list()

def get_history(name: str) -> History:
    return _reg().get(name)

def register_history(name: str, history: History, *, overwrite: bool = False) -> None:
    _reg().register(name, history, overwrite=overwrite)

# ============================================================
# Conversions
# ============================================================

def to_linear_day(d: HistoricDate, *, history: HistoryRef = DEFAULT_HISTORY) -> int:
    return _resolve(history).to_linear_day(d)

def from_linear_day(mjd: int, *, history: HistoryRef = DEFAULT_HISTORY) -> HistoricDate:
    return _resolve(history).from_linear_day(mjd)

def is_valid(d: Optional[HistoricDate], *, history: HistoryRef = DEFAULT_HISTORY) -> bool:
    return _resolve(history).is_valid(d)

def year_length(era: HistoricEra, year_of_era: int, *, history: HistoryRef = DEFAULT_HISTORY) -> int:
    return _resolve(history).year_length(era, year_of_era)

def adjust_day_of_month(d: HistoricDate, *, history: HistoryRef = DEFAULT_HISTORY) -> HistoricDate:
    return _resolve(history).adjust_day_of_month(d)

def to_date(d: HistoricDate, *, history: HistoryRef = DEFAULT_HISTORY) -> date:
    """Historic date -> proleptic Gregorian datetime.date."""
    return _resolve(history).to_date(d)

def from_date(d: date, *, history: HistoryRef = DEFAULT_HISTORY) -> HistoricDate:
    return _resolve(history).from_date(d)
