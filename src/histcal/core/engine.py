from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Dict, List, Optional, Protocol

from .types import HistoricDate, HistoricEra

if TYPE_CHECKING:
    from ..engines.history import History


class ConversionProtocol(Protocol):
    def to_linear_day(self, d: HistoricDate) -> int: ...
    def from_linear_day(self, mjd: int) -> HistoricDate: ...
    def is_valid(self, d: Optional[HistoricDate]) -> bool: ...
    def year_length(self, era: HistoricEra, year_of_era: int) -> int: ...
    def adjust_day_of_month(self, d: HistoricDate) -> HistoricDate: ...
    def to_date(self, d: HistoricDate) -> date: ...
    def from_date(self, d: date) -> HistoricDate: ...

@dataclass
class HistoryRegistry:
    _histories: Dict[str, "History"]

    def get(self, name: str) -> "History":
        if name not in self._histories:
            raise KeyError(f"Unknown history '{name}'. Available: {sorted(self._histories)}")
        return self._histories[name]

    def list(self) -> List[str]:
        return sorted(self._histories.keys())

    def register(self, name: str, history: "History", *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._histories):
            raise KeyError(f"History '{name}' already exists. Use overwrite=True to replace.")
        self._histories[name] = history
