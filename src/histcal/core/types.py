from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from functools import total_ordering
from typing import Tuple

from .errors import InvalidDateError


class HistoricEra(Enum):
    BC = "BC"
    AD = "AD"

    def to_proleptic_year(self, year_of_era: int) -> int:
        """Year of era -> signed proleptic year (1 BC == year 0)."""
        if self is HistoricEra.AD:
            return year_of_era
        return 1 - year_of_era

    @staticmethod
    def from_proleptic_year(year: int) -> Tuple["HistoricEra", int]:
        if year <= 0:
            return HistoricEra.BC, 1 - year
        return HistoricEra.AD, year


class HistoryVariant(IntEnum):
    """Classification tag of a history; the values double as persisted variant codes."""
    OTHER = 0
    PROLEPTIC_GREGORIAN = 1
    PROLEPTIC_JULIAN = 2
    SWEDEN = 4
    FIRST_GREGORIAN_REFORM = 7


@total_ordering
@dataclass(frozen=True)
class HistoricDate:
    """
    A date label as written in history: era, year of era, month and day of month.

    Only the field ranges are checked here. Whether a date actually existed
    depends on the calendar algorithm (and the history) it is read with.
    """
    era: HistoricEra
    year_of_era: int
    month: int
    day_of_month: int

    def __post_init__(self) -> None:
        if not isinstance(self.era, HistoricEra):
            raise InvalidDateError(f"Unknown era: {self.era!r}")
        for name in ("year_of_era", "month", "day_of_month"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidDateError(f"{name} must be an int: {value!r}")
        if self.year_of_era < 1:
            raise InvalidDateError(f"Year of era must be >= 1: {self.year_of_era}")
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"Month out of range 1..12: {self.month}")
        if not 1 <= self.day_of_month <= 31:
            raise InvalidDateError(f"Day of month out of range 1..31: {self.day_of_month}")

    @classmethod
    def of(cls, era: HistoricEra, year_of_era: int, month: int, day_of_month: int) -> "HistoricDate":
        return cls(era, year_of_era, month, day_of_month)

    @classmethod
    def from_proleptic(cls, year: int, month: int, day_of_month: int) -> "HistoricDate":
        era, yoe = HistoricEra.from_proleptic_year(year)
        return cls(era, yoe, month, day_of_month)

    @classmethod
    def parse(cls, text: str) -> "HistoricDate":
        """
        Parse 'AD-1582-10-15', 'BC-0044-03-15' or a bare '1582-10-15' (AD).
        """
        parts = text.strip().split("-")
        era = HistoricEra.AD
        if parts and parts[0].upper() in ("AD", "BC"):
            era = HistoricEra(parts[0].upper())
            parts = parts[1:]
        if len(parts) != 3:
            raise InvalidDateError(f"Expected [ERA-]YYYY-MM-DD, got {text!r}")
        try:
            y, m, d = (int(p) for p in parts)
        except ValueError:
            raise InvalidDateError(f"Expected [ERA-]YYYY-MM-DD, got {text!r}") from None
        return cls(era, y, m, d)

    @property
    def proleptic_year(self) -> int:
        return self.era.to_proleptic_year(self.year_of_era)

    def with_day_of_month(self, day_of_month: int) -> "HistoricDate":
        return replace(self, day_of_month=day_of_month)

    def _key(self) -> Tuple[int, int, int]:
        return (self.proleptic_year, self.month, self.day_of_month)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HistoricDate):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.era.value}-{self.year_of_era:04d}-{self.month:02d}-{self.day_of_month:02d}"
