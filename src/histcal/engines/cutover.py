from __future__ import annotations
from dataclasses import dataclass

from ..core.types import HistoricDate
from .algorithms import CalendarAlgorithm


@dataclass(frozen=True)
class CutOverEvent:
    """
    The switch from `previous` to `algorithm` on linear day `start` (inclusive).

    date_at_cutover is the first date under the new rule, date_before_cutover the
    last date under the outgoing one. Dates strictly between the two never existed.
    Both are fixed when the event is built and only read afterwards.
    """
    start: int
    previous: CalendarAlgorithm
    algorithm: CalendarAlgorithm
    date_at_cutover: HistoricDate
    date_before_cutover: HistoricDate

    @classmethod
    def of(cls, start: int, previous: CalendarAlgorithm, algorithm: CalendarAlgorithm) -> "CutOverEvent":
        return cls(
            start=start,
            previous=previous,
            algorithm=algorithm,
            date_at_cutover=algorithm.from_linear_day(start),
            date_before_cutover=previous.from_linear_day(start - 1),
        )

    @property
    def skipped_days(self) -> int:
        """Number of date labels the cutover elides (0 when the numbering just continues)."""
        return self.previous.to_linear_day(self.date_at_cutover) - self.start
