"""
histcal.engines.history
-----------------------
The conversion engine. A History is an ordered table of cutover events; it
picks the calendar algorithm in force for a linear day or a historic date
and hands the arithmetic to it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from ..core import time as _time
from ..core.errors import InvalidConstructionError, InvalidDateError
from ..core.types import HistoricDate, HistoricEra, HistoryVariant
from .algorithms import CalendarAlgorithm
from .cutover import CutOverEvent

logger = logging.getLogger(__name__)

# Days before the first event are read with Julian rules.
DEFAULT_ALGORITHM = CalendarAlgorithm.JULIAN


@dataclass(frozen=True, eq=False, repr=False)
class History:
    """
    Immutable calendar history.

    Event i governs the linear days [events[i].start, events[i+1].start); the
    last event governs everything after its start.
    """
    variant: HistoryVariant
    events: Tuple[CutOverEvent, ...]

    def __post_init__(self) -> None:
        events = tuple(self.events)
        if not events:
            raise InvalidConstructionError(
                "At least one cutover event must be present in chronological history."
            )
        for prev, nxt in zip(events, events[1:]):
            if nxt.start <= prev.start:
                raise InvalidConstructionError(
                    f"Cutover events must be strictly increasing: {prev.start} >= {nxt.start}"
                )
        object.__setattr__(self, "variant", HistoryVariant(self.variant))
        object.__setattr__(self, "events", events)
        logger.debug("built %r with %d cutover event(s)", self, len(events))

    @property
    def gregorian_cutover(self) -> int:
        """Linear day from which the last (usually Gregorian) algorithm applies."""
        return self.events[-1].start

    # ---------------------------------------------------------
    # Algorithm lookup
    # ---------------------------------------------------------

    def algorithm_for(self, d: HistoricDate) -> Optional[CalendarAlgorithm]:
        """
        The algorithm a historic date has to be read with, or None if the date
        falls into the gap some cutover left behind.
        """
        for event in reversed(self.events):
            if d >= event.date_at_cutover:
                return event.algorithm
            if d > event.date_before_cutover:
                logger.debug("%s lies in the cutover gap of %r at %d", d, self, event.start)
                return None
        return DEFAULT_ALGORITHM

    def algorithm_at(self, mjd: int) -> CalendarAlgorithm:
        for event in reversed(self.events):
            if mjd >= event.start:
                return event.algorithm
        return DEFAULT_ALGORITHM

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def to_linear_day(self, d: HistoricDate) -> int:
        algorithm = self.algorithm_for(d)
        if algorithm is None:
            raise InvalidDateError(f"Invalid historical date (cutover gap): {d}")
        if not algorithm.is_valid(d):
            raise InvalidDateError(f"Invalid historical date ({algorithm}): {d}")
        return algorithm.to_linear_day(d)

    def from_linear_day(self, mjd: int) -> HistoricDate:
        return self.algorithm_at(mjd).from_linear_day(mjd)

    def to_date(self, d: HistoricDate) -> date:
        """Historic date -> proleptic Gregorian datetime.date."""
        return _time.from_linear_day(self.to_linear_day(d))

    def from_date(self, d: date) -> HistoricDate:
        return self.from_linear_day(_time.to_linear_day(d))

    def is_valid(self, d: Optional[HistoricDate]) -> bool:
        if d is None:
            return False
        algorithm = self.algorithm_for(d)
        if algorithm is None:
            return False
        return algorithm.is_valid(d)

    def year_length(self, era: HistoricEra, year_of_era: int) -> int:
        """Days in the given historic year, or -1 if the year cannot be converted."""
        try:
            first = HistoricDate.of(era, year_of_era, 1, 1)
            last = HistoricDate.of(era, year_of_era, 12, 31)
            return self.to_linear_day(last) - self.to_linear_day(first) + 1
        except ValueError:
            return -1

    def adjust_day_of_month(self, d: HistoricDate) -> HistoricDate:
        algorithm = self.algorithm_for(d)
        if algorithm is None:
            return d
        max_day = algorithm.max_day_of_month(d.era, d.year_of_era, d.month)
        if max_day < d.day_of_month:
            return d.with_day_of_month(max_day)
        return d

    # ---------------------------------------------------------
    # Classification
    # ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, History):
            return NotImplemented
        if self.variant != other.variant:
            return False
        if self.variant == HistoryVariant.OTHER:
            return self.events[0].start == other.events[0].start
        return True

    def __hash__(self) -> int:
        if self.variant == HistoryVariant.OTHER:
            return hash(self.events[0].start)
        return int(self.variant)

    def __repr__(self) -> str:
        if self.variant == HistoryVariant.PROLEPTIC_GREGORIAN:
            return "History[PROLEPTIC-GREGORIAN]"
        if self.variant == HistoryVariant.PROLEPTIC_JULIAN:
            return "History[PROLEPTIC-JULIAN]"
        if self.variant == HistoryVariant.SWEDEN:
            return "History[SWEDEN]"
        y, m, d = _time.jdn_to_gregorian(_time.mjd_to_jdn(self.gregorian_cutover))
        return f"History[{y:04d}-{m:02d}-{d:02d}]"

    def __reduce__(self):
        from .spx import decode_history, encode_history
        return (decode_history, (encode_history(self),))
