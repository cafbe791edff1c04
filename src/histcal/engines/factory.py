"""
histcal.engines.factory
-----------------------
Transforms pure data specifications into live History objects and holds the
well-known histories, built once at import and shared afterwards.
"""

from __future__ import annotations

from datetime import date
from typing import Union

from ..core import time as _time
from ..core.errors import InvalidConstructionError
from ..core.types import HistoryVariant
from .algorithms import CalendarAlgorithm
from .cutover import CutOverEvent
from .history import History
from .specs import (
    EARLIEST_CUTOVER,
    FIRST_GREGORIAN_REFORM_SPEC,
    PROLEPTIC_GREGORIAN_SPEC,
    PROLEPTIC_JULIAN_SPEC,
    SWEDEN_SPEC,
    HistorySpec,
)


def build_history(spec: HistorySpec) -> History:
    """Transforms a pure data HistorySpec into a live History."""
    events = [CutOverEvent.of(e.start, e.previous, e.algorithm) for e in spec.events]
    return History(spec.variant, tuple(events))


PROLEPTIC_GREGORIAN = build_history(PROLEPTIC_GREGORIAN_SPEC)
PROLEPTIC_JULIAN = build_history(PROLEPTIC_JULIAN_SPEC)
_INTRODUCTION_BY_POPE_GREGORY = build_history(FIRST_GREGORIAN_REFORM_SPEC)
_SWEDEN = build_history(SWEDEN_SPEC)


def of_first_gregorian_reform() -> History:
    """Julian until 1582-10-04, Gregorian from 1582-10-15."""
    return _INTRODUCTION_BY_POPE_GREGORY


def of_gregorian_reform(start: Union[int, date]) -> History:
    """
    A history switching from Julian to Gregorian rules on `start`.

    `start` is a linear day or a (Gregorian) datetime.date of the first day
    under Gregorian rules. It may not precede 1582-10-15.
    """
    mjd = _time.to_linear_day(start) if isinstance(start, date) else int(start)
    if mjd < EARLIEST_CUTOVER:
        raise InvalidConstructionError("Gregorian calendar did not exist before 1582-10-15")
    if mjd == EARLIEST_CUTOVER:
        return _INTRODUCTION_BY_POPE_GREGORY
    return History(
        HistoryVariant.OTHER,
        (CutOverEvent.of(mjd, CalendarAlgorithm.JULIAN, CalendarAlgorithm.GREGORIAN),),
    )


def of_sweden() -> History:
    return _SWEDEN


def _region(locale: str) -> str:
    # "sv_SE.UTF-8@euro" / "sv-Latn-SE" / "SE" -> "SE"
    tag = locale.split(".", 1)[0].split("@", 1)[0].replace("-", "_")
    parts = [p for p in tag.split("_") if p]
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0].upper() if len(parts[0]) == 2 and parts[0].isupper() else ""
    for p in parts[1:]:
        if (len(p) == 2 and p.isalpha()) or (len(p) == 3 and p.isdigit()):
            return p.upper()
    return ""


def of_locale(locale: str) -> History:
    """
    History in use for a locale. Only Sweden has its own record; every other
    locale gets the first Gregorian reform.
    """
    # TODO: cutover records for more regions (for example Britain 1752, Russia 1918)
    if _region(locale) == "SE":
        return _SWEDEN
    return _INTRODUCTION_BY_POPE_GREGORY
