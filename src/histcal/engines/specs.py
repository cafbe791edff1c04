from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from ..core.time import MIN_LINEAR_DAY
from ..core.types import HistoryVariant
from .algorithms import CalendarAlgorithm


# ============================================================
# CUTOVER CONSTANTS (linear days, MJD)
# ============================================================

# 1582-10-15 (Gregorian), the day after 1582-10-04 (Julian)
EARLIEST_CUTOVER = -100840

# Sweden: leap day 1700-02-29 omitted, 1712-02-30 inserted, then Gregorian
# from 1753-03-01 (the day after 1753-02-17 Julian).
SWEDEN_1700_03_01 = -57959
SWEDEN_1712_03_01 = -53575
SWEDEN_1753_03_01 = -38611


@dataclass(frozen=True)
class EventSpec:
    start: int
    previous: CalendarAlgorithm
    algorithm: CalendarAlgorithm


@dataclass(frozen=True)
class HistorySpec:
    """Pure data payload for constructing a History."""
    name: str
    variant: HistoryVariant
    events: Tuple[EventSpec, ...]
    meta: dict


PROLEPTIC_GREGORIAN_SPEC = HistorySpec(
    name="proleptic-gregorian",
    variant=HistoryVariant.PROLEPTIC_GREGORIAN,
    events=(EventSpec(MIN_LINEAR_DAY, CalendarAlgorithm.GREGORIAN, CalendarAlgorithm.GREGORIAN),),
    meta={"description": "Gregorian rules for all time (ISO-8601)"},
)

PROLEPTIC_JULIAN_SPEC = HistorySpec(
    name="proleptic-julian",
    variant=HistoryVariant.PROLEPTIC_JULIAN,
    events=(EventSpec(MIN_LINEAR_DAY, CalendarAlgorithm.JULIAN, CalendarAlgorithm.JULIAN),),
    meta={"description": "Julian rules for all time"},
)

FIRST_GREGORIAN_REFORM_SPEC = HistorySpec(
    name="first-gregorian-reform",
    variant=HistoryVariant.FIRST_GREGORIAN_REFORM,
    events=(EventSpec(EARLIEST_CUTOVER, CalendarAlgorithm.JULIAN, CalendarAlgorithm.GREGORIAN),),
    meta={"description": "Julian until 1582-10-04, Gregorian from 1582-10-15 (papal bull Inter gravissimas)"},
)

SWEDEN_SPEC = HistorySpec(
    name="sweden",
    variant=HistoryVariant.SWEDEN,
    events=(
        EventSpec(SWEDEN_1700_03_01, CalendarAlgorithm.JULIAN, CalendarAlgorithm.SWEDISH),
        EventSpec(SWEDEN_1712_03_01, CalendarAlgorithm.SWEDISH, CalendarAlgorithm.JULIAN),
        EventSpec(SWEDEN_1753_03_01, CalendarAlgorithm.JULIAN, CalendarAlgorithm.GREGORIAN),
    ),
    meta={
        "description": "Swedish calendar 1700-1712, Julian again until 1753-02-17, then Gregorian",
        "region": "SE",
    },
)

ALL_SPECS: Dict[str, HistorySpec] = {
    s.name: s
    for s in (PROLEPTIC_GREGORIAN_SPEC, PROLEPTIC_JULIAN_SPEC, FIRST_GREGORIAN_REFORM_SPEC, SWEDEN_SPEC)
}

# Extra registry names pointing at existing specs
ALIASES: Dict[str, str] = {
    "gregorian": "first-gregorian-reform",
    "iso": "proleptic-gregorian",
    "julian": "proleptic-julian",
}
