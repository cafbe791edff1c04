"""
histcal.engines.algorithms
--------------------------
The closed family of day-arithmetic rules a history can switch between.

Each tag maps historic dates to linear days (MJD) and back. The arithmetic
for all tags sits in this one class, selected by a switch on the tag.
"""

from __future__ import annotations

from enum import Enum

from ..core.time import (
    gregorian_to_jdn,
    jdn_to_gregorian,
    jdn_to_julian,
    jdn_to_mjd,
    julian_to_jdn,
    mjd_to_jdn,
)
from ..core.types import HistoricDate, HistoricEra

_JULIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# ---------------------------------------------------------
# Swedish calendar 1700-1712 (linear days)
# ---------------------------------------------------------
# 1700-02-29 was dropped, so the day Julian reckoning calls 1700-02-29
# is 1700-03-01 in Sweden, and Swedish dates run one day ahead of Julian.
# In 1712 the day was given back as 1712-02-30, realigning with Julian.
SWEDISH_SHIFT_START = -57959   # 1700-03-01 (Swedish) == 1700-02-29 (Julian)
SWEDISH_FEB_30 = -53576        # 1712-02-30 (Swedish) == 1712-02-29 (Julian)


def is_julian_leap_year(year: int) -> bool:
    return year % 4 == 0

def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _month_length(month: int, leap: bool) -> int:
    if month == 2 and leap:
        return 29
    return _JULIAN_MONTH_DAYS[month - 1]


class CalendarAlgorithm(Enum):
    JULIAN = "julian"
    GREGORIAN = "gregorian"
    SWEDISH = "swedish"

    # ---------------------------------------------------------
    # Validity and month lengths
    # ---------------------------------------------------------

    def max_day_of_month(self, era: HistoricEra, year_of_era: int, month: int) -> int:
        year = era.to_proleptic_year(year_of_era)
        if self is CalendarAlgorithm.GREGORIAN:
            return _month_length(month, is_gregorian_leap_year(year))
        if self is CalendarAlgorithm.JULIAN:
            return _month_length(month, is_julian_leap_year(year))
        if self is CalendarAlgorithm.SWEDISH:
            if month == 2 and year == 1700:
                return 28
            if month == 2 and year == 1712:
                return 30
            return _month_length(month, is_julian_leap_year(year))
        raise AssertionError(f"unhandled algorithm {self!r}")

    def is_valid(self, d: HistoricDate) -> bool:
        return d.day_of_month <= self.max_day_of_month(d.era, d.year_of_era, d.month)

    # ---------------------------------------------------------
    # Forward: historic date -> linear day
    # ---------------------------------------------------------

    def to_linear_day(self, d: HistoricDate) -> int:
        """Linear day of a date; the result is meaningless unless is_valid(d)."""
        year = d.proleptic_year
        if self is CalendarAlgorithm.GREGORIAN:
            return jdn_to_mjd(gregorian_to_jdn(year, d.month, d.day_of_month))
        if self is CalendarAlgorithm.JULIAN:
            return jdn_to_mjd(julian_to_jdn(year, d.month, d.day_of_month))
        if self is CalendarAlgorithm.SWEDISH:
            if year == 1712 and d.month == 2 and d.day_of_month == 30:
                return SWEDISH_FEB_30
            mjd = jdn_to_mjd(julian_to_jdn(year, d.month, d.day_of_month))
            # Julian 1700-03-01 .. 1712-02-29 sit one day earlier in Sweden
            if SWEDISH_SHIFT_START + 1 <= mjd <= SWEDISH_FEB_30:
                return mjd - 1
            return mjd
        raise AssertionError(f"unhandled algorithm {self!r}")

    # ---------------------------------------------------------
    # Inverse: linear day -> historic date
    # ---------------------------------------------------------

    def from_linear_day(self, mjd: int) -> HistoricDate:
        if self is CalendarAlgorithm.GREGORIAN:
            return HistoricDate.from_proleptic(*jdn_to_gregorian(mjd_to_jdn(mjd)))
        if self is CalendarAlgorithm.JULIAN:
            return HistoricDate.from_proleptic(*jdn_to_julian(mjd_to_jdn(mjd)))
        if self is CalendarAlgorithm.SWEDISH:
            if mjd == SWEDISH_FEB_30:
                return HistoricDate(HistoricEra.AD, 1712, 2, 30)
            if SWEDISH_SHIFT_START <= mjd < SWEDISH_FEB_30:
                mjd += 1
            return HistoricDate.from_proleptic(*jdn_to_julian(mjd_to_jdn(mjd)))
        raise AssertionError(f"unhandled algorithm {self!r}")

    def __str__(self) -> str:
        return self.value
