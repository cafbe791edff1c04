from __future__ import annotations
from datetime import date

# Linear days are Modified Julian Day numbers: MJD 0 = 1858-11-17 (Gregorian) = JDN 2400001.
MJD_JDN_OFFSET = 2400001

# Smallest linear day a history can start at (signed 64-bit minimum, as persisted).
MIN_LINEAR_DAY = -(2 ** 63)
MAX_LINEAR_DAY = 2 ** 63 - 1


def jdn_to_mjd(jdn: int) -> int:
    return jdn - MJD_JDN_OFFSET

def mjd_to_jdn(mjd: int) -> int:
    return mjd + MJD_JDN_OFFSET


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian (signed year) -> JDN. Floor division keeps it valid for year <= 0."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def jdn_to_gregorian(jdn: int) -> tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def julian_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Julian (signed year) -> JDN."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083

def jdn_to_julian(jdn: int) -> tuple[int, int, int]:
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day


def to_linear_day(d: date) -> int:
    """Convert a (proleptic Gregorian) datetime.date to its linear day."""
    return jdn_to_mjd(gregorian_to_jdn(d.year, d.month, d.day))

def from_linear_day(mjd: int) -> date:
    """Linear day -> datetime.date; ValueError outside years 1..9999."""
    return date(*jdn_to_gregorian(mjd_to_jdn(mjd)))
