import pytest

from histcal import (
    PROLEPTIC_GREGORIAN,
    PROLEPTIC_JULIAN,
    CalendarAlgorithm,
    HistoricDate,
    HistoricEra,
    InvalidDateError,
    of_sweden,
)
from histcal.engines.specs import SWEDEN_1700_03_01, SWEDEN_1712_03_01, SWEDEN_1753_03_01

AD = HistoricEra.AD
SWEDEN = of_sweden()


def test_event_table():
    starts = [ev.start for ev in SWEDEN.events]
    assert starts == [-57959, -53575, -38611]
    assert [(ev.previous, ev.algorithm) for ev in SWEDEN.events] == [
        (CalendarAlgorithm.JULIAN, CalendarAlgorithm.SWEDISH),
        (CalendarAlgorithm.SWEDISH, CalendarAlgorithm.JULIAN),
        (CalendarAlgorithm.JULIAN, CalendarAlgorithm.GREGORIAN),
    ]
    assert [ev.skipped_days for ev in SWEDEN.events] == [1, 0, 11]

@pytest.mark.parametrize("lo, hi, algorithm", [
    (SWEDEN_1700_03_01 - 1000, SWEDEN_1700_03_01, CalendarAlgorithm.JULIAN),
    (SWEDEN_1700_03_01, SWEDEN_1712_03_01, CalendarAlgorithm.SWEDISH),
    (SWEDEN_1712_03_01, SWEDEN_1753_03_01, CalendarAlgorithm.JULIAN),
    (SWEDEN_1753_03_01, SWEDEN_1753_03_01 + 1000, CalendarAlgorithm.GREGORIAN),
])
def test_governing_algorithm_per_interval(lo, hi, algorithm):
    for x in range(lo, hi):
        assert SWEDEN.algorithm_at(x) is algorithm
        assert SWEDEN.from_linear_day(x) == algorithm.from_linear_day(x)

def test_omitted_leap_day_1700():
    feb_28 = HistoricDate(AD, 1700, 2, 28)
    assert SWEDEN.to_linear_day(feb_28) == PROLEPTIC_JULIAN.to_linear_day(feb_28)
    feb_29 = HistoricDate(AD, 1700, 2, 29)
    assert not SWEDEN.is_valid(feb_29)
    with pytest.raises(InvalidDateError):
        SWEDEN.to_linear_day(feb_29)
    assert SWEDEN.to_linear_day(HistoricDate(AD, 1700, 3, 1)) == SWEDEN.to_linear_day(feb_28) + 1

def test_swedish_dates_one_day_ahead():
    d = HistoricDate(AD, 1705, 6, 15)
    assert SWEDEN.to_linear_day(d) == PROLEPTIC_JULIAN.to_linear_day(d) - 1

def test_thirtieth_of_february_1712():
    feb_30 = HistoricDate(AD, 1712, 2, 30)
    assert SWEDEN.is_valid(feb_30)
    assert SWEDEN.to_linear_day(feb_30) == -53576
    assert SWEDEN.from_linear_day(-53576) == feb_30
    assert not SWEDEN.is_valid(HistoricDate(AD, 1712, 2, 31))
    mar_1 = HistoricDate(AD, 1712, 3, 1)
    assert SWEDEN.to_linear_day(mar_1) == PROLEPTIC_JULIAN.to_linear_day(mar_1) == -53575

def test_gregorian_switch_1753():
    assert SWEDEN.to_linear_day(HistoricDate(AD, 1753, 2, 17)) == -38612
    for day in range(18, 29):
        d = HistoricDate(AD, 1753, 2, day)
        assert not SWEDEN.is_valid(d)
        with pytest.raises(InvalidDateError):
            SWEDEN.to_linear_day(d)
    mar_1 = HistoricDate(AD, 1753, 3, 1)
    assert SWEDEN.to_linear_day(mar_1) == PROLEPTIC_GREGORIAN.to_linear_day(mar_1) == -38611

def test_adjust_day_of_month_uses_swedish_month_lengths():
    assert SWEDEN.adjust_day_of_month(HistoricDate(AD, 1711, 2, 30)) == HistoricDate(AD, 1711, 2, 28)
    # 1712-02-31 falls between 1712-02-30 and the 1712-03-01 cutover
    after_feb_30 = HistoricDate(AD, 1712, 2, 31)
    assert SWEDEN.adjust_day_of_month(after_feb_30) is after_feb_30
    # 1700-02-29 sits in the gap left by the omitted leap day
    gap = HistoricDate(AD, 1700, 2, 29)
    assert SWEDEN.adjust_day_of_month(gap) is gap
