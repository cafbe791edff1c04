import pytest

from histcal import HistoricEra, InvalidDateError, of_first_gregorian_reform, of_sweden
from histcal.attributes.registry import compute_fields, get_field, with_field

H = of_first_gregorian_reform()


def test_compute_fields():
    assert compute_fields(H, 51544, ["era", "year-of-era", "month", "day-of-month"]) == {
        "era": HistoricEra.AD,
        "year-of-era": 2000,
        "month": 1,
        "day-of-month": 1,
    }

def test_get_field_reads_julian_before_reform():
    assert get_field("day-of-month").get(H, -100841) == 4
    assert get_field("day-of-month").get(H, -100840) == 15

def test_with_day_of_month_crosses_cutover():
    # 1582-10-04 (Julian) -> 1582-10-31 (Gregorian)
    assert with_field(H, -100841, "day-of-month", 31) == -100840 + 16

def test_with_month_clamps_day():
    mar_31 = 51544 + 31 + 29 + 30
    assert with_field(H, mar_31, "month", 2) == 51544 + 31 + 28

def test_with_field_into_gap_raises():
    with pytest.raises(InvalidDateError):
        with_field(H, -100841, "day-of-month", 10)

def test_with_era_and_year():
    bc = with_field(H, 51544, "era", "bc")
    assert compute_fields(H, bc, ["era", "year-of-era"]) == {"era": HistoricEra.BC, "year-of-era": 2000}
    assert with_field(H, bc, "era", HistoricEra.AD) == 51544
    with pytest.raises(InvalidDateError):
        with_field(H, 51544, "year-of-era", 0)

def test_with_year_sweden_feb_30():
    sweden = of_sweden()
    feb_30 = -53576
    # 1712-02-30 moved to 1711 clamps to 1711-02-28
    d = sweden.from_linear_day(with_field(sweden, feb_30, "year-of-era", 1711))
    assert (d.year_of_era, d.month, d.day_of_month) == (1711, 2, 28)

def test_unknown_field():
    with pytest.raises(KeyError):
        compute_fields(H, 0, ["week"])
    with pytest.raises(KeyError):
        with_field(H, 0, "week", 1)
