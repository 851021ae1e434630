import pytest

from kalendar import CALENDAR_UNITS, SCIENTIFIC_UNITS, SECOND, canonical_second, convert
from kalendar.standard import MONTH_SECONDS, YEAR_SECONDS, is_leap_year


def test_both_groups_share_the_canonical_second() -> None:
    assert SECOND is canonical_second()
    assert SCIENTIFIC_UNITS["SECOND"] is SECOND
    assert CALENDAR_UNITS["SECOND"] is SECOND


def test_scientific_units_hang_off_second() -> None:
    for key, unit in SCIENTIFIC_UNITS.items():
        if key != "SECOND":
            assert unit.base_unit is SECOND
    assert convert(1, SCIENTIFIC_UNITS["MONTH"], SECOND) == MONTH_SECONDS
    assert convert(1, SCIENTIFIC_UNITS["YEAR"], SECOND) == YEAR_SECONDS
    assert convert(1, SCIENTIFIC_UNITS["WEEK"], SCIENTIFIC_UNITS["DAY"]) == 7


def test_calendar_units_nest() -> None:
    day = CALENDAR_UNITS["DAY"]
    assert day.base_unit is CALENDAR_UNITS["HOUR"]
    assert convert(1, CALENDAR_UNITS["WEEK"], SECOND) == 604800
    assert convert(1, CALENDAR_UNITS["YEAR_366"], day) == 366
    assert convert(1, CALENDAR_UNITS["MONTH_28"], CALENDAR_UNITS["WEEK"]) == 4


def test_groups_are_separate_hierarchies_below_the_root() -> None:
    # Both minutes are 60 seconds, but they are distinct nodes
    assert SCIENTIFIC_UNITS["MINUTE"] is not CALENDAR_UNITS["MINUTE"]
    assert convert(
        1, SCIENTIFIC_UNITS["HOUR"], CALENDAR_UNITS["MINUTE"]
    ) == pytest.approx(60)


@pytest.mark.parametrize(
    "year,expected",
    [(2000, True), (2004, True), (2024, True), (2100, False), (2023, False), (1900, False)],
)
def test_is_leap_year(year: int, expected: bool) -> None:
    assert is_leap_year(year) is expected
