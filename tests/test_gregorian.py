import pytest

from kalendar import (
    CalendarDate,
    GregorianCalendar,
    InvalidDayError,
    InvalidMonthError,
    InvalidOrdinalError,
)


@pytest.fixture
def calendar() -> GregorianCalendar:
    return GregorianCalendar()


def test_leap_years(calendar: GregorianCalendar) -> None:
    assert calendar.is_leap_year(2000)
    assert calendar.is_leap_year(2004)
    assert not calendar.is_leap_year(2100)
    assert not calendar.is_leap_year(2023)


def test_year_and_month_lengths(calendar: GregorianCalendar) -> None:
    assert calendar.days_in_year(2023) == 365
    assert calendar.days_in_year(2024) == 366
    assert calendar.days_in_month(2023, 1) == 31
    assert calendar.days_in_month(2023, 2) == 28
    assert calendar.days_in_month(2024, 2) == 29
    assert calendar.days_in_month(2023, 4) == 30
    assert calendar.month_range() == (1, 12)


def test_date_to_ordinal(calendar: GregorianCalendar) -> None:
    assert calendar.date_to_ordinal(CalendarDate(2023, 1, 1)) == 1
    assert calendar.date_to_ordinal(CalendarDate(2023, 12, 31)) == 365
    assert calendar.date_to_ordinal(CalendarDate(2024, 12, 31)) == 366
    assert calendar.date_to_ordinal(CalendarDate(2024, 3, 1)) == 61


def test_ordinal_to_date(calendar: GregorianCalendar) -> None:
    assert calendar.ordinal_to_date(2023, 1) == CalendarDate(2023, 1, 1)
    assert calendar.ordinal_to_date(2023, 365) == CalendarDate(2023, 12, 31)
    assert calendar.ordinal_to_date(2024, 366) == CalendarDate(2024, 12, 31)
    assert calendar.ordinal_to_date(2024, 60) == CalendarDate(2024, 2, 29)


@pytest.mark.parametrize("year", [2023, 2024])
def test_ordinal_round_trip(calendar: GregorianCalendar, year: int) -> None:
    for ordinal in range(1, calendar.days_in_year(year) + 1):
        date = calendar.ordinal_to_date(year, ordinal)
        assert calendar.date_to_ordinal(date) == ordinal


def test_add_days(calendar: GregorianCalendar) -> None:
    assert calendar.add_days(CalendarDate(2023, 12, 31), 1) == CalendarDate(2024, 1, 1)
    assert calendar.add_days(CalendarDate(2024, 2, 28), 1) == CalendarDate(2024, 2, 29)
    assert calendar.add_days(CalendarDate(2023, 2, 28), 1) == CalendarDate(2023, 3, 1)
    assert calendar.add_days(CalendarDate(2024, 1, 1), -1) == CalendarDate(2023, 12, 31)
    assert calendar.add_days(CalendarDate(2024, 1, 1), 366) == CalendarDate(2025, 1, 1)
    assert calendar.add_days(CalendarDate(2024, 5, 5), 0) == CalendarDate(2024, 5, 5)


def test_day_of_week(calendar: GregorianCalendar) -> None:
    assert calendar.day_of_week(CalendarDate(2023, 7, 23)) == 1  # Sunday
    assert calendar.day_of_week(CalendarDate(2023, 7, 24)) == 2  # Monday
    assert calendar.day_of_week(CalendarDate(2023, 7, 29)) == 7  # Saturday
    assert calendar.day_of_week(CalendarDate(2024, 2, 29)) == 5  # Thursday


def test_week_number(calendar: GregorianCalendar) -> None:
    assert calendar.week_number(CalendarDate(2024, 1, 1)) == 1
    assert calendar.week_number(CalendarDate(2024, 1, 7)) == 1
    assert calendar.week_number(CalendarDate(2024, 1, 8)) == 2


def test_invalid_month_and_day(calendar: GregorianCalendar) -> None:
    with pytest.raises(InvalidMonthError, match="Invalid month: 13"):
        calendar.days_in_month(2024, 13)
    with pytest.raises(InvalidMonthError):
        calendar.date_to_ordinal(CalendarDate(2024, 0, 1))
    with pytest.raises(InvalidDayError, match="Invalid day: 30"):
        calendar.date_to_ordinal(CalendarDate(2024, 2, 30))
    with pytest.raises(InvalidDayError):
        calendar.date_to_ordinal(CalendarDate(2023, 2, 29))


def test_invalid_ordinal(calendar: GregorianCalendar) -> None:
    with pytest.raises(InvalidOrdinalError):
        calendar.ordinal_to_date(2023, 366)
    with pytest.raises(InvalidOrdinalError):
        calendar.ordinal_to_date(2023, 0)


def test_invalid_date_errors_are_value_errors(calendar: GregorianCalendar) -> None:
    with pytest.raises(ValueError):
        calendar.validate(CalendarDate(2024, 4, 31))


def test_format_and_parse(calendar: GregorianCalendar) -> None:
    date = CalendarDate(2024, 7, 4)
    assert calendar.format_date(date) == "2024-07-04"
    assert calendar.parse_date("2024-07-04") == date
    assert calendar.parse_date(" 2024-7-4 ") == date
    with pytest.raises(ValueError, match="YYYY-MM-DD"):
        calendar.parse_date("July 4th")
    with pytest.raises(InvalidDayError):
        calendar.parse_date("2023-02-29")
