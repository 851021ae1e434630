from typing_extensions import override

from kalendar.calendars.base import Calendar, CalendarDate, MonthRange
from kalendar.standard import is_leap_year

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Sakamoto's month offsets for the day-of-week formula
_WEEKDAY_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


class GregorianCalendar(Calendar):
    """Proleptic Gregorian calendar, months 1-12, weeks starting on Sunday."""

    name: str = "Gregorian"

    @override
    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    @override
    def days_in_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    @override
    def month_range(self) -> MonthRange:
        return MonthRange(1, 12)

    @override
    def _month_length(self, year: int, month: int) -> int:
        if month == 2 and self.is_leap_year(year):
            return 29
        return _MONTH_DAYS[month - 1]

    @override
    def day_of_week(self, date: CalendarDate) -> int:
        """1 is Sunday, 7 is Saturday."""
        self.validate(date)
        year = date.year - 1 if date.month < 3 else date.year
        weekday = (
            year + year // 4 - year // 100 + year // 400
            + _WEEKDAY_OFFSETS[date.month - 1] + date.day
        ) % 7
        return weekday + 1
