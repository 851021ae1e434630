from typing_extensions import override

from kalendar.calendars.base import Calendar, CalendarDate, MonthRange
from kalendar.standard import is_leap_year
from kalendar.views import WeekView

MONTH_DAYS = 28
LEAP_MONTH = 7
WEENSDAY = 0


class WeensdayCalendar(Calendar):
    """Fourteen-"month" calendar.

    Month 0 is a single intercalary day, the Weensday, and is always the
    first day of the year. Months 1-13 have 28 days each, except month 7
    which gains a 29th day in (Gregorian) leap years. A year therefore has
    1 + 13 * 28 = 365 days, or 366 in leap years.
    """

    name: str = "Weensday"

    @override
    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    @override
    def days_in_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    @override
    def month_range(self) -> MonthRange:
        return MonthRange(WEENSDAY, 13)

    @override
    def _month_length(self, year: int, month: int) -> int:
        if month == WEENSDAY:
            return 1
        if month == LEAP_MONTH and self.is_leap_year(year):
            return MONTH_DAYS + 1
        return MONTH_DAYS

    @override
    def date_to_ordinal(self, date: CalendarDate) -> int:
        self.validate(date)
        if date.month == WEENSDAY:
            return 1
        leap_day = 1 if self.is_leap_year(date.year) and date.month > LEAP_MONTH else 0
        return 1 + (date.month - 1) * MONTH_DAYS + leap_day + date.day

    @override
    def ordinal_to_date(self, year: int, ordinal: int) -> CalendarDate:
        self._check_ordinal(year, ordinal)
        if ordinal == 1:
            return CalendarDate(year, WEENSDAY, 1)

        # zero-based position within months 1-13
        offset = ordinal - 2
        before_leap = (LEAP_MONTH - 1) * MONTH_DAYS
        if self.is_leap_year(year) and offset >= before_leap:
            if offset < before_leap + MONTH_DAYS + 1:
                return CalendarDate(year, LEAP_MONTH, offset - before_leap + 1)
            offset -= 1
        month, day = divmod(offset, MONTH_DAYS)
        return CalendarDate(year, month + 1, day + 1)

    @override
    def day_of_week(self, date: CalendarDate) -> int:
        """Weeks restart from the Weensday: ordinal 1 is day 1."""
        return (self.date_to_ordinal(date) - 1) % 7 + 1

    @override
    def generate_week_view(self, start_date: CalendarDate) -> WeekView:
        # Weeks never spill into the next month
        days = [self.generate_day_view(start_date)]
        for i in range(1, 7):
            date = self.add_days(start_date, i)
            if date.month != start_date.month or date.year != start_date.year:
                break
            days.append(self.generate_day_view(date))
        return self._week_view(start_date, days)
