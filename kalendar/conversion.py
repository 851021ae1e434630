"""Translate dates between calendars through a shared epoch.

Both calendars count days from the first day of ``epoch_year``; a date is
turned into a signed day offset in the source calendar and rebuilt from the
same offset in the target calendar. All irregularity (leap days, intercalary
months) lives in each calendar's ``days_in_year`` and ``ordinal_to_date``, so
the converter itself is plain integer arithmetic.

Example:
    >>> from kalendar.calendars import CalendarDate, GregorianCalendar, WeensdayCalendar
    >>> convert_between_calendars(
    ...     GregorianCalendar(), WeensdayCalendar(), CalendarDate(2024, 2, 29)
    ... )
    CalendarDate(year=2024, month=3, day=3)
"""

import logging

from kalendar.calendars.base import Calendar, CalendarDate

logger = logging.getLogger(__name__)

EPOCH_YEAR = 2024


class CalendarConverter:

    def __init__(self, epoch_year: int = EPOCH_YEAR):
        self.epoch_year: int = epoch_year

    def days_since_epoch(self, calendar: Calendar, date: CalendarDate) -> int:
        """Signed day offset of ``date`` from the first day of the epoch year."""
        days = calendar.date_to_ordinal(date) - 1
        if date.year > self.epoch_year:
            days += sum(
                calendar.days_in_year(year) for year in range(self.epoch_year, date.year)
            )
        elif date.year < self.epoch_year:
            days -= sum(
                calendar.days_in_year(year) for year in range(date.year, self.epoch_year)
            )
        return days

    def date_from_days_since_epoch(self, calendar: Calendar, days: int) -> CalendarDate:
        year = self.epoch_year
        while days >= calendar.days_in_year(year):
            days -= calendar.days_in_year(year)
            year += 1
        while days < 0:
            year -= 1
            days += calendar.days_in_year(year)
        return calendar.ordinal_to_date(year, days + 1)

    def convert(
        self, source: Calendar, target: Calendar, date: CalendarDate
    ) -> CalendarDate:
        days = self.days_since_epoch(source, date)
        result = self.date_from_days_since_epoch(target, days)
        logger.debug(
            "Converted %s %s -> %s %s (epoch offset %d)",
            source.name, date, target.name, result, days,
        )
        return result


def convert_between_calendars(
    source: Calendar,
    target: Calendar,
    date: CalendarDate,
    *,
    epoch_year: int = EPOCH_YEAR,
) -> CalendarDate:
    """Functional form of :meth:`CalendarConverter.convert`."""
    return CalendarConverter(epoch_year).convert(source, target, date)


__all__ = ["CalendarConverter", "convert_between_calendars", "EPOCH_YEAR"]
