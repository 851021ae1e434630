from kalendar.calendars.base import (
    Calendar,
    CalendarDate,
    CalendarEvent,
    CalendarTheme,
    MonthCustomization,
    MonthRange,
)
from kalendar.calendars.gregorian import GregorianCalendar
from kalendar.calendars.weensday import WeensdayCalendar

__all__ = [
    "Calendar",
    "CalendarDate",
    "CalendarEvent",
    "CalendarTheme",
    "MonthCustomization",
    "MonthRange",
    "GregorianCalendar",
    "WeensdayCalendar",
]
