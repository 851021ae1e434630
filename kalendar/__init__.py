from .calendars import (
    Calendar,
    CalendarDate,
    CalendarEvent,
    CalendarTheme,
    GregorianCalendar,
    MonthCustomization,
    MonthRange,
    WeensdayCalendar,
)
from .conversion import CalendarConverter, convert_between_calendars
from .errors import (
    DuplicateIdError,
    IntervalOrderError,
    InvalidDateError,
    InvalidDayError,
    InvalidMonthError,
    InvalidOrdinalError,
    KalendarError,
    NotFoundError,
    UnitCycleError,
    UnrelatedUnitsError,
)
from .events import Event, EventCategory
from .graph import PRECEDES, Edge, Neighbors, Rule, RuleContext, TimeGraph
from .instant import Instant
from .interval import Interval
from .properties import Filter, Property, meta, one_of, value
from .quantity import Quantity
from .recurrence import RecurrencePattern
from .standard import CALENDAR_UNITS, SCIENTIFIC_UNITS, SECOND, is_leap_year
from .timezones import to_timezone, to_unit
from .units import Unit, UnitRegistry, canonical_second, convert

__all__ = [
    "Unit",
    "UnitRegistry",
    "canonical_second",
    "convert",
    "SECOND",
    "SCIENTIFIC_UNITS",
    "CALENDAR_UNITS",
    "is_leap_year",
    "Quantity",
    "Instant",
    "Interval",
    "to_timezone",
    "to_unit",
    "Calendar",
    "CalendarDate",
    "CalendarEvent",
    "CalendarTheme",
    "MonthCustomization",
    "MonthRange",
    "GregorianCalendar",
    "WeensdayCalendar",
    "CalendarConverter",
    "convert_between_calendars",
    "Event",
    "EventCategory",
    "RecurrencePattern",
    "Filter",
    "Property",
    "value",
    "meta",
    "one_of",
    "TimeGraph",
    "Edge",
    "Rule",
    "RuleContext",
    "Neighbors",
    "PRECEDES",
    "KalendarError",
    "UnrelatedUnitsError",
    "UnitCycleError",
    "InvalidDateError",
    "InvalidMonthError",
    "InvalidDayError",
    "InvalidOrdinalError",
    "DuplicateIdError",
    "NotFoundError",
    "IntervalOrderError",
]
