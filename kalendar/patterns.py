"""Date patterns used to attach events and themes to calendar days.

Patterns are evaluated against a date *and* the calendar that owns it, since
"weekly on day 3" only means something once a calendar defines its week.
They compose with ``&``, ``|`` and ``~``::

    >>> from kalendar.patterns import Weekly, Monthly
    >>> first_sundays = Weekly(1) & Monthly(1)
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

from typing_extensions import override

if TYPE_CHECKING:
    from kalendar.calendars.base import Calendar, CalendarDate


class DatePattern(ABC):

    @abstractmethod
    def matches(self, calendar: "Calendar", date: "CalendarDate") -> bool:
        pass

    def __and__(self, other: "DatePattern") -> "DatePattern":
        if not isinstance(other, DatePattern):
            return NotImplemented
        return AllOf(self, other)

    def __or__(self, other: "DatePattern") -> "DatePattern":
        if not isinstance(other, DatePattern):
            return NotImplemented
        return AnyOf(self, other)

    def __invert__(self) -> "DatePattern":
        return Not(self)


class Specific(DatePattern):
    def __init__(self, date: "CalendarDate"):
        self.date: "CalendarDate" = date

    @override
    def matches(self, calendar: "Calendar", date: "CalendarDate") -> bool:
        return date == self.date


class Weekly(DatePattern):
    def __init__(self, day_of_week: int):
        if not 1 <= day_of_week <= 7:
            raise ValueError(f"day_of_week must be 1-7, got {day_of_week}")
        self.day_of_week: int = day_of_week

    @override
    def matches(self, calendar: "Calendar", date: "CalendarDate") -> bool:
        return calendar.day_of_week(date) == self.day_of_week


class Monthly(DatePattern):
    def __init__(self, day_of_month: int):
        self.day_of_month: int = day_of_month

    @override
    def matches(self, calendar: "Calendar", date: "CalendarDate") -> bool:
        return date.day == self.day_of_month


class Yearly(DatePattern):
    def __init__(self, month: int, day: int):
        self.month: int = month
        self.day: int = day

    @override
    def matches(self, calendar: "Calendar", date: "CalendarDate") -> bool:
        return date.month == self.month and date.day == self.day


class Custom(DatePattern):
    """Wrap an arbitrary ``predicate(date) -> bool``."""

    def __init__(self, predicate: Callable[["CalendarDate"], bool]):
        self.predicate: Callable[["CalendarDate"], bool] = predicate

    @override
    def matches(self, calendar: "Calendar", date: "CalendarDate") -> bool:
        return bool(self.predicate(date))


class AllOf(DatePattern):
    def __init__(self, *patterns: DatePattern):
        self.patterns: tuple[DatePattern, ...] = patterns

    @override
    def matches(self, calendar: "Calendar", date: "CalendarDate") -> bool:
        return all(p.matches(calendar, date) for p in self.patterns)


class AnyOf(DatePattern):
    def __init__(self, *patterns: DatePattern):
        self.patterns: tuple[DatePattern, ...] = patterns

    @override
    def matches(self, calendar: "Calendar", date: "CalendarDate") -> bool:
        return any(p.matches(calendar, date) for p in self.patterns)


class Not(DatePattern):
    def __init__(self, pattern: DatePattern):
        self.pattern: DatePattern = pattern

    @override
    def matches(self, calendar: "Calendar", date: "CalendarDate") -> bool:
        return not self.pattern.matches(calendar, date)


__all__ = [
    "DatePattern",
    "Specific",
    "Weekly",
    "Monthly",
    "Yearly",
    "Custom",
    "AllOf",
    "AnyOf",
    "Not",
]
