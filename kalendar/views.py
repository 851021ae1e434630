"""Plain view records assembled by ``Calendar.generate_*_view``."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kalendar.calendars.base import (
        CalendarDate,
        CalendarEvent,
        CalendarTheme,
        MonthCustomization,
    )


@dataclass(frozen=True)
class DayView:
    date: "CalendarDate"
    events: list["CalendarEvent"] = field(default_factory=list)
    theme: "CalendarTheme | None" = None
    intention: str | None = None


@dataclass(frozen=True)
class WeekView:
    start_date: "CalendarDate"
    end_date: "CalendarDate"
    days: list[DayView] = field(default_factory=list)
    intention: str | None = None


@dataclass(frozen=True)
class MonthView:
    year: int
    month: int
    weeks: list[WeekView] = field(default_factory=list)
    customization: "MonthCustomization | None" = None
    intention: str | None = None


@dataclass(frozen=True)
class YearView:
    year: int
    months: list[MonthView] = field(default_factory=list)


__all__ = ["DayView", "WeekView", "MonthView", "YearView"]
