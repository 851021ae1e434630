"""Calendar contract shared by every concrete calendar.

A concrete calendar supplies its leap rule, its month range and the length
of each month. From those the base class derives year lengths, the
ordinal/date bijection and day arithmetic; variants override whichever of
those they can express more directly.

Besides the pure date arithmetic, every calendar keeps auxiliary state
addressed by ``CalendarDate``: events and themes (matched through
:mod:`kalendar.patterns`), month customizations and free-text intentions for
days, weeks and months. Views over that state are produced by the
``generate_*_view`` methods.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, NamedTuple

from kalendar.errors import InvalidDayError, InvalidMonthError, InvalidOrdinalError
from kalendar.patterns import DatePattern
from kalendar.views import DayView, MonthView, WeekView, YearView


@dataclass(frozen=True, order=True)
class CalendarDate:
    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}-{self.day:02d}"


class MonthRange(NamedTuple):
    min: int
    max: int


@dataclass(frozen=True)
class CalendarEvent:
    name: str
    pattern: DatePattern
    duration_days: int | None = None
    kind: Literal["holiday", "custom"] = "custom"


@dataclass(frozen=True)
class CalendarTheme:
    name: str
    pattern: DatePattern
    style: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class MonthCustomization:
    display_name: str
    alias: str | None = None
    intention: str | None = None


_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")


class Calendar(ABC):
    name: str = "Calendar"

    def __init__(self) -> None:
        self._events: list[CalendarEvent] = []
        self._themes: list[CalendarTheme] = []
        self._month_customizations: dict[int, MonthCustomization] = {}
        self._day_intentions: dict[CalendarDate, str] = {}
        self._week_intentions: dict[tuple[int, int], str] = {}
        self._month_intentions: dict[tuple[int, int], str] = {}

    # ── calendar rules (per variant) ─────────────────────────────────────

    @abstractmethod
    def is_leap_year(self, year: int) -> bool:
        pass

    @abstractmethod
    def month_range(self) -> MonthRange:
        pass

    @abstractmethod
    def _month_length(self, year: int, month: int) -> int:
        """Length of an already validated month."""
        pass

    @abstractmethod
    def day_of_week(self, date: CalendarDate) -> int:
        """Day of the week, 1-7."""
        pass

    # ── derived arithmetic ───────────────────────────────────────────────

    def months(self) -> range:
        low, high = self.month_range()
        return range(low, high + 1)

    def _check_month(self, month: int) -> None:
        low, high = self.month_range()
        if not low <= month <= high:
            raise InvalidMonthError(
                f"Invalid month: {month}. Valid range for {self.name} is {low} to {high}."
            )

    def days_in_month(self, year: int, month: int) -> int:
        self._check_month(month)
        return self._month_length(year, month)

    def days_in_year(self, year: int) -> int:
        return sum(self._month_length(year, month) for month in self.months())

    def validate(self, date: CalendarDate) -> CalendarDate:
        length = self.days_in_month(date.year, date.month)
        if not 1 <= date.day <= length:
            raise InvalidDayError(
                f"Invalid day: {date.day}. {self.name} month {date.month} of "
                f"{date.year} has {length} days."
            )
        return date

    def _check_ordinal(self, year: int, ordinal: int) -> None:
        length = self.days_in_year(year)
        if not 1 <= ordinal <= length:
            raise InvalidOrdinalError(
                f"Invalid ordinal: {ordinal}. {self.name} year {year} has "
                f"{length} days (valid ordinals 1 to {length})."
            )

    def date_to_ordinal(self, date: CalendarDate) -> int:
        """1-based day of the year."""
        self.validate(date)
        preceding = sum(
            self._month_length(date.year, month)
            for month in range(self.month_range().min, date.month)
        )
        return preceding + date.day

    def ordinal_to_date(self, year: int, ordinal: int) -> CalendarDate:
        self._check_ordinal(year, ordinal)
        remaining = ordinal
        for month in self.months():
            length = self._month_length(year, month)
            if remaining <= length:
                return CalendarDate(year, month, remaining)
            remaining -= length
        raise AssertionError("month lengths do not add up to days_in_year")

    def add_days(self, date: CalendarDate, days: int) -> CalendarDate:
        """Move ``days`` forward (or backward when negative), across years."""
        ordinal = self.date_to_ordinal(date) + days
        year = date.year
        while ordinal > self.days_in_year(year):
            ordinal -= self.days_in_year(year)
            year += 1
        while ordinal < 1:
            year -= 1
            ordinal += self.days_in_year(year)
        return self.ordinal_to_date(year, ordinal)

    def week_number(self, date: CalendarDate) -> int:
        return (self.date_to_ordinal(date) + 6) // 7

    # ── fixed numeric layout ─────────────────────────────────────────────

    def format_date(self, date: CalendarDate) -> str:
        return str(self.validate(date))

    def parse_date(self, text: str) -> CalendarDate:
        match = _DATE_RE.match(text.strip())
        if match is None:
            raise ValueError(
                f"Cannot parse {text!r} as a date.\n"
                f"Expected the numeric layout YYYY-MM-DD, e.g. '2024-07-15'"
            )
        year, month, day = (int(part) for part in match.groups())
        return self.validate(CalendarDate(year, month, day))

    # ── events, themes, customizations, intentions ───────────────────────

    def add_event(self, event: CalendarEvent) -> None:
        self._events.append(event)

    def get_events(self, date: CalendarDate) -> list[CalendarEvent]:
        return [e for e in self._events if e.pattern.matches(self, date)]

    def add_theme(self, theme: CalendarTheme) -> None:
        self._themes.append(theme)

    def get_theme(self, date: CalendarDate) -> CalendarTheme | None:
        return next((t for t in self._themes if t.pattern.matches(self, date)), None)

    def customize_month(self, month: int, customization: MonthCustomization) -> None:
        self._check_month(month)
        self._month_customizations[month] = customization

    def get_month_customization(self, month: int) -> MonthCustomization | None:
        return self._month_customizations.get(month)

    def set_day_intention(self, date: CalendarDate, intention: str) -> None:
        self._day_intentions[date] = intention

    def get_day_intention(self, date: CalendarDate) -> str | None:
        return self._day_intentions.get(date)

    def set_week_intention(self, year: int, week_number: int, intention: str) -> None:
        self._week_intentions[(year, week_number)] = intention

    def get_week_intention(self, year: int, week_number: int) -> str | None:
        return self._week_intentions.get((year, week_number))

    def set_month_intention(self, year: int, month: int, intention: str) -> None:
        self._month_intentions[(year, month)] = intention

    def get_month_intention(self, year: int, month: int) -> str | None:
        return self._month_intentions.get((year, month))

    # ── views ────────────────────────────────────────────────────────────

    def generate_day_view(self, date: CalendarDate) -> DayView:
        return DayView(
            date=date,
            events=self.get_events(date),
            theme=self.get_theme(date),
            intention=self.get_day_intention(date),
        )

    def generate_week_view(self, start_date: CalendarDate) -> WeekView:
        days = [self.generate_day_view(self.add_days(start_date, i)) for i in range(7)]
        return self._week_view(start_date, days)

    def _week_view(self, start_date: CalendarDate, days: list[DayView]) -> WeekView:
        return WeekView(
            start_date=start_date,
            end_date=days[-1].date,
            days=days,
            intention=self.get_week_intention(
                start_date.year, self.week_number(start_date)
            ),
        )

    def generate_month_view(self, year: int, month: int) -> MonthView:
        self._check_month(month)
        weeks: list[WeekView] = []
        current = CalendarDate(year, month, 1)
        while current.year == year and current.month == month:
            weeks.append(self.generate_week_view(current))
            current = self.add_days(current, 7)

        return MonthView(
            year=year,
            month=month,
            weeks=weeks,
            customization=self.get_month_customization(month),
            intention=self.get_month_intention(year, month),
        )

    def generate_year_view(self, year: int) -> YearView:
        return YearView(
            year=year,
            months=[self.generate_month_view(year, month) for month in self.months()],
        )

    def __repr__(self) -> str:
        low, high = self.month_range()
        return f"{type(self).__name__}(months={low}..{high}, events={len(self._events)})"
