from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from kalendar.instant import Instant
from kalendar.interval import Interval
from kalendar.recurrence import RecurrencePattern


class EventCategory(StrEnum):
    UNCATEGORIZED = "uncategorized"
    HOLIDAY = "holiday"
    THEME = "theme"
    INTENTION = "intention"
    ASTRONOMICAL_EVENT = "astronomical_event"
    EARTH_EVENT = "earth_event"
    LUNAR_EVENT = "lunar_event"


@dataclass(frozen=True, eq=False)
class Event:
    id: str
    title: str
    description: str
    interval: Interval
    category: str = EventCategory.UNCATEGORIZED
    recurrence: RecurrencePattern | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def occurrences(self, window: Interval) -> list[Interval]:
        """Every occurrence of this event overlapping ``window``.

        A non-recurring event has a single occurrence, its own interval.
        """
        if self.recurrence is None:
            return [self.interval] if self.interval.overlaps(window) else []

        start = self.interval.start
        length = self.interval.duration
        window_end = window.end.to_timezone(start.timezone)
        found: list[Interval] = []
        for begin in self.recurrence.occurrences(start, window_end):
            occurrence = Interval(begin, begin.add(length))
            if occurrence.overlaps(window):
                found.append(occurrence)
        return found


__all__ = ["Event", "EventCategory"]
