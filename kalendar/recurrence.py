"""Recurrence rules for events, backed by python-dateutil's rrule.

Instant amounts are wall-clock seconds in the instant's own timezone, so
occurrences are generated on naive wall-clock datetimes: "daily at 09:00"
stays at 09:00 across daylight-saving changes.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Literal

from dateutil.rrule import DAILY, MONTHLY, WEEKLY, YEARLY, rrule

from kalendar.instant import Instant
from kalendar.units import convert

Frequency = Literal["daily", "weekly", "monthly", "yearly"]

_FREQ_MAP = {
    "daily": DAILY,
    "weekly": WEEKLY,
    "monthly": MONTHLY,
    "yearly": YEARLY,
}

_EPOCH = datetime(1970, 1, 1)


def _wall_clock(instant: Instant) -> datetime:
    seconds = convert(instant.amount, instant.unit, instant.unit.root)
    return _EPOCH + timedelta(seconds=seconds)


class RecurrencePattern:
    """Repeat an anchor instant every ``interval`` units of ``frequency``.

    The series ends after ``count`` occurrences or at ``until`` (inclusive),
    whichever is given; with neither it is unbounded and only ever expanded
    inside an explicit window. ``exceptions`` are instants to skip.
    """

    def __init__(
        self,
        frequency: Frequency,
        *,
        interval: int = 1,
        count: int | None = None,
        until: Instant | None = None,
        exceptions: Iterable[Instant] = (),
    ):
        if frequency not in _FREQ_MAP:
            valid = ", ".join(_FREQ_MAP)
            raise ValueError(f"Invalid frequency: {frequency!r}\nValid frequencies: {valid}")
        if interval < 1:
            raise ValueError(f"interval must be at least 1, got {interval}")
        if count is not None and until is not None:
            raise ValueError(
                "count and until are mutually exclusive.\n"
                "Hint: end the series either after N occurrences or at an instant"
            )

        self.frequency: Frequency = frequency
        self.interval: int = interval
        self.count: int | None = count
        self.until: Instant | None = until
        self.exceptions: tuple[Instant, ...] = tuple(exceptions)

    def occurrences(self, start: Instant, end: Instant) -> list[Instant]:
        """Occurrences anchored at ``start`` falling within ``[start, end]``.

        Results are expressed in ``start``'s unit and timezone.
        """
        end = end.to_timezone(start.timezone)
        dtstart = _wall_clock(start)
        window_end = _wall_clock(end)
        if window_end < dtstart:
            return []

        kwargs = {"freq": _FREQ_MAP[self.frequency], "interval": self.interval}
        if self.count is not None:
            kwargs["count"] = self.count
        if self.until is not None:
            kwargs["until"] = _wall_clock(self.until.to_timezone(start.timezone))
        rule = rrule(dtstart=dtstart, **kwargs)

        skipped = {
            _wall_clock(exception.to_timezone(start.timezone))
            for exception in self.exceptions
        }

        root = start.unit.root
        results: list[Instant] = []
        for index, occurrence in enumerate(rule.between(dtstart, window_end, inc=True)):
            if occurrence in skipped:
                continue
            seconds = (occurrence - _EPOCH).total_seconds()
            results.append(
                Instant(
                    f"{start.id}_occurrence_{index}",
                    convert(seconds, root, start.unit),
                    start.unit,
                    start.timezone,
                    start.label,
                )
            )
        return results

    def __repr__(self) -> str:
        return (
            f"RecurrencePattern({self.frequency!r}, interval={self.interval}, "
            f"count={self.count}, exceptions={len(self.exceptions)})"
        )


__all__ = ["RecurrencePattern", "Frequency"]
