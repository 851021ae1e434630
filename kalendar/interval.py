from dataclasses import dataclass, field

from kalendar.errors import IntervalOrderError
from kalendar.instant import Instant
from kalendar.quantity import Quantity


def _align(instant: Instant, like: Instant) -> Instant:
    """Express ``instant`` in the timezone and unit of ``like``."""
    if instant.timezone != like.timezone:
        instant = instant.to_timezone(like.timezone)
    if instant.unit is not like.unit:
        instant = instant.to_unit(like.unit)
    return instant


@dataclass(frozen=True, eq=False)
class Interval:
    """Closed span between two instants.

    ``end`` is normalized into ``start``'s timezone and unit, and ``duration``
    is always measured in ``start.unit``.
    """

    start: Instant
    end: Instant
    duration: Quantity = field(init=False)

    def __post_init__(self) -> None:
        end = _align(self.end, self.start)
        object.__setattr__(self, "end", end)

        length = end.amount - self.start.amount
        if length < 0:
            raise IntervalOrderError(
                f"Interval end ({end.amount} {end.unit.symbol}) precedes "
                f"start ({self.start.amount} {self.start.unit.symbol}).\n"
                f"Hint: swap the arguments or check the end instant's timezone"
            )
        object.__setattr__(self, "duration", Quantity(length, self.start.unit))

    def contains(self, instant: Instant) -> bool:
        amount = _align(instant, self.start).amount
        return self.start.amount <= amount <= self.end.amount

    def overlaps(self, other: "Interval") -> bool:
        other_start = _align(other.start, self.start).amount
        other_end = _align(other.end, self.start).amount
        return self.start.amount < other_end and self.end.amount > other_start

    def intersection(self, other: "Interval") -> "Interval | None":
        if not self.overlaps(other):
            return None

        other_start = _align(other.start, self.start).amount
        other_end = _align(other.end, self.start).amount
        return Interval(
            Instant(
                "intersection_start",
                max(self.start.amount, other_start),
                self.start.unit,
                self.start.timezone,
            ),
            Instant(
                "intersection_end",
                min(self.end.amount, other_end),
                self.start.unit,
                self.start.timezone,
            ),
        )

    def to_timezone(self, target: str) -> "Interval":
        return Interval(self.start.to_timezone(target), self.end.to_timezone(target))

    def __str__(self) -> str:
        """Human-friendly string showing range and duration."""
        return (
            f"Interval({self.start.amount}→{self.end.amount}, "
            f"{self.duration.amount}{self.start.unit.symbol})"
        )
