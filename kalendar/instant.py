from dataclasses import dataclass, field, replace
from typing import Any

from kalendar.quantity import Quantity
from kalendar.timezones import to_timezone, to_unit
from kalendar.units import Unit, convert


@dataclass(frozen=True, eq=False)
class Instant:
    """A point in time: an amount of some unit in a named timezone.

    The fields are immutable; ``metadata`` is the one mutable mapping and is
    where rule actions record their results.
    """

    id: str
    amount: float
    unit: Unit
    timezone: str = "UTC"
    label: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def normalized(self) -> float:
        """Amount expressed in the root unit of this instant's hierarchy."""
        return convert(self.amount, self.unit, self.unit.root)

    def compare(self, other: "Instant") -> float:
        """Negative if earlier than ``other``, zero if simultaneous, positive if later.

        ``other`` is moved into this instant's timezone first, then both sides
        are reduced to this instant's root unit.
        """
        if other.timezone != self.timezone:
            other = to_timezone(other, self.timezone)
        root = self.unit.root
        return self.normalized() - convert(other.amount, other.unit, root)

    def __lt__(self, other: "Instant") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "Instant") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "Instant") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "Instant") -> bool:
        return self.compare(other) >= 0

    def add(self, quantity: Quantity) -> "Instant":
        return replace(
            self,
            id=f"{self.id}_added",
            amount=self.amount + convert(quantity.amount, quantity.unit, self.unit),
            metadata={},
        )

    def subtract(self, quantity: Quantity) -> "Instant":
        return replace(
            self,
            id=f"{self.id}_subtracted",
            amount=self.amount - convert(quantity.amount, quantity.unit, self.unit),
            metadata={},
        )

    def to_timezone(self, target: str) -> "Instant":
        return to_timezone(self, target)

    def to_unit(self, unit: Unit) -> "Instant":
        return to_unit(self, unit)

    def __str__(self) -> str:
        name = self.label if self.label is not None else self.id
        return f"{name}: {self.amount} {self.unit.name.lower()}s ({self.timezone})"
