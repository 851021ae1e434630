from dataclasses import dataclass

from kalendar.units import Unit, convert


@dataclass(frozen=True)
class Quantity:
    """An amount of some unit, e.g. ``Quantity(5, minute)``."""

    amount: float
    unit: Unit

    def to_base(self) -> "Quantity":
        """Re-express this quantity in its hierarchy's root unit."""
        if self.unit.base_unit is None:
            return self
        return Quantity(
            self.amount * self.unit.conversion_factor, self.unit.base_unit
        ).to_base()

    def to(self, unit: Unit) -> "Quantity":
        return Quantity(convert(self.amount, self.unit, unit), unit)

    def __str__(self) -> str:
        return f"{self.amount} {self.unit.symbol}"
