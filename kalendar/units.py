"""Time units arranged as a rooted tree.

Each unit points at its base unit and stores how many base units it spans.
Conversions walk up to the lowest common ancestor of the two units and back
down, so any two units in the same hierarchy convert exactly as far as float
arithmetic allows.

Example:
    >>> second = canonical_second()
    >>> minute = Unit("minute", "Minute", "min", second, 60)
    >>> hour = Unit("hour", "Hour", "h", minute, 60)
    >>> convert(2, hour, second)
    7200
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from functools import cache

from kalendar.errors import DuplicateIdError, NotFoundError, UnitCycleError, UnrelatedUnitsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Unit:
    """A node in a unit hierarchy.

    Units compare by identity: two separately constructed "minute" units are
    different nodes, even with identical fields.
    """

    id: str
    name: str
    symbol: str
    base_unit: "Unit | None" = None
    conversion_factor: float = 1
    is_duration_unit: bool = True

    def __post_init__(self) -> None:
        if self.conversion_factor <= 0:
            raise ValueError(
                f"Unit {self.id!r} conversion_factor must be positive, "
                f"got {self.conversion_factor}"
            )
        # Walk the chain once so a malformed hierarchy fails at construction
        for _ in self._walk():
            pass

    def _walk(self) -> Iterator["Unit"]:
        seen: set[int] = set()
        unit: Unit | None = self
        while unit is not None:
            if id(unit) in seen:
                raise UnitCycleError(
                    f"Unit {self.id!r} has a cyclic base chain through {unit.id!r}"
                )
            seen.add(id(unit))
            yield unit
            unit = unit.base_unit

    def ancestors(self) -> list["Unit"]:
        """Return this unit followed by every base unit up to the root."""
        return list(self._walk())

    @property
    def root(self) -> "Unit":
        return self.ancestors()[-1]

    @property
    def is_root(self) -> bool:
        return self.base_unit is None

    def convert(self, amount: float, to_unit: "Unit") -> float:
        """Convert ``amount`` of this unit into ``to_unit``."""
        return convert(amount, self, to_unit)

    def __repr__(self) -> str:
        base = self.base_unit.id if self.base_unit is not None else None
        return f"Unit({self.id!r}, factor={self.conversion_factor}, base={base!r})"


def _common_ancestor(from_chain: list[Unit], to_chain: list[Unit]) -> Unit | None:
    # In a single-parent tree the first shared node scanning from the leaf is
    # the lowest common ancestor.
    to_ids = {id(unit) for unit in to_chain}
    for unit in from_chain:
        if id(unit) in to_ids:
            return unit
    return None


def convert(amount: float, from_unit: Unit, to_unit: Unit) -> float:
    """Convert ``amount`` expressed in ``from_unit`` into ``to_unit``.

    Raises:
        UnrelatedUnitsError: If the units belong to different hierarchies.
    """
    if from_unit is to_unit:
        return amount

    from_chain = from_unit.ancestors()
    to_chain = to_unit.ancestors()
    common = _common_ancestor(from_chain, to_chain)
    if common is None:
        raise UnrelatedUnitsError(
            f"Cannot convert between unrelated units {from_unit.id!r} and {to_unit.id!r}.\n"
            f"Roots: {from_chain[-1].id!r} vs {to_chain[-1].id!r}\n"
            f"Hint: both units must descend from the same root unit"
        )

    result = amount
    for unit in from_chain:
        if unit is common:
            break
        result *= unit.conversion_factor

    descent: list[Unit] = []
    for unit in to_chain:
        if unit is common:
            break
        descent.append(unit)
    for unit in reversed(descent):
        result /= unit.conversion_factor

    return result


@cache
def canonical_second() -> Unit:
    """Return the process-wide root unit, creating it on first use."""
    logger.debug("Creating canonical root unit 'second'")
    return Unit("second", "Second", "s", None, 1, True)


class UnitRegistry:
    """Id-keyed collection of units sharing the canonical second."""

    def __init__(self, *units: Unit) -> None:
        self._units: dict[str, Unit] = {}
        for unit in units:
            self.add(unit)

    @property
    def second(self) -> Unit:
        root = canonical_second()
        if self._units.get(root.id) is not root:
            self.add(root)
        return root

    def add(self, unit: Unit) -> Unit:
        if unit.id in self._units:
            raise DuplicateIdError(f"Unit with id {unit.id!r} already exists")
        unit.ancestors()
        self._units[unit.id] = unit
        logger.debug("Registered unit %s", unit.id)
        return unit

    def define(
        self,
        id: str,
        name: str,
        symbol: str,
        base: "Unit | str | None",
        conversion_factor: float,
        is_duration_unit: bool = True,
    ) -> Unit:
        """Create and register a unit; ``base`` may be a registered unit id."""
        base_unit = self.require(base) if isinstance(base, str) else base
        return self.add(
            Unit(id, name, symbol, base_unit, conversion_factor, is_duration_unit)
        )

    def remove(self, unit_id: str) -> Unit:
        if unit_id not in self._units:
            raise NotFoundError(f"Unit with id {unit_id!r} does not exist")
        logger.debug("Removed unit %s", unit_id)
        return self._units.pop(unit_id)

    def get(self, unit_id: str) -> Unit | None:
        return self._units.get(unit_id)

    def require(self, unit_id: str) -> Unit:
        unit = self._units.get(unit_id)
        if unit is None:
            raise NotFoundError(f"Unit with id {unit_id!r} does not exist")
        return unit

    def __contains__(self, unit_id: object) -> bool:
        return unit_id in self._units

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)


__all__ = ["Unit", "UnitRegistry", "canonical_second", "convert"]
