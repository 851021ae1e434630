"""A graph of instants ordered in time.

:class:`TimeGraph` owns units, instants, edges, rules and events, each keyed
by a caller-supplied id. Every time an instant is added or removed the graph
rebuilds its generated ``"precedes"`` edges, chaining all instants in
ascending normalized order. Generated edges live in their own id space, so
edges added by callers are never replaced by a rebuild.

The graph is not safe for concurrent mutation; callers sharing one across
threads must serialize access themselves.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, NamedTuple

from kalendar.errors import DuplicateIdError, NotFoundError
from kalendar.events import Event
from kalendar.instant import Instant
from kalendar.interval import Interval
from kalendar.units import Unit, UnitRegistry, convert

logger = logging.getLogger(__name__)

PRECEDES = "precedes"


@dataclass(frozen=True, eq=False)
class Edge:
    id: str
    source: Instant
    target: Instant
    relationship: str
    weight: float = 1

    def is_duplicate(self, other: "Edge") -> bool:
        """Same endpoints and relationship under a different id."""
        return (
            self.id != other.id
            and self.source is other.source
            and self.target is other.target
            and self.relationship == other.relationship
        )


@dataclass(frozen=True)
class RuleContext:
    instant: Instant
    graph: "TimeGraph | None" = None


class Rule:
    """A condition/action pair applied to instants.

    Both callables receive a :class:`RuleContext`. They are treated as
    opaque: the action may have side effects, typically on
    ``context.instant.metadata``, and either may raise.
    """

    def __init__(
        self,
        id: str,
        name: str,
        description: str,
        condition: Callable[[RuleContext], bool],
        action: Callable[[RuleContext], Any],
    ):
        self.id: str = id
        self.name: str = name
        self.description: str = description
        self._condition: Callable[[RuleContext], bool] = condition
        self._action: Callable[[RuleContext], Any] = action

    def evaluate(self, context: RuleContext) -> bool:
        return bool(self._condition(context))

    def apply(self, context: RuleContext) -> None:
        self._action(context)

    def __repr__(self) -> str:
        return f"Rule({self.id!r}, name={self.name!r})"


class Neighbors(NamedTuple):
    previous: Instant | None
    next: Instant | None


class TimeGraph:

    def __init__(
        self,
        id: str,
        name: str,
        description: str,
        base_unit: Unit,
        *,
        universal_reference: Instant | None = None,
        primary_reference: Instant | None = None,
        base_timezone: str = "UTC",
    ) -> None:
        self.id: str = id
        self.name: str = name
        self.description: str = description
        self.base_unit: Unit = base_unit
        self.base_timezone: str = base_timezone
        self.universal_reference: Instant = universal_reference or Instant(
            "universal_reference", 0, base_unit, base_timezone
        )
        self.primary_reference: Instant = primary_reference or Instant(
            "primary_reference", 0, base_unit, base_timezone
        )

        self._units: UnitRegistry = UnitRegistry(base_unit)
        self._instants: dict[str, Instant] = {}
        self._edges: dict[str, Edge] = {}
        # Generated chain, kept apart so caller edge ids never collide with it
        self._precedes: dict[str, Edge] = {}
        self._rules: dict[str, Rule] = {}
        self._events: dict[str, Event] = {}

    # ── units ────────────────────────────────────────────────────────────

    def add_unit(self, unit: Unit) -> None:
        self._units.add(unit)

    def remove_unit(self, unit_id: str) -> None:
        if unit_id == self.base_unit.id:
            raise ValueError(f"Cannot remove the base unit {unit_id!r} of {self.id!r}")
        self._units.remove(unit_id)

    def get_unit(self, unit_id: str) -> Unit | None:
        return self._units.get(unit_id)

    # ── instants ─────────────────────────────────────────────────────────

    def add_instant(self, instant: Instant) -> None:
        if instant.id in self._instants:
            raise DuplicateIdError(f"Instant with id {instant.id!r} already exists")
        # Fails early on units unrelated to the graph's base unit
        self._sort_key(instant)
        self._instants[instant.id] = instant
        logger.debug("Added instant %s to %s", instant.id, self.id)
        self._rebuild_precedes()

    def remove_instant(self, instant_id: str) -> None:
        if instant_id not in self._instants:
            raise NotFoundError(f"Instant with id {instant_id!r} does not exist")
        removed = self._instants.pop(instant_id)
        # Edges may only reference instants that are still present
        self._edges = {
            edge_id: edge
            for edge_id, edge in self._edges.items()
            if edge.source is not removed and edge.target is not removed
        }
        logger.debug("Removed instant %s from %s", instant_id, self.id)
        self._rebuild_precedes()

    def get_instant(self, instant_id: str) -> Instant | None:
        return self._instants.get(instant_id)

    def instants(self) -> list[Instant]:
        """All instants in ascending normalized order."""
        return sorted(self._instants.values(), key=self._sort_key)

    def _sort_key(self, instant: Instant) -> float:
        if instant.timezone != self.base_timezone:
            instant = instant.to_timezone(self.base_timezone)
        return convert(instant.amount, instant.unit, self.base_unit.root)

    def _rebuild_precedes(self) -> None:
        precedes: dict[str, Edge] = {}
        ordered = self.instants()
        for before, after in zip(ordered, ordered[1:]):
            edge_id = f"{PRECEDES}_{before.id}_{after.id}"
            precedes[edge_id] = Edge(edge_id, before, after, PRECEDES)
        self._precedes = precedes

    def get_neighbors(self, instant: Instant) -> Neighbors:
        if self._instants.get(instant.id) is None:
            raise NotFoundError(
                f"Instant {instant.id!r} does not exist in time graph {self.id!r}"
            )
        ordered = self.instants()
        index = next(i for i, item in enumerate(ordered) if item.id == instant.id)
        return Neighbors(
            previous=ordered[index - 1] if index > 0 else None,
            next=ordered[index + 1] if index < len(ordered) - 1 else None,
        )

    # ── edges ────────────────────────────────────────────────────────────

    def add_edge(self, edge: Edge) -> None:
        if edge.id in self._edges:
            raise DuplicateIdError(f"Edge with id {edge.id!r} already exists")
        for endpoint in (edge.source, edge.target):
            if self._instants.get(endpoint.id) is not endpoint:
                raise NotFoundError(
                    f"Edge {edge.id!r} references instant {endpoint.id!r}, "
                    f"which is not in time graph {self.id!r}.\n"
                    f"Hint: add both instants before adding the edge"
                )
        self._edges[edge.id] = edge

    def remove_edge(self, edge_id: str) -> None:
        """Remove a caller edge, or a generated precedes edge until the next rebuild."""
        if edge_id in self._edges:
            del self._edges[edge_id]
        elif edge_id in self._precedes:
            del self._precedes[edge_id]
        else:
            raise NotFoundError(f"Edge with id {edge_id!r} does not exist")

    def get_edge(self, edge_id: str) -> Edge | None:
        """Caller edges shadow a generated precedes edge with the same id."""
        edge = self._edges.get(edge_id)
        return edge if edge is not None else self._precedes.get(edge_id)

    def edges(self, relationship: str | None = None) -> list[Edge]:
        return [
            edge
            for edge in (*self._edges.values(), *self._precedes.values())
            if relationship is None or edge.relationship == relationship
        ]

    def precedes_edges(self) -> list[Edge]:
        """The generated chain through all instants in time order."""
        return list(self._precedes.values())

    def duplicate_edges(self) -> list[tuple[Edge, Edge]]:
        edges = self.edges()
        return [
            (first, second)
            for i, first in enumerate(edges)
            for second in edges[i + 1 :]
            if first.is_duplicate(second)
        ]

    # ── rules ────────────────────────────────────────────────────────────

    def add_rule(self, rule: Rule) -> None:
        if rule.id in self._rules:
            raise DuplicateIdError(f"Rule with id {rule.id!r} already exists")
        self._rules[rule.id] = rule

    def remove_rule(self, rule_id: str) -> None:
        if rule_id not in self._rules:
            raise NotFoundError(f"Rule with id {rule_id!r} does not exist")
        del self._rules[rule_id]

    def get_rule(self, rule_id: str) -> Rule | None:
        return self._rules.get(rule_id)

    def apply_rules(self, instant: Instant) -> None:
        """Run every matching rule against ``instant``, in insertion order.

        A failing condition or action propagates immediately; actions already
        applied by earlier rules are not undone.
        """
        context = RuleContext(instant, self)
        for rule in list(self._rules.values()):
            if rule.evaluate(context):
                logger.debug("Applying rule %s to %s", rule.id, instant.id)
                rule.apply(context)

    # ── events ───────────────────────────────────────────────────────────

    def add_event(self, event: Event) -> None:
        if event.id in self._events:
            raise DuplicateIdError(f"Event with id {event.id!r} already exists")
        self._events[event.id] = event

    def remove_event(self, event_id: str) -> None:
        if event_id not in self._events:
            raise NotFoundError(f"Event with id {event_id!r} does not exist")
        del self._events[event_id]

    def get_event(self, event_id: str) -> Event | None:
        return self._events.get(event_id)

    def events_in_range(self, window: Interval) -> list[Event]:
        return [e for e in self._events.values() if e.occurrences(window)]

    def instants_in_range(self, window: Interval) -> list[Instant]:
        return [i for i in self.instants() if window.contains(i)]

    # ── slicing by normalized value ──────────────────────────────────────

    def __getitem__(self, item: slice) -> list[Instant]:
        start = self._coerce_bound(item.start, "start")
        end = self._coerce_bound(item.stop, "end")
        return [
            instant
            for instant in self.instants()
            if (start is None or self._sort_key(instant) >= start)
            and (end is None or self._sort_key(instant) <= end)
        ]

    def _coerce_bound(self, bound: Any, edge: str) -> float | None:
        """Convert slice bounds to normalized values.

        Accepts numbers (already in the root unit), instants, or None for an
        unbounded side.
        """
        if bound is None:
            return None
        if isinstance(bound, Instant):
            return self._sort_key(bound)
        if isinstance(bound, (int, float)):
            return bound
        raise TypeError(
            f"TimeGraph slice {edge} bound must be a number, Instant, or None.\n"
            f"Got {type(bound).__name__!r}: {bound!r}\n"
            f"Examples:\n"
            f"  graph[0:3600]  # root-unit values\n"
            f"  graph[first_instant:]  # from an instant onwards"
        )

    # ── reference-point translation ──────────────────────────────────────

    def _reference_offset(self) -> Fraction:
        """Exact ``primary - universal`` in the root unit."""
        return Fraction(self.primary_reference.normalized()) - Fraction(
            self.universal_reference.normalized()
        )

    def universal_to_system_time(self, universal_time: float | Fraction) -> Fraction:
        """Translate a universal time into this graph's system time.

        Arithmetic is exact, so the result feeds back through
        :meth:`system_to_universal_time` to exactly ``universal_time``.
        """
        return Fraction(universal_time) + self._reference_offset()

    def system_to_universal_time(self, system_time: float | Fraction) -> Fraction:
        return Fraction(system_time) - self._reference_offset()

    # ── timezone helpers ─────────────────────────────────────────────────

    def convert_instant_to_timezone(self, instant: Instant, target: str) -> Instant:
        return instant.to_timezone(target)

    def convert_interval_to_timezone(self, interval: Interval, target: str) -> Interval:
        return interval.to_timezone(target)

    def __len__(self) -> int:
        return len(self._instants)

    def __iter__(self) -> Iterator[Instant]:
        return iter(self.instants())

    def __repr__(self) -> str:
        return (
            f"TimeGraph({self.id!r}, instants={len(self._instants)}, "
            f"edges={len(self._edges) + len(self._precedes)}, "
            f"rules={len(self._rules)})"
        )


__all__ = ["TimeGraph", "Edge", "Rule", "RuleContext", "Neighbors", "PRECEDES"]
