"""Composable conditions over instants.

Properties read a value off an :class:`~kalendar.instant.Instant`; comparing a
property produces a :class:`Filter`. Filters combine with ``&`` and ``|`` and
can be passed straight to :class:`~kalendar.graph.Rule` as a condition::

    >>> from kalendar.properties import meta, timezone, value
    >>> even_utc = ((value % 2) == 0) & (timezone == "UTC")
    >>> untagged = meta("tag") == None
"""

import operator as op
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from kalendar.instant import Instant

if TYPE_CHECKING:
    from kalendar.graph import RuleContext


class Filter(ABC):

    @abstractmethod
    def apply(self, instant: Instant) -> bool:
        pass

    def __call__(self, context: "RuleContext") -> bool:
        return self.apply(context.instant)

    def __or__(self, other: "Filter") -> "Filter":
        return Or(self, other)

    def __and__(self, other: "Filter") -> "Filter":
        return And(self, other)


class Or(Filter):
    def __init__(self, *filters: Filter):
        self.filters: tuple[Filter, ...] = filters

    @override
    def apply(self, instant: Instant) -> bool:
        return any(f.apply(instant) for f in self.filters)


class And(Filter):
    def __init__(self, *filters: Filter):
        self.filters: tuple[Filter, ...] = filters

    @override
    def apply(self, instant: Instant) -> bool:
        return all(f.apply(instant) for f in self.filters)


class Operator(Filter):
    def __init__(
        self,
        left: "Property | Any",
        right: "Property | Any",
        operator: Callable[[Any, Any], bool],
    ):
        self.left: "Property | Any" = left
        self.right: "Property | Any" = right
        self.operator: Callable[[Any, Any], bool] = operator

    @override
    def apply(self, instant: Instant) -> bool:
        left_val = (
            self.left.apply(instant) if isinstance(self.left, Property) else self.left
        )
        right_val = (
            self.right.apply(instant) if isinstance(self.right, Property) else self.right
        )
        return bool(self.operator(left_val, right_val))


class Property:
    def apply(self, instant: Instant) -> Any:
        raise NotImplementedError

    def __ge__(self, other: "Property | Any") -> Operator:
        return Operator(self, other, op.ge)

    def __le__(self, other: "Property | Any") -> Operator:
        return Operator(self, other, op.le)

    def __gt__(self, other: "Property | Any") -> Operator:
        return Operator(self, other, op.gt)

    def __lt__(self, other: "Property | Any") -> Operator:
        return Operator(self, other, op.lt)

    @override
    def __eq__(  # pyright: ignore[reportIncompatibleMethodOverride]
        self, other: Any
    ) -> Operator:
        return Operator(self, other, op.eq)

    @override
    def __ne__(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        other: Any,
    ) -> Operator:
        return Operator(self, other, op.ne)

    def __mod__(self, divisor: Any) -> "Property":
        return Derived(self, lambda v: v % divisor)


class Derived(Property):
    def __init__(self, source: Property, transform: Callable[[Any], Any]):
        self.source: Property = source
        self.transform: Callable[[Any], Any] = transform

    @override
    def apply(self, instant: Instant) -> Any:
        return self.transform(self.source.apply(instant))


class Value(Property):
    """Amount in the root unit of the instant's hierarchy."""

    @override
    def apply(self, instant: Instant) -> float:
        return instant.normalized()


class Amount(Property):
    """Amount in the instant's own unit."""

    @override
    def apply(self, instant: Instant) -> float:
        return instant.amount


class Timezone(Property):
    @override
    def apply(self, instant: Instant) -> str:
        return instant.timezone


class Label(Property):
    @override
    def apply(self, instant: Instant) -> str | None:
        return instant.label


class Meta(Property):
    def __init__(self, key: str):
        self.key: str = key

    @override
    def apply(self, instant: Instant) -> Any:
        return instant.metadata.get(self.key)


value: Value = Value()
amount: Amount = Amount()
timezone: Timezone = Timezone()
label: Label = Label()


def meta(key: str) -> Meta:
    return Meta(key)


def one_of(property: Property, values: Iterable[Hashable]) -> Operator:
    return Operator(set(values), property, op.contains)


__all__ = [
    "Filter",
    "Property",
    "value",
    "amount",
    "timezone",
    "label",
    "meta",
    "one_of",
]
