import pytest

from kalendar import (
    DuplicateIdError,
    NotFoundError,
    Quantity,
    Unit,
    UnitRegistry,
    UnrelatedUnitsError,
    canonical_second,
    convert,
)


def _hierarchy() -> tuple[Unit, Unit, Unit, Unit]:
    second = canonical_second()
    minute = Unit("minute", "Minute", "min", second, 60)
    hour = Unit("hour", "Hour", "h", minute, 60)
    day = Unit("day", "Day", "d", hour, 24)
    return second, minute, hour, day


def test_convert_same_unit_is_identity() -> None:
    _, minute, _, _ = _hierarchy()
    assert convert(42, minute, minute) == 42


def test_convert_up_and_down_the_tree() -> None:
    second, minute, hour, day = _hierarchy()
    assert convert(2, hour, second) == 7200
    assert convert(7200, second, hour) == 2
    assert convert(1, day, minute) == 1440
    assert convert(90, minute, hour) == pytest.approx(1.5)


def test_convert_between_siblings_goes_through_common_ancestor() -> None:
    second, minute, _, _ = _hierarchy()
    lap = Unit("lap", "Lap", "lap", minute, 2)
    sprint = Unit("sprint", "Sprint", "spr", minute, 5)
    assert convert(5, lap, sprint) == pytest.approx(2)
    assert convert(1, sprint, second) == 300


def test_conversions_compose() -> None:
    second, minute, hour, day = _hierarchy()
    via_hour = convert(convert(3, day, hour), hour, second)
    assert via_hour == convert(3, day, second)


def test_unrelated_units_raise() -> None:
    other_root = Unit("tick", "Tick", "t")
    _, minute, _, _ = _hierarchy()
    with pytest.raises(UnrelatedUnitsError, match="unrelated units"):
        convert(1, minute, other_root)


def test_canonical_second_is_a_singleton() -> None:
    assert canonical_second() is canonical_second()
    assert canonical_second().is_root
    assert canonical_second().conversion_factor == 1


def test_root_and_ancestors() -> None:
    second, minute, hour, day = _hierarchy()
    assert day.root is second
    assert day.ancestors() == [day, hour, minute, second]


def test_non_positive_factor_rejected() -> None:
    with pytest.raises(ValueError, match="must be positive"):
        Unit("broken", "Broken", "b", canonical_second(), 0)


def test_units_compare_by_identity() -> None:
    second = canonical_second()
    a = Unit("minute", "Minute", "min", second, 60)
    b = Unit("minute", "Minute", "min", second, 60)
    assert a != b
    assert a == a


class TestUnitRegistry:
    def test_second_is_registered_lazily(self) -> None:
        registry = UnitRegistry()
        assert "second" not in registry
        assert registry.second is canonical_second()
        assert "second" in registry
        # Accessing twice does not re-register
        assert registry.second is canonical_second()
        assert len(registry) == 1

    def test_define_resolves_base_by_id(self) -> None:
        registry = UnitRegistry()
        registry.second
        registry.define("minute", "Minute", "min", "second", 60)
        hour = registry.define("hour", "Hour", "h", "minute", 60)
        assert convert(1, hour, registry.second) == 3600

    def test_duplicate_id_raises(self) -> None:
        registry = UnitRegistry(canonical_second())
        with pytest.raises(DuplicateIdError):
            registry.add(Unit("second", "Other", "s"))

    def test_remove_and_lookup(self) -> None:
        _, minute, _, _ = _hierarchy()
        registry = UnitRegistry(minute)
        assert registry.get("minute") is minute
        assert registry.remove("minute") is minute
        assert registry.get("minute") is None
        with pytest.raises(NotFoundError):
            registry.remove("minute")
        with pytest.raises(NotFoundError):
            registry.require("minute")

    def test_define_with_unknown_base_raises(self) -> None:
        with pytest.raises(NotFoundError):
            UnitRegistry().define("hour", "Hour", "h", "minute", 60)


def test_quantity_to_base_walks_to_root() -> None:
    second, _, hour, day = _hierarchy()
    base = Quantity(2, day).to_base()
    assert base.unit is second
    assert base.amount == 172800
    assert Quantity(3, hour).to(day).amount == pytest.approx(0.125)
    assert str(Quantity(5, hour)) == "5 h"


def test_quantity_to_base_on_root_is_unchanged() -> None:
    second = canonical_second()
    quantity = Quantity(7, second)
    assert quantity.to_base() is quantity
