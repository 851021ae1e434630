from kalendar import CALENDAR_UNITS, SECOND, Instant
from kalendar.graph import RuleContext
from kalendar.properties import amount, label, meta, one_of, timezone, value


def _instant(**kwargs) -> Instant:
    defaults = {"id": "p", "amount": 120, "unit": SECOND}
    defaults.update(kwargs)
    return Instant(**defaults)


def test_value_is_normalized() -> None:
    point = _instant(amount=2, unit=CALENDAR_UNITS["MINUTE"])
    assert (value == 120).apply(point)
    assert (amount == 2).apply(point)
    assert (value > 100).apply(point)
    assert not (value < 100).apply(point)


def test_property_equality_operators() -> None:
    point = _instant(timezone="Europe/Paris", label="Lunch")
    assert (timezone == "Europe/Paris").apply(point)
    assert (timezone != "UTC").apply(point)
    assert (label == "Lunch").apply(point)


def test_modulo_derives_a_property() -> None:
    assert ((value % 60) == 0).apply(_instant(amount=180))
    assert not ((value % 60) == 0).apply(_instant(amount=181))


def test_meta_reads_metadata() -> None:
    point = _instant(metadata={"tag": "work"})
    assert (meta("tag") == "work").apply(point)
    assert (meta("missing") == None).apply(point)  # noqa: E711


def test_filters_combine() -> None:
    even_utc = ((value % 2) == 0) & (timezone == "UTC")
    assert even_utc.apply(_instant(amount=4))
    assert not even_utc.apply(_instant(amount=5))
    assert not even_utc.apply(_instant(amount=4, timezone="Asia/Tokyo"))

    either = (value < 10) | (label == "late")
    assert either.apply(_instant(amount=5))
    assert either.apply(_instant(amount=500, label="late"))
    assert not either.apply(_instant(amount=500))


def test_one_of() -> None:
    condition = one_of(label, {"breakfast", "lunch"})
    assert condition.apply(_instant(label="lunch"))
    assert not condition.apply(_instant(label="dinner"))


def test_filter_is_callable_with_rule_context() -> None:
    condition = value >= 60
    assert condition(RuleContext(_instant(amount=60)))
    assert not condition(RuleContext(_instant(amount=59)))


def test_dsl_is_exported_from_package_root() -> None:
    import kalendar
    from kalendar import properties

    assert kalendar.value is properties.value
    assert isinstance(kalendar.meta("tag"), kalendar.Property)
    assert isinstance(kalendar.one_of(kalendar.value, {1, 2}), kalendar.Filter)
