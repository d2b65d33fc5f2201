from __future__ import annotations

import math

import pytest

from fixturegen import NumberRules, RuleBoundsError, ValueFactory, ValueKind
from fixturegen.sampling.number_rules import bounds
from fixturegen.utils.constants import DEFAULT_LOWER_BOUND, DEFAULT_UPPER_BOUND


def test_integer_known_values() -> None:
    factory = ValueFactory(1234567)
    assert [factory.valid_integer({"gte": 0, "lte": 10}) for _ in range(5)] == [6, 1, 0, 8, 6]


def test_integer_within_inclusive_bounds() -> None:
    factory = ValueFactory(77)
    for _ in range(500):
        value = factory.valid_integer({"gte": 0, "lte": 10})
        assert isinstance(value, int)
        assert 0 <= value <= 10


@pytest.mark.parametrize(
    "rules",
    [
        {"gte": -50, "lte": 50, "multipleOf": 5},
        {"gt": 1, "lt": 1000, "multipleOf": 7},
        {"gte": -999, "lte": -3, "multipleOf": 3},
    ],
)
def test_integer_multiple_of(rules: dict[str, int]) -> None:
    factory = ValueFactory(31337)
    lower, upper = bounds(NumberRules.model_validate(rules))
    for _ in range(200):
        value = factory.valid_integer(rules)
        assert lower <= value <= upper
        assert value % rules["multipleOf"] == 0


def test_integer_without_bounds_uses_scaled_safe_range() -> None:
    factory = ValueFactory(1)
    value = factory.valid_integer()
    assert DEFAULT_LOWER_BOUND <= value <= DEFAULT_UPPER_BOUND


def test_exclusive_bounds_merged_like_inclusive() -> None:
    assert bounds(NumberRules(gt=0, lt=10)) == (0, 10)
    assert bounds(NumberRules(gt=2, gte=5, lt=9, lte=7)) == (5, 7)
    assert bounds(NumberRules()) == (DEFAULT_LOWER_BOUND, DEFAULT_UPPER_BOUND)


def test_lower_above_upper_rejected() -> None:
    factory = ValueFactory(1)
    with pytest.raises(RuleBoundsError):
        factory.valid_integer({"gte": 10, "lte": 0})
    with pytest.raises(RuleBoundsError):
        factory.valid_decimal({"gt": 1.5, "lt": 1.0})


def test_integer_no_multiple_in_range() -> None:
    factory = ValueFactory(1)
    with pytest.raises(RuleBoundsError):
        factory.valid_integer({"gte": 1, "lte": 4, "multipleOf": 10})


def test_decimal_within_bounds() -> None:
    factory = ValueFactory(4)
    for _ in range(500):
        value = factory.valid_decimal({"gte": -1.5, "lte": 2.25})
        assert -1.5 <= value <= 2.25


def test_decimal_multiple_of() -> None:
    factory = ValueFactory(4)
    for _ in range(200):
        value = factory.valid_decimal({"gte": 0, "lte": 100, "multipleOf": 0.5})
        assert 0 <= value <= 100
        assert math.isclose(value / 0.5, round(value / 0.5), abs_tol=1e-9)


def test_decimal_no_multiple_in_range() -> None:
    factory = ValueFactory(4)
    with pytest.raises(RuleBoundsError):
        factory.valid_decimal({"gte": 0.1, "lte": 0.2, "multipleOf": 1})


def test_constant_short_circuits() -> None:
    factory = ValueFactory(12)
    before = factory.prng.getstate()
    assert factory.valid_integer({"constant": 42, "gte": 0, "lte": 1}) == 42
    assert factory.valid_decimal({"constant": 1.25}) == 1.25
    assert factory.prng.getstate() == before


def test_invalid_integer_inclusive_bounds() -> None:
    records = ValueFactory(5).invalid_integer({"gte": 0, "lte": 10})
    by_description = {r.description: r for r in records}

    assert by_description["less than 0"].value == -1
    assert by_description["greater than 10"].value == 11
    assert [r.description for r in records] == [
        "less than 0",
        "greater than 10",
        "a string",
        "a decimal",
        "a boolean",
    ]
    assert by_description["a string"].kind is ValueKind.STRING
    assert len(by_description["a string"].value) == 10
    assert by_description["a decimal"].kind is ValueKind.DECIMAL
    assert 0 <= by_description["a decimal"].value <= 10


def test_invalid_integer_full_rule_order() -> None:
    records = ValueFactory(5).invalid_integer(
        {"constant": 4, "multipleOf": 2, "gt": 0, "lt": 100, "gte": 1, "lte": 99}
    )
    assert [(r.value, r.description) for r in records[:6]] == [
        (5, "does not equal 4"),
        (3, "not a multiple of 2"),
        (0, "not greater than 0"),
        (100, "not less than 100"),
        (0, "less than 1"),
        (100, "greater than 99"),
    ]
    # Integral multipleOf suppresses the decimal record.
    assert [r.description for r in records[6:]] == ["a string", "a boolean"]


def test_invalid_integer_fractional_multiple_keeps_decimal() -> None:
    records = ValueFactory(5).invalid_integer({"multipleOf": 0.5, "gte": 0, "lte": 10})
    assert "a decimal" in [r.description for r in records]
    assert records[0].value == pytest.approx(1.5)
    assert records[0].kind is ValueKind.DECIMAL


def test_invalid_decimal_rules() -> None:
    records = ValueFactory(5).invalid_decimal(
        {"constant": 2.5, "multipleOf": 0.5, "gt": 0, "lt": 5, "gte": 1, "lte": 4}
    )
    values = [r.value for r in records[:6]]
    assert values == pytest.approx([2.6, 0.6, 0, 5, 0.9, 4.1])
    assert [r.description for r in records] == [
        "not 2.5",
        "not a multiple of 0.5",
        "not greater than 0",
        "not less than 5",
        "less than 1",
        "greater than 4",
        "a string",
        "a boolean",
    ]
    assert all(r.kind is ValueKind.DECIMAL for r in records[:6])


def test_invalid_completeness() -> None:
    rules = {"gte": 1, "lte": 9, "multipleOf": 3}
    assert len(ValueFactory(1).invalid_decimal(rules)) >= len(rules) + 2
    assert len(ValueFactory(1).invalid_integer(rules)) >= len(rules) + 2


def test_description_drops_trailing_zero() -> None:
    records = ValueFactory(5).invalid_decimal({"gte": 1.0})
    assert records[0].description == "less than 1"
