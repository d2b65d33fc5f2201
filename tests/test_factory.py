from __future__ import annotations

from typing import Any

import pytest

from fixturegen import UnsupportedTypeError, ValueFactory
from fixturegen.config import load_config


def _session(factory: ValueFactory) -> list[Any]:
    out: list[Any] = []
    out.append(factory.valid_string({"minLength": 2, "maxLength": 9}))
    out.append([r.to_dict() for r in factory.invalid_string({"maxLength": 4, "minLength": 1})])
    out.append(factory.valid_integer({"gt": -5, "lt": 500, "multipleOf": 4}))
    out.append([r.to_dict() for r in factory.invalid_integer({"gte": 0, "lte": 10})])
    out.append(factory.valid_decimal({"gte": 0.5, "lte": 9.5}))
    out.append([r.to_dict() for r in factory.invalid_decimal({"multipleOf": 0.25})])
    out.append(factory.valid_boolean())
    out.append([r.to_dict() for r in factory.invalid_boolean({"constant": False})])
    out.append(
        factory.valid_array(
            lambda: factory.valid_string({"minLength": 1, "maxLength": 3}),
            {"minItems": 2, "maxItems": 5, "uniqueItems": True},
        )
    )
    out.append(factory.prng.getstate())
    return out


def test_same_seed_same_session() -> None:
    assert _session(ValueFactory(987654)) == _session(ValueFactory(987654))


def test_different_seed_different_session() -> None:
    assert _session(ValueFactory(1)) != _session(ValueFactory(2))


def test_rule_models_and_mappings_equivalent() -> None:
    from fixturegen import StringRules

    a = ValueFactory(5).valid_string(StringRules(min_length=4, max_length=9))
    b = ValueFactory(5).valid_string({"minLength": 4, "maxLength": 9})
    c = ValueFactory(5).valid_string({"min_length": 4, "max_length": 9})
    assert a == b == c


def test_constant_changes_later_draws() -> None:
    with_constant = ValueFactory(44)
    with_constant.valid_integer({"constant": 3})
    without_constant = ValueFactory(44)
    without_constant.valid_integer({"gte": 0, "lte": 5})
    assert with_constant.prng.getstate() != without_constant.prng.getstate()


def test_random_seed_recorded() -> None:
    factory = ValueFactory()
    replay = ValueFactory(factory.seed)
    assert factory.valid_string() == replay.valid_string()


@pytest.mark.parametrize(
    "type_name,kind",
    [
        ("string", "string"),
        ("integer", "integer"),
        ("long", "integer"),
        ("number", "decimal"),
        ("double", "decimal"),
        ("float", "decimal"),
        ("boolean", "boolean"),
        (" Boolean ", "boolean"),
    ],
)
def test_kind_of(type_name: str, kind: str) -> None:
    assert ValueFactory.kind_of(type_name) == kind


def test_dispatch_matches_direct_calls() -> None:
    assert ValueFactory(6).valid("long", {"gte": 1, "lte": 3}) == ValueFactory(6).valid_integer(
        {"gte": 1, "lte": 3}
    )
    assert ValueFactory(6).invalid("double", {"lte": 2}) == ValueFactory(6).invalid_decimal(
        {"lte": 2}
    )


@pytest.mark.parametrize("type_name", ["date", "date-time", "object", ""])
def test_unsupported_type(type_name: str) -> None:
    with pytest.raises(UnsupportedTypeError):
        ValueFactory(1).valid(type_name)


def test_from_config_seed_precedence() -> None:
    cfg = load_config(env={"FIXTUREGEN_SEED": "1234567"})
    assert ValueFactory.from_config(cfg).seed == 1234567
    assert ValueFactory.from_config(cfg, seed=9).seed == 9
    assert ValueFactory.from_config(cfg).unique_retry_factor == 5


def test_retry_factor_validated() -> None:
    with pytest.raises(ValueError):
        ValueFactory(1, unique_retry_factor=0)
