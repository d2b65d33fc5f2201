"""Boolean samplers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .rules import BooleanRules, NumberRules, StringRules
from .values import InvalidValue

if TYPE_CHECKING:  # pragma: no cover
    from .factory import ValueFactory


def valid_boolean(rules: BooleanRules, *, gen: ValueFactory) -> bool:
    if rules.constant is not None:
        return rules.constant
    return gen.prng.random() < 0.5


def invalid_boolean(rules: BooleanRules, *, gen: ValueFactory) -> list[InvalidValue]:
    """Return the negated constant (when declared) and two wrong-type records."""

    invalid: list[InvalidValue] = []

    if rules.constant is not None:
        invalid.append(
            InvalidValue.boolean(
                not rules.constant, f"does not equal {str(rules.constant).lower()}"
            )
        )

    invalid.append(
        InvalidValue.string(gen.valid_string(StringRules(min_length=10, max_length=10)), "a string")
    )
    number = int(gen.valid_integer(NumberRules(gt=0, lt=10000)))
    invalid.append(InvalidValue.integer(number, "a number"))
    return invalid


__all__ = ["valid_boolean", "invalid_boolean"]
