"""String samplers.

Valid strings are built one character at a time from
:data:`~fixturegen.utils.constants.ALPHABET`.  Every draw comes from
``ValueFactory.prng`` so the output depends only on the seed and the order of
calls.  A ``constant`` rule short-circuits without consuming randomness.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fixturegen.utils.constants import ALPHABET
from fixturegen.utils.errors import RuleBoundsError

from .rules import NumberRules, StringRules
from .values import InvalidValue

if TYPE_CHECKING:  # pragma: no cover
    from .factory import ValueFactory


def _length_bounds(rules: StringRules) -> tuple[int, int]:
    min_length = rules.min_length
    if min_length is None:
        min_length = 1
        # A lone maxLength of 0 must not be overridden by the default minimum.
        if rules.max_length is not None and rules.max_length < min_length:
            min_length = rules.max_length
    max_length = rules.max_length if rules.max_length is not None else min_length + 10
    return min_length, max_length


def valid_string(rules: StringRules, *, gen: ValueFactory) -> str:
    """Return a string satisfying ``rules``."""

    if rules.constant is not None:
        return rules.constant

    min_length, max_length = _length_bounds(rules)
    if min_length > max_length:
        raise RuleBoundsError(
            f"minimum length {min_length} is greater than maximum length {max_length}"
        )

    length = gen.prng.pick(min_length, max_length)
    return "".join(ALPHABET[gen.prng.pick(0, len(ALPHABET) - 1)] for _ in range(length))


def _fixed_length(length: int, *, gen: ValueFactory) -> str:
    return valid_string(StringRules(min_length=length, max_length=length), gen=gen)


def invalid_string(rules: StringRules, *, gen: ValueFactory) -> list[InvalidValue]:
    """Return one record per violated string rule plus two wrong-type records."""

    invalid: list[InvalidValue] = []

    if rules.constant is not None:
        invalid.append(
            InvalidValue.string(
                rules.constant + "_invalid", "does not match the specified constant."
            )
        )

    if rules.max_length is not None:
        invalid.append(
            InvalidValue.string(
                _fixed_length(rules.max_length + 1, gen=gen), "exceeds the maximum length."
            )
        )

    if rules.min_length is not None:
        invalid.append(
            InvalidValue.string(
                _fixed_length(rules.min_length - 1, gen=gen),
                "does not reach the minimum length.",
            )
        )

    number = int(gen.valid_integer(NumberRules(gt=0, lt=10000)))
    invalid.append(InvalidValue.integer(number, "a number"))
    invalid.append(InvalidValue.boolean(gen.valid_boolean(), "a boolean"))
    return invalid


__all__ = ["valid_string", "invalid_string"]
