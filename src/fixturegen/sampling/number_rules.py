"""Integer and decimal samplers.

Both kinds share one bound computation::

    lower = max(gt ?? MIN/1000, gte ?? MIN/1000)
    upper = min(lt ?? MAX/1000, lte ?? MAX/1000)

where MIN/MAX are the safe-integer limits of a double.  Exclusive bounds are
merged exactly like inclusive ones, so ``gt=0`` may still yield ``0``.  This is
kept for compatibility with existing fixture snapshots.

Invalid records use the boundary literally (``gt`` itself, ``gte - step``) and
ignore any interaction with ``multiple_of``.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TYPE_CHECKING

from fixturegen.utils.constants import DEFAULT_LOWER_BOUND, DEFAULT_UPPER_BOUND
from fixturegen.utils.errors import RuleBoundsError

from .rules import NumberRules, StringRules
from .values import InvalidValue, format_number

if TYPE_CHECKING:  # pragma: no cover
    from .factory import ValueFactory

Number = int | float

_DECIMAL_STEP = 0.1
_INTEGER_STEP = 1


def bounds(rules: NumberRules) -> tuple[Number, Number]:
    """Return the merged ``(lower, upper)`` sampling bounds for ``rules``."""

    lower = max(
        rules.gt if rules.gt is not None else DEFAULT_LOWER_BOUND,
        rules.gte if rules.gte is not None else DEFAULT_LOWER_BOUND,
    )
    upper = min(
        rules.lt if rules.lt is not None else DEFAULT_UPPER_BOUND,
        rules.lte if rules.lte is not None else DEFAULT_UPPER_BOUND,
    )
    if lower > upper:
        raise RuleBoundsError(
            f"lower bound {format_number(lower)} is greater than upper bound {format_number(upper)}"
        )
    return lower, upper


# ---------------------------------------------------------------------------
# Decimals


def valid_decimal(rules: NumberRules, *, gen: ValueFactory) -> Number:
    """Return a real number satisfying ``rules``."""

    if rules.constant is not None:
        return rules.constant

    lower, upper = bounds(rules)
    value = lower + gen.prng.random() * (upper - lower)

    if rules.multiple_of:
        # Round half up to the nearest multiple.
        value = math.floor(value / rules.multiple_of + 0.5) * rules.multiple_of
        if value < lower or value > upper:
            raise RuleBoundsError(
                f"no multiple of {format_number(rules.multiple_of)} between "
                f"{format_number(lower)} and {format_number(upper)}"
            )

    return value


def invalid_decimal(rules: NumberRules, *, gen: ValueFactory) -> list[InvalidValue]:
    """Return one record per violated decimal rule plus two wrong-type records."""

    invalid = _rule_violations(
        rules,
        step=_DECIMAL_STEP,
        constant_description="not {}",
        record=InvalidValue.decimal,
    )
    invalid.append(_wrong_string(gen))
    invalid.append(InvalidValue.boolean(gen.valid_boolean(), "a boolean"))
    return invalid


# ---------------------------------------------------------------------------
# Integers


def valid_integer(rules: NumberRules, *, gen: ValueFactory) -> Number:
    """Return an integer satisfying ``rules``.

    The draw is floored, then moved onto a multiple of ``multiple_of`` by
    subtracting the truncated remainder and stepping one multiple back inside
    the bounds if needed.
    """

    if rules.constant is not None:
        return rules.constant

    lower, upper = bounds(rules)
    value: Number = math.floor(lower + gen.prng.random() * (upper - lower))

    step = rules.multiple_of
    if step:
        value -= math.fmod(value, step)
        if isinstance(step, int):
            value = int(value)
        if value < lower:
            value += step
        if value > upper:
            value -= step

    if value < lower or value > upper:
        raise RuleBoundsError(
            f"no valid integer between {format_number(lower)} and {format_number(upper)}"
        )

    return value


def invalid_integer(rules: NumberRules, *, gen: ValueFactory) -> list[InvalidValue]:
    """Return one record per violated integer rule plus the wrong-type records.

    A decimal record is only added when ``multiple_of`` does not already force
    integral spacing.
    """

    invalid = _rule_violations(
        rules,
        step=_INTEGER_STEP,
        constant_description="does not equal {}",
        record=InvalidValue.number,
    )
    invalid.append(_wrong_string(gen))

    if rules.multiple_of is None or rules.multiple_of % 1:
        invalid.append(InvalidValue.decimal(gen.valid_decimal(rules), "a decimal"))

    invalid.append(InvalidValue.boolean(gen.valid_boolean(), "a boolean"))
    return invalid


# ---------------------------------------------------------------------------
# Shared helpers


def _rule_violations(
    rules: NumberRules,
    *,
    step: Number,
    constant_description: str,
    record: Callable[[Number, str], InvalidValue],
) -> list[InvalidValue]:
    invalid: list[InvalidValue] = []

    if rules.constant is not None:
        invalid.append(
            record(
                rules.constant + step,
                constant_description.format(format_number(rules.constant)),
            )
        )
    if rules.multiple_of:
        invalid.append(
            record(
                rules.multiple_of + step, f"not a multiple of {format_number(rules.multiple_of)}"
            )
        )
    if rules.gt is not None:
        invalid.append(record(rules.gt, f"not greater than {format_number(rules.gt)}"))
    if rules.lt is not None:
        invalid.append(record(rules.lt, f"not less than {format_number(rules.lt)}"))
    if rules.gte is not None:
        invalid.append(record(rules.gte - step, f"less than {format_number(rules.gte)}"))
    if rules.lte is not None:
        invalid.append(record(rules.lte + step, f"greater than {format_number(rules.lte)}"))

    return invalid


def _wrong_string(gen: ValueFactory) -> InvalidValue:
    return InvalidValue.string(
        gen.valid_string(StringRules(min_length=10, max_length=10)), "a string"
    )


__all__ = [
    "bounds",
    "valid_decimal",
    "invalid_decimal",
    "valid_integer",
    "invalid_integer",
]
