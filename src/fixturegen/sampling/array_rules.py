"""Collection samplers.

Items come from a caller supplied producer, usually a bound ``valid_*``
sampler of the same factory, so the array length draw and the item draws share
one deterministic stream.  Unique arrays keep first-seen order and need
hashable items.

Invalid arrays are not generated: :func:`invalid_array` accepts the same inputs
as a real implementation would but always returns an empty list.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING, TypeVar

from fixturegen.utils.errors import RuleBoundsError, UniqueItemsExhaustedError

from .rules import ArrayRules
from .values import InvalidValue

if TYPE_CHECKING:  # pragma: no cover
    from .factory import ValueFactory

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def _length(rules: ArrayRules, *, gen: ValueFactory) -> int:
    min_items = rules.min_items
    if min_items is None:
        min_items = 1
        if rules.max_items is not None and rules.max_items < min_items:
            min_items = rules.max_items
    max_items = rules.max_items if rules.max_items is not None else min_items
    if min_items > max_items:
        raise RuleBoundsError(f"minItems {min_items} is greater than maxItems {max_items}")
    return gen.prng.pick(min_items, max_items)


def valid_array(
    valid_item: Callable[[], T],
    rules: ArrayRules,
    *,
    gen: ValueFactory,
    retry_factor: int,
) -> list[T]:
    """Return a list of items satisfying ``rules``.

    With ``unique_items`` the producer is called until ``length`` distinct items
    are collected; more than ``length * retry_factor`` calls raise
    :class:`UniqueItemsExhaustedError`.
    """

    length = _length(rules, gen=gen)

    if not rules.unique_items:
        return [valid_item() for _ in range(length)]

    return _unique(valid_item, length, budget=length * retry_factor)  # type: ignore[arg-type]


def _unique(valid_item: Callable[[], H], length: int, *, budget: int) -> list[H]:
    items: dict[H, None] = {}
    tries = 0
    while len(items) < length:
        tries += 1
        if tries > budget:
            raise UniqueItemsExhaustedError(
                f"only {len(items)} of {length} unique items after {budget} attempts"
            )
        items.setdefault(valid_item(), None)
    return list(items)


def invalid_array(
    valid_item: Callable[[], T],
    invalid_item: Callable[[], T],
    rules: ArrayRules,
) -> list[InvalidValue]:
    """Return no records; array level violations are not generated."""

    return []


__all__ = ["valid_array", "invalid_array"]
