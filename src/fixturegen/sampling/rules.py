"""Declarative rule sets consumed by the samplers.

Every field is optional.  Models accept the camelCase names used by service
descriptions (``maxLength``, ``multipleOf``, ``uniqueItems``) as well as the
snake_case attribute names, are immutable, and reject unknown keys so a typo in
a rule never silently widens the sampled domain.

``StringRules.pattern`` is carried for completeness but no sampler reads it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool

__all__ = [
    "StringRules",
    "NumberRules",
    "BooleanRules",
    "ArrayRules",
    "coerce_rules",
]

_RULES_CONFIG = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class StringRules(BaseModel):
    """Length and constant constraints for strings."""

    max_length: int | None = Field(default=None, alias="maxLength")
    min_length: int | None = Field(default=None, alias="minLength")
    pattern: str | None = None
    constant: str | None = None

    model_config = _RULES_CONFIG


class NumberRules(BaseModel):
    """Range, multiple-of and constant constraints shared by integers and decimals."""

    multiple_of: int | float | None = Field(default=None, alias="multipleOf")
    gt: int | float | None = None
    lt: int | float | None = None
    gte: int | float | None = None
    lte: int | float | None = None
    constant: int | float | None = None

    model_config = _RULES_CONFIG


class BooleanRules(BaseModel):
    """Constant constraint for booleans."""

    constant: StrictBool | None = None

    model_config = _RULES_CONFIG


class ArrayRules(BaseModel):
    """Size and uniqueness constraints for collections."""

    max_items: int | None = Field(default=None, alias="maxItems")
    min_items: int | None = Field(default=None, alias="minItems")
    unique_items: bool | None = Field(default=None, alias="uniqueItems")

    model_config = _RULES_CONFIG


RulesT = TypeVar("RulesT", StringRules, NumberRules, BooleanRules, ArrayRules)


def coerce_rules(
    model: type[RulesT], rules: RulesT | Mapping[str, Any] | None = None
) -> RulesT:
    """Return ``rules`` as an instance of ``model``.

    ``None`` yields an empty rule set, and a mapping is validated
    against ``model``.
    """

    if rules is None:
        return model()
    if isinstance(rules, model):
        return rules
    if isinstance(rules, Mapping):
        return model.model_validate(dict(rules))
    raise TypeError(f"expected {model.__name__} or mapping, got {type(rules).__name__}")
