"""Seeded samplers producing valid and invalid values for declared rules."""

from .factory import TYPE_ALIASES, ValueFactory
from .prng import LinearCongruential, random_seed
from .rules import ArrayRules, BooleanRules, NumberRules, StringRules, coerce_rules
from .values import InvalidValue, ValueKind

__all__ = [
    "ArrayRules",
    "BooleanRules",
    "InvalidValue",
    "LinearCongruential",
    "NumberRules",
    "StringRules",
    "TYPE_ALIASES",
    "ValueFactory",
    "ValueKind",
    "coerce_rules",
    "random_seed",
]
