"""Deterministic generator of valid and invalid sample values for test fixtures.

A :class:`~fixturegen.sampling.ValueFactory` seeded once per session produces
rule-consistent values and rule-violating records for strings, integers,
decimals, booleans and arrays.  The same seed and call sequence always yields
the same values.
"""

from .sampling import (
    ArrayRules,
    BooleanRules,
    InvalidValue,
    NumberRules,
    StringRules,
    ValueFactory,
    ValueKind,
)
from .utils.errors import (
    RuleBoundsError,
    SamplingError,
    UniqueItemsExhaustedError,
    UnsupportedTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "ArrayRules",
    "BooleanRules",
    "InvalidValue",
    "NumberRules",
    "RuleBoundsError",
    "SamplingError",
    "StringRules",
    "UniqueItemsExhaustedError",
    "UnsupportedTypeError",
    "ValueFactory",
    "ValueKind",
    "__version__",
]
