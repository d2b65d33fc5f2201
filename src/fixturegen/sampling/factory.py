"""Seeded factory for valid and invalid fixture values.

A :class:`ValueFactory` owns one :class:`~fixturegen.sampling.prng.LinearCongruential`
stream.  Callers keep a single factory per fixture-generation session and
invoke the samplers in a stable order: the full sequence of produced values is
a pure function of the seed, the call order and the rule arguments.  Rules
with a ``constant`` return it without consuming randomness, so changing a rule
can shift every later value.

The factory is not thread-safe; the output order is only defined for one
caller at a time.

Example::

    factory = ValueFactory(seed=1234567)
    factory.valid_string({"minLength": 3, "maxLength": 3})
    factory.invalid_integer({"gte": 0, "lte": 10})
    factory.valid_array(factory.valid_boolean, {"minItems": 2, "maxItems": 4})
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from fixturegen.utils.constants import DEFAULT_UNIQUE_RETRY_FACTOR
from fixturegen.utils.errors import UnsupportedTypeError
from fixturegen.utils.logging import get_logger

from . import array_rules, boolean_rules, number_rules, string_rules
from .prng import LinearCongruential, random_seed
from .rules import ArrayRules, BooleanRules, NumberRules, StringRules, coerce_rules
from .values import InvalidValue, Scalar

if TYPE_CHECKING:  # pragma: no cover
    from fixturegen.config import ConfigModel

T = TypeVar("T")

RulesArg = Mapping[str, Any] | None

log = get_logger(__name__)

# Primitive type names of service descriptions mapped to sampler kinds.
TYPE_ALIASES: dict[str, str] = {
    "string": "string",
    "integer": "integer",
    "long": "integer",
    "number": "decimal",
    "decimal": "decimal",
    "double": "decimal",
    "float": "decimal",
    "boolean": "boolean",
}


class ValueFactory:
    """Generate reproducible valid and invalid sample values."""

    supports_invalid_arrays = False

    def __init__(
        self,
        seed: int | None = None,
        *,
        unique_retry_factor: int = DEFAULT_UNIQUE_RETRY_FACTOR,
    ) -> None:
        """Initialize the factory.

        Parameters
        ----------
        seed:
            Integer seed.  When omitted a process-random seed in ``[0, 2**16)``
            is drawn and the output is not reproducible; read it back from
            :attr:`seed` to replay a run.
        unique_retry_factor:
            Producer calls allowed per requested item when building unique
            arrays.
        """

        if unique_retry_factor < 1:
            raise ValueError("unique_retry_factor must be at least 1")
        if seed is None:
            seed = random_seed()
            log.debug("no seed supplied, drew %d", seed)
        self.seed: int = int(seed)
        self.prng: LinearCongruential = LinearCongruential(self.seed)
        self.unique_retry_factor: int = unique_retry_factor

    @classmethod
    def from_config(cls, cfg: ConfigModel, *, seed: int | None = None) -> ValueFactory:
        """Build a factory from ``cfg``; an explicit ``seed`` wins over the config."""

        return cls(
            seed if seed is not None else cfg.seed.value,
            unique_retry_factor=cfg.arrays.unique_retry_factor,
        )

    # -- Strings ------------------------------------------------------------

    def valid_string(self, rules: StringRules | RulesArg = None) -> str:
        return string_rules.valid_string(coerce_rules(StringRules, rules), gen=self)

    def invalid_string(self, rules: StringRules | RulesArg = None) -> list[InvalidValue]:
        return string_rules.invalid_string(coerce_rules(StringRules, rules), gen=self)

    # -- Numbers ------------------------------------------------------------

    def valid_integer(self, rules: NumberRules | RulesArg = None) -> int | float:
        return number_rules.valid_integer(coerce_rules(NumberRules, rules), gen=self)

    def invalid_integer(self, rules: NumberRules | RulesArg = None) -> list[InvalidValue]:
        return number_rules.invalid_integer(coerce_rules(NumberRules, rules), gen=self)

    def valid_decimal(self, rules: NumberRules | RulesArg = None) -> int | float:
        return number_rules.valid_decimal(coerce_rules(NumberRules, rules), gen=self)

    def invalid_decimal(self, rules: NumberRules | RulesArg = None) -> list[InvalidValue]:
        return number_rules.invalid_decimal(coerce_rules(NumberRules, rules), gen=self)

    # -- Booleans -----------------------------------------------------------

    def valid_boolean(self, rules: BooleanRules | RulesArg = None) -> bool:
        return boolean_rules.valid_boolean(coerce_rules(BooleanRules, rules), gen=self)

    def invalid_boolean(self, rules: BooleanRules | RulesArg = None) -> list[InvalidValue]:
        return boolean_rules.invalid_boolean(coerce_rules(BooleanRules, rules), gen=self)

    # -- Collections --------------------------------------------------------

    def valid_array(
        self, valid_item: Callable[[], T], rules: ArrayRules | RulesArg = None
    ) -> list[T]:
        """Return a list of items from ``valid_item`` honouring ``rules``."""

        return array_rules.valid_array(
            valid_item,
            coerce_rules(ArrayRules, rules),
            gen=self,
            retry_factor=self.unique_retry_factor,
        )

    def invalid_array(
        self,
        valid_item: Callable[[], T],
        invalid_item: Callable[[], T],
        rules: ArrayRules | RulesArg = None,
    ) -> list[InvalidValue]:
        """Return an empty list; see :attr:`supports_invalid_arrays`."""

        log.debug("invalid array fixtures are not generated")
        return array_rules.invalid_array(valid_item, invalid_item, coerce_rules(ArrayRules, rules))

    # -- Dispatch by primitive type name ------------------------------------

    def valid(self, type_name: str, rules: RulesArg = None) -> Scalar:
        """Return a valid value for the primitive ``type_name``."""

        sampler: Callable[[Any], Scalar] = getattr(self, f"valid_{self.kind_of(type_name)}")
        return sampler(rules)

    def invalid(self, type_name: str, rules: RulesArg = None) -> list[InvalidValue]:
        """Return invalid records for the primitive ``type_name``."""

        sampler: Callable[[Any], list[InvalidValue]] = getattr(
            self, f"invalid_{self.kind_of(type_name)}"
        )
        return sampler(rules)

    @staticmethod
    def kind_of(type_name: str) -> str:
        """Return the sampler kind for a service primitive ``type_name``."""

        try:
            return TYPE_ALIASES[type_name.strip().lower()]
        except KeyError:
            raise UnsupportedTypeError(f"no sampler for primitive type {type_name!r}") from None


__all__ = ["ValueFactory", "TYPE_ALIASES"]
