"""Invalid value records returned by the ``invalid_*`` samplers.

Each record is tagged with the :class:`ValueKind` of its payload so consumers
can branch on the kind instead of inspecting the Python type of ``value``.
Wrong-type records (a number offered for a string field, and so on) carry the
kind of the offending value, not of the field.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = ["ValueKind", "InvalidValue", "Scalar", "format_number"]

Scalar = Union[str, int, float, bool]


class ValueKind(Enum):
    """Enumeration of primitive value kinds."""

    STRING = "string"
    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"


_ACCEPTED: dict[ValueKind, tuple[type, ...]] = {
    ValueKind.STRING: (str,),
    ValueKind.INTEGER: (int,),
    ValueKind.DECIMAL: (int, float),
    ValueKind.BOOLEAN: (bool,),
}


@dataclass(slots=True, frozen=True)
class InvalidValue:
    """A value paired with a human-readable reason it is invalid."""

    kind: ValueKind
    value: Scalar
    description: str

    def __post_init__(self) -> None:  # noqa: D401 - simple validation
        accepted = _ACCEPTED[self.kind]
        is_bool = isinstance(self.value, bool)
        if not isinstance(self.value, accepted) or (is_bool and self.kind is not ValueKind.BOOLEAN):
            raise TypeError(f"{self.kind.value} record cannot hold {type(self.value).__name__}")

    @classmethod
    def string(cls, value: str, description: str) -> InvalidValue:
        return cls(ValueKind.STRING, value, description)

    @classmethod
    def integer(cls, value: int, description: str) -> InvalidValue:
        return cls(ValueKind.INTEGER, value, description)

    @classmethod
    def decimal(cls, value: float, description: str) -> InvalidValue:
        return cls(ValueKind.DECIMAL, value, description)

    @classmethod
    def number(cls, value: int | float, description: str) -> InvalidValue:
        """Tag ``value`` as an integer when it is one, otherwise as a decimal."""

        kind = ValueKind.INTEGER if isinstance(value, int) else ValueKind.DECIMAL
        return cls(kind, value, description)

    @classmethod
    def boolean(cls, value: bool, description: str) -> InvalidValue:
        return cls(ValueKind.BOOLEAN, value, description)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serialisable representation."""

        return {"kind": self.kind.value, "value": self.value, "description": self.description}


def format_number(value: int | float) -> str:
    """Render ``value`` for descriptions, dropping a redundant ``.0``."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
