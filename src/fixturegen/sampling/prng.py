"""Deterministic linear congruential generator.

The stream is a pure function of the seed: ``state`` advances as
``(a * state + c) mod 2**32`` and each draw yields ``state / 2**32``.  Python
integers are unbounded, so the multiply before the modulo is exact and the
sequence matches any implementation using 64-bit or bigint arithmetic.
"""

from __future__ import annotations

import math
import secrets
from dataclasses import dataclass

from fixturegen.utils.constants import (
    DEFAULT_SEED_SPAN,
    LCG_INCREMENT,
    LCG_MODULUS,
    LCG_MULTIPLIER,
)

__all__ = ["LinearCongruential", "random_seed"]


def random_seed() -> int:
    """Return a process-random seed in ``[0, 2**16)``."""

    return secrets.randbelow(DEFAULT_SEED_SPAN)


@dataclass(slots=True)
class LinearCongruential:
    """Owning handle around the single 32-bit state register."""

    state: int

    def __post_init__(self) -> None:
        self.state = int(self.state) % LCG_MODULUS

    def random(self) -> float:
        """Advance the state and return a float in ``[0, 1)``."""

        self.state = (LCG_MULTIPLIER * self.state + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS

    def pick(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]`` using exactly one draw."""

        return math.floor(self.random() * (high - low + 1)) + low

    def getstate(self) -> int:
        return self.state

    def setstate(self, state: int) -> None:
        self.state = int(state) % LCG_MODULUS
