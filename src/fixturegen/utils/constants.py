"""Shared constants for the sampling engine."""

from __future__ import annotations

__all__ = [
    "ALPHABET",
    "LCG_MULTIPLIER",
    "LCG_INCREMENT",
    "LCG_MODULUS",
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    "DEFAULT_LOWER_BOUND",
    "DEFAULT_UPPER_BOUND",
    "DEFAULT_SEED_SPAN",
    "DEFAULT_UNIQUE_RETRY_FACTOR",
]

ALPHABET: str = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789 ~!@#$%^&*()-_=+[{]};:,<.>?"
)

LCG_MULTIPLIER: int = 1664525
LCG_INCREMENT: int = 1013904223
LCG_MODULUS: int = 2**32

MAX_SAFE_INTEGER: int = 2**53 - 1
MIN_SAFE_INTEGER: int = -(2**53 - 1)

# Scaled down to leave headroom for multiple-of arithmetic.
DEFAULT_LOWER_BOUND: float = MIN_SAFE_INTEGER / 1000
DEFAULT_UPPER_BOUND: float = MAX_SAFE_INTEGER / 1000

DEFAULT_SEED_SPAN: int = 2**16
DEFAULT_UNIQUE_RETRY_FACTOR: int = 5
