"""Typed exceptions raised by the value samplers."""


class SamplingError(ValueError):
    """Base class for sampling related errors."""


class RuleBoundsError(SamplingError):
    """Raised when numeric or length rules admit no value."""


class UniqueItemsExhaustedError(SamplingError):
    """Raised when a unique array cannot be filled within the retry budget."""


class UnsupportedTypeError(SamplingError):
    """Raised when no sampler is registered for a primitive type name."""
