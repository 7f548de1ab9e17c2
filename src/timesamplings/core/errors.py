"""Exceptions raised by samplers."""

from __future__ import annotations

from typing import Any


class SamplingError(Exception):
    """Base class for conversion failures."""


class UnsupportedConversionError(SamplingError, TypeError):
    """Raised when a sampler has no rule for a shape in a given direction."""

    def __init__(self, sampler: Any, value: Any, direction: str):
        self.sampler = type(sampler).__name__
        self.direction = direction
        self.shape = describe(value)
        super().__init__(
            f"{self.sampler} has no {direction} implementation for {self.shape}"
        )


class SubMillisecondPrecisionError(SamplingError, ValueError):
    """Raised when a duration cannot be expressed in whole milliseconds."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"{value!r} is not a whole number of milliseconds")


class OrdinalOutOfRangeError(SamplingError, IndexError):
    """Raised when an event ordinal falls outside ``[1, size]``."""

    def __init__(self, ordinal: int, size: int):
        self.ordinal = ordinal
        self.size = size
        super().__init__(f"event ordinal {ordinal} outside [1, {size}]")


def describe(value: Any) -> str:
    """Return a short description of ``value``'s shape and element type."""

    from .shapes import Shape, shape_of

    shape = shape_of(value)
    if shape is Shape.SCALAR:
        return f"scalar {type(value).__name__}"
    if shape is Shape.INTERVAL:
        return f"interval of {type(value.lo).__name__}"
    if shape is Shape.RANGE:
        if isinstance(value, range):
            return "range of int"
        return f"range of {type(value.first).__name__}"
    return f"vector {type(value).__name__}"


__all__ = [
    "SamplingError",
    "UnsupportedConversionError",
    "SubMillisecondPrecisionError",
    "OrdinalOutOfRangeError",
]
