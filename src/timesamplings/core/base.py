"""Conversion contract shared by all samplers.

A sampler translates values between its own ("self") coordinate space and
the coordinate space of its parent ("base") sampler:

* :meth:`Sampler.forward` maps a self-space value to base space.
* :meth:`Sampler.backward` maps a base-space value to self space.

Both entry points accept four input shapes and route them in a fixed order.
Vectors are always converted elementwise and returned as lists.  Intervals,
ranges and scalars go to per-sampler hooks; any hook a sampler does not
override raises :class:`~timesamplings.core.errors.UnsupportedConversionError`.
"""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from .errors import UnsupportedConversionError
from .shapes import Shape, shape_of


def is_real(value: Any) -> bool:
    """Return ``True`` for plain numeric scalars, excluding booleans and numpy time types."""

    if isinstance(value, (bool, np.bool_, np.timedelta64, np.datetime64)):
        return False
    return isinstance(value, numbers.Real)


def is_integral(value: Any) -> bool:
    return is_real(value) and isinstance(value, numbers.Integral)


def floor_int(value: float) -> int:
    """Round toward negative infinity and return a Python ``int``."""

    return int(math.floor(value))


class Sampler(ABC):
    """Abstract bidirectional converter between self and base coordinates."""

    def forward(self, value: Any) -> Any:
        """Convert a self-space ``value`` to base space."""

        shape = shape_of(value)
        if shape is Shape.VECTOR:
            return [self.forward(item) for item in value]
        if shape is Shape.INTERVAL:
            return self._forward_interval(value)
        if shape is Shape.RANGE:
            return self._forward_range(value)
        return self._forward_scalar(value)

    def backward(self, value: Any) -> Any:
        """Convert a base-space ``value`` to self space."""

        shape = shape_of(value)
        if shape is Shape.VECTOR:
            return [self.backward(item) for item in value]
        if shape is Shape.INTERVAL:
            return self._backward_interval(value)
        if shape is Shape.RANGE:
            return self._backward_range(value)
        return self._backward_scalar(value)

    @abstractmethod
    def _forward_scalar(self, value: Any) -> Any:
        """Primitive self-to-base rule."""

    @abstractmethod
    def _backward_scalar(self, value: Any) -> Any:
        """Primitive base-to-self rule."""

    def _forward_interval(self, value: Any) -> Any:
        raise UnsupportedConversionError(self, value, "forward")

    def _backward_interval(self, value: Any) -> Any:
        raise UnsupportedConversionError(self, value, "backward")

    def _forward_range(self, value: Any) -> Any:
        raise UnsupportedConversionError(self, value, "forward")

    def _backward_range(self, value: Any) -> Any:
        raise UnsupportedConversionError(self, value, "backward")


__all__ = ["Sampler", "is_real", "is_integral", "floor_int"]
