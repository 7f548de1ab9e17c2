"""Indices shifted by a constant."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..types import inclusive_range, range_bounds
from .base import Sampler, floor_int, is_real
from .errors import UnsupportedConversionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShiftSampler(Sampler):
    """``forward(i) = floor(i + shift)``, ``backward(j) = floor(j - shift)``.

    Both directions truncate toward negative infinity, so with a fractional
    shift they are not exact inverses of each other.
    """

    shift: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "shift", float(self.shift))
        logger.debug("ShiftSampler created with shift %.6g", self.shift)

    def _forward_scalar(self, value) -> int:
        if not is_real(value):
            raise UnsupportedConversionError(self, value, "forward")
        return floor_int(value + self.shift)

    def _backward_scalar(self, value) -> int:
        if not is_real(value):
            raise UnsupportedConversionError(self, value, "backward")
        return floor_int(value - self.shift)

    def _forward_range(self, value):
        if not isinstance(value, range):
            raise UnsupportedConversionError(self, value, "forward")
        first, last = range_bounds(value)
        return inclusive_range(self._forward_scalar(first), self._forward_scalar(last), value.step)

    def _backward_range(self, value):
        if not isinstance(value, range):
            raise UnsupportedConversionError(self, value, "backward")
        first, last = range_bounds(value)
        return inclusive_range(self._backward_scalar(first), self._backward_scalar(last), value.step)


__all__ = ["ShiftSampler"]
