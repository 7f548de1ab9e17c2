"""Uniformly sampled 1-based indices at a fixed rate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta

from ..types import Interval, TimeRange, inclusive_range, range_bounds
from ..utils.timeparse import duration_to_ms, is_duration, ms_to_duration
from .base import Sampler, floor_int, is_real
from .errors import UnsupportedConversionError
from .shapes import is_unit_range

logger = logging.getLogger(__name__)


def index_to_ms(rate: float, index: float) -> float:
    """Milliseconds from the first sample to 1-based ``index``."""

    return (index - 1) * 1000 / rate


def ms_to_index(rate: float, ms: float) -> float:
    """Fractional 1-based index at ``ms`` milliseconds."""

    return ms * rate / 1000 + 1


@dataclass(frozen=True)
class DiscreteSampler(Sampler):
    """Convert between durations and sample indices at ``rate`` Hz.

    Index 1 sits at duration zero.  A duration falling between two samples
    resolves to the earlier one, so every duration in ``[0, 1000/rate)`` ms
    belongs to index 1.
    """

    rate: float

    def __post_init__(self) -> None:
        if not self.rate > 0:
            raise ValueError(f"rate must be positive, got {self.rate}")
        object.__setattr__(self, "rate", float(self.rate))
        logger.debug("DiscreteSampler created at %.6g Hz", self.rate)

    # duration -> index

    def _backward_scalar(self, value) -> int:
        if not is_duration(value):
            raise UnsupportedConversionError(self, value, "backward")
        return floor_int(ms_to_index(self.rate, duration_to_ms(value)))

    def _backward_interval(self, value: Interval) -> range:
        lo, hi = value.endpoints()
        return inclusive_range(self._backward_scalar(lo), self._backward_scalar(hi))

    def _backward_range(self, value):
        if not isinstance(value, TimeRange):
            raise UnsupportedConversionError(self, value, "backward")
        # floor does not preserve the step, so enumerate
        return [self._backward_scalar(item) for item in value]

    # index -> duration

    def _forward_scalar(self, value) -> timedelta:
        if not is_real(value):
            raise UnsupportedConversionError(self, value, "forward")
        return ms_to_duration(floor_int(index_to_ms(self.rate, value)))

    def _forward_range(self, value):
        if not isinstance(value, range):
            raise UnsupportedConversionError(self, value, "forward")
        first, last = range_bounds(value)
        if is_unit_range(value):
            return Interval(self._forward_scalar(first), self._forward_scalar(last))
        step = ms_to_duration(value.step * 1000 / self.rate)
        return TimeRange(self._forward_scalar(first), step, self._forward_scalar(last))


__all__ = ["DiscreteSampler", "index_to_ms", "ms_to_index"]
