"""Absolute timestamps relative to a fixed epoch."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from ..types import Interval, TimeRange
from ..utils.timeparse import duration_to_ms, is_duration, ms_to_duration
from .base import Sampler
from .errors import UnsupportedConversionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeSampler(Sampler):
    """Convert between :class:`datetime` values and durations since ``epoch``.

    ``backward`` subtracts the epoch and ``forward`` adds it back.  Durations
    are reduced to whole milliseconds on the way, so both directions fail
    with :class:`SubMillisecondPrecisionError` rather than truncating.
    """

    epoch: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.epoch, datetime):
            raise TypeError(f"epoch must be a datetime, got {type(self.epoch).__name__}")
        logger.debug("TimeSampler created with epoch %s", self.epoch.isoformat())

    # datetime -> duration

    def _backward_scalar(self, value):
        if not isinstance(value, datetime):
            raise UnsupportedConversionError(self, value, "backward")
        return ms_to_duration(duration_to_ms(value - self.epoch))

    def _backward_interval(self, value: Interval) -> Interval:
        lo, hi = value.endpoints()
        return Interval(self._backward_scalar(lo), self._backward_scalar(hi))

    def _backward_range(self, value):
        if not isinstance(value, TimeRange):
            raise UnsupportedConversionError(self, value, "backward")
        first, last = value.endpoints()
        return TimeRange(self._backward_scalar(first), value.step, self._backward_scalar(last))

    # duration -> datetime

    def _forward_scalar(self, value):
        if not is_duration(value):
            raise UnsupportedConversionError(self, value, "forward")
        return self.epoch + timedelta(milliseconds=duration_to_ms(value))

    def _forward_interval(self, value: Interval) -> Interval:
        lo, hi = value.endpoints()
        return Interval(self._forward_scalar(lo), self._forward_scalar(hi))

    def _forward_range(self, value):
        if not isinstance(value, TimeRange):
            raise UnsupportedConversionError(self, value, "forward")
        first, last = value.endpoints()
        step = ms_to_duration(duration_to_ms(value.step))
        return TimeRange(self._forward_scalar(first), step, self._forward_scalar(last))


__all__ = ["TimeSampler"]
