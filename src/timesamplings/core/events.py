"""Sparse event ordinals over sorted positions or segments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

import numpy as np

from ..types import Interval, TimeRange, range_bounds
from .base import Sampler, is_integral, is_real
from .errors import OrdinalOutOfRangeError, UnsupportedConversionError

logger = logging.getLogger(__name__)


def _bounds(position: Any) -> tuple[Any, Any]:
    """Return ``(start, end)`` of a scalar position or segment."""

    if isinstance(position, range):
        return range_bounds(position)
    if isinstance(position, (Interval, TimeRange)):
        return position.endpoints()
    return position, position


def _as_array(values: list) -> np.ndarray:
    if all(is_real(v) for v in values):
        return np.asarray(values)
    return np.asarray(values, dtype=object)


@dataclass(frozen=True)
class EventSampler(Sampler):
    """Convert between event ordinals and stored event positions.

    ``positions`` holds scalars (indices or times) or segments (``range`` or
    :class:`Interval`), sorted by start and not overlapping.  ``forward``
    looks an ordinal up; ``backward`` returns the ordinal ``range`` of events
    touching a query, which is empty when nothing matches.

    Segments are matched on their stored bounds only; their right edges are
    not realigned when the segment came from a coarser sampling.
    """

    positions: Sequence[Any]
    _starts: np.ndarray = field(init=False, repr=False, compare=False)
    _ends: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        positions = tuple(self.positions)
        bounds = [_bounds(p) for p in positions]
        starts = [b[0] for b in bounds]
        ends = [b[1] for b in bounds]
        if any(b < a for a, b in zip(starts, starts[1:])):
            raise ValueError("event positions must be sorted by start")
        object.__setattr__(self, "positions", positions)
        object.__setattr__(self, "_starts", _as_array(starts))
        object.__setattr__(self, "_ends", _as_array(ends))
        logger.debug("EventSampler created with %d events", len(positions))

    def __len__(self) -> int:
        return len(self.positions)

    # ordinal -> position

    def _forward_scalar(self, value):
        if not is_integral(value):
            raise UnsupportedConversionError(self, value, "forward")
        ordinal = int(value)
        if not 1 <= ordinal <= len(self.positions):
            raise OrdinalOutOfRangeError(ordinal, len(self.positions))
        return self.positions[ordinal - 1]

    def _forward_range(self, value):
        if not isinstance(value, range):
            raise UnsupportedConversionError(self, value, "forward")
        return [self._forward_scalar(ordinal) for ordinal in value]

    # position -> ordinal range

    def _search(self, query: Any, lo: Any, hi: Any) -> range:
        if self._starts.dtype != object and not (is_real(lo) and is_real(hi)):
            raise UnsupportedConversionError(self, query, "backward")
        # first event ending at/after lo through last event starting at/before hi
        try:
            first = int(np.searchsorted(self._ends, lo, side="left")) + 1
            last = int(np.searchsorted(self._starts, hi, side="right"))
        except TypeError as exc:
            raise UnsupportedConversionError(self, query, "backward") from exc
        return range(first, max(last, first - 1) + 1)

    def _backward_scalar(self, value) -> range:
        return self._search(value, value, value)

    def _backward_interval(self, value: Interval) -> range:
        return self._search(value, *value.endpoints())

    def _backward_range(self, value) -> range:
        return self._search(value, *_bounds(value))


__all__ = ["EventSampler"]
