"""Decimated indices over a dense index space."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from ..types import inclusive_range, range_bounds
from .base import Sampler, floor_int, is_real
from .errors import UnsupportedConversionError
from .shapes import is_unit_range

logger = logging.getLogger(__name__)


class Alignment(Enum):
    """Point of a decimation window a decimated sample is reported at."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: "Alignment | str") -> "Alignment":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown alignment: {value!r}") from None


def alignment_offset(factor: float, alignment: Alignment) -> float:
    if alignment is Alignment.LEFT:
        return 0.0
    if alignment is Alignment.CENTER:
        return factor / 2
    return factor - 1


@dataclass(frozen=True)
class DownSampler(Sampler):
    """Convert between decimated indices and dense indices.

    Decimated sample ``k`` covers the dense window
    ``[(k - 1) * factor + 1, k * factor]``.  ``alignment`` only changes which
    dense index ``forward`` reports for a window; ``backward`` always
    classifies by window boundaries starting at dense index 1.

    ``forward`` on a stepped range converts the two bounds and keeps the
    step, so interior elements may differ from elementwise conversion when
    ``step > 1``.  ``backward`` of an empty dense range is an empty
    decimated range starting at the window of its start.
    """

    factor: float
    alignment: Alignment = Alignment.LEFT
    offset: float = field(init=False)

    def __post_init__(self) -> None:
        if not self.factor >= 1:
            raise ValueError(f"decimation factor must be >= 1, got {self.factor}")
        alignment = Alignment.parse(self.alignment)
        object.__setattr__(self, "factor", float(self.factor))
        object.__setattr__(self, "alignment", alignment)
        object.__setattr__(self, "offset", alignment_offset(self.factor, alignment))
        logger.debug(
            "DownSampler created: factor=%.6g alignment=%s offset=%.6g",
            self.factor,
            alignment.value,
            self.offset,
        )

    # dense -> decimated

    def _backward_scalar(self, value) -> int:
        if not is_real(value):
            raise UnsupportedConversionError(self, value, "backward")
        return floor_int((value - 1) / self.factor) + 1

    def _backward_range(self, value):
        if not isinstance(value, range):
            raise UnsupportedConversionError(self, value, "backward")
        if not is_unit_range(value):
            return [self._backward_scalar(item) for item in value]
        first, last = range_bounds(value)
        if not value:
            start = self._backward_scalar(first)
            return range(start, start)
        return inclusive_range(self._backward_scalar(first), self._backward_scalar(last))

    # decimated -> dense

    def _forward_scalar(self, value) -> int:
        if not is_real(value):
            raise UnsupportedConversionError(self, value, "forward")
        return floor_int((value - 1) * self.factor + 1 + self.offset)

    def _forward_range(self, value):
        if not isinstance(value, range):
            raise UnsupportedConversionError(self, value, "forward")
        first, last = range_bounds(value)
        return inclusive_range(self._forward_scalar(first), self._forward_scalar(last), value.step)


__all__ = ["Alignment", "DownSampler", "alignment_offset"]
