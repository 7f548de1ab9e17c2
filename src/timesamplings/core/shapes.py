"""Input shape classification shared by every sampler."""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np

from ..types import Interval, TimeRange


class Shape(Enum):
    SCALAR = "scalar"
    VECTOR = "vector"
    INTERVAL = "interval"
    RANGE = "range"


def shape_of(value: Any) -> Shape:
    """Classify ``value``.

    Vectors are checked first so a list of intervals is still a vector.  A
    builtin ``range`` is a range, never a vector.
    """

    if isinstance(value, (list, tuple)):
        return Shape.VECTOR
    if isinstance(value, np.ndarray) and value.ndim > 0:
        return Shape.VECTOR
    if isinstance(value, Interval):
        return Shape.INTERVAL
    if isinstance(value, (range, TimeRange)):
        return Shape.RANGE
    return Shape.SCALAR


def is_unit_range(value: Any) -> bool:
    return isinstance(value, range) and value.step == 1


__all__ = ["Shape", "shape_of", "is_unit_range"]
