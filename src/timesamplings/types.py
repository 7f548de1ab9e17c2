"""Common value carriers for timesamplings.

Samplers only look at the *shape* of the values they convert.  Scalars and
vectors use plain Python objects; this module adds the two compound shapes
that have no suitable builtin: a closed :class:`Interval` and an inclusive
:class:`TimeRange` for timestamps and durations.  Integer index ranges use
the builtin :class:`range`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Interval(Generic[T]):
    """Closed interval ``[lo, hi]`` over any ordered type."""

    lo: T
    hi: T

    def endpoints(self) -> tuple[T, T]:
        return self.lo, self.hi

    def __contains__(self, value: Any) -> bool:
        return self.lo <= value <= self.hi

    @property
    def width(self) -> Any:
        """Return ``hi - lo``."""

        return self.hi - self.lo


@dataclass(frozen=True)
class TimeRange(Generic[T]):
    """Inclusive stepped range of timestamps or durations.

    ``last`` is the final element actually produced, mirroring an integer
    ``range(first, last + 1, step)``.
    """

    first: T
    step: Any
    last: T

    def __post_init__(self) -> None:
        if not self.step:
            raise ValueError("step must be non-zero")

    @classmethod
    def from_bounds(cls, start: T, step: Any, end: T) -> "TimeRange[T]":
        """Build a range whose ``last`` is the final step not past ``end``."""

        count = (end - start) // step
        if count < 0:
            return cls(start, step, start - step)
        return cls(start, step, start + count * step)

    def endpoints(self) -> tuple[T, T]:
        return self.first, self.last

    def __len__(self) -> int:
        count = (self.last - self.first) // self.step + 1
        return max(int(count), 0)

    def __iter__(self) -> Iterator[T]:
        value = self.first
        for _ in range(len(self)):
            yield value
            value = value + self.step


def range_bounds(r: range) -> tuple[int, int]:
    """Return the first and last element of ``r``.

    For an empty range the last element is reported as ``first - step`` so
    that ``last < first`` marks emptiness for ascending ranges.
    """

    if len(r):
        return r[0], r[-1]
    return r.start, r.start - r.step


def inclusive_range(first: int, last: int, step: int = 1) -> range:
    """Return ``range`` covering ``first`` through ``last`` inclusive."""

    return range(first, last + (1 if step > 0 else -1), step)


__all__ = ["Interval", "TimeRange", "range_bounds", "inclusive_range"]
