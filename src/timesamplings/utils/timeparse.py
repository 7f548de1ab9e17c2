"""Utilities for parsing time expressions and millisecond arithmetic."""

from __future__ import annotations

from datetime import timedelta
from typing import Union

import numpy as np

from ..core.errors import SubMillisecondPrecisionError

Duration = Union[timedelta, np.timedelta64]

_MS = timedelta(milliseconds=1)


def is_duration(value: object) -> bool:
    return isinstance(value, (timedelta, np.timedelta64))


def duration_to_ms(value: Duration) -> int:
    """Reduce ``value`` to an integer count of milliseconds.

    ``SubMillisecondPrecisionError`` is raised when a remainder below one
    millisecond would be lost; ``TypeError`` for non-duration input.
    """

    if isinstance(value, np.timedelta64):
        if np.isnat(value):
            raise ValueError("NaT has no millisecond value")
        ns = int(value.astype("timedelta64[ns]").astype(np.int64))
        ms, rest = divmod(ns, 1_000_000)
        if rest:
            raise SubMillisecondPrecisionError(value)
        return ms
    if not isinstance(value, timedelta):
        raise TypeError(f"expected a duration, got {type(value).__name__}")
    ms, rest = divmod(value, _MS)
    if rest:
        raise SubMillisecondPrecisionError(value)
    return ms


def ms_to_duration(ms: Union[int, float]) -> timedelta:
    """Return a :class:`timedelta` of ``ms`` whole milliseconds."""

    if isinstance(ms, float):
        if not ms.is_integer():
            raise SubMillisecondPrecisionError(ms)
        ms = int(ms)
    return timedelta(milliseconds=ms)


def parse_time(text: str) -> float:
    """Parse ``text`` as a time value in seconds.

    Accepted formats are:

    * ``HH:MM:SS``
    * ``MM:SS``
    * ``SS``

    Fractional seconds are supported.  ``ValueError`` is raised on
    malformed input.
    """

    parts = text.strip().split(":")
    if not parts:
        raise ValueError("empty time string")

    try:
        parts_f = [float(p) for p in parts]
    except ValueError as exc:
        raise ValueError(f"invalid time value: {text!r}") from exc

    if len(parts_f) == 1:
        seconds = parts_f[0]
    elif len(parts_f) == 2:
        minutes, seconds = parts_f
        seconds += minutes * 60
    elif len(parts_f) == 3:
        hours, minutes, seconds = parts_f
        seconds += minutes * 60 + hours * 3600
    else:
        raise ValueError("too many components in time string")
    return seconds


def parse_duration(text: str) -> timedelta:
    """Parse ``text`` with :func:`parse_time` into a whole-millisecond duration."""

    ms = round(parse_time(text) * 1000, 6)
    return ms_to_duration(ms)


__all__ = [
    "Duration",
    "is_duration",
    "duration_to_ms",
    "ms_to_duration",
    "parse_time",
    "parse_duration",
]
