"""Convenience constructors and coordinate-system translation helpers."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, List, Sequence

from .base import Sampler, is_real
from .chain import SamplingChain
from .discrete import DiscreteSampler
from .downsample import DownSampler
from .events import EventSampler
from .shift import ShiftSampler
from .time import TimeSampler

if TYPE_CHECKING:
    from ..config import CoordinateSettings

logger = logging.getLogger(__name__)


def _kind(arg: Any) -> str:
    if isinstance(arg, datetime):
        return "epoch"
    if is_real(arg):
        return "rate"
    if isinstance(arg, (list, tuple)):
        return "events"
    return type(arg).__name__


def make_sampler(*args: Any) -> Sampler:
    """Build a sampler or chain from an epoch, a rate and/or event positions.

    Accepted argument patterns::

        make_sampler(epoch)                  -> TimeSampler
        make_sampler(rate)                   -> DiscreteSampler
        make_sampler(positions)              -> EventSampler
        make_sampler(epoch, rate)            -> TimeSampler -> DiscreteSampler
        make_sampler(rate, positions)        -> DiscreteSampler -> EventSampler
        make_sampler(epoch, rate, positions) -> all three chained
    """

    kinds = tuple(_kind(arg) for arg in args)
    if kinds == ("epoch",):
        return TimeSampler(args[0])
    if kinds == ("rate",):
        return DiscreteSampler(args[0])
    if kinds == ("events",):
        return EventSampler(args[0])
    if kinds == ("epoch", "rate"):
        return SamplingChain(TimeSampler(args[0]), DiscreteSampler(args[1]))
    if kinds == ("rate", "events"):
        return SamplingChain(DiscreteSampler(args[0]), EventSampler(args[1]))
    if kinds == ("epoch", "rate", "events"):
        return SamplingChain(TimeSampler(args[0]), DiscreteSampler(args[1]), EventSampler(args[2]))
    raise TypeError(f"no sampler for arguments ({', '.join(kinds)})")


def sampler_from_settings(settings: "CoordinateSettings") -> Sampler:
    """Build the sampler described by a coordinate-system settings section.

    Stages are added in the order epoch, rate, decimation factor, shift for
    whichever of them are set.
    """

    stages: List[Sampler] = []
    if settings.epoch is not None:
        stages.append(TimeSampler(settings.epoch))
    if settings.rate is not None:
        stages.append(DiscreteSampler(settings.rate))
    if settings.factor is not None:
        stages.append(DownSampler(settings.factor, settings.alignment))
    if settings.shift is not None:
        stages.append(ShiftSampler(settings.shift))
    if not stages:
        raise ValueError("coordinate settings describe no sampler")
    if len(stages) == 1:
        return stages[0]
    return SamplingChain(*stages)


def _translate(values: Sequence[Any], src: Sampler, dst: Sampler) -> List[Any]:
    logger.debug("translating %d values from %r to %r", len(values), src, dst)
    return [dst.backward(src.forward(value)) for value in values]


def translate_index(indices: Sequence[int], *systems: Any) -> List[int]:
    """Translate sample indices between two discrete coordinate systems.

    ``systems`` is either ``(epoch_src, rate_src, epoch_dst, rate_dst)`` or
    ``(rate_src, rate_dst)``.  Each index is taken forward to the shared time
    space of the source and back into the destination.
    """

    if len(systems) == 4:
        epoch_src, rate_src, epoch_dst, rate_dst = systems
        src = make_sampler(epoch_src, float(rate_src))
        dst = make_sampler(epoch_dst, float(rate_dst))
    elif len(systems) == 2:
        rate_src, rate_dst = systems
        src = make_sampler(float(rate_src))
        dst = make_sampler(float(rate_dst))
    else:
        raise TypeError(
            "translate_index expects (epoch_src, rate_src, epoch_dst, rate_dst) or (rate_src, rate_dst)"
        )
    return _translate(indices, src, dst)


def translate_periods(periods: Sequence[Any], epoch_src: datetime, epoch_dst: datetime) -> List[Any]:
    """Translate durations relative to ``epoch_src`` into durations relative to ``epoch_dst``."""

    return _translate(periods, TimeSampler(epoch_src), TimeSampler(epoch_dst))


__all__ = ["make_sampler", "sampler_from_settings", "translate_index", "translate_periods"]
