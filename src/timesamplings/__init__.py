"""Bidirectional conversions between timestamps, durations and sample indices."""

from .types import Interval, TimeRange
from .core import (
    Alignment,
    DiscreteSampler,
    DownSampler,
    EventSampler,
    OrdinalOutOfRangeError,
    Sampler,
    SamplingChain,
    SamplingError,
    ShiftSampler,
    SubMillisecondPrecisionError,
    TimeSampler,
    UnsupportedConversionError,
    make_sampler,
    sampler_from_settings,
    translate_index,
    translate_periods,
)

__all__ = [
    "Interval",
    "TimeRange",
    "Sampler",
    "TimeSampler",
    "DiscreteSampler",
    "Alignment",
    "DownSampler",
    "ShiftSampler",
    "EventSampler",
    "SamplingChain",
    "SamplingError",
    "UnsupportedConversionError",
    "SubMillisecondPrecisionError",
    "OrdinalOutOfRangeError",
    "make_sampler",
    "sampler_from_settings",
    "translate_index",
    "translate_periods",
]
