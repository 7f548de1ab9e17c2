"""Samplers and their composition."""

from .errors import (
    SamplingError,
    UnsupportedConversionError,
    SubMillisecondPrecisionError,
    OrdinalOutOfRangeError,
)
from .shapes import Shape, shape_of
from .base import Sampler
from .time import TimeSampler
from .discrete import DiscreteSampler
from .downsample import Alignment, DownSampler
from .shift import ShiftSampler
from .events import EventSampler
from .chain import SamplingChain
from .factory import make_sampler, sampler_from_settings, translate_index, translate_periods

__all__ = [
    "SamplingError",
    "UnsupportedConversionError",
    "SubMillisecondPrecisionError",
    "OrdinalOutOfRangeError",
    "Shape",
    "shape_of",
    "Sampler",
    "TimeSampler",
    "DiscreteSampler",
    "Alignment",
    "DownSampler",
    "ShiftSampler",
    "EventSampler",
    "SamplingChain",
    "make_sampler",
    "sampler_from_settings",
    "translate_index",
    "translate_periods",
]
