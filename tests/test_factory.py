from datetime import datetime, timedelta

import pytest

from timesamplings import (
    Alignment,
    DiscreteSampler,
    DownSampler,
    EventSampler,
    SamplingChain,
    TimeSampler,
    make_sampler,
    sampler_from_settings,
    translate_index,
    translate_periods,
)
from timesamplings.config import CoordinateSettings

TSTART1 = datetime(2021, 2, 13, 23, 34, 42)
TSTART2 = TSTART1 + timedelta(hours=1)


def test_make_sampler_kinds():
    assert isinstance(make_sampler(TSTART1), TimeSampler)
    assert isinstance(make_sampler(250.0), DiscreteSampler)
    assert isinstance(make_sampler([1, 2]), EventSampler)

    chain = make_sampler(TSTART1, 250.0)
    assert [type(s) for s in chain.stages] == [TimeSampler, DiscreteSampler]
    chain = make_sampler(250, [1, 5])
    assert [type(s) for s in chain.stages] == [DiscreteSampler, EventSampler]
    chain = make_sampler(TSTART1, 250.0, [1, 5])
    assert len(chain) == 3
    with pytest.raises(TypeError):
        make_sampler("x")
    with pytest.raises(TypeError):
        make_sampler([1], 250.0)


def test_periods_between_epochs():
    ts1 = make_sampler(TSTART1)
    ts2 = make_sampler(TSTART2)
    period2 = timedelta(minutes=1)
    t = ts2.forward(period2)
    assert ts1.backward(t) == timedelta(hours=1) + period2
    assert translate_periods([period2], TSTART2, TSTART1) == [timedelta(hours=1) + period2]


def test_index_between_epochs():
    fs1 = fs2 = 1000.0
    samp1 = make_sampler(TSTART1, fs1)
    samp2 = make_sampler(TSTART2, fs2)
    point2 = 1
    t = samp2.forward(point2)
    assert samp1.backward(t) == point2 + 3600 * fs2
    assert translate_index([point2], TSTART2, fs2, TSTART1, fs1) == [point2 + 3600 * fs2]


def test_index_between_rates():
    assert translate_index([1, 2, 3], 1000, 500) == [1, 1, 2]
    with pytest.raises(TypeError):
        translate_index([1], 1000)


def test_sampler_from_settings():
    section = CoordinateSettings(epoch=TSTART1, rate=250, factor=2500, alignment="center")
    sampler = sampler_from_settings(section)
    assert isinstance(sampler, SamplingChain)
    assert [type(s) for s in sampler.stages] == [TimeSampler, DiscreteSampler, DownSampler]
    assert sampler.self_stage.alignment is Alignment.CENTER
    assert sampler.forward(1) == TSTART1 + timedelta(seconds=5)

    assert isinstance(sampler_from_settings(CoordinateSettings(rate=250)), DiscreteSampler)
    with pytest.raises(ValueError):
        sampler_from_settings(CoordinateSettings())
