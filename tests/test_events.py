from datetime import datetime, timedelta

import pytest

from timesamplings import EventSampler, Interval, OrdinalOutOfRangeError, UnsupportedConversionError
from timesamplings.types import range_bounds

EVENTS = [123, 321, 555]


def test_scalar():
    se = EventSampler(EVENTS)
    assert se.forward(1) == 123
    assert se.backward(123) == range(1, 2)
    empty = se.backward(200)
    # first event after : last event before
    assert (empty.start, empty.stop) == (2, 2)
    assert range_bounds(empty) == (2, 1)
    assert len(empty) == 0


def test_vector():
    se = EventSampler(EVENTS)
    assert se.forward([1, 2]) == [123, 321]
    before, at = se.backward([100, 123])
    assert range_bounds(before) == (1, 0)
    assert at == range(1, 2)


def test_range():
    se = EventSampler(EVENTS)
    assert se.forward(range(1, 3)) == [123, 321]
    assert range_bounds(se.backward(range(100, 111))) == (1, 0)
    assert se.backward(range(100, 351)) == range(1, 3)


def test_interval_query():
    se = EventSampler(EVENTS)
    assert se.backward(Interval(100, 350)) == range(1, 3)
    assert se.backward(Interval(0, 1000)) == range(1, 4)
    assert range_bounds(se.backward(Interval(600, 700))) == (4, 3)


def test_out_of_range():
    se = EventSampler(EVENTS)
    with pytest.raises(OrdinalOutOfRangeError) as exc:
        se.forward(0)
    assert exc.value.size == 3
    with pytest.raises(IndexError):
        se.forward(4)
    with pytest.raises(OrdinalOutOfRangeError):
        se.forward(range(2, 5))


def test_ordinal_must_be_integral():
    se = EventSampler(EVENTS)
    with pytest.raises(UnsupportedConversionError):
        se.forward(1.5)
    with pytest.raises(UnsupportedConversionError):
        se.forward(Interval(1, 2))


def test_positions_must_be_sorted():
    with pytest.raises(ValueError):
        EventSampler([5, 1])


def test_segments():
    se = EventSampler([range(1, 6), range(51, 56), range(501, 506)])
    assert len(se) == 3
    assert se.forward(2) == range(51, 56)
    assert se.backward(range(5, 52)) == range(1, 3)
    assert se.backward(3) == range(1, 2)
    assert range_bounds(se.backward(10)) == (2, 1)


def test_time_positions():
    ms = lambda v: timedelta(milliseconds=v)  # noqa: E731
    se = EventSampler([ms(0), ms(1000), ms(10000)])
    assert se.backward(Interval(ms(0), ms(5000))) == range(1, 3)
    assert se.forward(3) == ms(10000)


def test_empty_sampler():
    se = EventSampler([])
    assert range_bounds(se.backward(5)) == (1, 0)
    with pytest.raises(OrdinalOutOfRangeError):
        se.forward(1)


def test_monotonic():
    se = EventSampler(EVENTS)
    firsts = [se.backward(q).start for q in range(0, 700, 50)]
    assert firsts == sorted(firsts)


def test_query_of_wrong_kind_is_unsupported():
    se = EventSampler(EVENTS)
    with pytest.raises(UnsupportedConversionError) as exc:
        se.backward(timedelta(seconds=1))
    assert exc.value.sampler == "EventSampler"
    assert exc.value.direction == "backward"
    assert "timedelta" in exc.value.shape
    with pytest.raises(UnsupportedConversionError):
        se.backward(Interval(timedelta(0), timedelta(seconds=1)))

    t0 = datetime(2021, 2, 13, 23, 34, 42)
    timed = EventSampler([t0, t0 + timedelta(seconds=1)])
    with pytest.raises(UnsupportedConversionError) as exc:
        timed.backward(5)
    assert "int" in exc.value.shape
    assert timed.backward(t0) == range(1, 2)
