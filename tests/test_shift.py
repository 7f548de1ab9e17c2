import pytest

from timesamplings import Interval, ShiftSampler, UnsupportedConversionError

SHIFT = 15


def test_scalar():
    s = ShiftSampler(SHIFT)
    assert s.forward(1) == 1 + SHIFT
    assert s.backward(1 + SHIFT) == 1


def test_vector():
    s = ShiftSampler(SHIFT)
    assert s.forward([1, 2]) == [1 + SHIFT, 2 + SHIFT]
    assert s.backward([1 + SHIFT, 2 + SHIFT]) == [1, 2]


def test_range():
    s = ShiftSampler(SHIFT)
    assert s.forward(range(1, 3)) == range(1 + SHIFT, 3 + SHIFT)
    assert s.backward(range(1 + SHIFT, 3 + SHIFT)) == range(1, 3)
    out = s.forward(range(1, 10, 3))
    assert (out[0], out[-1], out.step) == (16, 22, 3)


def test_fractional_shift_truncates():
    s = ShiftSampler(0.5)
    assert s.forward(1) == 1
    assert s.backward(1) == 0
    # truncation in both directions: not an exact inverse
    assert s.backward(s.forward(1)) == 0
    assert ShiftSampler(-0.5).forward(1) == 0


def test_interval_unsupported():
    s = ShiftSampler(SHIFT)
    with pytest.raises(UnsupportedConversionError):
        s.forward(Interval(1, 2))
    with pytest.raises(UnsupportedConversionError):
        s.backward(Interval(1, 2))
