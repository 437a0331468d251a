import numpy as np
import pytest

from nbstats.buffers import GrowableArray
from nbstats.errors import AllocationError


def test_capacity_doubles_when_full():
    buf = GrowableArray(np.float64, capacity=4)
    for i in range(4):
        buf.append(i + 1)
    assert buf.capacity == 4
    buf.append(5)
    assert buf.capacity == 8
    assert list(buf.view()) == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_zero_is_a_regular_element():
    buf = GrowableArray(np.float64)
    buf.append(0.0)
    buf.append(3.0)
    assert len(buf) == 2
    assert list(buf.freeze()) == [0.0, 3.0]


def test_view_is_read_only_and_freeze_is_a_copy():
    buf = GrowableArray(np.float64)
    buf.append(1.0)
    with pytest.raises(ValueError):
        buf.view()[0] = 2.0
    frozen = buf.freeze()
    buf.clear()
    buf.append(9.0)
    assert frozen[0] == 1.0
    assert not frozen.flags.writeable


def test_clear_keeps_capacity():
    buf = GrowableArray(np.uint8, capacity=2)
    for ch in b"12.5":
        buf.append(ch)
    assert buf.to_text() == "12.5"
    buf.clear()
    assert len(buf) == 0
    assert buf.capacity == 4


def test_growth_failure_raises_allocation_error(monkeypatch):
    buf = GrowableArray(np.float64, capacity=1)
    buf.append(1.0)

    def boom(*args, **kwargs):
        raise MemoryError("no memory")

    monkeypatch.setattr(np, "empty", boom)
    with pytest.raises(AllocationError):
        buf.append(2.0)
    # existing contents survive a failed growth
    assert len(buf) == 1


def test_invalid_capacity():
    with pytest.raises(ValueError):
        GrowableArray(np.float64, capacity=0)
