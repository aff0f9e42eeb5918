import dataclasses

import numpy as np
import pytest

from vithi.sim.ringbuffer import MAX_POINTS, RingBuffer, Sample


def test_partial_fill_keeps_everything():
    rb = RingBuffer()
    for k in range(5):
        rb.push(k * 0.1, k % 2 == 0)
    snap = rb.snapshot()
    assert len(rb) == 5
    assert [s.sequence_index for s in snap] == [0, 1, 2, 3, 4]
    assert [s.episode_member for s in snap] == [True, False, True, False, True]


@pytest.mark.parametrize("k", [100, 101, 137, 250])
def test_eviction_keeps_last_max_points_in_order(k):
    rb = RingBuffer()
    for i in range(k):
        rb.push(float(i), False)
    snap = rb.snapshot()
    assert len(snap) == MAX_POINTS
    assert [s.value for s in snap] == [float(i) for i in range(k - MAX_POINTS, k)]
    seq = np.array([s.sequence_index for s in snap])
    assert np.all(np.diff(seq) == 1)
    assert seq[-1] == k - 1


def test_push_returns_the_stored_sample():
    rb = RingBuffer(size=3)
    assert rb.push(0.5, True) == Sample(0, 0.5, True)
    assert rb.push(0.25, False) == Sample(1, 0.25, False)


def test_window_returns_newest():
    rb = RingBuffer(size=4)
    for i in range(6):
        rb.push(float(i), False)
    assert [s.sequence_index for s in rb.window(2)] == [4, 5]
    assert len(rb.window(10)) == 4
    assert rb.window(0) == ()


def test_snapshot_is_immutable():
    rb = RingBuffer(size=2)
    rb.push(0.01, False)
    snap = rb.snapshot()
    assert isinstance(snap, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap[0].value = 1.0


def test_arrays_are_read_only_copies():
    rb = RingBuffer(size=3)
    for i in range(4):
        rb.push(float(i), i == 3)
    seq, values, members = rb.arrays()
    assert seq.tolist() == [1, 2, 3]
    assert values.tolist() == [1.0, 2.0, 3.0]
    assert members.tolist() == [False, False, True]
    with pytest.raises(ValueError):
        values[0] = 99.0
    rb.push(4.0, False)
    assert values.tolist() == [1.0, 2.0, 3.0]
