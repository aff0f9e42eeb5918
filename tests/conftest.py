import itertools

import pytest


class FixedRandom:
    """Deterministic stand-in for the background noise source."""
    def __init__(self, values):
        self._it = itertools.cycle(values)

    def random(self):
        return next(self._it)


class Clock:
    """Host timestamps in ms, advanced by a fixed frame interval."""
    def __init__(self, start=0.0, frame_ms=100.0):
        self.t = start
        self.frame_ms = frame_ms

    def __call__(self, ms=None):
        self.t += self.frame_ms if ms is None else ms
        return self.t


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def clock():
    return Clock()
