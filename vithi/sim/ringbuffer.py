
from dataclasses import dataclass

import numpy as np

from ..config import SimConfig

MAX_POINTS = SimConfig.model_fields["max_points"].default

@dataclass(frozen=True)
class Sample:
    sequence_index: int
    value: float
    episode_member: bool

class RingBuffer:
    """Fixed-capacity sample history; the oldest sample is overwritten once full."""
    def __init__(self, size: int = MAX_POINTS):
        self.size = size
        self.seq = np.zeros(size, dtype=np.int64)
        self.values = np.zeros(size, dtype=np.float64)
        self.members = np.zeros(size, dtype=bool)
        self.index = 0  # total pushes == next sequence index
        self.full = False

    def __len__(self):
        return self.size if self.full else self.index

    def push(self, value: float, episode_member: bool) -> Sample:
        i = self.index % self.size
        self.seq[i] = self.index
        self.values[i] = value
        self.members[i] = episode_member
        sample = Sample(self.index, float(value), bool(episode_member))
        self.index += 1
        if self.index >= self.size:
            self.full = True
        return sample

    def _order(self, n=None):
        count = len(self)
        n = count if n is None else max(0, min(n, count))
        if not self.full:
            return np.arange(count - n, count)
        i = self.index % self.size
        return (np.arange(self.size - n, self.size) + i) % self.size

    def arrays(self, n=None):
        """(sequence_index, value, episode_member) arrays, oldest first, read-only."""
        idx = self._order(n)
        out = (self.seq[idx], self.values[idx], self.members[idx])
        for a in out:
            a.flags.writeable = False
        return out

    def window(self, n) -> tuple[Sample, ...]:
        seq, values, members = self.arrays(n)
        return tuple(Sample(int(s), float(v), bool(m)) for s, v, m in zip(seq, values, members))

    def snapshot(self) -> tuple[Sample, ...]:
        return self.window(len(self))
