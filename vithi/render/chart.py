
from dataclasses import dataclass

import numpy as np

@dataclass
class ChartRect:
    left: float
    bottom: float
    width: float
    height: float

def to_screen_points(seq, values, rect: ChartRect, y_domain=(-2.0, 2.0)) -> np.ndarray:
    """Map sample (sequence_index, value) pairs to pixel coordinates, shape (N, 2)."""
    seq = np.asarray(seq, dtype=np.float64)
    values = np.asarray(values, dtype=np.float64)
    if seq.size == 0:
        return np.zeros((0, 2), dtype=np.float64)
    span = seq[-1] - seq[0]
    if span > 0:
        xs = rect.left + (seq - seq[0]) / span * rect.width
    else:
        xs = np.full(seq.shape, float(rect.left))
    lo, hi = y_domain
    t = (np.clip(values, lo, hi) - lo) / (hi - lo + 1e-9)
    ys = rect.bottom + t * rect.height
    return np.column_stack([xs, ys])

def episode_segments(points: np.ndarray, members) -> list[np.ndarray]:
    """Runs of >= 2 consecutive episode samples, for the highlight line."""
    members = np.asarray(members, dtype=bool)
    runs = []
    start = None
    for i, m in enumerate(members):
        if m and start is None:
            start = i
        elif not m and start is not None:
            if i - start >= 2:
                runs.append(points[start:i])
            start = None
    if start is not None and len(members) - start >= 2:
        runs.append(points[start:])
    return runs

def grid_lines(rect: ChartRect, y_domain=(-2.0, 2.0), y_step=1.0, x_divisions=10):
    """Return (horizontal_ys, vertical_xs) in pixels."""
    lo, hi = y_domain
    levels = np.arange(lo, hi + y_step / 2, y_step)
    ys = rect.bottom + (levels - lo) / (hi - lo) * rect.height
    xs = rect.left + np.linspace(0.0, 1.0, x_divisions + 1) * rect.width
    return ys, xs

def hex_to_rgb(color: str) -> tuple[int, int, int]:
    c = color.lstrip("#")
    return int(c[0:2], 16), int(c[2:4], 16), int(c[4:6], 16)
