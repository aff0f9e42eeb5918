
import math
import sys

from ..config import SimConfig

MIN_SPEED = SimConfig.model_fields["min_speed"].default

def to_speed(control_value: float) -> float:
    """Slider position -> speed factor. 0 -> 0.1x, 1 -> 1x, 7 -> 1Mx."""
    try:
        return 10.0 ** (control_value - 1)
    except OverflowError:
        return sys.float_info.max

def to_control_value(speed: float, min_speed: float = MIN_SPEED) -> float:
    # log10 is undefined for <= 0; clamp to the slider floor
    if not math.isfinite(speed) or speed <= 0:
        speed = min_speed
    return math.log10(speed) + 1

def snap_control(value: float, lo: float = 0.0, hi: float = 7.0, step: float = 0.5) -> float:
    value = lo if value < lo else hi if value > hi else value
    if step > 0:
        value = lo + round((value - lo) / step) * step
    return min(value, hi)

def format_speed(speed: float) -> str:
    if speed >= 1_000_000:
        return f"{speed / 1_000_000:.0f}M×"
    if speed >= 1000:
        return f"{speed / 1000:.0f}K×"
    if speed >= 10:
        return f"{speed:.0f}×"
    return f"{speed:.1f}×"
