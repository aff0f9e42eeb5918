
import math

class TimeIntegrator:
    """
    Turns host wall-clock timestamps (ms) into simulated time and decides
    how many samples a tick should emit.

    The first tick after construction or rearm() only records the baseline.
    """
    def __init__(self, emit_threshold: float = 0.05, max_delta: float = 5.0,
                 fast_speed: float = 1000.0):
        self.emit_threshold = emit_threshold
        self.max_delta = max_delta
        self.fast_speed = fast_speed
        self.previous_timestamp: float | None = None
        self.accumulated = 0.0
        self.total = 0.0  # simulated seconds integrated since start

    def points_per_emit(self, speed: float) -> int:
        if speed > self.fast_speed:
            return int(math.ceil(math.log10(speed)))
        return 1

    def rearm(self):
        self.previous_timestamp = None

    def tick(self, t: float, speed: float) -> int:
        points = 0
        if self.previous_timestamp is not None:
            raw = (t - self.previous_timestamp) * speed / 1000.0
            delta = min(max(raw, 0.0), self.max_delta)
            self.accumulated += delta
            self.total += delta
            if self.accumulated > self.emit_threshold:
                self.accumulated = 0.0
                points = self.points_per_emit(speed)
        self.previous_timestamp = t
        return points
