
import math

from .config import SimConfig
from .sim.episode import EpisodeStateMachine
from .sim.generator import SampleGenerator
from .sim.integrator import TimeIntegrator
from .sim.ringbuffer import RingBuffer, Sample
from .sim.speed import format_speed, to_control_value, to_speed

class Engine:
    """
    Owns the simulation state and sequences one host tick:
    integrator -> state machine -> generator -> ring buffer.

    The host calls tick(timestamp_ms) on whatever cadence it has; controls
    call trigger_episode / set_speed / pause / resume between ticks.
    Not thread-safe: drive it from one loop.
    """
    def __init__(self, config: SimConfig | None = None, rng=None):
        self.cfg = config if config is not None else SimConfig()
        c = self.cfg
        self.integrator = TimeIntegrator(c.emit_threshold, c.max_delta, c.fast_speed)
        self.episodes = EpisodeStateMachine(c.episode_duration)
        self.generator = SampleGenerator(rng, amplitude=c.background_amplitude,
                                         intensity=c.episode_intensity,
                                         duration=c.episode_duration)
        self.buffer = RingBuffer(c.max_points)
        self._speed = self._map_speed(c.initial_control)
        self._running = True

    def _map_speed(self, control_value: float) -> float:
        if not math.isfinite(control_value):
            raise ValueError(f"control value must be finite, got {control_value!r}")
        speed = to_speed(control_value)
        # very negative controls underflow to 0.0
        return speed if speed > 0 else self.cfg.min_speed

    def _log(self, msg):
        if self.cfg.verbose:
            print(f"[Engine] {msg}")

    # ---------- state ----------
    @property
    def speed(self) -> float:
        return self._speed

    @property
    def control_value(self) -> float:
        return to_control_value(self._speed, self.cfg.min_speed)

    @property
    def speed_label(self) -> str:
        return format_speed(self._speed)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def episode_active(self) -> bool:
        return self.episodes.active

    @property
    def sim_time(self) -> float:
        return self.integrator.total

    # ---------- host loop ----------
    def tick(self, host_timestamp: float) -> int:
        """Advance by one host frame. Returns the number of samples appended."""
        if not self._running:
            return 0
        points = self.integrator.tick(host_timestamp, self._speed)
        for _ in range(points):
            rule = self.episodes.advance()
            value, member = self.generator.generate(rule)
            self.buffer.push(value, member)
        return points

    def get_snapshot(self) -> tuple[Sample, ...]:
        return self.buffer.snapshot()

    # ---------- commands ----------
    def trigger_episode(self) -> bool:
        started = self.episodes.trigger()
        if started:
            self._log("episode triggered")
        else:
            self._log("episode already active; trigger ignored")
        return started

    def set_speed(self, control_value: float) -> float:
        self._speed = self._map_speed(control_value)
        self._log(f"speed {self.speed_label} ({self.integrator.points_per_emit(self._speed)} pts/emit)")
        return self._speed

    def pause(self):
        if self._running:
            self._running = False
            self._log("paused")

    def resume(self):
        if not self._running:
            # drop the pre-pause timestamp so the first tick back is a baseline
            self.integrator.rearm()
            self._running = True
            self._log("resumed")

    def toggle_running(self) -> bool:
        if self._running:
            self.pause()
        else:
            self.resume()
        return self._running
