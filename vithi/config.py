
import math

from pydantic import BaseModel, field_validator

class SimConfig(BaseModel):
    max_points: int = 100
    episode_duration: int = 3
    emit_threshold: float = 0.05   # simulated seconds between emits
    max_delta: float = 5.0         # clamp for host gaps (s)
    fast_speed: float = 1000.0     # above this, several points per emit
    background_amplitude: float = 0.02
    episode_intensity: float = 1.0
    min_speed: float = 0.1
    initial_control: float = 1.0   # 1x
    verbose: bool = False

    @field_validator("max_points", "episode_duration")
    @classmethod
    def _positive_int(cls, v):
        if v <= 0:
            raise ValueError("must be > 0")
        return v

    @field_validator("initial_control")
    @classmethod
    def _finite(cls, v):
        if not math.isfinite(v):
            raise ValueError("must be finite")
        return v

    @field_validator("emit_threshold", "max_delta", "fast_speed", "min_speed")
    @classmethod
    def _positive_float(cls, v):
        if not v > 0:
            raise ValueError("must be > 0")
        return v

class ControlConfig(BaseModel):
    control_min: float = 0.0
    control_max: float = 7.0
    control_step: float = 0.5
    marks: list[tuple[float, str]] = [
        (0, "0.1×"), (1, "1×"), (3, "100×"), (5, "10K×"), (7, "1M×"),
    ]

class RenderConfig(BaseModel):
    width: int = 960
    height: int = 600
    title: str = "Abhidhamma Consciousness Visualization"
    y_domain: tuple[float, float] = (-2.0, 2.0)
    background: str = "#111318"
    grid_color: str = "#2c2f36"
    bhavanga_color: str = "#9e9e9e"  # background samples
    vithi_color: str = "#f44336"     # episode samples
    line_width: float = 2.0
    margin_px: tuple[int, int, int, int] = (60, 30, 140, 50)  # left, right, bottom, top

class Config(BaseModel):
    sim: SimConfig = SimConfig()
    control: ControlConfig = ControlConfig()
    render: RenderConfig = RenderConfig()

cfg = Config()
