
import math

import numpy as np

from .episode import EPISODE_DURATION, Phase, Rule

def episode_value(step: int, duration: int = EPISODE_DURATION, intensity: float = 1.0) -> float:
    # 0, |sin(2pi/3)|, |sin(4pi/3)| for the default 3 steps
    if step >= duration:
        return 0.0
    return abs(math.sin(step * (math.pi / 1.5))) * intensity

class SampleGenerator:
    """
    Produces (value, episode_member) for one sample.

    `rng` is anything with a .random() -> [0, 1) method
    (numpy Generator, random.Random, or a test stub).
    """
    def __init__(self, rng=None, amplitude: float = 0.02, intensity: float = 1.0,
                 duration: int = EPISODE_DURATION):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.amplitude = amplitude
        self.intensity = intensity
        self.duration = duration

    def background(self) -> tuple[float, bool]:
        return float(self.rng.random()) * self.amplitude, False

    def episode(self, step: int) -> tuple[float, bool]:
        return episode_value(step, self.duration, self.intensity), True

    def generate(self, rule: Rule) -> tuple[float, bool]:
        if rule.phase is Phase.EPISODE:
            return self.episode(rule.step)
        return self.background()
