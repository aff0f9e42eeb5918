
from dataclasses import dataclass
from enum import Enum

from ..config import SimConfig

EPISODE_DURATION = SimConfig.model_fields["episode_duration"].default

class Phase(Enum):
    BACKGROUND = "background"
    EPISODE = "episode"

@dataclass(frozen=True)
class Rule:
    """Which generation rule applies to one sample (step only for episodes)."""
    phase: Phase
    step: int = 0

BACKGROUND_RULE = Rule(Phase.BACKGROUND)

class EpisodeStateMachine:
    def __init__(self, duration: int = EPISODE_DURATION):
        self.duration = duration
        self.phase = Phase.BACKGROUND
        self.step_index = 0

    @property
    def active(self) -> bool:
        return self.phase is Phase.EPISODE

    def trigger(self) -> bool:
        if self.active:
            return False
        self.phase = Phase.EPISODE
        self.step_index = 0
        return True

    def advance(self) -> Rule:
        if self.phase is Phase.EPISODE:
            if self.step_index < self.duration:
                rule = Rule(Phase.EPISODE, self.step_index)
                self.step_index += 1
                return rule
            self.phase = Phase.BACKGROUND
            self.step_index = 0
        return BACKGROUND_RULE
