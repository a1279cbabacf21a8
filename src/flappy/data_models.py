"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import BIRD_START_Y


class GamePhase(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    OVER = "over"


@dataclass
class Pipe:
    """One obstacle pair sharing a horizontal position and a vertical gap."""
    left: float
    top_height: int
    bottom_height: int

    def to_client_state(self):
        return {
            "left": self.left,
            "top_height": self.top_height,
            "bottom_height": self.bottom_height,
        }


@dataclass
class GameState:
    """The single mutable aggregate owned by the engine."""
    bird_y: float = BIRD_START_Y
    started: bool = False
    over: bool = False
    score: int = 0
    pipes: List[Pipe] = field(default_factory=list)  # leftmost first

    @property
    def phase(self) -> GamePhase:
        if not self.started:
            return GamePhase.IDLE
        if self.over:
            return GamePhase.OVER
        return GamePhase.PLAYING

    def to_render_state(self):
        """Prepares a plain dictionary snapshot for drawing one frame."""
        return {
            "bird_y": self.bird_y,
            "started": self.started,
            "over": self.over,
            "score": self.score,
            "phase": self.phase.value,
            "pipes": [pipe.to_client_state() for pipe in self.pipes],
        }
