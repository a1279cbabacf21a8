"""
physics_core.py: The deterministic per-tick kinematics, pipe lifecycle and collision logic.
"""

import math
import random
from typing import List, Optional

from .constants import (
    FIELD_WIDTH, FIELD_HEIGHT, BIRD_SIZE, PIPE_WIDTH, PIPE_GAP,
    GRAVITY, JUMP_STRENGTH, SCROLL_SPEED
)
from .data_models import Pipe


class PhysicsCore:
    """
    Physics helpers used by the game engine.
    The engine owns the state. step_pipes scrolls the given pipes in place;
    the other helpers only compute the next values.
    """

    FIELD_HEIGHT = FIELD_HEIGHT
    FLOOR_Y = FIELD_HEIGHT - BIRD_SIZE

    def apply_gravity(self, y: float) -> tuple[float, bool]:
        """
        Moves the bird down by one tick of gravity.
        Returns (new_y, hit_floor). On a floor hit the old y is returned unchanged.
        """
        new_y = y + GRAVITY
        if new_y >= self.FLOOR_Y:
            return y, True
        return new_y, False

    def jump_position(self, y: float) -> float:
        """Returns the bird position after a jump, never above the top edge."""
        return max(0, y - JUMP_STRENGTH)

    def make_pipe(self, rng: random.Random, left: float) -> Pipe:
        """Creates a pipe with a uniformly random split point for the gap."""
        top_height = math.floor(rng.random() * (self.FIELD_HEIGHT - PIPE_GAP))
        return Pipe(
            left=left,
            top_height=top_height,
            bottom_height=self.FIELD_HEIGHT - top_height - PIPE_GAP,
        )

    def generate_pipes(self, rng: random.Random, count: int, spacing: float) -> List[Pipe]:
        return [self.make_pipe(rng, FIELD_WIDTH + i * spacing) for i in range(count)]

    def step_pipes(self, pipes: List[Pipe]) -> List[Pipe]:
        """Scrolls every pipe left and drops the ones fully off screen."""
        for pipe in pipes:
            pipe.left -= SCROLL_SPEED
        return [p for p in pipes if p.left > -PIPE_WIDTH]

    def check_collision(self, y: float, pipe: Optional[Pipe]) -> bool:
        """Checks the bird's fixed horizontal slot against a single pipe."""
        if pipe is None or pipe.left >= BIRD_SIZE:
            return False

        # Bird must sit fully inside the gap
        hits_top = y < pipe.top_height
        hits_bottom = y + BIRD_SIZE > self.FIELD_HEIGHT - pipe.bottom_height
        return hits_top or hits_bottom
