"""
game_engine.py: The authoritative single-player game simulation.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from typing import List, Optional

from .constants import FIELD_WIDTH, PIPE_COUNT, PIPE_SPACING, BIRD_START_Y
from .data_models import GamePhase, GameState, Pipe
from .physics_core import PhysicsCore

log = logging.getLogger(__name__)


@dataclass
class GameEngine(PhysicsCore):
    """
    The engine owning the entire game state.
    Inherits physics and collision from PhysicsCore.

    A render/input adapter calls jump() on user input and tick() once per
    frame, then reads bird_y, pipes, score and over to draw.
    """
    seed: Optional[int] = None
    rng: Optional[random.Random] = None
    state: GameState = field(default_factory=GameState)
    tick_count: int = 0

    def __post_init__(self):
        if self.rng is None:
            self.rng = random.Random(self.seed)
        elif self.seed is not None:
            self.rng.seed(self.seed)

    # -------- Read model --------

    @property
    def bird_y(self) -> float:
        return self.state.bird_y

    @property
    def pipes(self) -> List[Pipe]:
        # Copies, so drawing code cannot move the live pipes
        return [replace(pipe) for pipe in self.state.pipes]

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def over(self) -> bool:
        return self.state.over

    @property
    def started(self) -> bool:
        return self.state.started

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    def to_render_state(self):
        return self.state.to_render_state()

    # -------- Operations --------

    def start_game(self):
        """Full reset: bird back at the start height, fresh pipes, score zero."""
        state = self.state
        state.started = True
        state.over = False
        state.bird_y = BIRD_START_Y
        state.score = 0
        state.pipes = self.generate_pipes(self.rng, PIPE_COUNT, PIPE_SPACING)
        self.tick_count = 0
        log.debug("Game started with pipes at %s", [p.left for p in state.pipes])

    def jump(self):
        """Starts (or restarts) the game when not playing, otherwise lifts the bird."""
        if not self.state.started or self.state.over:
            self.start_game()
            return

        self.state.bird_y = self.jump_position(self.state.bird_y)

    def tick(self):
        """
        Advances the simulation by one frame.
        Does nothing while idle or after game over.
        """
        state = self.state
        if not state.started or state.over:
            return

        self.tick_count += 1
        # Collision below reads the bird position from before this tick's gravity
        prev_y = state.bird_y

        # 1. Gravity
        state.bird_y, hit_floor = self.apply_gravity(state.bird_y)
        if hit_floor:
            state.over = True
            log.debug("Game over: bird hit the floor at tick %d (y=%s)", self.tick_count, prev_y)

        # 2. Scroll and expire pipes
        state.pipes = self.step_pipes(state.pipes)

        # 3. Nearest pipe collision
        nearest = state.pipes[0] if state.pipes else None
        if self.check_collision(prev_y, nearest):
            if not state.over:
                log.debug("Game over: bird hit a pipe at tick %d (y=%s, pipe=%s)",
                          self.tick_count, prev_y, nearest)
            state.over = True

        # 4. Replenish
        if len(state.pipes) < PIPE_COUNT:
            state.pipes.append(self.make_pipe(self.rng, FIELD_WIDTH))
