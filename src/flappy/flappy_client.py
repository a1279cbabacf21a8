#!/usr/bin/env python3
"""
flappy_client.py

Pygame front end: forwards click / Space as jumps and drives the engine
at a fixed tick rate, drawing the exposed state once per render frame.
"""

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from .constants import (
    FIELD_WIDTH, FIELD_HEIGHT, BIRD_SIZE, BIRD_RENDER_X, PIPE_WIDTH,
    TICK_TIME, RENDER_FPS, MAX_TICKS_PER_FRAME,
    SKY_COLOR, BIRD_COLOR, PIPE_COLOR, TEXT_COLOR, GAME_OVER_COLOR
)
from .data_models import GamePhase
from .game_engine import GameEngine

log = logging.getLogger(__name__)


def is_jump_event(event) -> bool:
    """A click anywhere on the field or the Space key counts as a jump."""
    if event.type == pygame.MOUSEBUTTONDOWN:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE


def is_quit_event(event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


class TickScheduler:
    """Fixed-timestep accumulator turning render frame time into whole engine ticks."""

    def __init__(self, tick_time: float = TICK_TIME, max_ticks: int = MAX_TICKS_PER_FRAME):
        self.tick_time = tick_time
        self.max_ticks = max_ticks
        self.accumulator = 0.0

    def advance(self, delta_time: float) -> int:
        """Adds elapsed seconds and returns how many ticks are due now."""
        self.accumulator += delta_time
        ticks = 0
        while self.accumulator >= self.tick_time and ticks < self.max_ticks:
            self.accumulator -= self.tick_time
            ticks += 1

        # Drop the backlog after a stall instead of fast-forwarding through it
        if ticks == self.max_ticks:
            self.accumulator = min(self.accumulator, self.tick_time)
        return ticks

    def reset(self):
        self.accumulator = 0.0


# ----------------- Game Client (rendering / input) -----------------

class FlappyClient:
    def __init__(self, engine: Optional[GameEngine] = None):
        self.engine = engine or GameEngine()
        self.scheduler = TickScheduler()
        self.screen = None
        self.clock = None
        self.font = None
        self.running = False

    def open(self):
        pygame.init()
        self.screen = pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT))
        pygame.display.set_caption("Flappy Bird")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 28)
        log.info("Window opened (%dx%d)", FIELD_WIDTH, FIELD_HEIGHT)

    def close(self):
        pygame.quit()
        log.info("Client shut down")

    def run(self):
        """The main client execution loop."""
        try:
            self.open()
            self.running = True
            while self.running:
                delta_time = self.clock.tick(RENDER_FPS) / 1000.0
                self.handle_events(pygame.event.get())
                self.step(delta_time)
                self._draw_game()
        finally:
            self.close()

    def handle_events(self, events: List):
        """Applies input before this frame's ticks so a jump is seen by the next tick."""
        for event in events:
            if is_quit_event(event):
                self.running = False
            elif is_jump_event(event):
                was_playing = self.engine.phase is GamePhase.PLAYING
                self.engine.jump()
                if not was_playing:
                    self.scheduler.reset()

    def step(self, delta_time: float) -> int:
        """Runs the engine forward by however many fixed ticks are due."""
        ticks = self.scheduler.advance(delta_time)
        for _ in range(ticks):
            self.engine.tick()
        return ticks

    def _draw_game(self):
        """Renders the engine's state using Pygame."""
        screen = self.screen
        state = self.engine.to_render_state()
        screen.fill(SKY_COLOR)

        # Pipes
        for pipe in state["pipes"]:
            left = pipe["left"]
            pygame.draw.rect(screen, PIPE_COLOR, (left, 0, PIPE_WIDTH, pipe["top_height"]))
            bottom = pipe["bottom_height"]
            pygame.draw.rect(screen, PIPE_COLOR,
                             (left, FIELD_HEIGHT - bottom, PIPE_WIDTH, bottom))

        # Bird
        radius = BIRD_SIZE // 2
        center = (BIRD_RENDER_X + radius, int(state["bird_y"]) + radius)
        pygame.draw.circle(screen, BIRD_COLOR, center, radius)

        # HUD
        score_text = self.font.render(f"Score: {state['score']}", True, TEXT_COLOR)
        screen.blit(score_text, (10, 10))

        if state["over"]:
            over_text = self.font.render("Game Over! Click to restart", True, GAME_OVER_COLOR)
            screen.blit(over_text, (10, 20 + score_text.get_height()))
        elif not state["started"]:
            hint = self.font.render("Click or press Space to start", True, TEXT_COLOR)
            screen.blit(hint, (FIELD_WIDTH // 2 - hint.get_width() // 2, FIELD_HEIGHT // 2))

        pygame.display.flip()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="flappy", description="Play Flappy Bird.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the pipe gap generator")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    client = FlappyClient(GameEngine(seed=args.seed))
    try:
        client.run()
    except pygame.error as e:
        log.error("Pygame error: %s", e)
        return 1
    except KeyboardInterrupt:
        log.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
