import os

# Headless pygame for the client tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy.game_engine import GameEngine


@pytest.fixture
def engine():
    return GameEngine(seed=1234)


@pytest.fixture
def playing(engine):
    engine.jump()
    return engine
