"""Single-player Flappy Bird: a frame-driven game engine and a pygame front end."""

from .data_models import GamePhase, GameState, Pipe
from .game_engine import GameEngine

__all__ = ["GameEngine", "GamePhase", "GameState", "Pipe"]
__version__ = "1.0.0"
