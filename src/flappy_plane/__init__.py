"""Flappy Plane: a single-screen arcade glider game."""

from .data_models import GameConfig, GamePhase, GameSnapshot, InputAction
from .game_engine import GameEngine
from .frame_loop import FrameScheduler, GameLoop
from .score_db import ScoreStore

__all__ = [
    "GameConfig", "GamePhase", "GameSnapshot", "InputAction",
    "GameEngine", "FrameScheduler", "GameLoop", "ScoreStore",
]
