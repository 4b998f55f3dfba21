"""
game_engine.py: The authoritative game state machine.
"""

import logging
import random
from typing import Optional

from .data_models import GameConfig, GameState, GamePhase, GameSnapshot, Plane
from .physics_core import PhysicsCore
from .score_db import ScoreStore

log = logging.getLogger(__name__)


class GameEngine:
    """
    Owns the game state and drives it through Idle -> Running -> GameOver.
    Physics only advances while Running.
    """

    def __init__(self, store: ScoreStore, player_name: str,
                 config: GameConfig = None, rng: Optional[random.Random] = None):
        self.core = PhysicsCore(config)
        self.config = self.core.config
        self.store = store
        self.rng = rng or random.Random()
        self.state = GameState(
            plane=Plane.spawn(self.config),
            best_score=store.get_best(),
            player_best_score=store.get_best(player_name),
            player_name=player_name,
        )

    @property
    def is_running(self) -> bool:
        return self.state.phase is GamePhase.RUNNING

    def start(self):
        """Begins a fresh run, whatever the current phase."""
        state = self.state
        state.plane = Plane.spawn(self.config)
        state.obstacles = []
        state.score = 0
        state.frame_count = 0
        state.phase = GamePhase.RUNNING
        log.info("Run started for %s", state.player_name)

    def jump(self) -> bool:
        if not self.is_running:
            return False
        self.core.jump(self.state.plane)
        return True

    def game_over(self) -> bool:
        """
        Ends the current run and records best scores.
        Returns False (and does nothing) if no run is in progress.
        """
        state = self.state
        if not self.is_running:
            return False
        state.phase = GamePhase.GAME_OVER

        if state.score > state.best_score:
            state.best_score = state.score
            self.store.save_best(state.score)
        if state.score > state.player_best_score:
            state.player_best_score = state.score
            self.store.save_best(state.score, state.player_name)

        log.info("Game over for %s. Final score: %d (best %d)",
                 state.player_name, state.score, state.best_score)
        return True

    def step(self):
        """
        Advances the simulation by one frame.
        Mutates plane and obstacle states.
        """
        if not self.is_running:
            return
        state = self.state
        core = self.core

        # 1. Plane physics
        if core.step_plane(state.plane):
            self.game_over()
            return

        # 2. Spawn and move obstacles
        if state.frame_count % self.config.spawn_interval == 0:
            state.obstacles.append(core.spawn_obstacle(self.rng))
        state.frame_count += 1
        state.obstacles = core.step_obstacles(state.obstacles)

        # 3. Collisions and scoring
        result = core.check_obstacles(state.plane, state.obstacles)
        state.score += result.points
        if result.collided:
            self.game_over()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot.from_state(self.state)
