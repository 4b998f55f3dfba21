"""
physics_core.py: The per-frame kinematic rules and collision/scoring logic.

Nothing in here changes the game phase. Each step returns a plain signal
(hit ground, collided, points scored) and the engine decides what it means.
"""

import random
from dataclasses import dataclass
from typing import List

from .data_models import GameConfig, Plane, Obstacle


@dataclass(frozen=True)
class CollisionResult:
    collided: bool = False
    points: int = 0


class PhysicsCore:
    """
    Frame-stepped physics for the plane and the obstacle stream.
    """

    def __init__(self, config: GameConfig = None):
        self.config = config or GameConfig()
        if self.max_top_height() < self.config.min_top:
            raise ValueError(
                f"Pipe gap {self.config.pipe_gap} does not fit in a "
                f"{self.config.screen_height}px screen with margin {self.config.min_top}")

    # ---------- Plane ----------

    def step_plane(self, plane: Plane) -> bool:
        """
        Applies one frame of gravity and movement.
        Returns True when the plane hit the ground this frame.
        """
        cfg = self.config
        plane.velocity += cfg.gravity
        plane.y += plane.velocity

        plane.tilt = min(max(cfg.min_tilt, plane.velocity * cfg.tilt_gain), cfg.max_tilt)

        hit_ground = False
        if plane.y + plane.height > cfg.floor_y:
            plane.y = cfg.floor_y - plane.height
            plane.velocity = 0.0
            hit_ground = True
        if plane.y < 0:
            plane.y = 0.0
            plane.velocity = 0.0
        return hit_ground

    def jump(self, plane: Plane):
        """Overrides the current velocity with the jump impulse."""
        plane.velocity = self.config.jump_velocity

    # ---------- Obstacles ----------

    def max_top_height(self) -> int:
        cfg = self.config
        return cfg.screen_height - cfg.min_top - cfg.pipe_gap - cfg.ground_height

    def spawn_obstacle(self, rng: random.Random) -> Obstacle:
        """Generates a new obstacle off the right edge of the screen."""
        cfg = self.config
        top_height = rng.randint(cfg.min_top, self.max_top_height())
        return Obstacle(
            x=float(cfg.screen_width),
            width=cfg.pipe_width,
            top_height=top_height,
            gap=cfg.pipe_gap,
            floor_y=cfg.floor_y,
        )

    def step_obstacles(self, obstacles: List[Obstacle]) -> List[Obstacle]:
        """Moves every obstacle left and drops the ones fully off screen."""
        for obs in obstacles:
            obs.x -= self.config.pipe_speed
        return [obs for obs in obstacles if obs.right >= 0]

    # ---------- Collision & Scoring ----------

    @staticmethod
    def overlaps_horizontally(plane: Plane, obs: Obstacle) -> bool:
        return plane.x + plane.width > obs.x and plane.x < obs.right

    def check_obstacles(self, plane: Plane, obstacles: List[Obstacle]) -> CollisionResult:
        """
        Checks pipe collisions oldest first and marks newly passed obstacles.
        Stops at the first collision.
        """
        points = 0
        for obs in obstacles:
            if self.overlaps_horizontally(plane, obs):
                top_collision = plane.y < obs.top_height
                bottom_collision = plane.y + plane.height > obs.bottom_y
                if top_collision or bottom_collision:
                    return CollisionResult(collided=True, points=points)

            if plane.x > obs.right and not obs.passed:
                obs.passed = True
                points += 1
        return CollisionResult(points=points)
