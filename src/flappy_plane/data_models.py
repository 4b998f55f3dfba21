"""
data_models.py: Data structures for the game state.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_HEIGHT, PLANE_X, PLANE_WIDTH,
    PLANE_HEIGHT, PIPE_WIDTH, PIPE_GAP, PIPE_SPEED, PIPE_SPAWN_INTERVAL,
    PIPE_MIN_TOP, GRAVITY, JUMP_VELOCITY, TILT_GAIN, MIN_TILT, MAX_TILT,
    DEFAULT_PLAYER_NAME
)


@dataclass(frozen=True)
class GameConfig:
    """Every tunable of the simulation. Defaults come from constants.py."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    ground_height: int = GROUND_HEIGHT
    plane_x: float = PLANE_X
    plane_width: int = PLANE_WIDTH
    plane_height: int = PLANE_HEIGHT
    pipe_width: int = PIPE_WIDTH
    pipe_gap: int = PIPE_GAP
    pipe_speed: float = PIPE_SPEED
    spawn_interval: int = PIPE_SPAWN_INTERVAL
    min_top: int = PIPE_MIN_TOP
    gravity: float = GRAVITY
    jump_velocity: float = JUMP_VELOCITY
    tilt_gain: float = TILT_GAIN
    min_tilt: float = MIN_TILT
    max_tilt: float = MAX_TILT

    @property
    def floor_y(self) -> int:
        """Y coordinate of the top of the ground strip."""
        return self.screen_height - self.ground_height


@dataclass
class Plane:
    """The player-controlled glider."""
    x: float
    y: float
    width: int
    height: int
    velocity: float = 0.0
    tilt: float = 0.0              # Degrees, display only

    @classmethod
    def spawn(cls, config: GameConfig) -> "Plane":
        return cls(
            x=float(config.plane_x),
            y=config.screen_height / 2,
            width=config.plane_width,
            height=config.plane_height,
        )


@dataclass
class Obstacle:
    """A top/bottom pipe pair with a fixed gap between them."""
    x: float
    width: int
    top_height: int
    gap: int
    floor_y: int
    passed: bool = False           # Has the plane scored this obstacle?

    @property
    def bottom_y(self) -> int:
        return self.top_height + self.gap

    @property
    def bottom_height(self) -> int:
        return self.floor_y - self.bottom_y

    @property
    def right(self) -> float:
        return self.x + self.width


class GamePhase(enum.Enum):
    IDLE = "idle"                  # Before the first run
    RUNNING = "running"
    GAME_OVER = "game_over"


class InputAction(enum.Enum):
    JUMP = "jump"
    RESTART = "restart"


@dataclass
class GameState:
    """The mutable state owned by the game engine."""
    plane: Plane
    obstacles: List[Obstacle] = field(default_factory=list)
    phase: GamePhase = GamePhase.IDLE
    score: int = 0
    best_score: int = 0
    player_best_score: int = 0
    frame_count: int = 0
    player_name: str = DEFAULT_PLAYER_NAME

    @property
    def is_game_over(self) -> bool:
        return self.phase is not GamePhase.RUNNING


@dataclass(frozen=True)
class PlaneView:
    x: float
    y: float
    width: int
    height: int
    tilt: float


@dataclass(frozen=True)
class ObstacleView:
    x: float
    width: int
    top_height: int
    bottom_y: int
    bottom_height: int


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of the game state handed to the renderer each frame."""
    plane: PlaneView
    obstacles: Tuple[ObstacleView, ...]
    phase: GamePhase
    score: int
    best_score: int
    player_best_score: int
    player_name: str

    @property
    def is_game_over(self) -> bool:
        return self.phase is not GamePhase.RUNNING

    @classmethod
    def from_state(cls, state: GameState) -> "GameSnapshot":
        p = state.plane
        return cls(
            plane=PlaneView(p.x, p.y, p.width, p.height, p.tilt),
            obstacles=tuple(
                ObstacleView(o.x, o.width, o.top_height, o.bottom_y, o.bottom_height)
                for o in state.obstacles
            ),
            phase=state.phase,
            score=state.score,
            best_score=state.best_score,
            player_best_score=state.player_best_score,
            player_name=state.player_name,
        )
