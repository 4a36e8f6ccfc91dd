"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import (
    GRAVITY, JUMP_VELOCITY, PIPE_SPEED, PIPE_GAP, PIPE_WIDTH, PIPE_MIN_HEIGHT,
    PIPE_SPAWN_INTERVAL_MS, GROUND_HEIGHT, SCREEN_WIDTH, SCREEN_HEIGHT,
    BIRD_X, BIRD_START_Y, BIRD_RADIUS, TICK_TIME
)


class GameState(Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameEvent(Enum):
    """Notifications the engine sends to display and sound collaborators."""
    STARTED = "started"
    JUMPED = "jumped"
    SCORED = "scored"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameConfig:
    """World constants, fixed for a session."""
    gravity: float = GRAVITY
    jump_velocity: float = JUMP_VELOCITY
    pipe_speed: float = PIPE_SPEED
    pipe_gap: float = PIPE_GAP
    pipe_width: float = PIPE_WIDTH
    pipe_min_height: float = PIPE_MIN_HEIGHT
    spawn_interval_ms: int = PIPE_SPAWN_INTERVAL_MS
    ground_height: float = GROUND_HEIGHT
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    bird_x: float = BIRD_X
    bird_start_y: float = BIRD_START_Y
    bird_radius: float = BIRD_RADIUS
    tick_time: float = TICK_TIME

    @property
    def ground_y(self) -> float:
        """Y coordinate of the top of the ground strip."""
        return self.height - self.ground_height


@dataclass
class Bird:
    y: float = BIRD_START_Y
    velocity: float = 0.0
    x: float = BIRD_X
    radius: float = BIRD_RADIUS

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius


@dataclass
class Pipe:
    """A pipe pair; the open gap runs from top_height down to bottom_y."""
    x: float
    top_height: float
    bottom_y: float
    passed: bool = False


@dataclass
class Session:
    """Everything that is reset when a run (re)starts."""
    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)
    state: GameState = GameState.NOT_STARTED
    score: int = 0
    last_pipe_time: int = 0     # ms

    @classmethod
    def from_config(cls, config: GameConfig) -> "Session":
        bird = Bird(y=config.bird_start_y, x=config.bird_x, radius=config.bird_radius)
        return cls(bird=bird)

    @property
    def playing(self) -> bool:
        return self.state is GameState.PLAYING
