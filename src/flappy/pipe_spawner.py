"""
pipe_spawner.py: Timed pipe generation and scrolling.
"""

import logging
import random
from typing import List, Optional

from .data_models import GameConfig, Pipe, Session

logger = logging.getLogger(__name__)


class PipeSpawner:
    """Creates pipes at the right edge on a wall-clock cadence and scrolls them left."""

    def __init__(self, config: GameConfig = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

    def gap_range(self):
        """Inclusive bounds for a new pipe's top_height."""
        cfg = self.config
        low = cfg.pipe_min_height
        high = cfg.height - cfg.ground_height - cfg.pipe_gap - cfg.pipe_min_height
        return low, high

    def create_pipe(self) -> Pipe:
        """Generates a new pipe just off-screen to the right."""
        low, high = self.gap_range()
        top_height = self.rng.uniform(low, high)
        return Pipe(
            x=float(self.config.width),
            top_height=top_height,
            bottom_y=top_height + self.config.pipe_gap,
        )

    def maybe_spawn(self, session: Session, now: int) -> Optional[Pipe]:
        """Appends a pipe once more than spawn_interval_ms has elapsed since the last one."""
        if now - session.last_pipe_time <= self.config.spawn_interval_ms:
            return None

        pipe = self.create_pipe()
        session.pipes.append(pipe)
        session.last_pipe_time = now
        logger.debug("Spawned pipe with gap %.1f-%.1f at t=%d", pipe.top_height, pipe.bottom_y, now)
        return pipe

    def advance(self, pipes: List[Pipe]) -> List[Pipe]:
        """Moves every pipe one tick left and drops the ones fully off-screen."""
        for pipe in pipes:
            pipe.x -= self.config.pipe_speed

        return [p for p in pipes if p.x + self.config.pipe_width >= 0]
