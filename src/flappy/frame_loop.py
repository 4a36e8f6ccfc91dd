"""
frame_loop.py: Per-refresh driver that runs simulation ticks and then renders.
"""

from typing import Callable

from .constants import MAX_STEPS_PER_FRAME
from .game_engine import GameEngine


class FrameLoop:
    """
    Fixed timestep: real elapsed time is banked and spent in whole ticks, so
    the bird falls at the same speed on a 30 Hz or a 144 Hz display.
    With frame_coupled=True every call runs exactly one tick instead.
    """

    def __init__(self, engine: GameEngine, render: Callable[[], None],
                 max_steps: int = MAX_STEPS_PER_FRAME, frame_coupled: bool = False):
        self.engine = engine
        self.render = render
        self.tick_time = engine.config.tick_time
        self.max_steps = max_steps
        self.frame_coupled = frame_coupled
        self.tick_timer = 0.0

    def frame(self, dt: float, now: int) -> int:
        """Runs the ticks that are due, draws once, returns the tick count."""
        steps = 0
        if self.frame_coupled:
            self.engine.step(now)
            steps = 1
        else:
            self.tick_timer += dt
            while self.tick_timer >= self.tick_time and steps < self.max_steps:
                self.tick_timer -= self.tick_time
                self.engine.step(now)
                steps += 1

            # After a stall, drop the backlog instead of fast-forwarding.
            if self.tick_timer >= self.tick_time:
                self.tick_timer = 0.0

        self.render()
        return steps
