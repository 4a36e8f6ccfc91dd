"""
game_engine.py: The game state machine and per-tick simulation.
"""

import logging
import random
from typing import Callable, List, Optional

from .data_models import GameConfig, GameEvent, GameState, Session
from .physics_core import PhysicsCore
from .pipe_spawner import PipeSpawner

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent, Session], None]


class GameEngine:
    """
    Owns the session and drives it one tick at a time.
    Display and sound hang off subscribe(); nothing here draws or plays anything.
    """

    def __init__(self, config: GameConfig = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.physics = PhysicsCore(self.config)
        self.spawner = PipeSpawner(self.config, rng)
        self.session = Session.from_config(self.config)
        self.listeners: List[Listener] = []

    @property
    def state(self) -> GameState:
        return self.session.state

    def subscribe(self, listener: Listener):
        self.listeners.append(listener)

    def _emit(self, event: GameEvent):
        for listener in self.listeners:
            try:
                listener(event, self.session)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, event.name)

    # ----------------- State transitions -----------------

    def reset(self, now: int):
        """Puts every per-run value back to its starting point."""
        session = self.session
        session.bird.y = self.config.bird_start_y
        session.bird.velocity = 0.0
        session.pipes = []
        session.score = 0
        session.last_pipe_time = now

    def on_input(self, now: int):
        """Starts or restarts a run, or flaps while one is in progress."""
        if self.session.state is GameState.PLAYING:
            self.physics.apply_impulse(self.session.bird)
            self._emit(GameEvent.JUMPED)
            return

        self.reset(now)
        self.session.state = GameState.PLAYING
        logger.debug("Run started at t=%d", now)
        self._emit(GameEvent.STARTED)

    def on_collision(self):
        if self.session.state is not GameState.PLAYING:
            return
        self.session.state = GameState.GAME_OVER
        logger.debug("Game over with score %d", self.session.score)
        self._emit(GameEvent.GAME_OVER)

    def on_score(self):
        self.session.score += 1
        self._emit(GameEvent.SCORED)

    # ----------------- Simulation -----------------

    def update_bird(self):
        if not self.session.playing:
            return

        bird = self.session.bird
        self.physics.apply_gravity(bird)
        if self.physics.clamp_bounds(bird):
            self.on_collision()

    def update_pipes(self, now: int):
        if not self.session.playing:
            return

        session = self.session
        self.spawner.maybe_spawn(session, now)
        session.pipes = self.spawner.advance(session.pipes)

        bird = session.bird
        for pipe in session.pipes:
            if self.physics.has_passed(bird, pipe):
                pipe.passed = True
                self.on_score()

            if self.physics.check_pipe_collision(bird, pipe):
                self.on_collision()
                break

    def step(self, now: int):
        """One fixed simulation tick; a no-op unless a run is in progress."""
        self.update_bird()
        self.update_pipes(now)
