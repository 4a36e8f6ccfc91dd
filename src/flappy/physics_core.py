"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from .data_models import Bird, Pipe, GameConfig


class PhysicsCore:
    """
    Fixed-step physics for the bird and its overlap tests against pipes.
    Every call advances or inspects exactly one tick; velocities are px/tick.
    """

    def __init__(self, config: GameConfig = None):
        self.config = config or GameConfig()

    def apply_gravity(self, bird: Bird):
        """Velocity is incremented first, then used to move the bird."""
        bird.velocity += self.config.gravity
        bird.y += bird.velocity

    def apply_impulse(self, bird: Bird):
        """A flap sets the velocity outright; it does not add to it."""
        bird.velocity = self.config.jump_velocity

    def clamp_bounds(self, bird: Bird) -> bool:
        """
        Keeps the bird between the ceiling and the ground line.
        Returns True when the bird hit the ground, which ends the run.
        The ceiling only stops the bird.
        """
        hit_ground = False
        ground_y = self.config.ground_y

        if bird.bottom > ground_y:
            bird.y = ground_y - bird.radius
            hit_ground = True

        if bird.top < 0:
            bird.y = bird.radius
            bird.velocity = 0.0

        return hit_ground

    def check_pipe_collision(self, bird: Bird, pipe: Pipe) -> bool:
        """
        Axis-aligned test of the bird's bounding box against one pipe pair.
        A pipe that moves further than the bird's width in one tick can be
        skipped entirely; at these speeds that never happens.
        """
        pipe_right = pipe.x + self.config.pipe_width
        if bird.x + bird.radius > pipe.x and bird.x - bird.radius < pipe_right:
            return bird.top < pipe.top_height or bird.bottom > pipe.bottom_y
        return False

    def has_passed(self, bird: Bird, pipe: Pipe) -> bool:
        """True the first tick the pipe's trailing edge is behind the bird."""
        return not pipe.passed and pipe.x + self.config.pipe_width < bird.x
