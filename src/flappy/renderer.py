"""
renderer.py: Draws the sky, ground, bird and pipes for the current session.
"""

import math
from typing import Optional

import pygame

from .constants import (
    SKY_TOP_COLOR, SKY_BOTTOM_COLOR, GROUND_COLOR, GRASS_COLOR, GRASS_HEIGHT,
    PIPE_COLOR, PIPE_CAP_COLOR, PIPE_CAP_HEIGHT, PIPE_CAP_OVERHANG,
    BIRD_BODY_COLOR, BIRD_BEAK_COLOR, BIRD_WING_COLOR, BIRD_EYE_COLOR,
    MAX_BIRD_TILT, BIRD_TILT_PER_VELOCITY
)
from .data_models import Bird, GameConfig, Session


def bird_rotation(velocity: float) -> float:
    """Nose-down tilt in radians, proportional to the fall speed."""
    return min(max(velocity * BIRD_TILT_PER_VELOCITY, -MAX_BIRD_TILT), MAX_BIRD_TILT)


def make_sky_gradient(size) -> pygame.Surface:
    width, height = size
    surface = pygame.Surface(size)
    for y in range(height):
        t = y / max(height - 1, 1)
        color = tuple(round(a + (b - a) * t) for a, b in zip(SKY_TOP_COLOR, SKY_BOTTOM_COLOR))
        pygame.draw.line(surface, color, (0, y), (width - 1, y))
    return surface


def make_bird_sprite(radius: int) -> pygame.Surface:
    """Unrotated bird facing right, centered in its surface."""
    size = radius * 4
    c = size // 2
    surf = pygame.Surface((size, size), pygame.SRCALPHA)

    pygame.draw.circle(surf, BIRD_BODY_COLOR, (c, c), radius)
    pygame.draw.circle(surf, BIRD_EYE_COLOR, (c + 8, c - 5), 4)
    pygame.draw.polygon(surf, BIRD_BEAK_COLOR, [(c + 15, c), (c + 25, c - 5), (c + 25, c + 5)])

    wing = pygame.Surface((24, 16), pygame.SRCALPHA)
    pygame.draw.ellipse(wing, BIRD_WING_COLOR, wing.get_rect())
    wing = pygame.transform.rotate(wing, -45)
    surf.blit(wing, wing.get_rect(center=(c - 5, c + 5)))
    return surf


class Renderer:
    """The 2D render stage. Reads the session, never changes it."""

    def __init__(self, config: GameConfig = None, backdrop=None):
        self.config = config or GameConfig()
        self.backdrop = backdrop
        self.sky = make_sky_gradient((self.config.width, self.config.height))
        self.bird_sprite = make_bird_sprite(int(self.config.bird_radius))

    def draw(self, surface: pygame.Surface, session: Session):
        surface.blit(self.sky, (0, 0))
        if self.backdrop is not None:
            self.backdrop.draw(surface)
        self.draw_ground(surface)
        self.draw_bird(surface, session.bird)
        for pipe in session.pipes:
            self.draw_pipe(surface, pipe)

    def draw_ground(self, surface: pygame.Surface):
        cfg = self.config
        ground_y = int(cfg.ground_y)
        pygame.draw.rect(surface, GROUND_COLOR, (0, ground_y, cfg.width, int(cfg.ground_height)))
        pygame.draw.rect(surface, GRASS_COLOR, (0, ground_y, cfg.width, GRASS_HEIGHT))

    def draw_bird(self, surface: pygame.Surface, bird: Bird):
        # pygame rotates counter-clockwise on screen, the tilt is clockwise-positive
        angle = -math.degrees(bird_rotation(bird.velocity))
        rotated = pygame.transform.rotate(self.bird_sprite, angle)
        surface.blit(rotated, rotated.get_rect(center=(round(bird.x), round(bird.y))))

    def draw_pipe(self, surface: pygame.Surface, pipe):
        cfg = self.config
        x = int(pipe.x)
        width = int(cfg.pipe_width)
        top = int(pipe.top_height)
        bottom = int(pipe.bottom_y)
        cap_x = x - PIPE_CAP_OVERHANG
        cap_w = width + 2 * PIPE_CAP_OVERHANG

        pygame.draw.rect(surface, PIPE_COLOR, (x, 0, width, top))
        pygame.draw.rect(surface, PIPE_CAP_COLOR, (cap_x, top - PIPE_CAP_HEIGHT, cap_w, PIPE_CAP_HEIGHT))

        pygame.draw.rect(surface, PIPE_COLOR, (x, bottom, width, cfg.height - bottom))
        pygame.draw.rect(surface, PIPE_CAP_COLOR, (cap_x, bottom, cap_w, PIPE_CAP_HEIGHT))
