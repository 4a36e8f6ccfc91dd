import pygame
import pytest

from flappy.constants import (
    BIRD_BEAK_COLOR, BIRD_BODY_COLOR, GRASS_COLOR, GROUND_COLOR, PIPE_CAP_COLOR, PIPE_COLOR, SKY_TOP_COLOR
)
from flappy.data_models import Bird, Pipe, Session
from flappy.renderer import Renderer, bird_rotation


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


@pytest.mark.parametrize("velocity, expected", [
    (0.0, 0.0),
    (3.0, 0.3),
    (-2.0, -0.2),
    (10.0, 0.5),
    (-10.0, -0.5),
    (40.0, 0.5),
])
def test_bird_rotation_is_proportional_and_clamped(velocity, expected):
    assert bird_rotation(velocity) == pytest.approx(expected)


@pytest.fixture
def drawn(config):
    surface = pygame.Surface((config.width, config.height))
    session = Session(bird=Bird(y=300, velocity=0.0))
    session.pipes.append(Pipe(x=250.0, top_height=150.0, bottom_y=350.0))
    Renderer(config).draw(surface, session)
    return surface


def test_sky_and_ground(drawn):
    assert rgb(drawn, (5, 0)) == SKY_TOP_COLOR
    assert rgb(drawn, (5, 555)) == GRASS_COLOR
    assert rgb(drawn, (5, 590)) == GROUND_COLOR


def test_bird_body(drawn):
    assert rgb(drawn, (150, 285)) == BIRD_BODY_COLOR


def test_pipe_segments_and_caps(drawn):
    assert rgb(drawn, (290, 50)) == PIPE_COLOR
    assert rgb(drawn, (247, 140)) == PIPE_CAP_COLOR
    assert rgb(drawn, (290, 250)) != PIPE_COLOR     # the gap
    assert rgb(drawn, (247, 360)) == PIPE_CAP_COLOR
    assert rgb(drawn, (290, 500)) == PIPE_COLOR


def test_draws_backdrop_layer_between_sky_and_ground(config):
    calls = []

    class Layer:
        def draw(self, surface):
            calls.append(rgb(surface, (5, 590)))

    surface = pygame.Surface((config.width, config.height))
    Renderer(config, backdrop=Layer()).draw(surface, Session())
    # the ground is not painted yet when the backdrop goes down
    assert calls and calls[0] != GROUND_COLOR


def beak_rows(config, velocity):
    """Screen rows holding beak pixels, relative to the bird's center row."""
    surface = pygame.Surface((config.width, config.height))
    Renderer(config).draw(surface, Session(bird=Bird(y=300, velocity=velocity)))
    return [y - 300 for x in range(150, 190) for y in range(260, 340)
            if rgb(surface, (x, y)) == BIRD_BEAK_COLOR]


def test_falling_bird_points_nose_down(config):
    rows = beak_rows(config, 10.0)
    assert rows
    assert min(rows) > 0


def test_rising_bird_points_nose_up(config):
    rows = beak_rows(config, -10.0)
    assert rows
    assert max(rows) < 0
