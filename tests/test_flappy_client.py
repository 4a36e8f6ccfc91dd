import pygame
import pytest

from flappy.data_models import GameState
from flappy.flappy_client import FlappyClient, is_trigger, parse_args


@pytest.mark.parametrize("event, expected", [
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE), True),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), False),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)), True),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 10)), False),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=(10, 10)), False),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10), touch=True), False),
    (pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5), True),
    (pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(10, 10)), False),
    (pygame.event.Event(pygame.QUIT), False),
])
def test_trigger_events(event, expected):
    assert is_trigger(event) is expected


def test_default_args():
    args = parse_args([])
    assert args.fps == 60
    assert args.seed is None
    assert not args.mute
    assert not args.no_backdrop
    assert not args.frame_coupled
    assert args.log_level == "WARNING"


def test_flags():
    args = parse_args(["--fps", "30", "--seed", "9", "--mute", "--no-backdrop",
                       "--frame-coupled", "--log-level", "DEBUG"])
    assert (args.fps, args.seed, args.mute, args.no_backdrop, args.frame_coupled, args.log_level) == \
        (30, 9, True, True, True, "DEBUG")


@pytest.fixture
def client():
    client = FlappyClient(seed=1, mute=True)
    pygame.event.clear()
    return client


def test_space_starts_and_escape_quits(client):
    client.running = True
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE, mod=0, unicode=" ", scancode=0))
    client._handle_events()
    assert client.engine.state is GameState.PLAYING
    assert client.hud.overlay is None

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0, unicode="", scancode=0))
    client._handle_events()
    assert client.running is False


def test_frame_draws_to_window(client):
    client.engine.on_input(pygame.time.get_ticks())
    client.loop.frame(1.0 / 60, pygame.time.get_ticks())
    assert client.engine.session.bird.y > 300
    assert tuple(client.screen.get_at((5, 590)))[:3] != (0, 0, 0)


def test_one_tap_restarts_without_flapping(client):
    client.engine.on_input(0)
    client.engine.on_collision()
    pygame.event.post(pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5, dx=0.0, dy=0.0,
                                         touch_id=0, finger_id=0, pressure=1.0))
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(200, 300), touch=True))
    client._handle_events()
    assert client.engine.state is GameState.PLAYING
    assert client.engine.session.bird.velocity == 0.0


def test_wheel_does_not_flap(client):
    client.engine.on_input(0)
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=(200, 300), touch=False))
    client._handle_events()
    assert client.engine.session.bird.velocity == 0.0
