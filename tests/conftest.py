import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from flappy.data_models import GameConfig
from flappy.game_engine import GameEngine


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def engine(config):
    return GameEngine(config)


class EventRecorder:
    def __init__(self):
        self.events = []

    def __call__(self, event, session):
        self.events.append(event)

    def count(self, event):
        return self.events.count(event)


@pytest.fixture
def recorder(engine):
    rec = EventRecorder()
    engine.subscribe(rec)
    return rec
