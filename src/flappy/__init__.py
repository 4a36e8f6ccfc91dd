"""Flappy Bird: a single-player pygame arcade game."""

from .data_models import Bird, GameConfig, GameEvent, GameState, Pipe, Session
from .game_engine import GameEngine

__version__ = "1.0.0"
