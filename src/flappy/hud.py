"""
hud.py: Score text and the start / game-over overlays.
"""

from typing import Optional

import pygame

from .data_models import GameEvent, Session

WHITE = (255, 255, 255)
SHADOW = (40, 40, 40)

START_OVERLAY = "start"
GAME_OVER_OVERLAY = "game_over"


def make_overlay(size, alpha: int = 120) -> pygame.Surface:
    overlay = pygame.Surface(size, pygame.SRCALPHA)
    overlay.fill((0, 0, 0, max(0, min(255, alpha))))
    return overlay


def draw_text_center(surface: pygame.Surface, font: pygame.font.Font, text: str, y: int, color=WHITE):
    shadow = font.render(text, True, SHADOW)
    rendered = font.render(text, True, color)
    center_x = surface.get_width() // 2
    surface.blit(shadow, shadow.get_rect(center=(center_x + 2, y + 2)))
    surface.blit(rendered, rendered.get_rect(center=(center_x, y)))


class Hud:
    """Listens for game events to decide what text is shown; draws it on request."""

    def __init__(self):
        if not pygame.font.get_init():
            pygame.font.init()
        self.large_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 28)

        self.score_text = "0"
        self.final_score_text = ""
        self.overlay: Optional[str] = START_OVERLAY
        self._dimmer: Optional[pygame.Surface] = None

    def __call__(self, event: GameEvent, session: Session):
        if event is GameEvent.STARTED:
            self.overlay = None
            self.score_text = "0"
        elif event is GameEvent.SCORED:
            self.score_text = str(session.score)
        elif event is GameEvent.GAME_OVER:
            self.overlay = GAME_OVER_OVERLAY
            self.final_score_text = f"Score: {session.score}"

    def draw_dimmer(self, surface: pygame.Surface):
        """Darkens the screen; the translucent layer is built once per screen size."""
        if self._dimmer is None or self._dimmer.get_size() != surface.get_size():
            self._dimmer = make_overlay(surface.get_size())
        surface.blit(self._dimmer, (0, 0))

    def draw(self, surface: pygame.Surface):
        draw_text_center(surface, self.large_font, self.score_text, 40)

        if self.overlay == START_OVERLAY:
            self.draw_dimmer(surface)
            mid = surface.get_height() // 2
            draw_text_center(surface, self.large_font, "Flappy Bird", mid - 40)
            draw_text_center(surface, self.font, "Click, tap or press Space to start", mid + 20)
        elif self.overlay == GAME_OVER_OVERLAY:
            self.draw_dimmer(surface)
            mid = surface.get_height() // 2
            draw_text_center(surface, self.large_font, "Game Over", mid - 50)
            draw_text_center(surface, self.font, self.final_score_text, mid)
            draw_text_center(surface, self.font, "Click, tap or press Space to restart", mid + 40)
