#!/usr/bin/env python3
"""
flappy_client.py

Window, input handling and the main loop. Wires the engine to the render
stage, the HUD, the 3D backdrop and the audio cues.
"""

import argparse
import logging
import random
from typing import List, Optional

import pygame

from .audio import AudioCues
from .backdrop import Backdrop
from .constants import RENDER_FPS
from .data_models import GameConfig
from .frame_loop import FrameLoop
from .game_engine import GameEngine
from .hud import Hud
from .renderer import Renderer

logger = logging.getLogger(__name__)


def is_trigger(event: pygame.event.Event) -> bool:
    """Space, a left click or a touch all count as the one game input."""
    if event.type == pygame.KEYDOWN:
        return event.key == pygame.K_SPACE
    if event.type == pygame.MOUSEBUTTONDOWN:
        # SDL also reports each tap as a mouse click; the FINGERDOWN already counted
        return event.button == 1 and not getattr(event, "touch", False)
    return event.type == pygame.FINGERDOWN


class FlappyClient:
    def __init__(self, config: GameConfig = None, fps: int = RENDER_FPS, seed: Optional[int] = None,
                 mute: bool = False, backdrop: bool = True, frame_coupled: bool = False):
        pygame.init()
        self.config = config or GameConfig()
        self.fps = fps
        self.screen = pygame.display.set_mode((self.config.width, self.config.height))
        pygame.display.set_caption("Flappy Bird")

        rng = random.Random(seed)
        self.engine = GameEngine(self.config, rng)

        # --- Collaborators ---
        self.backdrop = Backdrop((self.config.width, self.config.height), rng) if backdrop else None
        self.renderer = Renderer(self.config, self.backdrop)
        self.hud = Hud()
        self.audio = AudioCues(enabled=not mute)
        self.engine.subscribe(self.hud)
        self.engine.subscribe(self.audio)

        # --- Time Management ---
        self.clock = pygame.time.Clock()
        self.loop = FrameLoop(self.engine, self._draw_game, frame_coupled=frame_coupled)
        self.running = False

    def run(self):
        """The main client execution loop."""
        self.running = True
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self._handle_events()
            self.loop.frame(dt, pygame.time.get_ticks())

        pygame.quit()

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif is_trigger(event):
                self.engine.on_input(pygame.time.get_ticks())

    def _draw_game(self):
        self.renderer.draw(self.screen, self.engine.session)
        self.hud.draw(self.screen)
        pygame.display.flip()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Flappy Bird with a 3D sky backdrop.")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="render frame rate cap")
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe and cloud placement")
    parser.add_argument("--mute", action="store_true", help="disable sound cues")
    parser.add_argument("--no-backdrop", action="store_true", help="skip the 3D sky and clouds")
    parser.add_argument("--frame-coupled", action="store_true",
                        help="advance physics once per rendered frame instead of at a fixed rate")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    client = FlappyClient(
        fps=args.fps,
        seed=args.seed,
        mute=args.mute,
        backdrop=not args.no_backdrop,
        frame_coupled=args.frame_coupled,
    )
    client.run()


if __name__ == "__main__":
    main()
