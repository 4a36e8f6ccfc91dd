"""
audio.py: Short synthesized tones for jump, score and crash.
"""

import logging
from dataclasses import dataclass
from typing import Dict

import numpy as np
import pygame

from .constants import AUDIO_SAMPLE_RATE
from .data_models import GameEvent, Session

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tone:
    freq_start: float
    freq_end: float
    duration: float             # seconds
    gain_start: float
    gain_end: float
    waveform: str = "sine"      # sine | sawtooth


CUES: Dict[GameEvent, Tone] = {
    GameEvent.JUMPED: Tone(800, 800, 0.2, 0.3, 0.01),
    GameEvent.SCORED: Tone(1200, 1200, 0.1, 0.2, 0.01),
    GameEvent.GAME_OVER: Tone(200, 50, 0.5, 0.3, 0.01, waveform="sawtooth"),
}


def synthesize(tone: Tone, sample_rate: int = AUDIO_SAMPLE_RATE) -> np.ndarray:
    """Mono float samples in [-1, 1] with exponential pitch and gain ramps."""
    n = int(sample_rate * tone.duration)
    progress = np.arange(n) / n
    freq = tone.freq_start * (tone.freq_end / tone.freq_start) ** progress
    gain = tone.gain_start * (tone.gain_end / tone.gain_start) ** progress

    cycles = np.cumsum(freq) / sample_rate
    if tone.waveform == "sine":
        wave = np.sin(2 * np.pi * cycles)
    elif tone.waveform == "sawtooth":
        wave = 2.0 * (cycles % 1.0) - 1.0
    else:
        raise ValueError(f"Unknown waveform: {tone.waveform}")
    return wave * gain


class AudioCues:
    """
    Game event listener that plays one pre-built sound per cue.
    The mixer is opened once; if that fails the game simply stays silent.
    """

    def __init__(self, enabled: bool = True):
        self.sounds: Dict[GameEvent, pygame.mixer.Sound] = {}
        if enabled:
            self._load()

    def _load(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=AUDIO_SAMPLE_RATE, size=-16, channels=2)
            sample_rate, _, channels = pygame.mixer.get_init()
            for event, tone in CUES.items():
                self.sounds[event] = self._make_sound(synthesize(tone, sample_rate), channels)
        except (pygame.error, ValueError) as e:
            logger.warning("Audio not supported: %s", e)
            self.sounds = {}

    @staticmethod
    def _make_sound(samples: np.ndarray, channels: int) -> pygame.mixer.Sound:
        pcm = (samples * 32767).astype(np.int16)
        if channels > 1:
            pcm = np.ascontiguousarray(np.column_stack([pcm] * channels))
        return pygame.sndarray.make_sound(pcm)

    @property
    def enabled(self) -> bool:
        return bool(self.sounds)

    def __call__(self, event: GameEvent, session: Session):
        sound = self.sounds.get(event)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as e:
            logger.warning("Could not play %s cue: %s", event.name, e)
