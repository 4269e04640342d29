"""Procedural cue sounds. No audio assets; silent if the mixer is unavailable."""

import logging

import numpy as np

try:
    import pygame
except ImportError:
    pygame = None

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

# cue -> (duration s, start Hz, end Hz, volume)
CUE_TONES = {
    "racket": (0.10, 440, 200, 0.6),
    "wall": (0.08, 200, 100, 0.4),
    "point": (0.30, 880, 440, 0.5),
}


def sweep_wave(duration: float, freq_start: float, freq_end: float, volume: float = 0.5,
               sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Linear frequency sweep with quadratic decay, as int16 samples."""
    n = max(int(sample_rate * duration), 1)
    t = np.arange(n) / sample_rate
    freq = freq_start + (freq_end - freq_start) * (t / duration)
    phase = 2 * np.pi * np.cumsum(freq) / sample_rate
    envelope = (1.0 - t / duration) ** 2
    return (np.sin(phase) * envelope * volume * 32767).astype(np.int16)


class CuePlayer:
    """Plays a one-shot sound for each snapshot cue."""

    def __init__(self, enabled: bool = True):
        self.enabled = False
        self.sounds = {}
        if not enabled or pygame is None:
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            _, _, channels = pygame.mixer.get_init()
            for cue, (duration, f0, f1, volume) in CUE_TONES.items():
                mono = sweep_wave(duration, f0, f1, volume)
                samples = np.column_stack([mono] * channels) if channels > 1 else mono
                self.sounds[cue] = pygame.sndarray.make_sound(np.ascontiguousarray(samples))
        except pygame.error as e:
            logger.warning(f"Audio unavailable, playing silently: {e}")
            self.sounds = {}
            return
        self.enabled = True

    def play(self, cue):
        if self.enabled and cue in self.sounds:
            self.sounds[cue].play()
