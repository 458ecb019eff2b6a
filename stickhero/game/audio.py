# stickhero/game/audio.py
"""
Sound cues for the game.

Playback is fire-and-forget: a cue that cannot be played is dropped and the
frame carries on. The state machine only sees the AudioCue interface, so
tests run against SilentAudio and never touch an audio device.
"""
from __future__ import annotations
import array
import logging
import math
from pathlib import Path
from typing import Dict, Optional

import pygame

logger = logging.getLogger(__name__)

CUES = ("stretch", "drop", "walk", "fall")
SOUND_EXTENSIONS = (".mp3", ".ogg", ".wav")
SAMPLE_RATE = 22050

# (start Hz, end Hz, seconds) for the generated fallback tones
_TONES = {
    "stretch": (220.0, 440.0, 0.25),
    "drop": (180.0, 90.0, 0.12),
    "walk": (520.0, 520.0, 0.06),
    "fall": (400.0, 80.0, 0.4),
}


class AudioCue:
    """Base cue player: handles muting and swallows backend failures."""

    def __init__(self, muted: bool = False):
        self.muted = muted

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        logger.info(f"Sound {'off' if self.muted else 'on'}")
        return self.muted

    def play(self, name: str) -> None:
        if self.muted:
            return
        try:
            self._play(name)
        except Exception as e:
            logger.debug(f"Cue '{name}' not played: {e}")

    def _play(self, name: str) -> None:
        raise NotImplementedError


class SilentAudio(AudioCue):
    """No-op backend for tests and headless runs."""

    def _play(self, name: str) -> None:
        pass


class PygameAudio(AudioCue):
    """
    pygame.mixer backend. Cue files <name>.mp3/.ogg/.wav are taken from
    `sounds_dir` when present; anything missing gets a short generated tone.
    """

    def __init__(self, sounds_dir: Optional[Path] = None, muted: bool = False):
        super().__init__(muted=muted)
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._initialized = False
        self.sounds_dir = Path(sounds_dir) if sounds_dir is not None else None

    def init(self) -> bool:
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning(f"Audio disabled: {e}")
            return False
        self._initialized = True
        for name in CUES:
            self._sounds[name] = self._load(name) or self._synthesize(name)
        logger.info(f"Audio ready ({len(self._sounds)} cues)")
        return True

    def _load(self, name: str) -> Optional[pygame.mixer.Sound]:
        if self.sounds_dir is None:
            return None
        for ext in SOUND_EXTENSIONS:
            path = self.sounds_dir / f"{name}{ext}"
            if path.exists():
                try:
                    return pygame.mixer.Sound(str(path))
                except pygame.error as e:
                    logger.warning(f"Could not load {path}: {e}")
        return None

    def _synthesize(self, name: str) -> pygame.mixer.Sound:
        """Decaying sine sweep, written for whatever channel count the mixer opened."""
        f0, f1, duration = _TONES[name]
        freq, _size, channels = pygame.mixer.get_init()
        n = int(freq * duration)
        samples = array.array("h")
        phase = 0.0
        for i in range(n):
            t = i / n
            hz = f0 + (f1 - f0) * t
            phase += 2 * math.pi * hz / freq
            value = int(math.sin(phase) * (1.0 - t) * 32767 * 0.4)
            for _ in range(channels):
                samples.append(value)
        return pygame.mixer.Sound(buffer=samples)

    def _play(self, name: str) -> None:
        if not self._initialized:
            return
        sound = self._sounds.get(name)
        if sound is None:
            logger.debug(f"Unknown cue: {name}")
            return
        # restart instead of queueing behind the previous playback
        sound.stop()
        sound.play()
