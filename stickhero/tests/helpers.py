# stickhero/tests/helpers.py
"""Shared doubles for the test scripts."""
from __future__ import annotations
from itertools import cycle
from typing import Iterable, List

from stickhero.game.audio import AudioCue


class FixedSource:
    """Random source replaying a fixed cycle of draws."""
    def __init__(self, values: Iterable[float]):
        self._values = cycle(list(values))

    def random(self) -> float:
        return next(self._values)


class RecordingAudio(AudioCue):
    """Remembers every cue that reached the backend."""
    def __init__(self, muted: bool = False):
        super().__init__(muted=muted)
        self.played: List[str] = []

    def _play(self, name: str) -> None:
        self.played.append(name)


class BrokenAudio(AudioCue):
    def _play(self, name: str) -> None:
        raise RuntimeError("no audio device")
