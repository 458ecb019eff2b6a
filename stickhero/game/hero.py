# stickhero/game/hero.py
from __future__ import annotations
from dataclasses import dataclass
from .config import STICK_MAX_ROTATION


@dataclass
class Hero:
    """
    x: world x of the hero's left side
    y: drop below ground level (0 = standing, grows while falling)
    """
    x: float
    y: float = 0.0


@dataclass
class Stick:
    x: float                 # base, fixed at creation
    length: float = 0.0
    rotation: float = 0.0    # degrees: 0 upright, 90 bridging, 180 hanging down

    @property
    def tip(self) -> float:
        """World x the tip reaches once laid flat."""
        return self.x + self.length

    def grow(self, amount: float) -> None:
        self.length += max(0.0, amount)

    def turn(self, degrees: float, limit: float = STICK_MAX_ROTATION) -> bool:
        """Rotate clockwise, clamped at `limit`. Returns True once the limit is reached."""
        self.rotation = min(limit, self.rotation + degrees)
        return self.rotation >= limit
