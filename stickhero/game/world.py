# stickhero/game/world.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
from .config import (
    PLATFORM_HEIGHT, FALL_MARGIN, HERO_EDGE_OFFSET, START_PLATFORMS
)
from .hero import Hero, Stick
from .level import Platform, PlatformGenerator, first_platform


class Phase(Enum):
    WAITING = "waiting"
    STRETCHING = "stretching"
    TURNING = "turning"
    WALKING = "walking"
    TRANSITIONING = "transitioning"
    FALLING = "falling"


@dataclass
class World:
    """
    Everything that makes up a run. Plain storage: the state machine is the
    only writer, the renderer and the RL observation only read.
    """
    platforms: List[Platform] = field(default_factory=list)
    sticks: List[Stick] = field(default_factory=list)
    hero: Hero = field(default_factory=lambda: Hero(x=0.0))
    camera_offset: float = 0.0
    score: int = 0
    phase: Phase = Phase.WAITING
    target: Optional[Platform] = None   # platform the active stick landed on

    @classmethod
    def fresh(cls, generator: PlatformGenerator) -> "World":
        world = cls()
        world.reset(generator)
        return world

    def reset(self, generator: PlatformGenerator) -> None:
        first = first_platform()
        self.platforms = [first]
        generator.extend(self.platforms, START_PLATFORMS - 1)
        self.hero = Hero(x=first.right - HERO_EDGE_OFFSET, y=0.0)
        self.sticks = [Stick(x=first.right)]
        self.camera_offset = 0.0
        self.score = 0
        self.phase = Phase.WAITING
        self.target = None

    @property
    def active_stick(self) -> Stick:
        return self.sticks[-1]

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.FALLING and self.hero.y > PLATFORM_HEIGHT + FALL_MARGIN

    def next_platform(self) -> Optional[Platform]:
        """First platform starting right of the active stick's base."""
        base = self.active_stick.x
        for platform in self.platforms:
            if platform.x > base:
                return platform
        return None
