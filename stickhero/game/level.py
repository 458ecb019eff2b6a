# stickhero/game/level.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Protocol
from .config import (
    FIRST_PLATFORM_X, FIRST_PLATFORM_W,
    GAP_MIN_W, GAP_MAX_W, PLATFORM_MIN_W, PLATFORM_MAX_W,
)


@dataclass(frozen=True)
class Platform:
    x: float
    width: float

    @property
    def right(self) -> float:
        return self.x + self.width

    def contains(self, x: float) -> bool:
        """Open interval test: touching either edge is a miss."""
        return self.x < x < self.x + self.width


class RandomSource(Protocol):
    def random(self) -> float: ...


def first_platform() -> Platform:
    return Platform(x=FIRST_PLATFORM_X, width=FIRST_PLATFORM_W)


class PlatformGenerator:
    """
    Produces the next platform to the right of a previous one.
    The only state is the random source: every layout is reproducible from
    a seed, or from any object exposing random() -> float in [0, 1).
    """
    def __init__(self,
                 seed: int | None = None,
                 rng: Optional[RandomSource] = None,
                 min_gap: float = GAP_MIN_W,
                 max_gap: float = GAP_MAX_W,
                 min_width: float = PLATFORM_MIN_W,
                 max_width: float = PLATFORM_MAX_W):
        if min_gap < 0 or max_gap < min_gap:
            raise ValueError(f"invalid gap range [{min_gap}, {max_gap}]")
        if min_width <= 0 or max_width < min_width:
            raise ValueError(f"invalid width range [{min_width}, {max_width}]")
        self.min_gap = float(min_gap)
        self.max_gap = float(max_gap)
        self.min_width = float(min_width)
        self.max_width = float(max_width)
        self.seed = seed
        self.rng: RandomSource = rng if rng is not None else random.Random(seed)

    def reseed(self, seed: int | None) -> None:
        """Restart the source; a custom source is replaced by random.Random(seed)."""
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)

    def _draw(self, lo: float, hi: float) -> float:
        return lo + self.rng.random() * (hi - lo)

    def generate_next(self, previous: Platform) -> Platform:
        # gap first, then width
        gap = self._draw(self.min_gap, self.max_gap)
        width = self._draw(self.min_width, self.max_width)
        return Platform(x=previous.right + gap, width=width)

    def extend(self, platforms: List[Platform], count: int = 1) -> List[Platform]:
        """Append `count` new platforms after the last one, in place."""
        for _ in range(count):
            platforms.append(self.generate_next(platforms[-1]))
        return platforms


def landing_platform(sticks: Sequence, platforms: Sequence[Platform]) -> Optional[Platform]:
    """
    Platform whose span strictly contains the tip of the active (last) stick.
    Platforms never overlap, so at most one can match.
    """
    stick = sticks[-1]
    tip = stick.x + stick.length
    for platform in platforms:
        if platform.contains(tip):
            return platform
    return None
