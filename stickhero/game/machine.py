# stickhero/game/machine.py
"""
Phase machine and per-frame physics.

    waiting --press--> stretching --release--> turning --(90 deg)--> walking
    walking --(landed)--> transitioning --(camera settled)--> waiting
    walking --(missed)--> falling (terminal until reset)

press / release / advance work on a World passed in explicitly, so a run
can be replayed as a list of (event, dt) pairs. StickGame owns one world
and drives advance() from a FrameQueue.
"""
from __future__ import annotations
import logging
from functools import partial
from typing import Callable, List, Optional

from .audio import AudioCue, SilentAudio
from .config import (
    STRETCH_SPEED, TURN_SPEED, WALK_SPEED, TRANSITION_SPEED, FALL_SPEED,
    TRANSITION_THRESHOLD, HERO_EDGE_OFFSET, STICK_MAX_ROTATION,
)
from .frames import FrameQueue
from .hero import Stick
from .level import PlatformGenerator, landing_platform
from .world import Phase, World

logger = logging.getLogger(__name__)

Listener = Callable[[World], None]


def press(world: World, audio: AudioCue) -> bool:
    """Start stretching. Ignored unless the hero is waiting."""
    if world.phase is not Phase.WAITING:
        logger.debug(f"press ignored in {world.phase.value}")
        return False
    world.phase = Phase.STRETCHING
    audio.play("stretch")
    return True


def release(world: World, audio: AudioCue) -> bool:
    """Let the stick drop. Ignored unless stretching."""
    if world.phase is not Phase.STRETCHING:
        logger.debug(f"release ignored in {world.phase.value}")
        return False
    world.phase = Phase.TURNING
    audio.play("drop")
    return True


def _resolve_landing(world: World, generator: PlatformGenerator) -> None:
    world.target = landing_platform(world.sticks, world.platforms)
    if world.target is not None:
        world.score += 1
        generator.extend(world.platforms)
        logger.info(f"Landed, score={world.score}")
    else:
        logger.info(f"Missed with stick length {world.active_stick.length:.1f}")


def advance(world: World, dt: float, generator: PlatformGenerator,
            audio: AudioCue) -> bool:
    """
    Apply `dt` ms of motion for the current phase.
    Returns True while another frame is wanted.
    """
    if world.game_over:
        return False
    stick = world.active_stick
    phase = world.phase

    if phase is Phase.STRETCHING:
        stick.grow(dt / STRETCH_SPEED)

    elif phase is Phase.TURNING:
        if stick.turn(dt / TURN_SPEED, limit=90.0):
            _resolve_landing(world, generator)
            world.phase = Phase.WALKING
            audio.play("walk")

    elif phase is Phase.WALKING:
        world.hero.x += dt / WALK_SPEED
        if world.target is not None:
            max_x = world.target.right - HERO_EDGE_OFFSET
            if world.hero.x > max_x:
                world.hero.x = max_x
                world.phase = Phase.TRANSITIONING
        else:
            max_x = stick.tip
            if world.hero.x > max_x:
                world.hero.x = max_x
                world.phase = Phase.FALLING

    elif phase is Phase.TRANSITIONING:
        world.camera_offset += dt / TRANSITION_SPEED
        edge = world.target.right
        if edge - world.camera_offset < TRANSITION_THRESHOLD:
            world.sticks.append(Stick(x=edge))
            world.target = None
            world.phase = Phase.WAITING

    elif phase is Phase.FALLING:
        world.hero.y += dt / FALL_SPEED
        audio.play("fall")
        # cosmetic: the stick keeps swinging down under the hero
        stick.turn(dt / TURN_SPEED, limit=STICK_MAX_ROTATION)
        if world.game_over:
            logger.info(f"Game over, score={world.score}")

    if world.phase is not phase:
        logger.debug(f"{phase.value} -> {world.phase.value}")
    return world.phase is not Phase.WAITING and not world.game_over


class StickGame:
    """
    Owns the world and schedules its frames.

    Every press and every reset opens a new run epoch; frame callbacks
    carry the epoch they were requested in, and a callback from an older
    epoch does nothing when it fires.
    """
    def __init__(self,
                 generator: Optional[PlatformGenerator] = None,
                 audio: Optional[AudioCue] = None,
                 frames: Optional[FrameQueue] = None):
        self.generator = generator if generator is not None else PlatformGenerator()
        self.audio = audio if audio is not None else SilentAudio()
        self.frames = frames if frames is not None else FrameQueue()
        self.world = World()
        self._listeners: List[Listener] = []
        self._epoch = 0
        self._last_timestamp: Optional[float] = None
        self.reset()

    # -------------------- State --------------------

    @property
    def phase(self) -> Phase:
        return self.world.phase

    @property
    def score(self) -> int:
        return self.world.score

    @property
    def game_over(self) -> bool:
        return self.world.game_over

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener(world)` after every applied frame and every reset."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self.world)

    # -------------------- Commands --------------------

    def reset(self, seed: int | None = None) -> None:
        """Start over. With a seed, the level generator is reseeded first."""
        if seed is not None:
            self.generator.reseed(seed)
        self._epoch += 1
        self._last_timestamp = None
        self.world.reset(self.generator)
        logger.debug(f"Reset (epoch {self._epoch})")
        self._notify()

    def press(self) -> bool:
        if not press(self.world, self.audio):
            return False
        self._epoch += 1
        self._last_timestamp = None
        self._request_frame()
        return True

    def release(self) -> bool:
        return release(self.world, self.audio)

    # -------------------- Frames --------------------

    def _request_frame(self) -> None:
        self.frames.request_frame(partial(self._on_frame, self._epoch))

    def _on_frame(self, epoch: int, timestamp: float) -> None:
        if epoch != self._epoch:
            logger.debug(f"Dropped stale frame from epoch {epoch}")
            return
        if self._last_timestamp is None:
            # first frame of a run only sets the time baseline
            self._last_timestamp = timestamp
            self._request_frame()
            return
        dt = max(0.0, timestamp - self._last_timestamp)
        self._last_timestamp = timestamp
        running = advance(self.world, dt, self.generator, self.audio)
        self._notify()
        if running:
            self._request_frame()
