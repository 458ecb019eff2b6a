# stickhero/env/observations.py
from __future__ import annotations
import numpy as np
from ..game.config import WIDTH
from ..game.world import Phase, World

OBS_SIZE = 5


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def build_observation(world: World) -> np.ndarray:
    """
    [stick_len, gap_near, gap_far, is_waiting, is_stretching], float32 in [0, 1].
    Distances are measured from the active stick's base and divided by WIDTH;
    the stick has to reach past gap_near and stay short of gap_far.
    """
    stick = world.active_stick
    nxt = world.next_platform()
    if nxt is None:
        near, far = 1.0, 1.0
    else:
        near = (nxt.x - stick.x) / WIDTH
        far = (nxt.right - stick.x) / WIDTH
    obs = np.array([
        _clamp01(stick.length / WIDTH),
        _clamp01(near),
        _clamp01(far),
        1.0 if world.phase is Phase.WAITING else 0.0,
        1.0 if world.phase is Phase.STRETCHING else 0.0,
    ], dtype=np.float32)
    return obs
