# stickhero/game/frames.py
from __future__ import annotations
from typing import Callable, List

FrameCallback = Callable[[float], None]


class FrameQueue:
    """
    Explicit stand-in for a display's "call me on the next frame" hook.
    Whoever owns the clock (pygame loop, RL env, tests) calls run_frame()
    with a timestamp in ms; every callback requested before that call runs
    exactly once. Callbacks requested while running wait for the next frame.
    """
    def __init__(self):
        self._pending: List[FrameCallback] = []

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_frame(self, timestamp: float) -> int:
        """Run the callbacks due this frame; returns how many ran."""
        due, self._pending = self._pending, []
        for callback in due:
            callback(timestamp)
        return len(due)

    def clear(self) -> None:
        self._pending.clear()
