# stickhero/game/controls.py
from __future__ import annotations
import logging
from typing import Optional
import pygame
from pygame import K_SPACE, K_r, K_m
from .audio import AudioCue
from .config import WIDTH, HEIGHT
from .machine import StickGame
from .world import Phase

logger = logging.getLogger(__name__)


class InputController:
    """
    Turns pygame events into game commands.

    Pointer/touch/space down -> press, up -> release. pygame also emits mouse
    events for every touch (event.touch is True); those are skipped so a
    finger is handled once, through FINGERDOWN/FINGERUP.
    """
    def __init__(self, game: StickGame, audio: Optional[AudioCue] = None,
                 restart_rect: Optional[pygame.Rect] = None):
        self.game = game
        self.audio = audio if audio is not None else game.audio
        self.restart_rect = restart_rect

    def handle(self, event: pygame.event.Event) -> bool:
        """Returns True when the event was turned into a command."""
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if getattr(event, "touch", False) or event.button != 1:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN:
                if self._on_restart(event.pos):
                    return self.restart()
                return self.begin()
            return self.end()

        if event.type == pygame.FINGERDOWN:
            # finger coordinates are normalized to [0, 1]
            if self._on_restart((int(event.x * WIDTH), int(event.y * HEIGHT))):
                return self.restart()
            return self.begin()
        if event.type == pygame.FINGERUP:
            return self.end()

        if event.type == pygame.KEYDOWN:
            if event.key == K_SPACE:
                return self.begin()
            if event.key == K_r:
                return self.restart()
            if event.key == K_m:
                self.audio.toggle_mute()
                return True
        if event.type == pygame.KEYUP and event.key == K_SPACE:
            return self.end()
        return False

    def _on_restart(self, pos) -> bool:
        return (self.game.game_over and self.restart_rect is not None
                and self.restart_rect.collidepoint(pos))

    def begin(self) -> bool:
        if self.game.phase is not Phase.WAITING:
            return False
        return self.game.press()

    def end(self) -> bool:
        if self.game.phase is not Phase.STRETCHING:
            return False
        return self.game.release()

    def restart(self) -> bool:
        logger.info("Restart requested")
        self.game.reset()
        return True
