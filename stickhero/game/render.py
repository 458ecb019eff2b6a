# stickhero/game/render.py
from __future__ import annotations
import math
from typing import Optional, Tuple
import pygame
from .config import (
    WIDTH, HEIGHT, PLATFORM_HEIGHT, STICK_WIDTH, HERO_W, HERO_H,
    COLOR_BG, COLOR_FG, COLOR_PLAT, COLOR_PLAT_EDGE, COLOR_HERO, COLOR_HERO_HEAD,
    COLOR_STICK, COLOR_BUTTON, COLOR_BUTTON_EDGE,
)
from .hero import Hero, Stick
from .level import Platform
from .world import World

GROUND_Y = HEIGHT - PLATFORM_HEIGHT

Point = Tuple[float, float]


def platform_rect(platform: Platform, camera_offset: float = 0.0) -> pygame.Rect:
    return pygame.Rect(int(platform.x - camera_offset), GROUND_Y,
                       max(1, int(round(platform.width))), PLATFORM_HEIGHT + 10)


def hero_rect(hero: Hero, camera_offset: float = 0.0) -> pygame.Rect:
    """Hero body on screen: standing on the ground, lowered by hero.y while falling."""
    top = GROUND_Y - HERO_H + hero.y
    return pygame.Rect(int(hero.x - camera_offset), int(top), HERO_W, HERO_H)


def stick_segment(stick: Stick, camera_offset: float = 0.0) -> Tuple[Point, Point]:
    """
    Base and tip on screen. Rotation is clockwise from upright:
    0 deg points up, 90 deg lies flat to the right, 180 deg hangs down.
    """
    base = (stick.x - camera_offset, float(GROUND_Y))
    rad = math.radians(stick.rotation)
    tip = (base[0] + stick.length * math.sin(rad),
           base[1] - stick.length * math.cos(rad))
    return base, tip


def restart_button_rect() -> pygame.Rect:
    btn_w, btn_h = 150, 50
    return pygame.Rect((WIDTH - btn_w) // 2, (HEIGHT - btn_h) // 2, btn_w, btn_h)


class Renderer:
    """Paints a World onto a surface. Never writes to the world."""

    def __init__(self, surface: pygame.Surface, font: Optional[pygame.font.Font] = None):
        self.surface = surface
        self.font = font

    def draw(self, world: World) -> None:
        self.surface.fill(COLOR_BG)
        cam = world.camera_offset
        for platform in world.platforms:
            self._draw_platform(platform, cam)
        self._draw_hero(world.hero, cam)
        for stick in world.sticks:
            base, tip = stick_segment(stick, cam)
            pygame.draw.line(self.surface, COLOR_STICK, base, tip, STICK_WIDTH)

    def _draw_platform(self, platform: Platform, cam: float) -> None:
        rect = platform_rect(platform, cam)
        if rect.right < 0 or rect.left > WIDTH:
            return
        pygame.draw.rect(self.surface, COLOR_PLAT, rect)
        pygame.draw.rect(self.surface, COLOR_PLAT_EDGE,
                         pygame.Rect(rect.left, GROUND_Y + 10, rect.width, 5))

    def _draw_hero(self, hero: Hero, cam: float) -> None:
        body = hero_rect(hero, cam)
        pygame.draw.rect(self.surface, COLOR_HERO, body)
        head = pygame.Rect(body.left + 5, body.top - 8, 10, 8)
        pygame.draw.rect(self.surface, COLOR_HERO_HEAD, head)

    def draw_hud(self, world: World, muted: bool) -> None:
        if self.font is None:
            return
        score = self.font.render(str(world.score), True, COLOR_FG)
        self.surface.blit(score, (WIDTH - score.get_width() - 12, 10))
        sound = self.font.render("Sound Off (M)" if muted else "Sound On (M)", True, COLOR_FG)
        self.surface.blit(sound, (12, 10))

        if world.game_over:
            rect = restart_button_rect()
            pygame.draw.rect(self.surface, COLOR_BUTTON, rect, border_radius=10)
            pygame.draw.rect(self.surface, COLOR_BUTTON_EDGE, rect, width=2, border_radius=10)
            txt = self.font.render("Restart (R)", True, (220, 235, 255))
            self.surface.blit(txt, (rect.centerx - txt.get_width() // 2,
                                    rect.centery - txt.get_height() // 2))
