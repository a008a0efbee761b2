#!/usr/bin/env python3
"""
Pygame viewport: input mapping and drawing.

The renderer never changes physics state while drawing. Input handling may spawn
planets (right click, when spawning is enabled in the editor), move the camera
focus (Z/X), zoom (mouse wheel) and request the editor panel toggle (U).
"""
import logging
from typing import List, Optional, Sequence, Tuple

import pygame
from pygame import gfxdraw

from .body_store import BodyStore
from .camera import Camera, FocusTracker
from .constants import (
    BACKGROUND_COLOR,
    FPS,
    HUD_COLOR,
    SAFE_COORD_LIMIT,
    TRAIL_COLOR,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from .data_models import SpawnParams

logger = logging.getLogger("planets.renderer")

HELP_LINE = "Right click: spawn (if enabled) | Z/X: next/prev planet | Wheel: zoom | U: toggle panel"


def to_rgba255(color: Sequence[float]) -> Tuple[int, int, int, int]:
    """Convert a 0..1 float color to 0..255 ints for pygame."""
    return tuple(int(round(max(0.0, min(1.0, c)) * 255)) for c in color)


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(pt[0]), int(pt[1])
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


class PygameRenderer:
    """
    Pygame loop pieces: event handling, trails, bodies, HUD.
    """

    def __init__(self, store: BodyStore, camera: Camera, focus: FocusTracker):
        self.store = store
        self.camera = camera
        self.focus = focus
        self.surface = None
        self.trail_layer = None
        self.clock = None
        self.font = None
        self.running = True
        self.toggle_ui_requested = False

    def open(self, width: int = VIEW_WIDTH, height: int = VIEW_HEIGHT) -> None:
        pygame.init()
        pygame.display.set_caption("Planets")
        self._resize(width, height)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 20)
        logger.info("Viewport opened at %dx%d", width, height)

    def close(self) -> None:
        pygame.quit()

    def _resize(self, width: int, height: int) -> None:
        self.surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.trail_layer = pygame.Surface((width, height), pygame.SRCALPHA)
        self.camera.set_viewport_size(width, height)

    def handle_events(self, params: SpawnParams, spawn_on_click: bool) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)

            elif event.type == pygame.MOUSEWHEEL:
                self.camera.zoom_by(event.y)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 3 and spawn_on_click:
                    world = self.camera.screen_to_world(event.pos)
                    try:
                        self.store.spawn(world, params.radius, params.velocity, params.mass, params.color)
                    except ValueError as exc:
                        logger.warning("Spawn rejected: %s", exc)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_z:
                    self.focus.next(len(self.store))
                elif event.key == pygame.K_x:
                    self.focus.previous(len(self.store))
                elif event.key == pygame.K_u:
                    self.toggle_ui_requested = True

    def draw_trails(self) -> None:
        layer = self.trail_layer
        layer.fill((0, 0, 0, 0))
        trail_color = to_rgba255(TRAIL_COLOR)
        for b in self.store:
            if len(b.history) < 2:
                continue
            pts: List[Tuple[int, int]] = []
            for p in b.history:
                sp = _safe_point(self.camera.world_to_screen(p))
                if sp:
                    pts.append(sp)
            if len(pts) > 1:
                pygame.draw.lines(layer, trail_color, False, pts, 1)
        self.surface.blit(layer, (0, 0))

    def draw_bodies(self) -> None:
        for b in self.store:
            screen_pos = _safe_point(self.camera.world_to_screen(b.position))
            if screen_pos is None:
                continue
            vis_r = max(1, int(b.radius * self.camera.zoom))
            color = to_rgba255(b.color)
            gfxdraw.filled_circle(self.surface, screen_pos[0], screen_pos[1], vis_r, color)
            gfxdraw.aacircle(self.surface, screen_pos[0], screen_pos[1], vis_r, color)

    def draw_text(self, text: str, x: int, y: int) -> None:
        img = self.font.render(text, True, HUD_COLOR)
        self.surface.blit(img, (x, y))

    def draw(self) -> None:
        self.surface.fill(BACKGROUND_COLOR)
        self.draw_trails()
        self.draw_bodies()

        count = len(self.store)
        focus = f"{self.focus.index + 1}/{count}" if count else "-"
        self.draw_text(HELP_LINE, 10, 10)
        self.draw_text(f"Planets: {count}  Focus: {focus}  Zoom: {self.camera.zoom:.1f}", 10, 30)

        pygame.display.flip()

    def tick(self) -> None:
        self.clock.tick(FPS)
