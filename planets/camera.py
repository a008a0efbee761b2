#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms and camera focus.
"""
from typing import Optional, Tuple

from .body_store import BodyStore
from .constants import DEFAULT_ZOOM, MAX_ZOOM, MIN_ZOOM, VIEW_HEIGHT, VIEW_WIDTH, ZOOM_SPEED
from .data_models import Body
from .vector_utils import clamp


class Camera:
    """
    Simple 2D camera that keeps a world point at the viewport center.

    zoom is pixels per world unit.
    """

    def __init__(self, target=(0.0, 0.0), zoom=DEFAULT_ZOOM):
        self.target = (float(target[0]), float(target[1]))
        self.zoom = clamp(zoom, MIN_ZOOM, MAX_ZOOM)
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (w, h)

    def follow(self, position: Tuple[float, float]) -> None:
        self.target = (position[0], position[1])

    def world_to_screen(self, pos: Tuple[float, float]) -> Tuple[float, float]:
        tx, ty = self.target
        px = (pos[0] - tx) * self.zoom + self.viewport_size[0] / 2
        py = (pos[1] - ty) * self.zoom + self.viewport_size[1] / 2
        return (px, py)

    def screen_to_world(self, screen: Tuple[float, float]) -> Tuple[float, float]:
        tx, ty = self.target
        wx = (screen[0] - self.viewport_size[0] / 2) / self.zoom + tx
        wy = (screen[1] - self.viewport_size[1] / 2) / self.zoom + ty
        return (wx, wy)

    def zoom_by(self, steps: float) -> None:
        """Change zoom by mouse wheel steps, staying within [MIN_ZOOM, MAX_ZOOM]."""
        self.zoom = clamp(self.zoom + steps * ZOOM_SPEED, MIN_ZOOM, MAX_ZOOM)


class FocusTracker:
    """
    Index of the body the camera follows.

    The store shifts indices on removal; on_removed keeps the focus on the same
    body when it survives and wraps it into range otherwise.
    """

    def __init__(self, index: int = 0):
        self.index = index

    def wrap(self, count: int) -> int:
        self.index = self.index % count if count > 0 else 0
        return self.index

    def next(self, count: int) -> int:
        if count > 0:
            self.index = (self.index + 1) % count
        return self.index

    def previous(self, count: int) -> int:
        if count > 0:
            self.index = (self.index + count - 1) % count
        return self.index

    def on_removed(self, removed_index: int, count: int) -> int:
        """Remap after the body at removed_index was deleted; count is the new size."""
        if self.index > removed_index:
            self.index -= 1
        return self.wrap(count)

    def resolve(self, store: BodyStore) -> Optional[Body]:
        if len(store) == 0:
            self.index = 0
            return None
        return store[self.wrap(len(store))]
