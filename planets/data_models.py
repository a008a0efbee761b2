#!/usr/bin/env python3
"""
Data models for the Planets simulator.

This module defines the Body dataclass shared between physics, rendering, and UI,
and the SpawnParams record edited by the Planet Creator panel.

Units and usage
- position is in world units, velocity in world units per frame.
- history stores every past position for trail rendering; it only grows.
- color is an RGBA tuple of floats in 0..1.
"""
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .constants import (
    DEFAULT_SPAWN_COLOR,
    DEFAULT_SPAWN_MASS,
    DEFAULT_SPAWN_RADIUS,
    DEFAULT_SPAWN_VELOCITY,
)
from .vector_utils import clamp

Color = Tuple[float, float, float, float]


def coerce_color(c: Sequence[float]) -> Color:
    """Clamp an RGB or RGBA sequence into an RGBA tuple of floats in 0..1."""
    if len(c) not in (3, 4):
        raise ValueError(f"color needs 3 or 4 channels, got {len(c)}")
    channels = [clamp(float(v), 0.0, 1.0) for v in c]
    if len(channels) == 3:
        channels.append(1.0)
    return (channels[0], channels[1], channels[2], channels[3])


@dataclass
class Body:
    """
    A planet in the simulation.

    Fields:
    - position: 2D center (x, y)
    - radius: drawing and collision radius, > 0
    - velocity: 2D velocity (vx, vy) per frame
    - mass: > 0
    - color: RGBA tuple used for rendering
    - history: past positions, oldest first
    """
    position: Tuple[float, float]
    radius: float
    velocity: Tuple[float, float]
    mass: float
    color: Color = DEFAULT_SPAWN_COLOR
    history: List[Tuple[float, float]] = field(default_factory=list)

    def __post_init__(self):
        if not self.mass > 0:
            raise ValueError(f"mass must be positive, got {self.mass}")
        if not self.radius > 0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        self.position = (float(self.position[0]), float(self.position[1]))
        self.velocity = (float(self.velocity[0]), float(self.velocity[1]))
        self.mass = float(self.mass)
        self.radius = float(self.radius)
        self.color = coerce_color(self.color)

    def add_history_point(self) -> None:
        """Append the current position to the history."""
        self.history.append(self.position)


@dataclass
class SpawnParams:
    """Parameters for the next planet spawned from the editor."""
    radius: float = DEFAULT_SPAWN_RADIUS
    velocity: Tuple[float, float] = DEFAULT_SPAWN_VELOCITY
    mass: float = DEFAULT_SPAWN_MASS
    color: Color = DEFAULT_SPAWN_COLOR
