#!/usr/bin/env python3
"""
Authoritative, ordered collection of planets.

Bodies are kept in insertion order; that order is also the order the physics
step processes them in. Removal shifts later indices down by one. The store
does not know about any focused index held by the camera; callers remap it.
"""
import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from .data_models import Body, Color
from .physics import PlanetPhysics

logger = logging.getLogger("planets.store")


class BodyStore:
    """Ordered, mutable set of bodies plus the engine that steps them."""

    def __init__(self, physics: Optional[PlanetPhysics] = None):
        self.bodies: List[Body] = []
        self.physics = physics if physics is not None else PlanetPhysics()

    def __len__(self) -> int:
        return len(self.bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self.bodies)

    def __getitem__(self, index: int) -> Body:
        return self.bodies[index]

    def spawn(self, position: Tuple[float, float], radius: float,
              velocity: Tuple[float, float], mass: float, color: Sequence[float]) -> Body:
        """Append a new body with an empty history and return it."""
        body = Body(position=position, radius=radius, velocity=velocity, mass=mass, color=color)
        self.bodies.append(body)
        logger.debug("Spawned planet %d at (%.2f, %.2f) mass=%g radius=%g",
                     len(self.bodies) - 1, body.position[0], body.position[1], body.mass, body.radius)
        return body

    def remove(self, index: int) -> Body:
        """
        Delete the body at index and return it.

        Raises IndexError when index is outside [0, len); nothing is removed then.
        """
        if not 0 <= index < len(self.bodies):
            raise IndexError(f"no planet at index {index} (have {len(self.bodies)})")
        body = self.bodies.pop(index)
        logger.debug("Removed planet %d, %d left", index, len(self.bodies))
        return body

    def clear(self) -> None:
        self.bodies.clear()

    def newest_first(self) -> Iterator[Tuple[int, Body]]:
        """Yield (index, body) pairs, most recently spawned first."""
        for i in range(len(self.bodies) - 1, -1, -1):
            yield i, self.bodies[i]

    def step(self) -> None:
        """Advance all bodies one frame."""
        self.physics.step(self.bodies)

    # Read accessors by index

    def position(self, index: int) -> Tuple[float, float]:
        return self.bodies[index].position

    def velocity(self, index: int) -> Tuple[float, float]:
        return self.bodies[index].velocity

    def mass(self, index: int) -> float:
        return self.bodies[index].mass

    def radius(self, index: int) -> float:
        return self.bodies[index].radius

    def color(self, index: int) -> Color:
        return self.bodies[index].color

    def history(self, index: int) -> Tuple[Tuple[float, float], ...]:
        return tuple(self.bodies[index].history)
