#!/usr/bin/env python3
"""
Core Physics Engine for the Planets simulator

Responsibilities
- Accumulate pairwise gravitational acceleration for every body.
- Resolve overlaps with a damped 1D impulse along the collision normal.
- Integrate one frame with explicit velocity-then-position updates.

Conventions
- One step advances exactly one frame; velocities are in world units per frame.
- Acceleration is G * m_other * m_self / d^2. It keeps the self mass, so heavier
  bodies accelerate faster than under Newtonian mechanics.
- Self-exclusion is by exact position equality: two bodies sharing a position
  ignore each other entirely.

Ordering
- A snapshot of every body's position, velocity, mass and radius is taken at the
  start of the frame. Each live body is then updated in store order against the
  snapshot, visited in reverse index order. A collision pushes the live body's
  velocity immediately and pushes the snapshot entry of the other body, so bodies
  processed later in the same frame see that change. Results therefore depend on
  store order.

Numerical notes
- Complexity is O(N^2) per frame; intended for a handful of bodies.
- A separation that is nonzero but underflows to a zero squared distance yields an
  infinite force. NaN and infinity are propagated, not trapped.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

from .constants import G, RESTITUTION_COEFFICIENT
from .data_models import Body
from .vector_utils import clamp, vec_add, vec_dot, vec_len_sq, vec_norm, vec_scale, vec_sub


@dataclass
class _FrameState:
    """Frame-start copy of the fields the pairwise pass reads."""
    position: Tuple[float, float]
    velocity: Tuple[float, float]
    mass: float
    radius: float


class PlanetPhysics:
    """
    Pairwise gravity and collision engine.

    The force between two bodies is:
    F = G * (m1 * m2 / r^2) along r_hat

    and an overlapping pair exchanges an impulse:
    J = (2 * m1 * m2 / (m1 + m2)) * dot(v1 - v2, n) * e
    """

    def __init__(self, gravity: float = G, restitution: float = RESTITUTION_COEFFICIENT):
        """
        Initialize the physics engine.

        Args:
            gravity: Gravitational constant in simulation units
            restitution: Collision damping factor, clamped to [0, 1]
        """
        self.gravity = float(gravity)
        self.restitution = clamp(float(restitution), 0.0, 1.0)

    def set_gravity(self, gravity: float) -> None:
        self.gravity = float(gravity)

    def set_restitution(self, restitution: float) -> None:
        self.restitution = clamp(float(restitution), 0.0, 1.0)

    def force_magnitude(self, mass_self: float, mass_other: float, distance_squared: float) -> float:
        """Gravitational term added to the acceleration of the body with mass_self."""
        if distance_squared == 0.0:
            return math.inf
        return self.gravity * ((mass_other * mass_self) / distance_squared)

    def collision_impulse(self, mass_self: float, mass_other: float,
                          relative_velocity: Tuple[float, float],
                          collision_normal: Tuple[float, float]) -> float:
        """Damped impulse magnitude along the collision normal."""
        impulse = (2.0 * mass_self * mass_other) / (mass_self + mass_other) \
            * vec_dot(relative_velocity, collision_normal)
        return impulse * self.restitution

    def step(self, bodies: List[Body]) -> None:
        """
        Advance every body by one frame, in place.

        Args:
            bodies: Bodies in store order (modified in place).
        """
        if not bodies:
            return

        frame = [_FrameState(b.position, b.velocity, b.mass, b.radius) for b in bodies]

        for body in bodies:
            self._update_body(body, frame)

    def _update_body(self, body: Body, frame: List[_FrameState]) -> None:
        acceleration = (0.0, 0.0)

        for other in reversed(frame):
            if body.position == other.position:
                continue

            direction = vec_sub(other.position, body.position)
            distance_squared = vec_len_sq(direction)
            force = self.force_magnitude(body.mass, other.mass, distance_squared)

            acceleration = vec_add(acceleration, vec_scale(vec_norm(direction), force))

            if distance_squared <= (body.radius + other.radius) ** 2:
                collision_normal = vec_norm(direction)
                relative_velocity = vec_sub(body.velocity, other.velocity)
                impulse = self.collision_impulse(body.mass, other.mass,
                                                 relative_velocity, collision_normal)

                body.velocity = vec_sub(body.velocity, vec_scale(collision_normal, impulse))
                other.velocity = vec_add(other.velocity, vec_scale(collision_normal, impulse))

        body.velocity = vec_add(body.velocity, acceleration)
        body.position = vec_add(body.position, body.velocity)

        body.add_history_point()


_default_physics = PlanetPhysics()


def step(bodies: List[Body]) -> None:
    """Advance bodies one frame with the default constants."""
    _default_physics.step(bodies)
