#!/usr/bin/env python3
"""
Vector helper functions for the planet physics step and camera.

Positions and velocities are plain (x, y) tuples; the physics step needs the
squared length for its overlap test and the unit direction between bodies.
"""
import math
from typing import Tuple

Vec2 = Tuple[float, float]


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def vec_add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def vec_sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def vec_scale(a: Vec2, s: float) -> Vec2:
    return (a[0] * s, a[1] * s)


def vec_dot(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def vec_len_sq(a: Vec2) -> float:
    return a[0] * a[0] + a[1] * a[1]


def vec_len(a: Vec2) -> float:
    return math.hypot(a[0], a[1])


def vec_norm(a: Vec2) -> Vec2:
    """Unit vector along a; the zero vector maps to (0, 0)."""
    l = vec_len(a)
    if l == 0:
        return (0.0, 0.0)
    return (a[0] / l, a[1] / l)
