#!/usr/bin/env python3
"""
Shared constants for the Planets simulator.

Units are simulation units: positions in world units, velocities in world
units per frame. Colors are RGBA floats in 0..1.
"""

# Physical constants
G = 0.1
RESTITUTION_COEFFICIENT = 0.3  # damping applied to every collision impulse

# Camera zoom bounds (pixels per world unit)
ZOOM_SPEED = 0.1
MIN_ZOOM = 0.1
MAX_ZOOM = 1.0
DEFAULT_ZOOM = 1.0

# Rendering (viewport)
VIEW_WIDTH = 800
VIEW_HEIGHT = 600
FPS = 60
BACKGROUND_COLOR = (0, 0, 0)
TRAIL_COLOR = (1.0, 1.0, 1.0, 0.1)
HUD_COLOR = (200, 200, 200)

# Spawn parameter defaults and editor slider ranges
DEFAULT_SPAWN_RADIUS = 10.0
DEFAULT_SPAWN_MASS = 10.0
DEFAULT_SPAWN_VELOCITY = (0.0, 0.0)
DEFAULT_SPAWN_COLOR = (1.0, 1.0, 1.0, 1.0)
RADIUS_RANGE = (1.0, 100.0)
VELOCITY_RANGE = (-100.0, 100.0)
MASS_RANGE = (1.0, 1000.0)
COLOR_RANGE = (0.0, 1.0)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
