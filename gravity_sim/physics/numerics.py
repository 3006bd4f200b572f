"""Shared numeric helpers and physical constants."""

import math
from typing import Tuple
import numpy as np

# Added to every softened distance so coincident bodies never divide by zero
DISTANCE_EPSILON = 1e-6

# Velocity components strictly below this magnitude are snapped to 0.0
ZERO_SNAP_EPSILON = 1e-6

# mass = pi * r^2 / MASS_DIVISOR
MASS_DIVISOR = 50000.0

# Two bodies collide when center distance < (r1 + r2) * COLLISION_FACTOR
COLLISION_FACTOR = 0.045


def mass_from_radius(radius: float) -> float:
    """Derive the mass of a circle from its radius."""
    return (math.pi * radius * radius) / MASS_DIVISOR


def separation(a: np.ndarray, b: np.ndarray) -> Tuple[float, float, float]:
    """Offset from ``a`` to ``b`` and the raw Euclidean distance.

    Args:
        a: Position (2,)
        b: Position (2,)

    Returns:
        Tuple of (dx, dy, distance)
    """
    dx = float(b[0] - a[0])
    dy = float(b[1] - a[1])
    return dx, dy, math.sqrt(dx * dx + dy * dy)


def softened_distance(dx: float, dy: float) -> float:
    """Euclidean length of (dx, dy) plus DISTANCE_EPSILON."""
    return math.sqrt(dx * dx + dy * dy) + DISTANCE_EPSILON


def snap_small(vector: np.ndarray) -> np.ndarray:
    """Return a copy of ``vector`` with near-zero components set to exactly 0.0."""
    snapped = np.array(vector, dtype=np.float64)
    snapped[np.abs(snapped) < ZERO_SNAP_EPSILON] = 0.0
    return snapped


def collision_threshold(radius_a: float, radius_b: float) -> float:
    """Center distance below which two bodies are considered collided."""
    return (radius_a + radius_b) * COLLISION_FACTOR
