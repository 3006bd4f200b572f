"""Circular point-mass body with in-place pairwise gravity update."""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import numpy as np
from gravity_sim.physics.numerics import (
    mass_from_radius,
    separation,
    snap_small,
    softened_distance,
)

logger = logging.getLogger(__name__)

# Velocity is scaled by this factor to get the arrow endpoint drawn by renderers
DIRECTION_HINT_SCALE = 20.0


@dataclass(frozen=True)
class BodySnapshot:
    """Immutable copy of a body's state handed to renderers and observers."""
    name: Optional[str]
    color: str
    position: Tuple[float, float]
    velocity: Tuple[float, float]
    radius: float
    mass: float
    direction_hint: Tuple[float, float]


class Body:
    """A circle with position, velocity, radius and a mass derived from the radius.

    Bodies never hold references to each other. Pairwise interaction happens
    by passing the full collection into :meth:`update`.
    """

    def __init__(
        self,
        x: float,
        y: float,
        radius: float,
        color: str,
        velocity: Sequence[float],
        name: Optional[str] = None
    ):
        """Initialize body.

        Args:
            x: Initial x coordinate
            y: Initial y coordinate
            radius: Circle radius (> 0), determines the mass
            color: Rendering label, no physical effect
            velocity: Initial (vx, vy)
            name: Identifier used to look up reset parameters
        """
        self.position = np.array([x, y], dtype=np.float64)
        self.velocity = np.array(velocity, dtype=np.float64).reshape(2)
        self.color = color
        self.name = name
        self._radius = 0.0
        self._mass = 0.0
        self.radius = radius

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float):
        value = float(value)
        if not value > 0:
            raise ValueError(f"Body radius must be positive, got {value}")
        self._radius = value
        self._mass = mass_from_radius(value)

    @property
    def mass(self) -> float:
        """Mass, always pi * radius^2 / 50000."""
        return self._mass

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    def pairwise_gravity(self, other: "Body") -> np.ndarray:
        """Gravity vector pulling this body toward ``other``.

        Args:
            other: Attracting body

        Returns:
            Force vector (2,)
        """
        dx, dy, _ = separation(self.position, other.position)
        distance = softened_distance(dx, dy)
        force = (self.mass * other.mass) / (distance * distance)
        angle = math.atan2(dy, dx)
        return np.array([force * math.cos(angle), force * math.sin(angle)])

    def update(self, bodies: Sequence["Body"]):
        """Accumulate gravity from every other body, then integrate one unit step.

        Both sides of each pair receive their impulse immediately, so the
        velocities of the other bodies are mutated in place too.

        Args:
            bodies: Full body collection, may contain this body
        """
        for other in bodies:
            if other is self:
                continue
            gravity = self.pairwise_gravity(other)
            self.velocity += gravity / self.mass
            other.velocity -= gravity / other.mass

        self.velocity[:] = snap_small(self.velocity)
        self.position += self.velocity
        logger.debug("%s moved to (%s, %s)", self.name or self.color, self.x, self.y)

    def reset(self, x: float, y: float, radius: float, velocity: Sequence[float]):
        """Overwrite position, radius and velocity. Mass follows the radius."""
        self.radius = radius
        self.position = np.array([x, y], dtype=np.float64)
        self.velocity = np.array(velocity, dtype=np.float64).reshape(2)

    def distance_to(self, other: "Body") -> float:
        """Raw center-to-center distance (no epsilon)."""
        return separation(self.position, other.position)[2]

    def snapshot(self) -> BodySnapshot:
        """Return an immutable copy of the current state."""
        hint = self.position + self.velocity * DIRECTION_HINT_SCALE
        return BodySnapshot(
            name=self.name,
            color=self.color,
            position=(self.x, self.y),
            velocity=(float(self.velocity[0]), float(self.velocity[1])),
            radius=self.radius,
            mass=self.mass,
            direction_hint=(float(hint[0]), float(hint[1])),
        )

    def __repr__(self):
        return (
            f"Body(name={self.name!r}, position=({self.x}, {self.y}), "
            f"velocity=({self.velocity[0]}, {self.velocity[1]}), radius={self.radius})"
        )
