"""Base renderer interface."""

from abc import ABC, abstractmethod
from gravity_sim.physics.body import BodySnapshot


class Renderer(ABC):
    """Abstract base class for renderers.

    Renderers only observe: they receive immutable snapshots and their
    return values are ignored by the simulation.
    """

    @abstractmethod
    def draw_body(self, body: BodySnapshot):
        """Draw one body.

        Args:
            body: Snapshot with position, radius, color and direction hint
        """
        pass

    @abstractmethod
    def clear(self):
        """Clear the drawing surface before a new frame."""
        pass

    def present(self):
        """Flush the current frame. Called once per frame after all draws."""
        pass

    def close(self):
        """Close the renderer."""
        pass
