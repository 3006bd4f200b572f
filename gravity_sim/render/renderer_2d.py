"""2D renderer using matplotlib."""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from typing import Optional, Tuple
from gravity_sim.physics.body import BodySnapshot
from gravity_sim.render.base import Renderer


class Renderer2D(Renderer):
    """Draws bodies as circles with velocity arrows on fixed axes."""

    def __init__(
        self,
        xlim: Tuple[float, float] = (-10.0, 10.0),
        ylim: Tuple[float, float] = (-10.0, 10.0),
        figsize: Tuple[int, int] = (5, 5),
        dpi: int = 100,
        show: bool = True
    ):
        """Initialize 2D renderer.

        Args:
            xlim: Data range of the x axis
            ylim: Data range of the y axis
            figsize: Figure size (width, height)
            dpi: Dots per inch
            show: Open an interactive window (False for offscreen use)
        """
        self.xlim = xlim
        self.ylim = ylim
        self.figsize = figsize
        self.dpi = dpi
        self.show = show

        self.fig: Optional[Figure] = None
        self.ax = None
        self.initialized = False

    def _initialize(self):
        """Create the figure if not already done."""
        if not self.initialized:
            self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
            self._draw_axes()
            if self.show:
                plt.show(block=False)
            self.initialized = True

    def _draw_axes(self):
        self.ax.set_xlim(*self.xlim)
        self.ax.set_ylim(*self.ylim)
        self.ax.set_aspect('equal')
        self.ax.grid(True, alpha=0.3)
        # Axes cross at the origin like a coordinate graph
        self.ax.axhline(0.0, color='black', linewidth=0.8)
        self.ax.axvline(0.0, color='black', linewidth=0.8)

    def _pixels_to_points(self, pixels: float) -> float:
        return pixels * 72.0 / self.dpi

    def draw_body(self, body: BodySnapshot):
        """Draw a circle of ``body.radius`` pixels and its direction arrow."""
        self._initialize()
        x, y = body.position
        hx, hy = body.direction_hint
        self.ax.plot(
            [x], [y], 'o',
            color=body.color,
            markersize=self._pixels_to_points(2.0 * body.radius),
        )
        self.ax.plot([x, hx], [y, hy], color='black', linewidth=2)

    def clear(self):
        """Remove all artists and redraw the axes."""
        self._initialize()
        self.ax.clear()
        self._draw_axes()

    def present(self):
        if self.fig is None:
            return
        if self.show:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array (H, W, 3) uint8."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Draw a body first.")

        self.fig.canvas.draw()
        buf = np.asarray(self.fig.canvas.buffer_rgba())
        return np.array(buf[:, :, :3], dtype=np.uint8)

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.initialized = False
