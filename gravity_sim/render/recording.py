"""In-memory renderer that records drawn frames."""

from typing import List
from gravity_sim.physics.body import BodySnapshot
from gravity_sim.render.base import Renderer


class RecordingRenderer(Renderer):
    """Keeps every frame as a list of body snapshots.

    ``clear()`` starts a new frame. Draws issued before the first clear
    (e.g. from ``add_body``) land in an initial frame.
    """

    def __init__(self, max_frames: int = 0):
        """Initialize recorder.

        Args:
            max_frames: Keep only the most recent frames (0 keeps all)
        """
        self.max_frames = max_frames
        self.frames: List[List[BodySnapshot]] = [[]]
        self.clear_count = 0

    def draw_body(self, body: BodySnapshot):
        self.frames[-1].append(body)

    def clear(self):
        self.clear_count += 1
        self.frames.append([])
        if self.max_frames and len(self.frames) > self.max_frames:
            self.frames.pop(0)

    @property
    def last_frame(self) -> List[BodySnapshot]:
        """Most recent frame that has at least one drawn body."""
        for frame in reversed(self.frames):
            if frame:
                return frame
        return []
