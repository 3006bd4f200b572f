"""Rendering of simulation frames."""

from gravity_sim.render.base import Renderer
from gravity_sim.render.recording import RecordingRenderer
from gravity_sim.render.renderer_2d import Renderer2D

__all__ = ["Renderer", "RecordingRenderer", "Renderer2D"]
