"""Physics engine: bodies, update schemes and the simulation controller."""

from gravity_sim.physics.body import Body, BodySnapshot
from gravity_sim.physics.simulation import Simulation

__all__ = ["Body", "BodySnapshot", "Simulation"]
