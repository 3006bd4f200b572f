"""
Gravity Simulator - pairwise gravity between a few circles until they collide.

Features:
- Order-dependent in-place update scheme, plus an order-independent snapshot scheme
- Collision detection that halts the simulation
- Deterministic and real-time tick schedulers
- 2D matplotlib rendering
- JSON/YAML configuration and a CLI
"""

__version__ = "0.1.0"

from gravity_sim.physics.body import Body
from gravity_sim.physics.simulation import Simulation
from gravity_sim.utils.config import Config, load_config

__all__ = [
    "Body",
    "Simulation",
    "Config",
    "load_config",
]
