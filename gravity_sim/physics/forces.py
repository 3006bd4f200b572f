"""Update schemes advancing a body collection by one tick.

``sequential`` mutates bodies in collection order, so later bodies see
peers that were already updated during the same tick. ``snapshot``
evaluates every force from the tick-start positions and applies all
impulses at once; it produces different trajectories from the first tick on.
"""

from typing import Callable, Dict, Sequence
import numpy as np
from gravity_sim.physics.body import Body
from gravity_sim.physics.numerics import snap_small


def sequential_update(bodies: Sequence[Body]):
    """Call ``Body.update`` on each body in order against the live collection."""
    for body in bodies:
        body.update(bodies)


def snapshot_update(bodies: Sequence[Body]):
    """Order-independent variant of the sequential scheme.

    Pairs are enumerated the same way (each body against every other body,
    both sides receiving the impulse) but positions stay frozen until all
    impulses are known.
    """
    n = len(bodies)
    delta_v = np.zeros((n, 2), dtype=np.float64)

    for i, body in enumerate(bodies):
        for j, other in enumerate(bodies):
            if other is body:
                continue
            gravity = body.pairwise_gravity(other)
            delta_v[i] += gravity / body.mass
            delta_v[j] -= gravity / other.mass

    for i, body in enumerate(bodies):
        body.velocity[:] = snap_small(body.velocity + delta_v[i])
        body.position += body.velocity


UPDATE_SCHEMES: Dict[str, Callable[[Sequence[Body]], None]] = {
    "sequential": sequential_update,
    "snapshot": snapshot_update,
}


def get_update_scheme(name: str) -> Callable[[Sequence[Body]], None]:
    """Look up an update scheme by name."""
    scheme = UPDATE_SCHEMES.get(name.lower())
    if scheme is None:
        raise ValueError(f"Unknown update scheme: {name}. Available: {list(UPDATE_SCHEMES.keys())}")
    return scheme
