"""Tests for the Body model and update schemes."""

import math
import numpy as np
import pytest
from gravity_sim.physics.body import Body
from gravity_sim.physics.forces import get_update_scheme, sequential_update, snapshot_update
from gravity_sim.physics.numerics import DISTANCE_EPSILON, snap_small


def test_mass_derived_from_radius():
    """Mass is pi * r^2 / 50000 for any positive radius."""
    for r in [0.5, 1.0, 10.0, 20.0, 123.456]:
        body = Body(0.0, 0.0, r, "red", (0.0, 0.0))
        assert body.mass == math.pi * r * r / 50000


def test_mass_follows_radius_change():
    """Changing the radius recomputes the mass."""
    body = Body(0.0, 0.0, 10.0, "red", (0.0, 0.0))
    body.radius = 20.0
    assert body.mass == math.pi * 20.0 * 20.0 / 50000


def test_non_positive_radius_rejected():
    """A body needs a strictly positive radius."""
    with pytest.raises(ValueError):
        Body(0.0, 0.0, 0.0, "red", (0.0, 0.0))
    body = Body(0.0, 0.0, 1.0, "red", (0.0, 0.0))
    with pytest.raises(ValueError):
        body.reset(0.0, 0.0, -1.0, (0.0, 0.0))
    assert body.radius == 1.0


def test_single_pair_momentum_pairing():
    """mass_a * dv_a == -mass_b * dv_b for one isolated pair update."""
    a = Body(0.0, 0.0, 10.0, "red", (0.0, 0.0))
    b = Body(5.0, 0.0, 20.0, "green", (0.0, 0.0))
    va0 = a.velocity.copy()
    vb0 = b.velocity.copy()

    a.update([a, b])

    dva = a.velocity - va0
    dvb = b.velocity - vb0
    assert np.allclose(a.mass * dva, -b.mass * dvb, rtol=1e-12, atol=0.0)
    # Attraction: a is pulled toward +x, b toward -x
    assert dva[0] > 0
    assert dvb[0] < 0


def test_pairwise_gravity_magnitude():
    """Force is m1*m2 / (d + eps)^2 along the line of centers."""
    a = Body(0.0, 0.0, 10.0, "red", (0.0, 0.0))
    b = Body(3.0, 4.0, 10.0, "green", (0.0, 0.0))
    gravity = a.pairwise_gravity(b)
    expected = a.mass * b.mass / (5.0 + DISTANCE_EPSILON) ** 2
    assert np.linalg.norm(gravity) == pytest.approx(expected, rel=1e-12)
    assert math.atan2(gravity[1], gravity[0]) == pytest.approx(math.atan2(4.0, 3.0))


def test_update_excludes_self_by_identity():
    """A body alone only integrates; an identical twin still attracts it."""
    body = Body(0.0, 0.0, 10.0, "red", (1.0, 2.0))
    body.update([body])
    assert np.array_equal(body.velocity, [1.0, 2.0])
    assert np.array_equal(body.position, [1.0, 2.0])

    a = Body(0.0, 0.0, 10.0, "red", (0.0, 0.0))
    twin = Body(0.0, 0.0, 10.0, "red", (0.0, 0.0))
    a.update([a, twin])
    assert not np.array_equal(a.velocity, [0.0, 0.0])
    assert not np.array_equal(twin.velocity, [0.0, 0.0])


def test_zero_snap_after_update():
    """Components below 1e-6 become exactly zero; at 1e-6 they survive."""
    body = Body(0.0, 0.0, 1.0, "red", (5e-7, -5e-7))
    body.update([body])
    assert body.velocity[0] == 0.0
    assert body.velocity[1] == 0.0
    assert np.array_equal(body.position, [0.0, 0.0])

    body = Body(0.0, 0.0, 1.0, "red", (1e-6, -2e-6))
    body.update([body])
    assert np.array_equal(body.velocity, [1e-6, -2e-6])


def test_snap_small_copies():
    """snap_small leaves its input untouched."""
    v = np.array([1e-9, 3.0])
    snapped = snap_small(v)
    assert snapped[0] == 0.0 and snapped[1] == 3.0
    assert v[0] == 1e-9


def test_reset_does_not_alias_velocity():
    """Reset copies the supplied velocity."""
    body = Body(1.0, 1.0, 1.0, "red", (0.0, 0.0))
    velocity = np.array([1.0, 2.0])
    body.reset(3.0, 4.0, 5.0, velocity)
    velocity[0] = 99.0
    assert body.velocity[0] == 1.0
    assert (body.x, body.y) == (3.0, 4.0)
    assert body.mass == math.pi * 5.0 * 5.0 / 50000


def test_snapshot_direction_hint():
    """Snapshot is a frozen copy with the velocity arrow endpoint."""
    body = Body(1.0, -1.0, 2.0, "blue", (0.5, 0.25), name="circle3")
    snap = body.snapshot()
    assert snap.position == (1.0, -1.0)
    assert snap.direction_hint == (1.0 + 0.5 * 20, -1.0 + 0.25 * 20)
    assert snap.name == "circle3"
    body.position += 1.0
    assert snap.position == (1.0, -1.0)


def _triangle(order):
    specs = {
        "a": (0.0, 0.0),
        "b": (10.0, 0.0),
        "c": (5.0, 5.0 * math.sqrt(3.0)),
    }
    return [Body(*specs[name], 10.0, "red", (0.0, 0.0), name=name) for name in order]


def _by_name(bodies):
    return {body.name: (body.position.copy(), body.velocity.copy()) for body in bodies}


def test_snapshot_scheme_is_order_independent():
    """Reordering bodies does not change the snapshot result."""
    first = _triangle(["a", "b", "c"])
    second = _triangle(["c", "a", "b"])
    snapshot_update(first)
    snapshot_update(second)
    s1, s2 = _by_name(first), _by_name(second)
    for name in s1:
        assert np.allclose(s1[name][0], s2[name][0], rtol=1e-12, atol=1e-15)
        assert np.allclose(s1[name][1], s2[name][1], rtol=1e-12, atol=1e-15)


def test_sequential_scheme_is_order_dependent():
    """The in-place scheme sees already-moved peers, so order matters."""
    first = _triangle(["a", "b", "c"])
    second = _triangle(["c", "a", "b"])
    sequential_update(first)
    sequential_update(second)
    s1, s2 = _by_name(first), _by_name(second)
    assert not np.allclose(s1["a"][1], s2["a"][1], rtol=1e-12, atol=0.0)


def test_snapshot_scheme_two_bodies():
    """Each body receives the pair impulse twice, from frozen positions."""
    a = Body(0.0, 0.0, 1.0, "red", (0.0, 0.0))
    b = Body(2.0, 0.0, 1.0, "green", (0.0, 0.0))
    snapshot_update([a, b])
    expected = 2 * a.mass / (2.0 + DISTANCE_EPSILON) ** 2
    assert a.velocity[0] == pytest.approx(expected, rel=1e-12)
    assert b.velocity[0] == pytest.approx(-expected, rel=1e-12)
    assert a.position[0] == pytest.approx(expected, rel=1e-12)


def test_unknown_scheme():
    """Unknown scheme names are rejected."""
    assert get_update_scheme("SNAPSHOT") is snapshot_update
    with pytest.raises(ValueError):
        get_update_scheme("leapfrog")
