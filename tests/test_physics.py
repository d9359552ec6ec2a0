import pytest

from asastro.physics import G, RigidBody, step, tick_gravity, tick_velocity
from asastro.settings import SimulationSettings
from asastro.vector import Vec2


def running(dt):
    return SimulationSettings(dt=dt, pause=False)


def momentum(bodies):
    total = Vec2()
    for b in bodies:
        total = total + b.velocity * b.mass
    return total


def test_apply_force_scales_with_mass_and_period():
    light = RigidBody(mass=1.0)
    heavy = RigidBody(mass=4.0)
    force = Vec2(2.0, -1.0)
    light.apply_force(force, 0.5)
    heavy.apply_force(force, 0.5)
    assert light.velocity.x == pytest.approx(heavy.velocity.x * 4.0)
    assert light.velocity.y == pytest.approx(heavy.velocity.y * 4.0)


def test_default_rigid_body_is_unit_mass_at_rest():
    body = RigidBody()
    assert body.mass == 1.0
    assert body.velocity == Vec2()


def test_unit_masses_at_unit_distance_feel_g():
    a = RigidBody(mass=1.0, position=Vec2(0.0, 0.0))
    b = RigidBody(mass=1.0, position=Vec2(1.0, 0.0))
    tick_gravity([a, b], running(1.0))
    assert a.velocity.x == pytest.approx(G)
    assert b.velocity.x == pytest.approx(-G)
    assert a.velocity.y == 0.0


def test_gravity_conserves_momentum():
    bodies = [
        RigidBody(mass=1.0, position=Vec2(0.0, 0.0)),
        RigidBody(mass=0.001, position=Vec2(5.0, 1.0)),
        RigidBody(mass=0.00003, position=Vec2(-1.0, 0.2)),
    ]
    tick_gravity(bodies, running(0.01))
    total = momentum(bodies)
    assert total.x == pytest.approx(0.0, abs=1e-12)
    assert total.y == pytest.approx(0.0, abs=1e-12)


def test_paused_does_nothing():
    a = RigidBody(position=Vec2(0.0, 0.0), velocity=Vec2(1.0, 1.0))
    b = RigidBody(position=Vec2(1.0, 0.0))
    settings = SimulationSettings(dt=0.1, pause=True)
    step([a, b], settings)
    assert a.position == Vec2(0.0, 0.0)
    assert a.velocity == Vec2(1.0, 1.0)
    assert b.velocity == Vec2()


def test_tick_velocity_moves_along_velocity():
    body = RigidBody(velocity=Vec2(2.0, -3.0), position=Vec2(1.0, 1.0))
    tick_velocity([body], running(0.5))
    assert body.position == Vec2(1.0, 1.0) + Vec2(2.0, -3.0) * 0.5


def test_step_uses_updated_velocity():
    a = RigidBody(mass=1.0, position=Vec2(0.0, 0.0))
    b = RigidBody(mass=1.0, position=Vec2(1.0, 0.0))
    step([a, b], running(0.01))
    assert a.position == a.velocity * 0.01
    assert a.position.x > 0.0
    assert b.position.x < 1.0


def test_coincident_bodies_raise():
    a = RigidBody(position=Vec2(1.0, 1.0))
    b = RigidBody(position=Vec2(1.0, 1.0))
    with pytest.raises(ValueError):
        tick_gravity([a, b], running(0.1))