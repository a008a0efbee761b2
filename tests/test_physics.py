import math

import pytest

from planets.data_models import Body
from planets.physics import PlanetPhysics, step


def head_on_pair(mass_a=1.0, mass_b=1.0):
    a = Body(position=(0.0, 0.0), radius=1.0, velocity=(1.0, 0.0), mass=mass_a)
    b = Body(position=(1.5, 0.0), radius=1.0, velocity=(-1.0, 0.0), mass=mass_b)
    return a, b


def test_equal_masses_exchange_velocities_with_full_restitution():
    a, b = head_on_pair()
    PlanetPhysics(gravity=0.0, restitution=1.0).step([a, b])

    assert a.velocity == (-1.0, 0.0)
    assert b.velocity == (1.0, 0.0)
    assert a.position == (-1.0, 0.0)
    assert b.position == (2.5, 0.0)


def test_equal_non_unit_masses_overshoot_the_exchange():
    # impulse is not divided by mass: 2 * 2 * 2 / 4 * 2 = 4
    a, b = head_on_pair(mass_a=2.0, mass_b=2.0)
    PlanetPhysics(gravity=0.0, restitution=1.0).step([a, b])

    assert a.velocity == (-3.0, 0.0)
    assert b.velocity == (3.0, 0.0)


@pytest.mark.parametrize("restitution, expected", [(0.5, 0.0), (0.3, 0.4)])
def test_restitution_scales_the_exchange(restitution, expected):
    a, b = head_on_pair()
    PlanetPhysics(gravity=0.0, restitution=restitution).step([a, b])

    assert a.velocity[0] == pytest.approx(expected)
    assert b.velocity[0] == pytest.approx(-expected)


def test_pair_collision_changes_velocities_equally_and_oppositely():
    a, b = head_on_pair(mass_a=1.0, mass_b=3.0)
    PlanetPhysics(gravity=0.0, restitution=0.8).step([a, b])

    # impulse = 2 * 1 * 3 / 4 * 2 * 0.8, applied to velocity directly
    assert a.velocity[0] == pytest.approx(1.0 - 2.4)
    assert b.velocity[0] == pytest.approx(-1.0 + 2.4)


def test_later_body_sees_impulse_pushed_by_earlier_body():
    # a hits b first and pushes b's frame-start velocity; c then sees that push
    a = Body(position=(0.0, 0.0), radius=1.0, velocity=(1.0, 0.0), mass=1.0)
    b = Body(position=(1.5, 0.0), radius=1.0, velocity=(0.0, 0.0), mass=1.0)
    c = Body(position=(3.0, 0.0), radius=1.0, velocity=(0.0, 0.0), mass=1.0)
    PlanetPhysics(gravity=0.0, restitution=1.0).step([a, b, c])

    assert a.velocity == (0.0, 0.0)
    assert c.velocity == (1.0, 0.0)


def test_separated_bodies_do_not_collide():
    a = Body(position=(0.0, 0.0), radius=1.0, velocity=(1.0, 0.0), mass=1.0)
    b = Body(position=(10.0, 0.0), radius=1.0, velocity=(-1.0, 0.0), mass=1.0)
    PlanetPhysics(gravity=0.0, restitution=1.0).step([a, b])

    assert a.velocity == (1.0, 0.0)
    assert b.velocity == (-1.0, 0.0)


def test_single_body_at_rest_stays_put():
    body = Body(position=(3.0, 4.0), radius=2.0, velocity=(0.0, 0.0), mass=7.0)
    step([body])

    assert body.velocity == (0.0, 0.0)
    assert body.position == (3.0, 4.0)
    assert body.history == [(3.0, 4.0)]


def test_gravity_is_symmetric():
    a = Body(position=(0.0, 0.0), radius=1.0, velocity=(0.0, 0.0), mass=2.0)
    b = Body(position=(30.0, 40.0), radius=1.0, velocity=(0.0, 0.0), mass=3.0)
    PlanetPhysics(gravity=0.1).step([a, b])

    assert math.hypot(*a.velocity) == pytest.approx(0.1 * 2.0 * 3.0 / 2500.0)
    assert math.hypot(*a.velocity) == pytest.approx(math.hypot(*b.velocity))
    assert a.velocity[0] == pytest.approx(-b.velocity[0])
    assert a.velocity[1] == pytest.approx(-b.velocity[1])
    assert a.velocity[0] > 0 and a.velocity[1] > 0


def test_two_body_scenario_moves_each_by_force_term():
    light = Body(position=(0.0, 0.0), radius=5.0, velocity=(0.0, 0.0), mass=5.0)
    heavy = Body(position=(100.0, 0.0), radius=10.0, velocity=(0.0, 0.0), mass=10.0)
    step([light, heavy])

    # acceleration keeps the self mass: 0.1 * 5 * 10 / 100^2 for both bodies
    assert light.velocity[0] == pytest.approx(5e-4)
    assert light.position[0] == pytest.approx(5e-4)
    assert heavy.position[0] == pytest.approx(100.0 - 5e-4)
    assert light.position[1] == 0.0
    assert heavy.position[1] == 0.0


def test_history_grows_by_one_per_step():
    a = Body(position=(0.0, 0.0), radius=1.0, velocity=(0.5, 0.0), mass=1.0)
    b = Body(position=(0.0, 50.0), radius=1.0, velocity=(-0.5, 0.0), mass=1.0)
    engine = PlanetPhysics()
    for _ in range(5):
        engine.step([a, b])

    assert len(a.history) == 5
    assert len(b.history) == 5
    assert a.history[-1] == a.position


def test_coincident_bodies_ignore_each_other():
    a = Body(position=(1.0, 1.0), radius=1.0, velocity=(0.0, 0.0), mass=1.0)
    b = Body(position=(1.0, 1.0), radius=1.0, velocity=(0.0, 0.0), mass=5.0)
    step([a, b])

    assert a.position == (1.0, 1.0)
    assert b.position == (1.0, 1.0)


def test_step_on_empty_list_is_noop():
    bodies = []
    step(bodies)
    assert bodies == []


def test_underflowing_separation_propagates_infinity():
    a = Body(position=(0.0, 0.0), radius=1.0, velocity=(0.0, 0.0), mass=1.0)
    b = Body(position=(1e-200, 0.0), radius=1.0, velocity=(0.0, 0.0), mass=1.0)
    step([a, b])

    assert math.isinf(a.velocity[0]) and a.velocity[0] > 0
    assert math.isinf(b.velocity[0]) and b.velocity[0] < 0


def test_restitution_is_clamped():
    assert PlanetPhysics(restitution=2.0).restitution == 1.0
    engine = PlanetPhysics()
    engine.set_restitution(-1.0)
    assert engine.restitution == 0.0
