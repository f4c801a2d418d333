import pytest
from pygame.math import Vector2

import config
from organism.steering import (
    boundary_pass,
    closest_within,
    seek_pass,
    separation_pass,
    steering_force,
)


def test_steering_force_is_desired_minus_velocity():
    f = steering_force(Vector2(10, 5), Vector2(2, 1), Vector2(1, 0))
    assert f == Vector2(7, 4)


def test_closest_within_radius():
    origin = Vector2()
    positions = [Vector2(30, 0), Vector2(0, 10), Vector2(200, 0)]
    assert closest_within(origin, 50.0, positions) == Vector2(0, 10)
    assert closest_within(origin, 5.0, positions) is None
    assert closest_within(origin, 50.0, []) is None


def test_closest_within_includes_radius_edge():
    assert closest_within(Vector2(), 10.0, [Vector2(10, 0)]) == Vector2(10, 0)


def test_closest_within_tie_goes_to_later_candidate():
    first, second = Vector2(10, 0), Vector2(0, 10)
    assert closest_within(Vector2(), 50.0, [first, second]) is second


def test_boid_seeks_food(world, make_boid, make_item):
    boid = make_boid(velocity=(1.0, 0.0), steering_force=0.002, food_pull=1.0)
    make_item(x=10.0, y=0.0)

    seek_pass(world)
    # ((10, 0) - (0, 0)) - (1, 0) scaled by |0.002| * 1.0
    assert boid.acceleration.x == pytest.approx(0.018)
    assert boid.acceleration.y == pytest.approx(0.0)


def test_negative_steering_force_uses_magnitude(world, make_boid, make_item):
    boid = make_boid(steering_force=-0.002, food_pull=1.0)
    make_item(x=10.0, y=0.0)
    seek_pass(world)
    assert boid.acceleration.x == pytest.approx(0.02)


def test_boid_flees_poison_and_ignores_far_food(world, make_boid, make_item):
    boid = make_boid(poison_pull=-1.0, food_perception_radius=20.0)
    make_item(x=0.0, y=10.0, nutrition=-30.0)
    make_item(x=50.0, y=0.0)

    seek_pass(world)
    assert boid.acceleration.x == pytest.approx(0.0)
    assert boid.acceleration.y < 0.0


def test_boid_reacts_to_predator(world, make_boid, make_predator):
    boid = make_boid(predator_pull=-1.5)
    make_predator(x=20.0, y=0.0, prey_perception=0.0)

    seek_pass(world)
    assert boid.acceleration.x == pytest.approx(-20.0 * 0.002 * 1.5)


def test_predator_seeks_prey(world, make_boid, make_predator):
    predator = make_predator(prey_perception=80.0, prey_pull=1.0, steering_force=0.01)
    make_boid(x=0.0, y=-40.0, predator_perception_radius=0.0)
    make_boid(x=0.0, y=70.0, predator_perception_radius=0.0)

    seek_pass(world)
    assert predator.acceleration.y == pytest.approx(-40.0 * 0.01)


def test_predator_ignores_other_predators(world, make_predator):
    a = make_predator(prey_perception=80.0)
    make_predator(x=10.0)
    seek_pass(world)
    assert a.acceleration == Vector2()


def test_separation_pushes_close_agents_apart(world, make_boid):
    a = make_boid(x=0.0)
    b = make_boid(x=3.0)
    far = make_boid(x=100.0)

    separation_pass(world)
    assert a.acceleration.x == pytest.approx(3.0 * config.SEPARATION_WEIGHT)
    assert b.acceleration.x == pytest.approx(-3.0 * config.SEPARATION_WEIGHT)
    assert far.acceleration == Vector2()


def test_separation_skips_coincident_agents(world, make_boid):
    a = make_boid()
    make_boid()
    separation_pass(world)
    assert a.acceleration == Vector2()


def test_boundary_pulls_toward_origin(world, make_boid):
    edge = make_boid(x=config.WORLD_W, y=0.0)
    inside = make_boid(x=config.WORLD_W - 1.0, y=0.0)

    boundary_pass(world)
    assert edge.acceleration.x == pytest.approx(-config.WORLD_W * config.BOUNDARY_WEIGHT)
    assert inside.acceleration == Vector2()


def test_contributions_accumulate(world, make_boid, make_item):
    boid = make_boid(x=config.WORLD_W, y=0.0)
    make_item(x=config.WORLD_W - 10.0, y=0.0)

    boundary_pass(world)
    seek_pass(world)
    expected = -config.WORLD_W * config.BOUNDARY_WEIGHT + -10.0 * 0.002
    assert boid.acceleration.x == pytest.approx(expected)
