import pytest
from pygame.math import Vector2

import config
from world import food
from world.food import Consumable


def test_classification():
    assert Consumable(0, Vector2(), 5.0).is_food
    assert not Consumable(1, Vector2(), -30.0).is_food
    assert Consumable(2, Vector2(), 0.1).is_food
    assert not Consumable(3, Vector2(), -0.1).is_food


def test_dead_band_nutrition_rejected():
    with pytest.raises(ValueError):
        Consumable(0, Vector2(), 0.05)


def test_food_decays_to_floor_then_despawns():
    item = Consumable(0, Vector2(), 0.15)
    assert not item.is_despawn
    item.decay()
    assert item.nutrition == pytest.approx(0.1)
    assert item.is_food
    assert item.is_despawn


def test_poison_decays_upward_to_floor():
    item = Consumable(0, Vector2(), -1.0)
    item.decay()
    assert item.nutrition == pytest.approx(-0.5)
    item.decay()
    assert item.nutrition == pytest.approx(-0.1)
    assert not item.is_food
    assert item.is_despawn


def test_decay_never_crosses_floor():
    for start in (config.FOOD_NUTRITION, config.POISON_DAMAGE):
        item = Consumable(0, Vector2(), start)
        for _ in range(500):
            item.decay()
            assert abs(item.nutrition) >= config.NUTRITION_FLOOR


def test_opacity():
    assert Consumable.food(0, Vector2()).opacity() == pytest.approx(1.0)
    assert Consumable(0, Vector2(), 2.5).opacity() == pytest.approx(0.5)
    assert Consumable(0, Vector2(), -15.0).opacity() == pytest.approx(0.5)


def test_bootstrap_spawns_exact_counts(world, ctx):
    food.bootstrap_consumables(world, ctx)
    world.apply_commands()
    assert world.count_food() == config.NUM_FOOD
    assert world.count_poison() == config.NUM_POISON
    for item in world.consumables.values():
        assert abs(item.position.x) <= config.WORLD_W
        assert abs(item.position.y) <= config.WORLD_H


def test_despawn_pass_removes_only_floored_items(world, make_item):
    fresh = make_item(nutrition=5.0)
    spent = make_item(nutrition=0.1)
    spent_poison = make_item(nutrition=-0.1)

    assert food.despawn_pass(world) == 2
    # queued, not yet removed
    assert len(world.consumables) == 3
    world.apply_commands()
    assert list(world.consumables) == [fresh.id]
    assert spent.id not in world.consumables and spent_poison.id not in world.consumables


def test_decay_pass_then_despawn(world, make_item):
    make_item(nutrition=0.15)
    food.decay_pass(world)
    food.despawn_pass(world)
    world.apply_commands()
    assert world.consumables == {}


def test_replication_respects_cooldown(world, ctx, make_item, scripted):
    parent = make_item(last_replication=0.0)
    ctx.now = config.REPLICATION_COOLDOWN / 2
    ctx.rng = scripted(fallback=0.99)
    assert food.replicate_pass(world, ctx) == 0
    assert parent.last_replication == 0.0


def test_replication_spawns_nearby_food(world, ctx, make_item, scripted):
    parent = make_item(x=10.0, y=-20.0)
    ctx.now = 10.0
    # gate, center bias, offset x, offset y
    ctx.rng = scripted([0.9, 0.5, 0.75, 0.25], fallback=0.0)

    assert food.replicate_pass(world, ctx) == 1
    world.apply_commands()
    assert parent.last_replication == 10.0

    child = next(c for c in world.consumables.values() if c.id != parent.id)
    assert child.is_food
    assert child.position.x == pytest.approx(10.0 + config.REPLICATION_RADIUS_FOOD * 0.5)
    assert child.position.y == pytest.approx(-20.0 - config.REPLICATION_RADIUS_FOOD * 0.5)
    assert child.last_replication == 10.0


def test_replication_gate_failure_keeps_cooldown(world, ctx, make_item, scripted):
    parent = make_item()
    ctx.now = 10.0
    ctx.rng = scripted(fallback=0.5)
    assert food.replicate_pass(world, ctx) == 0
    assert parent.last_replication == 0.0


def test_replication_unlikely_far_from_center(world, ctx, make_item, scripted):
    parent = make_item(x=1200.0, y=700.0)
    ctx.now = 10.0
    ctx.rng = scripted([0.9, 0.99], fallback=0.0)
    assert food.replicate_pass(world, ctx) == 0
    assert parent.last_replication == 0.0


def test_replication_clamped_to_world(world, ctx, make_item, scripted, monkeypatch):
    monkeypatch.setattr(config, "CENTER_BIAS_SCALE", 1e12)
    make_item(x=config.WORLD_W, y=config.WORLD_H)
    ctx.now = 10.0
    ctx.rng = scripted([0.9, 0.5, 1.0, 1.0], fallback=0.0)
    food.replicate_pass(world, ctx)
    world.apply_commands()
    for item in world.consumables.values():
        assert item.position.x <= config.WORLD_W
        assert item.position.y <= config.WORLD_H


@pytest.mark.parametrize("draw, expect_food", [(0.1, True), (0.9, False)])
def test_poison_replication_may_produce_food(world, ctx, make_item, scripted, draw, expect_food):
    parent = make_item(nutrition=config.POISON_DAMAGE)
    ctx.now = 10.0
    ctx.rng = scripted([0.9, 0.5, 0.5, 0.5, draw], fallback=0.0)

    assert food.replicate_pass(world, ctx) == 1
    world.apply_commands()
    child = next(c for c in world.consumables.values() if c.id != parent.id)
    assert child.is_food == expect_food
    assert child.position.distance_to(parent.position) <= config.REPLICATION_RADIUS_POISON * 1.5


def test_replication_respects_ceiling(world, ctx, make_item, scripted, monkeypatch):
    monkeypatch.setattr(config, "NUM_FOOD", 2)
    a = make_item()
    b = make_item(x=5.0)
    ctx.now = 10.0
    ctx.rng = scripted(fallback=0.9)

    assert food.replicate_pass(world, ctx) == 0
    world.apply_commands()
    assert world.count_food() == 2
    # both parents passed the gates, so both cooldowns reset
    assert a.last_replication == b.last_replication == 10.0


def test_replication_ceiling_counts_this_pass(world, ctx, make_item, scripted, monkeypatch):
    monkeypatch.setattr(config, "NUM_FOOD", 3)
    for i in range(2):
        make_item(x=float(i))
    ctx.now = 10.0
    ctx.rng = scripted(fallback=0.9)

    assert food.replicate_pass(world, ctx) == 1
    world.apply_commands()
    assert world.count_food() == 3


def test_repopulate_consumables(world, ctx, make_item, monkeypatch):
    monkeypatch.setattr(config, "NUM_FOOD", 10)
    monkeypatch.setattr(config, "NUM_POISON", 4)
    make_item()
    for _ in range(3):
        make_item(nutrition=-30.0)

    added_food, added_poison = food.repopulate_consumables(world, ctx)
    world.apply_commands()
    assert (added_food, added_poison) == (9, 0)
    assert world.count_food() == 10
    assert world.count_poison() == 3
