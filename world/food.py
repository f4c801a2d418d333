"""
ecosim module: world/food.py

Resource economy: food and poison share one Consumable record.

- nutrition >= +0.1 is food, nutrition <= -0.1 is poison
- decay moves nutrition toward its floor (+0.1 / -0.1); reaching the floor
  despawns the item on the next despawn pass
- surviving items occasionally replicate next to themselves, more often
  near the world center, up to a per-kind ceiling
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import random
from typing import TYPE_CHECKING, Tuple

from pygame.math import Vector2

import config
from world.physics import limit_to_world, random_world_position

if TYPE_CHECKING:
    from world.context import SimContext
    from world.world import World

logger = logging.getLogger("ecosim.food")


@dataclass
class Consumable:
    id: int
    position: Vector2
    nutrition: float
    last_replication: float = 0.0

    def __post_init__(self) -> None:
        if -config.NUTRITION_FLOOR < self.nutrition < config.NUTRITION_FLOOR:
            raise ValueError(f"nutrition {self.nutrition} is neither food nor poison")

    @staticmethod
    def food(item_id: int, pos: Vector2, now: float = 0.0) -> "Consumable":
        return Consumable(item_id, Vector2(pos), config.FOOD_NUTRITION, last_replication=now)

    @staticmethod
    def poison(item_id: int, pos: Vector2, now: float = 0.0) -> "Consumable":
        return Consumable(item_id, Vector2(pos), config.POISON_DAMAGE, last_replication=now)

    @property
    def is_food(self) -> bool:
        return self.nutrition >= config.NUTRITION_FLOOR

    @property
    def is_despawn(self) -> bool:
        if self.is_food:
            return self.nutrition <= config.NUTRITION_FLOOR
        return self.nutrition >= -config.NUTRITION_FLOOR

    def decay(self) -> None:
        if self.is_food:
            self.nutrition = max(self.nutrition + config.FOOD_DECAY_RATE, config.NUTRITION_FLOOR)
        else:
            self.nutrition = min(self.nutrition + config.POISON_DECAY_RATE, -config.NUTRITION_FLOOR)

    def opacity(self) -> float:
        """Fraction of the freshly spawned magnitude that is left."""
        if self.is_food:
            return self.nutrition / config.FOOD_NUTRITION
        return self.nutrition / config.POISON_DAMAGE

    @property
    def replication_radius(self) -> float:
        return config.REPLICATION_RADIUS_FOOD if self.is_food else config.REPLICATION_RADIUS_POISON


def random_offset(rng: random.Random, spread: float) -> Vector2:
    return Vector2(rng.uniform(-spread, spread), rng.uniform(-spread, spread))


def spawn_consumable(world: "World", ctx: "SimContext", pos: Vector2, is_food: bool) -> Consumable:
    factory = Consumable.food if is_food else Consumable.poison
    item = factory(world.next_id(), pos, now=ctx.now)
    world.commands.spawn(item)
    return item


def bootstrap_consumables(world: "World", ctx: "SimContext") -> Tuple[int, int]:
    """
    Queue exactly NUM_FOOD food and NUM_POISON poison at uniform positions.
    """
    for _ in range(config.NUM_FOOD):
        spawn_consumable(world, ctx, random_world_position(ctx.rng), is_food=True)
    for _ in range(config.NUM_POISON):
        spawn_consumable(world, ctx, random_world_position(ctx.rng), is_food=False)
    return config.NUM_FOOD, config.NUM_POISON


def repopulate_consumables(world: "World", ctx: "SimContext") -> Tuple[int, int]:
    """
    Top a kind back up to its ceiling once it has fallen below half of it.
    """
    num_food = world.count_food()
    num_poison = world.count_poison()
    added_food = added_poison = 0

    if num_food < config.NUM_FOOD // 2:
        added_food = config.NUM_FOOD - num_food
        for _ in range(added_food):
            spawn_consumable(world, ctx, random_world_position(ctx.rng), is_food=True)

    if num_poison < config.NUM_POISON // 2:
        added_poison = config.NUM_POISON - num_poison
        for _ in range(added_poison):
            spawn_consumable(world, ctx, random_world_position(ctx.rng), is_food=False)

    if added_food or added_poison:
        logger.info("repopulated %d food, %d poison", added_food, added_poison)
    return added_food, added_poison


def decay_pass(world: "World") -> None:
    for item in world.consumables.values():
        item.decay()


def despawn_pass(world: "World") -> int:
    gone = 0
    for item in world.consumables.values():
        if item.is_despawn:
            world.commands.despawn(item.id)
            gone += 1
    return gone


def replicate_pass(world: "World", ctx: "SimContext") -> int:
    """
    One replication attempt for every surviving item off cooldown.

    An attempt must pass a flat REPLICATION_GATE draw and a second draw
    against dist^2 / CENTER_BIAS_SCALE, so items near the edges rarely
    spread. Food spawns food; poison spawns food with
    POISON_TO_FOOD_PROBABILITY and poison otherwise. Ceilings are counted
    live so one pass cannot overshoot them.
    """
    rng = ctx.rng
    num_food = world.count_food()
    num_poison = world.count_poison()
    spawned = 0

    for item in list(world.consumables.values()):
        if item.is_despawn:
            continue
        if ctx.now - item.last_replication < config.REPLICATION_COOLDOWN:
            continue
        if rng.random() < config.REPLICATION_GATE:
            continue
        if rng.random() < item.position.length_squared() / config.CENTER_BIAS_SCALE:
            continue

        pos = limit_to_world(item.position + random_offset(rng, item.replication_radius))

        if item.is_food:
            child_is_food = True
        else:
            child_is_food = rng.random() < config.POISON_TO_FOOD_PROBABILITY

        if child_is_food and num_food < config.NUM_FOOD:
            spawn_consumable(world, ctx, pos, is_food=True)
            num_food += 1
            spawned += 1
        elif not child_is_food and num_poison < config.NUM_POISON:
            spawn_consumable(world, ctx, pos, is_food=False)
            num_poison += 1
            spawned += 1

        item.last_replication = ctx.now

    return spawned
