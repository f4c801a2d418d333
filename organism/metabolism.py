"""
ecosim module: organism/metabolism.py

Health, eating and dying.

- health_tick_pass: slow energy drain, faster genomes pay more
- consumption_pass: agents eat the first consumable they touch
- predation_pass: predators eat the first boid they touch
- death_pass: agents at zero health are removed
- reseed_pass: every death scatters a few consumables around the corpse

Collision passes scan a snapshot and strike eaten entries from it, so one
item (or one boid) is eaten at most once per tick even though the actual
removal is deferred to the command buffer.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, List, Tuple

from pygame.math import Vector2

import config
from world.food import random_offset, spawn_consumable
from world.physics import limit_to_world

if TYPE_CHECKING:
    from world.context import SimContext
    from world.world import World

logger = logging.getLogger("ecosim.metabolism")


def health_tick_pass(world: "World") -> None:
    for agent in world.agents.values():
        agent.add_health(-config.BASE_DAMAGE * agent.genome.effective_speed * 0.5)


def consumption_pass(world: "World") -> int:
    items: List[Tuple[int, Vector2, float]] = [
        (c.id, Vector2(c.position), c.nutrition) for c in world.consumables.values()
    ]
    r2 = config.BOID_COLLISION_RADIUS * config.BOID_COLLISION_RADIUS
    eaten = 0

    for agent in world.agents.values():
        for index, (item_id, pos, nutrition) in enumerate(items):
            if agent.position.distance_squared_to(pos) < r2:
                agent.add_health(nutrition)
                world.commands.despawn(item_id)
                del items[index]
                eaten += 1
                break

    return eaten


def predation_pass(world: "World") -> int:
    prey: List[Tuple[int, Vector2]] = [(b.id, Vector2(b.position)) for b in world.boids()]
    r2 = config.PREDATOR_COLLISION_RADIUS * config.PREDATOR_COLLISION_RADIUS
    kills = 0

    for predator in world.predators():
        for index, (boid_id, pos) in enumerate(prey):
            if predator.position.distance_squared_to(pos) < r2:
                predator.add_health(config.BOID_NUTRITION)
                world.commands.despawn(boid_id)
                world.emit_death(pos)
                del prey[index]
                kills += 1
                break

    return kills


def death_pass(world: "World") -> int:
    deaths = 0
    for agent in world.agents.values():
        if agent.health <= 0.0:
            world.commands.despawn(agent.id)
            world.emit_death(agent.position)
            deaths += 1
    return deaths


def reseed_pass(world: "World", ctx: "SimContext") -> int:
    rng = ctx.rng
    spawned = 0
    for event in world.drain_death_events():
        for _ in range(rng.randint(*config.CORPSE_ITEMS_RANGE)):
            pos = limit_to_world(event.position + random_offset(rng, config.CORPSE_SCATTER))
            is_food = rng.random() >= config.CORPSE_POISON_PROBABILITY
            spawn_consumable(world, ctx, pos, is_food=is_food)
            spawned += 1
    return spawned
