"""
ecosim module: organism/steering.py

Steering forces. Every pass here only adds to ``agent.acceleration``; the
movement integrator normalizes the sum later in the tick.

Channels per agent:
- food and poison, weighted by the genome pulls
- boids: nearest predator, weighted by predator_pull
- predators: nearest prey boid, weighted by the predator genome's prey_pull
plus a short-range separation push between agents and a weak pull back to
the origin for agents sitting on the world edge.
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from pygame.math import Vector2

import config
from organism.agent import Agent
from world.physics import is_out_of_bounds

if TYPE_CHECKING:
    from world.world import World

ORIGIN = Vector2()


def steering_force(target: Vector2, pos: Vector2, velocity: Vector2) -> Vector2:
    desired = target - pos
    return desired - velocity


def closest_within(origin: Vector2, radius: float, positions: Iterable[Vector2]) -> Optional[Vector2]:
    """
    Nearest position within ``radius`` by squared distance. Ties go to the
    later candidate (``<=``).
    """
    best_d2 = math.inf
    best: Optional[Vector2] = None
    r2 = radius * radius
    for p in positions:
        d2 = origin.distance_squared_to(p)
        if d2 <= best_d2 and d2 <= r2:
            best_d2 = d2
            best = p
    return best


def _channels(agent: Agent, food: List[Vector2], poison: List[Vector2], predators: List[Vector2],
              prey: List[Vector2]) -> List[Tuple[List[Vector2], float, float]]:
    g = agent.genome
    channels = [
        (food, g.food_perception_radius, g.food_pull),
        (poison, g.poison_perception_radius, g.poison_pull),
    ]
    if agent.predator_genome is not None:
        pg = agent.predator_genome
        channels.append((prey, pg.prey_perception, pg.prey_pull))
    else:
        channels.append((predators, g.predator_perception_radius, g.predator_pull))
    return channels


def seek_force(agent: Agent, food: List[Vector2], poison: List[Vector2], predators: List[Vector2],
               prey: List[Vector2]) -> Vector2:
    total = Vector2()
    strength = abs(agent.genome.steering_force)
    for positions, radius, pull in _channels(agent, food, poison, predators, prey):
        target = closest_within(agent.position, radius, positions)
        if target is not None:
            total += steering_force(target, agent.position, agent.velocity) * strength * pull
    return total


def seek_pass(world: "World") -> None:
    food = [Vector2(c.position) for c in world.food()]
    poison = [Vector2(c.position) for c in world.poison()]
    predators = [Vector2(a.position) for a in world.predators()]
    prey = [Vector2(a.position) for a in world.boids()]

    for agent in world.agents.values():
        agent.acceleration += seek_force(agent, food, poison, predators, prey)


def separation_pass(world: "World") -> None:
    """
    O(N^2) push away from every other agent within sqrt(SEPARATION_RADIUS_SQ).
    Coincident agents (distance 0) are skipped.
    """
    positions = [Vector2(a.position) for a in world.agents.values()]
    for agent in world.agents.values():
        for other in positions:
            d2 = other.distance_squared_to(agent.position)
            if d2 != 0.0 and d2 <= config.SEPARATION_RADIUS_SQ:
                agent.acceleration += (
                    steering_force(other, agent.position, agent.velocity) * config.SEPARATION_WEIGHT
                )


def boundary_pass(world: "World") -> None:
    # steer toward the origin instead of bouncing, which makes agents spin at the wall
    for agent in world.agents.values():
        if is_out_of_bounds(agent.position):
            agent.acceleration += (
                steering_force(ORIGIN, agent.position, agent.velocity) * config.BOUNDARY_WEIGHT
            )
