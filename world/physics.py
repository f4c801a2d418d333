"""
ecosim module: world/physics.py

Top-down 2D kinematics and world-bound helpers:
- integrate() turns the accumulated acceleration into a unit heading and
  moves the agent by ``genome.speed`` along it
- non-finite forces or positions are dropped for the tick instead of
  being written back into the agent
- bounds helpers clamp spawn positions into the arena centered on the origin
"""

from __future__ import annotations
import logging
import math
import random
from typing import Iterable, Tuple

from pygame.math import Vector2

import config
from organism.agent import Agent, random_unit_vector

logger = logging.getLogger("ecosim.physics")


def world_bounds() -> Tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y)"""
    return (-config.WORLD_W, -config.WORLD_H, config.WORLD_W, config.WORLD_H)


def limit_to_world(pos: Vector2) -> Vector2:
    min_x, min_y, max_x, max_y = world_bounds()
    return Vector2(max(min_x, min(max_x, pos.x)), max(min_y, min(max_y, pos.y)))


def is_out_of_bounds(pos: Vector2) -> bool:
    """True on or past the edge."""
    min_x, min_y, max_x, max_y = world_bounds()
    return pos.x <= min_x or pos.x >= max_x or pos.y <= min_y or pos.y >= max_y


def random_world_position(rng: random.Random = random) -> Vector2:
    return Vector2(
        rng.uniform(-config.WORLD_W, config.WORLD_W),
        rng.uniform(-config.WORLD_H, config.WORLD_H),
    )


def is_finite(v: Vector2) -> bool:
    return math.isfinite(v.x) and math.isfinite(v.y)


def rotation_angle(old: Vector2, new: Vector2) -> float:
    # angle of old - new, wrapped into [0, 2pi)
    angle = math.atan2(old.y - new.y, old.x - new.x)
    if angle < 0.0:
        angle += 2.0 * math.pi
    return angle


def integrate(agent: Agent, rng: random.Random = random) -> bool:
    """
    Advance one agent by one tick. Returns False when the tick was skipped
    because the accumulated force was not finite.
    """
    if not is_finite(agent.acceleration):
        logger.debug("agent %d: non-finite acceleration, skipping tick", agent.id)
        agent.acceleration = Vector2()
        return False

    heading = agent.velocity + agent.acceleration
    agent.acceleration = Vector2()
    if not is_finite(heading):
        logger.debug("agent %d: non-finite heading, skipping tick", agent.id)
        return False

    if heading.length_squared() > 0.0:
        agent.velocity = heading.normalize()
    elif agent.velocity.length_squared() == 0.0:
        agent.velocity = random_unit_vector(rng)
    # else: forces cancelled the heading exactly; keep flying the old way

    old_pos = Vector2(agent.position)
    new_pos = agent.position + agent.velocity * agent.genome.speed
    if is_finite(new_pos):
        agent.position = new_pos

    agent.orientation = rotation_angle(old_pos, agent.position) + math.pi / 2.0
    return True


def integrate_all(agents: Iterable[Agent], rng: random.Random = random) -> int:
    """Returns how many agents were skipped this tick."""
    skipped = 0
    for agent in agents:
        if not integrate(agent, rng):
            skipped += 1
    return skipped
