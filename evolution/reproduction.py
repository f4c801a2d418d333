"""
ecosim module: evolution/reproduction.py

Live reproduction: timers, gates and population caps.

An agent at zero health never reproduces; death_pass removes it later in
the same tick. A living agent only ticks its replication timer while the
gate is open, i.e. when a random draw beats (1 - REPLICATE_PROBABILITY) or
the agent is starving (health at or below a kind-specific fraction of
MAX_HEALTH). When the timer completes a cycle the agent buds a mutated
child in place.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import random
from typing import TYPE_CHECKING, Dict

import config
from evolution.mutate import mutate_genome, mutate_predator_genome
from organism.agent import Agent, AgentKind

if TYPE_CHECKING:
    from world.context import SimContext
    from world.world import World

logger = logging.getLogger("ecosim.reproduction")


@dataclass(frozen=True)
class PopulationRule:
    cap: int
    health_fraction: float


POPULATION_RULES: Dict[AgentKind, PopulationRule] = {
    AgentKind.BOID: PopulationRule(config.NUM_BOIDS, config.BOID_REPLICATE_HEALTH_FRACTION),
    AgentKind.PREDATOR: PopulationRule(config.NUM_PREDATORS, config.PREDATOR_REPLICATE_HEALTH_FRACTION),
}


def gate_open(agent: Agent, rule: PopulationRule, rng: random.Random = random) -> bool:
    if rng.random() > 1.0 - config.REPLICATE_PROBABILITY:
        return True
    return agent.health <= config.MAX_HEALTH * rule.health_fraction


def spawn_child(world: "World", ctx: "SimContext", parent: Agent) -> Agent:
    """
    Child at the parent's position with a mutated copy of the parent's
    genome(s), full health and a fresh timer.
    """
    genome = mutate_genome(parent.genome, ctx.rng)
    if parent.predator_genome is not None:
        predator_genome = mutate_predator_genome(parent.predator_genome, ctx.rng)
        return Agent.spawn_predator(world.next_id(), parent.position, genome, predator_genome,
                                    now=ctx.now, rng=ctx.rng)
    return Agent.spawn_boid(world.next_id(), parent.position, genome, now=ctx.now, rng=ctx.rng)


def replicate_pass(world: "World", ctx: "SimContext", dt: float) -> int:
    births = 0
    for kind, rule in POPULATION_RULES.items():
        count = world.count(kind)
        for agent in world.agents_of(kind):
            # children queued this pass count toward the cap
            if count >= rule.cap:
                break
            if not agent.alive:
                continue
            if not gate_open(agent, rule, ctx.rng):
                continue
            if not agent.replicate_timer.tick(dt):
                continue
            world.commands.spawn(spawn_child(world, ctx, agent))
            count += 1
            births += 1

    if births:
        logger.debug("%d births at t=%.2f", births, ctx.now)
    return births
