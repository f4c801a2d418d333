"""
ecosim module: world/scheduler.py

Fixed per-tick pipeline.

Each call to ``Simulation.step(dt)`` runs, in order:
    steering (boundary, seek, separation)
    movement
    consumption, predation
    agent replication
    health tick              (every HEALTH_TICK_INTERVAL)
    death despawn
    corpse reseed
    consumable replication   (every CONSUMABLE_REPLICATION_INTERVAL)
    consumable decay         (every CONSUMABLE_DECAY_INTERVAL)
    consumable despawn
    repopulation             (every REPOPULATE_INTERVAL)
    stats collection         (every STAT_COLLECTION_INTERVAL)

Structural changes are queued during a pass and applied right after it.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Optional

import config
from evolution.reproduction import POPULATION_RULES, replicate_pass as replicate_agents
from organism.agent import Agent, AgentKind
from organism.genome import Genome, PredatorGenome
from organism.metabolism import (
    consumption_pass,
    death_pass,
    health_tick_pass,
    predation_pass,
    reseed_pass,
)
from organism.steering import boundary_pass, seek_pass, separation_pass
from world import food
from world.context import SimContext
from world.physics import integrate_all, random_world_position
from world.world import World

logger = logging.getLogger("ecosim.scheduler")


@dataclass
class Cadence:
    """
    Fires once per ``interval`` seconds of simulated time.
    """
    interval: float
    elapsed: float = 0.0

    def advance(self, dt: float) -> int:
        self.elapsed += dt
        fired = int(self.elapsed // self.interval)
        self.elapsed -= fired * self.interval
        return fired


@dataclass
class TickReport:
    tick: int
    eaten: int = 0
    kills: int = 0
    births: int = 0
    deaths: int = 0
    reseeded: int = 0
    consumables_spawned: int = 0
    consumables_despawned: int = 0
    skipped_moves: int = 0


def spawn_random_agent(world: World, ctx: SimContext, kind: AgentKind) -> Agent:
    pos = random_world_position(ctx.rng)
    genome = Genome.random(ctx.rng)
    if kind == AgentKind.PREDATOR:
        agent = Agent.spawn_predator(world.next_id(), pos, genome, PredatorGenome.random(ctx.rng),
                                     now=ctx.now, rng=ctx.rng)
    else:
        agent = Agent.spawn_boid(world.next_id(), pos, genome, now=ctx.now, rng=ctx.rng)
    world.commands.spawn(agent)
    return agent


def bootstrap_agents(world: World, ctx: SimContext) -> None:
    for kind, rule in POPULATION_RULES.items():
        for _ in range(rule.cap):
            spawn_random_agent(world, ctx, kind)


def repopulate_agents(world: World, ctx: SimContext) -> int:
    """
    Re-seed a kind that has died out completely with a full random population.
    """
    added = 0
    for kind, rule in POPULATION_RULES.items():
        if world.count(kind) > 0:
            continue
        for _ in range(rule.cap):
            spawn_random_agent(world, ctx, kind)
        added += rule.cap
        logger.info("%s died out, respawned %d", kind.name.lower(), rule.cap)
    return added


class Simulation:
    def __init__(self, ctx: Optional[SimContext] = None):
        self.ctx = ctx if ctx is not None else SimContext()
        self.world = World()
        self.running = False

        self.health_cadence = Cadence(config.HEALTH_TICK_INTERVAL)
        self.replication_cadence = Cadence(config.CONSUMABLE_REPLICATION_INTERVAL)
        self.decay_cadence = Cadence(config.CONSUMABLE_DECAY_INTERVAL)
        self.repopulate_cadence = Cadence(config.REPOPULATE_INTERVAL)
        self.stats_cadence = Cadence(config.STAT_COLLECTION_INTERVAL)

    def bootstrap(self) -> None:
        if self.running:
            raise RuntimeError("simulation already bootstrapped")

        bootstrap_agents(self.world, self.ctx)
        food.bootstrap_consumables(self.world, self.ctx)
        self.world.apply_commands()
        self.running = True

        logger.info(
            "world bootstrapped: %d boids, %d predators, %d food, %d poison",
            self.world.count(AgentKind.BOID),
            self.world.count(AgentKind.PREDATOR),
            self.world.count_food(),
            self.world.count_poison(),
        )

    def step(self, dt: float = 1.0 / config.FPS) -> TickReport:
        if not self.running:
            raise RuntimeError("bootstrap() must run before step()")

        ctx, world = self.ctx, self.world
        ctx.now += dt
        ctx.tick += 1
        report = TickReport(tick=ctx.tick)

        boundary_pass(world)
        seek_pass(world)
        separation_pass(world)
        report.skipped_moves = integrate_all(list(world.agents.values()), ctx.rng)

        report.eaten = consumption_pass(world)
        world.apply_commands()
        report.kills = predation_pass(world)
        world.apply_commands()

        report.births = replicate_agents(world, ctx, dt)
        world.apply_commands()

        for _ in range(self.health_cadence.advance(dt)):
            health_tick_pass(world)

        report.deaths = death_pass(world)
        world.apply_commands()

        report.reseeded = reseed_pass(world, ctx)
        world.apply_commands()

        for _ in range(self.replication_cadence.advance(dt)):
            report.consumables_spawned += food.replicate_pass(world, ctx)
            world.apply_commands()
        for _ in range(self.decay_cadence.advance(dt)):
            food.decay_pass(world)
        report.consumables_despawned = food.despawn_pass(world)
        world.apply_commands()

        if self.repopulate_cadence.advance(dt):
            repopulate_agents(world, ctx)
            food.repopulate_consumables(world, ctx)
            world.apply_commands()

        if self.stats_cadence.advance(dt):
            ctx.stats.collect(world, ctx.now)

        if report.kills or report.deaths or report.births:
            logger.debug(
                "tick %d: %d births, %d deaths (%d kills), %d eaten",
                report.tick, report.births, report.deaths + report.kills, report.kills, report.eaten,
            )
        return report

    def run(self, ticks: int, dt: float = 1.0 / config.FPS) -> None:
        for _ in range(ticks):
            self.step(dt)
