"""
Shared fixtures: a seeded context, an empty world and entity factories.
"""

import random

import pytest
from pygame.math import Vector2

from organism.agent import Agent
from organism.genome import Genome, PredatorGenome
from world.context import SimContext
from world.food import Consumable
from world.world import World


class ScriptedRng(random.Random):
    """
    random() returns the scripted values in order, then ``fallback`` forever.
    uniform() is derived from random(), so it follows the script too.
    """

    def __init__(self, values=(), fallback=0.5):
        super().__init__(0)
        self.values = list(values)
        self.fallback = fallback

    def random(self):
        if self.values:
            return self.values.pop(0)
        return self.fallback


@pytest.fixture
def ctx() -> SimContext:
    return SimContext(rng=random.Random(1234))


@pytest.fixture
def world() -> World:
    return World()


@pytest.fixture
def scripted():
    return ScriptedRng


def _genome(**overrides) -> Genome:
    values = dict(
        steering_force=0.002,
        speed=1.0,
        food_pull=1.0,
        poison_pull=-1.0,
        predator_pull=-1.0,
        food_perception_radius=100.0,
        poison_perception_radius=100.0,
        predator_perception_radius=100.0,
    )
    values.update(overrides)
    return Genome(**values)


@pytest.fixture
def make_genome():
    return _genome


@pytest.fixture
def add():
    def _add(world: World, *entities):
        for entity in entities:
            world.commands.spawn(entity)
        world.apply_commands()
        return entities[0] if len(entities) == 1 else entities

    return _add


@pytest.fixture
def make_boid(world, add):
    def _make(x=0.0, y=0.0, health=100.0, velocity=(0.0, 0.0), **genome):
        agent = Agent.spawn_boid(world.next_id(), Vector2(x, y), _genome(**genome))
        agent.velocity = Vector2(velocity)
        agent.health = health
        return add(world, agent)

    return _make


@pytest.fixture
def make_predator(world, add):
    def _make(x=0.0, y=0.0, health=100.0, velocity=(0.0, 0.0), prey_perception=80.0, prey_pull=1.0,
              **genome):
        agent = Agent.spawn_predator(
            world.next_id(),
            Vector2(x, y),
            _genome(**genome),
            PredatorGenome(prey_perception=prey_perception, prey_pull=prey_pull),
        )
        agent.velocity = Vector2(velocity)
        agent.health = health
        return add(world, agent)

    return _make


@pytest.fixture
def make_item(world, add):
    def _make(x=0.0, y=0.0, nutrition=5.0, last_replication=0.0):
        item = Consumable(world.next_id(), Vector2(x, y), nutrition, last_replication=last_replication)
        return add(world, item)

    return _make
