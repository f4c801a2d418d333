"""
ecosim module: organism/agent.py

Agent record: one flat dataclass for both boids and predators.

A predator is a boid with a PredatorGenome attached and a different kind tag.
Shared passes (movement, metabolism) only touch the common fields; predator
passes check ``kind`` first.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import math
import random
from typing import Dict, Optional

from pygame.math import Vector2

import config
from organism.genome import Genome, PredatorGenome


class AgentKind(Enum):
    BOID = 0
    PREDATOR = 1


@dataclass
class RepeatingTimer:
    """
    Accumulates simulated seconds; ``tick`` reports when a cycle completes.
    """
    duration: float
    elapsed: float = 0.0

    def tick(self, dt: float) -> bool:
        self.elapsed += dt
        if self.elapsed < self.duration:
            return False
        self.elapsed %= self.duration
        return True


def random_unit_vector(rng: random.Random = random) -> Vector2:
    angle = rng.uniform(0.0, 2.0 * math.pi)
    return Vector2(math.cos(angle), math.sin(angle))


@dataclass
class Agent:
    id: int
    kind: AgentKind
    position: Vector2
    genome: Genome
    predator_genome: Optional[PredatorGenome] = None
    velocity: Vector2 = field(default_factory=Vector2)
    acceleration: Vector2 = field(default_factory=Vector2)
    health: float = config.MAX_HEALTH
    replicate_timer: RepeatingTimer = field(
        default_factory=lambda: RepeatingTimer(config.REPLICATE_INTERVAL)
    )
    birth_time: float = 0.0
    orientation: float = 0.0

    @property
    def is_predator(self) -> bool:
        return self.kind == AgentKind.PREDATOR

    @property
    def alive(self) -> bool:
        return self.health > 0.0

    @staticmethod
    def spawn_boid(
        agent_id: int,
        pos: Vector2,
        genome: Genome,
        now: float = 0.0,
        rng: random.Random = random,
    ) -> "Agent":
        return Agent(
            id=agent_id,
            kind=AgentKind.BOID,
            position=Vector2(pos),
            genome=genome.clone(),
            velocity=random_unit_vector(rng),
            birth_time=now,
        )

    @staticmethod
    def spawn_predator(
        agent_id: int,
        pos: Vector2,
        genome: Genome,
        predator_genome: PredatorGenome,
        now: float = 0.0,
        rng: random.Random = random,
    ) -> "Agent":
        agent = Agent.spawn_boid(agent_id, pos, genome, now=now, rng=rng)
        agent.kind = AgentKind.PREDATOR
        agent.predator_genome = predator_genome.clone()
        return agent

    def add_health(self, amount: float) -> None:
        self.health = max(0.0, min(config.MAX_HEALTH, self.health + amount))

    def age(self, now: float) -> float:
        return now - self.birth_time

    # --- presentation / debug overlay boundary ---

    def health_blend(self) -> float:
        """0.0 = low-health color, 1.0 = full-health color."""
        return max(0.0, min(1.0, self.health / config.MAX_HEALTH))

    def perception_radii(self) -> Dict[str, float]:
        if self.predator_genome is not None:
            return {"prey": self.predator_genome.prey_perception}
        return {
            "food": self.genome.food_perception_radius,
            "poison": self.genome.poison_perception_radius,
            "predator": self.genome.predator_perception_radius,
        }
