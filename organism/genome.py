"""
ecosim module: organism/genome.py

Heritable trait vectors.

- Genome: steering weights, speed and perception radii shared by every agent
- PredatorGenome: the extra prey-seeking traits a predator carries

Mutation lives in evolution/mutate.py; this module only holds the values.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
import random

import config


@dataclass
class Genome:
    """
    steering_force:
      - scales every seek/flee contribution (its absolute value is used)
    speed:
      - distance travelled per tick; also raises energy cost above 1.0
    *_pull:
      - signed weights, positive attracts, negative repels
    *_perception_radius:
      - max distance at which the matching target kind is noticed
    """
    steering_force: float
    speed: float
    food_pull: float
    poison_pull: float
    predator_pull: float
    food_perception_radius: float
    poison_perception_radius: float
    predator_perception_radius: float

    def __post_init__(self) -> None:
        for name in ("food_perception_radius", "poison_perception_radius", "predator_perception_radius"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")

    @property
    def effective_speed(self) -> float:
        # slow genomes still pay the base metabolic rate
        return max(self.speed, 1.0)

    @staticmethod
    def random(rng: random.Random = random) -> "Genome":
        return Genome(
            steering_force=rng.uniform(*config.STEERING_FORCE_RANGE),
            speed=rng.uniform(*config.SPEED_RANGE),
            food_pull=rng.uniform(*config.PULL_RANGE),
            poison_pull=rng.uniform(*config.PULL_RANGE),
            predator_pull=rng.uniform(*config.PULL_RANGE),
            food_perception_radius=rng.uniform(*config.PERCEPTION_RANGE),
            poison_perception_radius=rng.uniform(*config.PERCEPTION_RANGE),
            predator_perception_radius=rng.uniform(*config.PERCEPTION_RANGE),
        )

    def clone(self) -> "Genome":
        return Genome(**{f.name: getattr(self, f.name) for f in fields(self)})


@dataclass
class PredatorGenome:
    prey_perception: float
    prey_pull: float

    def __post_init__(self) -> None:
        if self.prey_perception < 0.0:
            raise ValueError(f"prey_perception must be >= 0, got {self.prey_perception}")

    @staticmethod
    def random(rng: random.Random = random) -> "PredatorGenome":
        return PredatorGenome(
            prey_perception=rng.uniform(*config.PREY_PERCEPTION_RANGE),
            prey_pull=rng.uniform(*config.PREY_PULL_RANGE),
        )

    def clone(self) -> "PredatorGenome":
        return PredatorGenome(prey_perception=self.prey_perception, prey_pull=self.prey_pull)
