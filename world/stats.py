"""
ecosim module: world/stats.py

Time series for external plotting. Each series is a bounded FIFO: once it
holds MAX_NUM_POINTS samples the oldest one is dropped.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Deque, Dict, Iterable, List

import config

if TYPE_CHECKING:
    from organism.agent import Agent
    from world.world import World

SERIES_NAMES = (
    "num_boids",
    "num_predators",
    "num_food",
    "num_poison",
    "avg_lifespan",
    "avg_predator_lifespan",
    "food_perception",
    "poison_perception",
    "predator_perception",
    "prey_perception",
    "speed",
    "predator_speed",
    "food_affinity",
    "poison_affinity",
    "predator_affinity",
    "prey_affinity",
    "steering_force",
)


class LimitedSeries:
    def __init__(self, max_size: int = config.MAX_NUM_POINTS):
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self._items: Deque[float] = deque(maxlen=max_size)

    @property
    def max_size(self) -> int:
        return self._items.maxlen

    @property
    def items(self) -> List[float]:
        return list(self._items)

    def push(self, value: float) -> None:
        self._items.append(value)

    def __len__(self) -> int:
        return len(self._items)


def _mean(values: Iterable[float]) -> float:
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


@dataclass
class SimulationStats:
    max_points: int = config.MAX_NUM_POINTS
    series: Dict[str, LimitedSeries] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in SERIES_NAMES:
            self.series.setdefault(name, LimitedSeries(self.max_points))

    def __getitem__(self, name: str) -> LimitedSeries:
        return self.series[name]

    def collect(self, world: "World", now: float) -> Dict[str, float]:
        """
        Push one sample per series and return the sample. Counts are
        normalized by their ceilings; averages of an empty population are 0.
        """
        boids: List["Agent"] = world.boids()
        predators: List["Agent"] = world.predators()

        sample = {
            "num_boids": len(boids) / config.NUM_BOIDS,
            "num_predators": len(predators) / config.NUM_PREDATORS,
            "num_food": world.count_food() / config.NUM_FOOD,
            "num_poison": world.count_poison() / config.NUM_POISON,
            "avg_lifespan": _mean(b.age(now) for b in boids),
            "avg_predator_lifespan": _mean(p.age(now) for p in predators),
            "food_perception": _mean(b.genome.food_perception_radius for b in boids),
            "poison_perception": _mean(b.genome.poison_perception_radius for b in boids),
            "predator_perception": _mean(b.genome.predator_perception_radius for b in boids),
            "prey_perception": _mean(p.predator_genome.prey_perception for p in predators),
            "speed": _mean(b.genome.speed for b in boids),
            "predator_speed": _mean(p.genome.speed for p in predators),
            "food_affinity": _mean(b.genome.food_pull for b in boids),
            "poison_affinity": _mean(b.genome.poison_pull for b in boids),
            "predator_affinity": _mean(b.genome.predator_pull for b in boids),
            "prey_affinity": _mean(p.predator_genome.prey_pull for p in predators),
            "steering_force": _mean(b.genome.steering_force for b in boids),
        }
        for name, value in sample.items():
            self.series[name].push(value)
        return sample
