"""
ecosim module: evolution/mutate.py

Mutation operators for genomes and predator genomes.

Each trait independently mutates with probability MUTATION_PROBABILITY by a
fixed +/- MUTATION_STEP, scaled per trait. There is no crossover and no
clamping to the init ranges, so traits drift across generations. Perception
radii are the one exception: they are floored at zero.
"""

from __future__ import annotations
import random
from typing import Dict

import config
from organism.genome import Genome, PredatorGenome

# trait -> delta multiplier
GENOME_SCALES: Dict[str, float] = {
    "steering_force": config.STEERING_MUTATION_SCALE,
    "speed": 1.0,
    "food_pull": 1.0,
    "poison_pull": 1.0,
    "predator_pull": 1.0,
    "food_perception_radius": config.RADIUS_MUTATION_SCALE,
    "poison_perception_radius": config.RADIUS_MUTATION_SCALE,
    "predator_perception_radius": config.RADIUS_MUTATION_SCALE,
}

PREDATOR_GENOME_SCALES: Dict[str, float] = {
    "prey_perception": config.RADIUS_MUTATION_SCALE,
    "prey_pull": 1.0,
}

_RADII = {
    "food_perception_radius",
    "poison_perception_radius",
    "predator_perception_radius",
    "prey_perception",
}


def mutation_delta(rng: random.Random = random) -> float:
    """
    0.0 most of the time; otherwise +/- MUTATION_STEP picked by a coin flip.
    """
    if rng.random() > 1.0 - config.MUTATION_PROBABILITY:
        return config.MUTATION_STEP if rng.random() > 0.5 else -config.MUTATION_STEP
    return 0.0


def _mutate_traits(target, scales: Dict[str, float], rng: random.Random) -> None:
    for name, scale in scales.items():
        delta = mutation_delta(rng)
        if delta == 0.0:
            continue
        value = getattr(target, name) + delta * scale
        if name in _RADII:
            value = max(0.0, value)
        setattr(target, name, value)


def mutate_genome(genome: Genome, rng: random.Random = random) -> Genome:
    """
    Return a mutated clone of ``genome``; the parent is left untouched.
    """
    mutated = genome.clone()
    _mutate_traits(mutated, GENOME_SCALES, rng)
    return mutated


def mutate_predator_genome(genome: PredatorGenome, rng: random.Random = random) -> PredatorGenome:
    mutated = genome.clone()
    _mutate_traits(mutated, PREDATOR_GENOME_SCALES, rng)
    return mutated
