"""
ecosim module: world/context.py

Simulation context: the one object every pass reads runtime state from.

- Settings/PlotOptions are owned by the control boundary (keyboard, panel);
  they only change what is drawn, never what is simulated.
- SimContext carries the settings, the random source, the simulated clock
  and the stats series. It is built once when the world is bootstrapped.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random

from world.stats import SimulationStats


@dataclass
class PlotOptions:
    num_boids: bool = False
    lifespan: bool = True
    perception: bool = True
    affinity: bool = True
    steering: bool = False
    speed: bool = False


@dataclass
class Settings:
    camera_follow_boid: bool = False
    camera_follow_predator: bool = False
    camera_clamp_center: bool = True
    enable_gizmos: bool = False
    show_plots: bool = False
    show_plot_settings: bool = False
    plot_options: PlotOptions = field(default_factory=PlotOptions)

    def toggle(self, name: str) -> bool:
        value = not getattr(self, name)
        setattr(self, name, value)
        return value


@dataclass
class SimContext:
    settings: Settings = field(default_factory=Settings)
    # free-running by default; tests hand in a seeded instance
    rng: random.Random = field(default_factory=random.Random)
    now: float = 0.0
    tick: int = 0
    stats: SimulationStats = field(default_factory=SimulationStats)
