"""
ecosim module: world/world.py

World state container: one flat store of agents and consumables keyed by id.

Passes never insert or remove entities directly while iterating. They queue
spawn/despawn commands on ``world.commands`` and the scheduler drains the
buffer with ``apply_commands`` once the pass is done. Deaths are queued as
DeathEvent records and drained later in the same tick by the reseed pass.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Dict, Iterator, List, Tuple, Union

from pygame.math import Vector2

from organism.agent import Agent, AgentKind
from world.food import Consumable

logger = logging.getLogger("ecosim.world")

Entity = Union[Agent, Consumable]


@dataclass
class DeathEvent:
    position: Vector2


@dataclass
class CommandBuffer:
    spawns: List[Entity] = field(default_factory=list)
    despawns: List[int] = field(default_factory=list)

    def spawn(self, entity: Entity) -> None:
        self.spawns.append(entity)

    def despawn(self, entity_id: int) -> None:
        self.despawns.append(entity_id)

    def drain(self) -> Tuple[List[Entity], List[int]]:
        spawns, despawns = self.spawns, self.despawns
        self.spawns, self.despawns = [], []
        return spawns, despawns

    def __len__(self) -> int:
        return len(self.spawns) + len(self.despawns)


class World:
    def __init__(self) -> None:
        self.agents: Dict[int, Agent] = {}
        self.consumables: Dict[int, Consumable] = {}
        self.commands = CommandBuffer()
        self.death_events: List[DeathEvent] = []
        self._next_id = 0

    def next_id(self) -> int:
        entity_id = self._next_id
        self._next_id += 1
        return entity_id

    def apply_commands(self) -> None:
        """
        Removals first, then insertions. Removing an id that is already gone
        is a no-op, so two passes may both queue the same despawn.
        """
        spawns, despawns = self.commands.drain()
        for entity_id in despawns:
            if self.agents.pop(entity_id, None) is None:
                self.consumables.pop(entity_id, None)
        for entity in spawns:
            if isinstance(entity, Agent):
                self.agents[entity.id] = entity
            else:
                self.consumables[entity.id] = entity
        if spawns or despawns:
            logger.debug("applied %d spawns, %d despawns", len(spawns), len(despawns))

    def emit_death(self, position: Vector2) -> None:
        self.death_events.append(DeathEvent(Vector2(position)))

    def drain_death_events(self) -> List[DeathEvent]:
        events, self.death_events = self.death_events, []
        return events

    # --- queries (snapshots, safe to iterate while queuing commands) ---

    def agents_of(self, kind: AgentKind) -> List[Agent]:
        return [a for a in self.agents.values() if a.kind == kind]

    def boids(self) -> List[Agent]:
        return self.agents_of(AgentKind.BOID)

    def predators(self) -> List[Agent]:
        return self.agents_of(AgentKind.PREDATOR)

    def food(self) -> List[Consumable]:
        return [c for c in self.consumables.values() if c.is_food]

    def poison(self) -> List[Consumable]:
        return [c for c in self.consumables.values() if not c.is_food]

    def count(self, kind: AgentKind) -> int:
        return sum(1 for a in self.agents.values() if a.kind == kind)

    def count_food(self) -> int:
        return sum(1 for c in self.consumables.values() if c.is_food)

    def count_poison(self) -> int:
        return len(self.consumables) - self.count_food()

    def __iter__(self) -> Iterator[Entity]:
        yield from list(self.agents.values())
        yield from list(self.consumables.values())
