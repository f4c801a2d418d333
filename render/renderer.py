"""
ecosim module: render/renderer.py

Pygame drawing of the world (top-down). Read-only: only the presentation
and debug-overlay values the core exposes are used here.
"""

from __future__ import annotations
import math
from typing import Dict

import pygame
from pygame.math import Vector2

import config
from organism.agent import Agent
from render import colors
from world.context import Settings
from world.food import Consumable
from world.physics import world_bounds


class Camera:
    """
    Maps world coordinates (origin-centered, y up) to screen pixels.
    """

    def __init__(self, screen_w: int, screen_h: int):
        self.screen_w = screen_w
        self.screen_h = screen_h
        self.scale = min(screen_w / (2 * config.WORLD_W), screen_h / (2 * config.WORLD_H))
        self.center = Vector2()

    def follow(self, target: Vector2, rate: float = 0.05) -> None:
        self.center = self.center.lerp(target, rate)

    def to_screen(self, pos: Vector2) -> tuple[int, int]:
        x = (pos.x - self.center.x) * self.scale + self.screen_w / 2
        y = self.screen_h / 2 - (pos.y - self.center.y) * self.scale
        return int(x), int(y)


def draw_boundary(screen: pygame.Surface, cam: Camera) -> None:
    min_x, min_y, max_x, max_y = world_bounds()
    left, top = cam.to_screen(Vector2(min_x, max_y))
    right, bottom = cam.to_screen(Vector2(max_x, min_y))
    pygame.draw.rect(screen, colors.BOUNDARY, pygame.Rect(left, top, right - left, bottom - top), 1)


def draw_consumable(screen: pygame.Surface, cam: Camera, item: Consumable) -> None:
    # fade toward the background as the item decays
    base = colors.FOOD if item.is_food else colors.POISON
    col = colors.lerp(colors.BG, base, item.opacity())
    pygame.draw.circle(screen, col, cam.to_screen(item.position), 2)


def draw_agent(screen: pygame.Surface, cam: Camera, agent: Agent) -> None:
    if agent.is_predator:
        col = colors.lerp(colors.PREDATOR_LOW_HEALTH, colors.PREDATOR, agent.health_blend())
        r = 6
    else:
        col = colors.lerp(colors.BOID_LOW_HEALTH, colors.BOID, agent.health_blend())
        r = 4

    x, y = cam.to_screen(agent.position)
    # orientation is offset by +90deg for sprite "up"; undo it for the nose line
    heading = agent.orientation - math.pi / 2 + math.pi
    nose = (x + math.cos(heading) * r * 2, y - math.sin(heading) * r * 2)
    pygame.draw.circle(screen, col, (x, y), r)
    pygame.draw.line(screen, col, (x, y), nose, 1)


_GIZMO_COLORS: Dict[str, tuple] = {
    "food": colors.GIZMO_FOOD,
    "poison": colors.GIZMO_POISON,
    "predator": colors.GIZMO_PREDATOR,
    "prey": colors.GIZMO_PREY,
}


def draw_gizmos(screen: pygame.Surface, cam: Camera, agent: Agent) -> None:
    center = cam.to_screen(agent.position)
    for name, radius in agent.perception_radii().items():
        r = int(radius * cam.scale)
        if r > 0:
            pygame.draw.circle(screen, _GIZMO_COLORS[name], center, r, 1)


def draw_world(screen: pygame.Surface, cam: Camera, world, settings: Settings) -> None:
    screen.fill(colors.BG)
    draw_boundary(screen, cam)
    for item in world.consumables.values():
        draw_consumable(screen, cam, item)
    for agent in world.agents.values():
        draw_agent(screen, cam, agent)
        if settings.enable_gizmos:
            draw_gizmos(screen, cam, agent)


def draw_hud(screen: pygame.Surface, stats: dict) -> None:
    font = pygame.font.Font(None, 26)

    lines = [
        f"Boids: {stats.get('boids', 0)}  Predators: {stats.get('predators', 0)}",
        f"Food: {stats.get('food', 0)}  Poison: {stats.get('poison', 0)}",
        f"Sim time: {stats.get('sim_time', 0.0):.1f}s",
    ]
    if stats.get("show_plots"):
        lines.append(f"Avg lifespan: {stats.get('avg_lifespan', 0.0):.1f}s")
        lines.append(f"Avg speed: {stats.get('avg_speed', 0.0):.2f}")

    y = 10
    for line in lines:
        txt = font.render(line, True, colors.HUD)
        screen.blit(txt, (12, y))
        y += 22
