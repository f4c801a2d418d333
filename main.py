"""
Live ecosystem: boids and predators forage, evade, reproduce and evolve.
"""

from __future__ import annotations
import logging

import pygame

import config
from organism.agent import AgentKind
from render.renderer import Camera, draw_hud, draw_world
from world.context import SimContext
from world.scheduler import Simulation

logger = logging.getLogger("ecosim")


def handle_key(key: int, ctx: SimContext) -> None:
    settings = ctx.settings
    if key == pygame.K_BACKSPACE:
        settings.toggle("camera_follow_boid")
    elif key == pygame.K_TAB:
        settings.toggle("enable_gizmos")
    elif key == pygame.K_BACKSLASH:
        settings.toggle("show_plots")


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("ecosim")
    clock = pygame.time.Clock()

    sim = Simulation(SimContext())
    sim.bootstrap()
    cam = Camera(config.SCREEN_W, config.SCREEN_H)

    running = True
    while running:
        dt = clock.tick(config.FPS) / 1000.0
        dt = min(dt, 1 / 30)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False
                else:
                    handle_key(e.key, sim.ctx)

        sim.step(dt)

        settings = sim.ctx.settings
        follow = None
        if settings.camera_follow_boid:
            follow = next(iter(sim.world.boids()), None)
        elif settings.camera_follow_predator:
            follow = next(iter(sim.world.predators()), None)
        if follow is not None:
            cam.follow(follow.position)

        draw_world(screen, cam, sim.world, settings)

        stats = sim.ctx.stats
        hud = {
            "boids": sim.world.count(AgentKind.BOID),
            "predators": sim.world.count(AgentKind.PREDATOR),
            "food": sim.world.count_food(),
            "poison": sim.world.count_poison(),
            "sim_time": sim.ctx.now,
            "show_plots": settings.show_plots,
            "avg_lifespan": (stats["avg_lifespan"].items or [0.0])[-1],
            "avg_speed": (stats["speed"].items or [0.0])[-1],
        }
        draw_hud(screen, hud)

        pygame.display.flip()

    logger.info("stopped after %.1fs simulated, %d ticks", sim.ctx.now, sim.ctx.tick)
    pygame.quit()


if __name__ == "__main__":
    main()
