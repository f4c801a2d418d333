"""
ecosim module: render/colors.py

Central color palette.
"""

BG = (50, 62, 79)
BOUNDARY = (128, 128, 128)
HUD = (235, 235, 235)

FOOD = (142, 231, 112)
POISON = (235, 86, 75)

BOID = (255, 255, 255)
BOID_LOW_HEALTH = (102, 255, 227)
PREDATOR = (255, 236, 179)
PREDATOR_LOW_HEALTH = (255, 145, 102)

GIZMO_FOOD = (0, 255, 0)
GIZMO_POISON = (255, 0, 0)
GIZMO_PREDATOR = PREDATOR
GIZMO_PREY = (0, 255, 255)


def lerp(a: tuple, b: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(x + (y - x) * t) for x, y in zip(a, b))
