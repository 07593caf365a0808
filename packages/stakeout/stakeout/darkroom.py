"""Darkroom collage - where each photo lands on the table."""
from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Placement:
    x: float
    y: float
    rotation: float


def scatter(
    count: int,
    canvas: tuple[float, float],
    rng: random.Random,
    max_rotation: float = 30.0,
    spread: float = 0.125,
) -> list[Placement]:
    """Strew ``count`` photos around the canvas centre.

    Rotation is uniform in ``[-max_rotation, max_rotation]`` degrees; each
    centre is offset by up to ``spread`` of the canvas on each axis.
    """
    width, height = canvas
    placements: list[Placement] = []
    for _ in range(count):
        rotation = rng.uniform(-max_rotation, max_rotation)
        x = width / 2 + rng.uniform(-width * spread, width * spread)
        y = height / 2 + rng.uniform(-height * spread, height * spread)
        placements.append(Placement(x=x, y=y, rotation=rotation))
    return placements
