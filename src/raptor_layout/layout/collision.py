"""Random placement with collision avoidance.

Phases:
  1. Seed (uniform random, working area grown to fit n nodes)
  2. Relaxation (damped pairwise repulsion between overlapping nodes)
  3. Cleanup (direct displacement of pairs still closer than min distance)

Each phase is a separate function and can be run on its own.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

from raptor_layout.ir.graph import GraphIR
from raptor_layout.layout.types import CanvasOptions, LayoutResult, Point

logger = logging.getLogger(__name__)


@dataclass
class RandomOptions(CanvasOptions):
    padding: float = 50.0
    node_radius: float = 40.0
    separation_factor: float = 2.5
    iterations: int = 150
    damping: float = 0.85
    repulsion_strength: float = 1.0
    cleanup_passes: int = 20
    cleanup_margin: float = 1.0

    @property
    def min_distance(self) -> float:
        return self.node_radius * self.separation_factor


@dataclass
class Body:
    """A node being simulated: position plus velocity."""

    id: str
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0


# ─── Phase 1: Seed ───────────────────────────────────────────────────────────


def working_area(count: int, options: RandomOptions) -> tuple[float, float]:
    """Canvas size grown so that count nodes fit at min_distance spacing."""
    side = math.ceil(math.sqrt(count)) if count else 0
    required = side * options.min_distance + 2 * options.padding
    return max(options.width, required), max(options.height, required)


def seed_bodies(node_ids: Sequence[str], options: RandomOptions, rng: random.Random) -> list[Body]:
    width, height = working_area(len(node_ids), options)
    pad = options.padding
    return [
        Body(
            id=node_id,
            x=pad + rng.random() * (width - 2 * pad),
            y=pad + rng.random() * (height - 2 * pad),
        )
        for node_id in node_ids
    ]


# ─── Phase 2: Relaxation ─────────────────────────────────────────────────────


def relax(
    bodies: list[Body],
    min_distance: float,
    iterations: int = 150,
    damping: float = 0.85,
    strength: float = 1.0,
) -> None:
    """Push apart every pair closer than min_distance, in place.

    Coincident pairs get no impulse here; cleanup separates them.
    """
    count = len(bodies)
    for _iteration in range(iterations):
        for i in range(count):
            a = bodies[i]
            for j in range(i + 1, count):
                b = bodies[j]
                dx = b.x - a.x
                dy = b.y - a.y
                distance = math.hypot(dx, dy)
                if distance <= 0 or distance >= min_distance:
                    continue
                force = (min_distance - distance) / distance * strength
                fx = dx / distance * force
                fy = dy / distance * force
                a.vx -= fx
                a.vy -= fy
                b.vx += fx
                b.vy += fy

        for body in bodies:
            body.x += body.vx
            body.y += body.vy
            body.vx *= damping
            body.vy *= damping


# ─── Phase 3: Hard-separation cleanup ────────────────────────────────────────


def separate(
    bodies: list[Body],
    min_distance: float,
    passes: int = 20,
    margin: float = 1.0,
    rng: random.Random | None = None,
) -> int:
    """Displace overlapping pairs apart, in place.

    Returns the number of passes that still found an overlap; stops at the
    first clean pass.
    """
    rng = rng or random.Random()
    count = len(bodies)
    for pass_no in range(passes):
        moved = 0
        for i in range(count):
            a = bodies[i]
            for j in range(i + 1, count):
                b = bodies[j]
                dx = b.x - a.x
                dy = b.y - a.y
                distance = math.hypot(dx, dy)
                if distance >= min_distance:
                    continue
                if distance == 0:
                    angle = rng.random() * math.pi * 2
                    ux, uy = math.cos(angle), math.sin(angle)
                else:
                    ux, uy = dx / distance, dy / distance
                push = (min_distance - distance) / 2 + margin
                a.x -= ux * push
                a.y -= uy * push
                b.x += ux * push
                b.y += uy * push
                moved += 1
        if moved == 0:
            return pass_no
    return passes


def count_overlaps(points: Sequence[Body | Point], min_distance: float) -> int:
    """Number of pairs closer than min_distance."""
    total = 0
    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            if math.hypot(points[j].x - points[i].x, points[j].y - points[i].y) < min_distance:
                total += 1
    return total


# ─── Strategy ────────────────────────────────────────────────────────────────


def random_layout(
    gir: GraphIR,
    options: RandomOptions | None = None,
    rng: random.Random | None = None,
) -> LayoutResult:
    """Random seeding followed by relaxation and cleanup."""
    options = options or RandomOptions()
    rng = rng or random.Random()
    node_ids = gir.node_ids()
    if not node_ids:
        return LayoutResult()

    min_distance = options.min_distance
    bodies = seed_bodies(node_ids, options, rng)
    relax(bodies, min_distance, options.iterations, options.damping, options.repulsion_strength)
    used = separate(bodies, min_distance, options.cleanup_passes, options.cleanup_margin, rng)

    logger.debug("random layout: %d nodes, %d cleanup passes", len(bodies), used)
    if used == options.cleanup_passes and logger.isEnabledFor(logging.DEBUG):
        logger.debug("random layout: %d overlaps left after cleanup", count_overlaps(bodies, min_distance))
    return LayoutResult(positions={b.id: Point(b.x, b.y) for b in bodies})
