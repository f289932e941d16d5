"""Force-directed layout: a classical spring embedder.

Every node repels every other node and is pulled toward its neighbours.
Velocity is damped each step and scaled by a temperature that falls
linearly from 1 to 0, so the system settles by the last iteration. There is
no centering force and no boundary clamp; nodes drift as far as they need to.

Cost is O(iterations * n^2).
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

from raptor_layout.ir.graph import GraphIR
from raptor_layout.layout.collision import Body
from raptor_layout.layout.types import CanvasOptions, LayoutResult, Point

logger = logging.getLogger(__name__)


@dataclass
class ForceOptions(CanvasOptions):
    iterations: int = 100
    repulsion_strength: float = 5000.0
    attraction_strength: float = 0.01
    damping: float = 0.8
    seed_spread: float = 0.5  # fraction of the canvas the initial scatter covers


def seed_bodies(node_ids: list[str], options: ForceOptions, rng: random.Random) -> dict[str, Body]:
    center = options.center
    return {
        node_id: Body(
            id=node_id,
            x=center.x + (rng.random() - 0.5) * options.width * options.seed_spread,
            y=center.y + (rng.random() - 0.5) * options.height * options.seed_spread,
        )
        for node_id in node_ids
    }


def net_force(
    body: Body,
    bodies: dict[str, Body],
    neighbours: Sequence[str],
    repulsion_strength: float,
    attraction_strength: float,
) -> tuple[float, float]:
    """Sum of repulsion from all other bodies and attraction to neighbours."""
    fx = 0.0
    fy = 0.0
    for other in bodies.values():
        if other is body:
            continue
        dx = body.x - other.x
        dy = body.y - other.y
        dist_sq = dx * dx + dy * dy + 1  # +1 keeps coincident nodes finite
        dist = math.sqrt(dist_sq)
        repulsion = repulsion_strength / dist_sq
        fx += dx / dist * repulsion
        fy += dy / dist * repulsion

    for neighbour_id in neighbours:
        neighbour = bodies.get(neighbour_id)
        if neighbour is None or neighbour is body:
            continue
        dx = neighbour.x - body.x
        dy = neighbour.y - body.y
        dist = math.hypot(dx, dy)
        if dist > 0:
            attraction = dist * attraction_strength
            fx += dx / dist * attraction
            fy += dy / dist * attraction

    return fx, fy


def force_layout(
    gir: GraphIR,
    options: ForceOptions | None = None,
    rng: random.Random | None = None,
) -> LayoutResult:
    """Run the spring embedder for the full iteration budget."""
    options = options or ForceOptions()
    rng = rng or random.Random()
    node_ids = gir.node_ids()
    if not node_ids:
        return LayoutResult()

    bodies = seed_bodies(node_ids, options, rng)
    adjacency = gir.adjacency()
    iterations = options.iterations

    for iteration in range(iterations):
        temperature = 1 - iteration / iterations
        # Positions update in place, so later nodes see this step's moves
        for node_id in node_ids:
            body = bodies[node_id]
            fx, fy = net_force(
                body,
                bodies,
                adjacency[node_id],
                options.repulsion_strength,
                options.attraction_strength,
            )
            body.vx = (body.vx + fx) * options.damping
            body.vy = (body.vy + fy) * options.damping
            body.x += body.vx * temperature
            body.y += body.vy * temperature

    logger.debug("force layout: %d nodes, %d edges, %d iterations", len(node_ids), gir.edge_count(), iterations)
    return LayoutResult(positions={nid: Point(b.x, b.y) for nid, b in bodies.items()})
