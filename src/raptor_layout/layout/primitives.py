"""Deterministic primitive layouts: grid, circle and concentric-by-degree.

All three place nodes in input order and never consult a random source, so
identical input always yields identical output.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from raptor_layout.ir.graph import GraphIR
from raptor_layout.layout.types import CANVAS_MARGIN, CanvasOptions, LayoutResult, Point

logger = logging.getLogger(__name__)


# ─── Circle Sub-Layout ───────────────────────────────────────────────────────


def circle_positions(node_ids: Sequence[str], center: Point, radius: float) -> dict[str, Point]:
    """Spread node_ids evenly around a circle, starting at angle 0.

    A lone node sits on the centre rather than on the rim.
    """
    if len(node_ids) == 1:
        return {node_ids[0]: Point(center.x, center.y)}
    count = len(node_ids)
    positions: dict[str, Point] = {}
    for i, node_id in enumerate(node_ids):
        angle = (i / count) * math.pi * 2
        positions[node_id] = Point(center.x + math.cos(angle) * radius, center.y + math.sin(angle) * radius)
    return positions


# ─── Grid ────────────────────────────────────────────────────────────────────


@dataclass
class GridOptions(CanvasOptions):
    cols: int | None = None


def grid_layout(gir: GraphIR, options: GridOptions | None = None) -> LayoutResult:
    """Row-major placement, one node per cell centre."""
    options = options or GridOptions()
    node_ids = gir.node_ids()
    if not node_ids:
        return LayoutResult()

    cols = options.cols or math.ceil(math.sqrt(len(node_ids)))
    rows = math.ceil(len(node_ids) / cols)
    cell_w = (options.width - 2 * CANVAS_MARGIN) / cols
    cell_h = (options.height - 2 * CANVAS_MARGIN) / rows

    positions: dict[str, Point] = {}
    for i, node_id in enumerate(node_ids):
        col = i % cols
        row = i // cols
        positions[node_id] = Point(
            CANVAS_MARGIN + col * cell_w + cell_w / 2,
            CANVAS_MARGIN + row * cell_h + cell_h / 2,
        )

    logger.debug("grid layout: %d nodes in %dx%d cells", len(node_ids), cols, rows)
    return LayoutResult(positions=positions)


# ─── Circle ──────────────────────────────────────────────────────────────────


@dataclass
class CircleOptions(CanvasOptions):
    radius: float | None = None


def circle_layout(gir: GraphIR, options: CircleOptions | None = None) -> LayoutResult:
    """All nodes on one circle around the canvas centre."""
    options = options or CircleOptions()
    node_ids = gir.node_ids()
    if not node_ids:
        return LayoutResult()
    radius = options.radius or min(options.width, options.height) / 3
    logger.debug("circle layout: %d nodes, radius %.1f", len(node_ids), radius)
    return LayoutResult(positions=circle_positions(node_ids, options.center, radius))


# ─── Concentric ──────────────────────────────────────────────────────────────


@dataclass
class ConcentricOptions(CanvasOptions):
    min_radius: float = 80.0
    level_spacing: float = 120.0


def degree_rings(gir: GraphIR) -> list[tuple[int, list[str]]]:
    """Group node ids by degree, highest degree first, input order within a ring."""
    groups: dict[int, list[str]] = {}
    for node_id in gir.node_ids():
        groups.setdefault(gir.degree(node_id), []).append(node_id)
    return [(degree, groups[degree]) for degree in sorted(groups, reverse=True)]


def concentric_layout(gir: GraphIR, options: ConcentricOptions | None = None) -> LayoutResult:
    """Rings by degree: the best-connected nodes innermost."""
    options = options or ConcentricOptions()
    if gir.node_count() == 0:
        return LayoutResult()

    center = options.center
    positions: dict[str, Point] = {}
    rings = degree_rings(gir)
    for ring_index, (_degree, ring) in enumerate(rings):
        radius = options.min_radius + ring_index * options.level_spacing
        count = len(ring)
        for i, node_id in enumerate(ring):
            angle = (i / count) * math.pi * 2
            positions[node_id] = Point(center.x + math.cos(angle) * radius, center.y + math.sin(angle) * radius)

    logger.debug("concentric layout: %d nodes on %d rings", len(positions), len(rings))
    return LayoutResult(positions=positions)
