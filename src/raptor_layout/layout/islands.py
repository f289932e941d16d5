"""Cluster-island layout: one island per connected component.

Components are laid out on a near-square grid of islands in discovery order
(not by size); each island arranges its nodes with the circle sub-layout.
Nodes of different components never share an island cell as long as the
spacing is positive and the canvas leaves the cells a positive size.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from raptor_layout.ir.graph import GraphIR
from raptor_layout.layout.components import find_connected_components, group_by_component
from raptor_layout.layout.primitives import circle_positions
from raptor_layout.layout.types import CanvasOptions, LayoutResult, Point

logger = logging.getLogger(__name__)

# Share of the island's half-extent the inner circle may use
ISLAND_FILL: float = 0.8


@dataclass
class ClusterIslandOptions(CanvasOptions):
    island_spacing: float = 100.0


@dataclass
class IslandGrid:
    """Geometry of the island grid for a given component count."""

    cols: int
    rows: int
    island_width: float
    island_height: float
    spacing: float

    @classmethod
    def for_components(cls, count: int, options: ClusterIslandOptions) -> IslandGrid:
        cols = math.ceil(math.sqrt(count))
        rows = math.ceil(count / cols)
        spacing = options.island_spacing
        return cls(
            cols=cols,
            rows=rows,
            island_width=(options.width - (cols + 1) * spacing) / cols,
            island_height=(options.height - (rows + 1) * spacing) / rows,
            spacing=spacing,
        )

    def cell_origin(self, index: int) -> Point:
        """Top-left corner of the index-th island, row-major."""
        row = index // self.cols
        col = index % self.cols
        return Point(
            self.spacing + col * (self.island_width + self.spacing),
            self.spacing + row * (self.island_height + self.spacing),
        )

    def cell_center(self, index: int) -> Point:
        origin = self.cell_origin(index)
        return Point(origin.x + self.island_width / 2, origin.y + self.island_height / 2)

    @property
    def inner_radius(self) -> float:
        return min(self.island_width, self.island_height) / 2 * ISLAND_FILL


def cluster_island_layout(gir: GraphIR, options: ClusterIslandOptions | None = None) -> LayoutResult:
    """Isolate each connected component on its own island."""
    options = options or ClusterIslandOptions()
    node_ids = gir.node_ids()
    if not node_ids:
        return LayoutResult()

    components = find_connected_components(node_ids, gir.edge_pairs())
    islands = group_by_component(node_ids, components)
    grid = IslandGrid.for_components(len(islands), options)

    positions: dict[str, Point] = {}
    for index, members in enumerate(islands):
        positions.update(circle_positions(members, grid.cell_center(index), grid.inner_radius))

    logger.debug(
        "cluster-island layout: %d nodes, %d islands on a %dx%d grid",
        len(node_ids),
        len(islands),
        grid.cols,
        grid.rows,
    )
    return LayoutResult(positions=positions)
