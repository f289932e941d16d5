"""Tests for layout.islands — cluster-island placement of connected components."""

from __future__ import annotations

import pytest

from raptor_layout.ir.graph import GraphIR
from raptor_layout.layout.islands import ClusterIslandOptions, IslandGrid, cluster_island_layout
from raptor_layout.layout.types import Point

# ─── Helpers ──────────────────────────────────────────────────────────────────


def triangles() -> GraphIR:
    """Nine nodes forming three disjoint triangles: 1-2-3, 4-5-6, 7-8-9."""
    ids = [str(i) for i in range(1, 10)]
    edges = []
    for base in (1, 4, 7):
        a, b, c = str(base), str(base + 1), str(base + 2)
        edges += [(a, b), (b, c), (c, a)]
    return GraphIR.from_pairs(ids, edges)


def inside(p: Point, origin: Point, width: float, height: float) -> bool:
    return origin.x <= p.x <= origin.x + width and origin.y <= p.y <= origin.y + height


# ─── IslandGrid ───────────────────────────────────────────────────────────────


class TestIslandGrid:
    def test_near_square(self):
        grid = IslandGrid.for_components(5, ClusterIslandOptions())
        assert (grid.cols, grid.rows) == (3, 2)

    def test_cell_geometry(self):
        grid = IslandGrid.for_components(3, ClusterIslandOptions())
        assert (grid.cols, grid.rows) == (2, 2)
        assert grid.island_width == pytest.approx(250)
        assert grid.island_height == pytest.approx(150)
        assert (grid.cell_origin(1).x, grid.cell_origin(1).y) == (450, 100)
        assert (grid.cell_center(2).x, grid.cell_center(2).y) == (225, 425)
        assert grid.inner_radius == pytest.approx(60)


# ─── Strategy ─────────────────────────────────────────────────────────────────


class TestClusterIslandLayout:
    def test_empty(self):
        assert cluster_island_layout(GraphIR.from_pairs([])).positions == {}

    def test_three_triangles_in_separate_cells(self):
        """Three components land in three distinct, non-overlapping cells of a 2x2 grid."""
        options = ClusterIslandOptions()
        result = cluster_island_layout(triangles(), options)
        grid = IslandGrid.for_components(3, options)
        assert (grid.cols, grid.rows) == (2, 2)

        for cell, members in enumerate((["1", "2", "3"], ["4", "5", "6"], ["7", "8", "9"])):
            origin = grid.cell_origin(cell)
            for node_id in members:
                assert inside(result.positions[node_id], origin, grid.island_width, grid.island_height)
            for other in range(3):
                if other != cell:
                    other_origin = grid.cell_origin(other)
                    for node_id in members:
                        assert not inside(
                            result.positions[node_id], other_origin, grid.island_width, grid.island_height
                        )

    def test_discovery_order_not_size(self):
        """A lone first node takes the first island even though the other component is larger."""
        gir = GraphIR.from_pairs(["a", "b", "c", "d"], [("b", "c"), ("c", "d")])
        result = cluster_island_layout(gir)
        # two islands side by side: 250 wide, 400 tall
        assert (result.positions["a"].x, result.positions["a"].y) == (225, 300)
        assert all(result.positions[n].x > 450 for n in ("b", "c", "d"))

    def test_single_component_uses_whole_canvas(self):
        gir = GraphIR.from_pairs(["a", "b"], [("a", "b")])
        result = cluster_island_layout(gir)
        # one 600x400 island centred at (400, 300), radius 0.8 * 200
        assert (result.positions["a"].x, result.positions["a"].y) == pytest.approx((560, 300))

    def test_deterministic(self):
        assert cluster_island_layout(triangles()) == cluster_island_layout(triangles())
