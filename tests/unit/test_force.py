"""Tests for layout.force — the spring embedder."""

from __future__ import annotations

import itertools
import math
import random

import pytest

from raptor_layout.ir.graph import GraphIR
from raptor_layout.layout.collision import Body
from raptor_layout.layout.force import ForceOptions, force_layout, net_force, seed_bodies

# ─── Helpers ──────────────────────────────────────────────────────────────────


class ConstantRandom(random.Random):
    """A random source that always returns the same value."""

    def __init__(self, value: float = 0.5) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def mean_distance(positions, ids: list[str]) -> float:
    pairs = list(itertools.combinations(ids, 2))
    return sum(math.hypot(positions[a].x - positions[b].x, positions[a].y - positions[b].y) for a, b in pairs) / len(
        pairs
    )


# ─── Forces ───────────────────────────────────────────────────────────────────


class TestNetForce:
    def test_repulsion_magnitude_and_direction(self):
        """Repulsion is strength / (d^2 + 1), pointing away from the other node."""
        a = Body("a", 0, 0)
        b = Body("b", 3, 4)
        fx, fy = net_force(a, {"a": a, "b": b}, set(), 5000, 0.01)
        magnitude = 5000 / 26
        dist = math.sqrt(26)
        assert fx == pytest.approx(-3 / dist * magnitude)
        assert fy == pytest.approx(-4 / dist * magnitude)

    def test_attraction_pulls_toward_neighbour(self):
        a = Body("a", 0, 0)
        b = Body("b", 100, 0)
        fx, fy = net_force(a, {"a": a, "b": b}, {"b"}, 0, 0.01)
        assert fx == pytest.approx(1.0)
        assert fy == pytest.approx(0)

    def test_coincident_bodies_stay_finite(self):
        a = Body("a", 5, 5)
        b = Body("b", 5, 5)
        fx, fy = net_force(a, {"a": a, "b": b}, {"b"}, 5000, 0.01)
        assert (fx, fy) == (0, 0)

    def test_self_loop_neighbour_ignored(self):
        a = Body("a", 0, 0)
        assert net_force(a, {"a": a}, {"a"}, 5000, 0.01) == (0, 0)


class TestSeedBodies:
    def test_seeded_around_centre(self):
        options = ForceOptions()
        bodies = seed_bodies([f"n{i}" for i in range(40)], options, random.Random(1))
        for b in bodies.values():
            assert 200 <= b.x <= 600
            assert 150 <= b.y <= 450


# ─── Strategy ─────────────────────────────────────────────────────────────────


class TestForceLayout:
    def test_empty(self):
        assert force_layout(GraphIR.from_pairs([])).positions == {}

    def test_one_finite_position_per_node(self):
        ids = [f"n{i}" for i in range(30)]
        gir = GraphIR.from_pairs(ids, [(ids[i], ids[i + 1]) for i in range(29)])
        result = force_layout(gir, rng=random.Random(2))
        assert set(result.positions) == set(ids)
        assert all(p.is_finite() for p in result.positions.values())

    def test_seeded_runs_repeat(self):
        gir = GraphIR.from_pairs(["a", "b", "c"], [("a", "b")])
        assert force_layout(gir, rng=random.Random(3)) == force_layout(gir, rng=random.Random(3))

    def test_different_seeds_differ(self):
        gir = GraphIR.from_pairs(["a", "b", "c"], [("a", "b")])
        assert force_layout(gir, rng=random.Random(3)) != force_layout(gir, rng=random.Random(4))

    def test_connected_nodes_cluster(self):
        """A clique stays tighter than a set of unconnected nodes."""
        clique = [f"c{i}" for i in range(5)]
        loners = [f"l{i}" for i in range(5)]
        gir = GraphIR.from_pairs(clique + loners, list(itertools.combinations(clique, 2)))
        result = force_layout(gir, rng=random.Random(8))
        assert mean_distance(result.positions, clique) < mean_distance(result.positions, loners)

    def test_coincident_seeds_stay_finite(self):
        gir = GraphIR.from_pairs(["a", "b", "c"], [("a", "b")])
        result = force_layout(gir, rng=ConstantRandom())
        assert all(p.is_finite() for p in result.positions.values())

    def test_zero_iterations_returns_seed(self):
        gir = GraphIR.from_pairs(["a"])
        result = force_layout(gir, ForceOptions(iterations=0), ConstantRandom())
        assert (result.positions["a"].x, result.positions["a"].y) == (400, 300)
