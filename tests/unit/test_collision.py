"""Tests for layout.collision — seeding, relaxation, cleanup and the random strategy.

Each phase is exercised on its own before the full pipeline.
"""

from __future__ import annotations

import math
import random

import pytest

from raptor_layout.ir.graph import GraphIR
from raptor_layout.layout.collision import (
    Body,
    RandomOptions,
    count_overlaps,
    random_layout,
    relax,
    seed_bodies,
    separate,
    working_area,
)

# ─── Helpers ──────────────────────────────────────────────────────────────────


class ConstantRandom(random.Random):
    """A random source that always returns the same value."""

    def __init__(self, value: float = 0.5) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def make_gir(count: int) -> GraphIR:
    return GraphIR.from_pairs([f"n{i}" for i in range(count)])


def clump(count: int, size: float, seed: int = 1) -> list[Body]:
    rng = random.Random(seed)
    return [Body(id=f"n{i}", x=rng.random() * size, y=rng.random() * size) for i in range(count)]


def distance(a: Body, b: Body) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


# ─── Options ──────────────────────────────────────────────────────────────────


class TestRandomOptions:
    def test_min_distance_defaults_to_two_and_a_half_radii(self):
        assert RandomOptions().min_distance == pytest.approx(100)
        assert RandomOptions(node_radius=10).min_distance == pytest.approx(25)


# ─── Phase 1: Seed ────────────────────────────────────────────────────────────


class TestWorkingArea:
    def test_small_graph_uses_requested_canvas(self):
        assert working_area(1, RandomOptions()) == (800, 600)

    def test_dense_graph_grows_area(self):
        """50 nodes need 8 columns of 100 units plus padding on both sides."""
        assert working_area(50, RandomOptions()) == (900, 900)

    def test_only_short_axis_grows(self):
        width, height = working_area(36, RandomOptions())
        assert width == 800
        assert height == 700


class TestSeedBodies:
    def test_inside_working_area(self):
        options = RandomOptions()
        ids = [f"n{i}" for i in range(50)]
        bodies = seed_bodies(ids, options, random.Random(3))
        width, height = working_area(len(ids), options)
        assert [b.id for b in bodies] == ids
        for b in bodies:
            assert options.padding <= b.x <= width - options.padding
            assert options.padding <= b.y <= height - options.padding
            assert (b.vx, b.vy) == (0, 0)


# ─── Phase 2: Relaxation ──────────────────────────────────────────────────────


class TestRelax:
    def test_reduces_overlaps(self):
        bodies = clump(20, 100)
        before = count_overlaps(bodies, 100)
        relax(bodies, 100)
        assert count_overlaps(bodies, 100) < before

    def test_pushes_pair_apart_along_axis(self):
        a = Body("a", 0, 0)
        b = Body("b", 10, 0)
        relax([a, b], 100, iterations=1)
        assert a.x < 0 < 10 < b.x
        assert a.y == b.y == 0

    def test_ignores_separated_pairs(self):
        a = Body("a", 0, 0)
        b = Body("b", 500, 0)
        relax([a, b], 100)
        assert (a.x, b.x) == (0, 500)

    def test_coincident_pair_left_for_cleanup(self):
        a = Body("a", 5, 5)
        b = Body("b", 5, 5)
        relax([a, b], 100)
        assert (a.x, a.y, b.x, b.y) == (5, 5, 5, 5)

    def test_velocity_is_damped(self):
        a = Body("a", 0, 0)
        b = Body("b", 50, 0)
        relax([a, b], 100, iterations=1, damping=0.5, strength=1.0)
        # impulse (100 - 50) / 50 = 1, moved by 1 then halved
        assert a.x == pytest.approx(-1)
        assert a.vx == pytest.approx(-0.5)


# ─── Phase 3: Cleanup ─────────────────────────────────────────────────────────


class TestSeparate:
    def test_clean_input_needs_no_pass(self):
        bodies = [Body("a", 0, 0), Body("b", 200, 0)]
        assert separate(bodies, 100) == 0

    def test_half_deficit_plus_margin_each(self):
        a = Body("a", 0, 0)
        b = Body("b", 10, 0)
        assert separate([a, b], 100, margin=1.0) == 1
        assert a.x == pytest.approx(-46)
        assert b.x == pytest.approx(56)
        assert distance(a, b) == pytest.approx(102)

    def test_coincident_pair_split_on_random_axis(self):
        a = Body("a", 5, 5)
        b = Body("b", 5, 5)
        separate([a, b], 100, rng=random.Random(9))
        assert distance(a, b) >= 100

    def test_reduces_overlaps_in_clump(self):
        bodies = clump(30, 10)
        before = count_overlaps(bodies, 100)
        separate(bodies, 100, passes=20, rng=random.Random(2))
        assert count_overlaps(bodies, 100) < before

    def test_respects_pass_budget(self):
        bodies = clump(30, 10)
        assert separate(bodies, 100, passes=1, rng=random.Random(2)) == 1


# ─── Strategy ─────────────────────────────────────────────────────────────────


class TestRandomLayout:
    def test_empty(self):
        assert random_layout(make_gir(0)).positions == {}

    def test_one_finite_position_per_node(self):
        result = random_layout(make_gir(25), rng=random.Random(4))
        assert set(result.positions) == {f"n{i}" for i in range(25)}
        assert all(p.is_finite() for p in result.positions.values())

    def test_seeded_runs_repeat(self):
        gir = make_gir(15)
        assert random_layout(gir, rng=random.Random(11)) == random_layout(gir, rng=random.Random(11))

    def test_fifty_nodes_mostly_separated(self):
        """At default radius almost no pair ends closer than the minimum distance."""
        options = RandomOptions()
        result = random_layout(make_gir(50), options, random.Random(5))
        points = list(result.positions.values())
        pairs = len(points) * (len(points) - 1) // 2
        assert count_overlaps(points, options.min_distance) / pairs < 0.05

    def test_duplicate_seeding_stays_finite(self):
        """Every node seeded on the same spot still ends up finite and spread."""
        result = random_layout(make_gir(10), rng=ConstantRandom(0.5))
        points = list(result.positions.values())
        assert all(p.is_finite() for p in points)
        assert len({(round(p.x, 6), round(p.y, 6)) for p in points}) > 1
