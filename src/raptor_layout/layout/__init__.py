"""Layout strategies and the public layout API."""

from __future__ import annotations

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
from raptor_layout.layout.components import DisjointSet, find_connected_components, group_by_component
from raptor_layout.layout.engine import STRATEGIES, build_options, compute_layout, option_names
from raptor_layout.layout.force import ForceOptions, force_layout
from raptor_layout.layout.islands import ClusterIslandOptions, IslandGrid, cluster_island_layout
from raptor_layout.layout.primitives import (
    CircleOptions,
    ConcentricOptions,
    GridOptions,
    circle_layout,
    circle_positions,
    concentric_layout,
    degree_rings,
    grid_layout,
)
from raptor_layout.layout.timeline import TimelineOptions, timeline_layout
from raptor_layout.layout.types import CanvasOptions, LayoutResult, Point

__all__ = [
    "STRATEGIES",
    "Body",
    "CanvasOptions",
    "CircleOptions",
    "ClusterIslandOptions",
    "ConcentricOptions",
    "DisjointSet",
    "ForceOptions",
    "GridOptions",
    "IslandGrid",
    "LayoutResult",
    "Point",
    "RandomOptions",
    "TimelineOptions",
    "build_options",
    "circle_layout",
    "circle_positions",
    "cluster_island_layout",
    "compute_layout",
    "concentric_layout",
    "count_overlaps",
    "degree_rings",
    "find_connected_components",
    "force_layout",
    "grid_layout",
    "group_by_component",
    "option_names",
    "random_layout",
    "relax",
    "seed_bodies",
    "separate",
    "timeline_layout",
    "working_area",
]
