"""raptor-layout: position-assignment engine for node-link graph views."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any

from raptor_layout.ir.graph import GraphEdge, GraphIR, GraphNode
from raptor_layout.layout.engine import build_options, compute_layout
from raptor_layout.layout.types import LayoutResult, Point
from raptor_layout.types import LayoutType

__all__ = [
    "GraphEdge",
    "GraphIR",
    "GraphNode",
    "LayoutResult",
    "LayoutType",
    "Point",
    "layout_graph",
]


def layout_graph(
    nodes: Iterable[GraphNode],
    edges: Iterable[GraphEdge] = (),
    layout: LayoutType | str = LayoutType.Force,
    seed: int | random.Random | None = None,
    **options: Any,
) -> LayoutResult:
    """Compute node positions for a normalized node/edge list.

    Args:
        nodes: Graph nodes; their order drives the deterministic layouts.
        edges: Directed edges whose endpoints are all in nodes.
        layout: Layout name ('grid', 'circle', 'concentric', 'random',
            'force', 'cluster_island', 'timeline') or LayoutType.
        seed: Integer seed or a random.Random for the stochastic layouts;
            None draws from an unseeded source.
        **options: Fields of the layout's option record (width, height, ...).

    Returns:
        A LayoutResult with one position per node id.

    Raises:
        ValueError: If the layout name or an option name is unknown.
    """
    layout_type = LayoutType.from_name(layout)
    layout_options = build_options(layout_type, **options)
    rng = seed if isinstance(seed, random.Random) else random.Random(seed)
    gir = GraphIR.from_records(nodes, edges)
    return compute_layout(gir, layout_type, layout_options, rng)
