"""Timeline layout: x from timestamp, y from an optional swimlane attribute."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from raptor_layout.ir.graph import GraphIR, GraphNode
from raptor_layout.layout.primitives import CircleOptions, circle_layout
from raptor_layout.layout.types import CANVAS_MARGIN, CanvasOptions, LayoutResult, Point

logger = logging.getLogger(__name__)

UNKNOWN_LANE = "unknown"


@dataclass
class TimelineOptions(CanvasOptions):
    swimlane_attribute: str | None = None
    untimed_spacing: float = 40.0  # vertical gap between nodes that have no timestamp


def swimlane_key(node: GraphNode, attribute: str) -> str:
    value = node.attributes.get(attribute)
    if isinstance(value, list):
        return str(value[0]) if value else UNKNOWN_LANE
    if value is None or value == "":
        return UNKNOWN_LANE
    return str(value)


def timeline_layout(
    gir: GraphIR,
    options: TimelineOptions | None = None,
    rng: random.Random | None = None,
) -> LayoutResult:
    """Spread timed nodes left to right by timestamp.

    Without any timestamped node this falls back to the circle layout.
    """
    options = options or TimelineOptions()
    rng = rng or random.Random()
    nodes = gir.nodes()
    if not nodes:
        return LayoutResult()

    timed = sorted((n for n in nodes if n.timestamp is not None), key=lambda n: n.timestamp)
    untimed = [n for n in nodes if n.timestamp is None]
    if not timed:
        logger.debug("timeline layout: no timestamps, using circle layout")
        return circle_layout(gir, CircleOptions(width=options.width, height=options.height))

    min_time = timed[0].timestamp
    time_range = (timed[-1].timestamp - min_time) or 1
    span = options.width - 2 * CANVAS_MARGIN

    def x_for(node: GraphNode) -> float:
        return CANVAS_MARGIN + (node.timestamp - min_time) / time_range * span

    positions: dict[str, Point] = {}
    swimlanes: dict[str, float] = {}

    if options.swimlane_attribute:
        lanes: dict[str, list[GraphNode]] = {}
        for node in timed:
            lanes.setdefault(swimlane_key(node, options.swimlane_attribute), []).append(node)
        lane_height = (options.height - 2 * CANVAS_MARGIN) / len(lanes)
        for i, (lane, members) in enumerate(lanes.items()):
            y = CANVAS_MARGIN + i * lane_height + lane_height / 2
            swimlanes[lane] = y
            for node in members:
                positions[node.id] = Point(x_for(node), y)
    else:
        for node in timed:
            jitter = (rng.random() - 0.5) * (options.height / 3)
            positions[node.id] = Point(x_for(node), options.height / 2 + jitter)

    for i, node in enumerate(untimed):
        positions[node.id] = Point(options.width - CANVAS_MARGIN, CANVAS_MARGIN + i * options.untimed_spacing)

    logger.debug("timeline layout: %d timed, %d untimed, %d swimlanes", len(timed), len(untimed), len(swimlanes))
    return LayoutResult(positions=positions, swimlanes=swimlanes)
