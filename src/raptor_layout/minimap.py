"""Minimap — maps graph coordinates onto a fixed-size overview and back.

The overview shows every node and meta-node inside a 200x150 box together
with the rectangle the main canvas currently shows. Clicking or dragging on
the overview re-centres the main viewport on the graph point under the
pointer. Only plain data comes out of here; painting is the caller's job.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from raptor_layout.layout.types import Point

logger = logging.getLogger(__name__)

MINIMAP_WIDTH: float = 200.0
MINIMAP_HEIGHT: float = 150.0
BOUNDS_PADDING: float = 100.0
FIT_MARGIN: float = 0.9

PanCallback = Callable[[Point], None]


@dataclass
class Viewport:
    """Pan offset and zoom of the main canvas."""

    pan: Point = field(default_factory=lambda: Point(0.0, 0.0))
    zoom: float = 1.0


@dataclass
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass
class Bounds:
    """Axis-aligned bounding box in graph coordinates."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def is_degenerate(self) -> bool:
        extent = (self.width, self.height)
        return not all(math.isfinite(v) and v > 0 for v in extent)

    @classmethod
    def from_positions(cls, *mappings: Mapping[str, Point], padding: float = BOUNDS_PADDING) -> Bounds | None:
        """Bounding box of every point in mappings, grown by padding on each side."""
        points = [p for mapping in mappings if mapping for p in mapping.values()]
        if not points:
            return None
        return cls(
            min_x=min(p.x for p in points) - padding,
            min_y=min(p.y for p in points) - padding,
            max_x=max(p.x for p in points) + padding,
            max_y=max(p.y for p in points) + padding,
        )


@dataclass
class MinimapTransform:
    """Uniform, aspect-preserving fit of a bounding box into the overview."""

    bounds: Bounds
    scale: float
    offset_x: float
    offset_y: float

    @classmethod
    def fit(
        cls, bounds: Bounds, width: float = MINIMAP_WIDTH, height: float = MINIMAP_HEIGHT
    ) -> MinimapTransform | None:
        """Centre bounds in a width x height overview, or None for a zero-extent box."""
        if bounds.is_degenerate():
            return None
        scale = min(width / bounds.width, height / bounds.height) * FIT_MARGIN
        return cls(
            bounds=bounds,
            scale=scale,
            offset_x=(width - bounds.width * scale) / 2,
            offset_y=(height - bounds.height * scale) / 2,
        )

    def to_minimap(self, point: Point) -> Point:
        return Point(
            (point.x - self.bounds.min_x) * self.scale + self.offset_x,
            (point.y - self.bounds.min_y) * self.scale + self.offset_y,
        )

    def to_graph(self, point: Point) -> Point:
        return Point(
            (point.x - self.offset_x) / self.scale + self.bounds.min_x,
            (point.y - self.offset_y) / self.scale + self.bounds.min_y,
        )

    def viewport_rect(self, viewport: Viewport, canvas_width: float, canvas_height: float) -> Rect:
        """The main canvas' visible area, in overview coordinates."""
        corner = self.to_minimap(Point(-viewport.pan.x / viewport.zoom, -viewport.pan.y / viewport.zoom))
        return Rect(
            x=corner.x,
            y=corner.y,
            width=canvas_width / viewport.zoom * self.scale,
            height=canvas_height / viewport.zoom * self.scale,
        )


def pan_to_center(graph_point: Point, zoom: float, canvas_width: float, canvas_height: float) -> Point:
    """Pan offset that puts graph_point in the middle of the canvas at zoom."""
    return Point(-graph_point.x * zoom + canvas_width / 2, -graph_point.y * zoom + canvas_height / 2)


@dataclass
class MinimapFrame:
    """Everything needed to paint one overview frame, in overview coordinates."""

    nodes: list[Point]
    meta_nodes: list[Point]
    viewport: Rect


class Minimap:
    """One overview widget: cached bounds plus pointer drag state.

    Bounds are recomputed only when the node or meta-node mapping object is
    replaced, so the overview scale stays put while the user pans or zooms.
    """

    def __init__(
        self,
        on_pan_change: PanCallback,
        canvas_width: float,
        canvas_height: float,
        width: float = MINIMAP_WIDTH,
        height: float = MINIMAP_HEIGHT,
    ) -> None:
        self.on_pan_change = on_pan_change
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.width = width
        self.height = height
        self.dragging = False
        self.node_positions: Mapping[str, Point] = {}
        self.meta_positions: Mapping[str, Point] = {}
        self.bounds: Bounds | None = None

    def set_positions(
        self,
        node_positions: Mapping[str, Point],
        meta_positions: Mapping[str, Point] | None = None,
    ) -> bool:
        """Adopt new position mappings; returns True if the bounds were recomputed."""
        if meta_positions is None:
            meta_positions = self.meta_positions
        if node_positions is self.node_positions and meta_positions is self.meta_positions:
            return False
        self.node_positions = node_positions
        self.meta_positions = meta_positions
        self.bounds = Bounds.from_positions(node_positions, meta_positions)
        logger.debug("minimap bounds recomputed: %s", self.bounds)
        return True

    def resize(self, canvas_width: float, canvas_height: float) -> None:
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height

    def transform(self) -> MinimapTransform | None:
        if self.bounds is None:
            return None
        return MinimapTransform.fit(self.bounds, self.width, self.height)

    def render(self, viewport: Viewport) -> MinimapFrame | None:
        """Overview frame for viewport, or None when there is nothing sane to draw."""
        transform = self.transform()
        if transform is None:
            return None
        return MinimapFrame(
            nodes=[transform.to_minimap(p) for p in self.node_positions.values()],
            meta_nodes=[transform.to_minimap(p) for p in self.meta_positions.values()],
            viewport=transform.viewport_rect(viewport, self.canvas_width, self.canvas_height),
        )

    def pan_for(self, x: float, y: float, viewport: Viewport) -> Point | None:
        """Pan offset centring the graph point under overview position (x, y)."""
        transform = self.transform()
        if transform is None:
            return None
        graph_point = transform.to_graph(Point(x, y))
        return pan_to_center(graph_point, viewport.zoom, self.canvas_width, self.canvas_height)

    def click(self, x: float, y: float, viewport: Viewport) -> Point | None:
        pan = self.pan_for(x, y, viewport)
        if pan is not None:
            self.on_pan_change(pan)
        return pan

    def pointer_down(self, x: float, y: float, viewport: Viewport) -> Point | None:
        self.dragging = True
        return self.click(x, y, viewport)

    def pointer_move(self, x: float, y: float, viewport: Viewport) -> Point | None:
        if not self.dragging:
            return None
        return self.click(x, y, viewport)

    def pointer_up(self) -> None:
        self.dragging = False

    pointer_leave = pointer_up
