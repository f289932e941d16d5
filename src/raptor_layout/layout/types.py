"""Layout types shared across layout strategies and the minimap."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class Point:
    """A 2D point in graph coordinates."""

    x: float
    y: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass
class LayoutResult:
    """Self-contained layout output: everything a renderer needs."""

    positions: dict[str, Point] = field(default_factory=dict)
    swimlanes: dict[str, float] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.positions)

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {"positions": {nid: p.to_dict() for nid, p in self.positions.items()}}
        if self.swimlanes:
            out["swimlanes"] = dict(self.swimlanes)
        return out


@dataclass
class CanvasOptions:
    """Canvas bounds shared by every strategy's option record."""

    width: float = 800.0
    height: float = 600.0

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)


# Margin the grid and timeline layouts keep on each side of the canvas
CANVAS_MARGIN: float = 50.0
