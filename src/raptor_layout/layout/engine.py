"""Layout engine registry: maps a LayoutType to its strategy and option record."""

from __future__ import annotations

import dataclasses
import logging
import random
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from raptor_layout.ir.graph import GraphIR
from raptor_layout.layout.collision import RandomOptions, random_layout
from raptor_layout.layout.force import ForceOptions, force_layout
from raptor_layout.layout.islands import ClusterIslandOptions, cluster_island_layout
from raptor_layout.layout.primitives import (
    CircleOptions,
    ConcentricOptions,
    GridOptions,
    circle_layout,
    concentric_layout,
    grid_layout,
)
from raptor_layout.layout.timeline import TimelineOptions, timeline_layout
from raptor_layout.layout.types import CanvasOptions, LayoutResult
from raptor_layout.types import LayoutType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Strategy:
    run: Callable[..., LayoutResult]
    options_cls: type[CanvasOptions]
    stochastic: bool = False


STRATEGIES: dict[LayoutType, Strategy] = {
    LayoutType.Grid: Strategy(grid_layout, GridOptions),
    LayoutType.Circle: Strategy(circle_layout, CircleOptions),
    LayoutType.Concentric: Strategy(concentric_layout, ConcentricOptions),
    LayoutType.Random: Strategy(random_layout, RandomOptions, stochastic=True),
    LayoutType.Force: Strategy(force_layout, ForceOptions, stochastic=True),
    LayoutType.ClusterIsland: Strategy(cluster_island_layout, ClusterIslandOptions),
    LayoutType.Timeline: Strategy(timeline_layout, TimelineOptions, stochastic=True),
}


def option_names(layout_type: LayoutType | str) -> list[str]:
    strategy = STRATEGIES[LayoutType.from_name(layout_type)]
    return [f.name for f in dataclasses.fields(strategy.options_cls)]


def build_options(layout_type: LayoutType | str, **values: Any) -> CanvasOptions:
    """Instantiate the option record for layout_type from keyword values."""
    layout_type = LayoutType.from_name(layout_type)
    strategy = STRATEGIES[layout_type]
    known = set(option_names(layout_type))
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(
            f"Unknown option(s) for {layout_type.value} layout: {', '.join(unknown)}; "
            f"use {', '.join(sorted(known))}"
        )
    return strategy.options_cls(**values)


def compute_layout(
    gir: GraphIR,
    layout_type: LayoutType | str = LayoutType.Force,
    options: CanvasOptions | None = None,
    rng: random.Random | None = None,
) -> LayoutResult:
    """Run the strategy for layout_type on gir."""
    layout_type = LayoutType.from_name(layout_type)
    strategy = STRATEGIES[layout_type]
    if options is None:
        options = strategy.options_cls()
    elif not isinstance(options, strategy.options_cls):
        raise ValueError(
            f"{layout_type.value} layout expects {strategy.options_cls.__name__}, got {type(options).__name__}"
        )

    logger.debug("computing %s layout for %d nodes", layout_type.value, gir.node_count())
    if strategy.stochastic:
        return strategy.run(gir, options, rng)
    return strategy.run(gir, options)
