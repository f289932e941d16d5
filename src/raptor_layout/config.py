"""Centralized configuration for raptor-layout."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass, field
from typing import Any

from raptor_layout.layout.engine import STRATEGIES, build_options
from raptor_layout.layout.types import CanvasOptions
from raptor_layout.types import LayoutType


@dataclass
class LayoutConfig:
    """The chosen layout and its option set, as a project stores it."""

    layout_type: LayoutType = field(default_factory=LayoutType.default)
    options: dict[str, Any] = field(default_factory=dict)
    seed: int | None = None

    def build_options(self) -> CanvasOptions:
        return build_options(self.layout_type, **self.options)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.layout_type.value, "options": dict(self.options), "seed": self.seed}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LayoutConfig:
        layout_type = LayoutType.from_name(data.get("type", LayoutType.default().value))
        options = dict(data.get("options") or {})
        build_options(layout_type, **options)  # reject unknown keys early
        return cls(layout_type=layout_type, options=options, seed=data.get("seed"))


def coerce_option(layout_type: LayoutType | str, name: str, raw: str) -> Any:
    """Convert a command-line string to the type the option field declares."""
    layout_type = LayoutType.from_name(layout_type)
    fields = {f.name: f for f in dataclasses.fields(STRATEGIES[layout_type].options_cls)}
    if name not in fields:
        raise ValueError(f"Unknown option '{name}' for {layout_type.value} layout; use {', '.join(sorted(fields))}")
    declared = str(fields[name].type)
    if "None" in declared and raw.lower() in ("none", "null", ""):
        return None
    try:
        if declared.startswith("int"):
            return int(raw)
        if declared.startswith("float"):
            return float(raw)
    except ValueError as e:
        raise ValueError(f"Option '{name}' expects {declared}, got '{raw}'") from e
    return raw


def parse_option_pairs(layout_type: LayoutType | str, pairs: list[str]) -> dict[str, Any]:
    """Parse ['key=value', ...] into typed option values."""
    options: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Malformed option '{pair}'; expected key=value")
        options[key.strip()] = coerce_option(layout_type, key.strip(), raw.strip())
    return options
