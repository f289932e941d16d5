"""Shared type definitions for raptor-layout.

Enums and small types used across the IR, layout strategies and the CLI.
"""

from __future__ import annotations

from enum import Enum


class LayoutType(Enum):
    Grid = "grid"
    Circle = "circle"
    Concentric = "concentric"
    Random = "random"  # random seeding + collision avoidance
    Force = "force"
    ClusterIsland = "cluster_island"
    Timeline = "timeline"

    @classmethod
    def default(cls) -> LayoutType:
        return cls.Force

    @classmethod
    def from_name(cls, name: str | LayoutType) -> LayoutType:
        """Resolve a layout name (case-insensitive, '-' or '_') to a LayoutType."""
        if isinstance(name, LayoutType):
            return name
        key = name.strip().lower().replace("-", "_")
        for member in cls:
            if member.value == key:
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown layout '{name}'; use one of: {choices}")
