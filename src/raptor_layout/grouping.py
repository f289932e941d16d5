"""Meta-nodes: synthetic nodes standing for a group of nodes sharing an attribute value."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from raptor_layout.ir.graph import GraphNode
from raptor_layout.layout.types import Point

EMPTY_GROUP = "(empty)"
UNGROUPED = "(ungrouped)"


@dataclass
class GroupingConfig:
    enabled: bool = False
    group_by_attribute: str | None = None
    auto_collapse: bool = False


@dataclass
class MetaNode:
    id: str
    label: str
    group_by_attribute: str
    group_value: str
    child_node_ids: list[str] = field(default_factory=list)
    collapsed: bool = False


def _group_keys(node: GraphNode, attribute: str) -> list[str]:
    value = node.attributes.get(attribute)
    if isinstance(value, list):
        return [str(v) if v != "" else EMPTY_GROUP for v in value]
    if value is None or value == "":
        return [UNGROUPED]
    return [str(value)]


def generate_meta_nodes(nodes: Iterable[GraphNode], config: GroupingConfig) -> list[MetaNode]:
    """One meta-node per attribute value shared by more than one node.

    A node with a list value joins the group of every element.
    """
    if not config.enabled or not config.group_by_attribute:
        return []
    attribute = config.group_by_attribute

    groups: dict[str, list[str]] = {}
    for node in nodes:
        for key in _group_keys(node, attribute):
            groups.setdefault(key, []).append(node.id)

    return [
        MetaNode(
            id=f"meta-{attribute}-{value}",
            label=f"{value} ({len(members)})",
            group_by_attribute=attribute,
            group_value=value,
            child_node_ids=members,
            collapsed=config.auto_collapse,
        )
        for value, members in groups.items()
        if len(members) > 1
    ]


def visible_nodes(nodes: Iterable[GraphNode], meta_nodes: Iterable[MetaNode]) -> list[GraphNode]:
    """Nodes not hidden inside a collapsed meta-node."""
    hidden: set[str] = set()
    for meta in meta_nodes:
        if meta.collapsed:
            hidden.update(meta.child_node_ids)
    return [n for n in nodes if n.id not in hidden]


def meta_node_for(node_id: str, meta_nodes: Iterable[MetaNode]) -> MetaNode | None:
    for meta in meta_nodes:
        if node_id in meta.child_node_ids:
            return meta
    return None


def meta_node_position(meta: MetaNode, positions: Mapping[str, Point]) -> Point | None:
    """Centroid of the positioned children, or None if none is positioned."""
    child_points = [positions[cid] for cid in meta.child_node_ids if cid in positions]
    if not child_points:
        return None
    return Point(
        sum(p.x for p in child_points) / len(child_points),
        sum(p.y for p in child_points) / len(child_points),
    )


def meta_node_positions(meta_nodes: Iterable[MetaNode], positions: Mapping[str, Point]) -> dict[str, Point]:
    out: dict[str, Point] = {}
    for meta in meta_nodes:
        point = meta_node_position(meta, positions)
        if point is not None:
            out[meta.id] = point
    return out
