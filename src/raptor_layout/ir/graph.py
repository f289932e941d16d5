"""Graph IR — wraps the normalized node/edge lists in a networkx MultiDiGraph.

This module owns the canonical graph data structure consumed by every layout
strategy. Node insertion order follows the input order, which is what the
deterministic strategies rely on. Parallel edges are kept so that degree
counts every edge endpoint.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import networkx as nx

AttributeValue = str | int | float | bool | list[str]


@dataclass
class GraphNode:
    id: str
    label: str = ""
    tags: list[str] = field(default_factory=list)
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    timestamp: float | None = None
    source_files: list[str] = field(default_factory=list)
    is_stub: bool = False

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.id

    @classmethod
    def stub(cls, node_id: str) -> GraphNode:
        """A placeholder node for an id only known from an edge endpoint."""
        return cls(id=node_id, label=node_id, is_stub=True)


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str
    id: str | None = None
    label: str | None = None


class GraphIR:
    """The graph intermediate representation handed to layout strategies.

    Wraps a networkx MultiDiGraph and exposes the topology queries the
    strategies need (degree, undirected neighbours, edge endpoints).
    """

    def __init__(self, digraph: nx.MultiDiGraph) -> None:
        self.digraph = digraph

    @classmethod
    def from_records(cls, nodes: Iterable[GraphNode], edges: Iterable[GraphEdge] = ()) -> GraphIR:
        """Build a GraphIR from node and edge records, preserving node order."""
        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        for node in nodes:
            if node.id not in digraph:
                digraph.add_node(node.id, data=node)
        for edge in edges:
            _ensure_node(digraph, edge.source)
            _ensure_node(digraph, edge.target)
            digraph.add_edge(edge.source, edge.target, data=edge)
        return cls(digraph)

    @classmethod
    def from_pairs(cls, node_ids: Iterable[str], pairs: Iterable[tuple[str, str]] = ()) -> GraphIR:
        """Build a GraphIR from bare ids and (source, target) tuples."""
        nodes = [GraphNode(id=node_id) for node_id in node_ids]
        edges = [GraphEdge(source=src, target=tgt) for src, tgt in pairs]
        return cls.from_records(nodes, edges)

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def node_ids(self) -> list[str]:
        return list(self.digraph.nodes)

    def nodes(self) -> list[GraphNode]:
        return [self.digraph.nodes[n]["data"] for n in self.digraph.nodes]

    def node(self, node_id: str) -> GraphNode:
        return self.digraph.nodes[node_id]["data"]

    def edges(self) -> list[GraphEdge]:
        return [attrs["data"] for _, _, attrs in self.digraph.edges(data=True)]

    def edge_pairs(self) -> list[tuple[str, str]]:
        return [(src, tgt) for src, tgt in self.digraph.edges()]

    def degree(self, node_id: str) -> int:
        """Number of edge endpoints touching node_id, ignoring direction."""
        if node_id not in self.digraph:
            return 0
        return self.digraph.degree(node_id)

    def neighbors(self, node_id: str) -> list[str]:
        """Undirected adjacency: successors then predecessors, without repeats.

        Order follows edge insertion and does not depend on string hashing.
        """
        if node_id not in self.digraph:
            return []
        return list(dict.fromkeys([*self.digraph.successors(node_id), *self.digraph.predecessors(node_id)]))

    def adjacency(self) -> dict[str, list[str]]:
        return {node_id: self.neighbors(node_id) for node_id in self.digraph.nodes}

    def stub_ids(self) -> list[str]:
        return [n for n in self.digraph.nodes if self.digraph.nodes[n]["data"].is_stub]


def _ensure_node(digraph: nx.MultiDiGraph, node_id: str) -> None:
    if node_id not in digraph:
        digraph.add_node(node_id, data=GraphNode.stub(node_id))


def _section(data: dict, key: str) -> list:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _string_list(raw: dict, key: str) -> list[str]:
    value = raw.get(key) or []
    if not isinstance(value, list):
        raise ValueError(f"node '{raw['id']}': '{key}' must be a list, got {type(value).__name__}")
    return [str(v) for v in value]


def _timestamp(raw: dict) -> float | None:
    value = raw.get("timestamp")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"node '{raw['id']}': 'timestamp' must be a number or null, got {value!r}")
    return value


def records_from_dict(data: dict) -> tuple[list[GraphNode], list[GraphEdge]]:
    """Build node and edge records from a {"nodes": [...], "edges": [...]} document.

    Raises ValueError on any shape the layout strategies cannot consume.
    """
    if not isinstance(data, dict):
        raise ValueError("graph document must be an object with 'nodes' and 'edges'")
    nodes: list[GraphNode] = []
    for raw in _section(data, "nodes"):
        if isinstance(raw, str):
            raw = {"id": raw}
        if not isinstance(raw, dict) or "id" not in raw:
            raise ValueError(f"node without an id: {raw!r}")
        attributes = raw.get("attributes") or {}
        if not isinstance(attributes, dict):
            raise ValueError(f"node '{raw['id']}': 'attributes' must be an object, got {type(attributes).__name__}")
        nodes.append(
            GraphNode(
                id=str(raw["id"]),
                label=str(raw.get("label") or ""),
                tags=_string_list(raw, "tags"),
                attributes=dict(attributes),
                timestamp=_timestamp(raw),
                source_files=_string_list(raw, "source_files"),
                is_stub=bool(raw.get("is_stub", False)),
            )
        )
    edges: list[GraphEdge] = []
    for raw in _section(data, "edges"):
        if not isinstance(raw, dict) or "source" not in raw or "target" not in raw:
            raise ValueError(f"edge needs 'source' and 'target': {raw!r}")
        edges.append(
            GraphEdge(
                source=str(raw["source"]),
                target=str(raw["target"]),
                id=raw.get("id"),
                label=raw.get("label"),
            )
        )
    return nodes, edges
