"""Intermediate representation: graph records and GraphIR."""

from raptor_layout.ir.graph import GraphEdge, GraphIR, GraphNode

__all__ = [
    "GraphEdge",
    "GraphIR",
    "GraphNode",
]
