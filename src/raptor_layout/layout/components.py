"""Connected components via a disjoint-set forest (union-find).

Path compression plus union-by-rank keeps find() near-constant. Component
indices are handed out in first-seen node order and carry no ranking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)


class DisjointSet:
    """Union-find forest over string ids."""

    def __init__(self, ids: Iterable[str] = ()) -> None:
        self.parent: dict[str, str] = {}
        self.rank: dict[str, int] = {}
        for item in ids:
            self.add(item)

    def add(self, item: str) -> None:
        if item not in self.parent:
            self.parent[item] = item
            self.rank[item] = 0

    def find(self, item: str) -> str:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression: point every node on the walk straight at the root
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: str, b: str) -> str:
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return root_a
        rank_a = self.rank[root_a]
        rank_b = self.rank[root_b]
        if rank_a < rank_b:
            self.parent[root_a] = root_b
            return root_b
        self.parent[root_b] = root_a
        if rank_a == rank_b:
            self.rank[root_a] = rank_a + 1
        return root_a

    def connected(self, a: str, b: str) -> bool:
        return self.find(a) == self.find(b)


def find_connected_components(node_ids: Iterable[str], edges: Iterable[tuple[str, str]]) -> dict[str, int]:
    """Map every node id to a zero-based connected-component index.

    Edge direction is ignored. Every edge endpoint must be one of node_ids.
    """
    ids = list(node_ids)
    forest = DisjointSet(ids)
    for src, tgt in edges:
        forest.union(src, tgt)

    root_to_component: dict[str, int] = {}
    components: dict[str, int] = {}
    for node_id in ids:
        root = forest.find(node_id)
        if root not in root_to_component:
            root_to_component[root] = len(root_to_component)
        components[node_id] = root_to_component[root]

    logger.debug("union-find: %d nodes in %d components", len(ids), len(root_to_component))
    return components


def group_by_component(node_ids: Iterable[str], components: dict[str, int]) -> list[list[str]]:
    """Bucket node ids per component, ordered by component index."""
    buckets: dict[int, list[str]] = {}
    for node_id in node_ids:
        buckets.setdefault(components[node_id], []).append(node_id)
    return [buckets[idx] for idx in sorted(buckets)]
