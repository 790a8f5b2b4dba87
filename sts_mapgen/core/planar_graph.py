"""Weighted adjacency graph built from a triangulation."""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
import structlog

logger = structlog.get_logger()


@dataclass
class Edge:
    """Outgoing edge: destination index and integer cost."""
    to: int
    cost: int


# graph[i] = outgoing edges of point i
Graph = List[List[Edge]]

# Immutable snapshot: frozen[i] = ((to, cost), ...)
FrozenGraph = Tuple[Tuple[Tuple[int, int], ...], ...]


def build_graph(triangles: np.ndarray, points: np.ndarray) -> Graph:
    """
    Build an undirected weighted graph from triangle index triples.

    Every pair of vertices in a triangle becomes a bidirectional edge whose
    cost is the floored Euclidean distance between them. Pairs shared by
    adjacent triangles are inserted once, and zero-cost pairs are skipped.

    Args:
        triangles: (m, 3) array of indices into ``points``
        points: (n, 2) array of coordinates

    Returns:
        Graph with one adjacency list per point
    """
    points = np.asarray(points, dtype=float)
    n = len(points)
    graph: Graph = [[] for _ in range(n)]
    seen = set()

    for triangle in np.asarray(triangles, dtype=np.int64).reshape(-1, 3):
        for i, j in ((0, 1), (0, 2), (1, 2)):
            src, dest = int(triangle[i]), int(triangle[j])
            if not (0 <= src < n and 0 <= dest < n):
                raise ValueError(
                    f"Triangle vertex out of range: ({src}, {dest}) for {n} points"
                )

            key = (min(src, dest), max(src, dest))
            if key in seen:
                continue
            seen.add(key)

            dx, dy = points[dest] - points[src]
            cost = int(math.floor(math.hypot(dx, dy)))
            if cost > 0:
                graph[src].append(Edge(dest, cost))
                graph[dest].append(Edge(src, cost))

    logger.debug("Graph built", vertices=n, edges=edge_count(graph))
    return graph


def freeze_graph(graph: Graph) -> FrozenGraph:
    """Take an immutable copy of ``graph``."""
    return tuple(tuple((edge.to, edge.cost) for edge in edges) for edges in graph)


def edge_count(graph: Graph) -> int:
    """Number of undirected edges (each stored in both directions)."""
    return sum(len(edges) for edges in graph) // 2


def edge_cost(graph: Graph, u: int, v: int) -> Optional[int]:
    """Cheapest cost of an edge u -> v, or None if they are not adjacent."""
    costs = [edge.cost for edge in graph[u] if edge.to == v]
    return min(costs) if costs else None


def graph_edges(graph: Graph) -> List[Tuple[int, int, int]]:
    """List (u, v, cost) once per undirected edge, u < v."""
    return [
        (u, edge.to, edge.cost)
        for u, edges in enumerate(graph)
        for edge in edges
        if u < edge.to
    ]


def is_symmetric(graph: Graph) -> bool:
    """Check that every edge u -> v has a v -> u twin with the same cost."""
    forward = {}
    for u, edges in enumerate(graph):
        for edge in edges:
            forward.setdefault((u, edge.to), []).append(edge.cost)

    for (u, v), costs in forward.items():
        if sorted(costs) != sorted(forward.get((v, u), [])):
            return False
    return True


def thaw_graph(frozen: FrozenGraph) -> Graph:
    """Mutable copy of a frozen snapshot."""
    return [[Edge(to, cost) for to, cost in edges] for edges in frozen]
