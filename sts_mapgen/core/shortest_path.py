"""Dijkstra shortest paths over a planar graph."""

import heapq
from typing import List, Sequence

import numpy as np

from .planar_graph import Graph, edge_cost

# "Not reached" distance; far above any accumulated integer path cost
SENTINEL = 1 << 60


def new_distances(n: int) -> np.ndarray:
    """Distance array of length n with every entry unreached."""
    return np.full(n, SENTINEL, dtype=np.int64)


def shortest_path(graph: Graph, distances: np.ndarray, source: int, target: int) -> List[int]:
    """
    Find the cheapest path from ``source`` to ``target``.

    ``distances`` is reset to the sentinel on entry and holds the final
    best distance from ``source`` to every vertex on return. Heap entries
    whose distance is worse than the recorded one are stale and skipped;
    a vertex can be queued several times before its distance settles.

    Args:
        graph: Adjacency lists with non-negative integer costs
        distances: int64 array with one slot per vertex
        source: Start vertex index
        target: Destination vertex index

    Returns:
        Vertex indices from source to target, or [] if target is unreachable
    """
    n = len(graph)
    if len(distances) != n:
        raise ValueError(f"Distance array has {len(distances)} slots for {n} vertices")
    if not (0 <= source < n and 0 <= target < n):
        raise ValueError(f"Source/target ({source}, {target}) out of range for {n} vertices")

    for i in range(n):
        distances[i] = SENTINEL
    previous = [-1] * n

    distances[source] = 0
    queue = [(0, source)]

    while queue:
        distance, current = heapq.heappop(queue)

        if distances[current] < distance:
            continue

        for edge in graph[current]:
            d = distance + edge.cost
            if d < distances[edge.to]:
                previous[edge.to] = current
                distances[edge.to] = d
                heapq.heappush(queue, (d, edge.to))

    if distances[target] == SENTINEL:
        return []

    path = []
    node = target
    while node != -1:
        path.append(node)
        node = previous[node]
    path.reverse()
    return path


def path_cost(graph: Graph, path: Sequence[int]) -> int:
    """
    Sum the cheapest edge costs along ``path``.

    Raises:
        ValueError: If two consecutive indices are not adjacent
    """
    total = 0
    for u, v in zip(path, path[1:]):
        cost = edge_cost(graph, u, v)
        if cost is None:
            raise ValueError(f"No edge between {u} and {v}")
        total += cost
    return total
