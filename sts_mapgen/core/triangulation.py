"""Delaunay triangulation of a point set, expressed as index triples."""

from dataclasses import dataclass
from typing import Set, Tuple

import numpy as np
import structlog
from scipy.spatial import Delaunay, QhullError

logger = structlog.get_logger()


@dataclass(frozen=True)
class Triangulation:
    """Triangles over a canonical point list.

    Each row of ``simplices`` holds three indices into the point array the
    triangulation was computed from, so vertices never need to be looked
    up by coordinate.
    """
    simplices: np.ndarray  # (m, 3) int

    def __len__(self) -> int:
        return len(self.simplices)

    def edges(self) -> Set[Tuple[int, int]]:
        """Unique undirected index pairs, smaller index first."""
        edges = set()
        for triangle in self.simplices:
            a, b, c = (int(v) for v in triangle)
            for u, v in ((a, b), (a, c), (b, c)):
                edges.add((min(u, v), max(u, v)))
        return edges


def empty_triangulation() -> Triangulation:
    return Triangulation(simplices=np.empty((0, 3), dtype=np.int64))


def triangulate(points: np.ndarray) -> Triangulation:
    """
    Triangulate a point set with scipy's Delaunay routine.

    Point sets that cannot be triangulated (fewer than three points, or all
    collinear) produce an empty triangulation rather than an error.

    Args:
        points: (n, 2) array of coordinates

    Returns:
        Triangulation with indices into ``points``
    """
    points = np.asarray(points, dtype=float)

    if len(points) < 3:
        logger.warning("Too few points to triangulate", points=len(points))
        return empty_triangulation()

    try:
        tri = Delaunay(points)
    except QhullError as e:
        logger.warning("Degenerate point set, no triangles", points=len(points), error=str(e))
        return empty_triangulation()

    logger.info("Triangulation calculated", points=len(points), triangles=len(tri.simplices))
    return Triangulation(simplices=tri.simplices.astype(np.int64))
