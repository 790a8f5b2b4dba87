"""Convex sampling regions for point generation."""

from typing import NamedTuple, Sequence, Tuple

import numpy as np
import shapely
from shapely.geometry import Polygon


class CircleRegion(NamedTuple):
    """Disc-shaped sampling region."""
    center_x: float
    center_y: float
    radius: float

    def bounds(self) -> Tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y)."""
        return (
            self.center_x - self.radius,
            self.center_y - self.radius,
            self.center_x + self.radius,
            self.center_y + self.radius,
        )

    def contains(self, points: np.ndarray) -> np.ndarray:
        """Boolean mask of points inside the disc (boundary included)."""
        points = np.asarray(points, dtype=float).reshape(-1, 2)
        dx = points[:, 0] - self.center_x
        dy = points[:, 1] - self.center_y
        return dx * dx + dy * dy <= self.radius * self.radius


class PolygonRegion:
    """
    Convex polygon sampling region backed by shapely.

    Args:
        vertices: Polygon outline as a sequence of (x, y) pairs
    """

    def __init__(self, vertices: Sequence[Tuple[float, float]]):
        polygon = Polygon(vertices)
        if polygon.is_empty or polygon.area <= 0:
            raise ValueError("Polygon region must have a positive area")
        if not polygon.is_valid or not np.isclose(polygon.convex_hull.area, polygon.area):
            raise ValueError("Polygon region must be convex")
        self.polygon = polygon

    def bounds(self) -> Tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y)."""
        return tuple(self.polygon.bounds)

    def contains(self, points: np.ndarray) -> np.ndarray:
        """Boolean mask of points inside the polygon (boundary included)."""
        points = np.asarray(points, dtype=float).reshape(-1, 2)
        return shapely.intersects_xy(self.polygon, points[:, 0], points[:, 1])


def circle_between(start: Sequence[float], end: Sequence[float]) -> CircleRegion:
    """
    Build the circle whose diameter is the segment from start to end.

    This is the default map area: both anchors sit on its rim.
    """
    start = np.asarray(start, dtype=float)
    end = np.asarray(end, dtype=float)
    center = (start + end) / 2
    radius = float(np.linalg.norm(end - start) / 2)
    return CircleRegion(float(center[0]), float(center[1]), radius)
