"""Blue-noise point generation around two fixed anchors."""

from typing import Optional, Sequence, Union

import numpy as np
import structlog

from .regions import CircleRegion, PolygonRegion
from ..utils.random import get_rng

logger = structlog.get_logger()

Region = Union[CircleRegion, PolygonRegion]


def poisson_disk_sample(width: float, height: float, radius: float,
                        rng: Optional[np.random.Generator] = None,
                        k: int = 30) -> np.ndarray:
    """
    Generate Poisson-disk distributed points in [0, width) x [0, height).

    Bridson's algorithm: every accepted point is at least ``radius`` from
    all others. A background grid with cells of size radius / sqrt(2)
    holds at most one point per cell, so a candidate only needs to be
    checked against the 5x5 block of cells around it.

    Args:
        width: Sampling area width
        height: Sampling area height
        radius: Minimum distance between points
        rng: Random generator (shared generator if omitted)
        k: Candidates tried around an active point before it is retired

    Returns:
        Array of [x, y] point coordinates
    """
    if width <= 0 or height <= 0:
        return np.empty((0, 2))
    if radius <= 0:
        raise ValueError(f"Sampling radius must be positive, got {radius}")

    rng = rng if rng is not None else get_rng()

    cell_size = radius / np.sqrt(2)
    grid_w = int(np.ceil(width / cell_size))
    grid_h = int(np.ceil(height / cell_size))
    grid = np.full((grid_h, grid_w), -1, dtype=np.int64)
    radius_squared = radius * radius

    def cell_of(x, y):
        return min(int(x / cell_size), grid_w - 1), min(int(y / cell_size), grid_h - 1)

    first = (rng.uniform(0, width), rng.uniform(0, height))
    points = [first]
    gx, gy = cell_of(*first)
    grid[gy, gx] = 0
    active = [0]

    while active:
        slot = int(rng.integers(len(active)))
        base_x, base_y = points[active[slot]]

        placed = False
        for _ in range(k):
            angle = rng.uniform(0, 2 * np.pi)
            distance = rng.uniform(radius, 2 * radius)
            x = base_x + distance * np.cos(angle)
            y = base_y + distance * np.sin(angle)
            if not (0 <= x < width and 0 <= y < height):
                continue

            gx, gy = cell_of(x, y)
            block = grid[max(gy - 2, 0):gy + 3, max(gx - 2, 0):gx + 3]
            nearby = block[block >= 0]
            if nearby.size:
                others = np.array([points[i] for i in nearby])
                if np.min((others[:, 0] - x) ** 2 + (others[:, 1] - y) ** 2) < radius_squared:
                    continue

            points.append((x, y))
            grid[gy, gx] = len(points) - 1
            active.append(len(points) - 1)
            placed = True
            break

        if not placed:
            # Swap-remove keeps the pick O(1)
            active[slot] = active[-1]
            active.pop()

    return np.array(points)


def generate_points(region: Region, start: Sequence[float], end: Sequence[float],
                    min_radius: float,
                    rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Generate a well-spaced point set inside ``region`` plus the two anchors.

    Sampled points outside the region, or closer than ``min_radius`` to
    either anchor, are dropped. The anchors are appended last, so the
    start anchor sits at index n-2 and the end anchor at n-1. A region too
    small to hold any point yields just the two anchors.

    Args:
        region: Convex region exposing bounds() and contains()
        start: Start anchor (x, y)
        end: End anchor (x, y)
        min_radius: Minimum separation between points
        rng: Random generator (shared generator if omitted)

    Returns:
        (n, 2) array of coordinates, anchors last
    """
    if min_radius <= 0:
        raise ValueError(f"min_radius must be positive, got {min_radius}")

    start = np.asarray(start, dtype=float)
    end = np.asarray(end, dtype=float)
    if start.shape != (2,) or end.shape != (2,):
        raise ValueError("Anchors must be (x, y) pairs")
    if np.array_equal(start, end):
        raise ValueError("Start and end anchors must be distinct")

    min_x, min_y, max_x, max_y = region.bounds()
    sampled = poisson_disk_sample(max_x - min_x, max_y - min_y, min_radius, rng)

    if len(sampled):
        sampled = sampled + np.array([min_x, min_y])
        keep = region.contains(sampled)
        keep &= np.linalg.norm(sampled - start, axis=1) >= min_radius
        keep &= np.linalg.norm(sampled - end, axis=1) >= min_radius
        sampled = sampled[keep]

    points = np.vstack([sampled.reshape(-1, 2), start, end])

    logger.info("Points generated",
                sampled=len(points) - 2,
                min_radius=min_radius,
                bounds=(min_x, min_y, max_x, max_y))

    return points
