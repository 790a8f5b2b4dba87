"""
Generation session: owns the working graph and the accepted routes.

A session is created once from a sampled point set and its triangulation.
Each ``add_path`` call finds the current shortest route between the
anchors, records it, and raises the cost of one randomly chosen edge on
that route so later searches drift toward unused edges. ``reset`` rebuilds
the working graph from the untouched triangulation and forgets all routes;
the point set and triangulation survive a reset.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple, Union

import numpy as np
import structlog

from ..config import settings
from ..utils.random import make_rng
from .planar_graph import FrozenGraph, Graph, build_graph, freeze_graph, thaw_graph
from .point_sampler import generate_points
from .regions import CircleRegion, PolygonRegion, circle_between
from .shortest_path import new_distances, path_cost, shortest_path
from .triangulation import Triangulation, triangulate

logger = structlog.get_logger()

Path = List[int]


@dataclass
class GenerationSession:
    """State shared between route additions and resets.

    Anchors are always the last two points: start at n-2, end at n-1.
    """
    points: np.ndarray                # (n, 2) coordinates, anchors last
    triangulation: Triangulation      # construction input, never mutated
    pristine_graph: FrozenGraph       # snapshot taken right after construction
    graph: Graph                      # working graph, penalised in place
    distances: np.ndarray             # best distances from the last search
    rng: np.random.Generator
    penalty: int = 10000
    region: Optional[Union[CircleRegion, PolygonRegion]] = None
    paths: List[Path] = field(default_factory=list)

    @classmethod
    def from_triangulation(cls, points: np.ndarray, triangulation: Triangulation,
                           penalty: int = 10000,
                           rng: Optional[np.random.Generator] = None,
                           region=None) -> "GenerationSession":
        """Build a session from a point set and its precomputed triangulation."""
        points = np.asarray(points, dtype=float)
        if len(points) < 2:
            raise ValueError("A session needs at least the two anchor points")
        if penalty <= 0:
            raise ValueError(f"Penalty must be positive, got {penalty}")

        graph = build_graph(triangulation.simplices, points)
        return cls(
            points=points,
            triangulation=triangulation,
            pristine_graph=freeze_graph(graph),
            graph=graph,
            distances=new_distances(len(points)),
            rng=rng if rng is not None else make_rng(),
            penalty=penalty,
            region=region,
        )

    @property
    def start_index(self) -> int:
        return len(self.points) - 2

    @property
    def end_index(self) -> int:
        return len(self.points) - 1

    @property
    def start(self) -> Tuple[float, float]:
        return tuple(float(c) for c in self.points[self.start_index])

    @property
    def end(self) -> Tuple[float, float]:
        return tuple(float(c) for c in self.points[self.end_index])

    def path_edges(self) -> Set[Tuple[int, int]]:
        """Undirected edges used by any accepted path, smaller index first."""
        edges = set()
        for path in self.paths:
            for u, v in zip(path, path[1:]):
                edges.add((min(u, v), max(u, v)))
        return edges


def create_session(start: Optional[Sequence[float]] = None,
                   end: Optional[Sequence[float]] = None,
                   min_radius: Optional[float] = None,
                   region=None,
                   penalty: Optional[int] = None,
                   seed: Optional[int] = None) -> GenerationSession:
    """
    Sample points, triangulate them and wrap the result in a session.

    Unspecified arguments fall back to the application settings; the
    default region is the circle whose diameter joins the two anchors.

    Args:
        start: Start anchor (x, y)
        end: End anchor (x, y)
        min_radius: Minimum separation between sampled points
        region: Convex sampling region
        penalty: Cost added to one edge of each accepted path
        seed: Seed for both point sampling and edge selection

    Returns:
        Fresh session with no accepted paths
    """
    start = settings.start if start is None else start
    end = settings.end if end is None else end
    min_radius = settings.min_radius if min_radius is None else min_radius
    penalty = settings.penalty if penalty is None else penalty
    seed = settings.seed if seed is None else seed
    region = circle_between(start, end) if region is None else region

    logger.info("Creating generation session",
                start=tuple(start), end=tuple(end),
                min_radius=min_radius, penalty=penalty, seed=seed)

    rng = make_rng(seed)
    points = generate_points(region, start, end, min_radius, rng)
    triangulation = triangulate(points)
    session = GenerationSession.from_triangulation(
        points, triangulation, penalty=penalty, rng=rng, region=region
    )

    logger.info("Session ready",
                points=len(points), triangles=len(triangulation))
    return session


def increase_edge_cost(graph: Graph, u: int, v: int, amount: int) -> int:
    """
    Raise the cost of every u <-> v edge, both directions together.

    Returns:
        Number of directed edges updated

    Raises:
        ValueError: If ``amount`` is not positive or u and v are not adjacent
    """
    if amount <= 0:
        raise ValueError(f"Edge costs only increase, got amount {amount}")

    updated = 0
    for src, dest in ((u, v), (v, u)):
        for edge in graph[src]:
            if edge.to == dest:
                edge.cost += amount
                updated += 1

    if updated == 0:
        raise ValueError(f"No edge between {u} and {v}")
    return updated


def penalize_random_edge(graph: Graph, path: Sequence[int], amount: int,
                         rng: np.random.Generator) -> Tuple[int, int]:
    """
    Pick one consecutive pair of ``path`` uniformly and penalise that edge.

    Raises:
        ValueError: If the path has fewer than two indices
    """
    if len(path) < 2:
        raise ValueError(f"Cannot penalise an edge of a path with {len(path)} indices")

    i = int(rng.integers(0, len(path) - 1))
    u, v = path[i], path[i + 1]
    increase_edge_cost(graph, u, v, amount)
    return u, v


def add_path(session: GenerationSession) -> Path:
    """
    Find the next route between the anchors and discourage reusing it.

    The route is appended to ``session.paths`` even when empty. Only a
    route with at least one edge gets an edge penalised; an unreachable
    end anchor leaves the graph untouched.

    Returns:
        The new route, or [] if the end anchor is unreachable
    """
    path = shortest_path(session.graph, session.distances,
                         session.start_index, session.end_index)
    session.paths.append(path)

    if len(path) < 2:
        logger.warning("No route between anchors, skipping penalty",
                       path_length=len(path), paths=len(session.paths))
        return path

    cost = int(session.distances[session.end_index])
    u, v = penalize_random_edge(session.graph, path, session.penalty, session.rng)

    logger.info("Path added",
                path_length=len(path), cost=cost,
                penalized_edge=(u, v), paths=len(session.paths))
    return path


def reset(session: GenerationSession) -> None:
    """Rebuild the working graph from the triangulation and drop all paths."""
    session.graph = build_graph(session.triangulation.simplices, session.points)
    session.paths.clear()
    session.distances = new_distances(len(session.points))

    logger.info("Session reset", points=len(session.points))


def pristine_cost(session: GenerationSession, path: Sequence[int]) -> int:
    """Cost of ``path`` on the graph as it was before any penalty."""
    return path_cost(thaw_graph(session.pristine_graph), path)
