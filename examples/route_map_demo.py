#!/usr/bin/env python3
"""
Demonstration of branching route generation.

Builds a session with the default anchors, adds a handful of routes and
draws the result: region outline, triangulation, routes and room kinds.
"""

import argparse

import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from sts_mapgen.core import CircleRegion, RoomKind, add_path, create_session, reset, room_kind
from sts_mapgen.core.planar_graph import edge_count
from sts_mapgen.core.session import pristine_cost
from sts_mapgen.utils.logging_utils import configure_logging

ROOM_COLORS = {
    RoomKind.START: "red",
    RoomKind.BOSS: "darkred",
    RoomKind.MONSTER: "black",
    RoomKind.TREASURE: "goldenrod",
    RoomKind.EVENT: "royalblue",
}


def draw_session(session, ax, game_style=False):
    """Draw a session onto a matplotlib axis."""
    points = session.points

    if isinstance(session.region, CircleRegion):
        ax.add_patch(Circle((session.region.center_x, session.region.center_y),
                            session.region.radius, fill=False, color="black", lw=1))

    if not game_style and len(session.triangulation):
        ax.triplot(points[:, 0], points[:, 1], session.triangulation.simplices,
                   color="lightgray", lw=0.8)
        ax.scatter(points[:, 0], points[:, 1], s=8, color="black", zorder=2)

    route_color = "olive" if game_style else "red"
    for path in session.paths:
        if len(path) < 2:
            continue
        ax.plot(points[path, 0], points[path, 1], color=route_color, lw=2, zorder=3)

    visited = {index for path in session.paths for index in path}
    for index in sorted(visited):
        kind = room_kind(session, index)
        ax.scatter(points[index, 0], points[index, 1], s=60,
                   color=ROOM_COLORS[kind], zorder=4)

    ax.set_aspect("equal")
    ax.invert_yaxis()
    ax.set_axis_off()


def main():
    parser = argparse.ArgumentParser(description="Draw a generated route map")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--paths", type=int, default=6)
    parser.add_argument("--min-radius", type=float, default=80.0)
    args = parser.parse_args()

    configure_logging("INFO", "plain")

    print("=== Route Map Demo ===\n")
    session = create_session(min_radius=args.min_radius, seed=args.seed)
    print(f"   - Points: {len(session.points)}")
    print(f"   - Triangles: {len(session.triangulation)}")
    print(f"   - Edges: {edge_count(session.graph)}")

    for i in range(args.paths):
        path = add_path(session)
        if path:
            print(f"   - Route {i + 1}: {len(path)} rooms, cost {pristine_cost(session, path)}")
        else:
            print(f"   - Route {i + 1}: unreachable")

    fig, (left, right) = plt.subplots(1, 2, figsize=(14, 7))
    draw_session(session, left)
    draw_session(session, right, game_style=True)
    left.set_title("Triangulation and routes")
    right.set_title("Game style")
    plt.tight_layout()
    plt.show()

    reset(session)
    print(f"\nAfter reset: {len(session.paths)} routes")


if __name__ == "__main__":
    main()
