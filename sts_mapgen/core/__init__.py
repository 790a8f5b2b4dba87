"""
Core route map generation functionality.
"""

from .regions import CircleRegion, PolygonRegion, circle_between
from .point_sampler import generate_points, poisson_disk_sample
from .triangulation import Triangulation, triangulate
from .planar_graph import Edge, Graph, build_graph, freeze_graph, is_symmetric
from .shortest_path import SENTINEL, new_distances, shortest_path, path_cost
from .session import GenerationSession, create_session, add_path, reset
from .rooms import RoomKind, room_kind, path_rooms

__all__ = ['CircleRegion', 'PolygonRegion', 'circle_between',
           'generate_points', 'poisson_disk_sample',
           'Triangulation', 'triangulate',
           'Edge', 'Graph', 'build_graph', 'freeze_graph', 'is_symmetric',
           'SENTINEL', 'new_distances', 'shortest_path', 'path_cost',
           'GenerationSession', 'create_session', 'add_path', 'reset',
           'RoomKind', 'room_kind', 'path_rooms']
