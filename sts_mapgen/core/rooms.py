"""Room kinds shown at route nodes on the game-style map."""

from enum import Enum
from typing import List, Sequence

from .session import GenerationSession


class RoomKind(str, Enum):
    """Room placed at a route node."""
    START = "start"
    BOSS = "boss"
    MONSTER = "monster"
    TREASURE = "treasure"
    EVENT = "event"


# Non-anchor rooms cycle through these by point index
_ROOM_CYCLE = (RoomKind.MONSTER, RoomKind.TREASURE, RoomKind.EVENT)


def room_kind(session: GenerationSession, index: int) -> RoomKind:
    """Kind of room placed at point ``index``."""
    if not 0 <= index < len(session.points):
        raise ValueError(f"Point index {index} out of range for {len(session.points)} points")
    if index == session.start_index:
        return RoomKind.START
    if index == session.end_index:
        return RoomKind.BOSS
    return _ROOM_CYCLE[index % 3]


def path_rooms(session: GenerationSession, path: Sequence[int]) -> List[RoomKind]:
    """Room kinds along a path, in path order."""
    return [room_kind(session, index) for index in path]
