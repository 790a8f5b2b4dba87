"""FastAPI presentation adapter over a single generation session."""

import threading
from typing import List, Optional, Tuple

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ..config import settings
from ..core.planar_graph import graph_edges
from ..core.rooms import path_rooms, room_kind
from ..core.session import GenerationSession, add_path, create_session, pristine_cost, reset
from ..utils.logging_utils import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

app = FastAPI(
    title="Route Map Generator API",
    description="Branching route maps between two fixed anchors",
    version="0.1.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One session per process; the lock keeps session operations from interleaving
_session: Optional[GenerationSession] = None
_lock = threading.Lock()


# Request/Response models
class SessionRequest(BaseModel):
    """Request to start a new generation session."""

    start: Tuple[float, float] = Field(default_factory=lambda: settings.start, description="Start anchor")
    end: Tuple[float, float] = Field(default_factory=lambda: settings.end, description="End anchor")
    min_radius: float = Field(default_factory=lambda: settings.min_radius, gt=0,
                              description="Minimum separation between points")
    penalty: int = Field(default_factory=lambda: settings.penalty, gt=0,
                         description="Cost added to one edge of each accepted path")
    seed: Optional[int] = Field(None, description="Random seed for reproducible generation")


class SessionState(BaseModel):
    """Everything a renderer needs to draw the current session."""

    points: List[Tuple[float, float]]
    start_index: int
    end_index: int
    triangle_edges: List[Tuple[int, int]]
    edges: List[Tuple[int, int, int]]
    paths: List[List[int]]
    rooms: List[str]


class PathResponse(BaseModel):
    """Result of one add-path request."""

    path: List[int]
    reachable: bool
    cost: Optional[int] = None
    rooms: List[str]
    paths_count: int


def _require_session() -> GenerationSession:
    if _session is None:
        raise HTTPException(status_code=404, detail="No session. POST /session first")
    return _session


def _state(session: GenerationSession) -> SessionState:
    return SessionState(
        points=[(float(x), float(y)) for x, y in session.points],
        start_index=session.start_index,
        end_index=session.end_index,
        triangle_edges=sorted(session.triangulation.edges()),
        edges=graph_edges(session.graph),
        paths=[list(path) for path in session.paths],
        rooms=[room_kind(session, i).value for i in range(len(session.points))],
    )


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Route Map Generator API",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "session": _session is not None}


@app.post("/session", response_model=SessionState)
def start_session(request: SessionRequest):
    """Sample a new point set and replace the current session."""
    global _session
    logger.info("Session requested", request=request.model_dump())

    with _lock:
        try:
            _session = create_session(
                start=request.start,
                end=request.end,
                min_radius=request.min_radius,
                penalty=request.penalty,
                seed=request.seed,
            )
        except ValueError as e:
            logger.error("Session creation failed", error=str(e))
            raise HTTPException(status_code=422, detail=str(e))
        return _state(_session)


@app.get("/session", response_model=SessionState)
def get_session():
    """Current points, edges and accepted paths."""
    with _lock:
        return _state(_require_session())


@app.post("/session/paths", response_model=PathResponse)
def add_session_path():
    """Add one more route between the anchors."""
    with _lock:
        session = _require_session()
        path = add_path(session)
        reachable = len(path) >= 2
        return PathResponse(
            path=path,
            reachable=reachable,
            cost=pristine_cost(session, path) if reachable else None,
            rooms=[kind.value for kind in path_rooms(session, path)],
            paths_count=len(session.paths),
        )


@app.post("/session/reset", response_model=SessionState)
def reset_session():
    """Forget all routes and restore the original edge costs."""
    with _lock:
        session = _require_session()
        reset(session)
        return _state(session)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
