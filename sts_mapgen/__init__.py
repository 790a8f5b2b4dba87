"""Route map generator: well-spaced points, planar graphs and diversified shortest routes."""

__version__ = "0.1.0"
