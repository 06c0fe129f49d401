"""HTTP route groups."""

from .edges import router as edges_router
from .graph import router as graph_router
from .health import router as health_router
from .nodes import router as nodes_router

__all__ = [
    "edges_router",
    "graph_router",
    "health_router",
    "nodes_router",
]
