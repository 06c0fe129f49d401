"""Core knowledge graph components."""

from .types import (
    RelationshipType,
    NodeRecord,
    EdgeRecord,
    CreateNodeInput,
    UpdateNodeInput,
    CreateEdgeInput,
    UpdateEdgeInput,
    NodeResponse,
    EdgeResponse,
    TraverseResult,
)
from .constants import *
from .exceptions import *
from .store import GraphStore
from .traversal import Visit, breadth_first
from .service import GraphService, to_node_response, to_edge_response
from .seed import seed_demo_graph
from .utils import utcnow, to_iso, normalize_tags, validate_relationship_type

__all__ = [
    # Types
    "RelationshipType",
    "NodeRecord",
    "EdgeRecord",
    "CreateNodeInput",
    "UpdateNodeInput",
    "CreateEdgeInput",
    "UpdateEdgeInput",
    "NodeResponse",
    "EdgeResponse",
    "TraverseResult",
    # Constants
    "RELATIONSHIP_TYPES",
    "MIN_TRAVERSE_DEPTH",
    "MAX_TRAVERSE_DEPTH",
    "MAX_DESCRIPTION_LENGTH",
    "SERVICE_NAME",
    "APP_NAME",
    # Exceptions
    "KGError",
    "NotFoundError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "EndpointNotFoundError",
    "ConflictError",
    "SelfLoopError",
    # Classes
    "GraphStore",
    "GraphService",
    "Visit",
    # Functions
    "breadth_first",
    "seed_demo_graph",
    "to_node_response",
    "to_edge_response",
    # Utils
    "utcnow",
    "to_iso",
    "normalize_tags",
    "validate_relationship_type",
]
