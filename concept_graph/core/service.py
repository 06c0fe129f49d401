"""Graph service: domain rules, response shaping and graph queries."""

import logging

from .exceptions import (
    EdgeNotFoundError,
    EndpointNotFoundError,
    KGError,
    NodeNotFoundError,
    SelfLoopError,
)
from .store import GraphStore
from .traversal import breadth_first
from .types import (
    CreateEdgeInput,
    CreateNodeInput,
    EdgeRecord,
    EdgeResponse,
    NodeRecord,
    NodeResponse,
    RelationshipType,
    TraverseResult,
    UpdateEdgeInput,
    UpdateNodeInput,
)
from .utils import to_iso, validate_relationship_type

logger = logging.getLogger(__name__)


class GraphService:
    """
    Entry point for outer surfaces (HTTP, MCP).

    Wraps a GraphStore with the rules the store does not enforce itself:
    edge endpoints must exist and must differ. Missing ids raise
    NotFoundError subclasses; forbidden edges raise ConflictError.
    """

    def __init__(self, store: GraphStore | None = None):
        self.store = store if store is not None else GraphStore()

    # ========================================================================
    # Nodes
    # ========================================================================

    def list_nodes(self) -> list[NodeResponse]:
        return [to_node_response(node) for node in self.store.list_nodes()]

    def get_node(self, node_id: str) -> NodeResponse:
        node = self.store.get_node(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return to_node_response(node)

    def create_node(self, data: CreateNodeInput) -> NodeResponse:
        return to_node_response(self.store.create_node(data))

    def update_node(self, node_id: str, data: UpdateNodeInput) -> NodeResponse:
        node = self.store.update_node(node_id, data)
        if node is None:
            raise NodeNotFoundError(node_id)
        return to_node_response(node)

    def delete_node(self, node_id: str) -> None:
        if not self.store.delete_node(node_id):
            raise NodeNotFoundError(node_id)

    # ========================================================================
    # Edges
    # ========================================================================

    def list_edges(self) -> list[EdgeResponse]:
        return [to_edge_response(edge) for edge in self.store.list_edges()]

    def get_edge(self, edge_id: str) -> EdgeResponse:
        edge = self.store.get_edge(edge_id)
        if edge is None:
            raise EdgeNotFoundError(edge_id)
        return to_edge_response(edge)

    def create_edge(self, data: CreateEdgeInput) -> EdgeResponse:
        """Create an edge between two existing, distinct nodes."""
        source_id = data["sourceId"]
        target_id = data["targetId"]
        edge_input: CreateEdgeInput = {
            "type": validate_relationship_type(data["type"]),
            "sourceId": source_id,
            "targetId": target_id,
        }
        if data.get("description") is not None:
            edge_input["description"] = data["description"]

        # Check and insert must not interleave with a cascading delete
        with self.store.lock:
            if not self.store.has_node(source_id) or not self.store.has_node(target_id):
                raise EndpointNotFoundError(source_id, target_id)

            if source_id == target_id:
                raise SelfLoopError(source_id)

            edge = self.store.create_edge(edge_input)

        return to_edge_response(edge)

    def update_edge(self, edge_id: str, data: UpdateEdgeInput) -> EdgeResponse:
        changes = dict(data)
        if changes.get("type") is not None:
            changes["type"] = validate_relationship_type(changes["type"])

        edge = self.store.update_edge(edge_id, changes)
        if edge is None:
            raise EdgeNotFoundError(edge_id)
        return to_edge_response(edge)

    def delete_edge(self, edge_id: str) -> None:
        if not self.store.delete_edge(edge_id):
            raise EdgeNotFoundError(edge_id)

    # ========================================================================
    # Queries
    # ========================================================================

    def find_path(self, source_id: str, target_id: str) -> list[NodeResponse]:
        """
        Shortest directed path by edge count, source first.

        Ties go to the earliest-created edges. Returns [] when the target is
        unreachable; raises NotFoundError when either endpoint is missing.
        """
        with self.store.lock:
            if not self.store.has_node(source_id) or not self.store.has_node(target_id):
                raise EndpointNotFoundError(source_id, target_id)

            for visit in breadth_first(source_id, self.store.get_edges_from):
                if visit.node_id == target_id:
                    path = [self.store.get_node(node_id) for node_id in visit.path]
                    logger.debug(f"Path {source_id}->{target_id}: {len(path) - 1} hops")
                    return [to_node_response(node) for node in path]

        logger.debug(f"No path {source_id}->{target_id}")
        return []

    def traverse(self, start_id: str, depth: int) -> TraverseResult:
        """
        Collect the neighborhood within depth hops of start_id.

        Nodes come in discovery order. Edges are every edge followed while
        expanding nodes closer than depth, so edges into already-seen nodes
        are included too.
        """
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
            raise KGError(f"depth must be a non-negative integer, got {depth!r}")

        with self.store.lock:
            if not self.store.has_node(start_id):
                raise NodeNotFoundError(start_id)

            edges: dict[str, EdgeRecord] = {}

            def record_edge(edge: EdgeRecord):
                edges.setdefault(edge["id"], edge)

            nodes: list[NodeRecord] = [
                self.store.get_node(visit.node_id)
                for visit in breadth_first(
                    start_id,
                    self.store.get_edges_from,
                    max_depth=depth,
                    on_edge=record_edge,
                )
            ]

        return {
            "startId": start_id,
            "depth": depth,
            "nodes": [to_node_response(node) for node in nodes],
            "edges": [to_edge_response(edge) for edge in edges.values()],
        }

    def stats(self) -> dict[str, int]:
        return self.store.counts()


def to_node_response(node: NodeRecord) -> NodeResponse:
    return {
        "id": node["id"],
        "title": node["title"],
        "summary": node["summary"],
        "tags": list(node["tags"]),
        "createdAt": to_iso(node["createdAt"]),
        "updatedAt": to_iso(node["updatedAt"]),
    }


def to_edge_response(edge: EdgeRecord) -> EdgeResponse:
    response: EdgeResponse = {
        "id": edge["id"],
        "type": RelationshipType(edge["type"]).value,
        "sourceId": edge["sourceId"],
        "targetId": edge["targetId"],
        "createdAt": to_iso(edge["createdAt"]),
    }
    if "description" in edge:
        response["description"] = edge["description"]
    return response
