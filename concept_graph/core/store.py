"""In-memory knowledge graph store."""

import copy
import logging
import threading
import uuid
from datetime import datetime
from typing import Callable

from .types import (
    CreateEdgeInput,
    CreateNodeInput,
    EdgeRecord,
    NodeRecord,
    UpdateEdgeInput,
    UpdateNodeInput,
)
from .utils import utcnow

logger = logging.getLogger(__name__)


class GraphStore:
    """
    Authoritative collection of nodes and edges.

    Structure:
    - nodes[node_id] = NodeRecord
    - edges[edge_id] = EdgeRecord
    - outgoing[node_id] = [edge_id, ...] in edge creation order

    Absence is reported as None/False, never raised. Self-loops and endpoint
    existence are not checked here; cascading delete is.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._clock = clock

        self._nodes: dict[str, NodeRecord] = {}
        self._edges: dict[str, EdgeRecord] = {}
        self._outgoing: dict[str, list[str]] = {}

        # Thread safety
        self.lock = threading.RLock()

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    # ========================================================================
    # Nodes
    # ========================================================================

    def list_nodes(self) -> list[NodeRecord]:
        """All nodes in insertion order."""
        with self.lock:
            return [copy.deepcopy(node) for node in self._nodes.values()]

    def get_node(self, node_id: str) -> NodeRecord | None:
        with self.lock:
            node = self._nodes.get(node_id)
            return copy.deepcopy(node) if node is not None else None

    def has_node(self, node_id: str) -> bool:
        with self.lock:
            return node_id in self._nodes

    def create_node(self, data: CreateNodeInput) -> NodeRecord:
        """Store a new node with a fresh id and timestamps."""
        with self.lock:
            now = self._clock()
            node: NodeRecord = {
                "id": self._new_id(),
                "title": data["title"],
                "summary": data["summary"],
                "tags": list(data.get("tags") or []),
                "createdAt": now,
                "updatedAt": now,
            }
            self._nodes[node["id"]] = node

            logger.debug(f"Created node '{node['id']}'")
            return copy.deepcopy(node)

    def update_node(self, node_id: str, data: UpdateNodeInput) -> NodeRecord | None:
        """
        Merge supplied fields over an existing node.
        Tags are replaced wholesale only when supplied. Returns None if absent.
        """
        with self.lock:
            existing = self._nodes.get(node_id)
            if existing is None:
                return None

            node = dict(existing)
            if data.get("title") is not None:
                node["title"] = data["title"]
            if data.get("summary") is not None:
                node["summary"] = data["summary"]
            if data.get("tags") is not None:
                node["tags"] = list(data["tags"])
            node["updatedAt"] = self._clock()

            self._nodes[node_id] = node

            logger.debug(f"Updated node '{node_id}'")
            return copy.deepcopy(node)

    def delete_node(self, node_id: str) -> bool:
        """Delete a node and every edge that references it."""
        with self.lock:
            if node_id not in self._nodes:
                return False

            edges_to_delete = [
                edge_id for edge_id, edge in self._edges.items()
                if edge["sourceId"] == node_id or edge["targetId"] == node_id
            ]

            for edge_id in edges_to_delete:
                self._remove_edge(edge_id)

            del self._nodes[node_id]
            self._outgoing.pop(node_id, None)

            logger.info(f"Deleted node '{node_id}' and {len(edges_to_delete)} edges")
            return True

    # ========================================================================
    # Edges
    # ========================================================================

    def list_edges(self) -> list[EdgeRecord]:
        """All edges in insertion order."""
        with self.lock:
            return [dict(edge) for edge in self._edges.values()]

    def get_edge(self, edge_id: str) -> EdgeRecord | None:
        with self.lock:
            edge = self._edges.get(edge_id)
            return dict(edge) if edge is not None else None

    def create_edge(self, data: CreateEdgeInput) -> EdgeRecord:
        """Store a new edge. Endpoints are not validated here."""
        with self.lock:
            edge: EdgeRecord = {
                "id": self._new_id(),
                "type": data["type"],
                "sourceId": data["sourceId"],
                "targetId": data["targetId"],
                "createdAt": self._clock(),
            }
            if data.get("description") is not None:
                edge["description"] = data["description"]

            self._edges[edge["id"]] = edge
            self._outgoing.setdefault(edge["sourceId"], []).append(edge["id"])

            logger.debug(f"Created edge {edge['sourceId']}->{edge['targetId']}:{edge['type']}")
            return dict(edge)

    def update_edge(self, edge_id: str, data: UpdateEdgeInput) -> EdgeRecord | None:
        """
        Merge type/description over an existing edge.
        An explicit description of None clears it. Returns None if absent.
        """
        with self.lock:
            existing = self._edges.get(edge_id)
            if existing is None:
                return None

            edge = dict(existing)
            if data.get("type") is not None:
                edge["type"] = data["type"]
            if "description" in data:
                if data["description"] is None:
                    edge.pop("description", None)
                else:
                    edge["description"] = data["description"]

            self._edges[edge_id] = edge

            logger.debug(f"Updated edge '{edge_id}'")
            return dict(edge)

    def delete_edge(self, edge_id: str) -> bool:
        with self.lock:
            if edge_id not in self._edges:
                return False

            self._remove_edge(edge_id)
            logger.debug(f"Deleted edge '{edge_id}'")
            return True

    def get_edges_from(self, source_id: str) -> list[EdgeRecord]:
        """Outgoing edges of a node in edge creation order."""
        with self.lock:
            return [dict(self._edges[edge_id]) for edge_id in self._outgoing.get(source_id, [])]

    def _remove_edge(self, edge_id: str):
        """Remove an edge and its outgoing index entry. Caller must hold lock."""
        edge = self._edges.pop(edge_id)
        outgoing = self._outgoing.get(edge["sourceId"])
        if outgoing is not None:
            outgoing.remove(edge_id)
            if not outgoing:
                del self._outgoing[edge["sourceId"]]

    # ========================================================================
    # Introspection
    # ========================================================================

    def counts(self) -> dict[str, int]:
        with self.lock:
            return {"nodes": len(self._nodes), "edges": len(self._edges)}
