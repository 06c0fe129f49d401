"""Type definitions for knowledge graph."""

from datetime import datetime
from enum import Enum
from typing import TypedDict, NotRequired


class RelationshipType(str, Enum):
    """Closed set of edge semantics."""
    RELATES_TO = "relates_to"
    SUPPORTS = "supports"
    CONTRADICTS = "contradicts"
    DERIVES_FROM = "derives_from"


class NodeRecord(TypedDict):
    """Node as held by the store."""
    id: str
    title: str
    summary: str
    tags: list[str]
    createdAt: datetime
    updatedAt: datetime


class EdgeRecord(TypedDict):
    """Directed edge as held by the store."""
    id: str
    type: RelationshipType
    description: NotRequired[str]
    sourceId: str
    targetId: str
    createdAt: datetime


class CreateNodeInput(TypedDict):
    title: str
    summary: str
    tags: NotRequired[list[str]]


class UpdateNodeInput(TypedDict, total=False):
    title: str
    summary: str
    tags: list[str]


class CreateEdgeInput(TypedDict):
    type: RelationshipType
    sourceId: str
    targetId: str
    description: NotRequired[str]


class UpdateEdgeInput(TypedDict, total=False):
    type: RelationshipType
    description: str | None  # None clears


class NodeResponse(TypedDict):
    """Serialized node (ISO-8601 timestamps)."""
    id: str
    title: str
    summary: str
    tags: list[str]
    createdAt: str
    updatedAt: str


class EdgeResponse(TypedDict):
    """Serialized edge (ISO-8601 timestamp)."""
    id: str
    type: str
    description: NotRequired[str]
    sourceId: str
    targetId: str
    createdAt: str


class TraverseResult(TypedDict):
    """Neighborhood returned by a bounded traversal."""
    startId: str
    depth: int
    nodes: list[NodeResponse]
    edges: list[EdgeResponse]
