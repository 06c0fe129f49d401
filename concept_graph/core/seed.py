"""Demo content for a fresh graph."""

import logging

from .service import GraphService
from .types import RelationshipType

logger = logging.getLogger(__name__)


DEMO_CONCEPTS = [
    {
        "title": "Knowledge Graphs",
        "summary": "Data models that capture entities and relationships for flexible querying.",
        "tags": ["graph"],
    },
    {
        "title": "Semantic Search",
        "summary": "Finding meaning-aware results by leveraging embeddings and graph context.",
        "tags": ["ai"],
    },
    {
        "title": "UX Patterns",
        "summary": "Reusable interaction designs that improve usability and consistency.",
        "tags": ["design"],
    },
]

# (source title, target title, type, description)
DEMO_RELATIONSHIPS = [
    (
        "Semantic Search",
        "Knowledge Graphs",
        RelationshipType.DERIVES_FROM,
        "Semantic search builds on knowledge graph structure for relevance.",
    ),
    (
        "UX Patterns",
        "Knowledge Graphs",
        RelationshipType.SUPPORTS,
        "UX patterns help teams surface graph insights in understandable ways.",
    ),
    (
        "UX Patterns",
        "Semantic Search",
        RelationshipType.RELATES_TO,
        "UX patterns can drive semantic search results presentation.",
    ),
]


def seed_demo_graph(service: GraphService) -> dict:
    """
    Populate the graph with demo concepts and relationships.
    Concepts whose title already exists are reused, not duplicated.
    Returns {"nodes": [...], "edges": [...]} of what was created.
    """
    by_title = {node["title"]: node for node in service.list_nodes()}
    created_nodes = []
    created_edges = []

    for concept in DEMO_CONCEPTS:
        if concept["title"] in by_title:
            continue
        node = service.create_node(concept)
        by_title[node["title"]] = node
        created_nodes.append(node)

    for source_title, target_title, rel_type, description in DEMO_RELATIONSHIPS:
        edge = service.create_edge({
            "type": rel_type,
            "sourceId": by_title[source_title]["id"],
            "targetId": by_title[target_title]["id"],
            "description": description,
        })
        created_edges.append(edge)

    logger.info(f"Seeded demo graph: {len(created_nodes)} nodes, {len(created_edges)} edges")
    return {"nodes": created_nodes, "edges": created_edges}
