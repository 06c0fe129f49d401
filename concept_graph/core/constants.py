"""Constants for knowledge graph operations."""

# Relationship types (closed set)
RELATIONSHIP_TYPES = ("relates_to", "supports", "contradicts", "derives_from")

# Traversal depth accepted from outer surfaces
MIN_TRAVERSE_DEPTH = 1
MAX_TRAVERSE_DEPTH = 5

# Edge description limit
MAX_DESCRIPTION_LENGTH = 500

# Service identity
SERVICE_NAME = "concept-graph-api"
APP_NAME = "concept-graph"
