"""In-memory knowledge graph editor backend."""

__version__ = "0.1.0"
