"""HTTP interface for the knowledge graph. The app factory lives in api.app."""
