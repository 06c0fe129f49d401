"""Custom exceptions for knowledge graph operations."""


class KGError(Exception):
    """Base exception for knowledge graph operations."""
    pass


class NotFoundError(KGError):
    """Raised when a requested node or edge does not exist."""
    pass


class NodeNotFoundError(NotFoundError):
    """Raised when a node is not found."""
    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' not found")


class EdgeNotFoundError(NotFoundError):
    """Raised when an edge is not found."""
    def __init__(self, edge_id: str):
        self.edge_id = edge_id
        super().__init__(f"Edge '{edge_id}' not found")


class EndpointNotFoundError(NotFoundError):
    """Raised when an edge or path endpoint does not resolve to a node."""
    def __init__(self, source_id: str, target_id: str):
        self.source_id = source_id
        self.target_id = target_id
        super().__init__("Source or target node not found")


class ConflictError(KGError):
    """Raised when a request is well-formed but forbidden by graph rules."""
    pass


class SelfLoopError(ConflictError):
    """Raised when an edge would connect a node to itself."""
    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__("Cannot create a relationship between the same node")
