"""FastAPI dependencies for the HTTP interface."""

from fastapi import HTTPException, Request

from ..core import GraphService


def get_service(request: Request) -> GraphService:
    """Graph service owned by the running app."""
    service = getattr(request.app.state, "service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Graph service not initialized")
    return service
