"""Service metadata endpoints."""

from fastapi import APIRouter, Depends, Request

from ...core import APP_NAME, SERVICE_NAME, GraphService, to_iso, utcnow
from ..dependencies import get_service

router = APIRouter(tags=["health"])


@router.get("/")
async def root():
    return {
        "name": APP_NAME,
        "message": "API ready",
        "docs": ["/health", "/nodes", "/edges", "/graph"],
    }


@router.get("/health")
async def health_check(request: Request, service: GraphService = Depends(get_service)):
    """Health check endpoint."""
    stats = service.stats()
    return {
        "service": SERVICE_NAME,
        "status": "ok",
        "timestamp": to_iso(utcnow()),
        "environment": request.app.state.config.environment,
        "nodes": stats["nodes"],
        "edges": stats["edges"],
    }
