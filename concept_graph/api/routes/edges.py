"""Edge CRUD endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from ...core import GraphService
from ..dependencies import get_service
from ..models import EdgeCreateRequest, EdgeUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/edges", tags=["edges"])


@router.get("")
async def list_edges(service: GraphService = Depends(get_service)):
    return service.list_edges()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_edge(request: EdgeCreateRequest, service: GraphService = Depends(get_service)):
    """Create an edge between two existing nodes."""
    edge = service.create_edge(request.to_input())
    logger.info(f"Created edge {edge['sourceId']}->{edge['targetId']}:{edge['type']}")
    return edge


@router.get("/{edge_id}")
async def get_edge(edge_id: UUID, service: GraphService = Depends(get_service)):
    return service.get_edge(str(edge_id))


@router.put("/{edge_id}")
async def update_edge(
    edge_id: UUID,
    request: EdgeUpdateRequest,
    service: GraphService = Depends(get_service),
):
    """Update an edge's type or description."""
    return service.update_edge(str(edge_id), request.changes())


@router.delete("/{edge_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_edge(edge_id: UUID, service: GraphService = Depends(get_service)):
    service.delete_edge(str(edge_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
