"""Node CRUD endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from ...core import GraphService
from ..dependencies import get_service
from ..models import NodeCreateRequest, NodeUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/nodes", tags=["nodes"])


@router.get("")
async def list_nodes(service: GraphService = Depends(get_service)):
    return service.list_nodes()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_node(request: NodeCreateRequest, service: GraphService = Depends(get_service)):
    """Create a node."""
    node = service.create_node(request.model_dump())
    logger.info(f"Created node '{node['id']}' ({node['title']})")
    return node


@router.get("/{node_id}")
async def get_node(node_id: UUID, service: GraphService = Depends(get_service)):
    return service.get_node(str(node_id))


@router.put("/{node_id}")
async def update_node(
    node_id: UUID,
    request: NodeUpdateRequest,
    service: GraphService = Depends(get_service),
):
    """Partially update a node."""
    return service.update_node(str(node_id), request.changes())


@router.delete("/{node_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_node(node_id: UUID, service: GraphService = Depends(get_service)):
    """Delete a node and its connected edges."""
    service.delete_node(str(node_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
