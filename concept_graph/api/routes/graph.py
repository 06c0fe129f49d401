"""Graph query endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from ...core import GraphService
from ..dependencies import get_service
from ..models import TraverseRequest

router = APIRouter(prefix="/graph", tags=["graph"])


@router.get("/path")
async def find_path(
    source_id: UUID = Query(..., alias="sourceId"),
    target_id: UUID = Query(..., alias="targetId"),
    service: GraphService = Depends(get_service),
):
    """
    Shortest directed path between two nodes.
    Returns {"path": []} when the target is unreachable.
    """
    return {"path": service.find_path(str(source_id), str(target_id))}


@router.post("/traverse")
async def traverse(request: TraverseRequest, service: GraphService = Depends(get_service)):
    """Nodes and edges within `depth` hops of the start node."""
    return service.traverse(str(request.startId), request.depth)
