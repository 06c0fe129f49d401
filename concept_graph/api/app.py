"""FastAPI HTTP server for the knowledge graph editor."""

import logging
import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import ServerConfig
from ..core import ConflictError, GraphService, GraphStore, KGError, NotFoundError, seed_demo_graph
from .routes import edges_router, graph_router, health_router, nodes_router

# Configure logging
log_level = os.getenv("KG_LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stderr
)
logger = logging.getLogger(__name__)


# ============================================================================
# Error Handlers
# ============================================================================

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report request validation failures as 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "details": jsonable_encoder(exc.errors())},
    )


async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": str(exc)})


async def conflict_handler(request: Request, exc: ConflictError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"message": str(exc)})


async def kg_error_handler(request: Request, exc: KGError):
    logger.warning(f"KG error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": str(exc)})


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Unexpected error"},
    )


# ============================================================================
# Application Factory
# ============================================================================

def create_app(service: GraphService | None = None, config: ServerConfig | None = None) -> FastAPI:
    """
    Build the HTTP app around a graph service.
    A fresh in-memory store is created when no service is given.
    """
    config = config or ServerConfig.from_env()
    service = service or GraphService(GraphStore())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifecycle."""
        logger.info("Starting Knowledge Graph HTTP Server...")

        if config.seed:
            seed_demo_graph(service)

        stats = service.stats()
        logger.info(f"Server ready ({stats['nodes']} nodes, {stats['edges']} edges)")

        yield

        logger.info("Server stopped")

    app = FastAPI(
        title="Knowledge Graph Editor API",
        description="Concepts, typed relationships and graph queries",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.service = service
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
    app.add_exception_handler(KGError, kg_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    app.include_router(health_router)
    app.include_router(nodes_router)
    app.include_router(edges_router)
    app.include_router(graph_router)

    return app


# ============================================================================
# Main
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    server_config = ServerConfig.from_env()

    logger.info(f"Starting server on {server_config.host}:{server_config.port}")

    uvicorn.run(
        create_app(config=server_config),
        host=server_config.host,
        port=server_config.port,
        log_level=server_config.log_level.lower(),
    )
