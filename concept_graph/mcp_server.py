#!/usr/bin/env python3
"""
Knowledge Graph MCP Server
Exposes the in-memory concept graph as MCP tools over stdio.
"""

import asyncio
import json
import logging
import os
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool
from pydantic import BaseModel, ValidationError

from .api.models import EdgeCreateRequest, EdgeUpdateRequest, NodeCreateRequest, NodeUpdateRequest
from .config import env_bool
from .core import (
    MAX_DESCRIPTION_LENGTH,
    MAX_TRAVERSE_DEPTH,
    RELATIONSHIP_TYPES,
    ConflictError,
    GraphService,
    GraphStore,
    KGError,
    NotFoundError,
    normalize_tags,
    seed_demo_graph,
)

logger = logging.getLogger(__name__)


_ID = {"type": "string", "description": "Node or edge ID (UUID)"}
_TYPE = {"type": "string", "enum": list(RELATIONSHIP_TYPES), "description": "Relationship type"}
_TEXT = {"type": "string", "minLength": 1}
_TAGS = {
    "anyOf": [
        {"type": "array", "items": {"type": "string", "minLength": 1, "pattern": "\\S"}},
        {"type": "string"},
    ],
    "description": "Ordered tags, as a list or comma-separated text",
}
_DESCRIPTION = {"type": "string", "maxLength": MAX_DESCRIPTION_LENGTH, "description": "Optional description"}

TOOLS = [
    Tool(
        name="kg_list_nodes",
        description="List all concepts in the graph, oldest first.",
        inputSchema={"type": "object", "properties": {}}
    ),
    Tool(
        name="kg_get_node",
        description="Read one concept by ID.",
        inputSchema={"type": "object", "properties": {"id": _ID}, "required": ["id"]}
    ),
    Tool(
        name="kg_create_node",
        description="Create a concept. Returns the stored node with its generated ID.",
        inputSchema={
            "type": "object",
            "properties": {
                "title": {**_TEXT, "description": "Concept title"},
                "summary": {**_TEXT, "description": "Concept summary"},
                "tags": _TAGS,
            },
            "required": ["title", "summary"]
        }
    ),
    Tool(
        name="kg_update_node",
        description="Update a concept. Omitted fields keep their values; tags are replaced if given.",
        inputSchema={
            "type": "object",
            "properties": {
                "id": _ID,
                "title": _TEXT,
                "summary": _TEXT,
                "tags": _TAGS,
            },
            "required": ["id"]
        }
    ),
    Tool(
        name="kg_delete_node",
        description="Delete a concept and every relationship touching it.",
        inputSchema={"type": "object", "properties": {"id": _ID}, "required": ["id"]}
    ),
    Tool(
        name="kg_list_edges",
        description="List all relationships in the graph, oldest first.",
        inputSchema={"type": "object", "properties": {}}
    ),
    Tool(
        name="kg_get_edge",
        description="Read one relationship by ID.",
        inputSchema={"type": "object", "properties": {"id": _ID}, "required": ["id"]}
    ),
    Tool(
        name="kg_create_edge",
        description="Create a directed relationship between two different existing concepts.",
        inputSchema={
            "type": "object",
            "properties": {
                "type": _TYPE,
                "sourceId": _ID,
                "targetId": _ID,
                "description": _DESCRIPTION,
            },
            "required": ["type", "sourceId", "targetId"]
        }
    ),
    Tool(
        name="kg_update_edge",
        description="Change a relationship's type or description. A null description clears it.",
        inputSchema={
            "type": "object",
            "properties": {
                "id": _ID,
                "type": _TYPE,
                "description": {**_DESCRIPTION, "type": ["string", "null"]},
            },
            "required": ["id"]
        }
    ),
    Tool(
        name="kg_delete_edge",
        description="Delete a relationship.",
        inputSchema={"type": "object", "properties": {"id": _ID}, "required": ["id"]}
    ),
    Tool(
        name="kg_find_path",
        description="Shortest directed path between two concepts. Empty list if unreachable.",
        inputSchema={
            "type": "object",
            "properties": {"sourceId": _ID, "targetId": _ID},
            "required": ["sourceId", "targetId"]
        }
    ),
    Tool(
        name="kg_traverse",
        description="Concepts and relationships within `depth` hops of a start concept.",
        inputSchema={
            "type": "object",
            "properties": {
                "startId": _ID,
                "depth": {"type": "integer", "minimum": 0, "maximum": MAX_TRAVERSE_DEPTH},
            },
            "required": ["startId", "depth"]
        }
    ),
    Tool(
        name="kg_ping",
        description="Health check for MCP connectivity. Returns server status and statistics.",
        inputSchema={"type": "object", "properties": {}}
    ),
]


def _pick(arguments: dict, *keys: str) -> dict:
    picked = {key: arguments[key] for key in keys if key in arguments}
    # Clients may send tags as "a, b" text
    if isinstance(picked.get("tags"), str):
        picked["tags"] = normalize_tags(picked["tags"])
    return picked


def _validated(model: type[BaseModel], data: dict) -> BaseModel:
    """Run tool arguments through the HTTP request models so both surfaces share one set of rules."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "arguments"
        raise KGError(f"Invalid {field}: {error['msg']}") from None


def handle_tool(service: GraphService, name: str, arguments: dict) -> Any:
    """Dispatch a tool call to the service. Raises KGError for domain failures."""
    if name == "kg_list_nodes":
        return service.list_nodes()

    elif name == "kg_get_node":
        return service.get_node(arguments["id"])

    elif name == "kg_create_node":
        request = _validated(NodeCreateRequest, _pick(arguments, "title", "summary", "tags"))
        return service.create_node(request.model_dump())

    elif name == "kg_update_node":
        request = _validated(NodeUpdateRequest, _pick(arguments, "title", "summary", "tags"))
        return service.update_node(arguments["id"], request.changes())

    elif name == "kg_delete_node":
        service.delete_node(arguments["id"])
        return {"deleted": True, "id": arguments["id"]}

    elif name == "kg_list_edges":
        return service.list_edges()

    elif name == "kg_get_edge":
        return service.get_edge(arguments["id"])

    elif name == "kg_create_edge":
        request = _validated(EdgeCreateRequest, _pick(arguments, "type", "sourceId", "targetId", "description"))
        return service.create_edge(request.to_input())

    elif name == "kg_update_edge":
        request = _validated(EdgeUpdateRequest, _pick(arguments, "type", "description"))
        return service.update_edge(arguments["id"], request.changes())

    elif name == "kg_delete_edge":
        service.delete_edge(arguments["id"])
        return {"deleted": True, "id": arguments["id"]}

    elif name == "kg_find_path":
        return {"path": service.find_path(arguments["sourceId"], arguments["targetId"])}

    elif name == "kg_traverse":
        return service.traverse(arguments["startId"], arguments["depth"])

    elif name == "kg_ping":
        return {"status": "ok", **service.stats()}

    raise KGError(f"Unknown tool: {name}")


def error_payload(error: KGError) -> dict:
    """Structured error response for known errors."""
    if isinstance(error, NotFoundError):
        kind = "not_found"
    elif isinstance(error, ConflictError):
        kind = "conflict"
    else:
        kind = "invalid"
    return {"error": str(error), "kind": kind}


def create_server(service: GraphService) -> Server:
    """Build an MCP server bound to a graph service."""
    server = Server("knowledge-graph")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available knowledge graph tools."""
        return TOOLS

    @server.call_tool()
    async def call_tool(name: str, arguments: Any) -> list[TextContent]:
        """Handle tool calls with uniform error handling."""
        try:
            result = handle_tool(service, name, arguments or {})
            return [TextContent(type="text", text=json.dumps(result, indent=2))]

        except KGError as e:
            logger.warning(f"KG error in {name}: {e}")
            return [TextContent(type="text", text=json.dumps(error_payload(e)))]

        except Exception as e:
            logger.error(f"Unexpected error in {name}: {e}", exc_info=True)
            return [TextContent(type="text", text=json.dumps({"error": f"Internal error: {str(e)}"}))]

    return server


async def main():
    """Main entry point."""
    # Configure logging to stderr (never stdout for MCP)
    log_level = os.getenv("KG_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    service = GraphService(GraphStore())
    if env_bool("KG_SEED", False):
        seed_demo_graph(service)

    server = create_server(service)

    logger.info("Starting Knowledge Graph MCP Server...")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
