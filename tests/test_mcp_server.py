"""
Tests for the MCP tool dispatch.
"""
import asyncio
import json

import pytest
from mcp.types import CallToolRequest, CallToolRequestParams

from concept_graph.core import MAX_DESCRIPTION_LENGTH, KGError, NodeNotFoundError, SelfLoopError
from concept_graph.mcp_server import TOOLS, create_server, error_payload, handle_tool

UNKNOWN_ID = "00000000-0000-0000-0000-000000000000"


def test_every_tool_is_dispatched(service):
    """Test that each advertised tool name is handled."""
    node = handle_tool(service, "kg_create_node", {"title": "A", "summary": "s"})
    other = handle_tool(service, "kg_create_node", {"title": "B", "summary": "s"})
    edge = handle_tool(service, "kg_create_edge", {"type": "supports", "sourceId": node["id"], "targetId": other["id"]})

    arguments = {
        "kg_list_nodes": {},
        "kg_get_node": {"id": node["id"]},
        "kg_create_node": {"title": "C", "summary": "s"},
        "kg_update_node": {"id": node["id"], "summary": "t"},
        "kg_list_edges": {},
        "kg_get_edge": {"id": edge["id"]},
        "kg_create_edge": {"type": "relates_to", "sourceId": other["id"], "targetId": node["id"]},
        "kg_update_edge": {"id": edge["id"], "description": "d"},
        "kg_find_path": {"sourceId": node["id"], "targetId": other["id"]},
        "kg_traverse": {"startId": node["id"], "depth": 1},
        "kg_ping": {},
        "kg_delete_edge": {"id": edge["id"]},
        "kg_delete_node": {"id": node["id"]},
    }

    assert set(arguments) == {tool.name for tool in TOOLS}
    for name, args in arguments.items():
        result = handle_tool(service, name, args)
        json.dumps(result)


def test_create_and_query(service):
    a = handle_tool(service, "kg_create_node", {"title": "A", "summary": "s", "tags": ["x"]})
    b = handle_tool(service, "kg_create_node", {"title": "B", "summary": "s"})
    handle_tool(service, "kg_create_edge", {"type": "derives_from", "sourceId": a["id"], "targetId": b["id"]})

    path = handle_tool(service, "kg_find_path", {"sourceId": a["id"], "targetId": b["id"]})
    assert [n["title"] for n in path["path"]] == ["A", "B"]

    ping = handle_tool(service, "kg_ping", {})
    assert ping == {"status": "ok", "nodes": 2, "edges": 1}


def test_update_edge_clears_description(service):
    a = handle_tool(service, "kg_create_node", {"title": "A", "summary": "s"})
    b = handle_tool(service, "kg_create_node", {"title": "B", "summary": "s"})
    edge = handle_tool(service, "kg_create_edge", {
        "type": "supports", "sourceId": a["id"], "targetId": b["id"], "description": "why",
    })

    updated = handle_tool(service, "kg_update_edge", {"id": edge["id"], "description": None})
    assert "description" not in updated


def test_domain_errors_propagate(service):
    a = handle_tool(service, "kg_create_node", {"title": "A", "summary": "s"})

    with pytest.raises(NodeNotFoundError):
        handle_tool(service, "kg_get_node", {"id": UNKNOWN_ID})
    with pytest.raises(SelfLoopError):
        handle_tool(service, "kg_create_edge", {"type": "supports", "sourceId": a["id"], "targetId": a["id"]})
    with pytest.raises(KGError):
        handle_tool(service, "kg_unknown", {})


def test_error_payload_kinds():
    assert error_payload(NodeNotFoundError("x"))["kind"] == "not_found"
    assert error_payload(SelfLoopError("x"))["kind"] == "conflict"
    assert error_payload(KGError("bad"))["kind"] == "invalid"
    assert error_payload(KGError("bad"))["error"] == "bad"


def test_create_server(service):
    server = create_server(service)
    assert server.name == "knowledge-graph"


def call_through_server(server, name, arguments):
    """Send a tools/call request through the registered MCP handler."""
    handler = server.request_handlers[CallToolRequest]
    request = CallToolRequest(method="tools/call", params=CallToolRequestParams(name=name, arguments=arguments))
    return asyncio.run(handler(request)).root


class TestArgumentValidation:
    """Tool arguments follow the same rules as HTTP request bodies."""

    def test_server_rejects_blank_node_fields(self, service):
        """Test that empty title, summary and blank tags never reach the store."""
        server = create_server(service)

        result = call_through_server(server, "kg_create_node", {"title": "", "summary": "", "tags": [" "]})

        assert service.list_nodes() == []
        assert "error" in result.content[0].text.lower()

    def test_server_creates_valid_node(self, service):
        server = create_server(service)

        result = call_through_server(server, "kg_create_node", {"title": "A", "summary": "s", "tags": ["x"]})

        assert not result.isError
        assert json.loads(result.content[0].text)["title"] == "A"
        assert len(service.list_nodes()) == 1

    def test_blank_tag_rejected(self, service):
        with pytest.raises(KGError, match="tags"):
            handle_tool(service, "kg_create_node", {"title": "A", "summary": "s", "tags": ["ok", "  "]})
        assert service.list_nodes() == []

    def test_empty_title_rejected_on_update(self, service):
        node = handle_tool(service, "kg_create_node", {"title": "A", "summary": "s"})

        with pytest.raises(KGError, match="title"):
            handle_tool(service, "kg_update_node", {"id": node["id"], "title": ""})
        with pytest.raises(KGError):
            handle_tool(service, "kg_update_node", {"id": node["id"]})

        assert service.get_node(node["id"])["title"] == "A"

    def test_tags_and_description_are_trimmed(self, service):
        a = handle_tool(service, "kg_create_node", {"title": "A", "summary": "s", "tags": [" graph ", "ai"]})
        b = handle_tool(service, "kg_create_node", {"title": "B", "summary": "s"})
        edge = handle_tool(service, "kg_create_edge", {
            "type": "supports", "sourceId": a["id"], "targetId": b["id"], "description": "  because  ",
        })

        assert a["tags"] == ["graph", "ai"]
        assert edge["description"] == "because"

    def test_tags_as_comma_separated_text(self, service):
        node = handle_tool(service, "kg_create_node", {"title": "A", "summary": "s", "tags": "graph, , ai "})
        assert node["tags"] == ["graph", "ai"]

        updated = handle_tool(service, "kg_update_node", {"id": node["id"], "tags": "design"})
        assert updated["tags"] == ["design"]

    def test_description_length_capped(self, service):
        a = handle_tool(service, "kg_create_node", {"title": "A", "summary": "s"})
        b = handle_tool(service, "kg_create_node", {"title": "B", "summary": "s"})
        too_long = "x" * (MAX_DESCRIPTION_LENGTH + 1)

        with pytest.raises(KGError, match="description"):
            handle_tool(service, "kg_create_edge", {
                "type": "supports", "sourceId": a["id"], "targetId": b["id"], "description": too_long,
            })
        assert service.list_edges() == []

        edge = handle_tool(service, "kg_create_edge", {"type": "supports", "sourceId": a["id"], "targetId": b["id"]})
        with pytest.raises(KGError, match="description"):
            handle_tool(service, "kg_update_edge", {"id": edge["id"], "description": too_long})

    def test_schemas_declare_constraints(self):
        schemas = {tool.name: tool.inputSchema["properties"] for tool in TOOLS}

        assert schemas["kg_create_node"]["title"]["minLength"] == 1
        assert schemas["kg_create_node"]["summary"]["minLength"] == 1
        assert schemas["kg_create_edge"]["description"]["maxLength"] == MAX_DESCRIPTION_LENGTH
        assert schemas["kg_update_edge"]["description"]["maxLength"] == MAX_DESCRIPTION_LENGTH
