import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from concept_graph.core import GraphService, GraphStore, RelationshipType


class TickingClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        now = self.current
        self.current += timedelta(seconds=1)
        return now


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def store(clock):
    """Fresh store per test."""
    return GraphStore(clock=clock)


@pytest.fixture
def service(store):
    return GraphService(store)


@pytest.fixture
def make_node(service):
    """Create a node through the service with a default summary."""
    def _make(title: str, tags: list[str] | None = None) -> dict:
        data = {"title": title, "summary": f"{title} summary"}
        if tags is not None:
            data["tags"] = tags
        return service.create_node(data)
    return _make


@pytest.fixture
def link(service):
    """Create an edge source -> target through the service."""
    def _link(source: dict, target: dict, rel: str = "relates_to", description: str | None = None) -> dict:
        data = {"type": RelationshipType(rel), "sourceId": source["id"], "targetId": target["id"]}
        if description is not None:
            data["description"] = description
        return service.create_edge(data)
    return _link
