"""Breadth-first traversal shared by path search and neighborhood expansion."""

from collections import deque
from typing import Callable, Iterable, Iterator, NamedTuple

from .types import EdgeRecord


class Visit(NamedTuple):
    """A node reached by the traversal, with its hop distance and id path."""
    node_id: str
    distance: int
    path: tuple[str, ...]


def breadth_first(
    start_id: str,
    neighbors: Callable[[str], Iterable[EdgeRecord]],
    max_depth: int | None = None,
    on_edge: Callable[[EdgeRecord], None] | None = None,
) -> Iterator[Visit]:
    """
    Walk outgoing edges breadth-first from start_id, yielding each node once.

    Nodes are marked visited when dequeued, so the first visit of a node is at
    its minimum distance. Nodes at max_depth are yielded but not expanded.
    on_edge sees every edge leaving an expanded node, including edges into
    nodes that were already visited; such targets are not enqueued again.
    Edge order within a node follows neighbors(), which makes results
    deterministic.
    """
    visited: set[str] = set()
    queue: deque[Visit] = deque([Visit(start_id, 0, (start_id,))])

    while queue:
        visit = queue.popleft()
        if visit.node_id in visited:
            continue
        visited.add(visit.node_id)

        yield visit

        if max_depth is not None and visit.distance >= max_depth:
            continue

        for edge in neighbors(visit.node_id):
            if on_edge is not None:
                on_edge(edge)

            target_id = edge["targetId"]
            if target_id in visited:
                continue

            queue.append(Visit(target_id, visit.distance + 1, visit.path + (target_id,)))
