"""Graph port - Read-only view consumed by the analytics engines.

The shortest-path and centrality engines only ever query a graph; they
never mutate it. Any object exposing these methods can be analysed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from ..domain.models import Edge, NodeId


class GraphView(Protocol):
    """Port for graph traversal queries.

    Implementation: graph/store.py (Graph)
    """

    def node_ids(self) -> Sequence[NodeId]:
        """Return live node ids in ascending (creation) order."""
        ...

    def neighbors(self, node_id: NodeId) -> Sequence[Tuple[NodeId, float]]:
        """Return one ``(neighbor, weight)`` entry per incident edge."""
        ...

    def degree(self, node_id: NodeId) -> int:
        """Return the number of incident edges."""
        ...

    def edges(self) -> Iterable[Edge]:
        """Return every edge in insertion order."""
        ...

    def require(self, node_id: NodeId) -> NodeId:
        """Return ``node_id`` if live, raising UnknownNodeError otherwise."""
        ...
