"""Immutable domain models for the fight network.

All models are frozen dataclasses with slots. Node attributes are an
inert payload: the graph algorithms never read them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

NodeId = int


@dataclass(frozen=True, slots=True)
class Node:
    """A vertex of the network.

    Attributes:
        id: Opaque identity, never reissued once the node is removed
        label: Display label (e.g. 'Conor McGregor')
        attributes: Domain payload such as reach, height or organization
    """

    id: NodeId
    label: str
    attributes: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def attribute(self, name: str, default: Any = None) -> Any:
        """Return one attribute, or ``default`` when it is absent or None."""
        value = self.attributes.get(name)
        return default if value is None else value


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected, weighted edge between two nodes.

    Attributes:
        id: Opaque identity of this edge, never reissued
        a: One endpoint
        b: The other endpoint (equal to ``a`` for a self-loop)
        weight: Non-negative finite weight
    """

    id: int
    a: NodeId
    b: NodeId
    weight: float = 1.0

    @property
    def is_self_loop(self) -> bool:
        return self.a == self.b

    def connects(self, x: NodeId, y: NodeId) -> bool:
        """Check whether this edge joins ``x`` and ``y`` in either orientation."""
        return (self.a == x and self.b == y) or (self.a == y and self.b == x)

    def other(self, node_id: NodeId) -> NodeId:
        """Return the endpoint opposite to ``node_id``."""
        return self.b if self.a == node_id else self.a


@dataclass(frozen=True, slots=True)
class GraphSnapshot:
    """Finalized node and edge lists taken from a graph.

    Snapshots are what export sinks receive, and the only safe thing
    to share with readers while the source graph keeps mutating.
    """

    nodes: tuple[Node, ...] = field(default_factory=tuple)
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    def label_of(self, node_id: NodeId) -> Optional[str]:
        for node in self.nodes:
            if node.id == node_id:
                return node.label
        return None


@dataclass(frozen=True, slots=True)
class PathResult:
    """One shortest path between two nodes.

    Attributes:
        distance: Sum of edge weights along the path
        path: Ordered node ids from start to end (inclusive)
    """

    distance: float
    path: tuple[NodeId, ...]

    @property
    def num_hops(self) -> int:
        """Return the number of edges traversed."""
        return max(len(self.path) - 1, 0)
