"""In-memory undirected multigraph with stable node identity.

Node and edge ids come from monotonically increasing counters and are
never reissued. Removed node ids are kept in a retired set so that a
stale handle is reported as such instead of silently resolving to
another node.
"""

from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Tuple

from ..domain.errors import InvalidWeightError, UnknownNodeError
from ..domain.models import Edge, GraphSnapshot, Node, NodeId

logger = logging.getLogger(__name__)


class Graph:
    """Undirected weighted multigraph.

    Parallel edges are kept as independent edges and self-loops are
    accepted. Every edge references two live nodes: removing a node
    removes all of its incident edges.

    Mutations are synchronous and immediately visible to later queries.
    The class holds no lock; callers sharing a graph across threads
    must serialize access or analyse a ``snapshot()`` instead.
    """

    def __init__(self) -> None:
        self._nodes: Dict[NodeId, Node] = {}
        self._edges: Dict[int, Edge] = {}
        self._incident: Dict[NodeId, List[int]] = {}
        self._retired: Set[NodeId] = set()
        self._next_node_id = 0
        self._next_edge_id = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self.node_ids())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_node(self, label: str, attributes: Optional[Mapping[str, Any]] = None) -> NodeId:
        """Add a node and return its fresh, never-before-issued id."""
        node_id = self._next_node_id
        self._next_node_id += 1

        self._nodes[node_id] = Node(
            id=node_id,
            label=label,
            attributes=MappingProxyType(dict(attributes or {})),
        )
        self._incident[node_id] = []
        logger.debug("Node added", extra={"node_id": node_id, "label": label})
        return node_id

    def remove_node(self, node_id: NodeId) -> bool:
        """Remove a node and every edge touching it.

        Returns:
            True if the node existed, False if the call was a no-op.
        """
        node = self._nodes.pop(node_id, None)
        if node is None:
            return False

        incident = self._incident.pop(node_id)
        for edge_id in incident:
            edge = self._edges.pop(edge_id, None)
            if edge is None or edge.is_self_loop:
                continue
            self._incident[edge.other(node_id)].remove(edge_id)

        self._retired.add(node_id)
        logger.debug(
            "Node removed",
            extra={"node_id": node_id, "label": node.label, "edges_removed": len(incident)},
        )
        return True

    def add_edge(self, a: NodeId, b: NodeId, weight: float = 1.0) -> int:
        """Add an edge between two live nodes and return its id.

        Duplicate edges are inserted as-is, never merged.

        Raises:
            UnknownNodeError: If either endpoint is not live.
            InvalidWeightError: If the weight is negative, NaN or infinite.
        """
        self.require(a)
        self.require(b)
        weight = float(weight)
        if not math.isfinite(weight) or weight < 0:
            raise InvalidWeightError(
                f"Edge weight must be a finite non-negative number, got {weight}",
                weight=weight,
            )

        edge_id = self._next_edge_id
        self._next_edge_id += 1

        self._edges[edge_id] = Edge(id=edge_id, a=a, b=b, weight=weight)
        self._incident[a].append(edge_id)
        if a != b:
            self._incident[b].append(edge_id)

        logger.debug(
            "Edge added",
            extra={"edge_id": edge_id, "a": a, "b": b, "weight": weight},
        )
        return edge_id

    def remove_edge(self, a: NodeId, b: NodeId) -> bool:
        """Remove the first edge (in insertion order) joining ``a`` and ``b``.

        Any further parallel edges between the pair remain in place.

        Returns:
            True if an edge was removed, False if none existed.
        """
        if a not in self._nodes or b not in self._nodes:
            return False

        for edge_id in self._incident[a]:
            edge = self._edges[edge_id]
            if edge.connects(a, b):
                break
        else:
            return False

        del self._edges[edge_id]
        self._incident[a].remove(edge_id)
        if a != b:
            self._incident[b].remove(edge_id)

        logger.debug("Edge removed", extra={"edge_id": edge_id, "a": a, "b": b})
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def require(self, node_id: NodeId) -> NodeId:
        """Return ``node_id`` if it is live.

        Raises:
            UnknownNodeError: If the id was never issued or has been removed.
        """
        if node_id in self._nodes:
            return node_id
        retired = node_id in self._retired
        reason = "has been removed" if retired else "does not exist"
        raise UnknownNodeError(
            f"Node {node_id!r} {reason}",
            node=node_id,
            retired=retired,
        )

    def contains(self, node_id: NodeId) -> bool:
        return node_id in self._nodes

    def is_retired(self, node_id: NodeId) -> bool:
        """Check whether ``node_id`` was issued and later removed."""
        return node_id in self._retired

    def node(self, node_id: NodeId) -> Node:
        return self._nodes[self.require(node_id)]

    def label(self, node_id: NodeId) -> str:
        return self.node(node_id).label

    def node_ids(self) -> List[NodeId]:
        return list(self._nodes)

    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def edges(self) -> List[Edge]:
        return list(self._edges.values())

    def edges_between(self, a: NodeId, b: NodeId) -> List[Edge]:
        """Return every edge joining ``a`` and ``b``, in insertion order."""
        if a not in self._nodes:
            return []
        return [
            self._edges[edge_id]
            for edge_id in self._incident[a]
            if self._edges[edge_id].connects(a, b)
        ]

    def find_by_label(self, label: str) -> Optional[NodeId]:
        """Return the first live node whose label equals ``label`` exactly."""
        for node in self._nodes.values():
            if node.label == label:
                return node.id
        return None

    def neighbors(self, node_id: NodeId) -> List[Tuple[NodeId, float]]:
        """Return ``(neighbor, weight)`` for each incident edge.

        Parallel edges produce one entry each; a self-loop yields the
        node itself once.
        """
        self.require(node_id)
        entries = []
        for edge_id in self._incident[node_id]:
            edge = self._edges[edge_id]
            entries.append((edge.other(node_id), edge.weight))
        return entries

    def degree(self, node_id: NodeId) -> int:
        """Count incident edges; parallel edges count separately, a self-loop once."""
        self.require(node_id)
        return len(self._incident[node_id])

    def snapshot(self) -> GraphSnapshot:
        return GraphSnapshot(nodes=tuple(self._nodes.values()), edges=tuple(self._edges.values()))
