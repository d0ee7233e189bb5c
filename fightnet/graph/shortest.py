"""Shortest-path computation over a weighted undirected graph.

Single-source distances use Dijkstra's algorithm with a binary heap;
the all-pairs table uses Floyd-Warshall. Every function here is a pure
function of the graph it is given and keeps no state between calls.

Weights are guaranteed non-negative by the graph store, so neither
algorithm can meet a negative cycle.
"""

from __future__ import annotations

import heapq
import logging
from typing import Dict, List, Optional, Tuple

from ..domain.models import NodeId, PathResult
from ..ports.graph import GraphView

logger = logging.getLogger(__name__)

INF = float("inf")


def _dijkstra(
    graph: GraphView, start: NodeId, target: Optional[NodeId] = None
) -> Tuple[Dict[NodeId, float], Dict[NodeId, NodeId]]:
    """Core Dijkstra run returning settled distances and predecessors.

    Stops as soon as ``target`` is settled when one is given. Nodes that
    are unreachable (or not yet settled at an early stop) are absent
    from the distance map.
    """
    distances: Dict[NodeId, float] = {start: 0.0}
    previous: Dict[NodeId, NodeId] = {}
    settled: Dict[NodeId, float] = {}

    heap: List[Tuple[float, NodeId]] = [(0.0, start)]

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in settled:
            continue

        settled[u] = current_distance

        if u == target:
            break

        for v, weight in graph.neighbors(u):
            if v in settled:
                continue
            new_distance = current_distance + weight
            if new_distance < distances.get(v, INF):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    return settled, previous


def single_source_distances(
    graph: GraphView, start: NodeId, target: Optional[NodeId] = None
) -> Dict[NodeId, float]:
    """Shortest distance from ``start`` to every reachable node.

    Args:
        graph: Graph to traverse.
        start: Source node id.
        target: Optional node id at which the search may stop early.

    Returns:
        Mapping of node id to distance. Unreachable nodes are absent.

    Raises:
        UnknownNodeError: If ``start`` (or ``target``) is not live.
    """
    graph.require(start)
    if target is not None:
        graph.require(target)
    distances, _ = _dijkstra(graph, start, target)
    return distances


def shortest_distance(graph: GraphView, start: NodeId, end: NodeId) -> Optional[float]:
    """Return the shortest distance from ``start`` to ``end``.

    Returns ``0.0`` when both ids are the same node and ``None`` when
    ``end`` cannot be reached.
    """
    distances = single_source_distances(graph, start, end)
    return distances.get(end)


def shortest_path(graph: GraphView, start: NodeId, end: NodeId) -> Optional[PathResult]:
    """Find one shortest path from ``start`` to ``end``.

    The path is rebuilt by walking predecessor labels from ``end`` back
    to ``start``. When several shortest paths exist, the one found
    first in traversal order is returned.

    Returns:
        PathResult with the distance and the ordered node ids, or None
        if ``end`` is unreachable.

    Raises:
        UnknownNodeError: If either endpoint is not live.
    """
    graph.require(start)
    graph.require(end)

    distances, previous = _dijkstra(graph, start, end)
    if end not in distances:
        logger.debug("No path", extra={"start": start, "end": end})
        return None

    path: List[NodeId] = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)
    path.reverse()

    return PathResult(distance=distances[end], path=tuple(path))


def all_pairs_distances(graph: GraphView) -> Dict[Tuple[NodeId, NodeId], float]:
    """Compute the distance between every pair of nodes (Floyd-Warshall).

    Runs in O(N^3) over the live node set. Parallel edges contribute
    their smallest weight.

    Returns:
        Mapping ``(a, b) -> distance`` for every reachable ordered pair,
        including ``(x, x) -> 0.0``. Unreachable pairs are omitted.
    """
    nodes = list(graph.node_ids())
    index = {node_id: i for i, node_id in enumerate(nodes)}
    n = len(nodes)

    dist = [[INF] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0.0

    for edge in graph.edges():
        i, j = index[edge.a], index[edge.b]
        if edge.weight < dist[i][j]:
            dist[i][j] = edge.weight
            dist[j][i] = edge.weight

    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            d_ik = dist[i][k]
            if d_ik == INF:
                continue
            row_i = dist[i]
            for j in range(n):
                candidate = d_ik + row_k[j]
                if candidate < row_i[j]:
                    row_i[j] = candidate

    logger.debug("All-pairs distances computed", extra={"nodes": n})

    return {
        (nodes[i], nodes[j]): dist[i][j]
        for i in range(n)
        for j in range(n)
        if dist[i][j] != INF
    }
