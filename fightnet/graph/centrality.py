"""Closeness and betweenness scores for the fight network.

Closeness here is the reciprocal of a node's degree, not the classical
distance-based closeness centrality. A fighter with more bouts gets a
lower score.

Betweenness counts, for every unordered pair of distinct nodes, the
nodes that sit immediately before the target on a shortest path from
the source: ``v`` scores for ``(s, t)`` when some edge ``v - t`` gives
``dist(s, v) + w(v, t) == dist(s, t)``. Counts are divided by
``(N - 1)(N - 2)``.
"""

from __future__ import annotations

import math
from typing import Dict

from ..domain.models import NodeId
from ..ports.graph import GraphView
from .shortest import single_source_distances


def closeness(graph: GraphView, node_id: NodeId) -> float:
    """Return ``1 / degree``, or ``0.0`` for an isolated node."""
    degree = graph.degree(node_id)
    if degree == 0:
        return 0.0
    return 1.0 / degree


def closeness_all(graph: GraphView) -> Dict[NodeId, float]:
    """Closeness of every live node, keyed by id."""
    return {node_id: closeness(graph, node_id) for node_id in graph.node_ids()}


def _same_distance(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=1e-12)


def betweenness(graph: GraphView) -> Dict[NodeId, float]:
    """Normalized betweenness score of every live node.

    Scores are non-negative. Graphs with fewer than three nodes yield
    all-zero scores.
    """
    nodes = list(graph.node_ids())
    scores: Dict[NodeId, float] = {node_id: 0.0 for node_id in nodes}

    n = len(nodes)
    if n < 3:
        return scores

    for i, s in enumerate(nodes):
        distances = single_source_distances(graph, s)

        for t in nodes[i + 1:]:
            target_distance = distances.get(t)
            if target_distance is None:
                continue

            counted = set()
            for v, weight in graph.neighbors(t):
                if v == s or v == t or v in counted:
                    continue
                via = distances.get(v)
                if via is not None and _same_distance(via + weight, target_distance):
                    counted.add(v)
                    scores[v] += 1.0

    total_pairs = (n - 1) * (n - 2)
    return {node_id: score / total_pairs for node_id, score in scores.items()}
