"""Top-level package for the fight network analytics project.

This package exposes an in-memory weighted multigraph with stable node
identity, shortest-path computation (Dijkstra and Floyd-Warshall) and
two centrality scores (inverse-degree closeness and betweenness).
"""

from .graph import (
    Graph,
    all_pairs_distances,
    betweenness,
    build_graph,
    closeness,
    shortest_distance,
    shortest_path,
)

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "build_graph",
    "shortest_distance",
    "shortest_path",
    "all_pairs_distances",
    "closeness",
    "betweenness",
]
