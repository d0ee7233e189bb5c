"""Graph store and analytics engines.

This subpackage contains the in-memory multigraph, helpers to build it
from literal data, and the shortest-path and centrality algorithms that
run on top of it.
"""

from .builder import build_graph, resolve_label
from .centrality import betweenness, closeness, closeness_all
from .shortest import (
    all_pairs_distances,
    shortest_distance,
    shortest_path,
    single_source_distances,
)
from .store import Graph

__all__ = [
    "Graph",
    "build_graph",
    "resolve_label",
    "single_source_distances",
    "shortest_distance",
    "shortest_path",
    "all_pairs_distances",
    "closeness",
    "closeness_all",
    "betweenness",
]
