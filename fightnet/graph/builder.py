"""Graph construction from literal node and edge lists.

Nodes are given either as a bare label or as a mapping carrying a
``name`` (or ``label``) key plus any extra attributes. Edges are given
as ``(label_a, label_b)`` or ``(label_a, label_b, weight)`` tuples.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence, Tuple, Union

from ..domain.errors import UnknownNodeError
from .store import Graph

logger = logging.getLogger(__name__)

NodeSpec = Union[str, Mapping[str, Any]]
EdgeSpec = Union[Tuple[str, str], Tuple[str, str, float], Sequence[Any]]


def _split_node_spec(spec: NodeSpec) -> Tuple[str, dict]:
    if isinstance(spec, str):
        return spec, {}
    attributes = dict(spec)
    label = attributes.pop("name", None) or attributes.pop("label", None)
    if not label:
        raise ValueError(f"Node spec has no name or label: {spec!r}")
    return str(label), attributes


def resolve_label(graph: Graph, label: str) -> int:
    """Resolve a human-entered label to a node id.

    Raises:
        UnknownNodeError: If no live node carries that label.
    """
    node_id = graph.find_by_label(label)
    if node_id is None:
        raise UnknownNodeError(f"Unknown node: {label}", node=label)
    return node_id


def build_graph(
    nodes: Iterable[NodeSpec],
    edges: Iterable[EdgeSpec] = (),
    default_weight: float = 1.0,
) -> Graph:
    """Build a graph from node specs and label-pair edge specs.

    Args:
        nodes: Labels or attribute mappings, added in order.
        edges: ``(a, b)`` or ``(a, b, weight)`` label tuples.
        default_weight: Weight used for two-element edge specs.

    Returns:
        The populated graph.

    Raises:
        UnknownNodeError: If an edge names a label not in ``nodes``.
    """
    graph = Graph()
    for spec in nodes:
        label, attributes = _split_node_spec(spec)
        graph.add_node(label, attributes)

    for spec in edges:
        if len(spec) == 2:
            a_label, b_label = spec
            weight = default_weight
        else:
            a_label, b_label, weight = spec
        graph.add_edge(resolve_label(graph, a_label), resolve_label(graph, b_label), weight)

    logger.info(
        "Graph built",
        extra={"nodes": graph.node_count, "edges": graph.edge_count},
    )
    return graph
