"""Export adapters - Implementations of GraphExporterPort.

Available implementations:
- DotGraphExporter: Graphviz DOT export with optional rendering
"""

from .dot_exporter import (
    DotGraphExporter,
    build_digraph,
    node_identifier,
    sanitize_identifier,
    to_dot,
)

__all__ = [
    "DotGraphExporter",
    "build_digraph",
    "node_identifier",
    "sanitize_identifier",
    "to_dot",
]
