"""Graphviz DOT exporter adapter.

Builds a graphviz Digraph from a graph snapshot, saves its DOT source
and optionally renders it with a Graphviz layout engine:
- Each node gets a whitespace-free identifier made unique by its id
- Display labels are kept as escaped ``label`` attributes
- Configuration injection (graph name, engine, image format)
- Rendering failures surface as RenderingError
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import graphviz

from ...config import ExportConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import GraphSnapshot, Node

_NON_WORD = re.compile(r"\W+")

INSTALL_HINT = (
    "Install Graphviz and ensure its executables are on your PATH "
    "(apt-get install graphviz, dnf install graphviz, brew install graphviz, "
    "or https://graphviz.org/download/)"
)


def sanitize_identifier(label: str) -> str:
    """Turn a display label into a whitespace-free DOT identifier."""
    return _NON_WORD.sub("_", label.strip()).strip("_") or "node"


def node_identifier(node: Node) -> str:
    """DOT identifier of a node, unique within its snapshot."""
    return f"{sanitize_identifier(node.label)}_{node.id}"


def build_digraph(snapshot: GraphSnapshot, graph_name: str = "UFC") -> graphviz.Digraph:
    """Build the Graphviz digraph of a snapshot, nodes first then edges."""
    names = {node.id: node_identifier(node) for node in snapshot.nodes}

    dot = graphviz.Digraph(name=sanitize_identifier(graph_name))
    for node in snapshot.nodes:
        dot.node(names[node.id], label=graphviz.escape(node.label))
    for edge in snapshot.edges:
        dot.edge(names[edge.a], names[edge.b])
    return dot


def to_dot(snapshot: GraphSnapshot, graph_name: str = "UFC") -> str:
    """DOT source text of a snapshot."""
    return build_digraph(snapshot, graph_name).source


@dataclass
class DotGraphExporter:
    """Graphviz-based graph exporter.

    This adapter implements GraphExporterPort.

    Attributes:
        config: Export configuration (graph name, engine, format)
    """

    config: ExportConfig = field(default_factory=lambda: get_config().export)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def export(self, snapshot: GraphSnapshot, output_path: Path) -> Path:
        """Save the snapshot as a DOT file.

        Raises:
            RenderingError: If the file cannot be written.
        """
        output_path = Path(output_path)
        dot = build_digraph(snapshot, self.config.graph_name)
        try:
            dot.save(filename=str(output_path))
        except OSError as e:
            raise RenderingError(
                f"Failed to write DOT file: {e}",
                output_path=str(output_path),
                renderer_type=self.config.engine,
                cause=e,
            )

        self._logger.info(
            "Graph exported",
            extra={
                "nodes": len(snapshot.nodes),
                "edges": len(snapshot.edges),
                "output_path": str(output_path),
            },
        )
        return output_path

    def render(self, source_path: Path, output_path: Optional[Path] = None) -> Path:
        """Render a DOT file with the configured Graphviz engine.

        Raises:
            RenderingError: If the Graphviz executables are missing or fail.
        """
        source_path = Path(source_path)
        engine = self.config.engine
        image_format = self.config.image_format
        if output_path is None:
            output_path = source_path.with_suffix(f".{image_format}")

        self._logger.debug(
            "Rendering graph",
            extra={"engine": engine, "image_format": image_format, "source": str(source_path)},
        )

        try:
            graphviz.render(
                engine,
                format=image_format,
                filepath=str(source_path),
                outfile=str(output_path),
                quiet=True,
            )
        except graphviz.ExecutableNotFound as e:
            raise RenderingError(
                f"Failed to run '{engine}'. {INSTALL_HINT}",
                output_path=str(output_path),
                renderer_type=engine,
                cause=e,
            )
        except graphviz.CalledProcessError as e:
            stderr = e.stderr.decode(errors="replace") if isinstance(e.stderr, bytes) else e.stderr
            raise RenderingError(
                f"'{engine}' exited with status {e.returncode}: {(stderr or '').strip()}",
                output_path=str(output_path),
                renderer_type=engine,
                cause=e,
            )

        self._logger.info("Graph rendered", extra={"output_path": str(output_path)})
        return Path(output_path)
