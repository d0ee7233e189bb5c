"""Export port - Abstraction for diagram generation.

This protocol defines the contract for graph export sinks, allowing
different implementations (Graphviz DOT, others) to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import GraphSnapshot


class GraphExporterPort(Protocol):
    """Port for graph diagram export.

    Implementation: adapters/export/dot_exporter.py

    Exporters receive a finalized snapshot and emit a file; they hold
    no algorithmic content.
    """

    def export(self, snapshot: GraphSnapshot, output_path: Path) -> Path:
        """Write a diagram description of the snapshot.

        Args:
            snapshot: Finalized node and edge lists.
            output_path: Where to save the description.

        Returns:
            Path to the written file.
        """
        ...

    def render(self, source_path: Path, output_path: Optional[Path] = None) -> Path:
        """Render a previously exported description to an image.

        Args:
            source_path: The exported description file.
            output_path: Where to save the image (derived when omitted).

        Returns:
            Path to the rendered image.
        """
        ...
