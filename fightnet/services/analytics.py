"""Network analytics service - Main orchestrator.

Runs one analytics session over a graph: apply mutation commands,
score every node, answer an optional route query, build the optional
all-pairs table and hand the final snapshot to the export sink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from ..domain.errors import RenderingError, UnknownNodeError
from ..domain.models import GraphSnapshot, NodeId, PathResult
from ..graph.builder import resolve_label
from ..graph.centrality import betweenness, closeness_all
from ..graph.shortest import all_pairs_distances, shortest_path
from ..graph.store import Graph
from ..io.commands import CommandOutcome, apply_commands
from ..ports.export import GraphExporterPort


@dataclass(frozen=True, slots=True)
class RouteQuery:
    """Outcome of a single start/end shortest-path question.

    Attributes:
        start: Start label as requested
        end: End label as requested
        result: The shortest path, or None when unreachable or unresolved
        error: Why the query could not be answered, if it could not
    """

    start: str
    end: str
    result: Optional[PathResult] = None
    error: Optional[str] = None


@dataclass(frozen=True, slots=True)
class AnalyticsReport:
    """Everything one session computed, ready for presentation.

    Attributes:
        snapshot: Final node and edge lists the scores refer to
        outcomes: One entry per mutation command applied
        closeness: Inverse-degree score per node
        betweenness: Normalized betweenness score per node
        route: Optional start/end shortest-path answer
        all_pairs: Optional distance table (unreachable pairs omitted)
        export_messages: Export and rendering status lines
    """

    snapshot: GraphSnapshot
    outcomes: Tuple[CommandOutcome, ...] = ()
    closeness: Dict[NodeId, float] = field(default_factory=dict)
    betweenness: Dict[NodeId, float] = field(default_factory=dict)
    route: Optional[RouteQuery] = None
    all_pairs: Optional[Dict[Tuple[NodeId, NodeId], float]] = None
    export_messages: Tuple[str, ...] = ()

    @property
    def rejected(self) -> Tuple[CommandOutcome, ...]:
        """Commands that were reported and skipped."""
        return tuple(o for o in self.outcomes if not o.ok)


@dataclass
class NetworkAnalyticsService:
    """Service orchestrating a fight network analytics session.

    Attributes:
        exporter: Optional diagram export sink
        default_weight: Weight for edge commands that give none
    """

    exporter: Optional[GraphExporterPort] = None
    default_weight: float = 1.0

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def query_route(self, graph: Graph, start: str, end: str) -> RouteQuery:
        """Answer a shortest-path question given by labels.

        Unknown labels are reported on the returned query, not raised.
        """
        try:
            start_id = resolve_label(graph, start)
            end_id = resolve_label(graph, end)
        except UnknownNodeError as e:
            self._logger.warning("Route query rejected", extra={"reason": e.message})
            return RouteQuery(start=start, end=end, error=e.message)

        result = shortest_path(graph, start_id, end_id)
        if result is None:
            self._logger.info("No route found", extra={"start": start, "end": end})
        else:
            self._logger.info(
                "Route found",
                extra={"start": start, "end": end, "distance": result.distance},
            )
        return RouteQuery(start=start, end=end, result=result)

    def export(self, snapshot: GraphSnapshot, output_path: Path, render: bool = False) -> Tuple[str, ...]:
        """Hand the snapshot to the export sink.

        Export and rendering failures are logged and returned as status
        lines; they never abort the session.
        """
        if self.exporter is None:
            return ("Export skipped: no exporter configured",)

        messages = []
        try:
            dot_path = self.exporter.export(snapshot, output_path)
            messages.append(f"Graph description written to {dot_path}")
            if render:
                image_path = self.exporter.render(dot_path)
                messages.append(f"Graph rendered successfully to {image_path}")
        except RenderingError as e:
            self._logger.warning(
                "Graph export failed",
                extra={"error": str(e), "output_path": e.output_path},
            )
            messages.append(f"Export failed: {e.message}")
        return tuple(messages)

    def analyze(
        self,
        graph: Graph,
        commands: Iterable[str] = (),
        start: Optional[str] = None,
        end: Optional[str] = None,
        include_all_pairs: bool = False,
        export_path: Optional[Path] = None,
        render: bool = False,
    ) -> AnalyticsReport:
        """Run a full session on ``graph``.

        Args:
            graph: The graph to mutate and analyse.
            commands: Mutation command lines applied first, in order.
            start: Optional start label for a route query.
            end: Optional end label for a route query.
            include_all_pairs: Whether to build the all-pairs table.
            export_path: Where to write the diagram description, if anywhere.
            render: Whether to run the renderer after exporting.

        Returns:
            AnalyticsReport describing the final graph state.
        """
        outcomes = tuple(apply_commands(graph, commands, self.default_weight))
        self._logger.info(
            "Commands applied",
            extra={
                "applied": sum(o.ok for o in outcomes),
                "rejected": sum(not o.ok for o in outcomes),
            },
        )

        route = None
        if start is not None and end is not None:
            route = self.query_route(graph, start, end)

        all_pairs = all_pairs_distances(graph) if include_all_pairs else None

        snapshot = graph.snapshot()
        export_messages: Tuple[str, ...] = ()
        if export_path is not None:
            export_messages = self.export(snapshot, export_path, render)

        return AnalyticsReport(
            snapshot=snapshot,
            outcomes=outcomes,
            closeness=closeness_all(graph),
            betweenness=betweenness(graph),
            route=route,
            all_pairs=all_pairs,
            export_messages=export_messages,
        )
