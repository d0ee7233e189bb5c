"""Plain-text rendering of an analytics report."""

from __future__ import annotations

from typing import List

from ..domain.models import Node
from .analytics import AnalyticsReport

SEPARATOR = "-----------------"


def _format_number(value: float) -> str:
    return f"{value:g}"


def _profile(node: Node, closeness: float) -> str:
    reach = node.attribute("reach_cm", "N/A")
    height = node.attribute("height_cm", "N/A")
    weight_class = node.attribute("weight_class", "unknown")
    return (
        f"{node.label} (Reach: {reach} cm, Height: {height} cm, "
        f"Class: {weight_class}) -> Closeness {closeness:.2f}"
    )


def format_report(report: AnalyticsReport) -> str:
    """Render a report as human-readable text, one fact per line."""
    labels = {node.id: node.label for node in report.snapshot.nodes}
    lines: List[str] = []

    if report.outcomes:
        lines.append("Mutations:")
        for outcome in report.outcomes:
            status = "ok" if outcome.ok else "rejected"
            lines.append(f"  [{status}] {outcome.raw}: {outcome.message}")
        lines.append(SEPARATOR)

    for node in report.snapshot.nodes:
        score = report.closeness.get(node.id, 0.0)
        lines.append(f"The closeness centrality of {node.label} is {score:.2f}")
    lines.append(SEPARATOR)

    for node in report.snapshot.nodes:
        score = report.betweenness.get(node.id, 0.0)
        lines.append(f"Betweenness centrality of {node.label} is {score:.2f}")
    lines.append(SEPARATOR)

    route = report.route
    if route is not None:
        if route.error is not None:
            lines.append(f"No route from {route.start} to {route.end}: {route.error}")
        elif route.result is None:
            lines.append(f"No path found between {route.start} and {route.end}")
        else:
            lines.append(
                f"Shortest path between {route.start} and {route.end} is "
                f"{_format_number(route.result.distance)} bouts"
            )
            lines.append("Path: " + " -> ".join(labels[n] for n in route.result.path))
        lines.append(SEPARATOR)

    if report.all_pairs is not None:
        lines.append("All-pairs shortest paths:")
        for (a, b), distance in report.all_pairs.items():
            lines.append(f"  {labels[a]} -> {labels[b]} = {_format_number(distance)} bouts")
        lines.append(SEPARATOR)

    lines.extend(report.export_messages)

    for node in report.snapshot.nodes:
        lines.append(_profile(node, report.closeness.get(node.id, 0.0)))

    return "\n".join(lines)
