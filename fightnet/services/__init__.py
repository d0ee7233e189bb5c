"""Services layer - Application orchestration.

Services coordinate the graph store, the analytics engines and the
export sink to run a complete session.
"""

from .analytics import AnalyticsReport, NetworkAnalyticsService, RouteQuery
from .report import format_report

__all__ = [
    "AnalyticsReport",
    "NetworkAnalyticsService",
    "RouteQuery",
    "format_report",
]
