"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the analytics core and external
adapters. They enable dependency injection and make the system testable.
"""

from .export import GraphExporterPort
from .graph import GraphView

__all__ = [
    "GraphView",
    "GraphExporterPort",
]
