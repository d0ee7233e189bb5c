"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    FightNetError,
    InvalidWeightError,
    MalformedInputError,
    RenderingError,
    UnknownNodeError,
)
from .models import Edge, GraphSnapshot, Node, NodeId, PathResult

__all__ = [
    # Models
    "NodeId",
    "Node",
    "Edge",
    "GraphSnapshot",
    "PathResult",
    # Errors
    "FightNetError",
    "UnknownNodeError",
    "MalformedInputError",
    "InvalidWeightError",
    "RenderingError",
    "ConfigurationError",
]
