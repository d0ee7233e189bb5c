"""Typed domain errors for the fight network analytics core.

Structural errors are recoverable: callers catch them per occurrence,
report the reason and keep working with the current graph state.

All errors inherit from FightNetError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class FightNetError(Exception):
    """Base error for the fight network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownNodeError(FightNetError):
    """A node id or label does not exist in the graph.

    Attributes:
        node: The node id or label that could not be resolved
        retired: True when the id was issued once and has since been removed
    """

    node: Union[int, str, None] = None
    retired: bool = False


@dataclass
class MalformedInputError(FightNetError):
    """A textual mutation command is syntactically invalid.

    Attributes:
        command: The raw command text
    """

    command: str = ""


@dataclass
class InvalidWeightError(FightNetError):
    """An edge weight is negative, NaN or infinite.

    Attributes:
        weight: The rejected weight
    """

    weight: float = 0.0


@dataclass
class RenderingError(FightNetError):
    """Writing or rendering a graph diagram failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""


@dataclass
class ConfigurationError(FightNetError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
