"""Input handling for the fight network.

This subpackage turns textual mutation commands into graph changes.
"""

from .commands import (
    Action,
    Command,
    CommandOutcome,
    apply_command,
    apply_commands,
    parse_command,
)

__all__ = [
    "Action",
    "Command",
    "CommandOutcome",
    "parse_command",
    "apply_command",
    "apply_commands",
]
