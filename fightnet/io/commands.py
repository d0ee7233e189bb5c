"""Textual mutation commands for the fight network.

Supported forms::

    add node NAME
    add edge A:B
    add edge A:B:WEIGHT
    remove node NAME
    remove edge A:B

Labels may contain spaces; edge endpoints are separated by colons.
Malformed commands and commands naming unknown nodes are reported and
skipped, so one bad line never stops the rest of a batch.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from ..domain.errors import FightNetError, MalformedInputError
from ..graph.builder import resolve_label
from ..graph.store import Graph

logger = logging.getLogger(__name__)


class Action(Enum):
    ADD_NODE = ("add", "node")
    ADD_EDGE = ("add", "edge")
    REMOVE_NODE = ("remove", "node")
    REMOVE_EDGE = ("remove", "edge")


@dataclass(frozen=True, slots=True)
class Command:
    """A parsed mutation command.

    Attributes:
        action: What to do
        labels: One label for node commands, two for edge commands
        weight: Explicit edge weight, if one was given
        raw: The original command text
    """

    action: Action
    labels: tuple[str, ...]
    weight: Optional[float] = None
    raw: str = ""


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    """Result of applying one command line.

    Attributes:
        raw: The original command text
        ok: Whether the command changed the graph as requested
        message: What happened, or why the command was rejected
    """

    raw: str
    ok: bool
    message: str


def _parse_weight(text: str, raw: str) -> float:
    try:
        weight = float(text)
    except ValueError:
        raise MalformedInputError(f"Invalid weight value {text!r}", command=raw)
    if not math.isfinite(weight) or weight < 0:
        raise MalformedInputError(
            f"Weight must be a finite non-negative number, got {text!r}", command=raw
        )
    return weight


def parse_command(text: str) -> Command:
    """Parse one command line.

    Raises:
        MalformedInputError: On a wrong token count, unknown verb, empty
            label or unparseable weight.
    """
    raw = text.strip()
    parts = raw.split(maxsplit=2)
    if len(parts) != 3:
        raise MalformedInputError(
            f"Expected '<add|remove> <node|edge> <argument>', got {raw!r}",
            command=raw,
        )

    verb, kind, argument = parts[0].lower(), parts[1].lower(), parts[2].strip()
    try:
        action = Action((verb, kind))
    except ValueError:
        raise MalformedInputError(f"Unknown command '{verb} {kind}'", command=raw)

    if kind == "node":
        return Command(action=action, labels=(argument,), raw=raw)

    fields = [field.strip() for field in argument.split(":")]
    max_fields = 3 if action is Action.ADD_EDGE else 2
    if not 2 <= len(fields) <= max_fields or not all(fields[:2]):
        usage = "A:B[:WEIGHT]" if action is Action.ADD_EDGE else "A:B"
        raise MalformedInputError(
            f"Invalid edge format {argument!r}. Use {usage}", command=raw
        )

    weight = _parse_weight(fields[2], raw) if len(fields) == 3 else None
    return Command(action=action, labels=(fields[0], fields[1]), weight=weight, raw=raw)


def apply_command(graph: Graph, command: Command, default_weight: float = 1.0) -> str:
    """Apply a parsed command to the graph and describe the change.

    Raises:
        UnknownNodeError: If a label other than a new node's is not found.
    """
    if command.action is Action.ADD_NODE:
        node_id = graph.add_node(command.labels[0])
        return f"Added node {command.labels[0]} (id {node_id})"

    if command.action is Action.REMOVE_NODE:
        graph.remove_node(resolve_label(graph, command.labels[0]))
        return f"Removed node {command.labels[0]}"

    a = resolve_label(graph, command.labels[0])
    b = resolve_label(graph, command.labels[1])
    pair = f"{command.labels[0]} - {command.labels[1]}"

    if command.action is Action.ADD_EDGE:
        weight = default_weight if command.weight is None else command.weight
        graph.add_edge(a, b, weight)
        return f"Added edge {pair} (weight {weight:g})"

    if graph.remove_edge(a, b):
        return f"Removed edge {pair}"
    return f"No edge {pair} to remove"


def apply_commands(
    graph: Graph, lines: Iterable[str], default_weight: float = 1.0
) -> List[CommandOutcome]:
    """Parse and apply each line, skipping the ones that fail.

    Returns:
        One outcome per non-blank line, in input order.
    """
    outcomes: List[CommandOutcome] = []
    for line in lines:
        if not line.strip():
            continue
        try:
            command = parse_command(line)
            message = apply_command(graph, command, default_weight)
        except FightNetError as e:
            logger.warning(
                "Command rejected",
                extra={"command": line.strip(), "reason": e.message},
            )
            outcomes.append(CommandOutcome(raw=line.strip(), ok=False, message=e.message))
            continue

        logger.info("Command applied", extra={"command": command.raw})
        outcomes.append(CommandOutcome(raw=command.raw, ok=True, message=message))

    return outcomes
