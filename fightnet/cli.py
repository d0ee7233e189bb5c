"""Command-line entry point for fight network analytics.

Builds the default fighter roster, applies mutation commands, prints
centrality scores and an optional route / all-pairs report, and can
export the final network as a Graphviz diagram.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import configure_logging, get_config
from .container import Container
from .domain.errors import ConfigurationError
from .graph.roster import DEFAULT_MUTATIONS, default_roster
from .services import NetworkAnalyticsService, format_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fightnet",
        description="Shortest paths and centrality scores for a fighter network",
    )
    parser.add_argument("-s", "--start", default="Dustin Poirier", help="Start fighter name")
    parser.add_argument("-e", "--end", default="Max Holloway", help="End fighter name")
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        metavar="CMD",
        help="Mutation command, e.g. 'add node Max Holloway' or 'add edge A:B:2' (repeatable)",
    )
    parser.add_argument(
        "--commands-file",
        type=Path,
        help="File with one mutation command per line",
    )
    parser.add_argument(
        "--no-default-mutations",
        action="store_true",
        help="Do not apply the built-in session mutations before the given commands",
    )
    parser.add_argument("--all-pairs", action="store_true", help="Print all-pairs distances")
    parser.add_argument(
        "--export",
        nargs="?",
        const="",
        type=str,
        metavar="PATH",
        help="Write a DOT file (default path from configuration)",
    )
    parser.add_argument("--render", action="store_true", help="Render the DOT file with Graphviz")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    return parser


def _collect_commands(args: argparse.Namespace) -> List[str]:
    commands: List[str] = []
    if not args.no_default_mutations:
        commands.extend(DEFAULT_MUTATIONS)
    if args.commands_file is not None:
        commands.extend(args.commands_file.read_text(encoding="utf-8").splitlines())
    commands.extend(args.command)
    return commands


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the fightnet CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    observability = config.observability
    if args.log_level:
        observability = observability.model_copy(update={"level": args.log_level})
    configure_logging(observability)

    try:
        commands = _collect_commands(args)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read commands file: {e}")
        return 1

    export_path: Optional[Path] = None
    if args.export is not None:
        export_path = Path(args.export) if args.export else config.export.dot_path

    container = Container.create_default(config)
    service: NetworkAnalyticsService = container.resolve(NetworkAnalyticsService)

    graph = default_roster(config.graph.default_edge_weight)
    report = service.analyze(
        graph,
        commands=commands,
        start=args.start,
        end=args.end,
        include_all_pairs=args.all_pairs,
        export_path=export_path,
        render=args.render,
    )

    print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
