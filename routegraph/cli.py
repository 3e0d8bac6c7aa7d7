"""Command-line entry point.

Usage:
    routegraph -file graph.txt -from 0 -to 2 [-print]

Reads an adjacency matrix file, then prints either ``no way`` or the
weight and route of the shortest path between the two keys.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import GraphLibError
from .io.render import format_graph, format_route
from .services import RouteQueryService


class StrictArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that only accepts flags spelled out in full.

    ``allow_abbrev=False`` does not cover single-dash long options on every
    supported interpreter, so unknown flag tokens are rejected up front.
    """

    def parse_known_args(self, args=None, namespace=None):  # type: ignore[override]
        tokens = sys.argv[1:] if args is None else list(args)
        known = {flag for action in self._actions for flag in action.option_strings}
        for token in tokens:
            if token.startswith("-") and token not in known and not _is_number(token):
                self.error(f"unrecognized argument: {token}")
        return super().parse_known_args(tokens, namespace)


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = StrictArgumentParser(
        prog="routegraph",
        description="Shortest path between two nodes of an adjacency-matrix graph.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-file",
        dest="file",
        type=Path,
        default=None,
        help="adjacency matrix file (defaults to the configured matrix path)",
    )
    parser.add_argument("-from", dest="source", type=int, required=True, help="source key")
    parser.add_argument("-to", dest="destination", type=int, required=True, help="destination key")
    parser.add_argument(
        "-print",
        dest="show_graph",
        action="store_true",
        help="print the loaded graph before the result",
    )
    return parser


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.observability.level.upper(),
        format=config.observability.format,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = get_config()
    configure_logging(config)

    container = Container.create_default(config, matrix_path=args.file)
    service: RouteQueryService = container.resolve(RouteQueryService)

    try:
        if args.show_graph:
            print(format_graph(service.graph()))
        result = service.query(args.source, args.destination)
    except GraphLibError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_route(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
