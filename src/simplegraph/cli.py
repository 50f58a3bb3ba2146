"""Command Line Interface for inspecting small graphs.

This module builds a graph from a JSON edge list and either renders it or
prints the shortest path between two of its nodes. It is meant for
diagnostics; nothing is persisted between invocations.

The CLI supports the following commands:
    - render: Print the orientation and every edge of the graph
    - path: Print the edges of a shortest path between two nodes

JSON input can be provided either as a direct string or as a file path prefixed
with '@'. An edge list is a JSON array of two-element arrays, one per edge.

Example Usage:
    python -m simplegraph render '[["A", "B"], ["B", "C"]]'
    python -m simplegraph --directed path @edges.json A C
    python -m simplegraph --config '{"directed": true}' path @edges.json A C
    python -m simplegraph path '[[1, 2], [2, 3]]' 1 3

Nodes given on the command line are read as JSON numbers or booleans when
they parse as such, and as plain strings otherwise. Quote a numeric string
node in JSON to match it, e.g. '"1"'.
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Hashable, List, Optional, Sequence, Tuple

from .core.builder import GraphBuilder
from .core.config import GraphSettings
from .core.exceptions import ConfigurationError, ValidationError
from .core.graph.base import MutableGraph

logger = logging.getLogger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.
                       Relative file paths are resolved against the current
                       directory.

    Returns:
        Any: Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        with open(file_path, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {file_path}: {e}") from e

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}") from e


def parse_edge_list(data: Any) -> List[Tuple[Hashable, Hashable]]:
    """Check that parsed JSON is a list of node pairs.

    Raises:
        ValueError: If an entry is not a pair of scalar node values.
    """
    if not isinstance(data, list):
        raise ValueError("Edge list must be a JSON array")

    pairs = []
    for index, entry in enumerate(data):
        if not isinstance(entry, list) or len(entry) != 2:
            raise ValueError(f"Edge {index} must be a two-element array")
        if any(isinstance(node, (list, dict)) for node in entry):
            raise ValueError(f"Edge {index} endpoints must be strings or numbers")
        pairs.append((entry[0], entry[1]))
    return pairs


def parse_node(text: str) -> Hashable:
    """Read a node given on the command line.

    Text that is a JSON number or boolean becomes that value, so it matches
    the nodes of a JSON edge list. Anything else is taken verbatim.
    """
    try:
        value = json.loads(text)
    except json.JSONDecodeError:
        return text
    if isinstance(value, (str, int, float)):
        return value
    return text


def load_settings(args: argparse.Namespace) -> GraphSettings:
    """Combine --config with the --directed shortcut."""
    data = parse_json_input(args.config) if args.config else {}
    if not isinstance(data, dict):
        raise ConfigurationError("Graph settings must be a JSON object")
    if args.directed:
        data = {**data, "directed": True}
    return GraphSettings.from_dict(data)


def build_graph(
    settings: GraphSettings, pairs: Sequence[Tuple[Hashable, Hashable]]
) -> MutableGraph:
    """Build a graph holding every edge of ``pairs``."""
    graph: MutableGraph = GraphBuilder.from_settings(settings).build()
    for node_u, node_v in pairs:
        if not graph.add_edge(node_u, node_v):
            logger.info("Skipping duplicate edge %s, %s", node_u, node_v)
    return graph


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="simplegraph", description="Graph inspection CLI")
    parser.add_argument("--directed", action="store_true", help="Treat edges as directed")
    parser.add_argument("--config", help="JSON string or @filename containing graph settings")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    render = subparsers.add_parser("render", help="Print the graph")
    render.add_argument("edges", help="JSON string or @filename containing the edge list")

    path = subparsers.add_parser("path", help="Print a shortest path between two nodes")
    path.add_argument("edges", help="JSON string or @filename containing the edge list")
    path.add_argument("source", help="Start node")
    path.add_argument("target", help="End node")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_BAD_INPUT

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        settings = load_settings(args)
        graph = build_graph(settings, parse_edge_list(parse_json_input(args.edges)))
    except (ValueError, ValidationError, ConfigurationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.command == "render":
        print(graph)
        return EXIT_OK

    path = graph.get_path(parse_node(args.source), parse_node(args.target))
    if not path:
        print(f"No path from {args.source} to {args.target}")
        return EXIT_NO_PATH

    for edge in path:
        print(edge)
    return EXIT_OK
