"""Command-line interface for tsrt.

Parses relation tokens, builds the relation graph, sorts it with the chosen
algorithm and prints the order. All diagnostics go to stderr so the order is
the only thing on stdout.

Exit codes:
    0  success, or no relations given (usage is printed)
    1  the relations contain a cycle, so no order exists
    2  malformed relation token or invalid configuration
"""

import argparse
import sys

from tsrt.config import TsrtConfig, load_config
from tsrt.errors import CycleDetectedError, TopoSortError
from tsrt.graph.sparse_graph import SparseGraph
from tsrt.graph.validator import GraphValidator
from tsrt.log_config import (
    LOG_LEVELS,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)
from tsrt.parser import RelationParseError, RelationParser
from tsrt.sorting.facade import SORTERS, get_sorter, make_sort

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NO_ORDER = 1
EXIT_BAD_INPUT = 2

CYCLE_MESSAGE = "tsrt: cycle detected, no topological order exists"
NO_ORDER_MESSAGE = "tsrt: no topological order exists"

USAGE = """\
Utility tsrt makes topological sort of relation graph.
Provide it with a set of space-delimited relations, represented
as comma-separated pairs 'X,Y', where vertex X precedes Y in the DAG.
A group 'X,Y,Z' means X precedes both Y and Z.

Output will be a topological ordering of all the vertices.
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tsrt",
        description="Topological sort of a relation graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # a precedes b, b precedes both c and d
  tsrt a,b b,c,d

  # Use the depth-first sorter and a custom separator
  tsrt --algorithm dfs --separator ' ' a,b b,c

  # Print the graph as a Mermaid flowchart instead of sorting it
  tsrt --graph mermaid a,b b,c
        """,
    )

    parser.add_argument(
        "relations",
        nargs="*",
        metavar="RELATION",
        help="Comma-separated vertex group 'X,Y[,Z...]': X precedes the rest",
    )

    parser.add_argument(
        "-a",
        "--algorithm",
        choices=sorted(SORTERS),
        default=None,
        help="Sorting algorithm (default: from config, else kahn)",
    )

    parser.add_argument(
        "-s",
        "--separator",
        default=None,
        help="Separator between vertices in the output (default: ' -> ')",
    )

    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to configuration YAML file (default: ./tsrt.yaml if present)",
    )

    parser.add_argument(
        "--graph",
        choices=["mermaid", "dot"],
        default=None,
        help="Print the relation graph in this format instead of sorting",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug output (DEBUG level)",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Set logging level (default: from config, else WARNING)",
    )

    return parser


def resolve_config(args: argparse.Namespace) -> TsrtConfig:
    """Load configuration and apply command-line overrides on top of it."""
    config = load_config(args.config)

    overrides = {}
    if args.algorithm is not None:
        overrides["algorithm"] = args.algorithm
    if args.separator is not None:
        overrides["separator"] = args.separator
    if args.debug:
        overrides["logging_level"] = "DEBUG"
    elif args.log_level is not None:
        overrides["logging_level"] = args.log_level

    if overrides:
        config = TsrtConfig(**{**config.model_dump(), **overrides})
    return config


def main(argv: list[str] | None = None) -> int:
    """Run the tool and return the process exit code.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.relations:
        print(USAGE)
        parser.print_help()
        return EXIT_OK

    # keep config-loading records off stdout until the real level is known
    configure_logging(args.log_level or "WARNING")

    try:
        config = resolve_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"tsrt: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    configure_logging(config.logging_level, json_logs=config.json_logs)

    try:
        relations = RelationParser().parse(args.relations)
    except RelationParseError as e:
        print(f"tsrt: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    graph = SparseGraph.from_relations(relations)
    logger.info(
        "relation_graph_built",
        relation_count=len(relations),
        vertex_count=len(graph),
        edge_count=graph.edge_count,
    )

    if args.graph:
        print(GraphValidator().generate_visualization(graph, args.graph))
        return EXIT_OK

    clear_context()
    bind_context(algorithm=config.algorithm)
    try:
        order = make_sort(graph, get_sorter(config.algorithm))
    except CycleDetectedError as e:
        logger.debug(
            "cycle_detected",
            emitted_count=len(e.emitted),
            remaining_count=len(e.remaining),
            cycle=[str(v) for v in e.cycle] if e.cycle else None,
        )
        print(CYCLE_MESSAGE, file=sys.stderr)
        return EXIT_NO_ORDER
    except TopoSortError as e:
        logger.info("no_order", error=str(e))
        print(NO_ORDER_MESSAGE, file=sys.stderr)
        return EXIT_NO_ORDER
    else:
        logger.debug(
            "topological_sort_completed",
            vertex_count=len(order),
            edge_count=graph.edge_count,
        )
    finally:
        unbind_context("algorithm")

    print(config.separator.join(order))
    return EXIT_OK


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
