"""CLI for tree-layouts."""

import argparse
import json
import logging
from pathlib import Path

from .config import LayoutOptions, load_config
from .edgemap import load_edge_map
from .errors import TreeLayoutError
from .export import generate_csv, generate_json, positions_document
from .layout import LayoutStrategy, compute_layout
from .runner import canvas_size, run_strategies
from .tree import Tree, build_tree

# Circle radius a renderer draws per node; the canvas leaves room for it
NODE_RADIUS = 10


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments shared between subcommands."""
    parser.add_argument("--edges", type=Path, help="Edge map file (.json, .yaml or .yml)")
    parser.add_argument("--node-count", type=int, help="Total number of nodes")
    parser.add_argument("--scale", type=float, help="Grid spacing in pixels (default: 30)")
    parser.add_argument(
        "--node-sep",
        type=float,
        help="Minimum gap between sibling subtrees, in grid units (default: 1)",
    )
    parser.add_argument(
        "--strict-binary",
        action="store_true",
        default=None,
        help="Fail instead of ignoring extra children in the knuth layout",
    )
    parser.add_argument("--config", type=Path, help="Path to YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def resolve_common_args(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> LayoutOptions:
    """Resolve common arguments: load config, validate, and build layout options."""
    config: dict = {}
    if args.config:
        config = load_config(args.config)
        if not args.edges and "edges" in config:
            args.edges = Path(config["edges"])
        if args.node_count is None and "node-count" in config:
            args.node_count = int(config["node-count"])

    args.config_values = config

    if not args.edges:
        parser.error("--edges is required")
    args.edges = args.edges.resolve()

    try:
        return LayoutOptions.from_config(
            config,
            scale=args.scale,
            node_sep=args.node_sep,
            strict_binary=args.strict_binary,
        )
    except ValueError as err:
        parser.error(str(err))


def load_tree(args: argparse.Namespace) -> Tree:
    """Build the tree described by ``--edges`` (and ``--node-count``)."""
    edge_map, file_node_count = load_edge_map(args.edges)
    node_count = args.node_count if args.node_count is not None else file_node_count
    return build_tree(edge_map, node_count)


def parse_strategies(names: list[str] | None, parser: argparse.ArgumentParser) -> list[LayoutStrategy]:
    """Map strategy names to strategies, all of them when none are given."""
    if not names:
        return list(LayoutStrategy)
    try:
        return [LayoutStrategy.parse(name) for name in names]
    except ValueError as err:
        parser.error(str(err))


def cmd_layout(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Compute one strategy's positions and print or write them."""
    options = resolve_common_args(args, parser)
    if args.strategy is None:
        args.strategy = args.config_values.get("strategy")
    strategy = parse_strategies([args.strategy or LayoutStrategy.BUCHHEIM.value], parser)[0]

    tree = load_tree(args)
    positions = compute_layout(tree, strategy, options)

    if args.output is None:
        print(json.dumps(positions_document(positions, strategy.value, tree), indent=2))
        return

    args.output = args.output.resolve()
    if args.format == "csv":
        generate_csv(positions, args.output)
    else:
        generate_json(positions, args.output, strategy.value, tree)
    print(f"Wrote {len(positions)} positions ({strategy.value}) to {args.output}")


def cmd_compare(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Run several strategies and print their bounding boxes."""
    options = resolve_common_args(args, parser)
    strategies = parse_strategies(args.strategy, parser)

    tree = load_tree(args)
    print(f"Tree: {len(tree)} nodes, height {tree.height()}")
    results = run_strategies(tree, strategies, options)

    print(f"\n{'strategy':<12} {'width':>10} {'height':>10}")
    for strategy, result in results.items():
        print(f"{strategy.value:<12} {result.bounds.width:>10.1f} {result.bounds.height:>10.1f}")

    canvas = canvas_size(results, margin=NODE_RADIUS)
    print(f"\nCanvas: {canvas.width:.1f} x {canvas.height:.1f}")


def cmd_strategies(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """List available strategy names."""
    for strategy in LayoutStrategy:
        kind = "radial" if strategy.is_radial else "cartesian"
        print(f"{strategy.value:<12} {kind}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for tree-layouts CLI."""
    parser = argparse.ArgumentParser(description="Compute node coordinates for drawing trees")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    layout_parser = subparsers.add_parser("layout", help="Lay out a tree with one strategy")
    add_common_args(layout_parser)
    layout_parser.add_argument(
        "--strategy",
        type=str,
        help="Layout strategy (default: buchheim)",
    )
    layout_parser.add_argument("--output", type=Path, help="Output file (default: stdout)")
    layout_parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default="json",
        help="Output format when --output is given (default: json)",
    )

    compare_parser = subparsers.add_parser(
        "compare",
        help="Run several strategies and compare their bounding boxes",
    )
    add_common_args(compare_parser)
    compare_parser.add_argument(
        "--strategy",
        type=str,
        action="append",
        help="Strategy to include (can be repeated, default: all)",
    )

    strategies_parser = subparsers.add_parser("strategies", help="List layout strategies")

    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "layout": (cmd_layout, layout_parser),
        "compare": (cmd_compare, compare_parser),
        "strategies": (cmd_strategies, strategies_parser),
    }
    if args.command not in commands:
        # No subcommand provided - show help
        parser.print_help()
        return

    command, sub_parser = commands[args.command]
    try:
        command(args, sub_parser)
    except (TreeLayoutError, OSError, ValueError) as err:
        sub_parser.exit(1, f"Error: {err}\n")


if __name__ == "__main__":
    main()
