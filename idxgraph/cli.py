"""Command-line interface for idxgraph."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from statistics import median
from time import perf_counter
from typing import Any, Dict, List, Optional, Sequence

from idxgraph.demo import Cafe, build_cafe_graph, route, route_from_location
from idxgraph.errors import IdxGraphError, InvalidArgument, NoPathFound
from idxgraph.graph.indexed_graph import IndexedDiGraph
from idxgraph.logging import get_logger, set_global_log_level
from idxgraph.types import Weight

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 6,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(min_width, max(len(str(row[i])) for row in all_data))
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _format_cost(value: Weight) -> str:
    """Return a weight with up to three decimals, trailing zeros trimmed.

    Examples:
        14 -> "14"; 0.5 -> "0.5"; 1234.5678 -> "1,234.568"; inf -> "inf".
    """
    v = float(value)
    if v == float("inf"):
        return "inf"
    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.000123 -> "123.0 us"; 0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f} us"
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _parse_int(value: str, label: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise InvalidArgument(label, value, "must be an integer") from None


def _parse_weight(value: str) -> Weight:
    try:
        number = float(value)
    except ValueError:
        raise InvalidArgument("weight", value, "must be a number") from None
    return int(number) if number.is_integer() else number


def _build_graph(
    nodes: int,
    edges: Sequence[Sequence[str]],
    bidir_edges: Sequence[Sequence[str]],
) -> IndexedDiGraph:
    """Build a graph from ``--nodes``, ``--edge`` and ``--bidir-edge`` values."""
    graph = IndexedDiGraph(nodes)
    for u, v, w in edges:
        graph.add_edge(
            _parse_int(u, "from_node"), _parse_int(v, "to_node"), _parse_weight(w)
        )
    for u, v, w in bidir_edges:
        graph.add_bidir_edge(
            _parse_int(u, "from_node"), _parse_int(v, "to_node"), _parse_weight(w)
        )
    logger.debug(f"Built graph: {graph!r}")
    return graph


def _solve(args: argparse.Namespace) -> None:
    """Solve a graph given on the command line and print the result."""
    graph = _build_graph(args.nodes, args.edge or [], args.bidir_edge or [])
    paths = graph.calculate_for(args.start)
    targets = args.to if args.to else list(range(graph.node_count))

    entries: List[Dict[str, Any]] = []
    for target in targets:
        weight = paths.total_weight(target)
        try:
            path: Optional[List[int]] = paths.shortest_path_to(target)
        except NoPathFound:
            path = None
        entries.append({"node": target, "weight": weight, "path": path})

    if args.json:
        payload = {
            "start_node": paths.start_node,
            "node_count": paths.node_count,
            "destinations": [
                {
                    "node": e["node"],
                    "reachable": e["path"] is not None,
                    "weight": e["weight"] if e["path"] is not None else None,
                    "path": e["path"],
                }
                for e in entries
            ],
        }
        print(json.dumps(payload, indent=2))
        return

    print(f"Shortest paths from node {paths.start_node}:")
    rows = [
        [
            str(e["node"]),
            _format_cost(e["weight"]),
            " -> ".join(str(n) for n in e["path"]) if e["path"] else "-",
        ]
        for e in entries
    ]
    print(_format_table(["Node", "Weight", "Path"], rows))


def _demo(args: argparse.Namespace) -> None:
    """Run the café walkthrough."""
    start = Cafe.from_string(args.start)
    end = Cafe.from_string(args.end)
    template = build_cafe_graph()

    walk = route(template, start, end)
    print(f"Quickest walk from {start.name} to {end.name}:")
    print(f"   {' -> '.join(walk.stops)} ({_format_cost(walk.minutes)} min)")

    if args.nearby:
        nearby = [
            (Cafe.from_string(name), _parse_weight(minutes))
            for name, minutes in args.nearby
        ]
        walk = route_from_location(template, nearby, end)
        print(f"Quickest walk from your location to {end.name}:")
        print(f"   {' -> '.join(walk.stops)} ({_format_cost(walk.minutes)} min)")


def _random_template(
    nodes: int, degree: int, rng: random.Random, max_weight: int = 100
) -> IndexedDiGraph:
    graph = IndexedDiGraph(nodes)
    for u in range(nodes):
        for _ in range(degree):
            graph.add_edge(u, rng.randrange(nodes), rng.randint(1, max_weight))
    return graph


def _bench(args: argparse.Namespace) -> None:
    """Time clone-extend-solve cycles over a random template graph."""
    rng = random.Random(args.seed)

    t0 = perf_counter()
    template = _random_template(args.nodes, args.degree, rng)
    build_time = perf_counter() - t0
    logger.info(
        f"Built template with {template.node_count} nodes and "
        f"{template.edge_count} edges in {_format_duration(build_time)}"
    )

    clone_times: List[float] = []
    solve_times: List[float] = []
    for _ in range(args.repeat):
        t0 = perf_counter()
        graph = template.clone()
        first_extra = None
        for _ in range(args.extra_nodes):
            extra = graph.add_node()
            if first_extra is None:
                first_extra = extra
            for _ in range(2):
                graph.add_bidir_edge(
                    extra, rng.randrange(args.nodes), rng.randint(1, 100)
                )
        t1 = perf_counter()
        graph.calculate_for(first_extra if first_extra is not None else 0)
        t2 = perf_counter()
        clone_times.append(t1 - t0)
        solve_times.append(t2 - t1)

    rows = [
        [label, _format_duration(min(times)), _format_duration(median(times))]
        for label, times in (("clone+extend", clone_times), ("solve", solve_times))
    ]
    print(
        f"Benchmark: {args.nodes} nodes, {template.edge_count} edges, "
        f"{args.extra_nodes} extra nodes, {args.repeat} runs"
    )
    print(_format_table(["Phase", "Min", "Median"], rows))


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1: {value}")
    return number


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``idxgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="idxgraph",
        description="Single-source shortest paths over indexed graphs.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{demo,solve,bench}",
        help="Available commands",
    )

    demo_parser = subparsers.add_parser("demo", help="Run the cafe walkthrough")
    demo_parser.add_argument(
        "--from", dest="start", default="FULLSTACK", help="Start cafe"
    )
    demo_parser.add_argument(
        "--to", dest="end", default="CAFEGRUMPY", help="Destination cafe"
    )
    demo_parser.add_argument(
        "--nearby",
        nargs=2,
        action="append",
        metavar=("CAFE", "MINUTES"),
        help="Also route from an ad-hoc location this many minutes from CAFE",
    )

    solve_parser = subparsers.add_parser(
        "solve", help="Solve a graph given as arguments"
    )
    solve_parser.add_argument(
        "--nodes", "-n", type=int, required=True, help="Number of nodes"
    )
    solve_parser.add_argument(
        "--edge",
        "-e",
        nargs=3,
        action="append",
        metavar=("FROM", "TO", "WEIGHT"),
        help="Add a directed edge (repeatable)",
    )
    solve_parser.add_argument(
        "--bidir-edge",
        "-b",
        nargs=3,
        action="append",
        metavar=("FROM", "TO", "WEIGHT"),
        help="Add an edge in both directions (repeatable)",
    )
    solve_parser.add_argument(
        "--start", "-s", type=int, required=True, help="Start node"
    )
    solve_parser.add_argument(
        "--to",
        "-t",
        type=int,
        nargs="+",
        help="Destination nodes (default: all nodes)",
    )
    solve_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )

    bench_parser = subparsers.add_parser(
        "bench", help="Benchmark clone-extend-solve on a random graph"
    )
    bench_parser.add_argument("--nodes", type=_positive_int, default=10_000)
    bench_parser.add_argument("--degree", type=int, default=8)
    bench_parser.add_argument("--extra-nodes", type=int, default=2)
    bench_parser.add_argument("--repeat", type=_positive_int, default=5)
    bench_parser.add_argument("--seed", type=int, default=0)

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    handlers = {"demo": _demo, "solve": _solve, "bench": _bench}
    try:
        handlers[args.command](args)
    except (IdxGraphError, ValueError) as e:
        logger.error(f"{args.command} failed: {type(e).__name__}: {e}")
        print(f"❌ ERROR: {type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
