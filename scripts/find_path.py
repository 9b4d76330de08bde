#!/usr/bin/env python3
"""
Pathgraph CLI - Run a search algorithm over a saved graph snapshot.

Usage:
    python scripts/find_path.py --graph data/roads.json --algorithm dijkstra --start A --end D
    python scripts/find_path.py --graph maze.msgpack --algorithm astar --start "[0, 0]" --end "[9, 9]" --heuristic manhattan
    python scripts/find_path.py --graph maze.msgpack --algorithm bfs --start "[0, 0]" --end "[9, 9]" -v

Algorithms:
    bfs      - Fewest-hops path (breadth-first)
    dfs      - Any path (depth-first)
    dijkstra - Least-cost path (single-source Dijkstra)
    astar    - Least-cost path guided by --heuristic
    ucs      - Uniform-cost search (A* without heuristic)

Vertex payloads:
    --start/--end are parsed as JSON when possible ("3" -> 3, "[0, 0]" -> (0, 0)),
    otherwise taken as plain strings. Bare snapshot file names are looked up
    in the data directory (PATHGRAPH_DATA_DIR, default ./data).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from pathgraph.algorithms import ALGORITHMS, get_algorithm  # noqa: E402
from pathgraph.config import LOG_LEVEL  # noqa: E402
from pathgraph.data import load_graph  # noqa: E402
from pathgraph.exceptions import GraphError  # noqa: E402
from pathgraph.heuristics import EuclideanHeuristic, ManhattanHeuristic, is_grid_cell  # noqa: E402

HEURISTICS = {
    "zero": None,
    "manhattan": ManhattanHeuristic,
    "euclidean": EuclideanHeuristic,
}


def parse_payload(text: str):
    """Parse a vertex payload from the command line."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError:
        return text
    if isinstance(value, list):
        return tuple(value)
    return value


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a path in a graph snapshot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--graph",
        type=str,
        required=True,
        help="Graph snapshot file (.json, .msgpack or .mpk)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default="bfs",
        choices=list(ALGORITHMS.keys()),
        help="Algorithm to run (default: bfs)",
    )
    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Start vertex payload",
    )
    parser.add_argument(
        "--end",
        type=str,
        required=True,
        help="End vertex payload",
    )
    parser.add_argument(
        "--heuristic",
        type=str,
        default="zero",
        choices=list(HEURISTICS.keys()),
        help="Heuristic for --algorithm astar, measured to --end on grid payloads (default: zero)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    start = parse_payload(args.start)
    end = parse_payload(args.end)

    try:
        graph = load_graph(args.graph)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except GraphError as e:
        print(f"Error: invalid snapshot: {e}", file=sys.stderr)
        return 1

    kwargs = {}
    heuristic_cls = HEURISTICS[args.heuristic]
    if args.algorithm == "astar" and heuristic_cls is not None:
        if not is_grid_cell(end):
            print(f"Error: --heuristic {args.heuristic} needs a grid --end such as \"[9, 9]\", got {end!r}", file=sys.stderr)
            return 1
        kwargs["heuristic"] = heuristic_cls(end)
    algorithm = get_algorithm(args.algorithm, graph, **kwargs)

    print("\n" + "=" * 60)
    print(f"Graph:     {graph.name} ({graph.graph_type}, {graph.size()} vertices)")
    print(f"Algorithm: {algorithm.name}")
    print(f"  Start: {start!r}")
    print(f"  End:   {end!r}")
    print("=" * 60 + "\n")

    try:
        result = algorithm.search(start, end)
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if result.found:
        print(f"Path found ({result.path_length} vertices, cost {result.cost}):")
        for i, data in enumerate(result.path):
            marker = " (START)" if i == 0 else " (END)" if data == end else ""
            print(f"  {i}. {data}{marker}")
    else:
        print(f"No path from {start!r} to {end!r}")

    print()
    print(result.stats)

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
