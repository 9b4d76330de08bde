"""
Algorithms module.

Provides the searches over a Graph:
- BFSShortestPath: Fewest-hops path (breadth-first)
- DFSFindPath: Any path (depth-first)
- DijkstraShortestPath: Least-cost paths from one source to every vertex
- AStarShortestPath: Least-cost path guided by a heuristic
- UCSShortestPath: A* without a heuristic (uniform-cost search)

Every run produces fresh execution stats, returned with the result and kept
on the algorithm's ``stats`` attribute.
"""

from pathgraph.algorithms.astar import AStarShortestPath, UCSShortestPath
from pathgraph.algorithms.base import (
    GraphAlgorithm,
    NodeComparator,
    SearchResult,
    ShortestPathsResult,
)
from pathgraph.algorithms.bfs import BFSShortestPath
from pathgraph.algorithms.dfs import DFSFindPath
from pathgraph.algorithms.dijkstra import DijkstraShortestPath
from pathgraph.algorithms.stats import (
    AlgorithmExecutionStats,
    FindPathAlgorithmExecutionStats,
)
from pathgraph.graph import Graph

__all__ = [
    "GraphAlgorithm",
    "NodeComparator",
    "SearchResult",
    "ShortestPathsResult",
    "AlgorithmExecutionStats",
    "FindPathAlgorithmExecutionStats",
    "BFSShortestPath",
    "DFSFindPath",
    "DijkstraShortestPath",
    "AStarShortestPath",
    "UCSShortestPath",
    "ALGORITHMS",
    "get_algorithm",
]

ALGORITHMS = {
    "bfs": BFSShortestPath,
    "dfs": DFSFindPath,
    "dijkstra": DijkstraShortestPath,
    "astar": AStarShortestPath,
    "ucs": UCSShortestPath,
}


def get_algorithm(name: str, graph: Graph, **kwargs) -> GraphAlgorithm:
    """
    Get an algorithm by name, bound to graph.

    Args:
        name: Algorithm identifier (bfs, dfs, dijkstra, astar, ucs)
        graph: Graph to search
        **kwargs: Additional arguments passed to the constructor (e.g., comparator, heuristic)

    Returns:
        Instantiated algorithm

    Raises:
        ValueError: If algorithm name is unknown
    """
    key = name.strip().lower().replace("*", "star").replace("-", "")
    if key not in ALGORITHMS:
        available = ", ".join(ALGORITHMS.keys())
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")

    # Only A* takes a heuristic
    if key != "astar":
        kwargs.pop("heuristic", None)

    return ALGORITHMS[key](graph, **kwargs)
