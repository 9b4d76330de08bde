"""
pathgraph: in-memory graphs and path-search algorithms.

Provides a mutable graph model (directed/undirected, weighted/unweighted)
and BFS, DFS, Dijkstra, A* and uniform-cost search over it, each reporting
execution statistics alongside the path it finds.
"""

__version__ = "0.1.0"
