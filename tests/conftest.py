"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import numpy as np
import pytest

from pathgraph.graph import Graph, GraphType, new_graph
from pathgraph.grid import Maze

# 10x10 maze, 1 = blocked. (0, 9) is walled in; everything else free is connected.
MAZE_GRID = [
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 1],
    [0, 1, 1, 0, 0, 0, 0, 0, 1, 0],
    [0, 1, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 1, 0, 0, 1, 0, 0, 0],
    [0, 0, 1, 0, 0, 0, 0, 0, 0, 1],
    [0, 0, 1, 0, 0, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 1, 0, 0, 0, 1, 1],
    [1, 1, 0, 0, 1, 0, 1, 1, 0, 0],
    [0, 0, 0, 0, 0, 1, 0, 0, 0, 0],
    [0, 0, 0, 1, 0, 0, 0, 0, 0, 0],
]


@pytest.fixture
def maze_grid() -> np.ndarray:
    """Return the 10x10 test maze as a numpy array."""
    return np.array(MAZE_GRID)


@pytest.fixture
def maze(maze_grid: np.ndarray) -> Maze:
    return Maze(maze_grid)


@pytest.fixture
def maze_graph(maze: Maze) -> Graph:
    """Return the undirected graph generated from the test maze."""
    return maze.generate_graph("test maze")


@pytest.fixture
def directed_graph() -> Graph:
    """
    Small directed graph:

        A -> B -> D -> E
        A -> C -> D
        F (isolated)
    """
    graph = new_graph(GraphType.DIRECTED, "directed")
    graph.add_vertices(["A", "B", "C", "D", "E", "F"])
    graph.add_edge("A", "B").add_edge("A", "C")
    graph.add_edge("B", "D").add_edge("C", "D")
    graph.add_edge("D", "E")
    return graph


@pytest.fixture
def undirected_graph() -> Graph:
    """Return a small undirected triangle A-B-C plus a pendant C-D."""
    graph = new_graph(GraphType.UNDIRECTED, "triangle")
    graph.add_vertices(["A", "B", "C", "D"])
    graph.add_edge("A", "B").add_edge("B", "C").add_edge("C", "A").add_edge("C", "D")
    return graph


@pytest.fixture
def road_graph() -> Graph:
    """
    Undirected weighted graph where the fewest hops is not the cheapest.

    Shortest A -> E is A, C, B, D, E (cost 7). F is unreachable.
    """
    graph = new_graph(GraphType.UNDIRECTED_WEIGHTED, "roads")
    graph.add_vertices(["A", "B", "C", "D", "E", "F"])
    graph.add_edge("A", "B", 4)
    graph.add_edge("A", "C", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("B", "D", 1)
    graph.add_edge("C", "D", 5)
    graph.add_edge("D", "E", 3)
    return graph


@pytest.fixture
def diamond_graph() -> Graph:
    """
    Directed diamond whose two branches tie on length:

        S -> B -> T
        S -> A -> T

    Edges out of S are inserted B first.
    """
    graph = new_graph(GraphType.DIRECTED, "diamond")
    graph.add_vertices(["S", "A", "B", "T"])
    graph.add_edge("S", "B").add_edge("S", "A")
    graph.add_edge("A", "T").add_edge("B", "T")
    return graph


@pytest.fixture
def alphabetical():
    """Comparator ordering payloads ascending."""
    return lambda a, b: (a > b) - (a < b)


@pytest.fixture
def reverse_alphabetical():
    """Comparator ordering payloads descending."""
    return lambda a, b: (a < b) - (a > b)
