"""
Maze: build a graph from a 2-D occupancy grid.

Usage:
    from pathgraph.grid import Maze

    maze = Maze([[0, 0, 1],
                 [1, 0, 0]])
    graph = maze.generate_graph("tiny maze")
    graph.has_edge((0, 0), (0, 1))  # True
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

import numpy as np

from pathgraph.graph import Graph, GraphType, new_graph

logger = logging.getLogger(__name__)

# Cell values
FREE = 0
BLOCKED = 1

# (d_row, d_col) in link order: up, down, left, right
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))

Cell = tuple[int, int]


class Maze:
    """
    Rectangular grid of free (0) and blocked (1) cells.

    Attributes:
        grid: 2-D integer array (rows x cols)
    """

    def __init__(self, grid: Sequence[Sequence[int]] | np.ndarray) -> None:
        """
        Raises:
            ValueError: If grid is not a non-empty 2-D array of 0/1 values
        """
        array = np.asarray(grid, dtype=np.int8)
        if array.ndim != 2 or array.size == 0:
            raise ValueError(f"Maze grid must be a non-empty 2-D array, got shape {array.shape}")
        if not np.isin(array, (FREE, BLOCKED)).all():
            raise ValueError("Maze grid may only contain 0 (free) and 1 (blocked)")
        self.grid = array

    @property
    def rows(self) -> int:
        return int(self.grid.shape[0])

    @property
    def cols(self) -> int:
        return int(self.grid.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def cell(self, row: int, col: int) -> Cell:
        """
        Payload of the vertex at (row, col).

        Raises:
            IndexError: If (row, col) is outside the grid
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self.rows}x{self.cols} maze")
        return (row, col)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_free(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.grid[row, col] == FREE

    def free_cells(self) -> list[Cell]:
        """Free cells in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid == FREE)]

    def free_neighbors(self, row: int, col: int) -> Iterator[Cell]:
        """Free 4-neighbours of (row, col) in up, down, left, right order."""
        for d_row, d_col in NEIGHBOR_OFFSETS:
            if self.is_free(row + d_row, col + d_col):
                yield (row + d_row, col + d_col)

    def generate_graph(self, name: str | None = None) -> Graph:
        """
        Build an undirected graph over the maze.

        Every cell (blocked ones included) becomes a vertex, in row-major
        order. Each free cell is linked to its free 4-neighbours.
        """
        graph = new_graph(GraphType.UNDIRECTED, name)
        graph.add_vertices((r, c) for r in range(self.rows) for c in range(self.cols))

        for row, col in self.free_cells():
            for neighbor in self.free_neighbors(row, col):
                graph.add_edge((row, col), neighbor)

        logger.debug(f"Generated {graph!r} from {self.rows}x{self.cols} maze")
        return graph

    def __str__(self) -> str:
        return "\n".join("".join("#" if value else "." for value in row) for row in self.grid)

    def __repr__(self) -> str:
        return f"Maze(shape={self.shape}, free={len(self.free_cells())})"
