"""
Unit tests for the Maze grid builder.
"""

import numpy as np
import pytest

from pathgraph.graph import GraphType
from pathgraph.grid import Maze


class TestMaze:
    """Test grid accessors."""

    def test_shape(self, maze):
        assert maze.shape == (10, 10)

    def test_free_cells(self, maze):
        cells = maze.free_cells()
        assert len(cells) == 79
        assert cells[0] == (0, 0)
        assert (0, 9) not in cells

    def test_is_free(self, maze):
        assert maze.is_free(0, 0)
        assert not maze.is_free(1, 1)
        assert not maze.is_free(-1, 0)
        assert not maze.is_free(10, 0)

    def test_cell(self, maze):
        assert maze.cell(3, 4) == (3, 4)
        with pytest.raises(IndexError):
            maze.cell(10, 0)

    @pytest.mark.parametrize(
        "grid",
        [
            [],
            [0, 1, 0],
            [[0, 2], [0, 0]],
        ],
    )
    def test_invalid_grid_raises(self, grid):
        with pytest.raises(ValueError):
            Maze(grid)

    def test_accepts_lists(self):
        maze = Maze([[0, 1], [0, 0]])
        assert isinstance(maze.grid, np.ndarray)
        assert str(maze) == ".#\n.."


class TestGenerateGraph:
    """Test the generated graph."""

    def test_every_cell_is_a_vertex(self, maze_graph):
        assert maze_graph.graph_type is GraphType.UNDIRECTED
        assert maze_graph.size() == 100
        assert maze_graph.name == "test maze"

    def test_blocked_cells_have_no_edges(self, maze_graph):
        assert maze_graph.get_vertex((1, 1)).degree == 0
        assert maze_graph.get_vertex((0, 9)).degree == 0

    def test_links_free_neighbours_both_ways(self, maze_graph):
        assert maze_graph.has_edge((0, 0), (0, 1))
        assert maze_graph.has_edge((0, 1), (0, 0))
        assert not maze_graph.has_edge((0, 0), (1, 1))

    def test_edge_order(self, maze_graph):
        """Links from earlier rows and columns come first, then down and right."""
        assert maze_graph.neighbors((2, 3)) == [(1, 3), (2, 2), (2, 4)]
        assert maze_graph.neighbors((1, 0)) == [(0, 0), (2, 0)]

    def test_tiny_maze(self):
        graph = Maze([[0, 0], [1, 0]]).generate_graph()
        assert graph.edge_count() == 4
        assert graph.path_exists([(0, 0), (0, 1), (1, 1)])
