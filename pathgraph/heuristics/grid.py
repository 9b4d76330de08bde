"""
Distance heuristics over grid payloads.

Payloads are (row, col)-like sequences, such as the cells produced by
pathgraph.grid.Maze. Manhattan distance is admissible on 4-connected
unit-cost grids; Euclidean distance is admissible on any geometric grid.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence

import numpy as np

from pathgraph.heuristics.base import HeuristicFunction


def is_grid_cell(data: object) -> bool:
    """Whether data is a (row, col)-like pair of numbers."""
    if not isinstance(data, (tuple, list)) or len(data) != 2:
        return False
    return all(isinstance(value, (int, float, np.number)) and not isinstance(value, bool) for value in data)


class GridHeuristic(HeuristicFunction):
    """Base for heuristics measuring distance to a fixed goal cell."""

    def __init__(self, goal: Sequence[float]) -> None:
        """
        Raises:
            ValueError: If goal is not a (row, col)-like pair of numbers
        """
        if not is_grid_cell(goal):
            raise ValueError(f"Grid heuristic goal must be a (row, col) pair of numbers, got {goal!r}")
        self.goal = np.asarray(goal, dtype=np.float64)

    def _delta(self, data: Hashable) -> np.ndarray:
        return np.abs(np.asarray(data, dtype=np.float64) - self.goal)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(goal={tuple(self.goal.astype(int).tolist())})"


class ManhattanHeuristic(GridHeuristic):
    """Sum of absolute coordinate differences (L1)."""

    def h(self, data: Hashable) -> float:
        return float(np.sum(self._delta(data)))


class EuclideanHeuristic(GridHeuristic):
    """Straight-line distance (L2)."""

    def h(self, data: Hashable) -> float:
        return float(np.linalg.norm(self._delta(data)))
