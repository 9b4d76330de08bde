"""
Heuristics module - cost-to-goal estimates for A*.

Includes:
- HeuristicFunction: Abstract base class
- ZeroHeuristic: Always 0 (uniform-cost search)
- FunctionHeuristic: Wraps a plain callable
- ManhattanHeuristic / EuclideanHeuristic: Grid distances to a goal cell
"""

from pathgraph.heuristics.base import FunctionHeuristic, HeuristicFunction, ZeroHeuristic
from pathgraph.heuristics.grid import EuclideanHeuristic, GridHeuristic, ManhattanHeuristic, is_grid_cell

__all__ = [
    "HeuristicFunction",
    "ZeroHeuristic",
    "FunctionHeuristic",
    "GridHeuristic",
    "ManhattanHeuristic",
    "EuclideanHeuristic",
    "is_grid_cell",
]
