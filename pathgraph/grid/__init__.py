"""
Grid module - graphs generated from 2-D occupancy grids.
"""

from pathgraph.grid.maze import BLOCKED, FREE, Maze

__all__ = ["Maze", "FREE", "BLOCKED"]
