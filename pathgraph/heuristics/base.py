"""
Heuristic functions for informed search (A*).

A heuristic estimates the remaining cost from a payload to the goal. It must
be non-negative; it should never overestimate for A* to return optimal paths.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable


class HeuristicFunction(ABC):
    """
    Abstract base class for heuristics.

    Subclasses implement h(). Instances are callable, so a heuristic can be
    passed wherever a plain function is expected.
    """

    @abstractmethod
    def h(self, data: Hashable) -> float:
        """Estimated remaining cost from data to the goal."""
        ...

    def __call__(self, data: Hashable) -> float:
        return self.h(data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ZeroHeuristic(HeuristicFunction):
    """Always 0. Turns A* into uniform-cost search."""

    def h(self, data: Hashable) -> float:
        return 0


class FunctionHeuristic(HeuristicFunction):
    """Wrap a plain callable as a heuristic."""

    def __init__(self, func: Callable[[Hashable], float]) -> None:
        self.func = func

    def h(self, data: Hashable) -> float:
        return self.func(data)

    def __repr__(self) -> str:
        return f"FunctionHeuristic({getattr(self.func, '__name__', self.func)!r})"
