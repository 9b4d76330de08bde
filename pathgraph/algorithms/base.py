"""
Algorithm base class and result types for graph searches.

Every search binds a graph, optionally a tie-break comparator, and produces
its result together with a fresh execution-stats object.
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pathgraph.algorithms.stats import (
    AlgorithmExecutionStats,
    FindPathAlgorithmExecutionStats,
)
from pathgraph.exceptions import VertexNotInGraphError
from pathgraph.graph import Graph, Path

# Total order over vertex payloads: negative, zero or positive like cmp()
NodeComparator = Callable[[Any, Any], int]


@dataclass
class SearchResult:
    """
    Outcome of a single-destination search.

    Attributes:
        path: Path from start to end (empty if no path exists)
        stats: Statistics of the run that produced the path
        cost: Accumulated cost of the path as tracked by the search (None if not found)
    """

    path: Path
    stats: FindPathAlgorithmExecutionStats
    cost: float | None = None

    @property
    def found(self) -> bool:
        return self.stats.solution_found

    @property
    def path_length(self) -> int:
        return self.stats.path_length


@dataclass
class ShortestPathsResult:
    """
    Outcome of a single-source, all-destinations search.

    Attributes:
        source: Payload the search started from
        paths: Path from source to every vertex (empty Path if unreachable)
        distances: Cost to every vertex (INF if unreachable)
        stats: Statistics of the run
    """

    source: Hashable
    paths: dict[Hashable, Path]
    distances: dict[Hashable, float]
    stats: AlgorithmExecutionStats = field(default_factory=AlgorithmExecutionStats)

    def path_to(self, target: Hashable) -> Path:
        return self.paths[target]

    def reachable(self) -> list[Hashable]:
        """Payloads with a non-empty path from the source."""
        return [data for data, path in self.paths.items() if not path.is_empty()]


class GraphAlgorithm(ABC):
    """
    Abstract base class for graph algorithms.

    Subclasses implement their search method and report a ``name``. The last
    run's statistics stay available on ``stats``; each call replaces them.
    """

    def __init__(self, graph: Graph, comparator: NodeComparator | None = None) -> None:
        """
        Args:
            graph: Graph to search (read only during the search)
            comparator: Tie-break order over payloads; None keeps insertion order
        """
        self.graph = graph
        self.comparator = comparator
        self._sort_key = functools.cmp_to_key(comparator) if comparator is not None else None
        self.stats: AlgorithmExecutionStats = self._new_stats()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable algorithm name, used in stats and logs."""
        ...

    def _new_stats(self) -> AlgorithmExecutionStats:
        return FindPathAlgorithmExecutionStats(self.name)

    def _start_run(self) -> AlgorithmExecutionStats:
        """Replace stats with a fresh object for a new call."""
        self.stats = self._new_stats()
        return self.stats

    def _resolve(self, data: Hashable, role: str) -> Hashable:
        """
        Payload key of the vertex wrapping data.

        Raises:
            VertexNotInGraphError: If the graph has no such vertex
        """
        vertex = self.graph.get_vertex_with_data(data)
        if vertex is None:
            raise VertexNotInGraphError(data, f"The {role} vertex ({data!r}) doesn't exist in the graph")
        return vertex.data

    def _sorted(self, payloads: list[Hashable]) -> list[Hashable]:
        """Sort payloads by the comparator (stable; no-op without one)."""
        if self._sort_key is None:
            return payloads
        return sorted(payloads, key=self._sort_key)

    def _tie_key(self, data: Hashable) -> Any:
        """Secondary heap key for equal priorities (0 without a comparator)."""
        if self._sort_key is None:
            return 0
        return self._sort_key(data)

    def _build_path(self, parents: Mapping[Hashable, Hashable | None], end: Hashable | None) -> Path:
        """Follow parent links back from end and return the forward path."""
        nodes = []
        run = end
        while run is not None:
            nodes.append(run)
            run = parents.get(run)
        nodes.reverse()
        return Path(nodes, graph=self.graph)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, graph={self.graph.name!r})"
