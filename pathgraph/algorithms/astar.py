"""
A* and uniform-cost search between two vertices.

Priority is accumulated cost plus the heuristic estimate. Neighbours are
marked when first enqueued; reaching a marked neighbour again at a strictly
lower cost rewrites its parent and its tracked cost but leaves its heap entry
alone. The tracked cost of a vertex is always that of its cheapest known
route, even when its heap priority is stale.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable, Hashable

from pathgraph.algorithms.base import GraphAlgorithm, NodeComparator, SearchResult
from pathgraph.graph import Graph, Path
from pathgraph.heuristics import FunctionHeuristic, HeuristicFunction, ZeroHeuristic

logger = logging.getLogger(__name__)


class AStarShortestPath(GraphAlgorithm):
    """
    Shortest path using A*.

    The heap is keyed by (priority, comparator key, insertion sequence), so
    equal priorities pop in comparator order, then in insertion order.
    """

    def __init__(
        self,
        graph: Graph,
        comparator: NodeComparator | None = None,
        heuristic: HeuristicFunction | Callable[[Hashable], float] | None = None,
    ) -> None:
        """
        Args:
            graph: Graph to search
            comparator: Tie-break order over payloads
            heuristic: Remaining-cost estimate; None means ZeroHeuristic
        """
        if heuristic is None:
            heuristic = ZeroHeuristic()
        elif not isinstance(heuristic, HeuristicFunction):
            heuristic = FunctionHeuristic(heuristic)
        self.heuristic = heuristic
        super().__init__(graph, comparator)

    @property
    def name(self) -> str:
        return "A* shortest path"

    def find_shortest_path(self, start: Hashable, end: Hashable) -> SearchResult:
        """
        Find a least-cost path from start to end.

        Raises:
            VertexNotInGraphError: If start or end is not in the graph
        """
        start = self._resolve(start, "starting point")
        end = self._resolve(end, "ending point")
        stats = self._start_run()
        logger.info(f"{self.name}: {start!r} -> {end!r} with {self.heuristic!r}")

        counter = itertools.count()
        costs: dict[Hashable, float] = {start: 0}
        parents: dict[Hashable, Hashable | None] = {start: None}
        heap = [(self.heuristic(start), self._tie_key(start), next(counter), start)]
        stats.inc_nodes_visited()
        found = False

        while heap:
            _, _, _, current = heapq.heappop(heap)
            if current == end:
                found = True
                break

            current_cost = costs[current]
            for edge in self.graph.get_vertex_with_data(current).iter_edges():
                child = edge.target
                new_cost = current_cost + edge.weight
                if child in costs:
                    if new_cost < costs[child]:
                        costs[child] = new_cost
                        parents[child] = current
                    continue

                costs[child] = new_cost
                parents[child] = current
                stats.inc_nodes_visited()
                priority = new_cost + self.heuristic(child)
                heapq.heappush(heap, (priority, self._tie_key(child), next(counter), child))

        path = self._build_path(parents, end) if found else Path(graph=self.graph)
        stats.record_solution(len(path))

        if found:
            logger.info(
                f"{self.name} found path (cost {path.total_weight()}, {stats.nodes_visited} visited): {path}"
            )
        else:
            logger.warning(f"{self.name}: No path from {start!r} to {end!r} ({stats.nodes_visited} visited)")

        return SearchResult(path, stats, cost=path.total_weight() if found else None)

    search = find_shortest_path


class UCSShortestPath(AStarShortestPath):
    """Uniform-cost search: A* with a heuristic fixed to zero."""

    def __init__(self, graph: Graph, comparator: NodeComparator | None = None) -> None:
        super().__init__(graph, comparator, heuristic=ZeroHeuristic())

    @property
    def name(self) -> str:
        return "UCS shortest path"
