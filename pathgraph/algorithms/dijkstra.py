"""
Dijkstra's single-source shortest paths.

Binary heap with lazy deletion: a vertex may sit in the heap several times,
only its first pop counts and later (stale) entries are skipped. Every
vertex is seeded up front, unreachable ones at INF, so the run closes the
whole graph and nodes_visited equals the vertex count.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Hashable

from pathgraph.algorithms.base import GraphAlgorithm, SearchResult, ShortestPathsResult
from pathgraph.algorithms.stats import AlgorithmExecutionStats, FindPathAlgorithmExecutionStats
from pathgraph.config import INF
from pathgraph.graph import Path

logger = logging.getLogger(__name__)


class DijkstraShortestPath(GraphAlgorithm):
    """
    Shortest paths from one source to every vertex (non-negative weights).

    Ties on cost are broken by the comparator when given, otherwise by the
    order entries entered the heap.
    """

    @property
    def name(self) -> str:
        return "Dijkstra shortest paths"

    def _new_stats(self) -> AlgorithmExecutionStats:
        return AlgorithmExecutionStats(self.name)

    def find_shortest_paths(self, source: Hashable) -> ShortestPathsResult:
        """
        Compute the shortest path from source to every vertex.

        Returns:
            ShortestPathsResult covering every vertex. Unreachable vertices
            map to an empty Path and INF; the source maps to [source] and 0.

        Raises:
            VertexNotInGraphError: If source is not in the graph
        """
        source = self._resolve(source, "source")
        stats = self._start_run()
        logger.info(f"Dijkstra from {source!r} over {self.graph.size()} vertices")

        counter = itertools.count()
        distances: dict[Hashable, float] = {}
        parents: dict[Hashable, Hashable | None] = {}
        heap = []
        for data in self.graph:
            distances[data] = 0 if data == source else INF
            parents[data] = None
            heap.append((distances[data], self._tie_key(data), next(counter), data))
        heapq.heapify(heap)

        closed: set[Hashable] = set()
        while heap:
            cost, _, _, current = heapq.heappop(heap)
            if current in closed:
                continue
            closed.add(current)
            stats.inc_nodes_visited()

            for edge in self.graph.get_vertex_with_data(current).iter_edges():
                if edge.target in closed:
                    continue
                new_cost = cost + edge.weight
                if new_cost < distances[edge.target]:
                    distances[edge.target] = new_cost
                    parents[edge.target] = current
                    heapq.heappush(heap, (new_cost, self._tie_key(edge.target), next(counter), edge.target))

        paths = {}
        for data in distances:
            path = self._build_path(parents, data)
            paths[data] = path if path.starts_with(source) else Path(graph=self.graph)

        stats.stop_execution()
        reached = sum(1 for path in paths.values() if path)
        logger.debug(f"Dijkstra from {source!r}: {reached}/{len(paths)} reachable in {stats.exec_time_readable}")

        return ShortestPathsResult(source, paths, distances, stats)

    def find_shortest_path(self, source: Hashable, target: Hashable) -> SearchResult:
        """
        Shortest path between two vertices, from a full single-source run.

        Raises:
            VertexNotInGraphError: If source or target is not in the graph
        """
        target = self._resolve(target, "target")
        result = self.find_shortest_paths(source)
        path = result.path_to(target)

        stats = FindPathAlgorithmExecutionStats(**result.stats.to_dict())
        stats.record_solution(len(path))
        self.stats = stats

        if path:
            logger.info(f"Dijkstra found path (cost {result.distances[target]}): {path}")
        else:
            logger.warning(f"Dijkstra: No path from {result.source!r} to {target!r}")

        cost = result.distances[target] if path else None
        return SearchResult(path, stats, cost=cost)

    search = find_shortest_path
