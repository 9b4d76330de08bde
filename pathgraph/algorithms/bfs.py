"""
Breadth-first search for the shortest path by hop count.

Nodes are marked visited when discovered, and the search stops when the
destination is dequeued (not when it is first discovered), so the visited
count includes the destination's whole frontier layer up to that point.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable

from pathgraph.algorithms.base import GraphAlgorithm, SearchResult
from pathgraph.graph import Path

logger = logging.getLogger(__name__)


class BFSShortestPath(GraphAlgorithm):
    """
    Shortest path (fewest edges) between two vertices using BFS.

    Without a comparator, neighbours are enqueued in edge insertion order.
    With one, the newly discovered neighbours of each node are sorted by it
    before being enqueued.
    """

    @property
    def name(self) -> str:
        return "BFS shortest path"

    def find_shortest_path(self, start: Hashable, end: Hashable) -> SearchResult:
        """
        Find a shortest path from start to end.

        Returns:
            SearchResult with the path (empty if end is unreachable) and stats

        Raises:
            VertexNotInGraphError: If start or end is not in the graph
        """
        start = self._resolve(start, "starting point")
        end = self._resolve(end, "ending point")
        stats = self._start_run()

        # BFS with parent tracking
        queue = deque([start])
        visited: dict[Hashable, Hashable | None] = {start: None}
        stats.inc_nodes_visited()
        found = False

        while queue:
            current = queue.popleft()
            if current == end:
                found = True
                break

            children = []
            for child in self.graph.get_vertex_with_data(current).edges:
                if child in visited:
                    continue
                visited[child] = current
                stats.inc_nodes_visited()
                children.append(child)
            queue.extend(self._sorted(children))

        path = self._build_path(visited, end) if found else Path(graph=self.graph)
        stats.record_solution(len(path))

        if found:
            logger.info(f"BFS found path ({len(path) - 1} hops, {stats.nodes_visited} visited): {path}")
        else:
            logger.warning(f"BFS: No path from {start!r} to {end!r} ({stats.nodes_visited} visited)")

        return SearchResult(path, stats, cost=len(path) - 1 if found else None)

    search = find_shortest_path
