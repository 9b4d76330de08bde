"""
Depth-first search for any path between two vertices.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable

from pathgraph.algorithms.base import GraphAlgorithm, SearchResult
from pathgraph.graph import Path

logger = logging.getLogger(__name__)


class DFSFindPath(GraphAlgorithm):
    """
    Find a path (not necessarily the shortest) using an explicit stack.

    Neighbours are marked when discovered. With a comparator, the smallest
    neighbour is explored first.
    """

    @property
    def name(self) -> str:
        return "DFS find path"

    def find_path(self, start: Hashable, end: Hashable) -> SearchResult:
        """
        Find some path from start to end.

        Raises:
            VertexNotInGraphError: If start or end is not in the graph
        """
        start = self._resolve(start, "starting point")
        end = self._resolve(end, "ending point")
        stats = self._start_run()

        stack = [start]
        visited: dict[Hashable, Hashable | None] = {start: None}
        stats.inc_nodes_visited()
        found = False

        while stack:
            current = stack.pop()
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

            if self._sort_key is None:
                stack.extend(children)
            else:
                # Smallest on top of the stack
                stack.extend(reversed(self._sorted(children)))

        path = self._build_path(visited, end) if found else Path(graph=self.graph)
        stats.record_solution(len(path))

        if found:
            logger.info(f"DFS found path ({len(path)} vertices, {stats.nodes_visited} visited): {path}")
        else:
            logger.warning(f"DFS: No path from {start!r} to {end!r}")

        return SearchResult(path, stats, cost=len(path) - 1 if found else None)

    search = find_path
