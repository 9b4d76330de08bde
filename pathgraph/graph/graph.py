"""
Graph: a mutable vertex store with directed/undirected, weighted/unweighted variants.

The variant is a GraphType tag. It decides whether add_edge/remove_edge act on
one direction or both, and whether edge weights are kept or normalised to
DEFAULT_WEIGHT. Vertices are keyed by payload; edges refer to targets by payload.

Usage:
    from pathgraph.graph import GraphType, new_graph

    graph = new_graph(GraphType.UNDIRECTED_WEIGHTED, "roads")
    graph.add_vertices(["A", "B", "C"])
    graph.add_edge("A", "B", 4).add_edge("B", "C", 1)
    graph.has_edge("B", "A")  # True
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Hashable, Iterable, Iterator, Sequence
from enum import Enum
from typing import TYPE_CHECKING

from pathgraph.config import DEFAULT_GRAPH_NAME, DEFAULT_WEIGHT
from pathgraph.exceptions import (
    GraphTypeNotFoundError,
    InvalidPathWeightError,
    VertexNotInGraphError,
)
from pathgraph.graph.vertex import Edge, Vertex

if TYPE_CHECKING:
    from pathgraph.graph.path import Path

logger = logging.getLogger(__name__)


class GraphType(Enum):
    """The four graph variants."""

    DIRECTED = "DIRECTED_GRAPH"
    UNDIRECTED = "UNDIRECTED_GRAPH"
    DIRECTED_WEIGHTED = "DIRECTED_WEIGHTED_GRAPH"
    UNDIRECTED_WEIGHTED = "UNDIRECTED_WEIGHTED_GRAPH"

    @property
    def directed(self) -> bool:
        return self in (GraphType.DIRECTED, GraphType.DIRECTED_WEIGHTED)

    @property
    def weighted(self) -> bool:
        return self in (GraphType.DIRECTED_WEIGHTED, GraphType.UNDIRECTED_WEIGHTED)

    @classmethod
    def from_flags(cls, directed: bool, weighted: bool) -> GraphType:
        if directed:
            return cls.DIRECTED_WEIGHTED if weighted else cls.DIRECTED
        return cls.UNDIRECTED_WEIGHTED if weighted else cls.UNDIRECTED

    @classmethod
    def from_string(cls, tag: str) -> GraphType:
        """
        Parse a type tag.

        Accepts the serialized value ("DIRECTED_GRAPH") or the member name
        ("DIRECTED"), case-insensitively.

        Raises:
            GraphTypeNotFoundError: If the tag matches no variant
        """
        normalized = str(tag).strip().upper()
        for member in cls:
            if normalized in (member.value, member.name):
                return member
        available = ", ".join(member.value for member in cls)
        raise GraphTypeNotFoundError(f"Unknown graph type '{tag}'. Available: {available}")

    def __str__(self) -> str:
        return self.value


class Graph:
    """
    In-memory graph of hashable payloads.

    Attributes:
        graph_type: Variant driving edge insertion/removal
        name: Display name (DEFAULT_GRAPH_NAME when not given)
    """

    def __init__(
        self,
        graph_type: GraphType = GraphType.DIRECTED,
        name: str | None = DEFAULT_GRAPH_NAME,
    ) -> None:
        self.graph_type = graph_type
        self.name = name
        self._vertices: dict[Hashable, Vertex] = {}
        # Serialises structural mutation; traversals do not take it
        self._lock = threading.RLock()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def directed(self) -> bool:
        return self.graph_type.directed

    @property
    def weighted(self) -> bool:
        return self.graph_type.weighted

    @property
    def lock(self) -> threading.RLock:
        """Lock held by every mutation. Hold it to read while others write."""
        return self._lock

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices.values())

    def has_name(self) -> bool:
        """Whether the graph has a name other than the default one."""
        return bool(self.name) and self.name != DEFAULT_GRAPH_NAME

    # =========================================================================
    # Queries
    # =========================================================================

    def size(self) -> int:
        """Number of vertices."""
        return len(self._vertices)

    def edge_count(self) -> int:
        """
        Number of stored one-way edges.

        An undirected link counts twice, once per direction.
        """
        return sum(vertex.degree for vertex in self._vertices.values())

    def contains(self, data: Hashable) -> bool:
        if data is None:
            return False
        return data in self._vertices

    def get_vertex_with_data(self, data: Hashable) -> Vertex | None:
        """Vertex wrapping data, or None if there is none."""
        if data is None:
            return None
        return self._vertices.get(data)

    def get_vertex(self, data: Hashable) -> Vertex:
        """
        Vertex wrapping data.

        Raises:
            VertexNotInGraphError: If no vertex wraps data
        """
        vertex = self.get_vertex_with_data(data)
        if vertex is None:
            raise VertexNotInGraphError(data)
        return vertex

    def has_edge(self, data1: Hashable, data2: Hashable) -> bool:
        vertex1 = self.get_vertex_with_data(data1)
        if vertex1 is None or not self.contains(data2):
            return False
        return vertex1.has_edge_with(data2)

    def get_edge(self, data1: Hashable, data2: Hashable) -> Edge | None:
        vertex1 = self.get_vertex_with_data(data1)
        if vertex1 is None:
            return None
        return vertex1.get_edge_with(data2)

    def edge_cost(self, data1: Hashable, data2: Hashable) -> int | None:
        """Weight of the edge data1 -> data2, or None if they are not linked."""
        edge = self.get_edge(data1, data2)
        return edge.weight if edge is not None else None

    def neighbors(self, data: Hashable) -> list[Hashable]:
        """Payloads linked from data, in edge insertion order."""
        return self.get_vertex(data).neighbors

    def edges(self, data: Hashable) -> list[Edge]:
        """Outgoing edges of data, in insertion order."""
        return list(self.get_vertex(data).iter_edges())

    # =========================================================================
    # Mutations
    # =========================================================================

    def add_vertex(self, data: Hashable) -> Graph:
        """Add a vertex for data unless one already exists."""
        with self._lock:
            if data not in self._vertices:
                vertex = Vertex(data)
                self._vertices[vertex.data] = vertex
        return self

    def add_vertices(self, data: Iterable[Hashable]) -> Graph:
        with self._lock:
            for item in data:
                self.add_vertex(item)
        return self

    def add_edge(self, data1: Hashable, data2: Hashable, weight: int = DEFAULT_WEIGHT) -> Graph:
        """
        Link data1 to data2 (and data2 to data1 in undirected graphs).

        A no-op when either payload is absent or the link already exists.
        Unweighted graphs always store DEFAULT_WEIGHT.
        """
        with self._lock:
            vertex1 = self.get_vertex_with_data(data1)
            if vertex1 is None:
                return self
            vertex2 = self.get_vertex_with_data(data2)
            if vertex2 is None:
                return self

            if not self.weighted:
                if weight != DEFAULT_WEIGHT:
                    logger.debug(f"Ignoring weight {weight} on unweighted graph '{self.name}'")
                weight = DEFAULT_WEIGHT

            vertex1.add_edge(Edge(vertex2.data, weight))
            if not self.directed:
                vertex2.add_edge(Edge(vertex1.data, weight))
        return self

    def remove_edge(self, data1: Hashable, data2: Hashable) -> Graph:
        """Remove the link data1 -> data2 (both directions if undirected)."""
        with self._lock:
            vertex1 = self.get_vertex_with_data(data1)
            if vertex1 is None:
                return self
            vertex2 = self.get_vertex_with_data(data2)
            if vertex2 is None:
                return self

            vertex1.remove_edge_with(vertex2.data)
            if not self.directed:
                vertex2.remove_edge_with(vertex1.data)
        return self

    def clear(self) -> None:
        """Remove every vertex (and so every edge)."""
        with self._lock:
            self._vertices.clear()

    def copy(self, graph_type: GraphType | None = None, name: str | None = None) -> Graph:
        """
        Copy this graph, optionally into another variant.

        Stored weights are kept when the target variant is weighted (an
        unweighted source already holds DEFAULT_WEIGHT everywhere). Copying
        into an unweighted variant resets every weight to DEFAULT_WEIGHT.
        Edges are copied one way as stored, so copying a directed graph into
        an undirected variant does not add the reverse links.
        """
        target_type = graph_type or self.graph_type
        clone = Graph(target_type, name if name is not None else self.name)
        for vertex in self._vertices.values():
            clone.add_vertex(vertex.data)
        for vertex in self._vertices.values():
            copied = clone._vertices[vertex.data]
            for edge in vertex.iter_edges():
                weight = edge.weight if target_type.weighted else DEFAULT_WEIGHT
                copied.add_edge(Edge(edge.target, weight))
        return clone

    # =========================================================================
    # Paths
    # =========================================================================

    def get_path(self, data: Sequence[Hashable]) -> Path:
        """
        Path over the given payloads.

        Raises:
            VertexNotInGraphError: If any payload has no vertex
        """
        from pathgraph.graph.path import Path

        for item in data:
            if not self.contains(item):
                raise VertexNotInGraphError(item, f"Vertex with data {item!r} does not exist in the graph")
        return Path(data, graph=self)

    def path_exists(self, path: Path | Sequence[Hashable]) -> bool:
        """Whether every payload is a vertex and every consecutive pair is linked."""
        nodes = list(path)
        for i, current in enumerate(nodes):
            vertex = self.get_vertex_with_data(current)
            if vertex is None:
                return False
            if i < len(nodes) - 1 and not vertex.has_edge_with(nodes[i + 1]):
                return False
        return True

    def total_weight(self, path: Path | Sequence[Hashable]) -> int:
        """
        Sum of the edge weights along path.

        Raises:
            InvalidPathWeightError: If a vertex is missing or a pair is not linked
        """
        nodes = list(path)
        total = 0
        for i, current in enumerate(nodes):
            vertex = self.get_vertex_with_data(current)
            if vertex is None:
                raise InvalidPathWeightError(f"Graph does not contain {current!r}")
            if i < len(nodes) - 1:
                edge = vertex.get_edge_with(nodes[i + 1])
                if edge is None:
                    raise InvalidPathWeightError(f"{current!r} and {nodes[i + 1]!r} are not connected")
                total += edge.weight
        return total

    # =========================================================================
    # Dunder methods
    # =========================================================================

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, data: object) -> bool:
        return self.contains(data)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._vertices))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Graph):
            return NotImplemented
        if self.graph_type is not other.graph_type or self.size() != other.size():
            return False
        for data, vertex in self._vertices.items():
            other_vertex = other.get_vertex_with_data(data)
            if other_vertex is None:
                return False
            if vertex.edges.keys() != other_vertex.edges.keys():
                return False
            if self.weighted:
                for target, edge in vertex.edges.items():
                    if edge.weight != other_vertex.edges[target].weight:
                        return False
        return True

    # Mutable container
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Graph(type={self.graph_type.name}, name={self.name!r}, "
            f"vertices={self.size()}, edges={self.edge_count()})"
        )

    def __str__(self) -> str:
        lines = [f"Graph {self.name} ({self.size()} vertices)", ""]
        for vertex in self._vertices.values():
            lines.append(str(vertex))
            for edge in vertex.iter_edges():
                if self.weighted:
                    lines.append(f"   Edge<{edge.target}, weight: {edge.weight}>")
                else:
                    lines.append(f"   Edge<{edge.target}>")
            lines.append("")
        return "\n".join(lines).rstrip("\n")


def new_graph(graph_type: GraphType | str = GraphType.DIRECTED, name: str | None = None) -> Graph:
    """
    Create an empty graph of the given variant.

    Args:
        graph_type: GraphType member or its string tag
        name: Display name (defaults to DEFAULT_GRAPH_NAME)

    Raises:
        GraphTypeNotFoundError: If graph_type is an unknown tag
    """
    if not isinstance(graph_type, GraphType):
        graph_type = GraphType.from_string(graph_type)
    return Graph(graph_type, name if name is not None else DEFAULT_GRAPH_NAME)
