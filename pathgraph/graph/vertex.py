"""
Vertex and Edge: the building blocks of a Graph.

Edges refer to their target by payload, not by object, so a graph is a flat
store of vertices keyed by payload with no reference cycles between them.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field

from pathgraph.config import DEFAULT_WEIGHT
from pathgraph.exceptions import NullPayloadError


@dataclass(eq=False)
class Edge:
    """
    Directed link to a target vertex.

    Attributes:
        target: Payload of the vertex this edge points to
        weight: Cost of traversing the edge (DEFAULT_WEIGHT in unweighted graphs)
    """

    target: Hashable
    weight: int = DEFAULT_WEIGHT

    @property
    def cost(self) -> int:
        """Synonym for weight."""
        return self.weight

    @cost.setter
    def cost(self, value: int) -> None:
        self.weight = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.target == other.target

    def __hash__(self) -> int:
        return hash(self.target)

    def __repr__(self) -> str:
        return f"Edge(target={self.target!r}, weight={self.weight})"


@dataclass(eq=False)
class Vertex:
    """
    A graph vertex: one payload plus its outgoing edges.

    Two vertices are equal iff their payloads are equal. Outgoing edges are
    kept in insertion order, keyed by target payload, so a vertex never has
    two edges to the same target.

    Attributes:
        data: The wrapped payload (must not be None, must be hashable)
        edges: Outgoing edges keyed by target payload
    """

    data: Hashable
    edges: dict[Hashable, Edge] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.data is None:
            raise NullPayloadError("The vertex cannot contain None as data")

    def contains(self, data: Hashable) -> bool:
        """Whether this vertex wraps the given payload."""
        return self.data == data

    def has_edge_with(self, target: Hashable) -> bool:
        return target in self.edges

    def get_edge_with(self, target: Hashable) -> Edge | None:
        return self.edges.get(target)

    def add_edge(self, edge: Edge) -> bool:
        """
        Add an outgoing edge.

        Returns:
            True if added, False if an edge to the same target already exists
        """
        if edge.target in self.edges:
            return False
        self.edges[edge.target] = edge
        return True

    def remove_edge_with(self, target: Hashable) -> bool:
        """Remove the edge to target. Returns False if there was none."""
        return self.edges.pop(target, None) is not None

    @property
    def neighbors(self) -> list[Hashable]:
        """Payloads of the vertices this vertex links to."""
        return list(self.edges)

    @property
    def degree(self) -> int:
        """Number of outgoing edges."""
        return len(self.edges)

    def iter_edges(self) -> Iterator[Edge]:
        return iter(self.edges.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.data == other.data

    def __hash__(self) -> int:
        return hash(self.data)

    def __str__(self) -> str:
        return f"Vertex<{self.data}>"
