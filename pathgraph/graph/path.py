"""
Path: an ordered walk through a graph's vertices.

An empty Path is the "no path found" result of every search.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import TYPE_CHECKING

from pathgraph.exceptions import InvalidPathWeightError

if TYPE_CHECKING:
    from pathgraph.graph.graph import Graph


class Path:
    """
    Sequence of vertex payloads, bound to the graph it was drawn from.

    The path does not own its graph and must not outlive it. Equality
    compares payload sequences only.
    """

    def __init__(self, vertices: Iterable[Hashable] = (), graph: Graph | None = None) -> None:
        self._vertices: list[Hashable] = list(vertices)
        self.graph = graph

    @property
    def vertices(self) -> list[Hashable]:
        """Copy of the payload sequence."""
        return list(self._vertices)

    @property
    def start(self) -> Hashable | None:
        return self._vertices[0] if self._vertices else None

    @property
    def end(self) -> Hashable | None:
        return self._vertices[-1] if self._vertices else None

    def size(self) -> int:
        return len(self._vertices)

    def is_empty(self) -> bool:
        return not self._vertices

    def add(self, data: Hashable) -> None:
        """Append a vertex at the end."""
        self._vertices.append(data)

    push = add

    def prepend(self, data: Hashable) -> None:
        self._vertices.insert(0, data)

    def reverse(self) -> Path:
        """Reverse in place and return self."""
        self._vertices.reverse()
        return self

    def starts_with(self, data: Hashable) -> bool:
        return bool(self._vertices) and self._vertices[0] == data

    def ends_with(self, data: Hashable) -> bool:
        return bool(self._vertices) and self._vertices[-1] == data

    def validate(self) -> bool:
        """
        Check the path against its graph.

        True iff every vertex is in the graph and each consecutive pair is
        linked by an edge. An empty path is valid; an unbound non-empty one
        is not.
        """
        if not self._vertices:
            return True
        if self.graph is None:
            return False
        return self.graph.path_exists(self._vertices)

    def total_weight(self) -> int:
        """
        Sum of edge weights along the path (hop count on unweighted graphs).

        Raises:
            InvalidPathWeightError: If unbound, or a consecutive pair is not linked
        """
        if self.graph is None:
            if len(self._vertices) <= 1:
                return 0
            raise InvalidPathWeightError("Path is not bound to a graph")
        return self.graph.total_weight(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._vertices)

    def __getitem__(self, index: int) -> Hashable:
        return self._vertices[index]

    def __bool__(self) -> bool:
        return bool(self._vertices)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._vertices == other._vertices
        if isinstance(other, list):
            return self._vertices == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Path({self._vertices!r})"

    def __str__(self) -> str:
        return " -> ".join(str(data) for data in self._vertices)
