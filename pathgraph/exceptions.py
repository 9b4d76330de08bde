"""
Exception types raised by pathgraph.

A missing path is never an exception: searches return an empty Path and
report ``solution_found=False``. Everything here signals caller misuse or
malformed input and is raised synchronously, before any state changes.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all pathgraph errors."""


class VertexNotInGraphError(GraphError, KeyError):
    """A payload does not resolve to a vertex of the graph."""

    def __init__(self, data: object, message: str | None = None) -> None:
        self.data = data
        super().__init__(message or f"The graph does not contain any vertex with data: {data!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class NullPayloadError(GraphError, ValueError):
    """A vertex was constructed with ``None`` as its payload."""


class InvalidPathWeightError(GraphError, ValueError):
    """Total weight requested for a path with a non-adjacent pair."""


class GraphTypeNotFoundError(GraphError, ValueError):
    """Unknown graph type tag."""


class GraphDataMissingError(GraphError):
    """A snapshot or record set lacks a required section."""


class ErroneousFileFormatError(GraphError):
    """A snapshot file cannot be decoded, or its format is unknown."""
