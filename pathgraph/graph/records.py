"""
Plain-record view of a graph for serialization adapters.

export_records() flattens a graph into vertex payloads and edge records;
graph_from_records() rebuilds one and rejects edges to unknown payloads.
Adapters (see pathgraph.data.loader) only ever touch these two functions.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from pathgraph.config import DEFAULT_WEIGHT
from pathgraph.exceptions import GraphDataMissingError, VertexNotInGraphError
from pathgraph.graph.graph import Graph, GraphType, new_graph

logger = logging.getLogger(__name__)


@dataclass
class EdgeRecord:
    """
    One stored edge.

    Attributes:
        source: Payload of the origin vertex
        target: Payload of the target vertex
        weight: Edge weight, or None for unweighted graphs
    """

    source: Hashable
    target: Hashable
    weight: int | None = None

    def to_list(self) -> list[Any]:
        if self.weight is None:
            return [self.source, self.target]
        return [self.source, self.target, self.weight]


EdgeLike = Union[EdgeRecord, Sequence[Any]]


@dataclass
class GraphRecords:
    """
    Flattened graph.

    Attributes:
        graph_type: Variant of the graph
        name: Graph name
        vertices: Vertex payloads in graph order
        edges: Stored one-way edges (an undirected link appears twice)
    """

    graph_type: GraphType
    name: str | None
    vertices: list[Hashable] = field(default_factory=list)
    edges: list[EdgeRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.graph_type.value,
            "name": self.name,
            "vertices": list(self.vertices),
            "edges": [edge.to_list() for edge in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GraphRecords:
        """
        Parse the dict produced by to_dict().

        Raises:
            GraphDataMissingError: If the type, vertices or edges section is missing
            GraphTypeNotFoundError: If the type tag is unknown
        """
        for key in ("type", "vertices", "edges"):
            if data.get(key) is None:
                raise GraphDataMissingError(f"The {key} section is missing")
        for key in ("vertices", "edges"):
            if not isinstance(data[key], (list, tuple)):
                raise GraphDataMissingError(f"The {key} section must be a list, got {type(data[key]).__name__}")
        return cls(
            graph_type=GraphType.from_string(data["type"]),
            name=data.get("name"),
            vertices=list(data["vertices"]),
            edges=[_to_edge_record(edge) for edge in data["edges"]],
        )

    def build(self) -> Graph:
        """Rebuild the graph these records describe."""
        return graph_from_records(self.graph_type, self.vertices, self.edges, self.name)


def _to_edge_record(edge: EdgeLike) -> EdgeRecord:
    if isinstance(edge, EdgeRecord):
        return edge
    if isinstance(edge, dict):
        for key in ("from", "to"):
            if key not in edge:
                raise GraphDataMissingError(f"Edge record is missing '{key}': {edge!r}")
        return EdgeRecord(edge["from"], edge["to"], edge.get("weight"))
    if isinstance(edge, (str, bytes)) or not isinstance(edge, Sequence):
        raise GraphDataMissingError(f"Edge record must be a sequence or mapping, got {type(edge).__name__}: {edge!r}")
    if len(edge) == 2:
        return EdgeRecord(edge[0], edge[1])
    if len(edge) == 3:
        return EdgeRecord(edge[0], edge[1], edge[2])
    raise GraphDataMissingError(f"Edge record must have 2 or 3 fields, got {len(edge)}: {edge!r}")


def export_records(graph: Graph) -> GraphRecords:
    """Flatten graph into vertex payloads and stored edges."""
    vertices = list(graph)
    edges = []
    for vertex in graph.vertices:
        for edge in vertex.iter_edges():
            weight = edge.weight if graph.weighted else None
            edges.append(EdgeRecord(vertex.data, edge.target, weight))
    return GraphRecords(graph.graph_type, graph.name, vertices, edges)


def graph_from_records(
    graph_type: GraphType | str,
    vertices: Iterable[Hashable],
    edges: Iterable[EdgeLike],
    name: str | None = None,
) -> Graph:
    """
    Build a populated graph from flat records.

    Edge records may be EdgeRecord instances, (from, to) or (from, to, weight)
    sequences, or {"from", "to", "weight"} dicts. A missing weight means
    DEFAULT_WEIGHT.

    Raises:
        VertexNotInGraphError: If an edge references a payload not in vertices
        GraphTypeNotFoundError: If graph_type is an unknown tag
    """
    graph = new_graph(graph_type, name)
    graph.add_vertices(vertices)

    for raw in edges:
        record = _to_edge_record(raw)
        for endpoint in (record.source, record.target):
            if not graph.contains(endpoint):
                raise VertexNotInGraphError(
                    endpoint,
                    f"Edge {record.source!r} -> {record.target!r} references unknown vertex {endpoint!r}",
                )
        weight = DEFAULT_WEIGHT if record.weight is None else record.weight
        graph.add_edge(record.source, record.target, weight)

    logger.debug(f"Built {graph!r} from records")
    return graph
