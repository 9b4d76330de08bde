"""
Graph model module.

Provides the in-memory graph representation:
- Vertex / Edge: payload container and its outgoing links
- Graph / GraphType: the four directed/undirected, weighted/unweighted variants
- Path: ordered walk through a graph
- GraphRecords: flat export/import contract for serialization adapters

Usage:
    from pathgraph.graph import GraphType, new_graph

    graph = new_graph(GraphType.UNDIRECTED, "demo")
    graph.add_vertices([1, 2, 3]).add_edge(1, 2).add_edge(2, 3)
"""

from pathgraph.graph.graph import Graph, GraphType, new_graph
from pathgraph.graph.path import Path
from pathgraph.graph.records import (
    EdgeRecord,
    GraphRecords,
    export_records,
    graph_from_records,
)
from pathgraph.graph.vertex import Edge, Vertex

__all__ = [
    "Edge",
    "EdgeRecord",
    "Graph",
    "GraphRecords",
    "GraphType",
    "Path",
    "Vertex",
    "export_records",
    "graph_from_records",
    "new_graph",
]
