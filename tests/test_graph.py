"""
Unit tests for Graph and GraphType.
"""

import threading

import pytest

from pathgraph.config import DEFAULT_GRAPH_NAME, DEFAULT_WEIGHT
from pathgraph.exceptions import (
    GraphTypeNotFoundError,
    InvalidPathWeightError,
    VertexNotInGraphError,
)
from pathgraph.graph import Graph, GraphType, new_graph


class TestGraphType:
    """Test the variant tag."""

    @pytest.mark.parametrize(
        "graph_type, directed, weighted",
        [
            (GraphType.DIRECTED, True, False),
            (GraphType.UNDIRECTED, False, False),
            (GraphType.DIRECTED_WEIGHTED, True, True),
            (GraphType.UNDIRECTED_WEIGHTED, False, True),
        ],
    )
    def test_flags(self, graph_type, directed, weighted):
        assert graph_type.directed is directed
        assert graph_type.weighted is weighted
        assert GraphType.from_flags(directed, weighted) is graph_type

    def test_from_string_accepts_value_and_name(self):
        assert GraphType.from_string("UNDIRECTED_WEIGHTED_GRAPH") is GraphType.UNDIRECTED_WEIGHTED
        assert GraphType.from_string("directed") is GraphType.DIRECTED

    def test_from_string_unknown_raises(self):
        with pytest.raises(GraphTypeNotFoundError, match="Available"):
            GraphType.from_string("HYPERGRAPH")


class TestConstruction:
    """Test new_graph and naming."""

    def test_default_name(self):
        graph = new_graph()
        assert graph.name == DEFAULT_GRAPH_NAME
        assert graph.has_name() is False
        assert graph.graph_type is GraphType.DIRECTED

    def test_named_from_tag(self):
        graph = new_graph("UNDIRECTED_GRAPH", "roads")
        assert graph.graph_type is GraphType.UNDIRECTED
        assert graph.has_name() is True

    def test_add_vertex_is_idempotent(self):
        graph = new_graph()
        graph.add_vertex("A").add_vertex("A")
        assert graph.size() == 1
        assert len(graph) == 1

    def test_iterates_payloads_in_insertion_order(self, directed_graph):
        assert list(directed_graph) == ["A", "B", "C", "D", "E", "F"]

    def test_contains(self, directed_graph):
        assert "A" in directed_graph
        assert "Z" not in directed_graph
        assert directed_graph.contains(None) is False


class TestEdges:
    """Test edge insertion and removal across variants."""

    def test_directed_has_edge_one_way(self, directed_graph):
        assert directed_graph.has_edge("A", "B")
        assert not directed_graph.has_edge("B", "A")

    def test_undirected_has_edge_both_ways(self, undirected_graph):
        assert undirected_graph.has_edge("A", "B")
        assert undirected_graph.has_edge("B", "A")
        assert undirected_graph.edge_count() == 8

    def test_add_edge_is_idempotent(self, undirected_graph):
        before = undirected_graph.edge_count()
        undirected_graph.add_edge("A", "B").add_edge("B", "A")
        assert undirected_graph.edge_count() == before

    def test_add_edge_missing_endpoint_is_noop(self, directed_graph):
        before = directed_graph.edge_count()
        directed_graph.add_edge("A", "Z").add_edge("Z", "A")
        assert directed_graph.edge_count() == before
        assert "Z" not in directed_graph

    def test_remove_absent_edge_is_noop(self, directed_graph):
        before = directed_graph.edge_count()
        directed_graph.remove_edge("E", "A").remove_edge("Z", "A")
        assert directed_graph.edge_count() == before

    def test_remove_undirected_edge_both_ways(self, undirected_graph):
        undirected_graph.remove_edge("B", "A")
        assert not undirected_graph.has_edge("A", "B")
        assert not undirected_graph.has_edge("B", "A")

    def test_unweighted_graph_ignores_weight(self):
        graph = new_graph(GraphType.DIRECTED)
        graph.add_vertices(["A", "B"]).add_edge("A", "B", 42)
        assert graph.get_edge("A", "B").weight == DEFAULT_WEIGHT

    def test_weighted_graph_keeps_weight(self, road_graph):
        assert road_graph.get_edge("A", "B").weight == 4
        assert road_graph.get_edge("B", "A").weight == 4

    def test_edge_cost(self, road_graph, directed_graph):
        assert road_graph.edge_cost("C", "B") == 2
        assert road_graph.edge_cost("A", "E") is None
        assert directed_graph.edge_cost("A", "B") == 1

    def test_neighbors_unknown_vertex_raises(self, directed_graph):
        with pytest.raises(VertexNotInGraphError):
            directed_graph.neighbors("Z")

    def test_vertex_not_in_graph_is_key_error(self, directed_graph):
        with pytest.raises(KeyError):
            directed_graph.get_vertex("Z")

    def test_clear(self, directed_graph):
        directed_graph.clear()
        assert directed_graph.size() == 0
        assert directed_graph.edge_count() == 0


class TestPaths:
    """Test path helpers on the graph."""

    def test_path_exists(self, directed_graph):
        assert directed_graph.path_exists(["A", "B", "D", "E"])
        assert not directed_graph.path_exists(["A", "D"])
        assert not directed_graph.path_exists(["A", "Z"])

    def test_total_weight(self, road_graph):
        assert road_graph.total_weight(["A", "C", "B", "D", "E"]) == 7

    def test_total_weight_not_adjacent_raises(self, road_graph):
        with pytest.raises(InvalidPathWeightError):
            road_graph.total_weight(["A", "E"])

    def test_get_path_unknown_raises(self, directed_graph):
        with pytest.raises(VertexNotInGraphError):
            directed_graph.get_path(["A", "Z"])

    def test_get_path_is_bound(self, directed_graph):
        path = directed_graph.get_path(["A", "B"])
        assert path.graph is directed_graph
        assert path.validate()


class TestCopyAndEquality:
    """Test copy() and structural equality."""

    def test_copy_is_equal_and_independent(self, road_graph):
        clone = road_graph.copy()
        assert clone == road_graph
        clone.add_edge("A", "F", 2)
        assert clone != road_graph

    def test_copy_to_unweighted_resets_weights(self, road_graph):
        clone = road_graph.copy(GraphType.UNDIRECTED, name="flat")
        assert clone.name == "flat"
        assert all(edge.weight == DEFAULT_WEIGHT for v in clone.vertices for edge in v.iter_edges())

    def test_different_types_not_equal(self, undirected_graph):
        assert undirected_graph.copy(GraphType.DIRECTED) != undirected_graph

    def test_weights_matter_only_when_weighted(self, road_graph):
        other = road_graph.copy()
        other.get_edge("A", "B").weight = 99
        assert other != road_graph

    def test_graph_is_unhashable(self):
        with pytest.raises(TypeError):
            hash(Graph())


class TestConcurrency:
    """Test that mutations from several threads are serialised."""

    def test_concurrent_add_vertices(self):
        graph = new_graph(GraphType.UNDIRECTED)

        def worker(offset: int) -> None:
            for i in range(200):
                graph.add_vertex(offset * 1000 + i)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert graph.size() == 800

    def test_lock_is_reentrant(self, directed_graph):
        with directed_graph.lock:
            directed_graph.add_vertex("G")
        assert "G" in directed_graph
