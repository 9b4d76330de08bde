"""
Unit tests for Path.
"""

import pytest

from pathgraph.exceptions import InvalidPathWeightError
from pathgraph.graph import Path


class TestPathBasics:
    """Test building and inspecting a path."""

    def test_empty_path(self):
        path = Path()
        assert path.is_empty()
        assert len(path) == 0
        assert not path
        assert path.start is None
        assert path.end is None

    def test_add_and_prepend(self):
        path = Path(["B"])
        path.add("C")
        path.push("D")
        path.prepend("A")
        assert path.vertices == ["A", "B", "C", "D"]
        assert path.starts_with("A")
        assert path.ends_with("D")

    def test_reverse_returns_self(self):
        path = Path([1, 2, 3])
        assert path.reverse() is path
        assert path == [3, 2, 1]

    def test_vertices_is_a_copy(self):
        path = Path(["A"])
        path.vertices.append("B")
        assert path.size() == 1

    def test_equality_ignores_graph(self, directed_graph):
        assert Path(["A", "B"], graph=directed_graph) == Path(["A", "B"])
        assert Path(["A", "B"]) != Path(["B", "A"])

    def test_str(self):
        assert str(Path(["A", "B", "C"])) == "A -> B -> C"


class TestValidate:
    """Test validate(): every consecutive pair must be adjacent."""

    def test_valid_path(self, directed_graph):
        assert Path(["A", "C", "D", "E"], graph=directed_graph).validate()

    def test_non_adjacent_pair(self, directed_graph):
        assert not Path(["A", "D"], graph=directed_graph).validate()

    def test_wrong_direction(self, directed_graph):
        assert not Path(["B", "A"], graph=directed_graph).validate()

    def test_unknown_vertex(self, directed_graph):
        assert not Path(["A", "Z"], graph=directed_graph).validate()

    def test_empty_is_valid(self, directed_graph):
        assert Path(graph=directed_graph).validate()

    def test_unbound_is_invalid(self):
        assert not Path(["A", "B"]).validate()


class TestTotalWeight:
    """Test total_weight()."""

    def test_weighted(self, road_graph):
        assert Path(["A", "B", "D"], graph=road_graph).total_weight() == 5

    def test_unweighted_counts_hops(self, directed_graph):
        assert Path(["A", "B", "D", "E"], graph=directed_graph).total_weight() == 3

    def test_single_vertex_is_zero(self, road_graph):
        assert Path(["A"], graph=road_graph).total_weight() == 0
        assert Path(["A"]).total_weight() == 0

    def test_non_adjacent_raises(self, road_graph):
        with pytest.raises(InvalidPathWeightError):
            Path(["A", "E"], graph=road_graph).total_weight()

    def test_unbound_raises(self):
        with pytest.raises(InvalidPathWeightError):
            Path(["A", "B"]).total_weight()
