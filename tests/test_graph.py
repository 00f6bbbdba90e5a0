"""Tests for the graph and its density / periphery metrics."""

from collections import Counter

import pytest

from densecluster.domain.graph import Graph
from densecluster.domain.models import NodeNotFoundError, WeightedEdge


class TestAddEdge:
    def test_stores_two_half_edges(self):
        g = Graph()
        g.add_edge("A", "B", 2.5)
        assert g.neighbors("A") == [WeightedEdge("A", "B", 2.5)]
        assert g.neighbors("B") == [WeightedEdge("B", "A", 2.5)]

    def test_grows_node_universe(self, triangle_graph):
        assert triangle_graph.all_nodes() == ["A", "B", "C", "D"]
        assert triangle_graph.node_count() == 4
        assert triangle_graph.edge_count() == 4

    def test_duplicates_are_kept(self):
        g = Graph()
        g.add_edge("A", "B", 1.0)
        g.add_edge("A", "B", 1.0)
        assert len(g.neighbors("A")) == 2
        assert g.edge_count() == 2

    def test_edge_symmetry(self, two_triangles_graph):
        g = two_triangles_graph
        for node in g.all_nodes():
            outgoing = Counter((e.target, e.weight) for e in g.neighbors(node))
            for (target, weight), n in outgoing.items():
                back = Counter((e.target, e.weight) for e in g.neighbors(target))
                assert back[(node, weight)] == n


class TestQueries:
    def test_neighbors_of_missing_node(self, triangle_graph):
        with pytest.raises(NodeNotFoundError) as exc_info:
            triangle_graph.neighbors("Z")
        assert exc_info.value.node == "Z"
        assert isinstance(exc_info.value, KeyError)

    def test_neighbors_returns_copy(self, triangle_graph):
        triangle_graph.neighbors("A").clear()
        assert len(triangle_graph.neighbors("A")) == 3

    def test_all_nodes_sorted(self):
        g = Graph()
        g.add_edge("zeta", "alpha", 1.0)
        g.add_edge("mu", "beta", 1.0)
        assert g.all_nodes() == ["alpha", "beta", "mu", "zeta"]

    def test_contains_and_len(self, triangle_graph):
        assert "A" in triangle_graph
        assert "Z" not in triangle_graph
        assert len(triangle_graph) == 4

    def test_empty(self, empty_graph):
        assert empty_graph.all_nodes() == []
        assert empty_graph.edge_count() == 0


class TestDensity:
    def test_below_two_nodes_is_zero(self, triangle_graph):
        assert triangle_graph.density(set()) == 0.0
        assert triangle_graph.density({"A"}) == 0.0

    def test_triangle_is_complete(self, triangle_graph):
        assert triangle_graph.density({"A", "B", "C"}) == 1.0

    def test_triangle_plus_pendant(self, triangle_graph):
        assert triangle_graph.density({"A", "B", "C", "D"}) == pytest.approx(4 / 6)

    def test_unconnected_pair(self, triangle_graph):
        assert triangle_graph.density({"B", "D"}) == 0.0

    def test_accepts_any_collection(self, triangle_graph):
        assert triangle_graph.density(["A", "B", "C"]) == 1.0

    def test_within_unit_interval(self, two_triangles_graph):
        g = two_triangles_graph
        nodes = g.all_nodes()
        for i in range(len(nodes)):
            for j in range(i + 2, len(nodes) + 1):
                d = g.density(nodes[i:j])
                assert 0.0 <= d <= 1.0

    def test_parallel_edges_exceed_one(self):
        g = Graph()
        g.add_edge("A", "B", 1.0)
        g.add_edge("B", "A", 1.0)
        assert g.density({"A", "B"}) == 2.0

    def test_self_loop_not_counted(self):
        g = Graph()
        g.add_edge("A", "A", 1.0)
        g.add_edge("A", "B", 1.0)
        assert g.intra_edge_count({"A", "B"}) == 1
        assert g.density({"A", "B"}) == 1.0

    def test_weights_ignored(self):
        light, heavy = Graph(), Graph()
        light.add_edge("A", "B", 0.01)
        heavy.add_edge("A", "B", 100.0)
        assert light.density({"A", "B"}) == heavy.density({"A", "B"})

    def test_missing_member_raises(self, triangle_graph):
        with pytest.raises(NodeNotFoundError):
            triangle_graph.density({"A", "Z"})


class TestPeriphery:
    def test_fully_connected_candidate(self, triangle_graph):
        assert triangle_graph.periphery_ratio("C", {"A", "B", "C"}) == 1.0

    def test_pendant_candidate(self, triangle_graph):
        ratio = triangle_graph.periphery_ratio("D", {"A", "B", "C", "D"})
        assert ratio == pytest.approx(1 / 3)

    def test_singleton_denominator_is_one(self, triangle_graph):
        # only the candidate itself is in the set, and it does not count
        assert triangle_graph.periphery_ratio("A", {"A"}) == 0.0
        assert triangle_graph.periphery_ratio("A", {"B"}) == 1.0

    def test_absent_candidate(self, triangle_graph):
        assert triangle_graph.periphery_ratio("Z", {"A", "B"}) == 0.0
        assert triangle_graph.is_in_periphery("Z", {"A", "B"}, 0.0) is False

    def test_threshold_is_inclusive(self, triangle_graph):
        members = {"A", "B", "C", "D"}
        assert triangle_graph.is_in_periphery("D", members, 1 / 3)
        assert not triangle_graph.is_in_periphery("D", members, 0.34)
