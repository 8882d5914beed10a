"""Tests for idxgraph.graph.convert NetworkX conversion utilities."""

import networkx as nx
import pytest

from idxgraph.errors import InvalidArgument
from idxgraph.graph.convert import NodeMap, from_networkx, to_networkx
from idxgraph.graph.indexed_graph import IndexedDiGraph


class TestNodeMap:
    def test_from_names_creates_bidirectional_mapping(self):
        node_map = NodeMap.from_names(["A", "B", "C"])
        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert node_map.to_name == {0: "A", 1: "B", 2: "C"}
        assert len(node_map) == 3

    def test_names_translates_paths(self):
        node_map = NodeMap.from_names(["x", (0, 1), 7])
        assert node_map.names([2, 0, 1]) == [7, "x", (0, 1)]


class TestFromNetworkx:
    def test_digraph_directed_edges(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=10)
        G.add_edge("B", "C", weight=5)

        graph, node_map = from_networkx(G)

        assert graph.node_count == 3
        assert graph.edge_count == 2
        a, b, c = (node_map.to_index[n] for n in "ABC")
        assert sorted(graph.edges()) == sorted([(a, b, 10), (b, c, 5)])

    def test_nodes_sorted_by_string(self):
        G = nx.DiGraph()
        G.add_edge("z", "a")
        G.add_node("m")
        _, node_map = from_networkx(G)
        assert node_map.to_name == {0: "a", 1: "m", 2: "z"}

    def test_undirected_graph_becomes_bidirectional(self):
        G = nx.Graph()
        G.add_edge("A", "B", weight=3)
        graph, node_map = from_networkx(G)
        a, b = node_map.to_index["A"], node_map.to_index["B"]
        assert sorted(graph.edges()) == sorted([(a, b, 3), (b, a, 3)])

    def test_multidigraph_keeps_parallel_edges(self):
        G = nx.MultiDiGraph()
        G.add_edge(0, 1, weight=4)
        G.add_edge(0, 1, weight=2)
        graph, _ = from_networkx(G)
        assert graph.edge_count == 2
        assert graph.calculate_for(0).total_weight(1) == 2

    def test_custom_weight_attr_and_default(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", cost=8)
        G.add_edge("B", "C")
        graph, node_map = from_networkx(G, weight_attr="cost", default_weight=2)
        paths = graph.calculate_for(node_map.to_index["A"])
        assert paths.total_weight(node_map.to_index["C"]) == 10

    def test_rejects_non_networkx(self):
        with pytest.raises(TypeError, match="Expected NetworkX graph"):
            from_networkx({"A": ["B"]})

    @pytest.mark.parametrize("nodes", [[], ["only"]])
    def test_rejects_too_few_nodes(self, nodes):
        G = nx.DiGraph()
        G.add_nodes_from(nodes)
        with pytest.raises(InvalidArgument, match="node_count"):
            from_networkx(G)

    def test_rejects_negative_weight(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=-1)
        with pytest.raises(InvalidArgument, match="weight"):
            from_networkx(G)


class TestToNetworkx:
    def test_indices_as_nodes(self, line1):
        G = to_networkx(line1)
        assert isinstance(G, nx.MultiDiGraph)
        assert sorted(G.nodes()) == [0, 1, 2]
        assert G.number_of_edges() == 3
        assert sorted(d["weight"] for _, _, d in G.edges(1, data=True)) == [1, 2]

    def test_relabel_with_node_map(self):
        G = nx.Graph()
        G.add_edge("A", "B", weight=1)
        graph, node_map = from_networkx(G)
        extra = graph.add_node()

        out = to_networkx(graph, node_map, weight_attr="w")
        assert set(out.nodes()) == {"A", "B", extra}
        assert out.number_of_edges() == 2
        assert out["A"]["B"][0]["w"] == 1

    def test_distances_match_networkx(self, cafe_graph):
        G = to_networkx(cafe_graph)
        expected = nx.single_source_dijkstra_path_length(G, 0)
        paths = cafe_graph.calculate_for(0)
        assert {n: paths.total_weight(n) for n in range(6)} == expected


def test_round_trip_preserves_shortest_paths():
    g = IndexedDiGraph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 3, 1)
    g.add_edge(0, 2, 5)
    g.add_edge(2, 3, 0)

    back, node_map = from_networkx(to_networkx(g))
    # Integer names sort by str, which is identity for 0..3
    assert node_map.to_index == {0: 0, 1: 1, 2: 2, 3: 3}
    assert back.calculate_for(0).shortest_path_to(3) == [0, 1, 3]
