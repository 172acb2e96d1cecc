"""
Unit tests for graph.Graph: edge mutation, statistics and text form.
"""

import math

import pytest
import networkx as nx

from graph import Graph, Node, OutOfRangeError, SelfLoopError, NAN, frequency_distribution


# --- Fixtures ---

@pytest.fixture
def triangle():
    g = Graph(3)
    g.add_undirected_edge(1, 2)
    g.add_undirected_edge(2, 3)
    g.add_undirected_edge(1, 3)
    return g


@pytest.fixture
def square():
    """The 4-cycle 1-2-3-4-1."""
    g = Graph(4)
    for u, v in [(1, 2), (2, 3), (3, 4), (4, 1)]:
        g.add_undirected_edge(u, v)
    return g


@pytest.fixture
def lollipop():
    """Triangle 1-2-3 with a tail 3-4-5 and an isolated node 6."""
    g = Graph(6)
    for u, v in [(1, 2), (2, 3), (1, 3), (3, 4), (4, 5)]:
        g.add_undirected_edge(u, v)
    return g


def assert_symmetric(g: Graph):
    for u, node in g.nodes.items():
        assert u not in node.neighbors
        for v in node.neighbors:
            assert u in g.nodes[v].neighbors


# --- Node ---

def test_node_edges():
    node = Node(4)
    node.add_edge_to(2)
    node.add_edge_to(2)
    assert node.neighbors == {2}
    assert node.degree == 1
    node.remove_edge_to(7)
    node.remove_edge_to(2)
    assert node.neighbors == set()


# --- Edge mutation ---

def test_new_graph_has_isolated_nodes():
    g = Graph(5)
    assert sorted(g.nodes) == [1, 2, 3, 4, 5]
    assert 0 not in g.nodes
    assert g.num_edges == 0
    assert str(g) == ""


def test_add_edge_is_symmetric(lollipop):
    assert_symmetric(lollipop)
    assert lollipop.has_edge(4, 3)
    assert lollipop.neighbors(3) == {1, 2, 4}


def test_add_edge_twice_is_noop(triangle):
    before = triangle.to_adjacency()
    triangle.add_undirected_edge(1, 2)
    triangle.add_undirected_edge(2, 1)
    assert triangle.to_adjacency() == before
    assert triangle.num_edges == 3


@pytest.mark.parametrize("u, v", [(0, 1), (1, 0), (4, 1), (1, 4), (-1, 2), (2, 99)])
def test_out_of_range_leaves_graph_unchanged(triangle, u, v):
    before = triangle.to_adjacency()
    with pytest.raises(OutOfRangeError):
        triangle.add_undirected_edge(u, v)
    with pytest.raises(OutOfRangeError):
        triangle.remove_undirected_edge(u, v)
    assert triangle.to_adjacency() == before


def test_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        Graph(2).add_undirected_edge(1, 3)


@pytest.mark.parametrize("node", [1.5, "1", None])
def test_non_integer_node_is_out_of_range(triangle, node):
    before = triangle.to_adjacency()
    with pytest.raises(OutOfRangeError):
        triangle.add_undirected_edge(node, 2)
    with pytest.raises(OutOfRangeError):
        triangle.remove_undirected_edge(2, node)
    assert triangle.to_adjacency() == before


def test_self_loop_rejected(triangle):
    before = triangle.to_adjacency()
    with pytest.raises(SelfLoopError):
        triangle.add_undirected_edge(2, 2)
    assert triangle.to_adjacency() == before


def test_remove_edge(triangle):
    triangle.remove_undirected_edge(2, 1)
    assert not triangle.has_edge(1, 2)
    assert not triangle.has_edge(2, 1)
    assert triangle.num_edges == 2
    assert_symmetric(triangle)


def test_remove_missing_edge_is_noop(square):
    before = square.to_adjacency()
    square.remove_undirected_edge(1, 3)
    assert square.to_adjacency() == before


# --- Degree distribution ---

def test_degree_distribution(lollipop):
    dist = lollipop.get_degree_distribution()
    # degrees: 1->2, 2->2, 3->3, 4->2, 5->1, 6->0
    assert list(dist) == [0, 1, 2, 3]
    assert dist[2] == pytest.approx(3 / 6)
    assert dist[0] == pytest.approx(1 / 6)
    assert sum(dist.values()) == pytest.approx(1.0)


def test_degree_distribution_empty_graph():
    assert Graph(4).get_degree_distribution() == {0: 1.0}


# --- Clustering coefficient ---

def test_triangle_clustering(triangle):
    for u in (1, 2, 3):
        assert triangle.local_clustering(u) == 1.0
    assert triangle.get_clustering_coefficient_distribution() == {1.0: 1.0}


def test_square_clustering_is_zero(square):
    assert square.get_clustering_coefficient_distribution() == {0.0: 1.0}


def test_clustering_undefined_for_low_degree(lollipop):
    coeff = lollipop.clustering_coefficients()
    assert math.isnan(coeff[5])
    assert math.isnan(coeff[6])
    assert coeff[3] == pytest.approx(1 / 3)
    assert coeff[4] == 0.0


def test_clustering_distribution_buckets_nan_last(lollipop):
    dist = lollipop.get_clustering_coefficient_distribution()
    keys = list(dist)
    # nodes 5 and 6 are undefined; 4 -> 0; 3 -> 1/3; 1, 2 -> 1
    assert keys[:-1] == [0.0, round(1 / 3, 10), 1.0]
    assert math.isnan(keys[-1])
    assert dist[NAN] == pytest.approx(2 / 6)
    assert dist[1.0] == pytest.approx(2 / 6)
    assert sum(dist.values()) == pytest.approx(1.0)


def test_clustering_matches_networkx():
    g = Graph(8)
    for u, v in [(1, 2), (1, 3), (2, 3), (3, 4), (4, 5), (5, 3), (5, 6), (6, 7), (7, 5), (8, 1), (8, 2)]:
        g.add_undirected_edge(u, v)
    expected = nx.clustering(g.to_networkx())
    for u, c in g.clustering_coefficients().items():
        if g.degree(u) >= 2:
            assert c == pytest.approx(expected[u])


# --- Shortest paths / closeness ---

def test_shortest_path_lengths(lollipop):
    assert lollipop.shortest_path_lengths(1) == {1: 0, 2: 1, 3: 1, 4: 2, 5: 3}


def test_all_pairs_shortest_paths(lollipop):
    dist = lollipop.all_pairs_shortest_paths()
    assert dist[1, 5] == 3
    assert dist[5, 1] == 3
    assert dist[2, 2] == 0
    assert math.isinf(dist[1, 6])


@pytest.mark.parametrize("method", ["bfs", "floyd_warshall"])
def test_square_closeness(square, method):
    # 1 + 1 + 1/2 from every node
    assert square.get_closeness_centrality_distribution(method) == {2.5: 1.0}


def test_closeness_strategies_agree(square, lollipop):
    for g in (square, lollipop):
        assert (
            g.get_closeness_centrality_distribution("bfs")
            == g.get_closeness_centrality_distribution("floyd_warshall")
        )


def test_closeness_disconnected(lollipop):
    closeness = lollipop.closeness_centralities()
    assert closeness[6] == 0.0
    assert closeness[5] == pytest.approx(1 + 1 / 2 + 1 / 3 + 1 / 3)


def test_closeness_matches_networkx_harmonic(lollipop):
    expected = nx.harmonic_centrality(lollipop.to_networkx())
    for method in ("bfs", "floyd_warshall"):
        for u, c in lollipop.closeness_centralities(method).items():
            assert c == pytest.approx(expected[u])


def test_unknown_closeness_method(square):
    with pytest.raises(ValueError):
        square.get_closeness_centrality_distribution("dijkstra")


# --- Distribution helper ---

def test_frequency_distribution_rounds_values():
    dist = frequency_distribution([0.1 + 0.2, 0.3, float("nan"), math.nan], 4)
    assert list(dist)[0] == 0.3
    assert dist[0.3] == 0.5
    assert dist[NAN] == 0.5


# --- Text form / export ---

def test_edge_list_text(lollipop):
    lines = str(lollipop).splitlines()
    assert lines[:2] in (["1 2", "1 3"], ["1 3", "1 2"])
    assert set(lines) == {"1 2", "1 3", "2 3", "3 4", "4 5"}
    assert len(lines) == lollipop.num_edges
    for line in lines:
        u, v = map(int, line.split())
        assert u < v
    assert lollipop.to_edge_list_text().endswith("\n")


def test_to_networkx(lollipop):
    G = lollipop.to_networkx()
    assert G.number_of_nodes() == 6
    assert G.number_of_edges() == 5
    assert nx.number_connected_components(G) == 2
