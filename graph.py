"""
Undirected graph with structural statistics.

Every generator (erdos.py, ws.py, scale_free.py) builds one of these:

    - Nodes are labeled 1, 2, ..., n (identifier 0 is never a node).
    - Each node keeps a set of neighbor identifiers.
    - Edges are only ever added or removed in both directions at once.

Statistics are returned as frequency distributions: dict[value] -> fraction
of nodes with that value, keys in ascending order.
"""

import logging
import math
from collections import deque, defaultdict
from typing import Dict, Set, List, Tuple, Iterator

import numpy as np
import networkx as nx


logger = logging.getLogger(__name__)

# Decimal digits kept for clustering / closeness values before bucketing.
PRECISION = 10

# Every undefined clustering coefficient is bucketed under this one object.
NAN = float("nan")

CLOSENESS_METHODS = ("bfs", "floyd_warshall")

Adjacency = Dict[int, Set[int]]


class OutOfRangeError(IndexError):
    """An edge operation referenced a node identifier outside [1, n]."""


class SelfLoopError(ValueError):
    """An edge from a node to itself was requested."""


# ---------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------

class Node:
    """
    A single vertex: its identifier and the identifiers of its neighbors.
    """

    __slots__ = ("identifier", "neighbors")

    def __init__(self, identifier: int):
        self.identifier = identifier
        self.neighbors: Set[int] = set()

    def add_edge_to(self, neighbor: int) -> None:
        self.neighbors.add(neighbor)

    def remove_edge_to(self, neighbor: int) -> None:
        self.neighbors.discard(neighbor)

    @property
    def degree(self) -> int:
        return len(self.neighbors)

    def __repr__(self) -> str:
        return f"Node({self.identifier}, neighbors={sorted(self.neighbors)})"


# ---------------------------------------------------------------------
# Distribution helpers
# ---------------------------------------------------------------------

def _bucket_key(value: float) -> float:
    if math.isnan(value):
        return NAN
    return round(value, PRECISION)


def frequency_distribution(values: List[float], total: int) -> Dict[float, float]:
    """
    Round each value to PRECISION digits and turn the counts into fractions
    of `total`. NaN values share a single key (NAN), ordered last.
    """
    counts: Dict[float, int] = defaultdict(int)
    for v in values:
        counts[_bucket_key(v)] += 1

    numeric = sorted(k for k in counts if k is not NAN)
    ordered = numeric + ([NAN] if NAN in counts else [])
    return {k: counts[k] / total for k in ordered}


# ---------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------

class Graph:
    """
    Undirected, unweighted graph over the nodes 1..num_nodes.

    All nodes exist from construction and are never removed; only edges
    change. Statistics queries never mutate the graph.
    """

    def __init__(self, num_nodes: int):
        if num_nodes < 0:
            raise ValueError("num_nodes must be non-negative")
        self.num_nodes = num_nodes
        self.nodes: Dict[int, Node] = {i: Node(i) for i in range(1, num_nodes + 1)}

    # -----------------------------------------------------------------
    # Edge mutation
    # -----------------------------------------------------------------

    def _check_bounds(self, node: int) -> None:
        if node not in self.nodes:
            raise OutOfRangeError(
                f"node {node} is out of range [1, {self.num_nodes}]"
            )

    def add_undirected_edge(self, u: int, v: int) -> None:
        """Connect u and v. Adding an existing edge is a no-op."""
        self._check_bounds(u)
        self._check_bounds(v)
        if u == v:
            raise SelfLoopError(f"self-loop on node {u} is not allowed")

        self.nodes[u].add_edge_to(v)
        self.nodes[v].add_edge_to(u)

    def remove_undirected_edge(self, u: int, v: int) -> None:
        """Disconnect u and v. Removing a missing edge is a no-op."""
        self._check_bounds(u)
        self._check_bounds(v)

        self.nodes[u].remove_edge_to(v)
        self.nodes[v].remove_edge_to(u)

    # -----------------------------------------------------------------
    # Basic queries
    # -----------------------------------------------------------------

    def __len__(self) -> int:
        return self.num_nodes

    def neighbors(self, u: int) -> Set[int]:
        self._check_bounds(u)
        return set(self.nodes[u].neighbors)

    def degree(self, u: int) -> int:
        self._check_bounds(u)
        return self.nodes[u].degree

    def has_edge(self, u: int, v: int) -> bool:
        if u not in self.nodes or v not in self.nodes:
            return False
        return v in self.nodes[u].neighbors

    @property
    def num_edges(self) -> int:
        return sum(node.degree for node in self.nodes.values()) // 2

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield each edge once as (u, v) with u < v, ascending u."""
        for u in range(1, self.num_nodes + 1):
            for v in self.nodes[u].neighbors:
                if u < v:
                    yield u, v

    def to_adjacency(self) -> Adjacency:
        """Copy into the plain dict[int, set[int]] form."""
        return {u: set(node.neighbors) for u, node in self.nodes.items()}

    def to_networkx(self) -> nx.Graph:
        G = nx.Graph()
        G.add_nodes_from(range(1, self.num_nodes + 1))
        G.add_edges_from(self.edges())
        return G

    # -----------------------------------------------------------------
    # Degree distribution
    # -----------------------------------------------------------------

    def get_degree_distribution(self) -> Dict[int, float]:
        """degree -> fraction of nodes with that degree, ascending degree."""
        freq: Dict[int, int] = defaultdict(int)
        for u in range(1, self.num_nodes + 1):
            freq[self.nodes[u].degree] += 1

        return {d: c / self.num_nodes for d, c in sorted(freq.items())}

    # -----------------------------------------------------------------
    # Clustering coefficient
    # -----------------------------------------------------------------

    def local_clustering(self, u: int) -> float:
        """
        Local clustering coefficient:
            C(u) = (number of edges among neighbors of u) / (k_u * (k_u - 1) / 2)

        Nodes with fewer than two neighbors have no neighbor pairs, so the
        result is NaN.
        """
        self._check_bounds(u)
        neighbors = self.nodes[u].neighbors
        k = len(neighbors)

        edges_between = 0
        for a in neighbors:
            for b in self.nodes[a].neighbors:
                # a < b counts every neighbor pair once
                if a < b and b in neighbors:
                    edges_between += 1

        possible = k * (k - 1) / 2
        if possible == 0:
            return math.nan
        return edges_between / possible

    def clustering_coefficients(self) -> Dict[int, float]:
        return {u: self.local_clustering(u) for u in range(1, self.num_nodes + 1)}

    def get_clustering_coefficient_distribution(self) -> Dict[float, float]:
        coeff = self.clustering_coefficients()
        return frequency_distribution(list(coeff.values()), self.num_nodes)

    # -----------------------------------------------------------------
    # Shortest paths
    # -----------------------------------------------------------------

    def shortest_path_lengths(self, source: int) -> Dict[int, int]:
        """
        Hop distances from `source` to every reachable node (BFS, which is
        Dijkstra for unit edge weights).
        """
        self._check_bounds(source)
        dist = {source: 0}
        q = deque([source])

        while q:
            u = q.popleft()
            for v in self.nodes[u].neighbors:
                if v not in dist:
                    dist[v] = dist[u] + 1
                    q.append(v)

        return dist

    def all_pairs_shortest_paths(self) -> np.ndarray:
        """
        Floyd–Warshall over the whole graph.

        Returns an (n + 1) x (n + 1) float matrix indexed by node identifier;
        row and column 0 are unused. Unreachable pairs hold inf.
        """
        n = self.num_nodes
        dist = np.full((n + 1, n + 1), np.inf)
        idx = np.arange(1, n + 1)
        dist[idx, idx] = 0.0
        for u, v in self.edges():
            dist[u, v] = 1.0
            dist[v, u] = 1.0

        for k in range(1, n + 1):
            dist = np.minimum(dist, dist[:, k:k + 1] + dist[k:k + 1, :])

        return dist

    # -----------------------------------------------------------------
    # Closeness centrality
    # -----------------------------------------------------------------

    def closeness_centralities(self, method: str = "bfs") -> Dict[int, float]:
        """
        Closeness of u = sum over v != u of 1 / dist(u, v).

        Unreachable nodes contribute 0, so disconnected graphs are fine.

        method:
            "bfs"            one BFS per node, O(N * (N + E)); best for
                             sparse graphs.
            "floyd_warshall" one all-pairs pass, O(N^3) regardless of
                             sparsity.
        """
        if method not in CLOSENESS_METHODS:
            raise ValueError(
                f"unknown closeness method {method!r}, expected one of {CLOSENESS_METHODS}"
            )

        n = self.num_nodes
        closeness: Dict[int, float] = {}

        if method == "bfs":
            for u in range(1, n + 1):
                dist = self.shortest_path_lengths(u)
                closeness[u] = math.fsum(
                    1.0 / dist[v] for v in range(1, n + 1) if v != u and v in dist
                )
        else:
            matrix = self.all_pairs_shortest_paths()
            for u in range(1, n + 1):
                row = matrix[u]
                closeness[u] = math.fsum(
                    1.0 / row[v] for v in range(1, n + 1) if v != u and np.isfinite(row[v])
                )

        return closeness

    def get_closeness_centrality_distribution(self, method: str = "bfs") -> Dict[float, float]:
        logger.debug("Computing closeness for %d nodes with %s", self.num_nodes, method)
        closeness = self.closeness_centralities(method)
        return frequency_distribution(list(closeness.values()), self.num_nodes)

    # -----------------------------------------------------------------
    # Text form
    # -----------------------------------------------------------------

    def to_edge_list_text(self) -> str:
        """One "u v" line per edge, u < v, ascending u."""
        return "".join(f"{u} {v}\n" for u, v in self.edges())

    def __str__(self) -> str:
        return self.to_edge_list_text()

    def __repr__(self) -> str:
        return f"Graph(num_nodes={self.num_nodes}, num_edges={self.num_edges})"
