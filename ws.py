"""
Watts–Strogatz small-world graph generator.

Output format:
    - Returns a graph.Graph over the nodes 1, 2, ..., n.
"""

import logging
import random
from typing import List, Optional, Tuple

from graph import Graph


logger = logging.getLogger(__name__)


def ring_distance(i: int, j: int, n: int) -> int:
    """Number of steps between i and j along the shorter side of an n-ring."""
    d = abs(i - j) % n
    return min(d, n - d)


def generate_watts_strogatz(
    n: int,
    k: int,
    p: float,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Graph:
    """
    Generate a Watts–Strogatz small-world network.

    Args:
        n: Number of nodes (>= 1), nodes will be 1..n.
        k: Mean degree. Each node is initially connected to k/2 neighbors
           on each side of the ring. Must be even and < n.
        p: Rewiring probability in [0, 1].
        seed: Optional random seed for reproducibility (ignored if rng is given).
        rng: Optional random source to draw from.

    Returns:
        graph: Graph holding the rewired ring lattice.
    """
    if k < 0 or k % 2 != 0:
        raise ValueError("k must be a non-negative even number")
    if not (0.0 <= p <= 1.0):
        raise ValueError("p must be between 0 and 1")
    if n <= 0:
        raise ValueError("n must be positive")
    if n <= k:
        raise ValueError("n must be greater than k")

    if rng is None:
        rng = random.Random(seed)

    graph = Graph(n)
    half_k = k // 2

    # 1. Ring lattice: each node connected to k/2 neighbors on each side
    for i in range(1, n + 1):
        for j in range(i + 1, n + 1):
            if 1 <= ring_distance(i, j, n) <= half_k:
                graph.add_undirected_edge(i, j)

    # 2. Rewire every lattice edge once, from its lower endpoint. The edge
    #    list is fixed before the pass starts.
    lattice_edges: List[Tuple[int, int]] = sorted(graph.edges())
    rewired = skipped = 0

    for i, j in lattice_edges:
        if rng.random() >= p:
            continue

        new_node = pick_rewire_target(graph, i, rng)
        if new_node is None:
            skipped += 1
            continue

        graph.remove_undirected_edge(i, j)
        graph.add_undirected_edge(i, new_node)
        rewired += 1

    logger.debug(
        "WS graph: n=%d k=%d p=%s rewired=%d skipped=%d",
        n, k, p, rewired, skipped,
    )
    return graph


def pick_rewire_target(graph: Graph, i: int, rng: random.Random) -> Optional[int]:
    """
    Pick a node != i that is not currently connected to i, uniformly at
    random. Returns None when i is already connected to everyone.
    """
    current = graph.nodes[i].neighbors
    candidates = [
        v for v in range(1, graph.num_nodes + 1)
        if v != i and v not in current
    ]
    if not candidates:
        logger.debug("No rewiring target left for node %d", i)
        return None
    return rng.choice(candidates)


if __name__ == "__main__":
    G = generate_watts_strogatz(20, 4, 0.3, seed=42)
    print("Generated WS graph with", len(G), "nodes and", G.num_edges, "edges.")
