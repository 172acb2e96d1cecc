# erdos.py
"""
Erdős–Rényi G(n, p) random graph generator.

Output format (uniform across all generators):
    - Returns a graph.Graph over the nodes 1, 2, ..., n.
"""

import logging
import random
from typing import Optional

from graph import Graph


logger = logging.getLogger(__name__)


def generate_erdos_renyi(
    n: int,
    p: float,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Graph:
    """
    Generate an undirected Erdős–Rényi G(n, p) graph.

    Args:
        n: Number of nodes (>= 1), nodes will be 1..n.
        p: Edge probability in [0, 1].
        seed: Optional random seed for reproducibility (ignored if rng is given).
        rng: Optional random source to draw from.

    Returns:
        graph: Graph with every pair i < j connected independently with
               probability p.
    """
    if not (0.0 <= p <= 1.0):
        raise ValueError("p must be between 0 and 1")

    if n <= 0:
        raise ValueError("n must be positive")

    if rng is None:
        rng = random.Random(seed)

    graph = Graph(n)

    for i in range(1, n + 1):
        for j in range(i + 1, n + 1):
            if rng.random() < p:
                graph.add_undirected_edge(i, j)

    logger.debug("ER graph: n=%d p=%s edges=%d", n, p, graph.num_edges)
    return graph


if __name__ == "__main__":
    # Tiny smoke test (not analysis: just sanity-check)
    G = generate_erdos_renyi(10, 0.3, seed=42)
    print("Generated ER graph with", len(G), "nodes and", G.num_edges, "edges.")
