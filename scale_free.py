"""
Scale-free graph generator (preferential attachment, roulette-wheel selection).

Output format:
    - Returns a graph.Graph over the nodes 1, 2, ..., n.

Nodes arrive one at a time. Node i attaches to min(disparity, i - 1)
distinct earlier nodes, each picked with probability proportional to its
current degree ("rich get richer").
"""

import logging
import random
from bisect import bisect_right
from itertools import accumulate
from typing import List, Optional

from graph import Graph


logger = logging.getLogger(__name__)


def roulette_select(
    candidates: List[int],
    weights: List[float],
    rng: random.Random,
) -> Optional[int]:
    """
    Cumulative-distribution search: draw u in [0, 1) scaled to the total
    weight, walk the running sum and return the first candidate whose
    cumulative weight exceeds the draw.

    Returns None if there is nothing with positive weight to pick.
    """
    if not candidates:
        return None

    cumulative = list(accumulate(weights))
    total = cumulative[-1]
    if total <= 0:
        return None

    draw = rng.random() * total
    idx = bisect_right(cumulative, draw)
    # float round-off can leave draw == total
    return candidates[min(idx, len(candidates) - 1)]


def generate_scale_free(
    n: int,
    disparity: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Graph:
    """
    Generate a scale-free network by preferential attachment.

    Args:
        n: Total number of nodes (>= 1), nodes will be 1..n.
        disparity: Number of edges each new node creates (>= 0).
        seed: Optional random seed for reproducibility (ignored if rng is given).
        rng: Optional random source to draw from.

    Returns:
        graph: Graph where node i (i >= 3) has exactly min(disparity, i - 1)
               edges to earlier nodes, and nodes 1, 2 start connected.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    if isinstance(disparity, bool) or not isinstance(disparity, int):
        raise ValueError("disparity must be an integer")
    if disparity < 0:
        raise ValueError("disparity must be non-negative")

    if rng is None:
        rng = random.Random(seed)

    graph = Graph(n)
    if n < 2:
        return graph

    # 1. Seed edge
    graph.add_undirected_edge(1, 2)
    total_edges = 1

    # 2. Each new node attaches to earlier nodes with probability
    #    degree(v) / (2 * total_edges). Nodes already linked to i are
    #    dropped from the wheel, which is the same as redrawing until a
    #    new edge comes up.
    for i in range(3, n + 1):
        slots = min(disparity, i - 1)
        for _ in range(slots):
            linked = graph.nodes[i].neighbors
            candidates = [v for v in range(1, i) if v not in linked]
            weights = [
                graph.nodes[v].degree / (2.0 * total_edges) for v in candidates
            ]

            # every earlier node has degree >= 1 here, so the wheel is never empty
            target = roulette_select(candidates, weights, rng)

            graph.add_undirected_edge(i, target)
            total_edges += 1

    logger.debug(
        "SF graph: n=%d disparity=%d edges=%d", n, disparity, total_edges
    )
    return graph


if __name__ == "__main__":
    G = generate_scale_free(20, 2, seed=42)
    print("Generated SF graph with", len(G), "nodes and", G.num_edges, "edges.")
