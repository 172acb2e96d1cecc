"""
Generate a graph from one of the three models, print its edge list and
save its structural statistics.

Usage:
    python analysis.py ER n p
    python analysis.py WS n k p
    python analysis.py SF n y

Each distribution is written as "key value" lines:

    <out-dir>/degree.txt
    <out-dir>/clustering.txt
    <out-dir>/closeness.txt
"""

import argparse
import csv
import logging
import math
import os
from typing import Dict, List, Optional

from graph import Graph, CLOSENESS_METHODS, PRECISION
from models import MODELS, create_graph, usage


logger = logging.getLogger(__name__)

Distribution = Dict[float, float]


# ---------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------

def compute_distributions(graph: Graph, closeness_method: str = "bfs") -> Dict[str, Distribution]:
    """
    All three distributions for a graph, keyed by the file stem they are
    saved under.
    """
    return {
        "degree": graph.get_degree_distribution(),
        "clustering": graph.get_clustering_coefficient_distribution(),
        "closeness": graph.get_closeness_centrality_distribution(closeness_method),
    }


# ---------------------------------------------------------------------
# Export + plotting
# ---------------------------------------------------------------------

def format_key(key) -> str:
    if isinstance(key, int):
        return str(key)
    if math.isnan(key):
        return "nan"
    return f"{key:.{PRECISION}f}"


def save_distribution(path: str, distribution: Distribution) -> None:
    """Write one "key value" line per entry, in the distribution's order."""
    with open(path, "w", newline="") as f:
        writer = csv.writer(f, delimiter=" ", lineterminator="\n")
        for key, value in distribution.items():
            writer.writerow([format_key(key), repr(value)])


def save_stats(out_dir: str, distributions: Dict[str, Distribution]) -> List[str]:
    os.makedirs(out_dir, exist_ok=True)
    paths = []
    for name, dist in distributions.items():
        path = os.path.join(out_dir, f"{name}.txt")
        save_distribution(path, dist)
        print(f"Saved {name} distribution to {path}")
        paths.append(path)
    return paths


def plot_distribution(distribution: Distribution, title: str, xlabel: str, out_path: str) -> None:
    """
    Bar chart of a distribution. The undefined (NaN) bucket has no position
    on the axis and is reported in the title instead.
    """
    import matplotlib.pyplot as plt

    xs = [k for k in distribution if not (isinstance(k, float) and math.isnan(k))]
    ys = [distribution[k] for k in xs]
    nan_share = sum(v for k, v in distribution.items() if k not in xs)

    if nan_share > 0:
        title = f"{title} (undefined: {nan_share:.3f})"

    plt.figure(figsize=(6, 4))
    if len(xs) > 1:
        width = 0.8 * min(b - a for a, b in zip(xs, xs[1:]))
    else:
        width = 0.8
    plt.bar(xs, ys, width=width)
    plt.xlabel(xlabel)
    plt.ylabel("Fraction of nodes")
    plt.title(title)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()
    print(f"Saved plot: {out_path}")


def plot_stats(out_dir: str, distributions: Dict[str, Distribution], model: str) -> None:
    labels = {
        "degree": "Degree",
        "clustering": "Clustering coefficient",
        "closeness": "Closeness centrality",
    }
    os.makedirs(out_dir, exist_ok=True)
    for name, dist in distributions.items():
        plot_distribution(
            dist,
            f"{model}: {labels[name]} distribution",
            labels[name],
            os.path.join(out_dir, f"{name}.png"),
        )


# ---------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Random graph models and their structural statistics",
        epilog="Models:\n" + usage(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("model", choices=sorted(MODELS), help="Graph model to generate")
    parser.add_argument("n", type=int, help="Number of nodes")
    parser.add_argument("params", nargs="+", help="Model parameters (see Models below)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--out-dir", type=str, default="stats", help="Directory for the distribution files")
    parser.add_argument(
        "--closeness-method",
        choices=CLOSENESS_METHODS,
        default="bfs",
        help="Shortest-path strategy for closeness centrality",
    )
    parser.add_argument("--plot", action="store_true", help="Also save a PNG per distribution")
    parser.add_argument("--no-print", action="store_true", help="Do not print the edge list")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    # --- Generate graph ----------------------------------------------
    try:
        graph = create_graph(args.model, args.n, *args.params, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    logger.info("Generated %s graph: %d nodes, %d edges", args.model, len(graph), graph.num_edges)

    if not args.no_print:
        print(graph, end="")

    # --- Statistics ----------------------------------------------------
    distributions = compute_distributions(graph, args.closeness_method)
    save_stats(args.out_dir, distributions)

    if args.plot:
        plot_stats(args.out_dir, distributions, args.model)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
