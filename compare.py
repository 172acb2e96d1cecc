#!/usr/bin/env python3
"""
compare.py (NO CLI VERSION)

Automatically:
    - Generates 3 synthetic graphs (ER, WS, SF)
    - Computes degree / clustering / closeness distributions
    - Prints comparison
    - Saves distributions, a CSV summary and comparison plots

Run with:
    python compare.py
"""

import csv
import logging
import math
import os
from typing import Dict

import matplotlib.pyplot as plt
import networkx as nx

from graph import Graph
from erdos import generate_erdos_renyi
from ws import generate_watts_strogatz
from scale_free import generate_scale_free
from analysis import compute_distributions, save_distribution


# ------------------------------------------------------------------
# PARAMETERS — EDIT IF YOU WANT DIFFERENT SETTINGS
# ------------------------------------------------------------------

N = 300          # nodes
SEED = 42        # reproducibility

# ER
P_ER = 0.02

# WS
K_WS = 6
P_WS = 0.1

# SF
DISPARITY_SF = 3

CLOSENESS_METHOD = "bfs"

PLOT_PREFIX = "cmp_"   # all PNGs saved as cmp_xxx.png
PLOTS_DIR = "plots"
CSV_DIR = "csv"


# ------------------------------------------------------------------
# Compute metrics for a single graph
# ------------------------------------------------------------------

def compute_metrics(graph: Graph) -> dict:
    n = len(graph)
    e = graph.num_edges
    distributions = compute_distributions(graph, CLOSENESS_METHOD)

    clust = distributions["clustering"]
    undefined_clust = sum(v for k, v in clust.items() if math.isnan(k))
    avg_clust = sum(k * v for k, v in clust.items() if not math.isnan(k))
    avg_close = sum(k * v for k, v in distributions["closeness"].items())

    return {
        "nodes": n,
        "edges": e,
        "avg_degree": (2 * e) / max(n, 1),
        "max_degree": max(distributions["degree"]),
        "num_components": nx.number_connected_components(graph.to_networkx()),
        "avg_clustering": avg_clust,
        "undefined_clustering": undefined_clust,
        "avg_closeness": avg_close,
        "distributions": distributions,
    }


# ------------------------------------------------------------------
# Plot helper
# ------------------------------------------------------------------

def plot_distribution_overlay(results, dist_key, xlabel, out_path, log_scale=False):
    plt.figure(figsize=(6, 4))
    for name, m in results:
        dist = m["distributions"][dist_key]
        xs = [k for k in dist if not math.isnan(k)]
        ys = [dist[k] for k in xs]
        plt.plot(xs, ys, marker="o", markersize=3, linestyle="-", label=name)

    if log_scale:
        plt.xscale("log")
        plt.yscale("log")
    plt.xlabel(xlabel)
    plt.ylabel("Fraction of nodes")
    plt.title(f"{dist_key} distribution comparison")
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()
    print(f"Saved plot: {out_path}")


# ------------------------------------------------------------------
# Main
# ------------------------------------------------------------------

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    # --- Generate graphs -------------------------------------------------

    print("Generating graphs...")

    graphs: Dict[str, Graph] = {
        "ER": generate_erdos_renyi(N, P_ER, seed=SEED),
        "WS": generate_watts_strogatz(N, K_WS, P_WS, seed=SEED),
        "SF": generate_scale_free(N, DISPARITY_SF, seed=SEED),
    }

    # --- Compute metrics -------------------------------------------------

    results = []
    print("\n=== Graph Comparison ===")

    for name, graph in graphs.items():
        print(f"\n--- {name} ---")
        metrics = compute_metrics(graph)
        results.append((name, metrics))
        for k, v in metrics.items():
            if k != "distributions":
                print(f"  {k}: {v}")

    # --- Save distributions + summary -----------------------------------

    os.makedirs(PLOTS_DIR, exist_ok=True)
    os.makedirs(CSV_DIR, exist_ok=True)

    summary_cols = [
        "nodes", "edges", "avg_degree", "max_degree", "num_components",
        "avg_clustering", "undefined_clustering", "avg_closeness",
    ]
    with open(f"{CSV_DIR}/{PLOT_PREFIX}summary_metrics.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["model"] + summary_cols)
        for name, m in results:
            writer.writerow([name] + [m[c] for c in summary_cols])

    for name, m in results:
        for dist_key, dist in m["distributions"].items():
            save_distribution(f"{CSV_DIR}/{PLOT_PREFIX}{name}_{dist_key}.txt", dist)

    # --- Make plots automatically ---------------------------------------

    print("\nGenerating plots...")

    plot_distribution_overlay(results, "degree", "Degree",
                              f"{PLOTS_DIR}/{PLOT_PREFIX}degree.png")

    plot_distribution_overlay(results, "degree", "Degree (log-log)",
                              f"{PLOTS_DIR}/{PLOT_PREFIX}degree_loglog.png", log_scale=True)

    plot_distribution_overlay(results, "clustering", "Clustering coefficient",
                              f"{PLOTS_DIR}/{PLOT_PREFIX}clustering.png")

    plot_distribution_overlay(results, "closeness", "Closeness centrality",
                              f"{PLOTS_DIR}/{PLOT_PREFIX}closeness.png")


if __name__ == "__main__":
    main()
