import os
from typing import Sequence

import numpy as np
import matplotlib
matplotlib.use("Agg")  # headless backend
import matplotlib.pyplot as plt

from trustnet.core.io import ensure_dir

RANGE_START, RANGE_END = -10, 10
BIN_SIZE = 1.0
UPPER_LIMIT_Y = 1000
STDDEV_Y_RANGE = (0.0, 15.0)

AVG_HISTOGRAM = "avg_histogram.png"
STDDEV_SCATTER = "stddev_scatterplot.png"


def bin_counts(scores: Sequence[float]) -> np.ndarray:
    """Counts per unit bin over [RANGE_START, RANGE_END); out-of-range values are dropped."""
    v = np.asarray(scores, dtype=np.float64)
    # np.histogram closes the last bin; RANGE_END itself stays out
    v = v[~np.isnan(v) & (v < RANGE_END)]
    counts, _ = np.histogram(v, bins=np.arange(RANGE_START, RANGE_END + BIN_SIZE, BIN_SIZE))
    return counts


def create_histogram_avg(scores: Sequence[float], out_path: str) -> str:
    counts = bin_counts(scores)
    lefts = RANGE_START + np.arange(len(counts)) * BIN_SIZE
    plt.figure(figsize=(10.24, 7.68))
    plt.bar(lefts, counts, width=BIN_SIZE, align="edge", color="red", alpha=0.5)
    plt.xlim(RANGE_START, RANGE_END)
    plt.ylim(0, max(UPPER_LIMIT_Y, int(counts.max()) if len(counts) else 0))
    plt.xticks(range(RANGE_START, RANGE_END + 1))
    plt.xlabel("Average Trust Score"); plt.ylabel("Count")
    plt.title("Histogram of Average Trust Scores")
    plt.tight_layout(); plt.savefig(out_path); plt.close()
    return out_path


def create_scatter_plot_stddev(std_devs: Sequence[float], out_path: str) -> str:
    xs = np.arange(len(std_devs))
    plt.figure(figsize=(10.24, 7.68))
    plt.scatter(xs, std_devs, s=9, color="red")
    plt.ylim(*STDDEV_Y_RANGE)
    plt.xlabel("Node Label"); plt.ylabel("Standard Deviation")
    plt.title("Scatter Plot of Standard Deviations")
    plt.tight_layout(); plt.savefig(out_path); plt.close()
    return out_path


def render_charts(averages: Sequence[float], std_devs: Sequence[float], out_dir: str):
    ensure_dir(out_dir)
    hist = create_histogram_avg(averages, os.path.join(out_dir, AVG_HISTOGRAM))
    scat = create_scatter_plot_stddev(std_devs, os.path.join(out_dir, STDDEV_SCATTER))
    return hist, scat
