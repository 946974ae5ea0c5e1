"""
Statistical summary of a trust-score matrix.

Each matrix row is mapped back onto the [-10, 10] rating scale, then judged by
its mean and spread: rows with a low mean or a wide spread are "untrusted",
the rest are "trusted" (high and stable).
"""
from __future__ import annotations

import math
from dataclasses import dataclass, asdict, field
from datetime import datetime, timezone
from typing import Dict, List, Sequence

import numpy as np

from trustnet.core.io import read_csv_rows
from trustnet.core.utils import to_float
from trustnet.propagation.cost import to_rating_scale

TIME_FORMAT = "%d/%m/%Y %H:%M:%S GMT"
# first rating of the Bitcoin-OTC dataset
DATASET_START = "11/8/2010 18:45:12"


@dataclass
class AnalysisReport:
    total_nodes: int
    mean_of_averages: float
    mean_of_std_devs: float
    untrusted_count: int
    untrusted_average: float
    trusted_count: int
    trusted_average: float
    averages: List[float] = field(default_factory=list)
    std_devs: List[float] = field(default_factory=list)

    def to_dict(self, with_series: bool = False) -> Dict:
        d = asdict(self)
        if not with_series:
            d.pop("averages")
            d.pop("std_devs")
        # empty groups average to NaN, which JSON cannot carry
        return {k: (None if isinstance(v, float) and math.isnan(v) else v) for k, v in d.items()}


def read_and_process(path: str) -> List[List[float]]:
    """
    Load a score matrix and convert every finite, non-zero score back to the
    rating scale. The start column is skipped, and rows with nothing left are dropped.
    """
    _, rows = read_csv_rows(path)
    processed = []
    for row in rows:
        scores = []
        for cell in row[1:]:
            s = to_float(cell)
            if s is None or math.isinf(s) or s == 0.0:
                continue
            scores.append(to_rating_scale(s))
        if scores:
            processed.append(scores)
    return processed


def calculate_average(scores: Sequence[float]) -> float:
    if len(scores) == 0:
        return float("nan")
    return float(np.mean(scores))


def calculate_std_dev(scores: Sequence[float], mean: float) -> float:
    """Population standard deviation around a precomputed mean."""
    if len(scores) == 0:
        return float("nan")
    v = np.asarray(scores, dtype=np.float64)
    return float(np.sqrt(np.mean((v - mean) ** 2)))


def perform_analysis(processed: Sequence[Sequence[float]], avg_threshold: float = 6.0,
                     stddev_threshold: float = 2.2) -> AnalysisReport:
    averages, std_devs = [], []
    untrusted, trusted = [], []

    for scores in processed:
        average = calculate_average(scores)
        std_dev = calculate_std_dev(scores, average)
        averages.append(average)
        std_devs.append(std_dev)

        if average < avg_threshold or std_dev > stddev_threshold:
            untrusted.append(average)
        if average >= avg_threshold and std_dev <= stddev_threshold:
            trusted.append(average)

    return AnalysisReport(
        total_nodes=len(processed),
        mean_of_averages=calculate_average(averages),
        mean_of_std_devs=calculate_average(std_devs),
        untrusted_count=len(untrusted),
        untrusted_average=calculate_average(untrusted),
        trusted_count=len(trusted),
        trusted_average=calculate_average(trusted),
        averages=averages,
        std_devs=std_devs,
    )


def format_epoch_gmt(epoch: int) -> str:
    return datetime.fromtimestamp(epoch, tz=timezone.utc).strftime(TIME_FORMAT)


def format_report(report: AnalysisReport) -> str:
    lines = [
        f"Total nodes: {report.total_nodes}",
        f"Mean score of all the nodes: {report.mean_of_averages:.4f}",
        f"Mean standard deviations of all the nodes: {report.mean_of_std_devs:.4f}",
        f"Total untrusted nodes: {report.untrusted_count}",
        f"    - Average score of these nodes: {report.untrusted_average:.4f}",
        f"Total trusted nodes: {report.trusted_count}",
        f"    - Average score of these nodes: {report.trusted_average:.4f}",
    ]
    return "\n".join(lines)
