# -*- coding: utf-8 -*-
"""
Dense trust-score matrix: one row per start actor, one column per source actor.

Usage example (through the CLI):
    python -m trustnet.runners.run_trust build \
        --records_csv data/soc-sign-bitcoinotc.csv \
        --out_csv results/trust_scores.csv --generation 3 --n_jobs 4
"""
from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from joblib import Parallel, delayed
from tqdm import tqdm

import trustnet.propagation.engines  # noqa: F401  (fills PROP_REG)
from trustnet.core.io import write_csv, format_score
from trustnet.core.registries import PROP_REG
from trustnet.graph.trust_graph import TrustGraph
from trustnet.propagation.base import ITrustPropagator

log = logging.getLogger(__name__)

START_COL = "start"
UNREACHABLE = math.inf


def get_propagator(name: str = "modified_dijkstra") -> ITrustPropagator:
    if name not in PROP_REG:
        raise KeyError(f"unknown propagator {name!r}; available: {sorted(PROP_REG)}")
    return PROP_REG[name]()


def propagate_all(graph: TrustGraph, propagator: Optional[ITrustPropagator] = None,
                  n_jobs: int = 1, starts: Optional[List[int]] = None,
                  progress: bool = True) -> Iterator[Tuple[int, Dict[int, float]]]:
    """
    Yield ``(start, scores)`` for every start actor, in ``starts`` order
    (default: the graph's source actors).

    Runs are independent and only read the graph, so n_jobs != 1 fans them
    out over joblib threads.
    """
    prop = propagator or get_propagator()
    starts = graph.sources() if starts is None else list(starts)

    if n_jobs == 1:
        for s in tqdm(starts, desc="Propagate", unit="actor", disable=not progress):
            yield s, prop.run(graph, s)
        return

    log.info("running joblib with n_jobs=%s over %d start actors", n_jobs, len(starts))
    results = Parallel(n_jobs=n_jobs, prefer="threads")(
        delayed(prop.run)(graph, s) for s in starts
    )
    for s, scores in zip(starts, results):
        yield s, scores


def score_matrix_rows(columns: List[int], results: Iterable[Tuple[int, Dict[int, float]]]) -> Iterator[Dict]:
    """Render one dense row per start actor; missing entries become inf."""
    for start, scores in results:
        row = {START_COL: start}
        for c in columns:
            row[str(c)] = format_score(scores.get(c, UNREACHABLE))
        yield row


def export_scores(graph: TrustGraph, out_csv: str, algo: str = "modified_dijkstra",
                  n_jobs: int = 1, progress: bool = True) -> int:
    """Propagate from every source actor and write the matrix to ``out_csv``; returns the row count."""
    columns = graph.sources()
    results = propagate_all(graph, get_propagator(algo), n_jobs=n_jobs, progress=progress)
    fieldnames = [START_COL] + [str(c) for c in columns]
    n = write_csv(out_csv, score_matrix_rows(columns, results), fieldnames)
    log.info("wrote %d x %d score matrix to %s", n, len(columns), out_csv)
    return n
