import csv
import math
import os
import tempfile
import unittest

from trustnet.export.score_matrix import (
    START_COL, export_scores, get_propagator, propagate_all, score_matrix_rows,
)
from trustnet.graph.trust_graph import TrustGraph
from trustnet.propagation.engines.modified_dijkstra import modified_dijkstra


def create_test_graph():
    graph = TrustGraph()
    graph.add_edge(0, 1, 5)
    graph.add_edge(0, 2, 10)
    graph.add_edge(1, 2, 2)
    graph.add_edge(2, 0, 1)
    graph.add_edge(3, 0, -2)
    return graph


class TestPropagateAll(unittest.TestCase):

    def test_sequential_covers_every_source(self):
        graph = create_test_graph()
        out = list(propagate_all(graph, progress=False))
        self.assertEqual([s for s, _ in out], graph.sources())
        for s, scores in out:
            self.assertEqual(scores, modified_dijkstra(graph, s))

    def test_parallel_matches_sequential(self):
        graph = create_test_graph()
        seq = list(propagate_all(graph, n_jobs=1, progress=False))
        par = list(propagate_all(graph, n_jobs=2, progress=False))
        self.assertEqual(seq, par)

    def test_explicit_starts(self):
        graph = create_test_graph()
        out = dict(propagate_all(graph, starts=[2, 99], progress=False))
        self.assertEqual(out[99], {99: 0.0})

    def test_unknown_propagator(self):
        with self.assertRaises(KeyError):
            get_propagator("no_such_algo")


class TestScoreMatrix(unittest.TestCase):

    def test_rows_substitute_inf(self):
        rows = list(score_matrix_rows([0, 1, 3], [(1, {1: 0.0, 2: 0.1})]))
        self.assertEqual(rows, [{START_COL: 1, "0": "inf", "1": "0.0", "3": "inf"}])

    def test_export_scores(self):
        graph = create_test_graph()
        with tempfile.TemporaryDirectory() as d:
            out = os.path.join(d, "res", "trust_scores.csv")
            n = export_scores(graph, out, progress=False)
            self.assertEqual(n, 4)
            with open(out, newline="") as f:
                rows = list(csv.reader(f))

        self.assertEqual(rows[0], ["start", "0", "1", "2", "3"])
        self.assertEqual(len(rows), 5)
        by_start = {r[0]: [float(v) for v in r[1:]] for r in rows[1:]}
        self.assertEqual(by_start["0"][0], 0.0)
        self.assertAlmostEqual(by_start["0"][1], 0.03125)
        self.assertAlmostEqual(by_start["0"][2], 1 / 42)
        # nobody rates actor 3
        self.assertTrue(math.isinf(by_start["0"][3]))
        self.assertEqual(by_start["3"][3], 0.0)

    def test_export_empty_graph(self):
        with tempfile.TemporaryDirectory() as d:
            out = os.path.join(d, "trust_scores.csv")
            self.assertEqual(export_scores(TrustGraph(), out, progress=False), 0)
            with open(out, newline="") as f:
                self.assertEqual(list(csv.reader(f)), [["start"]])


if __name__ == '__main__':
    unittest.main()
