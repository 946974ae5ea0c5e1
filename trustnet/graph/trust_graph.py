# trustnet/graph/trust_graph.py
from typing import Dict, Iterator, List, Sequence, Tuple

import networkx as nx

from trustnet.datasource.schema import Edge, RatingRecord
from trustnet.propagation.cost import edge_cost

GENERATIONS = (1, 2, 3)


class TrustGraph:
    """
    Directed multigraph of trust ratings keyed by source actor.

    Only actors that rated someone own an adjacency entry; actors that were
    only ever rated are still valid traversal targets. Parallel edges are kept
    in insertion order.
    """
    def __init__(self):
        self.nodes: Dict[int, List[Edge]] = {}

    def add_edge(self, source: int, target: int, trust_score: int) -> None:
        self.nodes.setdefault(source, []).append(Edge(target, trust_score))

    def edges_from(self, actor: int) -> Sequence[Edge]:
        return self.nodes.get(actor, ())

    def sources(self) -> List[int]:
        """Source actors in first-seen order; the shared column order of the score matrix."""
        return list(self.nodes.keys())

    @property
    def edge_count(self) -> int:
        return sum(len(v) for v in self.nodes.values())

    def actors(self) -> List[int]:
        seen = dict.fromkeys(self.nodes)
        for edges in self.nodes.values():
            for e in edges:
                seen.setdefault(e.target)
        return list(seen)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, actor) -> bool:
        return actor in self.nodes

    def __iter__(self) -> Iterator[int]:
        return iter(self.nodes)

    def to_networkx(self, weight: str = "cost") -> nx.MultiDiGraph:
        """
        Export as a networkx MultiDiGraph. Each edge carries ``trust_score`` and
        its traversal cost under ``weight``.
        """
        G = nx.MultiDiGraph()
        G.add_nodes_from(self.actors())
        for src, edges in self.nodes.items():
            for e in edges:
                G.add_edge(src, e.target, trust_score=e.trust_score, **{weight: edge_cost(e.trust_score)})
        return G


def generation_cutoff(n: int, generation: int) -> int:
    """Number of leading records included in ``generation`` out of ``n``."""
    if generation not in GENERATIONS:
        raise ValueError(f"generation must be one of {GENERATIONS}, got {generation!r}")
    if generation == 1:
        end = n // 3
    elif generation == 2:
        end = (n * 2) // 3
    else:
        end = n
    return max(0, min(end, n))


def build_graph(records: Sequence[RatingRecord], generation: int = 3) -> Tuple[TrustGraph, int]:
    """
    Build the graph of one generation from chronologically ordered records.

    Returns the graph and the ``time`` of the last included record (0 when
    the prefix is empty).
    """
    end = generation_cutoff(len(records), generation)
    prefix = records[:end]

    graph = TrustGraph()
    for r in prefix:
        graph.add_edge(r.source, r.target, r.rating)

    last_time = prefix[-1].time if len(prefix) else 0
    return graph, last_time


def graph_summary(graph: TrustGraph) -> Dict[str, int]:
    G = graph.to_networkx()
    return {
        "actors": G.number_of_nodes(),
        "sources": len(graph),
        "edges": G.number_of_edges(),
        "weak_components": nx.number_weakly_connected_components(G) if G.number_of_nodes() else 0,
    }
