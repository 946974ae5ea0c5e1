# trustnet/propagation/engines/modified_dijkstra.py
import heapq
import itertools
import math
from typing import Dict, List, NamedTuple, Tuple

from trustnet.propagation.base import ITrustPropagator
from trustnet.propagation.cost import edge_cost
from trustnet.core.registries import register, PROP_REG


class PriorityEntry(NamedTuple):
    cost: float
    seq: int        # push order; equal costs pop first-pushed-first
    actor: int
    hop_count: int


def trust_paths(graph, start: int) -> Dict[int, Tuple[float, int]]:
    """
    Best (cumulative cost, node count) per actor reachable from ``start``.

    Edge costs are 1 / (rating + 11). The node count includes start, so start
    itself is (0.0, 1). Stale heap entries are skipped on pop instead of being
    decreased in place; an equal-cost path found later never replaces the first one.
    """
    dist: Dict[int, Tuple[float, int]] = {start: (0.0, 1)}
    seq = itertools.count()
    heap: List[PriorityEntry] = [PriorityEntry(0.0, next(seq), start, 1)]

    while heap:
        cost, _, actor, hops = heapq.heappop(heap)
        if cost > dist[actor][0]:
            continue

        for edge in graph.edges_from(actor):
            next_cost = cost + edge_cost(edge.trust_score)
            best = dist.get(edge.target, (math.inf, 0))
            if best[0] > next_cost:
                dist[edge.target] = (next_cost, hops + 1)
                heapq.heappush(heap, PriorityEntry(next_cost, next(seq), edge.target, hops + 1))

    return dist


def modified_dijkstra(graph, start: int) -> Dict[int, float]:
    """Best path cost to every reachable actor divided by the path's node count."""
    return {actor: total / count for actor, (total, count) in trust_paths(graph, start).items()}


@register(PROP_REG, "modified_dijkstra")
class ModifiedDijkstra(ITrustPropagator):
    """Averaged lowest-cost trust propagation (see ``modified_dijkstra``)."""

    def run(self, graph, start: int) -> Dict[int, float]:
        return modified_dijkstra(graph, start)
