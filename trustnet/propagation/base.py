# trustnet/propagation/base.py
from abc import ABC, abstractmethod
from typing import Dict

class ITrustPropagator(ABC):
    @abstractmethod
    def run(self, graph, start: int) -> Dict[int, float]:
        """
        Input: a TrustGraph and a start actor.
        Output: {actor: averaged trust score} for every actor reachable from start,
                start itself included with 0.0. Unreachable actors are absent.
        """
        ...
