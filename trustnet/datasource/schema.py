from dataclasses import dataclass

# columns of the Bitcoin-OTC edge list, in file order
RECORD_FIELDS = ["source", "target", "rating", "time"]

@dataclass(frozen=True)
class RatingRecord:
    source: int
    target: int
    rating: int   # semantically in [-10, 10]
    time: int     # seconds since epoch

@dataclass(frozen=True)
class Edge:
    target: int
    trust_score: int
