# trustnet/propagation/cost.py
"""
Rating <-> traversal-cost transform.

A rating r in [-10, 10] costs 1 / (r + 11), i.e. something in [1/21, 1].
Higher trust means cheaper edges, so shortest paths are the most trusted ones.
Ratings are not range-checked; a rating of -11 costs inf and never relaxes.
"""
import math

RATING_OFFSET = 11

def edge_cost(rating: int) -> float:
    denom = rating + RATING_OFFSET
    if denom == 0:
        return math.inf
    return 1.0 / denom

def to_rating_scale(score: float) -> float:
    """Map an averaged path score back onto the rating scale."""
    return (1.0 / score) - RATING_OFFSET
