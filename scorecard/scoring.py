# scorecard/scoring.py

import math
from typing import List, Mapping, Tuple

from .criteria import CRITERIA
from .validation import clamp_rating, value_or_zero


def round2(x: float) -> float:
    # inf and nan pass through unchanged
    if not math.isfinite(x):
        return x
    # half-up on the scaled value, so 0.125 -> 0.13
    return math.floor(x * 100 + 0.5) / 100


def criterion_contributions(
    ratings: Mapping[str, float], weights: Mapping[str, float]
) -> List[Tuple[str, float, float, float]]:
    """
    One row per criterion: (key, clamped rating, contribution, weighted).
    Inverted criteria contribute 10 - rating.
    """
    rows = []
    for c in CRITERIA:
        rating = clamp_rating(value_or_zero(ratings, c.key))
        contribution = 10.0 - rating if c.inverted else rating
        rows.append((c.key, rating, contribution, contribution * value_or_zero(weights, c.key)))
    return rows


def compute_score(ratings: Mapping[str, float], weights: Mapping[str, float]) -> float:
    total = 0.0
    for _, _, _, weighted in criterion_contributions(ratings, weights):
        total += weighted
    return round2(total)
