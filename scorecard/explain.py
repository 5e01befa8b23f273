from typing import Dict, List, Mapping, Tuple

from .criteria import CRITERIA_BY_KEY
from .scoring import criterion_contributions, round2


def explain_score(ratings: Mapping[str, float], weights: Mapping[str, float], top: int = 2) -> Dict[str, object]:
    """
    Returns:
    - lowest_criteria / highest_criteria by clamped rating
    - top_positive_contributors / top_negative_contributors by weighted contribution
      (implementation effort counts with its inverted contribution)
    """
    items: List[Tuple[str, float, float]] = []  # (key, rating, weighted)
    for key, rating, _, weighted in criterion_contributions(ratings, weights):
        items.append((key, rating, weighted))

    sorted_by_rating = sorted(items, key=lambda x: x[1])
    lowest = sorted_by_rating[:top]
    highest = list(reversed(sorted_by_rating))[:top]

    sorted_by_weighted = sorted(items, key=lambda x: x[2])
    negative = sorted_by_weighted[:top]
    positive = list(reversed(sorted_by_weighted))[:top]

    def _label(key: str) -> str:
        return CRITERIA_BY_KEY[key].label

    return {
        "lowest_criteria": [{"criterion": k, "label": _label(k), "rating": r} for k, r, _ in lowest],
        "highest_criteria": [{"criterion": k, "label": _label(k), "rating": r} for k, r, _ in highest],
        "top_positive_contributors": [{"criterion": k, "label": _label(k), "weighted": round2(w)} for k, _, w in positive],
        "top_negative_contributors": [{"criterion": k, "label": _label(k), "weighted": round2(w)} for k, _, w in negative],
    }
