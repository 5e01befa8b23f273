import math
from typing import Mapping, Optional, Tuple

from .config import (
    RATING_MAX,
    RATING_MIN,
    WEIGHT_MAX,
    WEIGHT_MIN,
    WEIGHT_SUM_TOLERANCE,
)


def safe_float(x, default: float = 0.0) -> float:
    try:
        value = float(x)
    except (TypeError, ValueError):
        return default
    if math.isnan(value):
        return default
    return value


def value_or_zero(values: Optional[Mapping[str, float]], key: str) -> float:
    """Read a rating or weight, treating a missing key as 0."""
    if not values:
        return 0.0
    return safe_float(values.get(key, 0.0))


def clamp(x, lo: float, hi: float) -> float:
    return max(lo, min(hi, safe_float(x)))


def clamp_rating(x) -> float:
    return clamp(x, RATING_MIN, RATING_MAX)


def clamp_weight(x) -> float:
    return clamp(x, WEIGHT_MIN, WEIGHT_MAX)


def weight_sum(weights: Mapping[str, float]) -> float:
    return sum(safe_float(w) for w in weights.values())


def is_weight_valid(weights: Mapping[str, float]) -> bool:
    """
    Advisory check that weights add up to 1.0.
    Scoring never depends on it.
    """
    # strip float noise so 0.24 + ... + 0.1 reads as exactly 0.99
    return abs(round(weight_sum(weights), 6) - 1.0) < WEIGHT_SUM_TOLERANCE


def parse_tags(text: Optional[str]) -> Tuple[str, ...]:
    if not text:
        return ()
    return tuple(t.strip() for t in text.split(",") if t.strip())
