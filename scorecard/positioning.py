from enum import Enum
from typing import Mapping, NamedTuple

from .config import QUADRANT_SPLIT
from .criteria import EFFORT_KEY, IMPACT_KEYS
from .scoring import round2
from .validation import value_or_zero


class ImpactEffort(NamedTuple):
    impact: float
    effort: float


class Quadrant(str, Enum):
    QUICK_WINS = "Quick Wins"
    STRATEGIC_BETS = "Strategic Bets"
    FILL_INS = "Fill-Ins"
    AVOID = "Avoid"


def to_impact_effort(ratings: Mapping[str, float]) -> ImpactEffort:
    """
    Impact is the mean of business value and strategic alignment.
    Effort is the raw implementation effort rating, not inverted.
    """
    impact = sum(value_or_zero(ratings, k) for k in IMPACT_KEYS) / len(IMPACT_KEYS)
    effort = value_or_zero(ratings, EFFORT_KEY)
    return ImpactEffort(impact=round2(impact), effort=round2(effort))


def quadrant(point: ImpactEffort) -> Quadrant:
    high_impact = point.impact >= QUADRANT_SPLIT
    high_effort = point.effort >= QUADRANT_SPLIT
    if high_impact:
        return Quadrant.STRATEGIC_BETS if high_effort else Quadrant.QUICK_WINS
    return Quadrant.AVOID if high_effort else Quadrant.FILL_INS
