from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .criteria import ThresholdSet


class Tier(str, Enum):
    QUICK_WIN = "Quick Win"
    STRATEGIC_BET = "Strategic Bet"
    FILL_IN = "Fill-In"


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class Classification:
    tier: Tier
    priority: Priority

    def to_dict(self) -> Dict[str, str]:
        return {"tier": self.tier.value, "priority": self.priority.value}


def classify(score: float, thresholds: ThresholdSet) -> Classification:
    # First match wins. With strong >= immediate the Strategic Bet band is unreachable.
    if score >= thresholds.immediate:
        return Classification(Tier.QUICK_WIN, Priority.HIGH)
    if score >= thresholds.strong:
        return Classification(Tier.STRATEGIC_BET, Priority.MEDIUM)
    return Classification(Tier.FILL_IN, Priority.LOW)
