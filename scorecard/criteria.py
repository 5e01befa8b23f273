from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Criterion:
    key: str
    label: str
    help: str
    weight: float  # default weight
    inverted: bool = False  # higher rating lowers the score


@dataclass(frozen=True)
class ThresholdSet:
    immediate: float  # min score (inclusive) for Quick Win
    strong: float  # min score (inclusive) for Strategic Bet

    @property
    def is_ordered(self) -> bool:
        return self.immediate > self.strong

    def to_dict(self) -> Dict[str, float]:
        return {"immediate": self.immediate, "strong": self.strong}


# GSAIF framework
CRITERIA: Tuple[Criterion, ...] = (
    Criterion(
        key="businessValue",
        label="Business Value",
        help="ROI potential, revenue impact, cost savings",
        weight=0.25,
    ),
    Criterion(
        key="strategicAlignment",
        label="Strategic Alignment",
        help="Fit with corporate objectives, competitive advantage",
        weight=0.20,
    ),
    Criterion(
        key="technicalFeasibility",
        label="Technical Feasibility",
        help="Data availability, complexity, technology readiness",
        weight=0.20,
    ),
    Criterion(
        key="implementationEffort",
        label="Implementation Effort",
        help="Time, cost, resources required",
        weight=0.15,
        inverted=True,
    ),
    Criterion(
        key="changeImpact",
        label="Change Impact",
        help="Organizational readiness, user adoption risk",
        weight=0.10,
    ),
    Criterion(
        key="ethicalRisk",
        label="Ethical Risk",
        help="Bias, privacy, regulatory compliance concerns",
        weight=0.10,
    ),
)

CRITERIA_BY_KEY: Dict[str, Criterion] = {c.key: c for c in CRITERIA}
CRITERION_KEYS: Tuple[str, ...] = tuple(c.key for c in CRITERIA)

EFFORT_KEY = "implementationEffort"
IMPACT_KEYS: Tuple[str, ...] = ("businessValue", "strategicAlignment")

DEFAULT_THRESHOLDS = ThresholdSet(immediate=7.5, strong=5.5)


def default_weights() -> Dict[str, float]:
    return {c.key: c.weight for c in CRITERIA}


def default_ratings() -> Dict[str, float]:
    return {
        "businessValue": 8.0,
        "strategicAlignment": 7.0,
        "technicalFeasibility": 6.0,
        "implementationEffort": 5.0,
        "changeImpact": 5.0,
        "ethicalRisk": 5.0,
    }


def zero_ratings() -> Dict[str, float]:
    return {key: 0.0 for key in CRITERION_KEYS}
