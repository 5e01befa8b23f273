from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from .classifier import Classification, classify
from .config import DEFAULT_TITLE
from .criteria import (
    CRITERIA_BY_KEY,
    DEFAULT_THRESHOLDS,
    ThresholdSet,
    default_ratings,
    default_weights,
    zero_ratings,
)
from .portfolio import EvaluationRecord, Portfolio
from .positioning import ImpactEffort, to_impact_effort
from .scoring import compute_score
from .validation import clamp_rating, clamp_weight, is_weight_valid, safe_float, weight_sum


@dataclass
class EditingSession:
    """
    The live form: what the user is currently editing.
    Values are clamped on the way in; derived outputs are recomputed on read.
    """

    title: str = DEFAULT_TITLE
    owner: str = ""
    tags_text: str = ""
    ratings: Dict[str, float] = field(default_factory=default_ratings)
    weights: Dict[str, float] = field(default_factory=default_weights)
    thresholds: ThresholdSet = DEFAULT_THRESHOLDS

    def set_rating(self, key: str, value) -> float:
        if key not in CRITERIA_BY_KEY:
            return 0.0
        self.ratings[key] = clamp_rating(value)
        return self.ratings[key]

    def set_weight(self, key: str, value) -> float:
        if key not in CRITERIA_BY_KEY:
            return 0.0
        self.weights[key] = clamp_weight(value)
        return self.weights[key]

    def set_thresholds(self, immediate: Optional[float] = None, strong: Optional[float] = None) -> ThresholdSet:
        changes = {}
        if immediate is not None:
            changes["immediate"] = safe_float(immediate)
        if strong is not None:
            changes["strong"] = safe_float(strong)
        self.thresholds = replace(self.thresholds, **changes)
        return self.thresholds

    def reset(self) -> None:
        # weights and thresholds are configuration, not form input
        self.title = DEFAULT_TITLE
        self.owner = ""
        self.tags_text = ""
        self.ratings = zero_ratings()

    @property
    def total(self) -> float:
        return compute_score(self.ratings, self.weights)

    @property
    def label(self) -> Classification:
        return classify(self.total, self.thresholds)

    @property
    def position(self) -> ImpactEffort:
        return to_impact_effort(self.ratings)

    @property
    def weight_sum(self) -> float:
        return weight_sum(self.weights)

    @property
    def is_weight_valid(self) -> bool:
        return is_weight_valid(self.weights)

    def save_to(self, portfolio: Portfolio) -> EvaluationRecord:
        return portfolio.save(
            title=self.title,
            owner=self.owner,
            tags_text=self.tags_text,
            ratings=self.ratings,
            weights=self.weights,
            thresholds=self.thresholds,
        )
