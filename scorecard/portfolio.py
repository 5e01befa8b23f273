import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .classifier import Classification, classify
from .config import DEFAULT_TITLE, ID_PREFIX
from .criteria import CRITERION_KEYS, ThresholdSet
from .logs import get_logger
from .positioning import to_impact_effort
from .scoring import compute_score
from .validation import clamp_rating, clamp_weight, parse_tags, value_or_zero

logger = get_logger(__name__)


def now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def new_id(prefix: str = ID_PREFIX) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


@dataclass(frozen=True)
class EvaluationRecord:
    id: str
    title: str
    owner: str
    tags: Tuple[str, ...]
    scores: Mapping[str, float]
    weights: Mapping[str, float]
    thresholds: ThresholdSet
    total: float
    label: Classification
    impact: float
    effort: float
    created_at: str

    def matches(self, query: str) -> bool:
        q = query.strip().lower()
        if not q:
            return True
        if q in self.title.lower() or q in self.owner.lower():
            return True
        return any(q in t.lower() for t in self.tags)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "owner": self.owner,
            "tags": list(self.tags),
            "scores": dict(self.scores),
            "weights": dict(self.weights),
            "thresholds": self.thresholds.to_dict(),
            "total": self.total,
            "label": self.label.to_dict(),
            "impact": self.impact,
            "effort": self.effort,
            "createdAt": self.created_at,
        }


def build_record(
    record_id: str,
    title: Optional[str],
    owner: Optional[str],
    tags_text: Optional[str],
    ratings: Mapping[str, float],
    weights: Mapping[str, float],
    thresholds: ThresholdSet,
    created_at: str,
) -> EvaluationRecord:
    """
    Snapshot the inputs and derive total, label and position from the copies,
    so later edits to the caller's mappings never reach the record.
    """
    scores = {k: clamp_rating(value_or_zero(ratings, k)) for k in CRITERION_KEYS}
    weights_copy = {k: clamp_weight(value_or_zero(weights, k)) for k in CRITERION_KEYS}
    total = compute_score(scores, weights_copy)
    impact, effort = to_impact_effort(scores)

    return EvaluationRecord(
        id=record_id,
        title=(title or "").strip() or DEFAULT_TITLE,
        owner=(owner or "").strip(),
        tags=parse_tags(tags_text),
        scores=MappingProxyType(scores),
        weights=MappingProxyType(weights_copy),
        thresholds=ThresholdSet(immediate=thresholds.immediate, strong=thresholds.strong),
        total=total,
        label=classify(total, thresholds),
        impact=impact,
        effort=effort,
        created_at=created_at,
    )


class Portfolio:
    """In-memory saved evaluations, most recent first. One per session."""

    def __init__(self) -> None:
        self._records: List[EvaluationRecord] = []
        self._issued_ids = set()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[EvaluationRecord]:
        return iter(tuple(self._records))

    @property
    def records(self) -> Tuple[EvaluationRecord, ...]:
        return tuple(self._records)

    def _next_id(self) -> str:
        record_id = new_id()
        while record_id in self._issued_ids:
            record_id = new_id()
        self._issued_ids.add(record_id)
        return record_id

    def save(
        self,
        title: Optional[str],
        owner: Optional[str],
        tags_text: Optional[str],
        ratings: Mapping[str, float],
        weights: Mapping[str, float],
        thresholds: ThresholdSet,
    ) -> EvaluationRecord:
        record = build_record(
            record_id=self._next_id(),
            title=title,
            owner=owner,
            tags_text=tags_text,
            ratings=ratings,
            weights=weights,
            thresholds=thresholds,
            created_at=now_iso(),
        )
        self._records.insert(0, record)
        logger.info(
            "Saved evaluation",
            extra={"extra_data": {"record_id": record.id, "total": record.total, "tier": record.label.tier.value}},
        )
        return record

    def remove(self, record_id: str) -> None:
        kept = [r for r in self._records if r.id != record_id]
        if len(kept) == len(self._records):
            logger.debug("Remove skipped, unknown id", extra={"extra_data": {"record_id": record_id}})
            return
        self._records = kept
        logger.info("Removed evaluation", extra={"extra_data": {"record_id": record_id}})

    def get(self, record_id: str) -> Optional[EvaluationRecord]:
        for r in self._records:
            if r.id == record_id:
                return r
        return None

    def filter(self, query: Optional[str]) -> List[EvaluationRecord]:
        """Case-insensitive substring match on title, owner or any tag."""
        q = (query or "").strip()
        if not q:
            return list(self._records)
        return [r for r in self._records if r.matches(q)]

    def clear(self) -> None:
        self._records = []
