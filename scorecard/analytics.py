from collections import Counter
from typing import Dict, Iterable, List

import pandas as pd

from .portfolio import EvaluationRecord
from .positioning import ImpactEffort, quadrant

FRAME_COLUMNS = [
    "id",
    "title",
    "owner",
    "tags",
    "total",
    "tier",
    "priority",
    "impact",
    "effort",
    "quadrant",
    "created_at",
]


def record_quadrant(record: EvaluationRecord) -> str:
    return quadrant(ImpactEffort(record.impact, record.effort)).value


def compute_metrics(records: Iterable[EvaluationRecord]) -> Dict:
    rows = list(records)
    total = len(rows)
    if total == 0:
        return {
            "total": 0,
            "avg_score": None,
            "tiers": {},
            "priorities": {},
            "quadrants": {},
            "top_tags": [],
        }

    tier_counts = Counter([r.label.tier.value for r in rows])
    priority_counts = Counter([r.label.priority.value for r in rows])
    quadrant_counts = Counter([record_quadrant(r) for r in rows])

    # tags are counted case-insensitively
    tags = Counter()
    for r in rows:
        for t in r.tags:
            tags[t.lower()] += 1

    return {
        "total": total,
        "avg_score": round(sum(r.total for r in rows) / total, 2),
        "tiers": dict(tier_counts),
        "priorities": dict(priority_counts),
        "quadrants": dict(quadrant_counts),
        "top_tags": tags.most_common(10),
    }


def portfolio_frame(records: Iterable[EvaluationRecord]) -> pd.DataFrame:
    flat: List[Dict] = []
    for r in records:
        flat.append({
            "id": r.id,
            "title": r.title,
            "owner": r.owner,
            "tags": ", ".join(r.tags),
            "total": r.total,
            "tier": r.label.tier.value,
            "priority": r.label.priority.value,
            "impact": r.impact,
            "effort": r.effort,
            "quadrant": record_quadrant(r),
            "created_at": r.created_at,
        })
    return pd.DataFrame(flat, columns=FRAME_COLUMNS)
