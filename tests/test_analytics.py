"""Tests for scorecard/analytics.py"""

import pytest

from scorecard.analytics import FRAME_COLUMNS, compute_metrics, portfolio_frame
from scorecard.criteria import DEFAULT_THRESHOLDS, default_weights
from scorecard.portfolio import Portfolio


def _ratings(value, alignment, effort, rest=5):
    return {
        "businessValue": value,
        "strategicAlignment": alignment,
        "technicalFeasibility": rest,
        "implementationEffort": effort,
        "changeImpact": rest,
        "ethicalRisk": rest,
    }


def _portfolio():
    portfolio = Portfolio()
    # quick win: 9*0.25 + 9*0.2 + 9*0.2 + 9*0.15 + 9*0.1 + 9*0.1 = 9.0
    portfolio.save("Invoice OCR", "Finance", "vision, Automation", _ratings(9, 9, 1, rest=9), default_weights(), DEFAULT_THRESHOLDS)
    # strategic bet: 6.55
    portfolio.save("Support Chatbot", "CX", "NLP, automation", _ratings(8, 7, 5, rest=6), default_weights(), DEFAULT_THRESHOLDS)
    # fill-in: low everything, high effort
    portfolio.save("Blockchain Ledger", "", "", _ratings(1, 1, 9, rest=1), default_weights(), DEFAULT_THRESHOLDS)
    return portfolio


def test_metrics_empty():
    """No records gives zero counts and no average."""
    metrics = compute_metrics([])
    assert metrics["total"] == 0
    assert metrics["avg_score"] is None
    assert metrics["tiers"] == {}
    assert metrics["top_tags"] == []


def test_metrics_counts():
    """Tiers, priorities and quadrants are counted per record."""
    metrics = compute_metrics(_portfolio())
    assert metrics["total"] == 3
    assert metrics["tiers"] == {"Fill-In": 1, "Strategic Bet": 1, "Quick Win": 1}
    assert metrics["priorities"] == {"Low": 1, "Medium": 1, "High": 1}
    assert metrics["quadrants"] == {"Avoid": 1, "Strategic Bets": 1, "Quick Wins": 1}


def test_metrics_average_score():
    """Average of the saved totals, 2dp."""
    records = _portfolio().records
    expected = round(sum(r.total for r in records) / 3, 2)
    assert compute_metrics(records)["avg_score"] == pytest.approx(expected)


def test_metrics_tags_case_insensitive():
    """'Automation' and 'automation' count as one tag."""
    top = dict(compute_metrics(_portfolio())["top_tags"])
    assert top["automation"] == 2
    assert top["nlp"] == 1


def test_portfolio_frame_rows_in_store_order():
    """One row per record, newest first."""
    df = portfolio_frame(_portfolio())
    assert list(df.columns) == FRAME_COLUMNS
    assert list(df["title"]) == ["Blockchain Ledger", "Support Chatbot", "Invoice OCR"]
    assert df.loc[2, "tags"] == "vision, Automation"
    assert df.loc[2, "tier"] == "Quick Win"
    assert df.loc[2, "quadrant"] == "Quick Wins"


def test_portfolio_frame_empty():
    """Empty input keeps the column layout."""
    df = portfolio_frame([])
    assert df.empty
    assert list(df.columns) == FRAME_COLUMNS
