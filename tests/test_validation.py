"""Tests for scorecard/validation.py"""

import pytest

from scorecard.criteria import default_weights
from scorecard.validation import (
    clamp_rating,
    clamp_weight,
    is_weight_valid,
    parse_tags,
    safe_float,
    value_or_zero,
    weight_sum,
)


def _weights_summing_to(total):
    """Default weights with businessValue adjusted so the sum hits `total`."""
    weights = default_weights()
    weights["businessValue"] = round(0.25 + (total - 1.0), 6)
    return weights


# --- clamping ---


@pytest.mark.parametrize("raw, expected", [(-1, 0.0), (0, 0.0), (5.5, 5.5), (10, 10.0), (42, 10.0)])
def test_clamp_rating(raw, expected):
    """Ratings are clamped into [0, 10]."""
    assert clamp_rating(raw) == expected


@pytest.mark.parametrize("raw, expected", [(-0.2, 0.0), (0.35, 0.35), (1, 1.0), (3, 1.0)])
def test_clamp_weight(raw, expected):
    """Weights are clamped into [0, 1]."""
    assert clamp_weight(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "seven", float("nan")])
def test_clamp_garbled_input_to_zero(raw):
    """Missing or garbled numbers become 0 rather than raising."""
    assert clamp_rating(raw) == 0.0
    assert clamp_weight(raw) == 0.0


def test_clamp_accepts_numeric_strings():
    """Form inputs arrive as text."""
    assert clamp_rating("7") == 7.0
    assert clamp_weight("0.2") == 0.2


def test_safe_float_default():
    """The fallback value is configurable."""
    assert safe_float("x", default=3.0) == 3.0


# --- get-or-zero ---


def test_value_or_zero_missing_key():
    """Missing key reads as 0."""
    assert value_or_zero({"a": 2.0}, "b") == 0.0
    assert value_or_zero({"a": 2.0}, "a") == 2.0


def test_value_or_zero_empty_mapping():
    """None and empty mappings read as 0."""
    assert value_or_zero(None, "a") == 0.0
    assert value_or_zero({}, "a") == 0.0


# --- weight-sum advisory ---


def test_default_weights_are_valid():
    """Default weights sum to 1.0."""
    assert weight_sum(default_weights()) == pytest.approx(1.0)
    assert is_weight_valid(default_weights())


def test_weight_sum_point_nine_nine_is_invalid():
    """0.99 is outside the tolerance."""
    assert not is_weight_valid(_weights_summing_to(0.99))


def test_weight_sum_one_point_zero_zero_nine_is_valid():
    """1.009 is inside the 0.01 tolerance."""
    assert is_weight_valid(_weights_summing_to(1.009))


def test_weight_sum_far_off_is_invalid():
    """All-zero weights fail the advisory."""
    assert not is_weight_valid({k: 0.0 for k in default_weights()})


# --- tags ---


def test_parse_tags_trims_and_drops_empties():
    """Comma-split, trimmed, empties dropped, order kept."""
    assert parse_tags(" NLP, Customer Analytics ,, ,churn") == ("NLP", "Customer Analytics", "churn")


def test_parse_tags_blank():
    """Blank or missing text gives no tags."""
    assert parse_tags("") == ()
    assert parse_tags("   ") == ()
    assert parse_tags(None) == ()
