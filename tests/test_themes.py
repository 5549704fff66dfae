"""
Tests for the theme aggregator: density per dimension and pattern ranking.
"""

from __future__ import annotations

import pytest

from lyra_pulse.baseline import ALL_DIMENSIONS, Dimension, Recurrence, ThemeRecord, aggregate_themes
from lyra_pulse.core.exceptions import DuplicateTheme, InvalidMeasure, UnknownDimension

from conftest import theme


def test_ranking_recurrence_then_density(cycle_one_themes):
    """strong before recurring before emerging; density descending inside a class."""
    agg = aggregate_themes(cycle_one_themes)
    assert [t.theme for t in agg.ranked] == [
        "Quiet adoption",
        "Shadow AI normalising",
        "Rework burden",
        "Governance ambiguity",
        "Purpose drift",
        "Hidden rework cost",
        "Value pockets",
        "Knowledge gaps",
    ]


def test_ranking_ties_keep_insertion_order():
    records = [
        theme("First", "flow", "recurring", 0.5),
        theme("Second", "trust", "recurring", 0.5),
        theme("Third", "value", "recurring", 0.5),
    ]
    agg = aggregate_themes(records)
    assert [t.theme for t in agg.ranked] == ["First", "Second", "Third"]


def test_density_is_mean_per_dimension(cycle_one_themes):
    agg = aggregate_themes(cycle_one_themes)
    assert agg.per_dimension[Dimension.TRUST].density == pytest.approx((0.61 + 0.68) / 2)
    assert agg.per_dimension[Dimension.TRUST].pattern_count == 2
    assert agg.per_dimension[Dimension.ADOPTION].density == pytest.approx(0.72)


def test_empty_dimension_present_with_zero_density():
    """Dimensions without records are reported, not omitted."""
    agg = aggregate_themes([theme("Quiet adoption", "adoption", "strong", 0.72)])
    assert list(agg.per_dimension) == list(ALL_DIMENSIONS)
    purpose = agg.per_dimension[Dimension.PURPOSE]
    assert purpose.density == 0.0
    assert purpose.no_patterns_observed is True
    assert agg.per_dimension[Dimension.ADOPTION].no_patterns_observed is False


def test_no_records_at_all():
    agg = aggregate_themes([])
    assert agg.ranked == ()
    assert all(p.no_patterns_observed for p in agg.per_dimension.values())


def test_dominant_sentiment_most_frequent_then_first_seen():
    records = [
        theme("A", "value", "recurring", 0.5, "mixed"),
        theme("B", "value", "recurring", 0.5, "Frustrated"),
        theme("C", "value", "emerging", 0.4, "frustrated"),
        theme("D", "flow", "strong", 0.6, "tired"),
        theme("E", "flow", "strong", 0.6, "anxious"),
    ]
    agg = aggregate_themes(records)
    assert agg.per_dimension[Dimension.VALUE].dominant_sentiment == "frustrated"
    assert agg.per_dimension[Dimension.FLOW].dominant_sentiment == "tired"
    assert agg.per_dimension[Dimension.TRUST].dominant_sentiment is None


def test_duplicate_theme_rejected():
    records = [
        theme("Rework burden", "flow", "strong", 0.65),
        theme("rework  BURDEN", "value", "recurring", 0.5),
    ]
    with pytest.raises(DuplicateTheme):
        aggregate_themes(records)


@pytest.mark.parametrize("density", [-0.1, 1.2, "high", None])
def test_density_out_of_range_rejected(density):
    with pytest.raises(InvalidMeasure):
        ThemeRecord("Rework burden", "flow", "strong", density)


def test_unknown_recurrence_rejected():
    with pytest.raises(InvalidMeasure):
        ThemeRecord("Rework burden", "flow", "constant", 0.5)


def test_unknown_dimension_rejected():
    with pytest.raises(UnknownDimension):
        ThemeRecord("Rework burden", "culture", "strong", 0.5)


def test_recurrence_normalized():
    record = ThemeRecord("Rework burden", "Flow", "Strong", 0.5, " Frustrated ")
    assert record.recurrence is Recurrence.STRONG
    assert record.dimension is Dimension.FLOW
    assert record.sentiment == "frustrated"
