"""
Tests for the dimension signal synthesizer: blend, bands, confidence and trend labels.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from lyra_pulse.baseline import (
    ALL_DIMENSIONS,
    Confidence,
    CycleInputs,
    Dimension,
    build_baseline_snapshot,
    compute_dimension_signals,
)
from lyra_pulse.baseline.signals import band_label, classify_confidence, signal_level, trend_label
from lyra_pulse.config import ScoringConfig
from lyra_pulse.core.exceptions import InconsistentCycleOrder

from conftest import anchor_responses, theme

CYCLE_ONE_SIGNALS = {
    Dimension.ADOPTION: (0.66, "developing", "Developing"),
    Dimension.PURPOSE: (0.515, "mixed", "Emerging"),
    Dimension.FLOW: (0.5875, "mixed", "Emerging"),
    Dimension.TRUST: (0.5225, "mixed", "Emerging"),
    Dimension.VALUE: (0.5525, "mixed", "Emerging"),
    Dimension.REPRESENTATION: (0.3675, "early", "Early"),
}


def test_first_cycle_signals(cycle_one_inputs):
    """First cycle: blended signal, band label as direction, no delta."""
    signals = compute_dimension_signals(cycle_one_inputs)
    assert list(signals) == list(ALL_DIMENSIONS)
    for dim, (value, band, level) in CYCLE_ONE_SIGNALS.items():
        s = signals[dim]
        assert s.signal == pytest.approx(value)
        assert s.direction == band
        assert s.level == level
        assert s.delta is None
        assert s.confidence is Confidence.EMERGING
        assert s.flags == ()
    assert signals[Dimension.ADOPTION].anchor_mean == pytest.approx(3.4)
    assert "delta" not in signals[Dimension.ADOPTION].to_dict()


def test_signals_are_read_only(cycle_one_inputs):
    signals = compute_dimension_signals(cycle_one_inputs)
    with pytest.raises(TypeError):
        signals[Dimension.TRUST] = signals[Dimension.FLOW]


def test_missing_anchor_responses_falls_back_to_themes(cycle_one_inputs):
    """No anchors for trust: theme component alone, one confidence tier down, flagged."""
    inputs = replace(
        cycle_one_inputs,
        anchor_responses=tuple(r for r in cycle_one_inputs.anchor_responses if r.dimension is not Dimension.TRUST),
    )
    trust = compute_dimension_signals(inputs)[Dimension.TRUST]
    assert trust.signal == pytest.approx(0.645)
    assert trust.anchor_mean is None
    assert trust.confidence is Confidence.EARLY
    assert trust.insufficient_data is True
    assert trust.flags == ("insufficient_data",)


def test_dimension_without_patterns_is_flagged(cycle_one_inputs):
    inputs = replace(
        cycle_one_inputs,
        themes=tuple(t for t in cycle_one_inputs.themes if t.dimension is not Dimension.PURPOSE),
    )
    purpose = compute_dimension_signals(inputs)[Dimension.PURPOSE]
    assert purpose.signal == pytest.approx(0.225)
    assert purpose.flags == ("no_patterns_observed",)
    assert purpose.direction == "early"


def test_empty_cycle_still_reports_every_dimension():
    signals = compute_dimension_signals(CycleInputs(cycle_number=1))
    assert list(signals) == list(ALL_DIMENSIONS)
    for s in signals.values():
        assert s.signal == 0.0
        assert s.confidence is Confidence.EARLY
        assert set(s.flags) == {"insufficient_data", "no_patterns_observed"}


def test_signal_extremes_stay_in_unit_range():
    top = CycleInputs(
        cycle_number=1,
        anchor_responses=tuple(anchor_responses("trust", "T", [5, 5], [5, 5])),
        themes=(theme("Full trust", "trust", "strong", 1.0),),
    )
    bottom = CycleInputs(
        cycle_number=1,
        anchor_responses=tuple(anchor_responses("trust", "T", [1, 1], [1, 1])),
        themes=(theme("No trust", "trust", "strong", 0.0),),
    )
    assert compute_dimension_signals(top)[Dimension.TRUST].signal == 1.0
    assert compute_dimension_signals(top)[Dimension.TRUST].direction == "strong"
    assert compute_dimension_signals(bottom)[Dimension.TRUST].signal == 0.0
    assert compute_dimension_signals(bottom)[Dimension.TRUST].level == "Weak"


def test_blend_weights_from_config(cycle_one_inputs):
    config = ScoringConfig(anchor_weight=1.0, theme_weight=0.0)
    signals = compute_dimension_signals(cycle_one_inputs, config=config)
    assert signals[Dimension.ADOPTION].signal == pytest.approx(0.6)
    assert signals[Dimension.REPRESENTATION].signal == pytest.approx(0.325)


@pytest.mark.parametrize(
    "count,expected",
    [
        (0, Confidence.EARLY),
        (19, Confidence.EARLY),
        (20, Confidence.EMERGING),
        (59, Confidence.EMERGING),
        (60, Confidence.ESTABLISHED),
        (500, Confidence.ESTABLISHED),
    ],
)
def test_confidence_thresholds(count, expected):
    assert classify_confidence(count) is expected


@pytest.mark.parametrize(
    "signal,band,level",
    [
        (0.0, "weak", "Weak"),
        (0.199999, "weak", "Weak"),
        (0.2, "early", "Early"),
        (0.4, "mixed", "Emerging"),
        (0.6, "developing", "Developing"),
        (0.8, "strong", "Strong"),
        (1.0, "strong", "Strong"),
    ],
)
def test_band_boundaries(signal, band, level):
    assert band_label(signal) == band
    assert signal_level(signal) == level


@pytest.mark.parametrize(
    "signal,delta,expected",
    [
        (0.68, 0.06, "growing"),
        (0.6, 0.04, "growing"),
        (0.45, 0.05, "improving"),
        (0.5, -0.05, "declining"),
        (0.5, 0.03, "stable"),
        (0.5, -0.03, "stable"),
        (0.5, 0.0, "stable"),
    ],
)
def test_trend_labels(signal, delta, expected):
    assert trend_label(signal, delta) == expected


def test_stable_trend_can_use_contextual_band():
    config = ScoringConfig(band_label_when_stable=True)
    assert trend_label(0.5, 0.01, config) == "uneven"
    assert trend_label(0.3, 0.0, config) == "fragile"
    assert trend_label(0.7, 0.0, config) == "growing"
    assert trend_label(0.5, -0.2, config) == "declining"


def test_second_cycle_uses_trend_labels(sample_snapshots):
    _, second = sample_snapshots
    signals = second.dimension_signals
    expected = {
        Dimension.ADOPTION: (0.695, 0.035, "growing"),
        Dimension.PURPOSE: (0.5075, -0.0075, "stable"),
        Dimension.FLOW: (0.5375, -0.05, "declining"),
        Dimension.TRUST: (0.5125, -0.01, "stable"),
        Dimension.REPRESENTATION: (0.4075, 0.04, "improving"),
    }
    for dim, (value, delta, direction) in expected.items():
        assert signals[dim].signal == pytest.approx(value)
        assert signals[dim].delta == pytest.approx(delta)
        assert signals[dim].direction == direction
    assert signals[Dimension.VALUE].signal == pytest.approx(0.554167, abs=1e-5)
    assert signals[Dimension.VALUE].direction == "stable"
    assert signals[Dimension.VALUE].confidence is Confidence.EMERGING


def test_prior_must_be_previous_cycle(cycle_one_inputs):
    first = build_baseline_snapshot(cycle_one_inputs)
    with pytest.raises(InconsistentCycleOrder):
        compute_dimension_signals(replace(cycle_one_inputs, cycle_number=3), prior=first)
    with pytest.raises(InconsistentCycleOrder):
        compute_dimension_signals(cycle_one_inputs, prior=first)


def test_prior_must_belong_to_same_organization(cycle_one_inputs):
    first = build_baseline_snapshot(cycle_one_inputs)
    other = replace(cycle_one_inputs, cycle_number=2, organization_id="southgate")
    with pytest.raises(InconsistentCycleOrder):
        compute_dimension_signals(other, prior=first)
