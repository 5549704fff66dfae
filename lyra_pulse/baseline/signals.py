"""
Dimension signal synthesizer.

signal = anchor_weight * (anchor_mean - 1) / 4 + theme_weight * pattern_density

- No anchor responses: signal falls back to the theme component alone and
  confidence drops one tier.
- Confidence comes from the cycle's respondent count (<20 early, 20-59
  emerging, >=60 established by default).
- Direction: with a prior cycle, the trend label wins (improving / growing,
  declining, stable); without one, the absolute band label
  (weak, early, mixed, developing, strong).
"""

from __future__ import annotations

from bisect import bisect_right
from types import MappingProxyType
from typing import Mapping

from lyra_pulse.baseline.anchors import aggregate_all_anchors
from lyra_pulse.baseline.dimensions import ALL_DIMENSIONS, Dimension
from lyra_pulse.baseline.models import (
    FLAG_INSUFFICIENT_DATA,
    FLAG_NO_PATTERNS_OBSERVED,
    AnchorAggregate,
    BaselineSnapshot,
    Confidence,
    CycleInputs,
    DimensionPatterns,
    DimensionSignal,
)
from lyra_pulse.baseline.themes import aggregate_themes
from lyra_pulse.baseline.validation import round_measure
from lyra_pulse.config.settings import DEFAULT_SCORING_CONFIG, ScoringConfig
from lyra_pulse.core.exceptions import InconsistentCycleOrder
from lyra_pulse.pulse_logging import get_logger

logger = get_logger(__name__)

# Lower edges of bands 2..5; band 1 starts at 0.
BAND_EDGES = (0.2, 0.4, 0.6, 0.8)
BAND_LABELS = ("weak", "early", "mixed", "developing", "strong")
# Same bands, worded for a dimension that already has history.
CONTEXTUAL_BAND_LABELS = ("weak", "fragile", "uneven", "growing", "strong")
LEVEL_LABELS = ("Weak", "Early", "Emerging", "Developing", "Strong")

TREND_GROWING = "growing"
TREND_IMPROVING = "improving"
TREND_DECLINING = "declining"
TREND_STABLE = "stable"
# Rising signals at or above this are "growing" rather than "improving".
GROWING_MIN_SIGNAL = 0.6


def _band_index(signal: float) -> int:
    return bisect_right(BAND_EDGES, signal)


def band_label(signal: float, *, contextual: bool = False) -> str:
    labels = CONTEXTUAL_BAND_LABELS if contextual else BAND_LABELS
    return labels[_band_index(signal)]


def signal_level(signal: float) -> str:
    return LEVEL_LABELS[_band_index(signal)]


def classify_confidence(respondent_count: int, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> Confidence:
    if respondent_count >= config.confidence_established_min:
        return Confidence.ESTABLISHED
    if respondent_count >= config.confidence_emerging_min:
        return Confidence.EMERGING
    return Confidence.EARLY


def trend_label(signal: float, delta: float, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> str:
    if delta > config.trend_threshold:
        return TREND_GROWING if signal >= GROWING_MIN_SIGNAL else TREND_IMPROVING
    if delta < -config.trend_threshold:
        return TREND_DECLINING
    if config.band_label_when_stable:
        return band_label(signal, contextual=True)
    return TREND_STABLE


def synthesize_dimension_signal(
    anchor: AnchorAggregate,
    patterns: DimensionPatterns,
    respondent_count: int,
    prior: DimensionSignal | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> DimensionSignal:
    """Blend anchor and theme components of one dimension into a DimensionSignal."""
    flags: list[str] = []
    confidence = classify_confidence(respondent_count, config)
    theme_component = patterns.density

    anchor_component = anchor.anchor_component
    if anchor_component is None:
        flags.append(FLAG_INSUFFICIENT_DATA)
        signal = theme_component
        confidence = confidence.downgraded()
    else:
        signal = config.anchor_weight * anchor_component + config.theme_weight * theme_component
    if patterns.no_patterns_observed:
        flags.append(FLAG_NO_PATTERNS_OBSERVED)
    signal = round_measure(min(1.0, max(0.0, signal)))

    delta: float | None = None
    if prior is None:
        direction = band_label(signal)
    else:
        delta = round_measure(signal - prior.signal)
        direction = trend_label(signal, delta, config)

    return DimensionSignal(
        dimension=anchor.dimension,
        signal=signal,
        anchor_mean=anchor.anchor_mean,
        direction=direction,
        confidence=confidence,
        level=signal_level(signal),
        delta=delta,
        flags=tuple(flags),
    )


def check_prior_snapshot(inputs: CycleInputs, prior: BaselineSnapshot | None) -> None:
    """The prior snapshot must be the immediately preceding cycle of the same organization."""
    if prior is None:
        return
    if prior.cycle_number != inputs.cycle_number - 1:
        raise InconsistentCycleOrder(
            f"Cycle {inputs.cycle_number} needs cycle {inputs.cycle_number - 1} as prior, "
            f"got cycle {prior.cycle_number}",
            cycle_number=inputs.cycle_number,
            prior_cycle_number=prior.cycle_number,
        )
    if (
        inputs.organization_id is not None
        and prior.organization_id is not None
        and inputs.organization_id != prior.organization_id
    ):
        raise InconsistentCycleOrder(
            "Prior snapshot belongs to a different organization",
            organization_id=inputs.organization_id,
            prior_organization_id=prior.organization_id,
        )


def compute_dimension_signals(
    inputs: CycleInputs,
    prior: BaselineSnapshot | None = None,
    config: ScoringConfig | None = None,
) -> Mapping[Dimension, DimensionSignal]:
    """
    Compute the DimensionSignal of all six dimensions for one cycle.

    Args:
        inputs: Collected records of the cycle.
        prior: Snapshot of the immediately preceding cycle, if any; switches
            direction labels to trend mode and fills in deltas.
        config: Weights and thresholds; defaults to the reference policy.

    Returns:
        Mapping with exactly the six dimensions, in canonical order.
    """
    config = config or DEFAULT_SCORING_CONFIG
    check_prior_snapshot(inputs, prior)

    anchors = aggregate_all_anchors(inputs.anchor_responses)
    themes = aggregate_themes(inputs.themes)

    signals: dict[Dimension, DimensionSignal] = {}
    for dim in ALL_DIMENSIONS:
        signals[dim] = synthesize_dimension_signal(
            anchors[dim],
            themes.per_dimension[dim],
            inputs.respondent_count,
            prior=prior.dimension_signals[dim] if prior is not None else None,
            config=config,
        )

    logger.info(
        "dimension_signals_computed",
        organization_id=inputs.organization_id,
        cycle_number=inputs.cycle_number,
        respondent_count=inputs.respondent_count,
        trend_mode=prior is not None,
        signals={d.value: s.signal for d, s in signals.items()},
    )
    return MappingProxyType(signals)
