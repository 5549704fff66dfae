"""
Baseline snapshot assembly for one pulse cycle.

Runs the aggregators on the cycle inputs and freezes the result. Insufficient
data never aborts the snapshot: affected dimensions and net-value families are
flagged instead.
"""

from __future__ import annotations

from lyra_pulse.baseline.friction import rank_friction_hotspots
from lyra_pulse.baseline.models import BaselineSnapshot, CycleInputs
from lyra_pulse.baseline.net_value import compute_net_value
from lyra_pulse.baseline.signals import compute_dimension_signals
from lyra_pulse.baseline.themes import aggregate_themes
from lyra_pulse.config.settings import DEFAULT_SCORING_CONFIG, ScoringConfig
from lyra_pulse.pulse_logging import cycle_context, get_logger

logger = get_logger(__name__)


def build_baseline_snapshot(
    inputs: CycleInputs,
    prior: BaselineSnapshot | None = None,
    config: ScoringConfig | None = None,
) -> BaselineSnapshot:
    """
    Compute every derived measure of one cycle and return the frozen snapshot.

    Records logged by the aggregators while the snapshot is built carry the
    cycle's organization_id and cycle_number.
    """
    config = config or DEFAULT_SCORING_CONFIG
    with cycle_context(inputs.organization_id, inputs.cycle_number):
        signals = compute_dimension_signals(inputs, prior=prior, config=config)
        themes = aggregate_themes(inputs.themes)
        net_value = compute_net_value(inputs.signal_families, config.net_weights)
        hotspots = rank_friction_hotspots(inputs.friction_observations, config.friction_tiers)

        snapshot = BaselineSnapshot(
            cycle_number=inputs.cycle_number,
            respondent_count=inputs.respondent_count,
            participation_rate=inputs.participation_rate,
            dimension_signals=signals,
            net_value=net_value,
            patterns=themes.ranked,
            friction_hotspots=tuple(hotspots),
            organization_id=inputs.organization_id,
        )
        logger.info(
            "baseline_snapshot_built",
            respondent_count=inputs.respondent_count,
            net=net_value.net,
            net_label=net_value.label.value,
            pattern_count=len(snapshot.patterns),
            hotspot_count=len(snapshot.friction_hotspots),
            insufficient_dimensions=[d.value for d, s in signals.items() if s.insufficient_data],
        )
    return snapshot
