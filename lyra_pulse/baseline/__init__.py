"""
Baseline engine package: signal aggregation and scoring.

Consumes validated anchor responses and externally extracted theme and
friction records, and produces per-dimension signals, net value, ranked
patterns and hotspots, and longitudinal movement between cycles.
"""

from lyra_pulse.baseline.anchors import (
    aggregate_all_anchors,
    aggregate_anchor_responses,
)
from lyra_pulse.baseline.dimensions import (
    ALL_DIMENSIONS,
    ANCHOR_ITEMS,
    QUALITATIVE_PROMPTS,
    Dimension,
    dimension_catalog,
    parse_dimension,
)
from lyra_pulse.baseline.friction import rank_friction_hotspots
from lyra_pulse.baseline.models import (
    AnchorAggregate,
    AnchorResponse,
    BaselineSnapshot,
    Confidence,
    CycleInputs,
    DimensionMovement,
    DimensionPatterns,
    DimensionSignal,
    FrictionHotspot,
    FrictionObservation,
    FrictionTier,
    MovementDirection,
    MovementReport,
    NetLabel,
    NetValue,
    Recurrence,
    SignalFamilies,
    ThemeAggregate,
    ThemeRecord,
)
from lyra_pulse.baseline.movement import compare_snapshots
from lyra_pulse.baseline.net_value import compute_net_value
from lyra_pulse.baseline.signals import compute_dimension_signals
from lyra_pulse.baseline.snapshot import build_baseline_snapshot
from lyra_pulse.baseline.themes import aggregate_themes

__all__ = [
    "ALL_DIMENSIONS",
    "ANCHOR_ITEMS",
    "QUALITATIVE_PROMPTS",
    "AnchorAggregate",
    "AnchorResponse",
    "BaselineSnapshot",
    "Confidence",
    "CycleInputs",
    "Dimension",
    "DimensionMovement",
    "DimensionPatterns",
    "DimensionSignal",
    "FrictionHotspot",
    "FrictionObservation",
    "FrictionTier",
    "MovementDirection",
    "MovementReport",
    "NetLabel",
    "NetValue",
    "Recurrence",
    "SignalFamilies",
    "ThemeAggregate",
    "ThemeRecord",
    "aggregate_all_anchors",
    "aggregate_anchor_responses",
    "aggregate_themes",
    "build_baseline_snapshot",
    "compare_snapshots",
    "compute_dimension_signals",
    "compute_net_value",
    "dimension_catalog",
    "parse_dimension",
    "rank_friction_hotspots",
]
