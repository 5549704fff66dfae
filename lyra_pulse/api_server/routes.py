"""
FastAPI router: stateless scoring endpoints.

POST /signals/dimensions, POST /signals/net-value, POST /friction/hotspots,
POST /movement/compare. Each request is converted into domain models and
handed to the baseline engine; nothing is stored.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from lyra_pulse.api_server.schemas import (
    CompareSnapshotsRequest,
    DimensionSignalsRequest,
    FrictionHotspotsRequest,
    NetValueRequest,
)
from lyra_pulse.baseline import (
    BaselineSnapshot,
    CycleInputs,
    FrictionObservation,
    SignalFamilies,
    compare_snapshots,
    compute_dimension_signals,
    compute_net_value,
    rank_friction_hotspots,
)
from lyra_pulse.config.settings import FrictionTiers, NetValueWeights, ScoringConfig
from lyra_pulse.history import get_history
from lyra_pulse.pulse_logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["baseline"])


def get_scoring_config() -> ScoringConfig:
    """Dependency: scoring policy shared with the history store."""
    return get_history().config


@router.post("/signals/dimensions")
def dimension_signals(
    body: DimensionSignalsRequest,
    config: ScoringConfig = Depends(get_scoring_config),
) -> dict[str, Any]:
    inputs = CycleInputs.from_dict(body.inputs.model_dump())
    prior = BaselineSnapshot.from_dict(body.prior) if body.prior is not None else None
    signals = compute_dimension_signals(inputs, prior=prior, config=config)
    return {
        "cycle_number": inputs.cycle_number,
        "dimension_signals": {d.value: s.to_dict() for d, s in signals.items()},
    }


@router.post("/signals/net-value")
def net_value(
    body: NetValueRequest,
    config: ScoringConfig = Depends(get_scoring_config),
) -> dict[str, Any]:
    weights = NetValueWeights(**body.weights.model_dump()) if body.weights else config.net_weights
    result = compute_net_value(SignalFamilies.from_dict(body.families.model_dump()), weights)
    return result.to_dict()


@router.post("/friction/hotspots")
def friction_hotspots(
    body: FrictionHotspotsRequest,
    config: ScoringConfig = Depends(get_scoring_config),
) -> dict[str, Any]:
    tiers = FrictionTiers(**body.tiers.model_dump()) if body.tiers else config.friction_tiers
    observations = [FrictionObservation.from_dict(o.model_dump()) for o in body.observations]
    hotspots = rank_friction_hotspots(observations, tiers)
    return {"hotspots": [h.to_dict() for h in hotspots]}


@router.post("/movement/compare")
def movement_compare(
    body: CompareSnapshotsRequest,
    config: ScoringConfig = Depends(get_scoring_config),
) -> dict[str, Any]:
    report = compare_snapshots(
        BaselineSnapshot.from_dict(body.earlier),
        BaselineSnapshot.from_dict(body.later),
        resolved_themes=body.resolved_themes,
        threshold=body.threshold if body.threshold is not None else config.movement_threshold,
    )
    return report.to_dict()
