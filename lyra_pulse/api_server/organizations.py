"""
FastAPI router: append-only cycle history per organization.

POST /organizations/{org_id}/cycles records the next cycle (computed against
the previous one); GET endpoints read snapshots and movement back.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from lyra_pulse.api_server.schemas import CycleInputsIn, ResolvedThemesRequest
from lyra_pulse.baseline import CycleInputs
from lyra_pulse.history import BaselineHistory, get_history

router = APIRouter(prefix="/organizations", tags=["organizations"])


@router.post("/{org_id}/cycles", status_code=201)
def record_cycle(
    org_id: str,
    body: CycleInputsIn,
    history: BaselineHistory = Depends(get_history),
) -> dict[str, Any]:
    inputs = CycleInputs.from_dict(body.model_dump())
    return history.record_cycle(org_id, inputs).to_dict()


@router.get("/{org_id}/cycles")
def list_cycles(org_id: str, history: BaselineHistory = Depends(get_history)) -> dict[str, Any]:
    return {
        "organization_id": org_id,
        "cycles": [s.to_dict() for s in history.list_cycles(org_id)],
    }


@router.get("/{org_id}/cycles/{cycle_number}")
def get_cycle(
    org_id: str,
    cycle_number: int,
    history: BaselineHistory = Depends(get_history),
) -> dict[str, Any]:
    return history.get_snapshot(org_id, cycle_number).to_dict()


@router.post("/{org_id}/cycles/{cycle_number}/resolved-themes")
def mark_resolved(
    org_id: str,
    cycle_number: int,
    body: ResolvedThemesRequest,
    history: BaselineHistory = Depends(get_history),
) -> dict[str, Any]:
    merged = history.mark_resolved(org_id, cycle_number, body.themes)
    return {"organization_id": org_id, "cycle_number": cycle_number, "resolved_themes": list(merged)}


@router.get("/{org_id}/movement")
def movement(
    org_id: str,
    earlier: int | None = Query(None, ge=1),
    later: int | None = Query(None, ge=1),
    history: BaselineHistory = Depends(get_history),
) -> dict[str, Any]:
    return history.movement(org_id, earlier=earlier, later=later).to_dict()
