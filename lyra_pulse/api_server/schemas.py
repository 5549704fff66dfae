"""
Request bodies for the baseline API.

Shapes only: range checks stay in the domain models so the API reports the
same error kinds (invalid_score, unknown_dimension, ...) as the library.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field


class AnchorResponseIn(BaseModel):
    dimension: str = Field(..., description="Dimension id or label, e.g. 'trust'")
    item_id: str = Field(..., description="Anchor item id, e.g. 'T_anc1'")
    respondent_id: str = Field(..., description="Opaque respondent identifier")
    score: float = Field(..., description="Scaled answer in [1, 5]")


class ThemeRecordIn(BaseModel):
    theme: str
    dimension: str
    recurrence: str = Field(..., description="emerging | recurring | strong")
    density: float = Field(..., description="Pattern density in [0, 1]")
    sentiment: str = ""


class FrictionObservationIn(BaseModel):
    area: str
    intensity: float = Field(..., description="Friction intensity in [0, 1]")
    roles: list[str] = Field(default_factory=list)
    respondents: int = Field(1, description="Respondents backing this observation (merge weight)")


FamilyIn = Union[float, list[float]]


class SignalFamiliesIn(BaseModel):
    """Each family is a precomputed signal or a list of per-observation intensities."""

    benefit: FamilyIn = Field(default_factory=list)
    friction: FamilyIn = Field(default_factory=list)
    risk: FamilyIn = Field(default_factory=list)
    intensification: FamilyIn = Field(default_factory=list)


class CycleInputsIn(BaseModel):
    cycle_number: int = Field(..., description="Pulse cycle number, starting at 1")
    anchor_responses: list[AnchorResponseIn] = Field(default_factory=list)
    themes: list[ThemeRecordIn] = Field(default_factory=list)
    friction_observations: list[FrictionObservationIn] = Field(default_factory=list)
    signal_families: SignalFamiliesIn = Field(default_factory=SignalFamiliesIn)
    respondent_count: int | None = Field(None, description="Defaults to distinct respondents in anchor_responses")
    participation_rate: float = Field(0.0, description="Share of invited people who responded, in [0, 1]")
    organization_id: str | None = None


class DimensionSignalsRequest(BaseModel):
    inputs: CycleInputsIn
    prior: dict[str, Any] | None = Field(None, description="Snapshot of the immediately preceding cycle")


class NetValueWeightsIn(BaseModel):
    friction: float = 0.35
    risk: float = 0.30
    intensification: float = 0.35


class NetValueRequest(BaseModel):
    families: SignalFamiliesIn
    weights: NetValueWeightsIn | None = None


class FrictionTiersIn(BaseModel):
    medium: float = 0.5
    high: float = 0.65


class FrictionHotspotsRequest(BaseModel):
    observations: list[FrictionObservationIn]
    tiers: FrictionTiersIn | None = None


class CompareSnapshotsRequest(BaseModel):
    earlier: dict[str, Any]
    later: dict[str, Any]
    resolved_themes: list[str] = Field(default_factory=list, description="Themes closed by an external process")
    threshold: float | None = Field(None, description="Movement threshold; defaults to configuration")


class ResolvedThemesRequest(BaseModel):
    themes: list[str] = Field(..., min_length=1)
