"""
Pytest fixtures for Lyra Pulse tests. Builds cycle inputs matching the
bundled sample cycle and resets the process-wide history for API tests.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from lyra_pulse.baseline import (
    AnchorResponse,
    CycleInputs,
    FrictionObservation,
    SignalFamilies,
    ThemeRecord,
)

DATA_DIR = Path(__file__).resolve().parent.parent / "lyra_pulse" / "data"


def anchor_responses(dimension: str, prefix: str, first: list[float], second: list[float]) -> list[AnchorResponse]:
    """Responses for both anchor items of a dimension; respondent i answers first[i] and second[i]."""
    out: list[AnchorResponse] = []
    for item, scores in (("anc1", first), ("anc2", second)):
        for i, score in enumerate(scores, start=1):
            out.append(AnchorResponse(dimension, f"{prefix}_{item}", f"r{i}", score))
    return out


def theme(name: str, dimension: str, recurrence: str, density: float, sentiment: str = "") -> ThemeRecord:
    return ThemeRecord(name, dimension, recurrence, density, sentiment)


@pytest.fixture
def cycle_one_themes() -> list[ThemeRecord]:
    return [
        theme("Quiet adoption", "adoption", "strong", 0.72, "cautious"),
        theme("Purpose drift", "purpose", "recurring", 0.58, "uncertain"),
        theme("Rework burden", "flow", "strong", 0.65, "frustrated"),
        theme("Governance ambiguity", "trust", "recurring", 0.61, "anxious"),
        theme("Value pockets", "value", "recurring", 0.54, "mixed"),
        theme("Knowledge gaps", "representation", "emerging", 0.41, "unaware"),
        theme("Shadow AI normalising", "trust", "strong", 0.68, "resigned"),
        theme("Hidden rework cost", "value", "recurring", 0.57, "frustrated"),
    ]


@pytest.fixture
def cycle_one_inputs(cycle_one_themes) -> CycleInputs:
    responses = (
        anchor_responses("adoption", "A", [3, 4, 3, 4, 3], [4, 3, 3, 4, 3])
        + anchor_responses("purpose", "P", [3, 3, 2, 3, 3], [3, 2, 3, 3, 3])
        + anchor_responses("flow", "F", [3, 3, 3, 4, 3], [3, 3, 3, 3, 3])
        + anchor_responses("trust", "T", [3, 2, 3, 3, 2], [3, 3, 2, 3, 2])
        + anchor_responses("value", "V", [3, 4, 3, 3, 3], [3, 3, 4, 3, 3])
        + anchor_responses("representation", "R", [2, 3, 2, 2, 3], [2, 2, 3, 2, 2])
    )
    return CycleInputs(
        cycle_number=1,
        anchor_responses=tuple(responses),
        themes=tuple(cycle_one_themes),
        friction_observations=(
            FrictionObservation("Review & verification", 0.72, ("Legal", "Compliance", "Senior leads")),
            FrictionObservation("Prompt iteration", 0.58, ("All roles",)),
            FrictionObservation("Output correction", 0.64, ("Content", "Marketing", "Comms")),
            FrictionObservation("Tool switching", 0.45, ("Operations", "Finance")),
        ),
        signal_families=SignalFamilies(benefit=0.58, friction=0.45, risk=0.35, intensification=0.40),
        respondent_count=47,
        participation_rate=0.78,
        organization_id="northstar",
    )


@pytest.fixture
def sample_cycle_paths() -> tuple[Path, Path]:
    return DATA_DIR / "sample_cycle_1.json", DATA_DIR / "sample_cycle_2.json"


@pytest.fixture
def sample_cycle_payloads(sample_cycle_paths) -> tuple[dict, dict]:
    first, second = sample_cycle_paths
    return (
        json.loads(first.read_text(encoding="utf-8")),
        json.loads(second.read_text(encoding="utf-8")),
    )


@pytest.fixture
def fresh_history():
    """Reset the process-wide history so each test starts with no organizations."""
    from lyra_pulse.history import store

    store.reset_history_for_test()
    yield store.get_history()
    store.reset_history_for_test()


@pytest.fixture
def client(fresh_history):
    """FastAPI TestClient. Depends on fresh_history so no cycles leak between tests."""
    from fastapi.testclient import TestClient

    from lyra_pulse.api_server.server import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_snapshots(sample_cycle_payloads):
    """Snapshots of both sample cycles, the second computed against the first."""
    from lyra_pulse.baseline import build_baseline_snapshot

    first, second = sample_cycle_payloads
    snapshot_one = build_baseline_snapshot(CycleInputs.from_dict(first))
    snapshot_two = build_baseline_snapshot(CycleInputs.from_dict(second), prior=snapshot_one)
    return snapshot_one, snapshot_two
