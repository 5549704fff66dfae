"""
Tests for baseline snapshot assembly and serialization.
"""

from __future__ import annotations

import json
from dataclasses import FrozenInstanceError

import pytest

from lyra_pulse.baseline import (
    BaselineSnapshot,
    CycleInputs,
    Dimension,
    FrictionTier,
    NetLabel,
    build_baseline_snapshot,
)
from lyra_pulse.core.exceptions import InvalidMeasure


def test_cycle_one_snapshot(cycle_one_inputs):
    snapshot = build_baseline_snapshot(cycle_one_inputs)
    assert snapshot.cycle_number == 1
    assert snapshot.organization_id == "northstar"
    assert snapshot.respondent_count == 47
    assert snapshot.participation_rate == pytest.approx(0.78)
    assert snapshot.net_value.net == pytest.approx(0.1775)
    assert snapshot.net_value.label is NetLabel.POSITIVE
    assert snapshot.pattern_names[0] == "Quiet adoption"
    assert [h.area for h in snapshot.friction_hotspots] == [
        "Review & verification",
        "Output correction",
        "Prompt iteration",
        "Tool switching",
    ]


def test_sample_cycle_two_snapshot(sample_snapshots):
    _, second = sample_snapshots
    assert second.respondent_count == 52
    assert second.net_value.net == pytest.approx(0.234167, abs=1e-6)
    top = second.friction_hotspots[0]
    assert top.area == "Review & verification"
    assert top.intensity == pytest.approx(0.675)
    assert top.tier is FrictionTier.HIGH
    assert top.observation_count == 2
    assert top.respondent_count == 8
    assert [h.tier for h in second.friction_hotspots[1:]] == [
        FrictionTier.MEDIUM,
        FrictionTier.MEDIUM,
        FrictionTier.LOW,
    ]


def test_snapshot_is_frozen(cycle_one_inputs):
    snapshot = build_baseline_snapshot(cycle_one_inputs)
    with pytest.raises(FrozenInstanceError):
        snapshot.cycle_number = 2
    with pytest.raises(TypeError):
        snapshot.dimension_signals[Dimension.TRUST] = None


def test_snapshot_survives_json(sample_snapshots):
    """to_dict -> JSON -> from_dict gives back an equal snapshot."""
    _, second = sample_snapshots
    data = json.loads(json.dumps(second.to_dict()))
    assert BaselineSnapshot.from_dict(data) == second


@pytest.mark.parametrize(
    "section, key, value",
    [
        ("net_value", "label", "Excellent"),
        ("net_value", "label", "Marginal"),
        ("hotspot", "tier", "extreme"),
        ("hotspot", "observation_count", "two"),
        ("hotspot", "respondent_count", 0),
        ("hotspot", "area", ""),
    ],
)
def test_malformed_snapshot_rejected(sample_snapshots, section, key, value):
    _, second = sample_snapshots
    data = json.loads(json.dumps(second.to_dict()))
    target = data["net_value"] if section == "net_value" else data["friction_hotspots"][0]
    target[key] = value
    with pytest.raises(InvalidMeasure) as excinfo:
        BaselineSnapshot.from_dict(data)
    assert excinfo.value.details["field"] == key


def test_snapshot_from_dict_normalises_label_case(sample_snapshots):
    _, second = sample_snapshots
    data = second.to_dict()
    data["net_value"]["label"] = "POSITIVE"
    data["friction_hotspots"][0]["tier"] = "high"
    restored = BaselineSnapshot.from_dict(data)
    assert restored.net_value.label is NetLabel.POSITIVE
    assert restored.friction_hotspots[0].tier is FrictionTier.HIGH


def test_snapshot_sections_must_be_objects(sample_snapshots):
    _, second = sample_snapshots
    data = second.to_dict()
    data["net_value"] = [0.2]
    with pytest.raises(InvalidMeasure):
        BaselineSnapshot.from_dict(data)


def test_respondent_count_defaults_to_distinct_respondents(sample_cycle_payloads):
    first, _ = sample_cycle_payloads
    payload = {k: v for k, v in first.items() if k != "respondent_count"}
    inputs = CycleInputs.from_dict(payload)
    assert inputs.respondent_count == 5
    snapshot = build_baseline_snapshot(inputs)
    assert all(s.confidence.value == "early" for s in snapshot.dimension_signals.values())


def test_insufficient_data_does_not_abort():
    snapshot = build_baseline_snapshot(CycleInputs(cycle_number=1, organization_id="northstar"))
    assert all(s.insufficient_data for s in snapshot.dimension_signals.values())
    assert snapshot.net_value.insufficient_families == ("benefit", "friction", "risk", "intensification")
    assert snapshot.patterns == ()
    assert snapshot.friction_hotspots == ()
