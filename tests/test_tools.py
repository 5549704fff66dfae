"""
Tests for the command-line tools (run_baseline, compare_cycles).
"""

from __future__ import annotations

import json

import pytest

from lyra_pulse.tools import compare_cycles, run_baseline


@pytest.fixture
def snapshot_files(tmp_path, sample_cycle_paths):
    """Snapshot JSON files of both sample cycles, written by run_baseline."""
    first_input, second_input = sample_cycle_paths
    first_out = tmp_path / "snapshot1.json"
    second_out = tmp_path / "snapshot2.json"
    assert run_baseline.main(["--input", str(first_input), "--output", str(first_out)]) == 0
    assert (
        run_baseline.main(
            ["--input", str(second_input), "--prior", str(first_out), "--output", str(second_out)]
        )
        == 0
    )
    return first_out, second_out


def test_run_baseline_writes_snapshot(snapshot_files):
    first, second = snapshot_files
    one = json.loads(first.read_text(encoding="utf-8"))
    two = json.loads(second.read_text(encoding="utf-8"))
    assert one["cycle_number"] == 1
    assert one["net_value"]["label"] == "Positive"
    assert "delta" not in one["dimension_signals"]["adoption"]
    assert two["dimension_signals"]["adoption"]["direction"] == "growing"
    assert two["dimension_signals"]["flow"]["delta"] == pytest.approx(-0.05)


def test_run_baseline_defaults_to_sample_on_stdout(capsys):
    assert run_baseline.main([]) == 0
    snapshot = json.loads(capsys.readouterr().out)
    assert snapshot["organization_id"] == "northstar"
    assert snapshot["dimension_signals"]["representation"]["direction"] == "early"


def test_run_baseline_missing_input(tmp_path):
    assert run_baseline.main(["--input", str(tmp_path / "nope.json")]) == 1


def test_run_baseline_invalid_json(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert run_baseline.main(["--input", str(bad)]) == 1


def test_run_baseline_rejects_wrong_prior(tmp_path, sample_cycle_paths, snapshot_files):
    first_input, _ = sample_cycle_paths
    first_snapshot, _ = snapshot_files
    out = tmp_path / "out.json"
    code = run_baseline.main(["--input", str(first_input), "--prior", str(first_snapshot), "--output", str(out)])
    assert code == 2
    assert not out.exists()


def test_run_baseline_rejects_invalid_score(tmp_path, sample_cycle_payloads):
    first, _ = sample_cycle_payloads
    first["anchor_responses"][0]["score"] = 9
    path = tmp_path / "cycle.json"
    path.write_text(json.dumps(first), encoding="utf-8")
    assert run_baseline.main(["--input", str(path)]) == 2


def test_compare_cycles(snapshot_files, tmp_path):
    first, second = snapshot_files
    out = tmp_path / "movement.json"
    code = compare_cycles.main(
        ["--earlier", str(first), "--later", str(second), "--resolved", "Shadow AI normalising", "--output", str(out)]
    )
    assert code == 0
    report = json.loads(out.read_text(encoding="utf-8"))
    assert report["dimensions"]["flow"]["direction"] == "down"
    assert report["themes"]["resolved"] == ["Shadow AI normalising"]
    assert report["themes"]["emerging"] == ["Verification fatigue", "Role-based value divergence"]


def test_compare_cycles_threshold(snapshot_files, capsys):
    first, second = snapshot_files
    assert compare_cycles.main(["--earlier", str(first), "--later", str(second), "--threshold", "0.1"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert {m["direction"] for m in report["dimensions"].values()} == {"stable"}


def test_compare_cycles_reversed(snapshot_files):
    first, second = snapshot_files
    assert compare_cycles.main(["--earlier", str(second), "--later", str(first)]) == 2


def test_compare_cycles_missing_file(snapshot_files, tmp_path):
    first, _ = snapshot_files
    assert compare_cycles.main(["--earlier", str(first), "--later", str(tmp_path / "missing.json")]) == 1


def test_compare_cycles_malformed_snapshot(snapshot_files, tmp_path):
    first, second = snapshot_files
    data = json.loads(second.read_text(encoding="utf-8"))
    data["friction_hotspots"][0]["tier"] = "Severe"
    bad = tmp_path / "bad_snapshot.json"
    bad.write_text(json.dumps(data), encoding="utf-8")
    assert compare_cycles.main(["--earlier", str(first), "--later", str(bad)]) == 2
