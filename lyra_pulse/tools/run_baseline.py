#!/usr/bin/env python3
"""
Compute the baseline snapshot of one pulse cycle from a JSON input file.

Input: cycle inputs JSON (see lyra_pulse/data/sample_cycle_1.json).
Optional: --prior snapshot JSON of the immediately preceding cycle, which
switches dimension directions to trend labels and fills in deltas.

Output: snapshot JSON to --output, or stdout.

Usage:
  py -m lyra_pulse.tools.run_baseline --input lyra_pulse/data/sample_cycle_1.json
  py -m lyra_pulse.tools.run_baseline --input cycle2.json --prior snapshot1.json --output snapshot2.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from lyra_pulse.baseline import BaselineSnapshot, CycleInputs, build_baseline_snapshot
from lyra_pulse.config import load_scoring_config
from lyra_pulse.core.exceptions import PulseError
from lyra_pulse.pulse_logging import get_logger

logger = get_logger(__name__)

_TOOLS_DIR = Path(__file__).resolve().parent
_DATA_DIR = _TOOLS_DIR.parent / "data"
SAMPLE_CYCLE_1 = _DATA_DIR / "sample_cycle_1.json"
SAMPLE_CYCLE_2 = _DATA_DIR / "sample_cycle_2.json"


def _log(msg: str) -> None:
    print(f"[run_baseline] {msg}", file=sys.stderr)


def load_json(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def write_json(data: dict[str, Any], output: Path | None) -> None:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if output is None:
        print(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")


def run(input_path: Path, prior_path: Path | None = None, output_path: Path | None = None) -> BaselineSnapshot:
    inputs = CycleInputs.from_dict(load_json(input_path))
    prior = BaselineSnapshot.from_dict(load_json(prior_path)) if prior_path else None
    snapshot = build_baseline_snapshot(inputs, prior=prior, config=load_scoring_config())
    write_json(snapshot.to_dict(), output_path)
    logger.info(
        "run_baseline_done",
        input=str(input_path),
        prior=str(prior_path) if prior_path else None,
        output=str(output_path) if output_path else "stdout",
        cycle_number=snapshot.cycle_number,
    )
    return snapshot


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Compute a Lyra Pulse baseline snapshot for one cycle")
    ap.add_argument("--input", type=Path, default=SAMPLE_CYCLE_1, help="Cycle inputs JSON")
    ap.add_argument("--prior", type=Path, default=None, help="Snapshot JSON of the preceding cycle")
    ap.add_argument("--output", type=Path, default=None, help="Write snapshot JSON here instead of stdout")
    args = ap.parse_args(argv)

    for path in (args.input, args.prior):
        if path is not None and not path.exists():
            _log(f"ERROR: {path} not found")
            return 1
    try:
        snapshot = run(args.input, args.prior, args.output)
    except PulseError as e:
        _log(f"ERROR: {e.code}: {e.message}")
        return 2
    except json.JSONDecodeError as e:
        _log(f"ERROR: invalid JSON: {e}")
        return 1
    _log(f"cycle {snapshot.cycle_number}: net={snapshot.net_value.net} ({snapshot.net_value.label.value})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
