#!/usr/bin/env python3
"""
Movement report between two baseline snapshots.

Per-dimension deltas (up / down / stable) and the theme partition
(persisting, emerging, declining, resolved). Themes only become "resolved"
when named with --resolved; absence from the later cycle alone is "declining".

Usage:
  py -m lyra_pulse.tools.compare_cycles --earlier snapshot1.json --later snapshot2.json
  py -m lyra_pulse.tools.compare_cycles --earlier s1.json --later s2.json --resolved "Shadow AI normalising"
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from lyra_pulse.baseline import BaselineSnapshot, MovementReport, compare_snapshots
from lyra_pulse.config import load_scoring_config
from lyra_pulse.core.exceptions import PulseError
from lyra_pulse.pulse_logging import get_logger
from lyra_pulse.tools.run_baseline import load_json, write_json

logger = get_logger(__name__)

ARROWS = {"up": "↑", "down": "↓", "stable": "→"}


def _log(msg: str) -> None:
    print(f"[compare_cycles] {msg}", file=sys.stderr)


def run(
    earlier_path: Path,
    later_path: Path,
    resolved: list[str] | None = None,
    threshold: float | None = None,
    output_path: Path | None = None,
) -> MovementReport:
    earlier = BaselineSnapshot.from_dict(load_json(earlier_path))
    later = BaselineSnapshot.from_dict(load_json(later_path))
    if threshold is None:
        threshold = load_scoring_config().movement_threshold
    report = compare_snapshots(earlier, later, resolved_themes=resolved or (), threshold=threshold)
    write_json(report.to_dict(), output_path)
    return report


def _summary(report: MovementReport) -> list[str]:
    lines = [f"cycle {report.earlier_cycle} -> cycle {report.later_cycle}"]
    for dim, move in report.dimensions.items():
        lines.append(f"  {dim.label:<15} {ARROWS[move.direction.value]} {move.delta:+.2f}")
    for name in ("persisting", "emerging", "declining", "resolved"):
        themes = getattr(report, name)
        lines.append(f"  {name}: {', '.join(themes) if themes else '-'}")
    return lines


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Compare two Lyra Pulse baseline snapshots")
    ap.add_argument("--earlier", type=Path, required=True, help="Snapshot JSON of the earlier cycle")
    ap.add_argument("--later", type=Path, required=True, help="Snapshot JSON of the later cycle")
    ap.add_argument("--resolved", action="append", default=[], help="Theme closed by an external process (repeatable)")
    ap.add_argument("--threshold", type=float, default=None, help="Movement threshold (default from config)")
    ap.add_argument("--output", type=Path, default=None, help="Write report JSON here instead of stdout")
    args = ap.parse_args(argv)

    for path in (args.earlier, args.later):
        if not path.exists():
            _log(f"ERROR: {path} not found")
            return 1
    try:
        report = run(args.earlier, args.later, args.resolved, args.threshold, args.output)
    except PulseError as e:
        _log(f"ERROR: {e.code}: {e.message}")
        return 2
    except json.JSONDecodeError as e:
        _log(f"ERROR: invalid JSON: {e}")
        return 1
    for line in _summary(report):
        _log(line)
    logger.info("compare_cycles_done", earlier_cycle=report.earlier_cycle, later_cycle=report.later_cycle)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
