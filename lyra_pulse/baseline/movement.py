"""
Longitudinal comparator: movement between two baseline snapshots.

Per dimension: delta = later.signal - earlier.signal, up / down / stable
against the movement threshold (a delta exactly at the threshold is stable).

Themes are compared by name across the two pattern lists:
- in both cycles -> persisting
- only in the later cycle -> emerging
- only in the earlier cycle -> declining
- resolved only when an external process marked the theme closed; absence
  alone cannot tell resolution from data loss, so it is never inferred.

One-shot and stateless.
"""

from __future__ import annotations

from typing import Iterable

from lyra_pulse.baseline.dimensions import ALL_DIMENSIONS, Dimension
from lyra_pulse.baseline.models import (
    BaselineSnapshot,
    DimensionMovement,
    MovementDirection,
    MovementReport,
)
from lyra_pulse.baseline.validation import name_key, round_measure
from lyra_pulse.config.settings import DEFAULT_SCORING_CONFIG
from lyra_pulse.core.exceptions import InconsistentCycleOrder
from lyra_pulse.pulse_logging import get_logger

logger = get_logger(__name__)


def movement_direction(delta: float, threshold: float) -> MovementDirection:
    if delta > threshold:
        return MovementDirection.UP
    if delta < -threshold:
        return MovementDirection.DOWN
    return MovementDirection.STABLE


def _check_order(earlier: BaselineSnapshot, later: BaselineSnapshot) -> None:
    if (
        earlier.organization_id is not None
        and later.organization_id is not None
        and earlier.organization_id != later.organization_id
    ):
        raise InconsistentCycleOrder(
            "Snapshots belong to different organizations",
            earlier_organization_id=earlier.organization_id,
            later_organization_id=later.organization_id,
        )
    if earlier.cycle_number > later.cycle_number:
        raise InconsistentCycleOrder(
            f"Earlier snapshot is cycle {earlier.cycle_number}, later is cycle {later.cycle_number}",
            earlier_cycle=earlier.cycle_number,
            later_cycle=later.cycle_number,
        )
    if earlier.cycle_number == later.cycle_number and earlier != later:
        raise InconsistentCycleOrder(
            f"Two different snapshots claim cycle {earlier.cycle_number}",
            earlier_cycle=earlier.cycle_number,
            later_cycle=later.cycle_number,
        )


def _partition_themes(
    earlier: BaselineSnapshot,
    later: BaselineSnapshot,
    resolved_themes: Iterable[str],
) -> tuple[list[str], list[str], list[str], list[str]]:
    earlier_names = {name_key(n): n for n in earlier.pattern_names}
    later_names = {name_key(n): n for n in later.pattern_names}

    resolved_keys: set[str] = set()
    for name in resolved_themes:
        key = name_key(name)
        if key in later_names:
            logger.warning("resolved_marker_ignored", theme=name, reason="still_present_in_later_cycle")
        elif key not in earlier_names:
            logger.warning("resolved_marker_ignored", theme=name, reason="not_in_earlier_cycle")
        else:
            resolved_keys.add(key)

    persisting = [n for k, n in later_names.items() if k in earlier_names]
    emerging = [n for k, n in later_names.items() if k not in earlier_names]
    declining = [n for k, n in earlier_names.items() if k not in later_names and k not in resolved_keys]
    resolved = [n for k, n in earlier_names.items() if k in resolved_keys]
    return persisting, emerging, declining, resolved


def compare_snapshots(
    earlier: BaselineSnapshot,
    later: BaselineSnapshot,
    resolved_themes: Iterable[str] | None = None,
    threshold: float | None = None,
) -> MovementReport:
    """
    Build the MovementReport from an earlier and a later snapshot.

    Args:
        earlier: Snapshot of the earlier cycle.
        later: Snapshot of the later cycle. Passing the same snapshot twice
            yields all-zero deltas and every theme persisting.
        resolved_themes: Theme names an external process marked closed.
        threshold: Movement threshold; defaults to the configured 0.03.

    Raises:
        InconsistentCycleOrder: snapshots out of sequence, of different
            organizations, or two divergent snapshots for the same cycle.
    """
    _check_order(earlier, later)
    if threshold is None:
        threshold = DEFAULT_SCORING_CONFIG.movement_threshold

    dimensions: dict[Dimension, DimensionMovement] = {}
    for dim in ALL_DIMENSIONS:
        before = earlier.dimension_signals[dim].signal
        after = later.dimension_signals[dim].signal
        delta = round_measure(after - before)
        dimensions[dim] = DimensionMovement(
            dimension=dim,
            earlier_signal=before,
            later_signal=after,
            delta=delta,
            direction=movement_direction(delta, threshold),
        )

    persisting, emerging, declining, resolved = _partition_themes(earlier, later, resolved_themes or ())
    report = MovementReport(
        earlier_cycle=earlier.cycle_number,
        later_cycle=later.cycle_number,
        dimensions=dimensions,
        persisting=tuple(persisting),
        emerging=tuple(emerging),
        declining=tuple(declining),
        resolved=tuple(resolved),
        organization_id=later.organization_id or earlier.organization_id,
    )
    logger.info(
        "snapshots_compared",
        organization_id=report.organization_id,
        earlier_cycle=report.earlier_cycle,
        later_cycle=report.later_cycle,
        directions={d.value: m.direction.value for d, m in dimensions.items()},
        persisting=len(persisting),
        emerging=len(emerging),
        declining=len(declining),
        resolved=len(resolved),
    )
    return report
