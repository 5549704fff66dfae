"""
In-memory, append-only cycle history per organization.

Cycles of one organization are processed strictly in order: record_cycle
holds that organization's lock while it reads the latest snapshot, computes
the next one against it and appends it, so two writers can never produce two
divergent snapshots for the same cycle. Different organizations never share a
lock. Resolution markers (themes an external process closed) are kept per
(organization, cycle) and merged into movement reports.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Iterable

from lyra_pulse.baseline.models import BaselineSnapshot, CycleInputs, MovementReport
from lyra_pulse.baseline.movement import compare_snapshots
from lyra_pulse.baseline.snapshot import build_baseline_snapshot
from lyra_pulse.baseline.validation import check_label, dedupe_names
from lyra_pulse.config.settings import DEFAULT_SCORING_CONFIG, ScoringConfig, load_scoring_config
from lyra_pulse.core.exceptions import InconsistentCycleOrder, InsufficientData, SnapshotNotFound
from lyra_pulse.pulse_logging import bind_organization


class BaselineHistory:
    """Thread-safe store of BaselineSnapshots keyed by organization id."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self._config = config or DEFAULT_SCORING_CONFIG
        self._snapshots: dict[str, list[BaselineSnapshot]] = {}
        self._resolved: dict[tuple[str, int], tuple[str, ...]] = {}
        self._org_locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    @property
    def config(self) -> ScoringConfig:
        return self._config

    def _lock_for(self, organization_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._org_locks.get(organization_id)
            if lock is None:
                lock = threading.Lock()
                self._org_locks[organization_id] = lock
            return lock

    def record_cycle(self, organization_id: str, inputs: CycleInputs) -> BaselineSnapshot:
        """
        Compute and append the next cycle of an organization.

        inputs.cycle_number must be exactly one past the latest recorded cycle
        (1 for a new organization). inputs.organization_id, when set, must
        match organization_id.
        """
        organization_id = check_label(organization_id, "organization_id")
        log = bind_organization(organization_id)
        if inputs.organization_id not in (None, organization_id):
            raise InconsistentCycleOrder(
                "Cycle inputs belong to a different organization",
                organization_id=organization_id,
                inputs_organization_id=inputs.organization_id,
            )

        with self._lock_for(organization_id):
            cycles = self._snapshots.get(organization_id, [])
            expected = len(cycles) + 1
            if inputs.cycle_number != expected:
                log.warning("cycle_rejected", cycle_number=inputs.cycle_number, expected=expected)
                raise InconsistentCycleOrder(
                    f"Expected cycle {expected} for {organization_id!r}, got {inputs.cycle_number}",
                    organization_id=organization_id,
                    cycle_number=inputs.cycle_number,
                    expected=expected,
                )
            if inputs.organization_id is None:
                inputs = replace(inputs, organization_id=organization_id)
            prior = cycles[-1] if cycles else None
            snapshot = build_baseline_snapshot(inputs, prior=prior, config=self._config)
            self._snapshots[organization_id] = [*cycles, snapshot]

        log.info("cycle_recorded", cycle_number=snapshot.cycle_number)
        return snapshot

    def list_cycles(self, organization_id: str) -> list[BaselineSnapshot]:
        return list(self._snapshots.get(organization_id, ()))

    def get_snapshot(self, organization_id: str, cycle_number: int) -> BaselineSnapshot:
        cycles = self._snapshots.get(organization_id, ())
        if not 1 <= cycle_number <= len(cycles):
            raise SnapshotNotFound(
                f"No cycle {cycle_number} recorded for {organization_id!r}",
                organization_id=organization_id,
                cycle_number=cycle_number,
            )
        return cycles[cycle_number - 1]

    def latest(self, organization_id: str) -> BaselineSnapshot | None:
        cycles = self._snapshots.get(organization_id)
        return cycles[-1] if cycles else None

    def mark_resolved(self, organization_id: str, cycle_number: int, themes: Iterable[str]) -> tuple[str, ...]:
        """
        Record themes an external process closed as of cycle_number.

        Markers accumulate; the cycle must already be recorded.
        """
        self.get_snapshot(organization_id, cycle_number)
        key = (organization_id, cycle_number)
        with self._lock_for(organization_id):
            merged = dedupe_names([*self._resolved.get(key, ()), *themes])
            self._resolved[key] = merged
        bind_organization(organization_id).info(
            "themes_marked_resolved", cycle_number=cycle_number, themes=list(merged)
        )
        return merged

    def resolved_themes(self, organization_id: str, cycle_number: int) -> tuple[str, ...]:
        return self._resolved.get((organization_id, cycle_number), ())

    def movement(
        self,
        organization_id: str,
        earlier: int | None = None,
        later: int | None = None,
    ) -> MovementReport:
        """
        MovementReport between two recorded cycles (default: the last two).

        Resolution markers recorded for any cycle after earlier, up to and
        including later, are merged in.
        """
        cycles = self._snapshots.get(organization_id, ())
        if later is None:
            later = len(cycles)
        if earlier is None:
            earlier = later - 1
        if len(cycles) < 2 or earlier < 1:
            raise InsufficientData(
                f"Movement needs two recorded cycles for {organization_id!r}",
                organization_id=organization_id,
                recorded_cycles=len(cycles),
            )
        earlier_snapshot = self.get_snapshot(organization_id, earlier)
        later_snapshot = self.get_snapshot(organization_id, later)
        markers: list[str] = []
        for cycle in range(earlier + 1, later + 1):
            markers.extend(self.resolved_themes(organization_id, cycle))
        return compare_snapshots(
            earlier_snapshot,
            later_snapshot,
            resolved_themes=dedupe_names(markers),
            threshold=self._config.movement_threshold,
        )


_default_history: BaselineHistory | None = None
_default_lock = threading.Lock()


def get_history() -> BaselineHistory:
    """Process-wide history used by the API server."""
    global _default_history
    with _default_lock:
        if _default_history is None:
            _default_history = BaselineHistory(load_scoring_config())
        return _default_history


def reset_history_for_test() -> None:
    """Drop the process-wide history so the next get_history() starts empty."""
    global _default_history
    with _default_lock:
        _default_history = None
