"""
Application-level exceptions.

Every error carries a stable ``code`` (used by the API error payload and in
logs) and a ``details`` dict with the offending values.
"""

from __future__ import annotations

from typing import Any


class PulseError(Exception):
    """Base class for all Lyra Pulse errors."""

    code = "pulse_error"

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message, "details": self.details}


class InvalidScore(PulseError):
    """Anchor score outside [1, 5] or not a number."""

    code = "invalid_score"


class UnknownDimension(PulseError):
    """Record references a dimension outside the fixed six."""

    code = "unknown_dimension"


class UnknownAnchorItem(PulseError):
    """Anchor item id is not one of the dimension's anchor items."""

    code = "unknown_anchor_item"


class InvalidMeasure(PulseError):
    """Density, intensity, rate or label outside its declared domain."""

    code = "invalid_measure"


class DuplicateTheme(PulseError):
    """The same theme name was recorded twice in one cycle."""

    code = "duplicate_theme"


class InsufficientData(PulseError):
    """A required aggregate has no input and no partial result can stand in."""

    code = "insufficient_data"


class InconsistentCycleOrder(PulseError):
    """Snapshots supplied out of sequence, or two divergent snapshots for one cycle."""

    code = "inconsistent_cycle_order"


class InvalidConfiguration(PulseError):
    """Weight or threshold configuration that would break a range invariant."""

    code = "invalid_configuration"


class SnapshotNotFound(PulseError):
    code = "snapshot_not_found"
