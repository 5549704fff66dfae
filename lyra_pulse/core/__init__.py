"""
Core: error kinds shared by the baseline engine, history store, API and tools.
"""

from lyra_pulse.core.exceptions import (
    DuplicateTheme,
    InconsistentCycleOrder,
    InsufficientData,
    InvalidConfiguration,
    InvalidMeasure,
    InvalidScore,
    PulseError,
    SnapshotNotFound,
    UnknownAnchorItem,
    UnknownDimension,
)

__all__ = [
    "DuplicateTheme",
    "InconsistentCycleOrder",
    "InsufficientData",
    "InvalidConfiguration",
    "InvalidMeasure",
    "InvalidScore",
    "PulseError",
    "SnapshotNotFound",
    "UnknownAnchorItem",
    "UnknownDimension",
]
