"""
Configuration management for Lyra Pulse.

Loads scoring weights and thresholds from environment variables (and an
optional .env file) and exposes them as typed, validated dataclasses.
"""

from lyra_pulse.config.settings import (  # noqa: F401
    FrictionTiers,
    NetValueWeights,
    ScoringConfig,
    Settings,
    get_settings,
    load_scoring_config,
)

__all__ = [
    "FrictionTiers",
    "NetValueWeights",
    "ScoringConfig",
    "Settings",
    "get_settings",
    "load_scoring_config",
]
