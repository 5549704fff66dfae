"""
Application settings and scoring configuration.

The weighting constants and thresholds of the baseline engine are policy, so
they live here as configuration with the reference defaults:

- blend weights 0.5 / 0.5 (anchor vs theme component)
- net-value weights 0.35 / 0.30 / 0.35 (friction, risk, intensification)
- confidence thresholds 20 / 60 respondents
- trend threshold 0.03, movement threshold 0.03
- friction tier boundaries 0.5 / 0.65

Every dataclass validates itself on construction and raises
InvalidConfiguration when a value would break a range invariant.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from lyra_pulse.config.env import (
    get_bool_env,
    get_float_env,
    get_int_env,
    get_optional_float_env,
    get_str_env,
    load_pulse_env,
)
from lyra_pulse.core.exceptions import InvalidConfiguration

BLEND_SUM_TOLERANCE = 1e-9


def _require_fraction(name: str, value: float) -> None:
    if not isinstance(value, (int, float)) or math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidConfiguration(f"{name} must lie in [0, 1], got {value!r}", field=name, value=value)


def _require_non_negative(name: str, value: float) -> None:
    if not isinstance(value, (int, float)) or math.isnan(value) or value < 0:
        raise InvalidConfiguration(f"{name} must be non-negative, got {value!r}", field=name, value=value)


@dataclass(frozen=True)
class NetValueWeights:
    """
    Weights of the three subtractive net-value terms.

    The terms are independent costs, not a probability partition, so the
    weights need not sum to 1. With the defaults (sum 1.0) net lies in [-1, 1];
    in general net lies in [-(friction + risk + intensification), 1].
    """

    friction: float = 0.35
    risk: float = 0.30
    intensification: float = 0.35

    def __post_init__(self) -> None:
        _require_non_negative("friction weight", self.friction)
        _require_non_negative("risk weight", self.risk)
        _require_non_negative("intensification weight", self.intensification)

    @property
    def total(self) -> float:
        return self.friction + self.risk + self.intensification

    def to_dict(self) -> dict[str, float]:
        return {"friction": self.friction, "risk": self.risk, "intensification": self.intensification}


@dataclass(frozen=True)
class FrictionTiers:
    """Friction intensity tiers: > high is High, medium..high is Medium, < medium is Low."""

    medium: float = 0.5
    high: float = 0.65

    def __post_init__(self) -> None:
        _require_fraction("friction medium boundary", self.medium)
        _require_fraction("friction high boundary", self.high)
        if self.medium > self.high:
            raise InvalidConfiguration(
                "friction medium boundary must not exceed the high boundary",
                medium=self.medium,
                high=self.high,
            )

    def to_dict(self) -> dict[str, float]:
        return {"medium": self.medium, "high": self.high}


@dataclass(frozen=True)
class ScoringConfig:
    """
    All tunable weights and thresholds of the baseline engine.

    anchor_weight / theme_weight: blend of the dimension signal; must sum to 1.
    confidence_emerging_min / confidence_established_min: respondent counts at
        which confidence moves from early to emerging to established.
    trend_threshold: |delta| above this is a trend in the dimension direction label.
    movement_threshold: |delta| above this is up/down in the movement report.
    band_label_when_stable: label a stable trend with its band instead of "stable".
    """

    anchor_weight: float = 0.5
    theme_weight: float = 0.5
    net_weights: NetValueWeights = field(default_factory=NetValueWeights)
    confidence_emerging_min: int = 20
    confidence_established_min: int = 60
    trend_threshold: float = 0.03
    movement_threshold: float = 0.03
    friction_tiers: FrictionTiers = field(default_factory=FrictionTiers)
    band_label_when_stable: bool = False

    def __post_init__(self) -> None:
        _require_fraction("anchor_weight", self.anchor_weight)
        _require_fraction("theme_weight", self.theme_weight)
        if abs(self.anchor_weight + self.theme_weight - 1.0) > BLEND_SUM_TOLERANCE:
            raise InvalidConfiguration(
                "anchor_weight and theme_weight must sum to 1",
                anchor_weight=self.anchor_weight,
                theme_weight=self.theme_weight,
            )
        if self.confidence_emerging_min < 0 or self.confidence_established_min < self.confidence_emerging_min:
            raise InvalidConfiguration(
                "confidence thresholds must satisfy 0 <= emerging_min <= established_min",
                emerging_min=self.confidence_emerging_min,
                established_min=self.confidence_established_min,
            )
        _require_fraction("trend_threshold", self.trend_threshold)
        _require_fraction("movement_threshold", self.movement_threshold)

    def to_dict(self) -> dict[str, Any]:
        return {
            "anchor_weight": self.anchor_weight,
            "theme_weight": self.theme_weight,
            "net_weights": self.net_weights.to_dict(),
            "confidence_emerging_min": self.confidence_emerging_min,
            "confidence_established_min": self.confidence_established_min,
            "trend_threshold": self.trend_threshold,
            "movement_threshold": self.movement_threshold,
            "friction_tiers": self.friction_tiers.to_dict(),
            "band_label_when_stable": self.band_label_when_stable,
        }


DEFAULT_SCORING_CONFIG = ScoringConfig()


def load_scoring_config() -> ScoringConfig:
    """
    Build ScoringConfig from LYRA_* environment variables (and .env).

    Unset variables keep the reference defaults. If only one blend weight is
    set, the other is derived as its complement.
    """
    load_pulse_env()
    defaults = DEFAULT_SCORING_CONFIG
    anchor_weight = get_optional_float_env("LYRA_ANCHOR_WEIGHT")
    theme_weight = get_optional_float_env("LYRA_THEME_WEIGHT")
    if anchor_weight is None and theme_weight is None:
        anchor_weight, theme_weight = defaults.anchor_weight, defaults.theme_weight
    elif anchor_weight is None:
        anchor_weight = 1.0 - theme_weight
    elif theme_weight is None:
        theme_weight = 1.0 - anchor_weight

    return ScoringConfig(
        anchor_weight=anchor_weight,
        theme_weight=theme_weight,
        net_weights=NetValueWeights(
            friction=get_float_env("LYRA_NET_WEIGHT_FRICTION", defaults.net_weights.friction),
            risk=get_float_env("LYRA_NET_WEIGHT_RISK", defaults.net_weights.risk),
            intensification=get_float_env(
                "LYRA_NET_WEIGHT_INTENSIFICATION", defaults.net_weights.intensification
            ),
        ),
        confidence_emerging_min=get_int_env("LYRA_CONFIDENCE_EMERGING_MIN", defaults.confidence_emerging_min),
        confidence_established_min=get_int_env(
            "LYRA_CONFIDENCE_ESTABLISHED_MIN", defaults.confidence_established_min
        ),
        trend_threshold=get_float_env("LYRA_TREND_THRESHOLD", defaults.trend_threshold),
        movement_threshold=get_float_env("LYRA_MOVEMENT_THRESHOLD", defaults.movement_threshold),
        friction_tiers=FrictionTiers(
            medium=get_float_env("LYRA_FRICTION_MEDIUM", defaults.friction_tiers.medium),
            high=get_float_env("LYRA_FRICTION_HIGH", defaults.friction_tiers.high),
        ),
        band_label_when_stable=get_bool_env("LYRA_BAND_LABEL_WHEN_STABLE", defaults.band_label_when_stable),
    )


@dataclass(frozen=True)
class Settings:
    """Process-level settings: scoring policy plus API bind address."""

    scoring: ScoringConfig
    api_host: str = "127.0.0.1"
    api_port: int = 8000


def get_settings() -> Settings:
    """
    Return the current application settings.

    Reads LYRA_API_HOST / LYRA_API_PORT and every scoring override on each
    call, so tests can monkeypatch the environment.
    """
    load_pulse_env()
    return Settings(
        scoring=load_scoring_config(),
        api_host=get_str_env("LYRA_API_HOST", "127.0.0.1"),
        api_port=get_int_env("LYRA_API_PORT", 8000),
    )
