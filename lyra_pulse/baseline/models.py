"""
Data models for baseline engine input and output.

Input records (AnchorResponse, ThemeRecord, FrictionObservation) validate
themselves on construction. Derived results are frozen; mappings are exposed
as read-only views so a computed snapshot is never mutated. Every model has
to_dict(); the ones that cross process boundaries (records, snapshots,
reports) also have from_dict().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Sequence, Union

from lyra_pulse.baseline.dimensions import (
    ALL_DIMENSIONS,
    ANCHOR_SCORE_MAX,
    ANCHOR_SCORE_MIN,
    Dimension,
    parse_dimension,
)
from lyra_pulse.baseline.validation import (
    check_anchor_item,
    check_anchor_score,
    check_count,
    check_number,
    check_fraction,
    check_label,
    dedupe_names,
)
from lyra_pulse.core.exceptions import InvalidMeasure

FLAG_INSUFFICIENT_DATA = "insufficient_data"
FLAG_NO_PATTERNS_OBSERVED = "no_patterns_observed"

# Theme lists of a movement report, in report order.
THEME_MOVEMENTS = ("persisting", "emerging", "declining", "resolved")


class Recurrence(str, Enum):
    EMERGING = "emerging"
    RECURRING = "recurring"
    STRONG = "strong"

    @property
    def rank(self) -> int:
        return _RECURRENCE_RANK[self]


_RECURRENCE_RANK = {Recurrence.EMERGING: 0, Recurrence.RECURRING: 1, Recurrence.STRONG: 2}


class Confidence(str, Enum):
    EARLY = "early"
    EMERGING = "emerging"
    ESTABLISHED = "established"

    def downgraded(self) -> Confidence:
        """One tier lower; early stays early."""
        if self is Confidence.ESTABLISHED:
            return Confidence.EMERGING
        return Confidence.EARLY


class MovementDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class NetLabel(str, Enum):
    NEGATIVE = "Negative"
    UNCERTAIN = "Uncertain"
    MARGINAL = "Marginal"
    POSITIVE = "Positive"

    @property
    def rank(self) -> int:
        return list(NetLabel).index(self)


# net > 0.15 Positive; 0 < net <= 0.15 Marginal; -0.1 < net <= 0 Uncertain; else Negative.
POSITIVE_ABOVE = 0.15
MARGINAL_ABOVE = 0.0
UNCERTAIN_ABOVE = -0.1


def net_label(net: float) -> NetLabel:
    if net > POSITIVE_ABOVE:
        return NetLabel.POSITIVE
    if net > MARGINAL_ABOVE:
        return NetLabel.MARGINAL
    if net > UNCERTAIN_ABOVE:
        return NetLabel.UNCERTAIN
    return NetLabel.NEGATIVE


class FrictionTier(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def _parse_enum(enum_cls: type[Enum], value: Any, name: str) -> Any:
    """Member of enum_cls whose value matches value case-insensitively; InvalidMeasure otherwise."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().casefold()
        for member in enum_cls:
            if str(member.value).casefold() == key:
                return member
    allowed = ", ".join(str(m.value) for m in enum_cls)
    raise InvalidMeasure(f"{name} must be one of {allowed}; got {value!r}", field=name, value=value)


def _mapping(value: Any, name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidMeasure(f"{name} must be an object, got {type(value).__name__}", field=name)
    return value


def _sequence(value: Any, name: str) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidMeasure(f"{name} must be a list, got {type(value).__name__}", field=name)
    return tuple(value)


def _freeze_dimension_map(values: Mapping[Any, Any], name: str) -> Mapping[Dimension, Any]:
    """Read-only mapping over exactly the six dimensions, in canonical order."""
    by_dim = {parse_dimension(k): v for k, v in values.items()}
    missing = [d.value for d in ALL_DIMENSIONS if d not in by_dim]
    if missing or len(by_dim) != len(ALL_DIMENSIONS):
        raise InvalidMeasure(f"{name} must cover exactly the six dimensions", field=name, missing=missing)
    return MappingProxyType({d: by_dim[d] for d in ALL_DIMENSIONS})


# -----------------------------------------------------------------------------
# Input records
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class AnchorResponse:
    """One respondent's answer to one scaled anchor item."""

    dimension: Dimension
    item_id: str
    respondent_id: str
    score: float

    def __post_init__(self) -> None:
        dimension = parse_dimension(self.dimension)
        object.__setattr__(self, "dimension", dimension)
        object.__setattr__(self, "respondent_id", str(self.respondent_id).strip())
        object.__setattr__(self, "item_id", check_anchor_item(self.item_id, dimension))
        object.__setattr__(
            self,
            "score",
            check_anchor_score(self.score, item_id=self.item_id, respondent_id=self.respondent_id),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "dimension": self.dimension.value,
            "item_id": self.item_id,
            "respondent_id": self.respondent_id,
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AnchorResponse:
        data = _mapping(data, "anchor_response")
        return cls(
            dimension=data.get("dimension"),
            item_id=data.get("item_id") or "",
            respondent_id=data.get("respondent_id") or "",
            score=data.get("score"),
        )


@dataclass(frozen=True)
class ThemeRecord:
    """A theme extracted by the text-analysis service for one cycle."""

    theme: str
    dimension: Dimension
    recurrence: Recurrence
    density: float
    sentiment: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "theme", check_label(self.theme, "theme"))
        object.__setattr__(self, "dimension", parse_dimension(self.dimension))
        object.__setattr__(self, "recurrence", _parse_enum(Recurrence, self.recurrence, "recurrence"))
        object.__setattr__(self, "density", check_fraction(self.density, "density", theme=self.theme))
        sentiment = self.sentiment or ""
        if not isinstance(sentiment, str):
            raise InvalidMeasure(f"sentiment must be a string, got {sentiment!r}", field="sentiment", theme=self.theme)
        object.__setattr__(self, "sentiment", sentiment.strip().lower())

    def to_dict(self) -> dict[str, Any]:
        return {
            "theme": self.theme,
            "dimension": self.dimension.value,
            "recurrence": self.recurrence.value,
            "density": self.density,
            "sentiment": self.sentiment,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThemeRecord:
        data = _mapping(data, "theme")
        return cls(
            theme=data.get("theme"),
            dimension=data.get("dimension"),
            recurrence=data.get("recurrence"),
            density=data.get("density"),
            sentiment=data.get("sentiment") or "",
        )


@dataclass(frozen=True)
class FrictionObservation:
    """
    Friction reported for one operational area.

    respondents: number of respondents backing the observation; the weight of
    this observation when observations for the same area are merged.
    """

    area: str
    intensity: float
    roles: tuple[str, ...] = ()
    respondents: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "area", check_label(self.area, "area"))
        object.__setattr__(self, "intensity", check_fraction(self.intensity, "intensity", area=self.area))
        object.__setattr__(self, "roles", dedupe_names(self.roles or ()))
        object.__setattr__(self, "respondents", check_count(self.respondents, "respondents", minimum=1))

    def to_dict(self) -> dict[str, Any]:
        return {
            "area": self.area,
            "intensity": self.intensity,
            "roles": list(self.roles),
            "respondents": self.respondents,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FrictionObservation:
        data = _mapping(data, "friction_observation")
        return cls(
            area=data.get("area"),
            intensity=data.get("intensity"),
            roles=_sequence(data.get("roles"), "roles"),
            respondents=data.get("respondents", 1),
        )


# A family is either a precomputed signal or the per-observation intensities to average.
FamilyInput = Union[float, Sequence[float]]


@dataclass(frozen=True)
class SignalFamilies:
    """The four independent net-value signal families for one cycle."""

    benefit: FamilyInput = ()
    friction: FamilyInput = ()
    risk: FamilyInput = ()
    intensification: FamilyInput = ()

    def __post_init__(self) -> None:
        for name in ("benefit", "friction", "risk", "intensification"):
            value = getattr(self, name)
            if isinstance(value, (list, tuple)):
                object.__setattr__(self, name, tuple(value))

    def to_dict(self) -> dict[str, Any]:
        return {
            name: list(value) if isinstance(value, tuple) else value
            for name, value in (
                ("benefit", self.benefit),
                ("friction", self.friction),
                ("risk", self.risk),
                ("intensification", self.intensification),
            )
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SignalFamilies:
        data = _mapping(data, "signal_families")
        return cls(
            benefit=data.get("benefit", ()),
            friction=data.get("friction", ()),
            risk=data.get("risk", ()),
            intensification=data.get("intensification", ()),
        )


@dataclass(frozen=True)
class CycleInputs:
    """
    Everything collected for one pulse cycle of one organization.

    respondent_count defaults to the number of distinct respondents across
    anchor_responses when not supplied.
    """

    cycle_number: int
    anchor_responses: tuple[AnchorResponse, ...] = ()
    themes: tuple[ThemeRecord, ...] = ()
    friction_observations: tuple[FrictionObservation, ...] = ()
    signal_families: SignalFamilies = field(default_factory=SignalFamilies)
    respondent_count: int | None = None
    participation_rate: float = 0.0
    organization_id: str | None = None

    def __post_init__(self) -> None:
        check_count(self.cycle_number, "cycle_number", minimum=1)
        object.__setattr__(self, "anchor_responses", tuple(self.anchor_responses))
        object.__setattr__(self, "themes", tuple(self.themes))
        object.__setattr__(self, "friction_observations", tuple(self.friction_observations))
        if self.respondent_count is None:
            object.__setattr__(
                self,
                "respondent_count",
                len({r.respondent_id for r in self.anchor_responses}),
            )
        check_count(self.respondent_count, "respondent_count")
        object.__setattr__(
            self, "participation_rate", check_fraction(self.participation_rate, "participation_rate")
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CycleInputs:
        data = _mapping(data, "cycle_inputs")
        return cls(
            cycle_number=data.get("cycle_number"),
            anchor_responses=tuple(
                AnchorResponse.from_dict(r) for r in _sequence(data.get("anchor_responses"), "anchor_responses")
            ),
            themes=tuple(ThemeRecord.from_dict(t) for t in _sequence(data.get("themes"), "themes")),
            friction_observations=tuple(
                FrictionObservation.from_dict(o)
                for o in _sequence(data.get("friction_observations"), "friction_observations")
            ),
            signal_families=SignalFamilies.from_dict(data.get("signal_families") or {}),
            respondent_count=data.get("respondent_count"),
            participation_rate=data.get("participation_rate", 0.0),
            organization_id=data.get("organization_id"),
        )


# -----------------------------------------------------------------------------
# Derived results
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class AnchorAggregate:
    """
    Anchor mean for one dimension in one cycle.

    anchor_mean is None (never 0) when there were no responses; the dimension
    is then flagged insufficient_data.
    """

    dimension: Dimension
    anchor_mean: float | None
    response_count: int
    respondent_count: int

    @property
    def insufficient_data(self) -> bool:
        return self.anchor_mean is None

    @property
    def anchor_component(self) -> float | None:
        """anchor_mean rescaled to [0, 1]."""
        if self.anchor_mean is None:
            return None
        return (self.anchor_mean - ANCHOR_SCORE_MIN) / (ANCHOR_SCORE_MAX - ANCHOR_SCORE_MIN)

    def to_dict(self) -> dict[str, Any]:
        return {
            "dimension": self.dimension.value,
            "anchor_mean": self.anchor_mean,
            "response_count": self.response_count,
            "respondent_count": self.respondent_count,
            "insufficient_data": self.insufficient_data,
        }


@dataclass(frozen=True)
class DimensionPatterns:
    """Theme aggregate for one dimension: mean density and dominant sentiment."""

    dimension: Dimension
    density: float
    pattern_count: int
    dominant_sentiment: str | None = None

    @property
    def no_patterns_observed(self) -> bool:
        return self.pattern_count == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "dimension": self.dimension.value,
            "density": self.density,
            "pattern_count": self.pattern_count,
            "dominant_sentiment": self.dominant_sentiment,
            "no_patterns_observed": self.no_patterns_observed,
        }


@dataclass(frozen=True)
class ThemeAggregate:
    per_dimension: Mapping[Dimension, DimensionPatterns]
    ranked: tuple[ThemeRecord, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "per_dimension", _freeze_dimension_map(self.per_dimension, "per_dimension"))
        object.__setattr__(self, "ranked", tuple(self.ranked))

    def to_dict(self) -> dict[str, Any]:
        return {
            "per_dimension": {d.value: p.to_dict() for d, p in self.per_dimension.items()},
            "ranked": [t.to_dict() for t in self.ranked],
        }


@dataclass(frozen=True)
class DimensionSignal:
    """
    Synthesized signal for one dimension in one cycle.

    signal: blended strength in [0, 1].
    anchor_mean: mean anchor score in [1, 5]; None when insufficient_data.
    direction: trend label when a prior cycle exists, otherwise band label.
    confidence: early | emerging | established.
    level: five-step strength label (Weak .. Strong).
    delta: signal change vs the prior cycle; None for a first cycle.
    flags: insufficient_data and/or no_patterns_observed.
    """

    dimension: Dimension
    signal: float
    anchor_mean: float | None
    direction: str
    confidence: Confidence
    level: str
    delta: float | None = None
    flags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "dimension", parse_dimension(self.dimension))
        object.__setattr__(self, "confidence", _parse_enum(Confidence, self.confidence, "confidence"))
        check_fraction(self.signal, "signal", dimension=self.dimension.value)
        if self.anchor_mean is not None:
            check_anchor_score(self.anchor_mean)
        object.__setattr__(self, "flags", tuple(self.flags))

    @property
    def insufficient_data(self) -> bool:
        return FLAG_INSUFFICIENT_DATA in self.flags

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "signal": self.signal,
            "anchor_mean": self.anchor_mean,
            "direction": self.direction,
            "confidence": self.confidence.value,
            "level": self.level,
            "flags": list(self.flags),
        }
        if self.delta is not None:
            out["delta"] = self.delta
        return out

    @classmethod
    def from_dict(cls, dimension: Any, data: Mapping[str, Any]) -> DimensionSignal:
        data = _mapping(data, f"dimension_signals.{dimension}")
        delta = data.get("delta")
        return cls(
            dimension=dimension,
            signal=data.get("signal"),
            anchor_mean=data.get("anchor_mean"),
            direction=data.get("direction") or "",
            confidence=data.get("confidence"),
            level=data.get("level") or "",
            delta=check_number(delta, "delta", dimension=str(dimension)) if delta is not None else None,
            flags=_sequence(data.get("flags"), "flags"),
        )


@dataclass(frozen=True)
class NetValue:
    """
    Net value for one cycle.

    net = benefit - friction*wF - risk*wR - intensification*wI; not clamped,
    negative values represent net harm. insufficient_families lists families
    that had no observations and contributed 0. label must be the one net
    falls into.
    """

    benefit_signal: float
    friction_signal: float
    risk_signal: float
    intensification_signal: float
    net: float
    label: NetLabel
    insufficient_families: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("benefit_signal", "friction_signal", "risk_signal", "intensification_signal"):
            check_fraction(getattr(self, name), name)
        object.__setattr__(self, "net", check_number(self.net, "net"))
        label = _parse_enum(NetLabel, self.label, "label")
        if label is not net_label(self.net):
            raise InvalidMeasure(
                f"label {label.value!r} does not match net {self.net}",
                field="label",
                value=label.value,
                expected=net_label(self.net).value,
            )
        object.__setattr__(self, "label", label)
        object.__setattr__(self, "insufficient_families", tuple(self.insufficient_families))

    def to_dict(self) -> dict[str, Any]:
        return {
            "benefit_signal": self.benefit_signal,
            "friction_signal": self.friction_signal,
            "risk_signal": self.risk_signal,
            "intensification_signal": self.intensification_signal,
            "net": self.net,
            "label": self.label.value,
            "insufficient_families": list(self.insufficient_families),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NetValue:
        data = _mapping(data, "net_value")
        return cls(
            benefit_signal=data.get("benefit_signal"),
            friction_signal=data.get("friction_signal"),
            risk_signal=data.get("risk_signal"),
            intensification_signal=data.get("intensification_signal"),
            net=data.get("net"),
            label=data.get("label"),
            insufficient_families=_sequence(data.get("insufficient_families"), "insufficient_families"),
        )


@dataclass(frozen=True)
class FrictionHotspot:
    """Merged friction for one area: weighted intensity, tier and affected roles."""

    area: str
    intensity: float
    tier: FrictionTier
    roles: tuple[str, ...] = ()
    observation_count: int = 1
    respondent_count: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "area", check_label(self.area, "area"))
        check_fraction(self.intensity, "intensity", area=self.area)
        object.__setattr__(self, "tier", _parse_enum(FrictionTier, self.tier, "tier"))
        object.__setattr__(self, "roles", tuple(self.roles))
        check_count(self.observation_count, "observation_count", minimum=1)
        check_count(self.respondent_count, "respondent_count", minimum=1)

    def to_dict(self) -> dict[str, Any]:
        return {
            "area": self.area,
            "intensity": self.intensity,
            "tier": self.tier.value,
            "roles": list(self.roles),
            "observation_count": self.observation_count,
            "respondent_count": self.respondent_count,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FrictionHotspot:
        data = _mapping(data, "friction_hotspot")
        return cls(
            area=data.get("area"),
            intensity=data.get("intensity"),
            tier=data.get("tier"),
            roles=_sequence(data.get("roles"), "roles"),
            observation_count=data.get("observation_count", 1),
            respondent_count=data.get("respondent_count", 1),
        )


@dataclass(frozen=True)
class BaselineSnapshot:
    """
    The result of one pulse cycle. Append-only per organization: cycle N+1
    never replaces cycle N.
    """

    cycle_number: int
    respondent_count: int
    participation_rate: float
    dimension_signals: Mapping[Dimension, DimensionSignal]
    net_value: NetValue
    patterns: tuple[ThemeRecord, ...] = ()
    friction_hotspots: tuple[FrictionHotspot, ...] = ()
    organization_id: str | None = None

    def __post_init__(self) -> None:
        check_count(self.cycle_number, "cycle_number", minimum=1)
        check_count(self.respondent_count, "respondent_count")
        check_fraction(self.participation_rate, "participation_rate")
        object.__setattr__(
            self, "dimension_signals", _freeze_dimension_map(self.dimension_signals, "dimension_signals")
        )
        object.__setattr__(self, "patterns", tuple(self.patterns))
        object.__setattr__(self, "friction_hotspots", tuple(self.friction_hotspots))

    @property
    def pattern_names(self) -> tuple[str, ...]:
        return tuple(t.theme for t in self.patterns)

    def to_dict(self) -> dict[str, Any]:
        return {
            "organization_id": self.organization_id,
            "cycle_number": self.cycle_number,
            "respondent_count": self.respondent_count,
            "participation_rate": self.participation_rate,
            "dimension_signals": {d.value: s.to_dict() for d, s in self.dimension_signals.items()},
            "net_value": self.net_value.to_dict(),
            "patterns": [t.to_dict() for t in self.patterns],
            "friction_hotspots": [h.to_dict() for h in self.friction_hotspots],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BaselineSnapshot:
        data = _mapping(data, "snapshot")
        signals = _mapping(data.get("dimension_signals"), "dimension_signals")
        return cls(
            cycle_number=data.get("cycle_number"),
            respondent_count=data.get("respondent_count", 0),
            participation_rate=data.get("participation_rate", 0.0),
            dimension_signals={k: DimensionSignal.from_dict(k, v) for k, v in signals.items()},
            net_value=NetValue.from_dict(data.get("net_value")),
            patterns=tuple(ThemeRecord.from_dict(t) for t in _sequence(data.get("patterns"), "patterns")),
            friction_hotspots=tuple(
                FrictionHotspot.from_dict(h) for h in _sequence(data.get("friction_hotspots"), "friction_hotspots")
            ),
            organization_id=data.get("organization_id"),
        )


@dataclass(frozen=True)
class DimensionMovement:
    dimension: Dimension
    earlier_signal: float
    later_signal: float
    delta: float
    direction: MovementDirection

    def __post_init__(self) -> None:
        object.__setattr__(self, "dimension", parse_dimension(self.dimension))
        check_fraction(self.earlier_signal, "earlier_signal", dimension=self.dimension.value)
        check_fraction(self.later_signal, "later_signal", dimension=self.dimension.value)
        object.__setattr__(self, "delta", check_number(self.delta, "delta", dimension=self.dimension.value))
        object.__setattr__(self, "direction", _parse_enum(MovementDirection, self.direction, "direction"))

    def to_dict(self) -> dict[str, Any]:
        return {
            "earlier_signal": self.earlier_signal,
            "later_signal": self.later_signal,
            "delta": self.delta,
            "direction": self.direction.value,
        }

    @classmethod
    def from_dict(cls, dimension: Any, data: Mapping[str, Any]) -> DimensionMovement:
        data = _mapping(data, f"dimensions.{dimension}")
        return cls(
            dimension=dimension,
            earlier_signal=data.get("earlier_signal"),
            later_signal=data.get("later_signal"),
            delta=data.get("delta"),
            direction=data.get("direction"),
        )


@dataclass(frozen=True)
class MovementReport:
    """
    Movement between two cycles. Derived on demand, never stored.

    The four theme lists partition the union of both cycles' theme names.
    """

    earlier_cycle: int
    later_cycle: int
    dimensions: Mapping[Dimension, DimensionMovement]
    persisting: tuple[str, ...] = ()
    emerging: tuple[str, ...] = ()
    declining: tuple[str, ...] = ()
    resolved: tuple[str, ...] = ()
    organization_id: str | None = None

    def __post_init__(self) -> None:
        check_count(self.earlier_cycle, "earlier_cycle", minimum=1)
        check_count(self.later_cycle, "later_cycle", minimum=1)
        object.__setattr__(self, "dimensions", _freeze_dimension_map(self.dimensions, "dimensions"))
        for name in THEME_MOVEMENTS:
            object.__setattr__(self, name, tuple(check_label(t, name) for t in getattr(self, name)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "organization_id": self.organization_id,
            "earlier_cycle": self.earlier_cycle,
            "later_cycle": self.later_cycle,
            "dimensions": {d.value: m.to_dict() for d, m in self.dimensions.items()},
            "themes": {name: list(getattr(self, name)) for name in THEME_MOVEMENTS},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MovementReport:
        data = _mapping(data, "movement_report")
        dimensions = _mapping(data.get("dimensions"), "dimensions")
        themes = _mapping(data.get("themes"), "themes")
        return cls(
            earlier_cycle=data.get("earlier_cycle"),
            later_cycle=data.get("later_cycle"),
            dimensions={k: DimensionMovement.from_dict(k, v) for k, v in dimensions.items()},
            organization_id=data.get("organization_id"),
            **{name: _sequence(themes.get(name), f"themes.{name}") for name in THEME_MOVEMENTS},
        )
