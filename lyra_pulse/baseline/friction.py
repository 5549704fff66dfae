"""
Friction hotspot ranker.

Observations of the same area (trimmed, case-insensitive) are merged:
intensity is the mean weighted by backing respondents, roles are the
case-insensitive union. Hotspots are ranked by merged intensity, descending;
equal intensities keep the order in which their areas first appeared.
"""

from __future__ import annotations

from typing import Iterable

from lyra_pulse.baseline.models import FrictionHotspot, FrictionObservation, FrictionTier
from lyra_pulse.baseline.validation import dedupe_names, name_key, round_measure
from lyra_pulse.config.settings import FrictionTiers
from lyra_pulse.pulse_logging import get_logger

logger = get_logger(__name__)


def friction_tier(intensity: float, tiers: FrictionTiers | None = None) -> FrictionTier:
    """> high is High; medium..high (inclusive) is Medium; below medium is Low."""
    tiers = tiers or FrictionTiers()
    if intensity > tiers.high:
        return FrictionTier.HIGH
    if intensity >= tiers.medium:
        return FrictionTier.MEDIUM
    return FrictionTier.LOW


def merge_observations(observations: Iterable[FrictionObservation]) -> list[FrictionObservation]:
    """Merge observations per area; first-seen spelling and order of areas are kept."""
    groups: dict[str, list[FrictionObservation]] = {}
    for obs in observations:
        groups.setdefault(name_key(obs.area), []).append(obs)

    merged: list[FrictionObservation] = []
    for group in groups.values():
        total_weight = sum(o.respondents for o in group)
        intensity = sum(o.intensity * o.respondents for o in group) / total_weight
        merged.append(
            FrictionObservation(
                area=group[0].area,
                intensity=round_measure(min(1.0, intensity)),
                roles=dedupe_names(role for o in group for role in o.roles),
                respondents=total_weight,
            )
        )
    return merged


def rank_friction_hotspots(
    observations: Iterable[FrictionObservation],
    tiers: FrictionTiers | None = None,
) -> list[FrictionHotspot]:
    """Merge, tier and rank friction observations for one cycle."""
    tiers = tiers or FrictionTiers()
    observations = list(observations)
    counts: dict[str, int] = {}
    for obs in observations:
        key = name_key(obs.area)
        counts[key] = counts.get(key, 0) + 1

    hotspots = [
        FrictionHotspot(
            area=m.area,
            intensity=m.intensity,
            tier=friction_tier(m.intensity, tiers),
            roles=m.roles,
            observation_count=counts[name_key(m.area)],
            respondent_count=m.respondents,
        )
        for m in merge_observations(observations)
    ]
    hotspots.sort(key=lambda h: h.intensity, reverse=True)

    logger.debug(
        "friction_hotspots_ranked",
        observation_count=len(observations),
        hotspot_count=len(hotspots),
        high=[h.area for h in hotspots if h.tier is FrictionTier.HIGH],
    )
    return hotspots
