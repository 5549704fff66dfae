"""
Net value calculator: benefit minus weighted friction, risk and
intensification costs.

net > 0.15 Positive; 0 < net <= 0.15 Marginal; -0.1 < net <= 0 Uncertain;
net <= -0.1 Negative. Net is not clamped; below zero means net harm.
"""

from __future__ import annotations

import statistics
from typing import Any

from lyra_pulse.baseline.models import (  # noqa: F401
    MARGINAL_ABOVE,
    POSITIVE_ABOVE,
    UNCERTAIN_ABOVE,
    FamilyInput,
    NetValue,
    SignalFamilies,
    net_label,
)
from lyra_pulse.baseline.validation import check_fraction, round_measure
from lyra_pulse.config.settings import NetValueWeights
from lyra_pulse.pulse_logging import get_logger

logger = get_logger(__name__)

FAMILY_NAMES = ("benefit", "friction", "risk", "intensification")


def family_signal(value: FamilyInput, name: str) -> float | None:
    """
    Reduce one family to a signal in [0, 1].

    A number is taken as the precomputed family signal; a sequence is the
    per-observation intensities and is averaged. Empty sequence -> None.
    """
    if isinstance(value, (list, tuple)):
        intensities = [check_fraction(v, f"{name} intensity", family=name) for v in value]
        if not intensities:
            return None
        return round_measure(statistics.fmean(intensities))
    return check_fraction(value, f"{name}_signal", family=name)


def compute_net_value(
    families: SignalFamilies | dict[str, Any],
    weights: NetValueWeights | None = None,
) -> NetValue:
    """
    Combine the four signal families into a NetValue.

    Families without observations contribute 0 and are listed in
    insufficient_families so the caller can tell "no friction" from "no data".
    """
    if not isinstance(families, SignalFamilies):
        families = SignalFamilies.from_dict(families)
    weights = weights or NetValueWeights()

    signals: dict[str, float] = {}
    insufficient: list[str] = []
    for name in FAMILY_NAMES:
        value = family_signal(getattr(families, name), name)
        if value is None:
            insufficient.append(name)
            value = 0.0
        signals[name] = value

    net = round_measure(
        signals["benefit"]
        - signals["friction"] * weights.friction
        - signals["risk"] * weights.risk
        - signals["intensification"] * weights.intensification
    )
    label = net_label(net)
    if insufficient:
        logger.info("net_value_insufficient_families", families=insufficient)
    logger.debug("net_value_computed", net=net, label=label.value, **signals)
    return NetValue(
        benefit_signal=signals["benefit"],
        friction_signal=signals["friction"],
        risk_signal=signals["risk"],
        intensification_signal=signals["intensification"],
        net=net,
        label=label,
        insufficient_families=tuple(insufficient),
    )
