"""
Fixed reference data: the six baseline dimensions, their anchor items and
qualitative prompts.

Dimensions are never created or destroyed at runtime. Each has exactly two
scaled (1-5) anchor items used for longitudinal comparability.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from lyra_pulse.core.exceptions import UnknownDimension

ANCHOR_SCORE_MIN = 1
ANCHOR_SCORE_MAX = 5


class Dimension(str, Enum):
    ADOPTION = "adoption"
    PURPOSE = "purpose"
    FLOW = "flow"
    TRUST = "trust"
    VALUE = "value"
    REPRESENTATION = "representation"

    @property
    def label(self) -> str:
        return DIMENSION_INFO[self].label

    @property
    def description(self) -> str:
        return DIMENSION_INFO[self].description


ALL_DIMENSIONS: tuple[Dimension, ...] = tuple(Dimension)


@dataclass(frozen=True)
class DimensionInfo:
    label: str
    description: str


@dataclass(frozen=True)
class AnchorItem:
    item_id: str
    dimension: Dimension
    text: str


@dataclass(frozen=True)
class QualitativePrompt:
    prompt_id: str
    dimension: Dimension
    text: str


DIMENSION_INFO: Mapping[Dimension, DimensionInfo] = MappingProxyType({
    Dimension.ADOPTION: DimensionInfo("Adoption", "Where and how AI is entering real work"),
    Dimension.PURPOSE: DimensionInfo("Purpose", "Whether people understand why AI exists here"),
    Dimension.FLOW: DimensionInfo("Flow", "How AI affects workflow and cognitive load"),
    Dimension.TRUST: DimensionInfo("Trust", "Confidence, risk perception, governance clarity"),
    Dimension.VALUE: DimensionInfo("Value", "Whether AI improves outcomes, not just speed"),
    Dimension.REPRESENTATION: DimensionInfo(
        "Representation", "Whether org knowledge is reflected in AI tools"
    ),
})


def _anchors(dimension: Dimension, prefix: str, first: str, second: str) -> tuple[AnchorItem, AnchorItem]:
    return (
        AnchorItem(f"{prefix}_anc1", dimension, first),
        AnchorItem(f"{prefix}_anc2", dimension, second),
    )


ANCHOR_ITEMS: Mapping[Dimension, tuple[AnchorItem, ...]] = MappingProxyType({
    Dimension.ADOPTION: _anchors(
        Dimension.ADOPTION,
        "A",
        "I use AI tools regularly as part of my core work (not just experimenting).",
        "AI is integrated into tasks that matter, not just peripheral activities.",
    ),
    Dimension.PURPOSE: _anchors(
        Dimension.PURPOSE,
        "P",
        "I have a clear understanding of what AI is meant to help me do.",
        "The organisation's intent for AI aligns with my role's actual needs.",
    ),
    Dimension.FLOW: _anchors(
        Dimension.FLOW,
        "F",
        "AI fits naturally into my workflow without creating extra steps.",
        "The effort of using AI is worth the output I get.",
    ),
    Dimension.TRUST: _anchors(
        Dimension.TRUST,
        "T",
        "I feel confident that AI outputs are reliable where it matters.",
        "I feel safe being honest about how I use AI at work.",
    ),
    Dimension.VALUE: _anchors(
        Dimension.VALUE,
        "V",
        "AI has genuinely improved the quality or speed of my work.",
        "The benefits of AI outweigh the friction it creates.",
    ),
    Dimension.REPRESENTATION: _anchors(
        Dimension.REPRESENTATION,
        "R",
        "AI tools reflect how work is actually done here, not a generic version.",
        "Important knowledge about my role is captured in systems AI can use.",
    ),
})

_PROMPT_TEXTS: dict[Dimension, tuple[str, ...]] = {
    Dimension.ADOPTION: (
        "Describe the AI tools you use most, and the ones you avoid. Why?",
        "Where has AI become a natural part of your work? Where does it still feel like an experiment?",
        "Are there tasks where you've stopped using AI after trying it? What happened?",
    ),
    Dimension.PURPOSE: (
        "In your own words, what is AI meant to help you do in your role?",
        "Does the organisation's message about AI match your day-to-day reality?",
        "Where do you think AI is being used for the wrong reasons, even if it works?",
    ),
    Dimension.FLOW: (
        "Walk me through a recent task where you used AI. Where did it help and where did it get in the way?",
        "How often do you need to significantly rework what AI produces?",
        "Does using AI make your work feel easier or more mentally taxing? Why?",
        "Where does AI speed things up in one place but create more work elsewhere?",
    ),
    Dimension.TRUST: (
        "How clear are the rules or expectations around AI use in your role?",
        "What are the unwritten rules in your team about using AI?",
        "Have you ever kept your AI use private because of how it might be perceived?",
    ),
    Dimension.VALUE: (
        "Where does AI genuinely save you effort, and where does that value disappear?",
        "Has anything been lost (in quality, character, or craft) since AI entered your workflow?",
        "Who benefits most from AI in your team? Who bears the hidden costs?",
    ),
    Dimension.REPRESENTATION: (
        "What important knowledge about your work isn't written down anywhere?",
        "What would an AI system misunderstand about your role or how decisions are made?",
        "Does AI output sound like your organisation, or something more generic?",
    ),
}

QUALITATIVE_PROMPTS: Mapping[Dimension, tuple[QualitativePrompt, ...]] = MappingProxyType({
    dim: tuple(
        QualitativePrompt(f"{ANCHOR_ITEMS[dim][0].item_id[0]}_q{i}", dim, text)
        for i, text in enumerate(texts, start=1)
    )
    for dim, texts in _PROMPT_TEXTS.items()
})

_ANCHOR_ITEM_INDEX: Mapping[str, AnchorItem] = MappingProxyType({
    item.item_id: item for items in ANCHOR_ITEMS.values() for item in items
})


def parse_dimension(value: Any) -> Dimension:
    """
    Resolve a dimension id or label (case-insensitive) to a Dimension.

    Raises UnknownDimension for anything outside the fixed six.
    """
    if isinstance(value, Dimension):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        try:
            return Dimension(key)
        except ValueError:
            pass
    raise UnknownDimension(f"Unknown dimension: {value!r}", dimension=value)


def anchor_item(item_id: str) -> AnchorItem | None:
    return _ANCHOR_ITEM_INDEX.get(item_id)


def anchor_item_ids(dimension: Dimension) -> frozenset[str]:
    return frozenset(item.item_id for item in ANCHOR_ITEMS[dimension])


def dimension_catalog() -> list[dict[str, Any]]:
    """Reference data for every dimension, in fixed order (for API / reports)."""
    out: list[dict[str, Any]] = []
    for dim in ALL_DIMENSIONS:
        out.append({
            "id": dim.value,
            "label": dim.label,
            "description": dim.description,
            "anchor_items": [{"id": a.item_id, "text": a.text} for a in ANCHOR_ITEMS[dim]],
            "qualitative_prompts": [{"id": p.prompt_id, "text": p.text} for p in QUALITATIVE_PROMPTS[dim]],
        })
    return out
