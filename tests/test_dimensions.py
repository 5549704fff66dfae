"""
Tests for the fixed dimension reference data.
"""

from __future__ import annotations

import pytest

from lyra_pulse.baseline import ALL_DIMENSIONS, ANCHOR_ITEMS, QUALITATIVE_PROMPTS, Dimension, parse_dimension
from lyra_pulse.baseline.dimensions import anchor_item, dimension_catalog
from lyra_pulse.core.exceptions import UnknownDimension


def test_six_dimensions_in_fixed_order():
    assert [d.value for d in ALL_DIMENSIONS] == [
        "adoption",
        "purpose",
        "flow",
        "trust",
        "value",
        "representation",
    ]


def test_two_anchor_items_per_dimension():
    for dim in ALL_DIMENSIONS:
        items = ANCHOR_ITEMS[dim]
        assert len(items) == 2
        assert all(item.dimension is dim for item in items)
    assert anchor_item("F_anc2").dimension is Dimension.FLOW
    assert anchor_item("X_anc1") is None


def test_prompts_reference_their_dimension():
    assert [p.prompt_id for p in QUALITATIVE_PROMPTS[Dimension.FLOW]] == ["F_q1", "F_q2", "F_q3", "F_q4"]
    assert all(QUALITATIVE_PROMPTS[d] for d in ALL_DIMENSIONS)


@pytest.mark.parametrize("raw", ["trust", "Trust", " TRUST ", Dimension.TRUST])
def test_parse_dimension(raw):
    assert parse_dimension(raw) is Dimension.TRUST


@pytest.mark.parametrize("raw", ["culture", "", None, 3])
def test_parse_unknown_dimension(raw):
    with pytest.raises(UnknownDimension):
        parse_dimension(raw)


def test_catalog():
    catalog = dimension_catalog()
    assert [c["label"] for c in catalog] == ["Adoption", "Purpose", "Flow", "Trust", "Value", "Representation"]
    assert catalog[0]["anchor_items"][0]["id"] == "A_anc1"
