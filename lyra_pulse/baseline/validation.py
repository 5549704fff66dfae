"""
Ingestion checks for records coming from the survey store and the
text-analysis service.

Out-of-range values are rejected, never clamped or dropped: a bad record must
not silently corrupt an aggregate.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Iterable

from lyra_pulse.baseline.dimensions import (
    ANCHOR_SCORE_MAX,
    ANCHOR_SCORE_MIN,
    Dimension,
    anchor_item_ids,
)
from lyra_pulse.core.exceptions import InvalidMeasure, InvalidScore, UnknownAnchorItem

# Derived measures are rounded so that threshold comparisons are not decided
# by float noise (0.52 - 0.55 must compare equal to -0.03).
MEASURE_PRECISION = 6


def round_measure(value: float) -> float:
    return round(value, MEASURE_PRECISION)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and not math.isnan(value)


def check_anchor_score(score: Any, *, item_id: str = "", respondent_id: str = "") -> float:
    """Return score as float; raise InvalidScore unless it is a number in [1, 5]."""
    if not _is_number(score) or not ANCHOR_SCORE_MIN <= score <= ANCHOR_SCORE_MAX:
        raise InvalidScore(
            f"Anchor score must be in [{ANCHOR_SCORE_MIN}, {ANCHOR_SCORE_MAX}], got {score!r}",
            score=score,
            item_id=item_id,
            respondent_id=respondent_id,
        )
    return float(score)


def check_anchor_item(item_id: str, dimension: Dimension) -> str:
    item_id = (item_id or "").strip()
    if item_id not in anchor_item_ids(dimension):
        raise UnknownAnchorItem(
            f"Item {item_id!r} is not an anchor item of dimension {dimension.value!r}",
            item_id=item_id,
            dimension=dimension.value,
        )
    return item_id


def check_fraction(value: Any, name: str, **context: Any) -> float:
    """Return value as float; raise InvalidMeasure unless it is a number in [0, 1]."""
    if not _is_number(value) or not 0.0 <= value <= 1.0:
        raise InvalidMeasure(f"{name} must be in [0, 1], got {value!r}", field=name, value=value, **context)
    return float(value)


def check_number(value: Any, name: str, **context: Any) -> float:
    """Return value as float; raise InvalidMeasure unless it is a finite number."""
    if not _is_number(value) or math.isinf(value):
        raise InvalidMeasure(f"{name} must be a number, got {value!r}", field=name, value=value, **context)
    return float(value)


def check_count(value: Any, name: str, *, minimum: int = 0) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise InvalidMeasure(f"{name} must be an integer >= {minimum}, got {value!r}", field=name, value=value)
    return value


def check_label(value: Any, name: str) -> str:
    """Stripped non-empty string."""
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise InvalidMeasure(f"{name} must be a non-empty string, got {value!r}", field=name, value=value)
    return text


def name_key(name: str) -> str:
    """Comparison key for theme, area and role names: trimmed, case-insensitive."""
    return " ".join(name.split()).casefold()


def dedupe_names(names: Iterable[str]) -> tuple[str, ...]:
    """Case-insensitive de-duplication keeping first spelling and order."""
    seen: set[str] = set()
    out: list[str] = []
    for raw in names:
        name = raw.strip() if isinstance(raw, str) else ""
        if not name:
            continue
        key = name_key(name)
        if key in seen:
            continue
        seen.add(key)
        out.append(name)
    return tuple(out)
