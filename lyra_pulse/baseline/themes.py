"""
Theme aggregator: externally extracted theme records -> per-dimension pattern
density and a global ranked pattern list.

Ranking: recurrence (strong > recurring > emerging), then density, both
descending; ties keep insertion order. Dimensions without records report
density 0 and no_patterns_observed instead of being omitted.
"""

from __future__ import annotations

import statistics
from collections import Counter
from typing import Iterable

from lyra_pulse.baseline.dimensions import ALL_DIMENSIONS, Dimension
from lyra_pulse.baseline.models import DimensionPatterns, ThemeAggregate, ThemeRecord
from lyra_pulse.baseline.validation import name_key, round_measure
from lyra_pulse.core.exceptions import DuplicateTheme
from lyra_pulse.pulse_logging import get_logger

logger = get_logger(__name__)


def rank_patterns(records: Iterable[ThemeRecord]) -> list[ThemeRecord]:
    """Stable sort by (recurrence rank, density) descending."""
    return sorted(records, key=lambda t: (t.recurrence.rank, t.density), reverse=True)


def _check_unique(records: list[ThemeRecord]) -> None:
    seen: dict[str, ThemeRecord] = {}
    for record in records:
        key = name_key(record.theme)
        if key in seen:
            raise DuplicateTheme(
                f"Theme {record.theme!r} recorded more than once in one cycle",
                theme=record.theme,
                dimensions=[seen[key].dimension.value, record.dimension.value],
            )
        seen[key] = record


def _dominant_sentiment(records: list[ThemeRecord]) -> str | None:
    """Most frequent sentiment; ties go to the one seen first."""
    sentiments = [r.sentiment for r in records if r.sentiment]
    if not sentiments:
        return None
    counts = Counter(sentiments)
    best = max(counts.values())
    return next(s for s in sentiments if counts[s] == best)


def aggregate_themes(records: Iterable[ThemeRecord]) -> ThemeAggregate:
    """Group theme records by dimension; compute mean density and the ranked list."""
    ordered = list(records)
    _check_unique(ordered)

    grouped: dict[Dimension, list[ThemeRecord]] = {dim: [] for dim in ALL_DIMENSIONS}
    for record in ordered:
        grouped[record.dimension].append(record)

    per_dimension: dict[Dimension, DimensionPatterns] = {}
    for dim in ALL_DIMENSIONS:
        dim_records = grouped[dim]
        if not dim_records:
            per_dimension[dim] = DimensionPatterns(dimension=dim, density=0.0, pattern_count=0)
            continue
        per_dimension[dim] = DimensionPatterns(
            dimension=dim,
            density=round_measure(statistics.fmean(r.density for r in dim_records)),
            pattern_count=len(dim_records),
            dominant_sentiment=_dominant_sentiment(dim_records),
        )

    empty = [d.value for d, p in per_dimension.items() if p.no_patterns_observed]
    logger.debug("themes_aggregated", theme_count=len(ordered), no_patterns_observed=empty)
    return ThemeAggregate(per_dimension=per_dimension, ranked=tuple(rank_patterns(ordered)))
