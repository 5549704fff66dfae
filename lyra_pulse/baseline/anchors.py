"""
Anchor aggregator: scaled anchor-item answers -> per-dimension anchor mean.

Mean of every score across both anchor items and all respondents of the
dimension. No responses means no mean (None, flagged insufficient_data),
never 0. Pure; records are validated when they are constructed.
"""

from __future__ import annotations

import statistics
from typing import Iterable, Mapping

from lyra_pulse.baseline.dimensions import ALL_DIMENSIONS, Dimension, parse_dimension
from lyra_pulse.baseline.models import AnchorAggregate, AnchorResponse
from lyra_pulse.baseline.validation import round_measure
from lyra_pulse.core.exceptions import UnknownDimension
from lyra_pulse.pulse_logging import get_logger

logger = get_logger(__name__)


def aggregate_anchor_responses(
    responses: Iterable[AnchorResponse],
    dimension: Dimension | str,
) -> AnchorAggregate:
    """
    Aggregate the responses of one dimension.

    Every response must belong to the dimension; a response for another
    dimension is a caller error (UnknownDimension), not something to skip.
    """
    dim = parse_dimension(dimension)
    scores: list[float] = []
    respondents: set[str] = set()
    for response in responses:
        if response.dimension is not dim:
            raise UnknownDimension(
                f"Response for {response.dimension.value!r} passed to the {dim.value!r} aggregate",
                dimension=response.dimension.value,
                expected=dim.value,
                item_id=response.item_id,
            )
        scores.append(response.score)
        respondents.add(response.respondent_id)

    if not scores:
        logger.info("anchor_insufficient_data", dimension=dim.value)
        return AnchorAggregate(dimension=dim, anchor_mean=None, response_count=0, respondent_count=0)

    mean = round_measure(statistics.fmean(scores))
    logger.debug(
        "anchor_aggregated",
        dimension=dim.value,
        anchor_mean=mean,
        response_count=len(scores),
        respondent_count=len(respondents),
    )
    return AnchorAggregate(
        dimension=dim,
        anchor_mean=mean,
        response_count=len(scores),
        respondent_count=len(respondents),
    )


def aggregate_all_anchors(responses: Iterable[AnchorResponse]) -> Mapping[Dimension, AnchorAggregate]:
    """Group responses by dimension and aggregate; all six dimensions are always present."""
    grouped: dict[Dimension, list[AnchorResponse]] = {dim: [] for dim in ALL_DIMENSIONS}
    for response in responses:
        grouped[response.dimension].append(response)
    return {dim: aggregate_anchor_responses(grouped[dim], dim) for dim in ALL_DIMENSIONS}
