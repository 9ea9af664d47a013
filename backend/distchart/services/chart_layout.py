"""Bar chart layout for a probability sequence.

Heights are scaled so the most likely outcome reaches max_bar_height, and
bars are placed relative to the distribution mean so the chart re-centres
as parameters change. The layout is recomputed in full on every call.
"""

from __future__ import annotations

import logging

from distchart.models.chart import ChartBar, ChartLayout, LayoutConfig
from distchart.models.distribution import ProbabilityPoint

logger = logging.getLogger(__name__)


def layout_chart(
    points: list[ProbabilityPoint],
    mean: float,
    config: LayoutConfig | None = None,
) -> ChartLayout:
    """Compute bar geometry and ground extent.

    Args:
        points: Ordered probability sequence from the distribution model
        mean: Distribution mean supplied by the caller (n * p or lambda)
        config: Layout sizes; settings defaults when omitted

    Returns:
        ChartLayout with one bar per point at or above the probability floor
    """
    config = config or LayoutConfig()

    # Empty or all-zero sequences scale against 1 to avoid dividing by zero
    max_probability = max((point.probability for point in points), default=0.0) or 1.0
    scale_y = config.max_bar_height / max_probability

    bars = [
        ChartBar(
            outcome=point.outcome,
            probability=point.probability,
            horizontal_offset=(point.outcome - mean) * config.spacing_unit,
            height=max(point.probability * scale_y, config.min_visible_height),
        )
        for point in points
        if point.probability >= config.probability_floor
    ]

    if bars:
        ground_width = (len(bars) - 1) * config.spacing_unit + config.bar_width + config.chart_padding
    else:
        ground_width = config.chart_padding

    logger.debug(
        "Laid out %d of %d points, ground_width=%.4f", len(bars), len(points), ground_width
    )
    return ChartLayout(
        bars=bars,
        ground_width=ground_width,
        mean=mean,
        max_probability=max_probability,
    )
