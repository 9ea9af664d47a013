"""Chart orchestration used by the API routes.

Chains distribution model -> layout -> scene for one parameter set. Limits are
enforced by the distribution model before any work is done.
"""

from __future__ import annotations

import logging

from distchart.models.chart import (
    ChartControls,
    ChartLayout,
    ChartScene,
    ControlsResponse,
    LayoutConfig,
    ProbabilityReadout,
)
from distchart.models.distribution import (
    BinomialParameters,
    DistributionResponse,
    PoissonParameters,
)
from distchart.services.chart_layout import layout_chart
from distchart.services.distribution_model import (
    compute_distribution,
    distribution_mean,
    summarize_points,
)
from distchart.services.scene_builder import build_scene, readout_for

logger = logging.getLogger(__name__)


def describe_distribution(params: BinomialParameters | PoissonParameters) -> DistributionResponse:
    """Probability points plus a summary of the captured mass."""
    points = compute_distribution(params)
    return DistributionResponse(
        parameters=params,
        points=points,
        summary=summarize_points(points),
    )


def build_chart(
    params: BinomialParameters | PoissonParameters,
    config: LayoutConfig | None = None,
) -> ChartLayout:
    """Compute the distribution and lay it out."""
    points = compute_distribution(params)
    layout = layout_chart(points, distribution_mean(params), config)
    if not layout.bars:
        logger.info("Chart for %s has no visible bars", params.family)
    return layout


def build_chart_scene(
    params: BinomialParameters | PoissonParameters,
    config: LayoutConfig | None = None,
) -> ChartScene:
    config = config or LayoutConfig()
    return build_scene(build_chart(params, config), config)


def build_readout(
    params: BinomialParameters | PoissonParameters,
    outcome: int,
    config: LayoutConfig | None = None,
) -> ProbabilityReadout:
    """Exact probability for a tapped bar of the chart these parameters produce."""
    return readout_for(build_chart(params, config), outcome)


def chart_for_controls(controls: ChartControls) -> ControlsResponse:
    """Chart the active family of the given controls."""
    return ControlsResponse(controls=controls, layout=build_chart(controls.active))
