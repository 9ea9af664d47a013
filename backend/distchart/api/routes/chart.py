"""Chart-related API routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

from distchart.core.rate_limiter import LAYOUT_RATE_LIMIT, SCENE_RATE_LIMIT, limiter
from distchart.models.chart import (
    ChartControls,
    ChartLayout,
    ChartRequest,
    ChartScene,
    ControlsResponse,
    PrimaryUpdate,
    ProbabilityReadout,
    ReadoutRequest,
    TrialsUpdate,
)
from distchart.services.chart_service import (
    build_chart,
    build_chart_scene,
    build_readout,
    chart_for_controls,
)

router = APIRouter()


@router.post("/layout", response_model=ChartLayout)
@limiter.limit(LAYOUT_RATE_LIMIT)
async def layout(request: Request, chart: ChartRequest) -> ChartLayout:
    """Lay out bars for a parameter set.

    Bars are centred on the distribution mean; outcomes with probability
    below 1e-8 are left out.

    Rate limited to 120 requests per minute per IP.
    """
    return build_chart(chart.parameters, chart.config)


@router.post("/scene", response_model=ChartScene)
@limiter.limit(SCENE_RATE_LIMIT)
async def scene(request: Request, chart: ChartRequest) -> ChartScene:
    """Drawable boxes, labels and ground plane for a parameter set.

    Rate limited to 60 requests per minute per IP.
    """
    return build_chart_scene(chart.parameters, chart.config)


@router.post("/readout", response_model=ProbabilityReadout)
async def readout(tap: ReadoutRequest) -> ProbabilityReadout:
    """Exact probability of a tapped bar."""
    return build_readout(tap.parameters, tap.outcome, tap.config)


@router.post("/controls/toggle", response_model=ControlsResponse)
async def toggle_mode(controls: ChartControls) -> ControlsResponse:
    """Switch family, restoring the values last used for it."""
    return chart_for_controls(controls.toggle_mode())


@router.post("/controls/trials", response_model=ControlsResponse)
@limiter.limit(LAYOUT_RATE_LIMIT)
async def set_trials(request: Request, update: TrialsUpdate) -> ControlsResponse:
    """Move the n slider.

    Rate limited like /layout, since it fires on every slider input event.
    """
    return chart_for_controls(update.controls.with_trials(update.n))


@router.post("/controls/primary", response_model=ControlsResponse)
@limiter.limit(LAYOUT_RATE_LIMIT)
async def set_primary(request: Request, update: PrimaryUpdate) -> ControlsResponse:
    """Move the p / lambda slider of the active family.

    Rate limited like /layout.
    """
    return chart_for_controls(update.controls.with_primary(update.value))
