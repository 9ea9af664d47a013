"""Distribution-related API routes."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from distchart.models.distribution import (
    DistributionInfo,
    DistributionRequest,
    DistributionResponse,
)
from distchart.services.chart_service import describe_distribution
from distchart.services.distribution_model import get_distribution_catalogue

router = APIRouter()


class DistributionsResponse(BaseModel):
    """Response for distributions list."""

    distributions: list[DistributionInfo]


@router.get("", response_model=DistributionsResponse)
async def list_distributions() -> DistributionsResponse:
    """List the charted families with their slider ranges."""
    return DistributionsResponse(distributions=get_distribution_catalogue())


@router.post("/points", response_model=DistributionResponse)
async def distribution_points(request: DistributionRequest) -> DistributionResponse:
    """Compute the probability sequence for a parameter set.

    Binomial sequences cover outcomes 0..n. Poisson sequences are truncated
    once the captured mass reaches 0.999 and the tail is negligible; the
    summary reports how much mass was captured.
    """
    return describe_distribution(request.parameters)
