"""Distribution-related models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ParameterInfo(BaseModel):
    """Information about a distribution parameter and its slider."""

    name: str = Field(..., description="Parameter name as sent in requests")
    description: str = Field(..., description="Parameter description")
    type: Literal["float", "int"] = Field(..., description="Parameter type")
    default: float | int = Field(..., description="Default slider value")
    min_value: float = Field(..., description="Slider minimum")
    max_value: float = Field(..., description="Slider maximum")
    step: float = Field(..., description="Slider step")


class DistributionInfo(BaseModel):
    """Information about a supported distribution family."""

    name: Literal["binomial", "poisson"] = Field(..., description="Family name")
    display_name: str = Field(..., description="Display name (e.g., 'Binomial')")
    description: str = Field(..., description="Family description")
    parameters: list[ParameterInfo] = Field(..., description="List of parameters")


# =============================================================================
# Distribution Parameters
# =============================================================================


class BinomialParameters(BaseModel):
    """Number of successes in n independent trials with success probability p."""

    model_config = ConfigDict(frozen=True)

    family: Literal["binomial"] = "binomial"
    n: int = Field(10, ge=0, description="Number of trials")
    p: float = Field(0.5, ge=0.0, le=1.0, description="Probability of success per trial")

    @property
    def mean(self) -> float:
        return self.n * self.p


class PoissonParameters(BaseModel):
    """Count of events in a fixed interval with average rate lambda."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    family: Literal["poisson"] = "poisson"
    lam: float = Field(5.0, ge=0.0, alias="lambda", description="Average rate of events (λ)")

    @property
    def mean(self) -> float:
        return self.lam


# Exactly one family is active per request
DistributionParameters = Annotated[
    Union[BinomialParameters, PoissonParameters],
    Field(discriminator="family", description="Distribution family and its parameters"),
]


# =============================================================================
# Probability Data
# =============================================================================


class ProbabilityPoint(BaseModel):
    """A single outcome of the distribution and its probability."""

    model_config = ConfigDict(frozen=True)

    outcome: int = Field(..., ge=0, description="Outcome k")
    probability: float = Field(..., ge=0.0, le=1.0, description="P(X = k)")


class DistributionSummary(BaseModel):
    """Moments of a produced (possibly truncated) probability sequence."""

    count: int = Field(..., description="Number of points in the sequence")
    total_probability: float = Field(..., description="Probability mass captured")
    mean: float = Field(..., description="Mean of the captured sequence")
    variance: float = Field(..., description="Variance of the captured sequence")
    mode_outcome: int | None = Field(None, description="Outcome with the highest probability")


class DistributionResponse(BaseModel):
    """Probability points for a parameter set."""

    parameters: DistributionParameters
    points: list[ProbabilityPoint]
    summary: DistributionSummary


class DistributionRequest(BaseModel):
    parameters: DistributionParameters
