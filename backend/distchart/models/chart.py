"""Chart layout, scene and control models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from distchart.core.config import MIN_VISIBLE_HEIGHT, PROBABILITY_FLOOR, settings
from distchart.core.exceptions import ParameterError
from distchart.models.distribution import (
    BinomialParameters,
    DistributionParameters,
    PoissonParameters,
)

ChartMode = Literal["binomial", "poisson"]


# =============================================================================
# Layout
# =============================================================================


class LayoutConfig(BaseModel):
    """Fixed sizes used to turn probabilities into bar geometry.

    Defaults come from settings so a deployment can rescale the chart
    without clients sending a config.
    """

    model_config = ConfigDict(frozen=True)

    bar_width: float = Field(default_factory=lambda: settings.bar_width, gt=0)
    spacing_unit: float = Field(default_factory=lambda: settings.spacing_unit, gt=0)
    base_height: float = Field(default_factory=lambda: settings.base_height, ge=0)
    max_bar_height: float = Field(default_factory=lambda: settings.max_bar_height, gt=0)
    chart_padding: float = Field(default_factory=lambda: settings.chart_padding, ge=0)
    min_visible_height: float = Field(MIN_VISIBLE_HEIGHT, gt=0)
    probability_floor: float = Field(PROBABILITY_FLOOR, ge=0)


class ChartBar(BaseModel):
    """One bar of the chart, derived from a ProbabilityPoint."""

    model_config = ConfigDict(frozen=True)

    outcome: int = Field(..., ge=0, description="Outcome k")
    probability: float = Field(..., description="Exact P(X = k), not rounded")
    horizontal_offset: float = Field(..., description="Offset from the mean along x")
    height: float = Field(..., gt=0, description="Bar height in scene units")


class ChartLayout(BaseModel):
    """Bars and ground extent for one parameter set."""

    bars: list[ChartBar] = Field(default_factory=list)
    ground_width: float = Field(..., description="Width of the ground plane")
    mean: float = Field(..., description="Mean the bars are centred on")
    max_probability: float = Field(..., description="Probability mapped to max_bar_height")


# =============================================================================
# Scene
# =============================================================================


class Vector3(BaseModel):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class BarShape(BaseModel):
    """Box primitive for one bar."""

    outcome: int
    probability: float
    position: Vector3
    width: float
    depth: float
    height: float
    color: str
    clickable: bool = True


class LabelShape(BaseModel):
    """Text primitive under a bar."""

    value: str
    position: Vector3
    rotation: Vector3
    scale: float
    color: str
    align: Literal["left", "center", "right"] = "center"


class GroundPlane(BaseModel):
    position: Vector3
    rotation: Vector3
    width: float
    depth: float
    color: str
    opacity: float = Field(..., ge=0, le=1)


class ChartScene(BaseModel):
    """Drawable shapes for the AR renderer."""

    bars: list[BarShape] = Field(default_factory=list)
    labels: list[LabelShape] = Field(default_factory=list)
    ground: GroundPlane


class ProbabilityReadout(BaseModel):
    """What the viewer shows when a bar is tapped."""

    outcome: int
    probability: float = Field(..., description="Exact probability of the outcome")
    text: str = Field(..., description="Formatted readout, e.g. 'P(X=5) = 0.246094'")


# =============================================================================
# Controls
# =============================================================================


class ChartControls(BaseModel):
    """Slider state of the widget.

    Each family keeps its own record, so switching modes and back restores
    the values last used for that family.
    """

    model_config = ConfigDict(frozen=True)

    mode: ChartMode = "binomial"
    binomial: BinomialParameters = Field(default_factory=BinomialParameters)
    poisson: PoissonParameters = Field(default_factory=PoissonParameters)

    @property
    def active(self) -> BinomialParameters | PoissonParameters:
        return self.binomial if self.mode == "binomial" else self.poisson

    def toggle_mode(self) -> ChartControls:
        """Return controls with the other family active."""
        other: ChartMode = "poisson" if self.mode == "binomial" else "binomial"
        return self.model_copy(update={"mode": other})

    def with_trials(self, n: int) -> ChartControls:
        """Set n on the binomial record; the trials slider only exists for binomial."""
        try:
            binomial = BinomialParameters(n=n, p=self.binomial.p)
        except ValidationError as e:
            raise ParameterError("binomial", f"invalid n={n}") from e
        return self.model_copy(update={"binomial": binomial})

    def with_primary(self, value: float) -> ChartControls:
        """Apply the shared second slider: p in binomial mode, lambda in poisson mode."""
        try:
            if self.mode == "binomial":
                binomial = BinomialParameters(n=self.binomial.n, p=value)
                return self.model_copy(update={"binomial": binomial})
            poisson = PoissonParameters(lam=value)
        except ValidationError as e:
            raise ParameterError(self.mode, f"invalid slider value {value}") from e
        return self.model_copy(update={"poisson": poisson})


# =============================================================================
# Requests / Responses
# =============================================================================


class ChartRequest(BaseModel):
    """Parameters and optional layout overrides for a chart."""

    parameters: DistributionParameters
    config: LayoutConfig | None = Field(None, description="Layout overrides; settings if omitted")


class ReadoutRequest(ChartRequest):
    outcome: int = Field(..., ge=0, description="Outcome of the tapped bar")


class TrialsUpdate(BaseModel):
    controls: ChartControls
    n: int = Field(..., ge=0)


class PrimaryUpdate(BaseModel):
    controls: ChartControls
    value: float = Field(..., ge=0)


class ControlsResponse(BaseModel):
    """Updated controls plus the chart for the active family."""

    controls: ChartControls
    layout: ChartLayout
