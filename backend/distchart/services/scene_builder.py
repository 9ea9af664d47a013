"""Map a chart layout onto drawable AR primitives."""

from __future__ import annotations

from distchart.core.config import (
    BAR_COLOR,
    FLAT_ROTATION,
    GROUND_COLOR,
    GROUND_DEPTH,
    GROUND_OPACITY,
    LABEL_COLOR,
    LABEL_DROP,
    LABEL_SCALE,
    READOUT_DECIMALS,
)
from distchart.core.exceptions import OutcomeNotFoundError
from distchart.models.chart import (
    BarShape,
    ChartLayout,
    ChartScene,
    GroundPlane,
    LabelShape,
    LayoutConfig,
    ProbabilityReadout,
    Vector3,
)


def _flat() -> Vector3:
    x, y, z = FLAT_ROTATION
    return Vector3(x=x, y=y, z=z)


def build_scene(layout: ChartLayout, config: LayoutConfig | None = None) -> ChartScene:
    """Build one box and one label per bar plus the ground plane.

    Boxes stand on the ground plane at base_height; labels lie flat just
    below it.
    """
    config = config or LayoutConfig()
    bars: list[BarShape] = []
    labels: list[LabelShape] = []

    for bar in layout.bars:
        bars.append(
            BarShape(
                outcome=bar.outcome,
                probability=bar.probability,
                position=Vector3(x=bar.horizontal_offset, y=config.base_height + bar.height / 2),
                width=config.bar_width,
                depth=config.bar_width,
                height=bar.height,
                color=BAR_COLOR,
            )
        )
        labels.append(
            LabelShape(
                value=str(bar.outcome),
                position=Vector3(x=bar.horizontal_offset, y=config.base_height - LABEL_DROP),
                rotation=_flat(),
                scale=LABEL_SCALE,
                color=LABEL_COLOR,
            )
        )

    ground = GroundPlane(
        position=Vector3(y=config.base_height),
        rotation=_flat(),
        width=layout.ground_width,
        depth=GROUND_DEPTH,
        color=GROUND_COLOR,
        opacity=GROUND_OPACITY,
    )
    return ChartScene(bars=bars, labels=labels, ground=ground)


def format_readout(outcome: int, probability: float) -> str:
    return f"P(X={outcome}) = {probability:.{READOUT_DECIMALS}f}"


def readout_for(layout: ChartLayout, outcome: int) -> ProbabilityReadout:
    """Readout for a tapped bar.

    Raises:
        OutcomeNotFoundError: If the outcome has no bar in this layout
    """
    for bar in layout.bars:
        if bar.outcome == outcome:
            return ProbabilityReadout(
                outcome=bar.outcome,
                probability=bar.probability,
                text=format_readout(bar.outcome, bar.probability),
            )
    raise OutcomeNotFoundError(outcome, [bar.outcome for bar in layout.bars])
