"""Demo script to show the chart pipeline.

Computes binomial and poisson probability data, lays it out and prints the
bars as a sideways text chart, then walks the controls through a mode
switch.
"""

from distchart.models.chart import ChartControls
from distchart.models.distribution import BinomialParameters, PoissonParameters
from distchart.services.chart_layout import layout_chart
from distchart.services.chart_service import build_chart
from distchart.services.distribution_model import (
    compute_distribution,
    get_distribution_catalogue,
    summarize_points,
)
from distchart.services.scene_builder import readout_for


def print_layout(layout, width=50):
    for bar in layout.bars:
        length = int(round(bar.height / 0.8 * width))
        print(f"  {bar.outcome:>3} {bar.horizontal_offset:+.3f} | {'#' * length} {bar.probability:.5f}")
    print(f"  ground width: {layout.ground_width:.3f}")


def main():
    """Demonstrate the distribution model and chart layout."""
    print("=" * 70)
    print("Distribution Chart Demo")
    print("=" * 70)

    print("\nAvailable Distributions:")
    print("-" * 70)
    for info in get_distribution_catalogue():
        print(f"\n{info.display_name} ({info.name})")
        print(f"  Description: {info.description}")
        for param in info.parameters:
            print(
                f"    - {param.name} ({param.type}, {param.min_value}..{param.max_value}"
                f" step {param.step}, default={param.default}): {param.description}"
            )

    print("\n1. Binomial Distribution (n=10, p=0.5)")
    print("-" * 70)
    binomial = BinomialParameters(n=10, p=0.5)
    points = compute_distribution(binomial)
    layout = layout_chart(points, binomial.mean)
    print_layout(layout)
    print(readout_for(layout, 5).text)

    print("\n2. Poisson Distribution (lambda=5)")
    print("-" * 70)
    poisson = PoissonParameters(lam=5.0)
    points = compute_distribution(poisson)
    summary = summarize_points(points)
    print_layout(layout_chart(points, poisson.mean))
    print(f"Points: {summary.count}, captured mass: {summary.total_probability:.6f}")

    print("\n" + "=" * 70)
    print("Mode Switch Demo")
    print("=" * 70)
    controls = ChartControls().with_primary(0.3)
    print(f"\nBinomial p set to 0.3, switching to {controls.toggle_mode().mode}")
    controls = controls.toggle_mode().with_primary(2.0)
    print(f"Poisson lambda set to {controls.poisson.lam}")
    controls = controls.toggle_mode()
    print(f"Back to {controls.mode}: n={controls.binomial.n}, p={controls.binomial.p}")
    print_layout(build_chart(controls.active))

    print("\n" + "=" * 70)


if __name__ == "__main__":
    main()
