"""Probability data for the charted distributions.

Produces the ordered (outcome, probability) sequence the chart is drawn
from. Binomial sequences cover every outcome 0..n; Poisson sequences are
open-ended, so they are truncated once the captured mass is close to 1 and
the tail has become negligible.

All functions here are pure: the same parameters always give the same
sequence.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from distchart.core.config import (
    BINOMIAL_COEFFICIENT_DECIMALS,
    POISSON_MASS_TARGET,
    POISSON_SAFETY_MARGIN,
    POISSON_TAIL_EPSILON,
    settings,
)
from distchart.core.exceptions import LimitError
from distchart.models.distribution import (
    BinomialParameters,
    DistributionInfo,
    DistributionSummary,
    ParameterInfo,
    PoissonParameters,
    ProbabilityPoint,
)

logger = logging.getLogger(__name__)


def binomial_coefficient(n: int, k: int) -> float:
    """Number of ways to choose k successes out of n trials.

    Uses the multiplicative form prod((n - i + 1) / i) instead of factorials,
    rounded to suppress floating-point drift. Out-of-range k gives 0.
    """
    if k < 0 or k > n:
        return 0.0
    result = 1.0
    for i in range(1, k + 1):
        result = result * (n - i + 1) / i
    return round(result, BINOMIAL_COEFFICIENT_DECIMALS)


def binomial_points(n: int, p: float) -> list[ProbabilityPoint]:
    """Return all n + 1 points of Binomial(n, p), including near-zero ones."""
    return [
        ProbabilityPoint(
            outcome=k,
            probability=binomial_coefficient(n, k) * p**k * (1 - p) ** (n - k),
        )
        for k in range(n + 1)
    ]


def poisson_points(lam: float) -> list[ProbabilityPoint]:
    """Return the truncated Poisson(lam) sequence starting at outcome 0.

    A non-positive rate yields the degenerate single point (0, 1).
    """
    if lam <= 0:
        return [ProbabilityPoint(outcome=0, probability=1.0)]

    pk = math.exp(-lam)
    cumulative = pk
    points = [ProbabilityPoint(outcome=0, probability=pk)]

    k = 1
    while cumulative < POISSON_MASS_TARGET or pk > POISSON_TAIL_EPSILON:
        pk = pk * lam / k
        points.append(ProbabilityPoint(outcome=k, probability=pk))
        cumulative += pk
        k += 1
        if k > lam + POISSON_SAFETY_MARGIN:
            logger.debug("Poisson(%s) hit the safety cap at k=%d", lam, k - 1)
            break

    return points


def check_limits(params: BinomialParameters | PoissonParameters) -> None:
    """Reject parameter sets larger than the service is configured to chart.

    Beyond max_trials the binomial coefficients overflow a float; beyond
    max_lambda the poisson sequence grows without a useful bound.

    Raises:
        LimitError: If n exceeds max_trials or lambda exceeds max_lambda
    """
    if isinstance(params, BinomialParameters) and params.n > settings.max_trials:
        logger.warning("Rejected binomial chart: n=%d > %d", params.n, settings.max_trials)
        raise LimitError(params.family, "n", params.n, settings.max_trials)
    if isinstance(params, PoissonParameters) and params.lam > settings.max_lambda:
        logger.warning("Rejected poisson chart: lambda=%s > %s", params.lam, settings.max_lambda)
        raise LimitError(params.family, "lambda", params.lam, settings.max_lambda)


def compute_distribution(
    params: BinomialParameters | PoissonParameters,
) -> list[ProbabilityPoint]:
    """Compute the probability sequence for the active family.

    Raises:
        LimitError: If the parameters exceed the configured limits
    """
    check_limits(params)
    if isinstance(params, BinomialParameters):
        points = binomial_points(params.n, params.p)
    else:
        points = poisson_points(params.lam)
    logger.debug("Computed %d points for %s", len(points), params.family)
    return points


def distribution_mean(params: BinomialParameters | PoissonParameters) -> float:
    """Theoretical mean: n * p for binomial, lambda for poisson."""
    return params.mean


def summarize_points(points: list[ProbabilityPoint]) -> DistributionSummary:
    """Moments of the sequence as produced, i.e. of the truncated chart."""
    if not points:
        return DistributionSummary(count=0, total_probability=0.0, mean=0.0, variance=0.0)

    outcomes = np.array([point.outcome for point in points], dtype=float)
    probs = np.array([point.probability for point in points], dtype=float)

    total = float(probs.sum())
    if total > 0:
        mean = float(np.dot(outcomes, probs) / total)
        variance = float(np.dot((outcomes - mean) ** 2, probs) / total)
    else:
        mean = variance = 0.0

    return DistributionSummary(
        count=len(points),
        total_probability=total,
        mean=mean,
        variance=variance,
        mode_outcome=points[int(np.argmax(probs))].outcome,
    )


# Slider ranges of the AR control panel
_CATALOGUE = [
    DistributionInfo(
        name="binomial",
        display_name="Binomial",
        description="Number of successes in n independent trials",
        parameters=[
            ParameterInfo(
                name="n",
                description="Number of trials",
                type="int",
                default=10,
                min_value=1,
                max_value=50,
                step=1,
            ),
            ParameterInfo(
                name="p",
                description="Probability of success in each trial",
                type="float",
                default=0.5,
                min_value=0.0,
                max_value=1.0,
                step=0.01,
            ),
        ],
    ),
    DistributionInfo(
        name="poisson",
        display_name="Poisson",
        description="Count of events in a fixed interval with mean rate λ",
        parameters=[
            ParameterInfo(
                name="lambda",
                description="Average rate of events (λ, mean)",
                type="float",
                default=5.0,
                min_value=0.1,
                max_value=30.0,
                step=0.1,
            ),
        ],
    ),
]


def get_distribution_catalogue() -> list[DistributionInfo]:
    """Get the supported families with their slider ranges."""
    return list(_CATALOGUE)
