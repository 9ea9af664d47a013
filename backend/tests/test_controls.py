"""Tests for parameter models and slider/mode controls."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from distchart.core.exceptions import ParameterError
from distchart.models.chart import ChartControls
from distchart.models.distribution import (
    BinomialParameters,
    DistributionParameters,
    PoissonParameters,
)


class TestDistributionParameters:
    """Tests for the tagged parameter union."""

    def test_binomial_defaults(self):
        params = BinomialParameters()

        assert (params.n, params.p) == (10, 0.5)
        assert params.mean == 5.0

    def test_poisson_accepts_lambda_key(self):
        params = PoissonParameters.model_validate({"lambda": 2.5})

        assert params.lam == 2.5
        assert params.mean == 2.5
        assert params.model_dump(by_alias=True) == {"family": "poisson", "lambda": 2.5}

    def test_discriminated_union(self):
        adapter = TypeAdapter(DistributionParameters)

        binomial = adapter.validate_python({"family": "binomial", "n": 4, "p": 0.2})
        poisson = adapter.validate_python({"family": "poisson", "lambda": 3})

        assert isinstance(binomial, BinomialParameters)
        assert isinstance(poisson, PoissonParameters)

    @pytest.mark.parametrize(
        "payload",
        [
            {"family": "binomial", "n": -1, "p": 0.5},
            {"family": "binomial", "n": 5, "p": 1.01},
            {"family": "binomial", "n": 5, "p": -0.1},
            {"family": "poisson", "lambda": -2},
            {"family": "normal", "mu": 0},
        ],
    )
    def test_rejects_out_of_range(self, payload):
        with pytest.raises(ValidationError):
            TypeAdapter(DistributionParameters).validate_python(payload)

    def test_parameters_are_immutable(self):
        params = BinomialParameters(n=3, p=0.1)

        with pytest.raises(ValidationError):
            params.n = 4


class TestChartControls:
    """Tests for mode switching and slider updates."""

    def test_defaults(self):
        controls = ChartControls()

        assert controls.mode == "binomial"
        assert controls.active == BinomialParameters(n=10, p=0.5)
        assert controls.poisson.lam == 5.0

    def test_toggle_switches_active_record(self):
        controls = ChartControls().toggle_mode()

        assert controls.mode == "poisson"
        assert controls.active == PoissonParameters(lam=5.0)

    def test_toggle_back_restores_prior_settings(self):
        controls = ChartControls()
        controls = controls.with_trials(25).with_primary(0.3)
        controls = controls.toggle_mode().with_primary(7.5)

        back = controls.toggle_mode()
        assert back.active == BinomialParameters(n=25, p=0.3)

        again = back.toggle_mode()
        assert again.active == PoissonParameters(lam=7.5)

    def test_repeated_toggles_keep_both_records(self):
        controls = ChartControls(
            binomial=BinomialParameters(n=12, p=0.8),
            poisson=PoissonParameters(lam=1.5),
        )
        for _ in range(5):
            controls = controls.toggle_mode()

        assert controls.mode == "poisson"
        assert controls.binomial == BinomialParameters(n=12, p=0.8)
        assert controls.poisson == PoissonParameters(lam=1.5)

    def test_primary_slider_targets_active_family(self):
        binomial_mode = ChartControls().with_primary(0.9)
        poisson_mode = ChartControls(mode="poisson").with_primary(0.9)

        assert binomial_mode.binomial.p == 0.9
        assert binomial_mode.poisson.lam == 5.0
        assert poisson_mode.poisson.lam == 0.9
        assert poisson_mode.binomial.p == 0.5

    def test_trials_slider_only_touches_binomial(self):
        controls = ChartControls(mode="poisson").with_trials(40)

        assert controls.binomial.n == 40
        assert controls.active == PoissonParameters(lam=5.0)

    def test_updates_return_new_objects(self):
        original = ChartControls()
        updated = original.with_primary(0.2)

        assert original.binomial.p == 0.5
        assert updated is not original

    def test_invalid_probability_raises_parameter_error(self):
        with pytest.raises(ParameterError, match="binomial"):
            ChartControls().with_primary(1.5)

    def test_invalid_trials_raises_parameter_error(self):
        with pytest.raises(ParameterError):
            ChartControls().with_trials(-3)
