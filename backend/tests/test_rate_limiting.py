"""Tests for rate limiting on chart endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from distchart.main import app

TEST_CHART = {"parameters": {"family": "binomial", "n": 10, "p": 0.5}}


class TestRateLimitingConfiguration:
    """Test rate limiting configuration."""

    def test_rate_limiter_disabled_in_dev(self):
        """Test that rate limiter is disabled in dev environment."""
        from distchart.core.rate_limiter import IS_DEV_ENVIRONMENT, limiter

        assert IS_DEV_ENVIRONMENT is True
        assert limiter.enabled is False

    def test_layout_not_limited_in_dev(self):
        """Test that /layout is not rate limited in dev environment."""
        with TestClient(app) as client:
            # The limit would be 120/minute if enabled
            for i in range(125):
                response = client.post("/api/chart/layout", json=TEST_CHART)
                assert response.status_code == 200, f"Request {i+1} should not be rate limited in dev"

    def test_slider_controls_not_limited_in_dev(self):
        """Test that the slider endpoints share the layout budget but are open in dev."""
        controls = {"mode": "binomial", "binomial": {"n": 10, "p": 0.5}, "poisson": {"lambda": 5.0}}
        with TestClient(app) as client:
            for i in range(125):
                response = client.post(
                    "/api/chart/controls/trials", json={"controls": controls, "n": 12}
                )
                assert response.status_code == 200, f"Request {i+1} should not be rate limited in dev"
                response = client.post(
                    "/api/chart/controls/primary", json={"controls": controls, "value": 0.4}
                )
                assert response.status_code == 200, f"Request {i+1} should not be rate limited in dev"

    def test_slider_endpoints_are_decorated(self):
        from distchart.core.rate_limiter import LAYOUT_RATE_LIMIT, limiter

        limited = {name.rsplit(".", 1)[-1] for name in limiter._route_limits}
        assert {"layout", "set_trials", "set_primary"} <= limited
        assert LAYOUT_RATE_LIMIT == "120/minute"

    def test_scene_not_limited_in_dev(self):
        """Test that /scene is not rate limited in dev environment."""
        with TestClient(app) as client:
            for i in range(65):
                response = client.post("/api/chart/scene", json=TEST_CHART)
                assert response.status_code == 200, f"Request {i+1} should not be rate limited in dev"


class TestRateLimitingIsolation:
    """Test that rate limiting doesn't affect unrelated endpoints."""

    def test_health_endpoint_not_rate_limited(self):
        with TestClient(app) as client:
            for i in range(5):
                response = client.get("/health")
                assert response.status_code == 200, f"Health check {i+1} should not be rate limited"

    def test_distributions_endpoint_not_rate_limited(self):
        with TestClient(app) as client:
            for i in range(5):
                response = client.get("/api/distributions")
                assert response.status_code == 200, f"Request {i+1} should succeed"


class TestRateLimitConstants:
    def test_rate_limit_constants_exist(self):
        from distchart.core.rate_limiter import LAYOUT_RATE_LIMIT, SCENE_RATE_LIMIT

        assert LAYOUT_RATE_LIMIT == "120/minute"
        assert SCENE_RATE_LIMIT == "60/minute"
