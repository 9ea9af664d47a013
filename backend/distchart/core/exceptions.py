"""Custom exceptions for the distribution chart service."""

from __future__ import annotations

from typing import Any


class DistChartError(Exception):
    """Base exception for all distribution chart errors."""

    code: str = "UNKNOWN_ERROR"
    phase: str = "unknown"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to error response dict."""
        error = {
            "code": self.code,
            "message": self.message,
            "phase": self.phase,
        }
        if self.details:
            error["details"] = self.details
        return {"error": error}


class ParameterError(DistChartError):
    """Distribution parameters are invalid."""

    code = "INVALID_PARAMETER"
    phase = "validate"

    def __init__(self, family: str, error_msg: str):
        super().__init__(
            message=f"Distribution '{family}' error: {error_msg}",
            details={"family": family, "error": error_msg},
        )


class LimitError(ParameterError):
    """Exceeded configured limits."""

    code = "LIMIT_ERROR"

    def __init__(self, family: str, limit_name: str, value: float, max_value: float):
        super().__init__(family, f"Exceeded {limit_name} limit: {value} > {max_value}")
        self.details.update({"limit": limit_name, "value": value, "max": max_value})


class LayoutError(DistChartError):
    """Chart layout could not be computed."""

    code = "LAYOUT_ERROR"
    phase = "layout"


class OutcomeNotFoundError(LayoutError):
    """Tapped outcome has no bar in the current chart."""

    code = "OUTCOME_NOT_FOUND"

    def __init__(self, outcome: int, available_outcomes: list[int]):
        super().__init__(
            message=f"Outcome {outcome} has no bar in the current chart",
            details={"outcome": outcome, "available_outcomes": available_outcomes},
        )
