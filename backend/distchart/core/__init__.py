"""Core module - configuration and exceptions."""

from __future__ import annotations

from distchart.core.config import settings
from distchart.core.exceptions import (
    DistChartError,
    LayoutError,
    LimitError,
    OutcomeNotFoundError,
    ParameterError,
)

__all__ = [
    "settings",
    "DistChartError",
    "ParameterError",
    "LimitError",
    "LayoutError",
    "OutcomeNotFoundError",
]
