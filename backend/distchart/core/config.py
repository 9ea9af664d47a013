"""Application configuration and constants."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    app_name: str = "AR Distribution Chart"
    debug: bool = False
    environment: str = "dev"  # dev, staging, prod

    # CORS - comma-separated list of allowed origins
    # Default allows localhost for dev. In prod, set explicitly to the AR viewer domain(s)
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"

    # Parameter limits
    max_trials: int = 1000
    max_lambda: float = 500.0

    # Chart layout defaults (scene units)
    bar_width: float = 0.05
    spacing_unit: float = 0.08
    base_height: float = 0.15
    max_bar_height: float = 0.8
    chart_padding: float = 0.1

    class Config:
        env_file = ".env"
        env_prefix = "DC_"
        extra = "ignore"


settings = Settings()


def get_cors_origins(config: Settings | None = None) -> list[str]:
    """Origins the AR viewer may call from.

    A bare "*" is honoured only in dev; elsewhere it disables CORS entirely.
    """
    config = config or settings
    raw = config.cors_origins.strip()
    if raw == "*":
        return ["*"] if config.environment == "dev" else []
    return [origin for origin in (part.strip() for part in raw.split(",")) if origin]


# Binomial coefficients are rounded to this many decimals to suppress drift
BINOMIAL_COEFFICIENT_DECIMALS = 5

# Poisson truncation: keep emitting while mass < target or the tail term is
# still above epsilon, but never past lambda + margin
POISSON_MASS_TARGET = 0.999
POISSON_TAIL_EPSILON = 1e-5
POISSON_SAFETY_MARGIN = 50

# Bars below this probability are not drawn
PROBABILITY_FLOOR = 1e-8
MIN_VISIBLE_HEIGHT = 0.001

# Scene geometry of the AR widget
BAR_COLOR = "#4a90e2"
LABEL_COLOR = "#fff"
LABEL_DROP = 0.03
LABEL_SCALE = 0.2
GROUND_COLOR = "#333"
GROUND_DEPTH = 1.2
GROUND_OPACITY = 0.8
FLAT_ROTATION = (-90.0, 0.0, 0.0)

# Digits shown in the tap readout
READOUT_DECIMALS = 6
