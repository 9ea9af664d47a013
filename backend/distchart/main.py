"""FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from distchart.api.routes import chart, distributions
from distchart.core import DistChartError, settings
from distchart.core.config import get_cors_origins
from distchart.core.rate_limiter import limiter

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Probability data and bar layouts for an AR distribution chart",
)

# Register rate limiter with app state
app.state.limiter = limiter

app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DistChartError)
async def dist_chart_error_handler(request: Request, exc: DistChartError) -> JSONResponse:
    """Handle custom DistChartError exceptions."""
    return JSONResponse(
        status_code=400,
        content=exc.to_dict(),
    )


app.include_router(distributions.router, prefix="/api/distributions", tags=["Distributions"])
app.include_router(chart.router, prefix="/api/chart", tags=["Chart"])


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "docs": "/docs",
    }
