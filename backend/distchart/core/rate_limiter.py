"""Rate limiting configuration using slowapi.

Chart endpoints are called on every slider movement, so they get a generous
per-IP budget. Rate limiting is disabled in dev environment.
"""

from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from distchart.core.config import settings

IS_DEV_ENVIRONMENT = settings.environment.lower() == "dev"

# In-memory storage; single-instance deployment
limiter = Limiter(key_func=get_remote_address, enabled=not IS_DEV_ENVIRONMENT)

LAYOUT_RATE_LIMIT = "120/minute"  # fired on every slider input event
SCENE_RATE_LIMIT = "60/minute"
