# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - users.py: The users controller (the review target)
# - fixture.py: Seeded findings manifest
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import users
from . import fixture

__all__ = [
    "health",
    "users",
    "fixture",
]
