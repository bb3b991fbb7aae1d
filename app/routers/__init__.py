# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - waitlist.py: Waitlist signup endpoint
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import waitlist

__all__ = [
    "health",
    "waitlist",
]
