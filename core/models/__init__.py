# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# - signup.py: Waitlist request, stored row, derived result and response
# =============================================================================

from .signup import (
    Signup,
    SignupResult,
    WaitlistRequest,
    WaitlistResponse,
)

__all__ = [
    "Signup",
    "SignupResult",
    "WaitlistRequest",
    "WaitlistResponse",
]
