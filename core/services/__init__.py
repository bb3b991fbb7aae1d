# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .waitlist_service import (
    EMAIL_PATTERN,
    Notifier,
    SignupStore,
    WaitlistService,
    compute_position,
    normalize_signup,
    validate_email,
)

__all__ = [
    "EMAIL_PATTERN",
    "Notifier",
    "SignupStore",
    "WaitlistService",
    "compute_position",
    "normalize_signup",
    "validate_email",
]
