# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains the external service wrappers:
# - supabase_client.py: Typed Supabase wrapper for the waitlist table
# - notifier.py: Resend email sender
# - email_templates.py: Welcome email subject and body
# =============================================================================

from lib.supabase_client import (
    DuplicateRecordError,
    SupabaseClient,
    SupabaseClientError,
)
from lib.email_templates import RenderedEmail, render_welcome_email

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    "DuplicateRecordError",
    # Email
    "RenderedEmail",
    "render_welcome_email",
]
