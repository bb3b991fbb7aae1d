# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for the record store, the notifier and the
# waitlist service built from them. Tests swap these out through
# app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends

from core.services.waitlist_service import WaitlistService
from lib.notifier import ResendNotifier, get_notifier
from lib.supabase_client import SupabaseClient


def get_supabase_client() -> type[SupabaseClient]:
    """
    Get Supabase client wrapper.

    Returns the singleton client wrapper class.
    """
    return SupabaseClient


def get_email_notifier() -> ResendNotifier | None:
    """Get the Resend notifier, or None when email is not configured."""
    return get_notifier()


def get_waitlist_service(
    store: Annotated[type[SupabaseClient], Depends(get_supabase_client)],
    notifier: Annotated[ResendNotifier | None, Depends(get_email_notifier)],
) -> WaitlistService:
    """Build the waitlist service from the injected collaborators."""
    return WaitlistService(
        store=store,
        notifier=notifier,
    )


# Type aliases for dependency injection
SupabaseDep = Annotated[type[SupabaseClient], Depends(get_supabase_client)]
WaitlistServiceDep = Annotated[WaitlistService, Depends(get_waitlist_service)]
