# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the waitlist business logic:
# - models/: Pydantic schemas for requests, rows and results
# - services/: The submission flow (validate, store, count, notify)
#
# Services receive their record store and notifier as arguments, so the
# logic is testable without Supabase or Resend.
# =============================================================================
