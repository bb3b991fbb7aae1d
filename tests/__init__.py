# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the TaxMate waitlist API:
# - test_waitlist_service.py: Submission flow against an in-memory store
# - test_waitlist_api.py: HTTP status codes and bodies
# - test_supabase_client.py / test_notifier.py: SDK wrappers (mocked)
# - test_email_templates.py, test_models.py, test_config.py, test_health.py
#
# Run tests with: poetry run pytest
# =============================================================================
