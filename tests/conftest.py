# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - In-memory record store and notifier fakes
# - A TestClient wired to the fakes through dependency overrides
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
# Empty means "not configured"; individual tests opt in to email
os.environ["RESEND_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient

from lib.supabase_client import DuplicateRecordError, SupabaseClientError


# =============================================================================
# Fakes
# =============================================================================

class InMemorySignupStore:
    """Waitlist table stand-in with a unique constraint on email."""

    def __init__(self):
        self.rows: list[dict] = []
        self.insert_calls = 0
        self.count_calls = 0
        self.insert_error: Exception | None = None
        self.count_error: Exception | None = None

    def seed(self, count: int) -> None:
        """Pre-fill the table with `count` unrelated signups."""
        for i in range(count):
            self.rows.append({"email": f"seed{i}@example.com", "name": None, "message": None})

    def insert_signup(self, data: dict) -> dict:
        self.insert_calls += 1
        if self.insert_error is not None:
            raise self.insert_error
        if any(row["email"] == data["email"] for row in self.rows):
            raise DuplicateRecordError("waitlist", "duplicate key value violates unique constraint")
        row = {"id": len(self.rows) + 1, **data, "created_at": "2025-01-15T10:30:00Z"}
        self.rows.append(row)
        return row

    def count_signups(self) -> int:
        self.count_calls += 1
        if self.count_error is not None:
            raise self.count_error
        return len(self.rows)

    def ping(self) -> None:
        if self.count_error is not None:
            raise SupabaseClientError("connection refused", code="PING_FAILED")

    def rows_for(self, email: str) -> list[dict]:
        return [row for row in self.rows if row["email"] == email]


class RecordingNotifier:
    """Collects sent emails instead of sending them."""

    def __init__(self):
        self.sent: list[dict] = []

    def send(self, to: str, subject: str, html: str) -> dict:
        self.sent.append({"to": to, "subject": subject, "html": html})
        return {"id": f"email-{len(self.sent)}"}


class FailingNotifier:
    """Notifier whose every send blows up."""

    def __init__(self, error: Exception | None = None):
        self.error = error or RuntimeError("Resend is down")
        self.attempts = 0

    def send(self, to: str, subject: str, html: str) -> dict:
        self.attempts += 1
        raise self.error


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """Empty in-memory waitlist table."""
    return InMemorySignupStore()


@pytest.fixture
def notifier():
    """Notifier that records emails."""
    return RecordingNotifier()


@pytest.fixture
def failing_notifier():
    """Notifier that always raises."""
    return FailingNotifier()


@pytest.fixture
def make_client(store):
    """
    Factory for a TestClient using the in-memory store and the given notifier.

    Usage:
        client = make_client(notifier)
    """
    from app.main import app
    from app.dependencies import get_email_notifier, get_supabase_client

    def _make(notifier=None) -> TestClient:
        app.dependency_overrides[get_supabase_client] = lambda: store
        app.dependency_overrides[get_email_notifier] = lambda: notifier
        return TestClient(app)

    yield _make

    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    """TestClient with no email configured."""
    return make_client(None)


@pytest.fixture
def sample_signup_payload():
    """A valid waitlist submission."""
    return {
        "name": "Priya Sharma",
        "email": "Priya@Example.com",
        "message": "Need GST-ready invoices",
    }
