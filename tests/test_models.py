# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the waitlist models to ensure:
# - Optional fields default to None
# - Invalid data raises ValidationError
# - The success response serializes to the shape the landing page reads
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import Signup, SignupResult, WaitlistRequest, WaitlistResponse


class TestWaitlistRequest:
    """Tests for WaitlistRequest model."""

    def test_all_fields(self):
        request = WaitlistRequest(name="Priya", email="a@b.co", message="Hi")

        assert request.name == "Priya"
        assert request.email == "a@b.co"
        assert request.message == "Hi"

    def test_everything_optional(self):
        # Missing email is reported by the service, not the model
        request = WaitlistRequest()

        assert request.email is None
        assert request.name is None
        assert request.message is None

    def test_non_string_email_rejected(self):
        with pytest.raises(ValidationError):
            WaitlistRequest(email=123)


class TestSignup:
    """Tests for Signup model."""

    def test_dump_has_nullable_columns(self):
        signup = Signup(email="a@b.co")

        assert signup.model_dump() == {"email": "a@b.co", "name": None, "message": None}

    def test_email_required(self):
        with pytest.raises(ValidationError):
            Signup(name="Priya")


class TestSignupResult:
    """Tests for SignupResult model."""

    def test_negative_spots_rejected(self):
        with pytest.raises(ValidationError):
            SignupResult(
                signup=Signup(email="a@b.co"),
                position=101,
                early_bird=False,
                spots_left=-1,
            )


class TestWaitlistResponse:
    """Tests for WaitlistResponse model."""

    def test_defaults(self):
        assert WaitlistResponse().model_dump() == {
            "success": True,
            "message": "Successfully joined the waitlist!",
        }
