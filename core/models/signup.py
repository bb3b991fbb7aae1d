# =============================================================================
# core/models/signup.py - Waitlist Schemas
# =============================================================================
# These models define the contract for waitlist operations:
# - WaitlistRequest: POST body from the landing page modal
# - Signup: the normalized row written to the waitlist table
# - SignupResult: derived position / early-bird values (never persisted)
# - WaitlistResponse: success body returned to the browser
#
# Email checks are done by the service, not by field validators, so a bad
# email is reported as a 400 with a friendly message instead of a 422.
# =============================================================================

from pydantic import BaseModel, Field


class WaitlistRequest(BaseModel):
    """
    Body of POST /api/waitlist.

    Example:
        {
            "name": "Priya",
            "email": "priya@example.com",
            "message": "Need GST invoices"
        }
    """

    name: str | None = Field(
        default=None,
        description="Optional display name used in the welcome email"
    )

    email: str | None = Field(
        default=None,
        description="Email address to add to the waitlist"
    )

    message: str | None = Field(
        default=None,
        description="Optional free-form note from the visitor"
    )


class Signup(BaseModel):
    """
    A waitlist row as it is inserted.

    created_at is assigned by the database, so it is not part of this model.
    """

    email: str = Field(
        ...,
        min_length=3,
        description="Lower-cased, trimmed email (unique)"
    )

    name: str | None = Field(
        default=None,
        description="Name as submitted, or None"
    )

    message: str | None = Field(
        default=None,
        description="Message as submitted, or None"
    )


class SignupResult(BaseModel):
    """Outcome of a successful submission."""

    signup: Signup

    # Total row count read after the insert
    position: int = Field(..., ge=0)

    early_bird: bool

    spots_left: int = Field(..., ge=0)


class WaitlistResponse(BaseModel):
    """Success body. Intentionally carries no position or email status."""

    success: bool = Field(default=True)
    message: str = Field(default="Successfully joined the waitlist!")

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "message": "Successfully joined the waitlist!"
            }
        }
    }
