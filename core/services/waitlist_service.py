# =============================================================================
# core/services/waitlist_service.py - Waitlist Business Logic
# =============================================================================
# Handles one waitlist submission end to end:
#   validate -> normalize -> insert -> count -> welcome email -> result
#
# The record store and the notifier are passed in, so routes get the real
# Supabase/Resend wrappers and tests get in-memory fakes.
# =============================================================================

import logging
import re
from typing import Any, Callable, Protocol

from app.config import settings
from lib.supabase_client import DuplicateRecordError
from lib.email_templates import render_welcome_email
from core.models.signup import Signup, SignupResult, WaitlistRequest
from app.exceptions import (
    DuplicateEmailError,
    PersistenceError,
    SignupValidationError,
)

logger = logging.getLogger(__name__)

# Deliberately permissive: something@something.something, no whitespace
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class SignupStore(Protocol):
    """Persistent waitlist table with a unique constraint on email."""

    def insert_signup(self, data: dict[str, Any]) -> dict[str, Any]: ...

    def count_signups(self) -> int: ...


class Notifier(Protocol):
    """Email sender. May raise on failure."""

    def send(self, to: str, subject: str, html: str) -> Any: ...


def validate_email(email: str | None) -> None:
    """
    Check presence and format of a raw email.

    Surrounding whitespace is ignored, so "user@example.com " passes and is
    later stored trimmed.

    Raises:
        SignupValidationError: If missing, lacking "@", or malformed
    """
    if not email or "@" not in email:
        raise SignupValidationError("Valid email is required")

    if not EMAIL_PATTERN.match(email.strip()):
        raise SignupValidationError("Invalid email format")


def normalize_signup(request: WaitlistRequest) -> Signup:
    """Lower-case and trim the email; empty name/message become None."""
    return Signup(
        email=request.email.strip().lower(),
        name=request.name or None,
        message=request.message or None,
    )


def compute_position(count: int, limit: int) -> tuple[int, bool, int]:
    """
    Derive (position, early_bird, spots_left) from a row count.

    Example:
        compute_position(100, limit=100)  # (100, True, 0)
        compute_position(151, limit=100)  # (151, False, 0)
    """
    position = count
    return position, position <= limit, max(0, limit - position)


class WaitlistService:
    """
    Service for waitlist submissions.

    Holds no per-request state; a single instance can serve every request.
    """

    def __init__(
        self,
        store: SignupStore,
        notifier: Notifier | None = None,
        early_bird_limit: int | None = None,
    ):
        self.store = store
        self.notifier = notifier
        if early_bird_limit is None:
            early_bird_limit = settings.EARLY_BIRD_LIMIT
        self.early_bird_limit = early_bird_limit

    def submit(
        self,
        request: WaitlistRequest,
        defer: Callable[..., Any] | None = None,
    ) -> SignupResult:
        """
        Add a visitor to the waitlist.

        Args:
            request: Submitted name/email/message
            defer: Optional scheduler for the welcome email, called as
                defer(func, *args). Routes pass BackgroundTasks.add_task so
                the email goes out after the response. Without it the email
                is sent inline.

        Returns:
            SignupResult with the derived position values

        Raises:
            SignupValidationError: Missing or malformed email (nothing written)
            DuplicateEmailError: Normalized email already on the waitlist
            PersistenceError: Any other insert failure
        """
        validate_email(request.email)
        signup = normalize_signup(request)

        # The insert is the uniqueness check; no lookup beforehand
        try:
            self.store.insert_signup(signup.model_dump())
        except DuplicateRecordError:
            logger.info(f"Duplicate waitlist signup: {signup.email}")
            raise DuplicateEmailError(signup.email)
        except Exception as e:
            logger.error(f"Failed to save waitlist signup: {e}")
            raise PersistenceError(str(e))

        # Not atomic with the insert; concurrent signups may see the same count
        try:
            count = self.store.count_signups()
        except Exception as e:
            logger.warning(f"Failed to count waitlist signups: {e}")
            count = 0

        position, early_bird, spots_left = compute_position(count, self.early_bird_limit)
        result = SignupResult(
            signup=signup,
            position=position,
            early_bird=early_bird,
            spots_left=spots_left,
        )
        logger.info(f"New waitlist signup: {signup.email} (position {position})")

        if self.notifier is not None:
            if defer is not None:
                defer(self.send_welcome_email, result)
            else:
                self.send_welcome_email(result)

        return result

    def send_welcome_email(self, result: SignupResult) -> bool:
        """
        Send the welcome email for a stored signup.

        This is the only place email errors are handled. Every failure is
        logged and dropped; the submission result never depends on it.

        Returns:
            True if the notifier accepted the email
        """
        if self.notifier is None:
            return False

        email = render_welcome_email(
            name=result.signup.name,
            position=result.position,
            early_bird=result.early_bird,
            spots_left=result.spots_left,
        )

        try:
            self.notifier.send(result.signup.email, email.subject, email.html)
        except Exception as e:
            logger.warning(f"Welcome email to {result.signup.email} failed: {e}")
            return False

        return True
