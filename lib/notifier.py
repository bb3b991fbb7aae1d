# =============================================================================
# lib/notifier.py - Resend Email Notifier
# =============================================================================
# Thin wrapper around the Resend SDK. The notifier raises on failure;
# deciding whether a failed email matters is the caller's job.
#
# Usage:
#   from lib.notifier import get_notifier
#   notifier = get_notifier()          # None when RESEND_API_KEY is unset
#   if notifier:
#       notifier.send("user@example.com", "Hello", "<p>Hi</p>")
# =============================================================================

import logging
from functools import lru_cache
from typing import Any

import resend

from app.config import settings
from app.exceptions import NotificationError

logger = logging.getLogger(__name__)


class ResendNotifier:
    """Sends HTML email through Resend."""

    def __init__(self, api_key: str, sender: str):
        self.api_key = api_key
        self.sender = sender
        # The SDK reads its key from module state
        resend.api_key = api_key

    def send(self, to: str, subject: str, html: str) -> dict[str, Any]:
        """
        Send one email.

        Returns:
            The Resend response (contains the message id)

        Raises:
            NotificationError: If Resend rejects the request or is unreachable
        """
        params: resend.Emails.SendParams = {
            "from": self.sender,
            "to": [to],
            "subject": subject,
            "html": html,
        }

        try:
            response = resend.Emails.send(params)
        except Exception as e:
            raise NotificationError(str(e))

        logger.debug(f"Sent email '{subject}' to {to}")
        return response


@lru_cache
def _build_notifier(api_key: str, sender: str) -> ResendNotifier:
    return ResendNotifier(api_key=api_key, sender=sender)


def get_notifier() -> ResendNotifier | None:
    """
    Get the notifier for the current settings.

    One instance is built per (api key, sender) pair and reused across
    requests. Returns None when email is not configured.
    """
    if not settings.email_enabled:
        return None
    return _build_notifier(settings.RESEND_API_KEY, settings.EMAIL_FROM)
