# =============================================================================
# lib/email_templates.py - Welcome Email Template
# =============================================================================
# Renders the subject and HTML body of the waitlist welcome email.
# Early birds (position within the early-bird limit) get their rank and
# the number of discounted spots left; everyone else gets the member count.
# =============================================================================

from dataclasses import dataclass
from html import escape

DEFAULT_GREETING_NAME = "there"
LIFETIME_PRICE = "₹999"


@dataclass
class RenderedEmail:
    """Subject line plus HTML body."""
    subject: str
    html: str


def render_subject(position: int, early_bird: bool) -> str:
    if early_bird:
        return f"🎉 You're #{position} on the TaxMate Waitlist!"
    return "🎉 Welcome to TaxMate Waitlist!"


def render_welcome_email(
    name: str | None,
    position: int,
    early_bird: bool,
    spots_left: int,
) -> RenderedEmail:
    """
    Render the welcome email.

    Args:
        name: Visitor's name, or None for the generic greeting
        position: 1-indexed signup count after the insert
        early_bird: Whether the visitor got early-bird pricing
        spots_left: Early-bird spots remaining

    Returns:
        RenderedEmail with subject and html
    """
    greeting_name = escape(name) if name else DEFAULT_GREETING_NAME

    if early_bird:
        status_line = f"You're #{position} on the early access list"
        badge = (
            '<div style="background:#10B981;border-radius:12px;padding:16px;'
            'text-align:center;margin-bottom:24px;color:white;">'
            "<p style=\"font-weight:700;margin:0;\">🎊 EARLY BIRD SPECIAL</p>"
            f'<p style="margin:8px 0 0 0;">Only {spots_left} spots left for '
            f"lifetime access at {LIFETIME_PRICE}!</p>"
            "</div>"
        )
        intro = (
            f"Thanks for joining! You're one of the <strong>first {position} users</strong> "
            f"and you've locked in <strong>lifetime access for just {LIFETIME_PRICE}</strong>! 🎉"
        )
        perk = f"<li><strong>Your lifetime pricing is locked in at {LIFETIME_PRICE} ✓</strong></li>"
    else:
        status_line = f"You're on the waitlist ({position} total members)"
        badge = ""
        intro = (
            "Thanks for joining! You're on the waitlist for "
            "<strong>early access</strong> to TaxMate."
        )
        perk = "<li>Early access to new features</li>"

    html = f"""
<div style="font-family:'Inter',-apple-system,sans-serif;max-width:600px;margin:0 auto;padding:40px 20px;">
  <div style="text-align:center;margin-bottom:40px;">
    <h1 style="color:#3B82F6;font-size:32px;margin:0 0 10px 0;">🎉 Welcome to TaxMate!</h1>
    <p style="color:#6B7280;font-size:16px;margin:0;">{status_line}</p>
  </div>
  {badge}
  <div style="background:white;border-radius:16px;padding:32px;">
    <p style="color:#111827;font-size:16px;">Hey {greeting_name} 👋</p>
    <p style="color:#4B5563;font-size:16px;">{intro}</p>
    <p style="color:#4B5563;font-size:16px;">
      We're building TaxMate to help freelancers like you
      <strong>create professional invoices in seconds</strong>.
    </p>
    <h3 style="color:#111827;font-size:16px;">📬 What happens next?</h3>
    <ul style="color:#4B5563;font-size:14px;">
      <li>We'll send you updates as we build</li>
      <li>Be first in line when we launch</li>
      {perk}
    </ul>
  </div>
  <p style="text-align:center;color:#9CA3AF;font-size:13px;">— The TaxMate Team</p>
</div>
"""

    return RenderedEmail(
        subject=render_subject(position, early_bird),
        html=html,
    )
