# =============================================================================
# tests/test_email_templates.py - Welcome Email Rendering Tests
# =============================================================================

from lib.email_templates import render_subject, render_welcome_email


class TestRenderSubject:
    """Subject line depends only on position and early-bird status."""

    def test_early_bird_subject_has_rank(self):
        assert render_subject(7, True) == "🎉 You're #7 on the TaxMate Waitlist!"

    def test_regular_subject(self):
        assert render_subject(250, False) == "🎉 Welcome to TaxMate Waitlist!"


class TestRenderWelcomeEmail:
    """Body content for early birds and everyone else."""

    def test_early_bird_body(self):
        email = render_welcome_email("Priya", position=12, early_bird=True, spots_left=88)

        assert email.subject == "🎉 You're #12 on the TaxMate Waitlist!"
        assert "Hey Priya" in email.html
        assert "#12 on the early access list" in email.html
        assert "Only 88 spots left" in email.html
        assert "EARLY BIRD SPECIAL" in email.html

    def test_regular_body(self):
        email = render_welcome_email("Priya", position=151, early_bird=False, spots_left=0)

        assert "151 total members" in email.html
        assert "EARLY BIRD SPECIAL" not in email.html
        assert "Early access to new features" in email.html

    def test_generic_greeting_without_name(self):
        email = render_welcome_email(None, position=1, early_bird=True, spots_left=99)

        assert "Hey there" in email.html

    def test_name_is_escaped(self):
        email = render_welcome_email("<script>x</script>", position=1, early_bird=True, spots_left=99)

        assert "<script>" not in email.html
        assert "&lt;script&gt;" in email.html
