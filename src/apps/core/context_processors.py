"""Context processors for the core app."""

from django.http import HttpRequest


def site_context(request: HttpRequest) -> dict:
    """Add site-wide context variables to all templates."""
    return {
        "SITE_NAME": "SuperShield",
        "SITE_TAGLINE": "Submissions Dashboard",
    }
