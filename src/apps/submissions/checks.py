"""System checks for the dashboard credentials."""

from django.conf import settings
from django.core.checks import Tags, Warning, register


@register(Tags.security)
def check_dashboard_credentials(app_configs, **kwargs) -> list[Warning]:
    """Warn when the API secret is missing or the dashboard copy does not match it."""
    secret = getattr(settings, "DASHBOARD_SECRET_KEY", "")
    client_secret = getattr(settings, "DASHBOARD_CLIENT_SECRET_KEY", "")
    warnings = []
    if not secret:
        warnings.append(
            Warning(
                "DASHBOARD_SECRET_KEY is empty; /api/enquiries will reject every request.",
                hint="Set DASHBOARD_SECRET_KEY in the environment or .env file.",
                id="submissions.W001",
            )
        )
    elif client_secret != secret:
        warnings.append(
            Warning(
                "DASHBOARD_CLIENT_SECRET_KEY does not match DASHBOARD_SECRET_KEY; the dashboard cannot load data.",
                hint="Give both settings the same value.",
                id="submissions.W002",
            )
        )
    if not getattr(settings, "SUBMISSIONS_API_URL", ""):
        warnings.append(
            Warning(
                "SUBMISSIONS_API_URL is empty; the dashboard has no endpoint to load data from.",
                hint="Set it to the absolute URL of /api/enquiries.",
                id="submissions.W003",
            )
        )
    return warnings
