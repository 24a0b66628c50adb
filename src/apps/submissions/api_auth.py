"""Static bearer-token authentication for the submissions API."""

import hmac
import logging

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def get_client_ip(request) -> str:
    """Extract client IP, respecting X-Forwarded-For behind a proxy."""
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "unknown")


def is_authorized(auth_header: str) -> bool:
    """Return True if the header is exactly ``Bearer <DASHBOARD_SECRET_KEY>``."""
    secret = getattr(settings, "DASHBOARD_SECRET_KEY", "")
    if not secret:
        return False
    expected = f"Bearer {secret}"
    return hmac.compare_digest(auth_header.encode(), expected.encode())


class DashboardKeyAuthMixin:
    """
    Mixin for class-based views guarded by the shared dashboard key.

    Rejects the request with 401 before any handler runs.
    """

    async def dispatch(self, request, *args, **kwargs):
        """Validate the bearer header before dispatching to the handler."""
        if not getattr(settings, "DASHBOARD_SECRET_KEY", ""):
            logger.warning("DASHBOARD_SECRET_KEY is not configured; rejecting %s", request.path)
            return JsonResponse({"error": "Unauthorized"}, status=401)

        auth_header = request.headers.get("Authorization", "")
        if not is_authorized(auth_header):
            logger.warning("Unauthorized request to %s from %s", request.path, get_client_ip(request))
            return JsonResponse({"error": "Unauthorized"}, status=401)

        return await super().dispatch(request, *args, **kwargs)
