"""Dashboard-side client for the submissions API."""

import asyncio
import json
import logging
from urllib.error import HTTPError, URLError

from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to fetch data"


class SubmissionsFetchError(Exception):
    """The submissions API could not be reached or answered with a failure."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGE, *, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def get_client_secret_key() -> str:
    """Return the credential the dashboard presents to the API."""
    return getattr(settings, "DASHBOARD_CLIENT_SECRET_KEY", "")


def _error_message(body: bytes) -> str:
    """Pull the ``error`` field out of a failure payload, if there is one."""
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, ValueError):
        return DEFAULT_ERROR_MESSAGE
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return DEFAULT_ERROR_MESSAGE


def _make_api_request(*, url: str, token: str, timeout: float) -> list[dict]:
    """Synchronous GET against the submissions API (for use in executors)."""
    from urllib.request import Request, urlopen

    headers = {
        "Authorization": f"Bearer {token}",
        "Accept": "application/json",
    }
    req = Request(url, headers=headers, method="GET")  # noqa: S310
    try:
        response = urlopen(req, timeout=timeout)  # noqa: S310
        body = response.read()
    except HTTPError as exc:
        body = exc.read()
        message = _error_message(body)
        logger.warning("Submissions API %s returned HTTP %s: %s", url, exc.code, message)
        raise SubmissionsFetchError(message, status=exc.code) from exc
    except (URLError, TimeoutError, OSError) as exc:
        logger.warning("Submissions API %s unreachable: %s", url, exc)
        raise SubmissionsFetchError() from exc

    try:
        data = json.loads(body)
    except (json.JSONDecodeError, ValueError) as exc:
        logger.warning("Submissions API %s returned a non-JSON body", url)
        raise SubmissionsFetchError() from exc
    if not isinstance(data, list):
        logger.warning("Submissions API %s returned %s instead of a list", url, type(data).__name__)
        raise SubmissionsFetchError()
    return data


async def fetch_submissions(*, url: str, token: str | None = None, timeout: float | None = None) -> list[dict]:
    """
    Fetch every submission from the API.

    Args:
        url: Absolute URL of the ``/api/enquiries`` endpoint.
        token: Bearer credential; defaults to ``DASHBOARD_CLIENT_SECRET_KEY``.
        timeout: Socket timeout in seconds; defaults to ``SUBMISSIONS_API_TIMEOUT``.

    Returns:
        Submissions in the order the API returned them.

    Raises:
        SubmissionsFetchError: on network failure or any non-success response.
    """
    if token is None:
        token = get_client_secret_key()
    if timeout is None:
        timeout = getattr(settings, "SUBMISSIONS_API_TIMEOUT", 30)

    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None,
        lambda: _make_api_request(url=url, token=token, timeout=timeout),
    )
