"""API views exposing stored form submissions."""

import json
import logging

from asgiref.sync import sync_to_async
from django.core.serializers.json import DjangoJSONEncoder
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from . import store
from .api_auth import DashboardKeyAuthMixin

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name="dispatch")
class APISubmissionListView(DashboardKeyAuthMixin, View):
    """API: Return every submission, newest first."""

    http_method_names = ["get"]

    async def get(self, request: HttpRequest) -> HttpResponse:
        """Return the full submission set as a JSON array."""
        try:
            submissions = await sync_to_async(store.list_submissions)()
            body = json.dumps(submissions, cls=DjangoJSONEncoder)
        except Exception:
            logger.exception("Failed to fetch enquiries")
            return JsonResponse({"error": "Internal Server Error"}, status=500)

        return HttpResponse(body, content_type="application/json")
