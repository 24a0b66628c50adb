"""Dashboard views for browsing form submissions."""

import logging

from django.conf import settings
from django.http import HttpRequest, HttpResponse
from django.template.response import TemplateResponse
from django.urls import reverse
from django.utils.http import urlencode
from django.views import View
from django.views.generic import TemplateView

from .client import SubmissionsFetchError, fetch_submissions
from .presentation import (
    COLUMNS,
    EMPTY_MESSAGE,
    DashboardState,
    SubmissionFilter,
    SubmissionRow,
    filter_submissions,
)

logger = logging.getLogger(__name__)


def get_submissions_api_url() -> str:
    """Return the configured API URL; never derived from the incoming request."""
    return getattr(settings, "SUBMISSIONS_API_URL", "")


def get_active_filter(request: HttpRequest) -> str:
    """Tab selected through ``?filter=``; unknown values fall back to ``all``."""
    value = request.GET.get("filter", SubmissionFilter.ALL)
    if value not in SubmissionFilter.values:
        return SubmissionFilter.ALL
    return value


class DashboardView(TemplateView):
    """Dashboard shell; the table is loaded once by the page script."""

    template_name = "dashboard/submissions.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        active_filter = get_active_filter(self.request)
        context["tabs"] = SubmissionFilter.choices
        context["active_filter"] = active_filter
        context["table_url"] = f"{reverse('submissions:table')}?{urlencode({'filter': active_filter})}"
        return context


class SubmissionsTableView(View):
    """Fetch submissions from the API and render the table fragment."""

    template_name = "dashboard/partials/submissions_table.html"

    async def get(self, request: HttpRequest) -> HttpResponse:
        state = DashboardState()
        url = get_submissions_api_url()
        if not url:
            logger.error("SUBMISSIONS_API_URL is not configured")
            state.fail("Failed to fetch data")
        else:
            try:
                submissions = await fetch_submissions(url=url)
            except SubmissionsFetchError as exc:
                state.fail(exc.message)
            else:
                state.resolve(submissions)

        active_filter = get_active_filter(request)
        shown = {id(submission) for submission in filter_submissions(state.submissions, active_filter)}
        counts = state.tab_counts()
        context = {
            "state": state,
            "rows": [
                (SubmissionRow.from_document(submission), id(submission) in shown) for submission in state.submissions
            ],
            "has_visible_rows": bool(shown),
            "active_filter": active_filter,
            "columns": COLUMNS,
            "tabs": [(value, label, counts[value]) for value, label in SubmissionFilter.choices],
            "empty_message": EMPTY_MESSAGE,
        }
        return TemplateResponse(request, self.template_name, context)
