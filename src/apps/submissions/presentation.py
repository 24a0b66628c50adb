"""Turn raw submission documents into dashboard table rows."""

from dataclasses import dataclass, field
from datetime import datetime
from zoneinfo import ZoneInfo

from django.conf import settings
from django.db import models
from django.utils.dateparse import parse_datetime
from django.utils.timezone import is_naive, make_aware

PLACEHOLDER = "N/A"
EMPTY_MESSAGE = "No submissions found for this category."

COLUMNS = [
    "Name",
    "Company",
    "Email",
    "Phone",
    "City",
    "Customer Category",
    "Type",
    "Resume",
    "State",
    "Subject",
    "Message",
    "Submitted On",
]


class SubmissionType(models.TextChoices):
    CONTACT = "contact", "Contact"
    ENQUIRY = "enquiry", "Enquiry"
    CAREER = "career", "Career"


class SubmissionFilter(models.TextChoices):
    ALL = "all", "All"
    ENQUIRY = "enquiry", "Enquiry"
    CONTACT = "contact", "Contact"
    CAREER = "career", "Career"


BADGE_CLASSES = {
    SubmissionType.CAREER.value: "bg-blue-100 text-blue-800",
    SubmissionType.ENQUIRY.value: "bg-green-100 text-green-800",
}
DEFAULT_BADGE_CLASS = "bg-purple-100 text-purple-800"


def _text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _or_placeholder(value) -> str:
    return _text(value) or PLACEHOLDER


def display_name(submission: dict) -> str:
    """``fullName`` wins, then first/last name, then the placeholder."""
    full_name = _text(submission.get("fullName"))
    if full_name:
        return full_name
    joined = f"{_text(submission.get('firstName'))} {_text(submission.get('lastName'))}".strip()
    return joined or PLACEHOLDER


def resume_status(submission: dict) -> str:
    if submission.get("type") == SubmissionType.CAREER and submission.get("resume"):
        return "Submitted"
    return PLACEHOLDER


def badge_class(submission_type) -> str:
    return BADGE_CLASSES.get(submission_type, DEFAULT_BADGE_CLASS)


def _parse_timestamp(value) -> datetime | None:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = parse_datetime(value.strip())
        except ValueError:
            return None
    else:
        return None
    if parsed is None:
        return None
    if is_naive(parsed):
        parsed = make_aware(parsed, ZoneInfo("UTC"))
    return parsed


def format_submitted_on(value, tz_name: str | None = None) -> str:
    """
    Format a timestamp the way en-IN locales print it: ``02/01/2024, 03:30 pm``.

    Missing or unparseable values become the placeholder.
    """
    if not value:
        return PLACEHOLDER
    parsed = _parse_timestamp(value)
    if parsed is None:
        return PLACEHOLDER
    zone = ZoneInfo(tz_name or getattr(settings, "DISPLAY_TIME_ZONE", "UTC"))
    local = parsed.astimezone(zone)
    meridiem = "am" if local.hour < 12 else "pm"
    return f"{local:%d/%m/%Y, %I:%M} {meridiem}"


def filter_submissions(submissions: list[dict], active_filter: str) -> list[dict]:
    """Exact ``type`` match; ``all`` keeps everything."""
    if active_filter == SubmissionFilter.ALL:
        return list(submissions)
    return [submission for submission in submissions if submission.get("type") == active_filter]


@dataclass
class SubmissionRow:
    """One rendered table row."""

    id: str
    type: str
    name: str
    company: str
    email: str
    phone: str
    city: str
    customer_category: str
    badge_class: str
    resume: str
    state: str
    subject: str
    message: str
    message_title: str
    submitted_on: str

    @classmethod
    def from_document(cls, submission: dict) -> "SubmissionRow":
        location = submission.get("location")
        if not isinstance(location, dict):
            location = {}
        message = _text(submission.get("message"))
        return cls(
            id=_text(submission.get("_id")),
            type=_text(submission.get("type")),
            name=display_name(submission),
            company=_or_placeholder(submission.get("companyName")),
            email=_or_placeholder(submission.get("email")),
            phone=_or_placeholder(submission.get("phone")),
            city=_or_placeholder(location.get("city")),
            customer_category=_or_placeholder(submission.get("customerCategory")),
            badge_class=badge_class(submission.get("type")),
            resume=resume_status(submission),
            state=_or_placeholder(location.get("state")),
            subject=_or_placeholder(submission.get("subject")),
            message=message or PLACEHOLDER,
            message_title=message,
            submitted_on=format_submitted_on(submission.get("createdAt")),
        )


class LoadStatus(models.TextChoices):
    LOADING = "loading", "Loading"
    READY = "ready", "Ready"
    ERROR = "error", "Error"


@dataclass
class DashboardState:
    """
    Load state of one dashboard page.

    ``loading`` moves once to ``ready`` or ``error``; both are terminal.
    The active tab is tracked by the browser and never touches this state.
    """

    status: str = LoadStatus.LOADING
    submissions: list[dict] = field(default_factory=list)
    error: str | None = None

    def resolve(self, submissions: list[dict]) -> None:
        if self.status != LoadStatus.LOADING:
            raise ValueError(f"Cannot resolve a dashboard that is already {self.status}")
        self.status = LoadStatus.READY
        self.submissions = list(submissions)
        self.error = None

    def fail(self, message: str) -> None:
        if self.status != LoadStatus.LOADING:
            raise ValueError(f"Cannot fail a dashboard that is already {self.status}")
        self.status = LoadStatus.ERROR
        self.submissions = []
        self.error = message

    @property
    def rows(self) -> list[SubmissionRow]:
        return [SubmissionRow.from_document(submission) for submission in self.submissions]

    def tab_counts(self) -> dict[str, int]:
        return {tab: len(filter_submissions(self.submissions, tab)) for tab in SubmissionFilter.values}
