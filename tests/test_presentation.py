"""Tests for turning submissions into table rows."""

from datetime import UTC, datetime

import pytest

from apps.submissions.presentation import (
    COLUMNS,
    PLACEHOLDER,
    DashboardState,
    LoadStatus,
    SubmissionFilter,
    SubmissionRow,
    badge_class,
    display_name,
    filter_submissions,
    format_submitted_on,
    resume_status,
)

SCENARIO = [
    {"_id": "1", "type": "career", "resume": "r.pdf", "createdAt": "2024-01-02T10:00:00Z"},
    {"_id": "2", "type": "contact", "createdAt": "2024-01-01T09:00:00Z"},
]


class TestDisplayName:
    def test_full_name_takes_precedence(self) -> None:
        assert display_name({"fullName": "Asha Rao", "firstName": "A", "lastName": "R"}) == "Asha Rao"

    def test_first_and_last_are_joined(self) -> None:
        assert display_name({"firstName": "Vikram", "lastName": "Shah"}) == "Vikram Shah"

    @pytest.mark.parametrize(
        ("submission", "expected"),
        [
            ({"firstName": "Vikram"}, "Vikram"),
            ({"lastName": "Shah"}, "Shah"),
            ({"firstName": "  Vikram ", "lastName": None}, "Vikram"),
            ({"fullName": "", "firstName": "Vikram", "lastName": "Shah"}, "Vikram Shah"),
        ],
    )
    def test_partial_names_are_trimmed(self, submission: dict, expected: str) -> None:
        assert display_name(submission) == expected

    @pytest.mark.parametrize("submission", [{}, {"fullName": ""}, {"firstName": "", "lastName": "  "}])
    def test_no_name_is_placeholder(self, submission: dict) -> None:
        assert display_name(submission) == PLACEHOLDER


class TestResumeStatus:
    def test_career_with_resume(self) -> None:
        assert resume_status({"type": "career", "resume": "r.pdf"}) == "Submitted"

    @pytest.mark.parametrize(
        "submission",
        [
            {"type": "career"},
            {"type": "career", "resume": ""},
            {"type": "career", "resume": None},
            {"type": "contact", "resume": "r.pdf"},
            {"type": "enquiry", "resume": "r.pdf"},
        ],
    )
    def test_everything_else_is_placeholder(self, submission: dict) -> None:
        assert resume_status(submission) == PLACEHOLDER


class TestBadgeClass:
    def test_known_types(self) -> None:
        assert badge_class("career") == "bg-blue-100 text-blue-800"
        assert badge_class("enquiry") == "bg-green-100 text-green-800"

    def test_contact_and_unknown_fall_back(self) -> None:
        assert badge_class("contact") == "bg-purple-100 text-purple-800"
        assert badge_class(None) == "bg-purple-100 text-purple-800"


class TestFormatSubmittedOn:
    def test_iso_string_in_display_zone(self) -> None:
        assert format_submitted_on("2024-01-02T10:00:00Z", "Asia/Kolkata") == "02/01/2024, 03:30 pm"

    def test_morning_uses_am(self) -> None:
        assert format_submitted_on("2024-01-01T00:15:00Z", "UTC") == "01/01/2024, 12:15 am"

    def test_datetime_value(self) -> None:
        value = datetime(2024, 3, 5, 18, 45, tzinfo=UTC)
        assert format_submitted_on(value, "UTC") == "05/03/2024, 06:45 pm"

    def test_naive_value_is_utc(self) -> None:
        assert format_submitted_on("2024-01-02T10:00:00", "Asia/Kolkata") == "02/01/2024, 03:30 pm"

    def test_uses_configured_zone(self, settings) -> None:
        settings.DISPLAY_TIME_ZONE = "UTC"
        assert format_submitted_on("2024-01-02T10:00:00Z") == "02/01/2024, 10:00 am"

    @pytest.mark.parametrize("value", [None, "", "not a date", "2024-13-45T99:00:00Z", 12345])
    def test_missing_or_invalid_is_placeholder(self, value) -> None:
        assert format_submitted_on(value) == PLACEHOLDER


class TestFilterSubmissions:
    def test_all_keeps_everything_in_order(self) -> None:
        assert filter_submissions(SCENARIO, SubmissionFilter.ALL) == SCENARIO

    def test_exact_type_match(self) -> None:
        assert [s["_id"] for s in filter_submissions(SCENARIO, "career")] == ["1"]
        assert [s["_id"] for s in filter_submissions(SCENARIO, "contact")] == ["2"]
        assert filter_submissions(SCENARIO, "enquiry") == []

    def test_does_not_mutate_input(self) -> None:
        submissions = list(SCENARIO)
        filter_submissions(submissions, "career")
        assert submissions == SCENARIO

    def test_empty_set_under_every_tab(self) -> None:
        for tab in SubmissionFilter.values:
            assert filter_submissions([], tab) == []


class TestSubmissionRow:
    def test_full_document(self) -> None:
        row = SubmissionRow.from_document(
            {
                "_id": "abc",
                "type": "enquiry",
                "fullName": "Asha Rao",
                "companyName": "Acme",
                "email": "asha@example.com",
                "phone": "+91 98765 43210",
                "location": {"city": "Pune", "state": "Maharashtra"},
                "customerCategory": "Enterprise",
                "subject": "Pricing",
                "message": "Please call me back.",
                "createdAt": "2024-01-02T10:00:00Z",
            }
        )
        assert row.id == "abc"
        assert row.name == "Asha Rao"
        assert row.company == "Acme"
        assert row.city == "Pune"
        assert row.state == "Maharashtra"
        assert row.customer_category == "Enterprise"
        assert row.badge_class == "bg-green-100 text-green-800"
        assert row.resume == PLACEHOLDER
        assert row.message == row.message_title == "Please call me back."
        assert row.submitted_on == "02/01/2024, 03:30 pm"

    def test_sparse_document_uses_placeholders(self) -> None:
        row = SubmissionRow.from_document({"_id": "2", "type": "contact"})
        for value in (
            row.name,
            row.company,
            row.email,
            row.phone,
            row.city,
            row.customer_category,
            row.resume,
            row.state,
            row.subject,
            row.message,
            row.submitted_on,
        ):
            assert value == PLACEHOLDER
        assert row.message_title == ""

    def test_non_dict_location_is_ignored(self) -> None:
        row = SubmissionRow.from_document({"type": "contact", "location": "Pune"})
        assert row.city == PLACEHOLDER
        assert row.state == PLACEHOLDER


class TestDashboardState:
    def test_starts_loading(self) -> None:
        state = DashboardState()
        assert state.status == LoadStatus.LOADING
        assert state.rows == []
        assert state.error is None

    def test_resolve_moves_to_ready(self) -> None:
        state = DashboardState()
        state.resolve(SCENARIO)
        assert state.status == LoadStatus.READY
        assert [row.id for row in state.rows] == ["1", "2"]
        assert [row.resume for row in state.rows] == ["Submitted", PLACEHOLDER]

    def test_fail_moves_to_error(self) -> None:
        state = DashboardState()
        state.fail("Unauthorized")
        assert state.status == LoadStatus.ERROR
        assert state.error == "Unauthorized"
        assert state.rows == []

    @pytest.mark.parametrize("first", ["resolve", "fail"])
    def test_ready_and_error_are_terminal(self, first: str) -> None:
        state = DashboardState()
        if first == "resolve":
            state.resolve([])
        else:
            state.fail("nope")
        with pytest.raises(ValueError):
            state.resolve(SCENARIO)
        with pytest.raises(ValueError):
            state.fail("again")

    def test_tab_counts(self) -> None:
        state = DashboardState()
        state.resolve(SCENARIO)
        assert state.tab_counts() == {"all": 2, "enquiry": 0, "contact": 1, "career": 1}

    def test_twelve_columns(self) -> None:
        assert len(COLUMNS) == 12
        assert COLUMNS[0] == "Name"
        assert COLUMNS[-1] == "Submitted On"
