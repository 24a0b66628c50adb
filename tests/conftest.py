"""Pytest configuration for dashboard tests."""

from datetime import UTC, datetime
from unittest.mock import patch

import mongomock
import pytest
from django.conf import settings
from django.test import Client

SECRET = "test-dashboard-secret"  # noqa: S105


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers carrying the configured dashboard bearer key."""
    return {"Authorization": f"Bearer {SECRET}"}


@pytest.fixture
def collection():
    """In-memory submissions collection patched in place of MongoDB."""
    client = mongomock.MongoClient()
    coll = client[settings.MONGODB_DATABASE][settings.MONGODB_COLLECTION]
    with patch("apps.submissions.store.get_collection", return_value=coll):
        yield coll


@pytest.fixture
def seeded_collection(collection):
    """Collection holding one submission of each type, inserted out of order."""
    collection.insert_many(
        [
            {
                "type": "contact",
                "fullName": "Asha Rao",
                "email": "asha@example.com",
                "subject": "Pricing",
                "message": "Please call me back.",
                "createdAt": datetime(2024, 1, 1, 9, 0, tzinfo=UTC),
            },
            {
                "type": "career",
                "firstName": "Vikram",
                "lastName": "Shah",
                "resume": "resumes/vikram.pdf",
                "createdAt": datetime(2024, 1, 3, 12, 30, tzinfo=UTC),
            },
            {
                "type": "enquiry",
                "companyName": "Acme Security",
                "location": {"city": "Pune", "state": "Maharashtra"},
                "customerCategory": "Enterprise",
                "createdAt": datetime(2024, 1, 2, 10, 0, tzinfo=UTC),
            },
        ]
    )
    return collection


@pytest.fixture
def api_client() -> Client:
    return Client()
