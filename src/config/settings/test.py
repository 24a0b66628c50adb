"""
Django test settings for the SuperShield submissions dashboard.
"""

from .base import *  # noqa: F403

DEBUG = False

SECRET_KEY = "django-insecure-test-key-only"  # noqa: S105

ALLOWED_HOSTS = ["*"]

DASHBOARD_SECRET_KEY = "test-dashboard-secret"  # noqa: S105
DASHBOARD_CLIENT_SECRET_KEY = "test-dashboard-secret"  # noqa: S105

MONGODB_URI = "mongodb://localhost:27017"
MONGODB_DATABASE = "supershield_test"

SUBMISSIONS_API_URL = "http://testserver/api/enquiries"
DISPLAY_TIME_ZONE = "Asia/Kolkata"

# Use simple static files storage in tests
STORAGES = {
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}
