"""Submissions app configuration."""

from django.apps import AppConfig


class SubmissionsConfig(AppConfig):
    name = "apps.submissions"
    verbose_name = "Submissions"

    def ready(self) -> None:
        from . import checks  # noqa: F401
