"""API URL configuration for the submissions endpoint."""

from django.urls import path

from . import api_views

app_name = "submissions_api"

urlpatterns = [
    path("enquiries", api_views.APISubmissionListView.as_view(), name="list"),
]
