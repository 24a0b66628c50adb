"""Dashboard URL configuration."""

from django.urls import path
from django.views.generic import RedirectView

from . import views

app_name = "submissions"

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="submissions:dashboard"), name="index"),
    path("dashboard/", views.DashboardView.as_view(), name="dashboard"),
    path("dashboard/submissions/", views.SubmissionsTableView.as_view(), name="table"),
]
