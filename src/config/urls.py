"""
URL configuration for the SuperShield submissions dashboard.
"""

from django.conf import settings
from django.urls import include, path

urlpatterns = [
    path("api/", include("apps.submissions.api_urls")),
    path("", include("apps.submissions.urls")),
]

if settings.DEBUG:
    import debug_toolbar

    urlpatterns = [
        path("__debug__/", include(debug_toolbar.urls)),
        *urlpatterns,
    ]
