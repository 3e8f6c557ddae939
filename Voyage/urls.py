"""Voyage URL Configuration."""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView

urlpatterns = [
    # Django admin
    path("admin/", admin.site.urls),
    path("", include(("core.urls", "core"), namespace="core")),
    # APIs REST
    path("api/", include(("core.api_urls", "core_api"), namespace="core_api")),
    path(
        "api/accounts/",
        include(("accounts.api_urls", "accounts_api"), namespace="accounts_api"),
    ),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("", include("django_prometheus.urls")),
]
