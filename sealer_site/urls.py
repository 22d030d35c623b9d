"""Root URL configuration for the sealing service."""

from __future__ import annotations

from django.urls import include, path

from sealer_app import views as sealer_views

urlpatterns = [
    path("openapi.json", sealer_views.openapi_document, name="openapi-json"),
    path("docs", sealer_views.swagger_ui, name="swagger-ui"),
    path("docs/", sealer_views.swagger_ui),
    path("api/", include("sealer_app.urls")),
]
