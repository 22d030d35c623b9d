from __future__ import annotations

from django.urls import path

from . import views


app_name = "sealer_app"

urlpatterns = [
    path("health", views.health, name="health"),
    path("seal", views.seal, name="seal"),
    path("unseal", views.unseal, name="unseal"),
]
