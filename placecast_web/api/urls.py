"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from placecast_web.api.views import ConditionsView

urlpatterns = [
    path("conditions", ConditionsView.as_view(), name="conditions"),
]
