from __future__ import annotations

import os

import django


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "placecast_web.settings")
os.environ.setdefault("PLACECAST_GEOCODER_URL", "https://geocoder.test/search")
os.environ.setdefault("PLACECAST_FORECAST_URL", "https://forecast.test/v1/forecast")
os.environ.setdefault("PLACECAST_TIDES_URL", "https://tides.test/api/v3")

django.setup()
