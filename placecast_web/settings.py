"""Django settings for the placecast web adapter."""
from __future__ import annotations

from pathlib import Path
import os
from datetime import timezone

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


SECRET_KEY = env("DJANGO_SECRET_KEY")
DEBUG = env("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = env("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "placecast_web.api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "placecast_web.urls"

WSGI_APPLICATION = "placecast_web.wsgi.application"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Nothing is persisted; the in-memory database only satisfies contrib apps.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PLACECAST_DEFAULT_PLACE = env("PLACECAST_DEFAULT_PLACE", "Marseille")
PLACECAST_GEOCODER_URL = env("PLACECAST_GEOCODER_URL", "https://nominatim.openstreetmap.org/search")
PLACECAST_FORECAST_URL = env("PLACECAST_FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
PLACECAST_TIDES_URL = env("PLACECAST_TIDES_URL", "https://www.worldtides.info/api/v3")
PLACECAST_TIDES_API_KEY = os.environ.get("PLACECAST_TIDES_API_KEY") or None
PLACECAST_HTTP_TIMEOUT = float(env("PLACECAST_HTTP_TIMEOUT", "10"))
PLACECAST_USER_AGENT = env("PLACECAST_USER_AGENT", "placecast/0.1 (python-requests)")

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "root": {
        "handlers": ["console"],
        "level": env("PLACECAST_LOG_LEVEL", "INFO"),
    },
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True
DEFAULT_TIMEZONE = timezone.utc
