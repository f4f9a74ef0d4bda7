"""WSGI entry point for the placecast web adapter."""
from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "placecast_web.settings")

application = get_wsgi_application()
