"""Management command to fetch conditions using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from placecast.state import Failure
from placecast_web.api.views import build_aggregator, serialize_state


class Command(BaseCommand):
    help = "Fetch current weather and tides for a place name"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--place", type=str, default="", help="Place name (defaults to the configured place)")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        state = build_aggregator().submit(options.get("place"))
        if isinstance(state, Failure):
            raise CommandError(state.message)
        self.stdout.write(json.dumps(serialize_state(state), ensure_ascii=False))
