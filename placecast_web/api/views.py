"""REST API views for place conditions."""
from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from placecast.entities import Conditions, TideEvent
from placecast.providers.base import RequestConfig
from placecast.providers.nominatim import NominatimGeoResolver
from placecast.providers.openmeteo import OpenMeteoWeatherFetcher
from placecast.providers.worldtides import WorldTidesFetcher
from placecast.services.conditions import ConditionsAggregator
from placecast.state import ERROR, NOT_FOUND, UPSTREAM, Failure, RequestState, Success


FAILURE_STATUS = {
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
    UPSTREAM: status.HTTP_502_BAD_GATEWAY,
    ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@lru_cache(maxsize=1)
def get_providers() -> Tuple[NominatimGeoResolver, OpenMeteoWeatherFetcher, WorldTidesFetcher]:
    request_config = RequestConfig(
        timeout=settings.PLACECAST_HTTP_TIMEOUT,
        user_agent=settings.PLACECAST_USER_AGENT,
    )
    return (
        NominatimGeoResolver(base_url=settings.PLACECAST_GEOCODER_URL, request_config=request_config),
        OpenMeteoWeatherFetcher(base_url=settings.PLACECAST_FORECAST_URL, request_config=request_config),
        WorldTidesFetcher(
            base_url=settings.PLACECAST_TIDES_URL,
            api_key=settings.PLACECAST_TIDES_API_KEY,
            request_config=request_config,
        ),
    )


def build_aggregator() -> ConditionsAggregator:
    """A fresh aggregator per request; only the HTTP providers are shared."""
    geo_resolver, weather_fetcher, tide_fetcher = get_providers()
    return ConditionsAggregator(
        geo_resolver=geo_resolver,
        weather_fetcher=weather_fetcher,
        tide_fetcher=tide_fetcher,
        default_place=settings.PLACECAST_DEFAULT_PLACE,
    )


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(settings.DEFAULT_TIMEZONE).isoformat().replace("+00:00", "Z")


def _serialize_tide(event: TideEvent) -> Dict[str, Any]:
    return {
        "kind": event.kind.value,
        "height_m": event.height_m,
        "timestamp": _format_timestamp(event.timestamp),
    }


def _serialize_conditions(conditions: Conditions) -> Dict[str, Any]:
    weather = asdict(conditions.weather)
    weather["icon"] = conditions.weather.icon.value
    weather["glyph"] = conditions.weather.icon.glyph
    tides: Optional[list] = None
    if conditions.tides is not None:
        tides = [_serialize_tide(event) for event in conditions.tides]
    return {
        "place": asdict(conditions.place),
        "weather": weather,
        "tides": tides,
    }


def serialize_state(state: RequestState) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"status": state.status}
    if isinstance(state, Success):
        payload["conditions"] = _serialize_conditions(state.conditions)
    elif isinstance(state, Failure):
        payload["message"] = state.message
        payload["reason"] = state.reason
    return payload


class ConditionsView(APIView):
    """Resolve ``q`` and return its current weather and tides."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the conditions snapshot for the requested place."""
        state = build_aggregator().submit(request.query_params.get("q"))
        if isinstance(state, Failure):
            return Response(serialize_state(state), status=FAILURE_STATUS.get(state.reason, status.HTTP_502_BAD_GATEWAY))
        return Response(serialize_state(state), status=status.HTTP_200_OK)
