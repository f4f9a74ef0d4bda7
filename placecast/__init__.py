"""Place name in, current weather and tides out."""
from __future__ import annotations

from .entities import Conditions, GeoPoint, Icon, InterpretedWeather, TideEvent, TideKind, WeatherReading
from .services.conditions import ConditionsAggregator, normalize_place_query
from .state import Failure, Idle, Loading, RequestState, Success

__version__ = "0.1.0"

__all__ = [
    "Conditions",
    "ConditionsAggregator",
    "Failure",
    "GeoPoint",
    "Icon",
    "Idle",
    "InterpretedWeather",
    "Loading",
    "RequestState",
    "Success",
    "TideEvent",
    "TideKind",
    "WeatherReading",
    "normalize_place_query",
]
