from __future__ import annotations

import logging
from typing import Optional

from .base import HttpProvider, UpstreamError
from ..entities import GeoPoint, WeatherReading


CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
    "pressure_msl",
    "is_day",
)


class OpenMeteoWeatherFetcher(HttpProvider):
    base_url = "https://api.open-meteo.com/v1/forecast"
    failure_message = "Failed to fetch weather data"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self._log = logging.getLogger(self.__class__.__name__)

    def fetch(self, point: GeoPoint) -> WeatherReading:
        params = {
            "latitude": point.latitude,
            "longitude": point.longitude,
            "current": ",".join(CURRENT_FIELDS),
            "timezone": "auto",
        }
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)
        current = data.get("current") if isinstance(data, dict) else None
        if not current:
            self._log.error("Missing current weather in response for %s", point.display_name)
            raise UpstreamError(self.failure_message)
        try:
            return WeatherReading(
                temperature_c=float(current["temperature_2m"]),
                feels_like_c=float(current["apparent_temperature"]),
                humidity_pct=int(round(float(current["relative_humidity_2m"]))),
                wind_speed_kmh=float(current["wind_speed_10m"]),
                pressure_hpa=float(current["pressure_msl"]),
                condition_code=int(current["weather_code"]),
                is_daytime=bool(int(current["is_day"])),
                precipitation_mm=_safe_float(current.get("precipitation")),
            )
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            self._log.error("Malformed current weather: %r", current, exc_info=exc)
            raise UpstreamError(self.failure_message) from exc


def _safe_float(value: Optional[object]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


__all__ = ["CURRENT_FIELDS", "OpenMeteoWeatherFetcher"]
