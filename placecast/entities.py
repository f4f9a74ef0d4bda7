from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


class Icon(str, Enum):
    """Symbolic weather icon; the value is a stable name for serialization."""

    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"
    FOG = "fog"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    RAIN_SHOWER = "rain-shower"
    SNOW_SHOWER = "snow-shower"
    THUNDERSTORM = "thunderstorm"
    THERMOMETER = "thermometer"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    Icon.CLEAR_DAY: "☀️",
    Icon.CLEAR_NIGHT: "\U0001f319",
    Icon.PARTLY_CLOUDY_DAY: "\U0001f324️",
    # night shares the moon with clear sky
    Icon.PARTLY_CLOUDY_NIGHT: "\U0001f319",
    Icon.FOG: "\U0001f32b️",
    Icon.DRIZZLE: "\U0001f326️",
    Icon.RAIN: "\U0001f327️",
    Icon.SNOW: "\U0001f328️",
    Icon.RAIN_SHOWER: "\U0001f327️",
    Icon.SNOW_SHOWER: "\U0001f328️",
    Icon.THUNDERSTORM: "⛈️",
    Icon.THERMOMETER: "\U0001f321️",
}


@dataclass(frozen=True)
class GeoPoint:
    """A resolved place: coordinates in decimal degrees plus a display name."""

    latitude: float
    longitude: float
    display_name: str

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class WeatherReading:
    """Current conditions as reported by the forecast source.

    Units are the ones the forecast source is asked for, so nothing is
    converted downstream:
    - temperatures in Celsius
    - relative humidity in percent
    - wind speed in kilometres per hour
    - pressure at mean sea level in hectopascal (hPa)
    - precipitation in millimetres (mm)
    """

    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    wind_speed_kmh: float
    pressure_hpa: float
    condition_code: int
    is_daytime: bool
    precipitation_mm: Optional[float]


@dataclass(frozen=True)
class InterpretedWeather(WeatherReading):
    description: str
    icon: Icon


class TideKind(str, Enum):
    HIGH = "High"
    LOW = "Low"


@dataclass(frozen=True)
class TideEvent:
    kind: TideKind
    height_m: float
    timestamp: datetime


@dataclass(frozen=True)
class Conditions:
    """Everything the presentation layer needs for one place."""

    place: GeoPoint
    weather: InterpretedWeather
    tides: Optional[Tuple[TideEvent, ...]] = None


__all__ = [
    "Conditions",
    "GeoPoint",
    "Icon",
    "InterpretedWeather",
    "TideEvent",
    "TideKind",
    "WeatherReading",
]
