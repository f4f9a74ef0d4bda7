"""Turn raw WMO weather codes into text and icons."""
from __future__ import annotations

from dataclasses import asdict

from .entities import Icon, InterpretedWeather, WeatherReading


UNKNOWN_DESCRIPTION = "Unknown"

DESCRIPTIONS = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def describe(code: int) -> str:
    return DESCRIPTIONS.get(code, UNKNOWN_DESCRIPTION)


def icon(code: int, is_daytime: bool) -> Icon:
    """Pick an icon by testing ``code`` against ascending thresholds.

    The first matching threshold wins, so codes without a WMO meaning still
    land somewhere (4-44 read as fog, 87-94 fall through to the thermometer).
    """
    if code == 0:
        return Icon.CLEAR_DAY if is_daytime else Icon.CLEAR_NIGHT
    if code <= 3:
        return Icon.PARTLY_CLOUDY_DAY if is_daytime else Icon.PARTLY_CLOUDY_NIGHT
    if code <= 48:
        return Icon.FOG
    if code <= 55:
        return Icon.DRIZZLE
    if code <= 65:
        return Icon.RAIN
    if code <= 77:
        return Icon.SNOW
    if code <= 82:
        return Icon.RAIN_SHOWER
    if code <= 86:
        return Icon.SNOW_SHOWER
    if code >= 95:
        return Icon.THUNDERSTORM
    return Icon.THERMOMETER


def interpret(reading: WeatherReading) -> InterpretedWeather:
    return InterpretedWeather(
        **asdict(reading),
        description=describe(reading.condition_code),
        icon=icon(reading.condition_code, reading.is_daytime),
    )


__all__ = ["DESCRIPTIONS", "UNKNOWN_DESCRIPTION", "describe", "icon", "interpret"]
