from __future__ import annotations

import json
from io import StringIO

import pytest
import requests
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import Client


GEOCODER_URL = "https://geocoder.test/search"
FORECAST_URL = "https://forecast.test/v1/forecast"
TIDES_URL = "https://tides.test/api/v3"

CURRENT = {
    "temperature_2m": 18.4,
    "relative_humidity_2m": 64,
    "apparent_temperature": 17.9,
    "precipitation": 0.0,
    "weather_code": 1,
    "wind_speed_10m": 11.2,
    "pressure_msl": 1016.3,
    "is_day": 1,
}


@pytest.fixture
def upstreams(requests_mock):
    requests_mock.get(GEOCODER_URL, json=[{"lat": "48.8566", "lon": "2.3522", "display_name": "Paris, France"}])
    requests_mock.get(FORECAST_URL, json={"current": CURRENT})
    requests_mock.get(
        TIDES_URL,
        json={
            "extremes": [
                {"dt": 1714572000, "height": 0.42, "type": "High"},
                {"dt": 1714594350, "height": -0.38, "type": "Low"},
            ]
        },
    )
    return requests_mock


def test_conditions_endpoint_returns_payload(upstreams) -> None:
    response = Client().get("/api/conditions", {"q": "Paris"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "success"
    conditions = payload["conditions"]
    assert conditions["place"] == {"latitude": 48.8566, "longitude": 2.3522, "display_name": "Paris, France"}
    assert conditions["weather"]["description"] == "Mainly clear"
    assert conditions["weather"]["icon"] == "partly-cloudy-day"
    assert conditions["weather"]["humidity_pct"] == 64
    assert conditions["tides"][0] == {"kind": "High", "height_m": 0.42, "timestamp": "2024-05-01T14:00:00Z"}
    assert conditions["tides"][1]["kind"] == "Low"


def test_conditions_endpoint_defaults_to_marseille(upstreams) -> None:
    Client().get("/api/conditions")

    assert upstreams.request_history[0].qs["q"] == ["Marseille"]


def test_conditions_endpoint_not_found(requests_mock) -> None:
    requests_mock.get(GEOCODER_URL, json=[])

    response = Client().get("/api/conditions", {"q": "Zzzzznotaplace"})

    assert response.status_code == 404
    assert response.json() == {
        "status": "error",
        "message": "City not found. Please check the spelling.",
        "reason": "not_found",
    }
    assert requests_mock.call_count == 1


def test_conditions_endpoint_weather_outage(requests_mock) -> None:
    requests_mock.get(GEOCODER_URL, json=[{"lat": "48.8566", "lon": "2.3522", "display_name": "Paris, France"}])
    requests_mock.get(FORECAST_URL, status_code=500, text="server error")
    tides = requests_mock.get(TIDES_URL, json={"extremes": []})

    response = Client().get("/api/conditions", {"q": "Paris"})

    assert response.status_code == 502
    assert response.json()["message"] == "Failed to fetch weather data"
    assert not tides.called


def test_conditions_endpoint_tide_timeout_is_success(requests_mock) -> None:
    requests_mock.get(GEOCODER_URL, json=[{"lat": "48.8566", "lon": "2.3522", "display_name": "Paris, France"}])
    requests_mock.get(FORECAST_URL, json={"current": CURRENT})
    requests_mock.get(TIDES_URL, exc=requests.exceptions.ReadTimeout)

    response = Client().get("/api/conditions", {"q": "Paris"})

    assert response.status_code == 200
    assert response.json()["conditions"]["tides"] is None


def test_conditions_endpoint_malformed_tides_is_success(requests_mock) -> None:
    requests_mock.get(GEOCODER_URL, json=[{"lat": "48.8566", "lon": "2.3522", "display_name": "Paris, France"}])
    requests_mock.get(FORECAST_URL, json={"current": CURRENT})
    requests_mock.get(TIDES_URL, json={"extremes": 5})

    response = Client().get("/api/conditions", {"q": "Paris"})

    assert response.status_code == 200
    assert response.json()["conditions"]["tides"] is None


def test_conditions_fetch_command_prints_json(upstreams) -> None:
    out = StringIO()

    call_command("conditions_fetch", place="Paris", stdout=out)

    payload = json.loads(out.getvalue())
    assert payload["status"] == "success"
    assert payload["conditions"]["weather"]["glyph"]


def test_conditions_fetch_command_reports_failure(requests_mock) -> None:
    requests_mock.get(GEOCODER_URL, status_code=503, text="unavailable")

    with pytest.raises(CommandError, match="Failed to fetch location data"):
        call_command("conditions_fetch", place="Paris")
