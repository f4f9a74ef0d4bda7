from __future__ import annotations

import logging
from typing import Optional

from .base import HttpProvider, NotFound, UpstreamError
from ..entities import GeoPoint


class NominatimGeoResolver(HttpProvider):
    """Resolve place names with the OpenStreetMap Nominatim search API."""

    base_url = "https://nominatim.openstreetmap.org/search"
    failure_message = "Failed to fetch location data"
    not_found_message = "City not found. Please check the spelling."

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self._log = logging.getLogger(self.__class__.__name__)

    def resolve(self, place_name: str) -> GeoPoint:
        params = {"q": place_name, "format": "json", "limit": 1}
        response = self._request("GET", self.base_url, params=params)
        results = self._json(response)
        if not isinstance(results, list):
            self._log.error("Unexpected geocoding payload: %r", results)
            raise UpstreamError(self.failure_message)
        if not results:
            self._log.info("No geocoding match for %r", place_name)
            raise NotFound(self.not_found_message)
        match = results[0]
        try:
            point = GeoPoint(
                latitude=float(match["lat"]),
                longitude=float(match["lon"]),
                display_name=str(match.get("display_name") or place_name),
            )
        except (KeyError, TypeError, ValueError) as exc:
            self._log.error("Malformed geocoding match: %r", match, exc_info=exc)
            raise UpstreamError(self.failure_message) from exc
        self._log.debug("Resolved %r to %s, %s", place_name, point.latitude, point.longitude)
        return point


__all__ = ["NominatimGeoResolver"]
