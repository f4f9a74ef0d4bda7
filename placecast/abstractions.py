"""Contracts for the data sources the aggregator depends on."""
from __future__ import annotations

from typing import Optional, Protocol, Tuple

from .entities import GeoPoint, TideEvent, WeatherReading


class GeoResolver(Protocol):
    """Resolves free text to a single geographic point."""

    def resolve(self, place_name: str) -> GeoPoint:
        """Return the top match or raise ``NotFound`` / ``UpstreamError``."""
        ...


class WeatherFetcher(Protocol):
    """A data source capable of returning current conditions."""

    def fetch(self, point: GeoPoint) -> WeatherReading:
        """Return the reading for the exact coordinates or raise ``UpstreamError``."""
        ...


class TideFetcher(Protocol):
    """Best-effort source of upcoming tide extremes."""

    def fetch(self, point: GeoPoint) -> Optional[Tuple[TideEvent, ...]]:
        """Return up to six extremes, or ``None`` when none are available. Never raises."""
        ...


__all__ = ["GeoResolver", "TideFetcher", "WeatherFetcher"]
