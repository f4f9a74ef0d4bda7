from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from .base import HttpProvider, TideUnavailable
from ..entities import GeoPoint, TideEvent, TideKind


LOOKAHEAD_SECONDS = 2 * 24 * 60 * 60
MAX_EVENTS = 6


class WorldTidesFetcher(HttpProvider):
    """Upcoming high/low tides from the WorldTides v3 extremes API.

    Tides are optional: inland points, upstream outages and odd payloads all
    end up as ``None`` from :meth:`fetch` instead of an exception.
    """

    base_url = "https://www.worldtides.info/api/v3"
    error_class = TideUnavailable
    failure_message = "Tide data unavailable"

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        time_func: Callable[[], float] = time.time,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self.api_key = api_key
        self._time_func = time_func
        self._log = logging.getLogger(self.__class__.__name__)

    def fetch(self, point: GeoPoint) -> Optional[Tuple[TideEvent, ...]]:
        try:
            return self._fetch_extremes(point)
        except TideUnavailable as exc:
            self._log.warning("No tide data for %s: %s", point.display_name, exc)
            return None

    # helpers ------------------------------------------------------------
    def _fetch_extremes(self, point: GeoPoint) -> Tuple[TideEvent, ...]:
        params = {
            "lat": point.latitude,
            "lon": point.longitude,
            "start": int(self._time_func()),
            "length": LOOKAHEAD_SECONDS,
        }
        if self.api_key:
            params["key"] = self.api_key
        # "extremes" is a bare flag, so it goes in the URL rather than params
        response = self._request("GET", f"{self.base_url}?extremes", params=params)
        data = self._json(response)
        extremes = data.get("extremes") if isinstance(data, dict) else None
        if not isinstance(extremes, list) or not extremes:
            raise TideUnavailable("no extremes in response")
        events: List[TideEvent] = []
        for extreme in extremes[:MAX_EVENTS]:
            events.append(self._build_event(extreme))
        return tuple(events)

    def _build_event(self, extreme: dict) -> TideEvent:
        try:
            return TideEvent(
                kind=TideKind.HIGH if extreme.get("type") == "High" else TideKind.LOW,
                height_m=float(extreme["height"]),
                timestamp=datetime.fromtimestamp(int(extreme["dt"]), tz=timezone.utc),
            )
        except (AttributeError, KeyError, TypeError, ValueError, OverflowError, OSError) as exc:
            raise TideUnavailable(f"malformed extreme: {extreme!r}") from exc


__all__ = ["LOOKAHEAD_SECONDS", "MAX_EVENTS", "WorldTidesFetcher"]
