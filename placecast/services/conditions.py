from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional

from ..abstractions import GeoResolver, TideFetcher, WeatherFetcher
from ..entities import Conditions
from ..interpreter import interpret
from ..providers.base import ProviderError
from ..state import ERROR, Failure, Idle, Loading, RequestState, Success


DEFAULT_PLACE = "Marseille"

StateListener = Callable[[RequestState], None]


def normalize_place_query(raw: Optional[str], default: str = DEFAULT_PLACE) -> str:
    """Trim user input, falling back to ``default`` when nothing is left."""
    query = (raw or "").strip()
    return query or default


class ConditionsAggregator:
    """Resolve a place, then gather its weather and tides into one view model.

    The aggregator owns a single :data:`RequestState`. Listeners registered
    with :meth:`subscribe` are called on every transition. Each submission
    gets a generation number; a submission that has been overtaken by a newer
    one does not write its outcome into ``state``.
    """

    def __init__(
        self,
        *,
        geo_resolver: GeoResolver,
        weather_fetcher: WeatherFetcher,
        tide_fetcher: TideFetcher,
        default_place: str = DEFAULT_PLACE,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.geo_resolver = geo_resolver
        self.weather_fetcher = weather_fetcher
        self.tide_fetcher = tide_fetcher
        self.default_place = default_place
        self._log = logger or logging.getLogger(self.__class__.__name__)
        self._state: RequestState = Idle()
        self._generation = 0
        self._listeners: List[StateListener] = []
        self._lock = threading.Lock()
        self._notify_lock = threading.RLock()

    # Public API ---------------------------------------------------------
    @property
    def state(self) -> RequestState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def submit(self, place_name: Optional[str]) -> RequestState:
        with self._lock:
            self._generation += 1
            generation = self._generation
        self._transition(generation, Loading())

        query = normalize_place_query(place_name, self.default_place)
        try:
            outcome = self._run(query)
        except Exception:
            self._transition(generation, Failure("Unexpected error", reason=ERROR))
            raise
        self._transition(generation, outcome)
        return outcome

    # Helpers ------------------------------------------------------------
    def _run(self, query: str) -> RequestState:
        try:
            place = self.geo_resolver.resolve(query)
        except ProviderError as exc:
            self._log.warning("Could not resolve %r: %s", query, exc)
            return Failure(str(exc), reason=exc.reason)

        try:
            reading = self.weather_fetcher.fetch(place)
        except ProviderError as exc:
            self._log.warning("Weather fetch failed for %s: %s", place.display_name, exc)
            return Failure(str(exc), reason=exc.reason)

        weather = interpret(reading)
        tides = self.tide_fetcher.fetch(place)
        self._log.info(
            "Conditions ready for %s (%s, %d tide events)",
            place.display_name,
            weather.description,
            len(tides) if tides else 0,
        )
        return Success(Conditions(place=place, weather=weather, tides=tides or None))

    def _transition(self, generation: int, state: RequestState) -> None:
        with self._lock:
            if not self._is_current(generation, state):
                return
            self._state = state
            listeners = list(self._listeners)
        # reentrant: a listener may submit again from inside a notification
        with self._notify_lock:
            for listener in listeners:
                with self._lock:
                    if not self._is_current(generation, state):
                        return
                listener(state)

    def _is_current(self, generation: int, state: RequestState) -> bool:
        if generation == self._generation:
            return True
        self._log.debug("Discarding %s from superseded request %d", state.status, generation)
        return False


__all__ = ["ConditionsAggregator", "DEFAULT_PLACE", "normalize_place_query"]
