from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response

from ..state import NOT_FOUND, UPSTREAM


DEFAULT_USER_AGENT = "placecast/0.1 (python-requests)"


class ProviderError(RuntimeError):
    """Base provider error. The message is meant to be shown to the user as is."""

    reason = UPSTREAM


class UpstreamError(ProviderError):
    """Raised when a provider call does not complete with a usable 2xx response."""


class NotFound(ProviderError):
    """Raised when a lookup completes but matches nothing."""

    reason = NOT_FOUND


class TideUnavailable(ProviderError):
    """Raised inside the tide provider when no tide data can be produced."""


@dataclass
class RequestConfig:
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT


class HttpProvider:
    """Base class that adds timeouts and error mapping for HTTP providers.

    Each request is attempted exactly once. Any transport failure or non-2xx
    status is raised as ``error_class(failure_message)``.
    """

    error_class: type = UpstreamError
    failure_message = "Request failed"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or self._build_session(self.request_config)
        self._log = logging.getLogger(self.__class__.__name__)

    def _build_session(self, config: RequestConfig) -> requests.Session:
        session = requests.Session()
        session.headers["User-Agent"] = config.user_agent
        return session

    def _handle_response(self, response: Response) -> Response:
        if not 200 <= response.status_code < 300:
            self._log.error("Provider returned %s: %s", response.status_code, response.text[:500])
            raise self.error_class(self.failure_message)
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise self.error_class(self.failure_message) from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise self.error_class(self.failure_message) from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise self.error_class(self.failure_message) from exc


__all__ = [
    "HttpProvider",
    "NotFound",
    "ProviderError",
    "RequestConfig",
    "TideUnavailable",
    "UpstreamError",
]
