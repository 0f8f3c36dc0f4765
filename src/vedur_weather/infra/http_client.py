"""HTTP transport: one GET per call, failures surfaced as TransportError."""

from __future__ import annotations

from typing import Callable, Dict, Optional

import requests

from ..common.telemetry import TelemetryService, logging_sink
from ..domain.errors import TransportError
from ..logger.app_logger import get_logger
from ..utils.config_loader import get_http_settings

logger = get_logger(__name__)

# Fixed browser-like headers
DEFAULT_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/129.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;"
        "q=0.9,*/*;q=0.8"
    ),
    "Accept-Language": "is,en-US;q=0.9,en;q=0.8",
    "Connection": "close",
}

RequestFunc = Callable[[str, Dict[str, str], Optional[float]], requests.Response]


class HttpTransport:
    """Fetches a URL and returns its body as text.

    ``timeout`` is handed to ``requests`` unchanged (``None`` waits forever).
    There is no retry or throttling; a failed request is reported once.
    """

    def __init__(
        self,
        default_headers: Optional[Dict[str, str]] = None,
        *,
        timeout: Optional[float] = 30,
        encoding: str = "utf-8",
        telemetry: Optional[TelemetryService] = None,
        request_func: Optional[RequestFunc] = None,
    ) -> None:
        self._headers = {**DEFAULT_HEADERS, **(default_headers or {})}
        self._timeout = timeout
        self._encoding = encoding
        self._telemetry = telemetry or TelemetryService()
        self._request = request_func or self._default_request

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def _default_request(
        self, url: str, headers: Dict[str, str], timeout: Optional[float]
    ) -> requests.Response:
        return requests.get(url, headers=headers, timeout=timeout)

    def fetch(self, url: str, headers: Optional[Dict[str, str]] = None) -> str:
        merged_headers = {**self._headers, **(headers or {})}
        self._telemetry.emit_event("http.start", url=url)
        try:
            response = self._request(url, merged_headers, self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            self._telemetry.emit_event("http.failure", url=url, error=str(exc))
            raise TransportError(url, f"{url} did not respond: {exc}") from exc

        response.encoding = self._encoding
        self._telemetry.emit_event("http.success", url=url, status=response.status_code)
        return response.text

    __call__ = fetch


def build_default_transport(config: Optional[dict] = None) -> HttpTransport:
    """Build a transport from the ``http`` section of ``config.yml``."""
    settings = get_http_settings(config)
    headers = {"User-Agent": settings["user_agent"]} if settings["user_agent"] else None
    telemetry = TelemetryService()
    telemetry.add_sink(logging_sink(logger))
    return HttpTransport(headers, timeout=settings["timeout"], telemetry=telemetry)
