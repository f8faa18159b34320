"""JSON-over-HTTP client for the reporting REST API."""

import http.client
import json
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
import urllib.request

from pnl_dashboard.application.ports.reporting_api import ReportingApiError
from pnl_dashboard.infrastructure.logging.logger import get_app_logger
from pnl_dashboard.infrastructure.settings import DEFAULT_TIMEOUT_SECONDS


class JsonHttpClient:
    """Minimal JSON client bound to a base URL.

    Every failure (network, non-2xx status, undecodable body) is raised as
    ``ReportingApiError``. No retries are attempted.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        logger=None,
        opener=None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API base URL without trailing slash.
            timeout: Request timeout in seconds.
            logger: Optional logger compatible with logging.Logger-like API.
            opener: Optional callable replacing ``urllib.request.urlopen``.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._logger = logger or get_app_logger()
        self._opener = opener or urllib.request.urlopen

    @property
    def base_url(self) -> str:
        return self._base_url

    def get_json(
        self,
        path: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Send a GET request and decode the JSON body."""
        return self._request("GET", path, params=params)

    def post_json(self, path: str, payload: Any = None) -> Any:
        """Send a POST request with an optional JSON body."""
        return self._request("POST", path, payload=payload)

    def build_url(
        self,
        path: str,
        params: dict[str, str] | None = None,
    ) -> str:
        """Join the base URL, the path and the non-empty query params."""
        url = f"{self._base_url}/{path.lstrip('/')}"
        cleaned = {
            key: value for key, value in (params or {}).items() if value
        }
        if cleaned:
            url = f"{url}?{urlencode(cleaned)}"
        return url

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        payload: Any = None,
    ) -> Any:
        url = self.build_url(path, params)
        data = None
        if payload is not None:
            data = json.dumps(payload).encode("utf-8")
        req = urllib.request.Request(
            url,
            data=data,
            method=method,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )
        self._logger.debug(f"{method} {url}")
        try:
            with self._opener(req, timeout=self._timeout) as resp:
                raw_body = resp.read()
        except HTTPError as exc:
            self._logger.error(f"{method} {path} failed with HTTP {exc.code}")
            raise ReportingApiError(
                f"HTTP {exc.code} from {path}",
                endpoint=path,
                status=exc.code,
            ) from exc
        except (
            URLError,
            TimeoutError,
            OSError,
            http.client.HTTPException,
        ) as exc:
            self._logger.error(f"{method} {path} failed: {exc}")
            raise ReportingApiError(
                f"Could not reach {path}: {exc}",
                endpoint=path,
            ) from exc
        try:
            body = raw_body.decode("utf-8")
            if not body.strip():
                return None
            return json.loads(body)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            self._logger.error(f"{method} {path} returned an invalid body")
            raise ReportingApiError(
                f"Invalid JSON from {path}",
                endpoint=path,
            ) from exc


__all__ = ["JsonHttpClient"]
