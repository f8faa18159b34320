"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import math
import os
from urllib.parse import urlparse

import dotenv

from pnl_dashboard.infrastructure.logging.logger import get_app_logger

DEFAULT_TIMEOUT_SECONDS = 30.0
SUPPORTED_BACKENDS = ("http", "sample")


@dataclass(frozen=True)
class ApiSettings:
    """Settings for reaching the reporting API.

    Attributes:
        backend: Backend identifier (http or sample).
        base_url: Base URL of the REST API, required for http.
        timeout: Request timeout in seconds.
    """

    backend: str = "http"
    base_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "ApiSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            ApiSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("PNL_API_BACKEND", "http").strip().lower()
        base_url = cls._normalize_base_url(
            os.getenv("PNL_API_BASE_URL"),
            logger=logger,
        )
        timeout = cls._parse_timeout(
            os.getenv("PNL_API_TIMEOUT"),
            logger=logger,
        )
        return cls(backend=backend, base_url=base_url, timeout=timeout)

    @staticmethod
    def _normalize_base_url(raw_url: str | None, logger) -> str | None:
        """Strip whitespace and trailing slashes from the base URL.

        Args:
            raw_url: Raw base URL.
            logger: Logger used for warnings.

        Returns:
            str | None: Normalized URL, or None when unset.
        """
        if not raw_url or not raw_url.strip():
            return None
        cleaned = raw_url.strip().rstrip("/")
        parsed = urlparse(cleaned)
        if parsed.scheme not in ("http", "https"):
            logger.warning(
                f"PNL_API_BASE_URL has no http(s) scheme: {cleaned}"
            )
        return cleaned

    @staticmethod
    def _parse_timeout(raw_timeout: str | None, logger) -> float:
        """Parse the request timeout, falling back to the default.

        Args:
            raw_timeout: Raw timeout in seconds.
            logger: Logger used for warnings.

        Returns:
            float: Positive timeout in seconds.
        """
        if not raw_timeout:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(raw_timeout)
        except ValueError:
            logger.warning(
                f"Invalid PNL_API_TIMEOUT '{raw_timeout}', "
                f"using {DEFAULT_TIMEOUT_SECONDS}"
            )
            return DEFAULT_TIMEOUT_SECONDS
        if not math.isfinite(timeout) or timeout <= 0:
            logger.warning(
                f"Unusable PNL_API_TIMEOUT '{raw_timeout}', "
                f"using {DEFAULT_TIMEOUT_SECONDS}"
            )
            return DEFAULT_TIMEOUT_SECONDS
        return timeout


__all__ = ["ApiSettings", "DEFAULT_TIMEOUT_SECONDS", "SUPPORTED_BACKENDS"]
