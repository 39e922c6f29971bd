"""HTTP client for the open-notify API.

This module provides a thin wrapper around the requests library that
performs a single GET against an open-notify endpoint and returns the
response body as text.
"""

import json
import logging
import math
from decimal import Decimal
from typing import Mapping, Optional

import requests
from requests.adapters import HTTPAdapter

from open_notify.errors import NetworkError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://api.open-notify.org"

# Default timeout for HTTP requests (connect, read)
DEFAULT_TIMEOUT = (5, 30)


def format_decimal(value: float) -> str:
    """Render a number as a plain, locale-independent decimal string.

    Always uses a period as separator and never exponent notation,
    e.g. ``51.0``, ``-0.5``, ``0.0000001``.

    Raises:
        ValueError: If value is NaN or infinite.
    """
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Query value must be finite, got {value!r}")
    # repr gives the shortest round-tripping digits; Decimal expands exponents
    text = format(Decimal(repr(number)), "f")
    if "." not in text:
        text += ".0"
    if text == "-0.0":
        text = "0.0"
    return text


def format_count(value: int) -> str:
    """Render a whole number for a query string.

    Raises:
        ValueError: If value is a bool or has a fractional part.
    """
    if isinstance(value, bool) or not float(value).is_integer():
        raise ValueError(f"Query count must be a whole number, got {value!r}")
    return str(int(value))


def _is_json_document(text: str) -> bool:
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


class APIClient:
    """HTTP client for the open-notify API.

    Every call to ``get_text`` performs exactly one round trip; the
    session is mounted without a retry policy.

    Attributes:
        base_url: Base URL for the API.
        timeout: (connect, read) timeout in seconds.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: tuple[float, float] = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize API client.

        Args:
            base_url: Base URL for the open-notify API.
            timeout: (connect, read) timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = self._create_session()
        logger.debug("APIClient initialized with base_url=%s", self.base_url)

    def _create_session(self) -> requests.Session:
        """Create requests session with no automatic retries.

        Returns:
            Configured requests Session.
        """
        session = requests.Session()

        adapter = HTTPAdapter(max_retries=0)
        session.mount("https://", adapter)
        session.mount("http://", adapter)

        return session

    def build_url(self, endpoint: str) -> str:
        """Join an endpoint path (e.g. "/astros.json") onto the base URL."""
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def get_text(
        self,
        endpoint: str,
        params: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Execute GET request to API endpoint.

        A non-2xx response whose body is a JSON document is returned like
        any other, since upstream reports rejected parameters that way.

        Args:
            endpoint: API endpoint path (e.g., "/iss-now.json").
            params: Query parameters, already rendered as strings.

        Returns:
            Response body as text.

        Raises:
            NetworkError: If the request does not complete, or returns a
                non-2xx status with a body that is not JSON.
        """
        url = self.build_url(endpoint)
        logger.info("Fetching data from %s", url)

        try:
            response = self._session.get(url, params=params, timeout=self.timeout)
            text = response.text
            if not response.ok:
                if not _is_json_document(text):
                    response.raise_for_status()
                logger.warning(
                    "HTTP %d from %s carries a JSON body", response.status_code, url
                )
        except requests.exceptions.Timeout as e:
            logger.error("Request timeout for %s: %s", url, e)
            raise NetworkError(f"Request timeout: {e}") from e
        except requests.exceptions.HTTPError as e:
            logger.error("HTTP error for %s: %s", url, e)
            raise NetworkError(f"HTTP error: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error("Request failed for %s: %s", url, e)
            raise NetworkError(f"Request failed: {e}") from e

        logger.debug("Received %d characters from %s", len(text), endpoint)
        return text

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()
        logger.debug("APIClient session closed")
