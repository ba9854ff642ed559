"""
Base API client with common functionality.
"""
import logging
import requests
import time
from typing import Dict, Any, Optional


class FetchError(Exception):
    """A lookup failed: network error, non-2xx status or unparseable payload."""


class BaseAPIClient:
    """Base class for registry clients with rate limiting and error handling."""

    def __init__(self, base_url: str, email: Optional[str] = None,
                 timeout: float = 10.0, rate_limit_delay: float = 0.0):
        """
        Initialize API client.

        Args:
            base_url: Base URL for the API
            email: Contact address for "polite pool" access, if any
            timeout: Request timeout in seconds
            rate_limit_delay: Minimum delay between requests in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.email = email
        self.timeout = timeout
        self.rate_limit_delay = rate_limit_delay
        self.last_request_time = 0.0
        self.session = requests.Session()
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

        if self.email:
            self.session.headers.update({
                'User-Agent': f'citation-tools/1.0 (mailto:{self.email})'
            })

    def _rate_limit(self):
        """Implement rate limiting."""
        if self.rate_limit_delay <= 0:
            return

        current_time = time.time()
        time_since_last = current_time - self.last_request_time

        if time_since_last < self.rate_limit_delay:
            time.sleep(self.rate_limit_delay - time_since_last)

        self.last_request_time = time.time()

    def _build_url(self, endpoint: str) -> str:
        if endpoint and endpoint.strip():
            return f"{self.base_url}/{endpoint.lstrip('/')}"
        return self.base_url

    def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None,
             headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """
        Make a rate-limited GET request.

        Args:
            endpoint: API endpoint relative to base_url
            params: Query parameters
            headers: Extra headers for this request

        Returns:
            The response, already checked for a 2xx status

        Raises:
            FetchError: If the request fails or the status is not 2xx
        """
        self._rate_limit()
        url = self._build_url(endpoint)
        self.logger.debug(f"GET {url} params={params}")

        try:
            response = self.session.get(url, params=params, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Request to {url} failed: {e}") from e

        return response

    def _get_json(self, endpoint: str, params: Optional[Dict[str, Any]] = None,
                  headers: Optional[Dict[str, str]] = None) -> Any:
        """GET and decode a JSON body; undecodable bodies raise FetchError."""
        response = self._get(endpoint, params, headers)
        try:
            return response.json()
        except ValueError as e:
            raise FetchError(f"Invalid JSON from {response.url}: {e}") from e

    def _get_text(self, endpoint: str, params: Optional[Dict[str, Any]] = None,
                  headers: Optional[Dict[str, str]] = None) -> str:
        """GET and return the body as text."""
        return self._get(endpoint, params, headers).text

    def _polite_params(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Add the mailto parameter used by polite-pool registries."""
        params = dict(params or {})
        if self.email:
            params['mailto'] = self.email
        return params

    def close(self):
        self.session.close()
