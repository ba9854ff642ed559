#!/usr/bin/env python3
"""
OpenAlex API client for journal (venue) lookup by ISSN.

Only the venue name and publisher are available this way, not a full
citation.

API Documentation: https://docs.openalex.org/api-entities/sources
No authentication required, but include email for polite pool.
"""

from typing import Optional

from citation_tools.models.citation import VenueRecord
from .base_client import BaseAPIClient, FetchError


class OpenAlexClient(BaseAPIClient):
    """Client for OpenAlex API."""

    BASE_URL = "https://api.openalex.org"

    def __init__(self, email: Optional[str] = None, timeout: float = 10.0,
                 base_url: Optional[str] = None, rate_limit_delay: float = 0.0):
        """Initialize OpenAlex client.

        Args:
            email: Your email for polite pool (gets better rate limits)
            timeout: Request timeout in seconds
            base_url: Override for the API root
            rate_limit_delay: Minimum delay between requests in seconds
        """
        super().__init__(base_url or self.BASE_URL, email=email, timeout=timeout,
                         rate_limit_delay=rate_limit_delay)

    def get_venue(self, issn: str) -> VenueRecord:
        """Get venue name and publisher for an ISSN.

        Args:
            issn: ISSN in NNNN-NNNC form

        Returns:
            Venue record

        Raises:
            FetchError: If the request fails or the source has no name
        """
        data = self._get_json(f"sources/issn:{issn}", params=self._polite_params())
        if not isinstance(data, dict):
            raise FetchError(f"Unexpected OpenAlex payload for {issn}")

        name = data.get('display_name')
        if not name:
            raise FetchError(f"OpenAlex source for {issn} has no display name")

        return VenueRecord(
            name=name,
            publisher=data.get('host_organization_name') or None,
            issn=issn,
        )
