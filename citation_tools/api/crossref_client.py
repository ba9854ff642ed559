#!/usr/bin/env python3
"""
CrossRef API client for DOI citation lookup.

CrossRef is the official DOI registration agency. The transform endpoint
returns a ready-made BibTeX entry for a DOI.

API Documentation: https://github.com/CrossRef/rest-api-doc
No authentication required, but please add email for "polite" pool.
"""

from typing import Optional

import requests

from .base_client import BaseAPIClient, FetchError


class CrossRefClient(BaseAPIClient):
    """Client for CrossRef API."""

    BASE_URL = "https://api.crossref.org"
    BIBTEX_TRANSFORM = "transform/application/x-bibtex"

    def __init__(self, email: Optional[str] = None, timeout: float = 10.0,
                 base_url: Optional[str] = None, rate_limit_delay: float = 0.0):
        """Initialize CrossRef client.

        Args:
            email: Your email for polite pool (gets better rate limits)
            timeout: Request timeout in seconds
            base_url: Override for the API root
            rate_limit_delay: Minimum delay between requests in seconds
        """
        super().__init__(base_url or self.BASE_URL, email=email, timeout=timeout,
                         rate_limit_delay=rate_limit_delay)

    def get_bibtex(self, doi: str) -> str:
        """Get the BibTeX citation for a normalized DOI.

        Args:
            doi: DOI without prefix, e.g. '10.1038/nature12373'

        Returns:
            BibTeX entry text

        Raises:
            FetchError: If the lookup fails or returns an empty body
        """
        # DOIs from the ID converter may hold ? or #
        path_doi = requests.utils.quote(doi, safe="/:;()+")
        text = self._get_text(f"works/{path_doi}/{self.BIBTEX_TRANSFORM}",
                              params=self._polite_params())
        bibtex = text.strip()
        if not bibtex:
            raise FetchError(f"CrossRef returned an empty citation for {doi}")
        return bibtex
