#!/usr/bin/env python3
"""
PubMed Central ID converter client.

Maps PubMed IDs and PubMed Central IDs to DOIs so that citations can be
fetched from the DOI registry.

API Documentation: https://pmc.ncbi.nlm.nih.gov/tools/id-converter-api/
No authentication required; NCBI asks for tool and email parameters.
"""

from typing import Optional, Dict, List, Any

from .base_client import BaseAPIClient, FetchError


class PubMedClient(BaseAPIClient):
    """Client for the PMC ID converter."""

    BASE_URL = "https://pmc.ncbi.nlm.nih.gov/tools/idconv/api/v1/articles/"

    def __init__(self, email: Optional[str] = None, tool_name: str = "citation-tools",
                 timeout: float = 10.0, base_url: Optional[str] = None,
                 rate_limit_delay: float = 0.0):
        """Initialize PubMed client.

        Args:
            email: Your email for polite usage (recommended by NCBI)
            tool_name: Tool name for API calls (required by NCBI best practices)
            timeout: Request timeout in seconds
            base_url: Override for the converter endpoint
            rate_limit_delay: Minimum delay between requests in seconds
        """
        super().__init__(base_url or self.BASE_URL, email=email, timeout=timeout,
                         rate_limit_delay=rate_limit_delay)
        self.tool_name = tool_name

    def get_records(self, identifier: str) -> List[Dict[str, Any]]:
        """Look up conversion records for a PMID or PMCID.

        Raises:
            FetchError: If the request fails or the payload has no record list
        """
        params = {
            'ids': identifier,
            'format': 'json',
        }
        if self.tool_name:
            params['tool'] = self.tool_name
        if self.email:
            params['email'] = self.email

        data = self._get_json('', params=params)
        if not isinstance(data, dict):
            raise FetchError(f"Unexpected ID converter payload for {identifier}")

        records = data.get('records', [])
        if not isinstance(records, list):
            raise FetchError(f"Unexpected ID converter records for {identifier}")
        return records

    def get_doi(self, identifier: str) -> Optional[str]:
        """Convert a PMID or PMCID to a DOI.

        Args:
            identifier: Normalized PMID ('12345678') or PMCID ('PMC1234567')

        Returns:
            DOI of the first record, or None when there is no mapping
        """
        records = self.get_records(identifier)
        if not records:
            self.logger.info(f"ID converter returned no records for {identifier}")
            return None

        first = records[0]
        doi = first.get('doi') if isinstance(first, dict) else None
        if not doi:
            self.logger.info(f"No DOI recorded for {identifier}")
            return None
        return doi

    def pmid_to_doi(self, pmid: str) -> Optional[str]:
        """Convert a PubMed ID to a DOI."""
        return self.get_doi(pmid)

    def pmcid_to_doi(self, pmcid: str) -> Optional[str]:
        """Convert a PubMed Central ID to a DOI."""
        return self.get_doi(pmcid)
