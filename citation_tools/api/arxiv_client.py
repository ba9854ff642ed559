#!/usr/bin/env python3
"""
arXiv export client for preprint citation lookup.

The export page for an arXiv ID embeds a URL-encoded BibTeX block that runs
from the entry start marker to </textarea>. The block is cut out,
percent-decoded and has its HTML entities decoded before use.

No authentication required, free to use.
"""

import html
import re
from typing import Optional
from urllib.parse import unquote

from .base_client import BaseAPIClient, FetchError


class ArxivClient(BaseAPIClient):
    """Client for the arXiv BibTeX export."""

    BASE_URL = "https://export.arxiv.org/bibtex"

    # Citation block: from the entry start marker to the closing textarea tag
    BLOCK_PATTERN = re.compile(r'((?:@|%40)[A-Za-z]+\s*(?:\{|%7B).*?)</textarea>',
                               re.DOTALL | re.IGNORECASE)
    ENTRY_START = re.compile(r'(?:@|%40)[A-Za-z]+\s*(?:\{|%7B)', re.IGNORECASE)

    def __init__(self, timeout: float = 10.0, base_url: Optional[str] = None,
                 rate_limit_delay: float = 0.0):
        """Initialize arXiv client.

        Args:
            timeout: Request timeout in seconds
            base_url: Override for the export endpoint
            rate_limit_delay: Minimum delay between requests in seconds
        """
        super().__init__(base_url or self.BASE_URL, timeout=timeout,
                         rate_limit_delay=rate_limit_delay)

    def get_bibtex(self, arxiv_id: str) -> str:
        """Get the BibTeX citation for a normalized arXiv ID.

        Args:
            arxiv_id: arXiv ID, e.g. '2008.06030' or '2008.06030v2'

        Returns:
            Decoded BibTeX entry text

        Raises:
            FetchError: If the request fails or no citation block is found
        """
        page = self._get_text(arxiv_id)
        bibtex = self.extract_citation(page)
        if bibtex is None:
            raise FetchError(f"No citation block in arXiv export for {arxiv_id}")
        return bibtex

    @classmethod
    def extract_citation(cls, page: str) -> Optional[str]:
        """Cut the citation block out of an export page and decode it.

        Args:
            page: Raw response body

        Returns:
            The decoded block, or None if the page holds no citation
        """
        match = cls.BLOCK_PATTERN.search(page)
        if match:
            block = match.group(1)
        elif cls.ENTRY_START.match(page.lstrip()):
            # Plain-text export
            block = page
        else:
            return None

        block = html.unescape(unquote(block)).strip()
        return block or None
