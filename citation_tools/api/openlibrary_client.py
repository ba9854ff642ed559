#!/usr/bin/env python3
"""
OpenLibrary client for book lookup by ISBN.

Coverage is patchy; many ISBNs have no record. A missing record is reported
as a failed lookup.

API Documentation: https://openlibrary.org/dev/docs/api/books
No authentication required.
"""

import re
from typing import Optional, Dict, Any

from citation_tools.models.citation import BookRecord
from .base_client import BaseAPIClient, FetchError


class OpenLibraryClient(BaseAPIClient):
    """Client for the OpenLibrary books API."""

    BASE_URL = "https://openlibrary.org/api/books"

    YEAR_PATTERN = re.compile(r'\b(\d{4})\b')

    def __init__(self, timeout: float = 10.0, base_url: Optional[str] = None,
                 rate_limit_delay: float = 0.0):
        """Initialize OpenLibrary client.

        Args:
            timeout: Request timeout in seconds
            base_url: Override for the books endpoint
            rate_limit_delay: Minimum delay between requests in seconds
        """
        super().__init__(base_url or self.BASE_URL, timeout=timeout,
                         rate_limit_delay=rate_limit_delay)

    def get_book(self, isbn: str) -> BookRecord:
        """Look up a book by normalized ISBN.

        Args:
            isbn: 10 or 13 character ISBN without separators

        Returns:
            Parsed book record

        Raises:
            FetchError: If the request fails or OpenLibrary has no record
        """
        book_key = f'ISBN:{isbn}'
        params = {
            'bibkeys': book_key,
            'format': 'json',
            'jscmd': 'data'
        }

        data = self._get_json('', params=params)
        if not isinstance(data, dict) or book_key not in data:
            raise FetchError(f"OpenLibrary has no record for {isbn}")

        book_info = data[book_key]
        if not isinstance(book_info, dict):
            raise FetchError(f"Unexpected OpenLibrary record for {isbn}")

        return self._parse_book(book_info, isbn)

    @staticmethod
    def _first(values: Any) -> Any:
        """First element of a list field, or None."""
        if isinstance(values, list) and values:
            return values[0]
        return None

    @staticmethod
    def _text(value: Any) -> Optional[str]:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    def _parse_book(self, book_info: Dict[str, Any], isbn: str) -> BookRecord:
        """Parse an OpenLibrary 'data' record into a BookRecord.

        Fields of the wrong type are treated as missing.
        """
        authors = book_info.get('authors')
        authors = [self._text(author.get('name')) for author in authors
                   if isinstance(author, dict)] if isinstance(authors, list) else []
        authors = [name for name in authors if name]

        publisher = self._first(book_info.get('publishers'))
        publisher = self._text(publisher.get('name')) if isinstance(publisher, dict) else None

        year = None
        publish_date = book_info.get('publish_date')
        if isinstance(publish_date, int) and not isinstance(publish_date, bool):
            publish_date = str(publish_date)
        if isinstance(publish_date, str):
            year_match = self.YEAR_PATTERN.search(publish_date)
            if year_match:
                year = year_match.group(1)

        # Prefer the ISBN-13 variant OpenLibrary reports
        identifiers = book_info.get('identifiers')
        if not isinstance(identifiers, dict):
            identifiers = {}
        reported = (self._text(self._first(identifiers.get('isbn_13')))
                    or self._text(self._first(identifiers.get('isbn_10'))))

        return BookRecord(
            title=self._text(book_info.get('title')),
            authors=authors,
            year=year,
            publisher=publisher,
            isbn=reported or isbn,
            url=self._text(book_info.get('url')),
        )
