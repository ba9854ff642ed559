#!/usr/bin/env python3
"""
Rendering of structured book and venue records into citation text.
"""

import re
from typing import List, Optional

from citation_tools.models.citation import BookRecord, VenueRecord


class CitationFormatter:
    """Minimal templates for records that do not come as BibTeX."""

    KEY_CLEAN_PATTERN = re.compile(r'[^a-z0-9]')

    @staticmethod
    def _last_name(author: str) -> str:
        # "Last, First" or "First Last"
        if ',' in author:
            return author.split(',')[0].strip()
        parts = author.split()
        return parts[-1] if parts else author

    @classmethod
    def citation_key(cls, book: BookRecord) -> str:
        """Build a BibTeX key: first author's last name plus year."""
        if book.authors:
            last_name = cls.KEY_CLEAN_PATTERN.sub('', cls._last_name(book.authors[0]).lower())
            if last_name:
                return f"{last_name}{book.year or ''}"
        return f"isbn{book.isbn or ''}"

    @classmethod
    def format_book_bibtex(cls, book: BookRecord) -> str:
        """Render a book record as a @book entry, skipping empty fields.

        Args:
            book: Book data from the book lookup service

        Returns:
            BibTeX entry text
        """
        fields: List[tuple] = [
            ('title', book.title),
            ('author', ' and '.join(book.authors) if book.authors else None),
            ('year', book.year),
            ('publisher', book.publisher),
            ('isbn', book.isbn),
            ('url', book.url),
        ]

        lines = [f"@book{{{cls.citation_key(book)},"]
        present = [(name, value) for name, value in fields if value]
        for index, (name, value) in enumerate(present):
            separator = ',' if index < len(present) - 1 else ''
            lines.append(f"  {name} = {{{value}}}{separator}")
        lines.append("}")
        return '\n'.join(lines)

    @staticmethod
    def format_venue(venue: VenueRecord) -> Optional[str]:
        """Render a venue as 'Name (Publisher)'."""
        if not venue.name:
            return None
        if venue.publisher:
            return f"{venue.name} ({venue.publisher})"
        return venue.name
