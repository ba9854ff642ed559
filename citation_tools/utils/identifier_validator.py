#!/usr/bin/env python3
"""
Identifier recognition for scholarly persistent identifiers.

Recognizes ISBN, ISSN, DOI, PMID, PMCID and arXiv identifiers typed as
free-form text and normalizes them to the form the external registries
expect. Every pattern must consume the whole input: leading or trailing
garbage rejects the string. No network access happens here.
"""

import re
from typing import Callable, Dict, List, Optional

from citation_tools.models.citation import IdentifierFormat


class IdentifierValidator:
    """Full-string matchers, one per identifier family."""

    # Regex patterns (used with fullmatch)
    ISBN10_PATTERN = re.compile(
        r'(?:ISBN:?\s*)?(\d{1,5}[-\s]?\d{1,7}[-\s]?\d{1,7}[-\s]?[\dX])', re.IGNORECASE
    )
    ISBN13_PATTERN = re.compile(
        r'(?:ISBN:?\s*)?(97[89][-\s]?\d{1,5}[-\s]?\d{1,7}[-\s]?\d{1,7}[-\s]?\d)', re.IGNORECASE
    )
    ISSN_PATTERN = re.compile(r'(?:ISSN:?\s*)?(\d{4}-\d{3}[\dX])', re.IGNORECASE)
    # Covers the vast majority of Crossref DOIs, not every legal DOI
    DOI_PATTERN = re.compile(
        r'(?:doi:?\s*|https?://(?:dx\.)?doi\.org/)?(10\.\d{4,9}/[-+._;()/:A-Z0-9]+)',
        re.IGNORECASE,
    )
    PMID_PATTERN = re.compile(r'(?:PMID:?\s*)?([1-9]\d{0,7})', re.IGNORECASE)
    PMCID_PATTERN = re.compile(r'(?:PMCID:?\s*)?(PMC[1-9]\d{0,7})', re.IGNORECASE)
    # New-style (April 2007 onwards) only: YYMM.NNNN(N)[vN]
    ARXIV_PATTERN = re.compile(r'(?:arXiv:\s*)?(\d{4}\.\d{4,5}(?:v\d+)?)', re.IGNORECASE)

    SEPARATORS = re.compile(r'[-\s]')

    @classmethod
    def _strip_separators(cls, value: str) -> str:
        return cls.SEPARATORS.sub('', value).upper()

    @classmethod
    def match_isbn10(cls, raw: Optional[str]) -> Optional[str]:
        """Match an ISBN-10.

        Args:
            raw: Input string, e.g. 'ISBN: 0-13-468599-7'

        Returns:
            The 10 characters without separators, or None
        """
        if not raw:
            return None
        match = cls.ISBN10_PATTERN.fullmatch(raw)
        if not match:
            return None
        isbn = cls._strip_separators(match.group(1))
        if len(isbn) != 10:
            return None
        return isbn

    @classmethod
    def match_isbn13(cls, raw: Optional[str]) -> Optional[str]:
        """Match an ISBN-13 (978/979 EAN prefix).

        Args:
            raw: Input string, e.g. 'ISBN 978-0-13-468599-1'

        Returns:
            The 13 digits without separators, or None
        """
        if not raw:
            return None
        match = cls.ISBN13_PATTERN.fullmatch(raw)
        if not match:
            return None
        isbn = cls._strip_separators(match.group(1))
        if len(isbn) != 13:
            return None
        return isbn

    @classmethod
    def match_isbn(cls, raw: Optional[str]) -> Optional[str]:
        """Match ISBN-10 first, then ISBN-13."""
        return cls.match_isbn10(raw) or cls.match_isbn13(raw)

    @classmethod
    def match_issn(cls, raw: Optional[str]) -> Optional[str]:
        """Match an ISSN, returned as NNNN-NNNC with an upper-case X."""
        if not raw:
            return None
        match = cls.ISSN_PATTERN.fullmatch(raw)
        return match.group(1).upper() if match else None

    @classmethod
    def match_doi(cls, raw: Optional[str]) -> Optional[str]:
        """Match a DOI, bare or behind a 'doi:' or https://doi.org/ prefix."""
        if not raw:
            return None
        match = cls.DOI_PATTERN.fullmatch(raw)
        return match.group(1) if match else None

    @classmethod
    def match_pmid(cls, raw: Optional[str]) -> Optional[str]:
        """Match a PubMed ID (1-8 digits, no leading zero)."""
        if not raw:
            return None
        match = cls.PMID_PATTERN.fullmatch(raw)
        return match.group(1) if match else None

    @classmethod
    def match_pmcid(cls, raw: Optional[str]) -> Optional[str]:
        """Match a PubMed Central ID, returned as PMC + digits."""
        if not raw:
            return None
        match = cls.PMCID_PATTERN.fullmatch(raw)
        return match.group(1).upper() if match else None

    @classmethod
    def match_arxiv_id(cls, raw: Optional[str]) -> Optional[str]:
        """Match a new-style arXiv ID (legacy archive/NNNNNNN IDs are not supported)."""
        if not raw:
            return None
        match = cls.ARXIV_PATTERN.fullmatch(raw)
        return match.group(1).lower() if match else None


MATCHERS: Dict[IdentifierFormat, Callable[[Optional[str]], Optional[str]]] = {
    IdentifierFormat.ISBN: IdentifierValidator.match_isbn,
    IdentifierFormat.ISSN: IdentifierValidator.match_issn,
    IdentifierFormat.DOI: IdentifierValidator.match_doi,
    IdentifierFormat.PMID: IdentifierValidator.match_pmid,
    IdentifierFormat.PMCID: IdentifierValidator.match_pmcid,
    IdentifierFormat.ARXIV: IdentifierValidator.match_arxiv_id,
}


def normalize(raw: Optional[str], identifier_format: IdentifierFormat) -> Optional[str]:
    """Normalize raw input as the given format, or None if it does not match."""
    return MATCHERS[identifier_format](raw)


def classify(raw: Optional[str]) -> List[IdentifierFormat]:
    """Return every format whose matcher accepts raw, in priority order.

    All matchers run; an empty list means nothing matched.
    """
    return [fmt for fmt in IdentifierFormat if normalize(raw, fmt) is not None]
