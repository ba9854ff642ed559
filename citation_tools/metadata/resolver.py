#!/usr/bin/env python3
"""
Resolution of classified identifiers to citations.

Each identifier format has exactly one resolution path: an optional
conversion to DOI followed by a single fetch from one registry. When a raw
string matches several formats, the first format in priority order that has
a registered path is used and the others are ignored.
"""

import logging
from typing import Callable, Dict, Iterable, Optional

from citation_tools.api.base_client import FetchError
from citation_tools.api.crossref_client import CrossRefClient
from citation_tools.api.arxiv_client import ArxivClient
from citation_tools.api.pubmed_client import PubMedClient
from citation_tools.api.openlibrary_client import OpenLibraryClient
from citation_tools.api.openalex_client import OpenAlexClient
from citation_tools.models.citation import (
    IdentifierFormat,
    ResolutionFailure,
    ResolutionPlan,
    CitationRecord,
    ResolutionResult,
)
from citation_tools.utils.citation_formatter import CitationFormatter
from citation_tools.utils.identifier_validator import classify, normalize

SOURCE_CROSSREF = 'crossref'
SOURCE_ARXIV = 'arxiv'
SOURCE_OPENLIBRARY = 'openlibrary'
SOURCE_OPENALEX = 'openalex'

CONVERTER_PMC_IDCONV = 'pmc_idconv'

RESOLUTION_PLANS: Dict[IdentifierFormat, ResolutionPlan] = {
    IdentifierFormat.ISBN: ResolutionPlan(IdentifierFormat.ISBN, SOURCE_OPENLIBRARY),
    IdentifierFormat.ISSN: ResolutionPlan(IdentifierFormat.ISSN, SOURCE_OPENALEX),
    IdentifierFormat.DOI: ResolutionPlan(IdentifierFormat.DOI, SOURCE_CROSSREF),
    IdentifierFormat.PMID: ResolutionPlan(IdentifierFormat.PMID, SOURCE_CROSSREF, CONVERTER_PMC_IDCONV),
    IdentifierFormat.PMCID: ResolutionPlan(IdentifierFormat.PMCID, SOURCE_CROSSREF, CONVERTER_PMC_IDCONV),
    IdentifierFormat.ARXIV: ResolutionPlan(IdentifierFormat.ARXIV, SOURCE_ARXIV),
}


def resolve_path(formats: Iterable[IdentifierFormat],
                 plans: Optional[Dict[IdentifierFormat, ResolutionPlan]] = None) -> Optional[ResolutionPlan]:
    """Pick the resolution plan for a set of matched formats.

    Args:
        formats: Formats the raw identifier matched, in any order
        plans: Plan table; defaults to RESOLUTION_PLANS

    Returns:
        Plan of the first format in priority order that has one, or None
    """
    if plans is None:
        plans = RESOLUTION_PLANS
    matched = set(formats)
    for identifier_format in IdentifierFormat:
        if identifier_format in matched and identifier_format in plans:
            return plans[identifier_format]
    return None


class CitationResolver:
    """Classify a raw identifier, convert if needed, and fetch its citation."""

    def __init__(self, email: Optional[str] = None, timeout: float = 10.0,
                 crossref: Optional[CrossRefClient] = None,
                 arxiv: Optional[ArxivClient] = None,
                 pubmed: Optional[PubMedClient] = None,
                 openlibrary: Optional[OpenLibraryClient] = None,
                 openalex: Optional[OpenAlexClient] = None,
                 plans: Optional[Dict[IdentifierFormat, ResolutionPlan]] = None):
        """
        Initialize resolver.

        Args:
            email: Contact address passed to polite-pool registries
            timeout: Request timeout for clients created here
            crossref, arxiv, pubmed, openlibrary, openalex: Preconfigured clients
            plans: Plan table; defaults to RESOLUTION_PLANS
        """
        self.logger = logging.getLogger(__name__)
        self.crossref = crossref or CrossRefClient(email=email, timeout=timeout)
        self.arxiv = arxiv or ArxivClient(timeout=timeout)
        self.pubmed = pubmed or PubMedClient(email=email, timeout=timeout)
        self.openlibrary = openlibrary or OpenLibraryClient(timeout=timeout)
        self.openalex = openalex or OpenAlexClient(email=email, timeout=timeout)
        self.plans = RESOLUTION_PLANS if plans is None else plans

        self._fetchers: Dict[str, Callable[[str], str]] = {
            SOURCE_CROSSREF: self.fetch_doi,
            SOURCE_ARXIV: self.fetch_arxiv,
            SOURCE_OPENLIBRARY: self.fetch_isbn,
            SOURCE_OPENALEX: self.fetch_issn,
        }
        self._converters: Dict[str, Callable[[str], Optional[str]]] = {
            CONVERTER_PMC_IDCONV: self.pubmed.get_doi,
        }

    @classmethod
    def from_config(cls, config, email: Optional[str] = None) -> 'CitationResolver':
        """Build a resolver from a ConfigManager.

        Args:
            config: ConfigManager instance
            email: Overrides the configured contact address
        """
        email = email or config.get('CONTACT', 'email', '') or None
        timeout = config.get_float('NETWORK', 'timeout', 10.0)
        delay = config.get_float('NETWORK', 'rate_limit_delay', 0.0)

        return cls(
            email=email,
            timeout=timeout,
            crossref=CrossRefClient(email=email, timeout=timeout, rate_limit_delay=delay,
                                    base_url=config.get('APIS', 'crossref_api') or None),
            arxiv=ArxivClient(timeout=timeout, rate_limit_delay=delay,
                              base_url=config.get('APIS', 'arxiv_export') or None),
            pubmed=PubMedClient(email=email, timeout=timeout, rate_limit_delay=delay,
                                tool_name=config.get('CONTACT', 'tool_name', 'citation-tools'),
                                base_url=config.get('APIS', 'pmc_idconv_api') or None),
            openlibrary=OpenLibraryClient(timeout=timeout, rate_limit_delay=delay,
                                          base_url=config.get('APIS', 'openlibrary_api') or None),
            openalex=OpenAlexClient(email=email, timeout=timeout, rate_limit_delay=delay,
                                    base_url=config.get('APIS', 'openalex_api') or None),
        )

    def resolve_path(self, formats: Iterable[IdentifierFormat]) -> Optional[ResolutionPlan]:
        return resolve_path(formats, self.plans)

    # Converters

    def pmid_to_doi(self, pmid: str) -> Optional[str]:
        """Convert a normalized PMID to a DOI; None when there is no mapping."""
        return self.pubmed.pmid_to_doi(pmid)

    def pmcid_to_doi(self, pmcid: str) -> Optional[str]:
        """Convert a normalized PMCID to a DOI; None when there is no mapping."""
        return self.pubmed.pmcid_to_doi(pmcid)

    # Fetchers

    def fetch_doi(self, doi: str) -> str:
        return self.crossref.get_bibtex(doi)

    def fetch_arxiv(self, arxiv_id: str) -> str:
        return self.arxiv.get_bibtex(arxiv_id)

    def fetch_isbn(self, isbn: str) -> str:
        book = self.openlibrary.get_book(isbn)
        return CitationFormatter.format_book_bibtex(book)

    def fetch_issn(self, issn: str) -> str:
        venue = self.openalex.get_venue(issn)
        description = CitationFormatter.format_venue(venue)
        if not description:
            raise FetchError(f"No venue description for {issn}")
        return description

    def resolve(self, raw: str) -> ResolutionResult:
        """Resolve one free-form identifier.

        Args:
            raw: Identifier as typed, e.g. 'doi:10.1038/nature12373'

        Returns:
            ResolutionResult carrying either a record or the failure kind
        """
        raw = (raw or '').strip()
        result = ResolutionResult(raw=raw)

        result.formats = classify(raw)
        if not result.formats:
            self.logger.info(f"Not a recognized identifier: {raw!r}")
            result.failure = ResolutionFailure.NO_MATCH
            return result

        result.plan = self.resolve_path(result.formats)
        if result.plan is None:
            self.logger.info(f"No resolution path for {raw!r} ({self._names(result.formats)})")
            result.failure = ResolutionFailure.NO_PATH
            return result

        plan = result.plan
        result.identifier = normalize(raw, plan.identifier_format)
        lookup_id = result.identifier

        try:
            if plan.converter:
                lookup_id = self._converters[plan.converter](result.identifier)
                if lookup_id is None:
                    result.failure = ResolutionFailure.NO_MAPPING
                    return result
                self.logger.debug(f"Converted {result.identifier} to DOI {lookup_id}")

            text = self._fetchers[plan.source](lookup_id)
        except FetchError as e:
            self.logger.warning(f"Lookup failed for {raw!r}: {e}")
            result.failure = ResolutionFailure.FETCH_FAILURE
            return result

        result.record = CitationRecord(
            identifier_format=plan.identifier_format,
            identifier=result.identifier,
            text=text,
            source=plan.source,
        )
        return result

    def resolve_citation(self, raw: str) -> Optional[str]:
        """Citation text for raw, or None if any stage failed."""
        return self.resolve(raw).citation

    def close(self):
        for client in (self.crossref, self.arxiv, self.pubmed, self.openlibrary, self.openalex):
            client.close()

    @staticmethod
    def _names(formats: Iterable[IdentifierFormat]) -> str:
        return ', '.join(fmt.name for fmt in formats)
