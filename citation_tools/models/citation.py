"""
Data models for identifier classification and citation resolution.
"""
from dataclasses import dataclass, field
from typing import Optional, List
from enum import Enum


class IdentifierFormat(Enum):
    """Persistent identifier families.

    Declaration order is the resolution priority order.
    """
    ISBN = "isbn"
    ISSN = "issn"
    DOI = "doi"
    PMID = "pmid"
    PMCID = "pmcid"
    ARXIV = "arxiv"


class ResolutionFailure(Enum):
    """Why a resolution produced no citation."""
    NO_MATCH = "no_match"
    NO_PATH = "no_path"
    NO_MAPPING = "no_mapping"
    FETCH_FAILURE = "fetch_failure"


@dataclass(frozen=True)
class ResolutionPlan:
    """Fetch source and optional first-stage conversion for one format."""
    identifier_format: IdentifierFormat
    source: str
    converter: Optional[str] = None


@dataclass(frozen=True)
class CitationRecord:
    """Resolved bibliographic output handed to the caller."""
    identifier_format: IdentifierFormat
    identifier: str
    text: str
    source: str


@dataclass
class BookRecord:
    """Structured book data from the book lookup service."""
    title: Optional[str] = None
    authors: List[str] = field(default_factory=list)
    year: Optional[str] = None
    publisher: Optional[str] = None
    isbn: Optional[str] = None
    url: Optional[str] = None


@dataclass
class VenueRecord:
    """Journal/venue data from the venue lookup service."""
    name: str
    publisher: Optional[str] = None
    issn: Optional[str] = None


@dataclass
class ResolutionResult:
    """Outcome of resolving one raw identifier."""
    raw: str
    formats: List[IdentifierFormat] = field(default_factory=list)
    plan: Optional[ResolutionPlan] = None
    identifier: Optional[str] = None
    record: Optional[CitationRecord] = None
    failure: Optional[ResolutionFailure] = None

    @property
    def citation(self) -> Optional[str]:
        """Citation text, or None when any stage failed."""
        if self.record is None:
            return None
        return self.record.text

    @property
    def ok(self) -> bool:
        return self.record is not None
